'''
Exact rational RPN calculator.

Numbers are fractions of unbounded integers, always in lowest terms; there is
no floating point anywhere. The stack is addressed by level, 0 being the top,
and the usual HP-style stack words (dup, dupn, pick, roll, rolld, ...) pad the
bottom of the stack with zeros when asked for levels it doesn't have.

    > 1/2 1/3 +
     0: 5/6
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine
from .rational import Rational, ZERO, ONE
from .stack import Stack
from .storage import Storage, InMemoryStorage, OnDiskStorage


__all__ = ('Rational', 'ZERO', 'ONE', 'Stack', 'Storage', 'InMemoryStorage',
           'OnDiskStorage', 'Machine', 'Lexer', 'CLI')
