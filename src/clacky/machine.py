from inspect import signature as getsignature, Parameter
import logging
import sys

from .lexer import Lexer
from .rational import Rational
from .stack import Stack
from .storage import InMemoryStorage
from .util import EmptyStack, InvalidFormat, IndexOutOfRange


logger = logging.getLogger(__name__)


class Machine:
    '''
    Exact arithmetic stack machine (RPN calculator).

    Takes lexemes and runs them against its own stack. Numbers are pushed,
    words are looked up and run.

    Arithmetic pops its operands before computing: if the computation fails
    (e.g., 5 0 /), the operands are gone. If there are too few operands,
    nothing is popped.
    '''

    # Arithmetic on the items of the stack, by arity. The first popped
    # element is the rightmost argument: 9 2 / is 9/2.
    BUILTINS = {
        '+': Rational.add,
        '-': Rational.subtract,
        '*': Rational.multiply,
        '/': Rational.divide,
        'neg': Rational.negate,
        'abs': Rational.__abs__,
        'inv': Rational.reciprocal,
    }

    def __init__(self, storage=None):
        '''
        Create empty stack machine.

        :param storage: Register store for sto/rcl. In memory by default.
        '''
        self.stack = Stack()
        self.storage = storage if storage is not None else InMemoryStorage()
        self.lexer = Lexer()

    def run(self, line):
        '''
        Feed all lexemes of line to the machine.

        Stops on the first error. Words before it keep their effect.
        '''
        for match in self.lexer.lex(line):
            if self.lexer.isfeedable(match):
                self.feed(self.lexer.matchedgroups(match))

    def feed(self, groups):
        '''
        Stack or run lexeme on machine.

        :param groups: Matched lexeme groups, as returned by the lexer.
        '''
        logger.debug('Feeding %r', groups)
        parsed = self.parse(groups)
        if isinstance(parsed, Rational):
            self.stack.push(parsed)
        else:
            self._apply(parsed)

    def parse(self, groups):
        '''
        Parse lexeme groups into a Rational or a callable.

        :raises InvalidFormat: Unknown word.
        '''
        if 'number' in groups:
            return Rational.parse(groups['number'])
        word = groups['word']
        ref = type(self).OPERATORS.get(word)
        if ref is None:
            # Not ours. Let the literal parser say why it's no number.
            return Rational.parse(word)
        return ref

    def _arity(self, f):
        '''
        Return number of non-default positional arguments, if callable.

        Machine functions take their own arguments off the stack, so have none.
        '''
        if not callable(f):
            return None
        if f in type(self).FUNCTIONS.values():
            return 0
        parameters = getsignature(f).parameters.values()
        positionals = [parameter
                       for parameter
                       in parameters
                       if parameter.kind == Parameter.POSITIONAL_OR_KEYWORD and
                          parameter.default == Parameter.empty]
        return len(positionals)

    def _apply(self, parsed):
        '''
        Apply callable to stack, popping arguments as needed.
        '''
        if parsed in type(self).FUNCTIONS.values():
            return parsed(self)
        # If you don't reverse, you'll do 2/9 when you say 9 2 / instead of
        # 9/2.
        args = reversed(self.stack.popn(self._arity(parsed)))
        res = parsed(*args)
        if res is not None:
            self.stack.push(res)

    def _peekcount(self, level=0):
        '''
        Return the non-negative integer at level, leaving it on the stack.
        '''
        if len(self.stack) <= level:
            raise EmptyStack('Less than {} element(s) on stack'
                             .format(level + 1))
        count = self.stack[level]
        if not count.is_integer():
            raise InvalidFormat('Expected an integer, got {}'.format(count))
        if count < 0:
            raise IndexOutOfRange('Expected a non-negative integer, got {}'
                                  .format(count))
        return int(count)

    def _popcount(self):
        count = self._peekcount()
        self.stack.pop()
        return count

    def dup(self):
        '''
        Duplicate element at top of stack.
        '''
        self.stack.dup()

    def dupn(self):
        '''
        Duplicate n elements below n, keeping their order.
        '''
        self.stack.dupn(self._popcount())

    def pick(self):
        '''
        Copy level n (counted below n) to the top.
        '''
        self.stack.pick(self._popcount())

    def roll(self):
        '''
        Move level n (counted below n) to the top.
        '''
        self.stack.roll_up(self._popcount())

    def rolld(self):
        '''
        Move the element below n down to level n.
        '''
        self.stack.roll_down(self._popcount())

    def drop(self):
        '''
        Discard top of stack.
        '''
        self.stack.drop()

    def dropn(self):
        '''
        Discard n elements below n.
        '''
        count = self._peekcount()
        if len(self.stack) - 1 < count:
            raise EmptyStack('Less than {} element(s) on stack'
                             .format(count + 1))
        self.stack.pop()
        self.stack.dropn(count)

    def swap(self):
        '''
        Swap two elements at top of stack.
        '''
        self.stack.swap()

    def rot(self):
        '''
        Bring third element to the top.
        '''
        self.stack.rot()

    def clear(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()

    def store(self):
        '''
        Store value into register: value register sto.
        '''
        register = self._peekcount_or_negative()
        if len(self.stack) < 2:
            raise EmptyStack('Less than 2 element(s) on stack')
        self.storage.store(self.stack[1], register)
        self.stack.popn(2)

    def recall(self):
        '''
        Replace register number at top of stack by register contents.
        '''
        value = self.storage.recall(self._peekcount_or_negative())
        self.stack.pop()
        self.stack.push(value)

    def registers(self):
        '''
        Push number of registers in use.
        '''
        self.stack.push(Rational(self.storage.register_count()))

    def _peekcount_or_negative(self):
        '''
        Like _peekcount, but leave negative numbers for storage to reject.
        '''
        if not self.stack.size():
            raise EmptyStack('Less than 1 element(s) on stack')
        register = self.stack[0]
        if not register.is_integer():
            raise InvalidFormat('Expected an integer register, got {}'
                                .format(register))
        return int(register)

    def printhelp(self):
        '''
        Print all possible commands.
        '''
        print('operators:', *sorted(type(self).BUILTINS), file=sys.stderr)
        print('functions:', *sorted(type(self).FUNCTIONS), file=sys.stderr)

    # Language mapping to stack operations.
    FUNCTIONS = {
        'dup': dup,
        'dupn': dupn,
        'pick': pick,
        'roll': roll,
        'rolld': rolld,
        'drop': drop,
        'dropn': dropn,
        'swap': swap,
        'rot': rot,
        'clear': clear,
        'sto': store,
        'rcl': recall,
        'regs': registers,
        'help': printhelp,
    }

    # All words, whether arithmetic or stack functions.
    OPERATORS = dict()
    for namespace in BUILTINS, FUNCTIONS:
        OPERATORS.update(namespace)
    del namespace
