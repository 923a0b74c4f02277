'''
Exact rational numbers.

Values are always kept reduced, with the sign carried on the numerator, so
that equality, hashing, ordering and display never need to normalize again.
'''

from math import gcd

import regex

from .util import DivisionByZero, InvalidFormat


class Rational:
    '''
    Immutable fraction of two unbounded integers.

    >>> Rational(2, -4)
    Rational(-1, 2)
    >>> str(Rational('6 / 3'))
    '2'
    '''

    # N or N/D, whitespace allowed around the slash and at either end.
    LITERAL = regex.compile(r'''
                            \s*
                            (?<numerator>-?\d+)
                            (?:
                                \s*/\s*
                                (?<denominator>-?\d+)
                            )?
                            \s*
                            ''', flags=regex.VERBOSE)

    __slots__ = ('_n', '_d')

    def __init__(self, numerator=0, denominator=1):
        '''
        Create reduced fraction numerator/denominator.

        :param numerator: int, or the text of a literal if denominator is
                          left out.
        :raises DivisionByZero: denominator is zero.
        :raises InvalidFormat: text is not a literal.
        '''
        if isinstance(numerator, str):
            if denominator != 1:
                raise TypeError('Text literal takes no denominator')
            numerator, denominator = type(self)._split(numerator)
        if not isinstance(numerator, int) or \
           not isinstance(denominator, int):
            raise TypeError('Rational needs integers, got {!r}/{!r}'
                            .format(numerator, denominator))
        if denominator == 0:
            raise DivisionByZero('zero denominator')
        divisor = gcd(numerator, denominator)
        if denominator < 0:
            divisor = -divisor
        object.__setattr__(self, '_n', numerator // divisor)
        object.__setattr__(self, '_d', denominator // divisor)

    @classmethod
    def _split(cls, text):
        match = cls.LITERAL.fullmatch(text)
        if match is None:
            raise InvalidFormat('Not a number: {!r}'.format(text))
        denominator = match.group('denominator')
        return (int(match.group('numerator')),
                1 if denominator is None else int(denominator))

    @classmethod
    def parse(cls, text):
        '''
        Parse "N" or "N/D".
        '''
        return cls(*cls._split(text))

    def __setattr__(self, name, value):
        raise AttributeError('Rational is immutable')

    def __delattr__(self, name):
        raise AttributeError('Rational is immutable')

    def __reduce__(self):
        return type(self), (self._n, self._d)

    @property
    def numerator(self):
        return self._n

    @property
    def denominator(self):
        '''
        Always positive.
        '''
        return self._d

    def is_integer(self):
        return self._d == 1

    @staticmethod
    def _coerce(other):
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return Rational(other)
        return NotImplemented

    def add(self, other):
        return Rational(self._n * other._d + other._n * self._d,
                        self._d * other._d)

    def subtract(self, other):
        return Rational(self._n * other._d - other._n * self._d,
                        self._d * other._d)

    def multiply(self, other):
        return Rational(self._n * other._n, self._d * other._d)

    def divide(self, other):
        '''
        :raises DivisionByZero: other is zero.
        '''
        return Rational(self._n * other._d, self._d * other._n)

    def negate(self):
        return Rational(-self._n, self._d)

    def reciprocal(self):
        return ONE.divide(self)

    def compare(self, other):
        '''
        Return -1, 0 or 1 as self is less than, equal to or greater than other.

        Cross-multiplying is only sound because both denominators are positive.
        '''
        left = self._n * other._d
        right = other._n * self._d
        return (left > right) - (left < right)

    def _binary(method):
        def operator(self, other):
            other = self._coerce(other)
            if other is NotImplemented:
                return other
            return method(self, other)
        operator.__name__ = method.__name__
        return operator

    def _reflected(method):
        def operator(self, other):
            other = self._coerce(other)
            if other is NotImplemented:
                return other
            return method(other, self)
        operator.__name__ = method.__name__
        return operator

    __add__ = _binary(add)
    __radd__ = _reflected(add)
    __sub__ = _binary(subtract)
    __rsub__ = _reflected(subtract)
    __mul__ = _binary(multiply)
    __rmul__ = _reflected(multiply)
    __truediv__ = _binary(divide)
    __rtruediv__ = _reflected(divide)

    __lt__ = _binary(lambda self, other: self.compare(other) < 0)
    __le__ = _binary(lambda self, other: self.compare(other) <= 0)
    __gt__ = _binary(lambda self, other: self.compare(other) > 0)
    __ge__ = _binary(lambda self, other: self.compare(other) >= 0)

    del _binary, _reflected

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return Rational(abs(self._n), self._d)

    def __int__(self):
        # Truncates toward zero, like int(float).
        quotient = abs(self._n) // self._d
        return -quotient if self._n < 0 else quotient

    def __bool__(self):
        return self._n != 0

    def __eq__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._n == other._n and self._d == other._d

    def __hash__(self):
        # Integral values must hash like the int they equal.
        if self._d == 1:
            return hash(self._n)
        return hash((self._n, self._d))

    def __str__(self):
        if self._d == 1:
            return str(self._n)
        return '{}/{}'.format(self._n, self._d)

    def __repr__(self):
        return '{}({}, {})'.format(type(self).__name__, self._n, self._d)


ZERO = Rational(0, 1)
ONE = Rational(1, 1)
