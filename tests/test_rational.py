'''
Rational number tests
'''

from math import gcd
import pickle

from clacky.rational import Rational, ZERO, ONE
from clacky.util import ClackyError, DivisionByZero, InvalidFormat

from pytest import mark, raises


@mark.parametrize('n,d', [(2, 4), (-2, 4), (2, -4), (-2, -4), (0, -7),
                          (12, 1), (10**40, 6 * 10**39), (7, 13)])
def test_reduced(n, d):
    r = Rational(n, d)
    assert r.denominator > 0
    assert gcd(abs(r.numerator), r.denominator) == 1
    assert r.numerator * d == n * r.denominator


def test_sign_on_numerator():
    assert Rational(2, -4) == Rational(-1, 2)
    assert Rational(-2, -4) == Rational(1, 2)
    assert (Rational(3, -9).numerator, Rational(3, -9).denominator) == (-1, 3)


def test_zero_is_canonical():
    assert (Rational(0, -5).numerator, Rational(0, -5).denominator) == (0, 1)
    assert Rational(0, 3) == ZERO


def test_zero_denominator():
    with raises(DivisionByZero, match='zero denominator'):
        Rational(1, 0)
    with raises(ZeroDivisionError):
        Rational(0, 0)


def test_not_integers():
    with raises(TypeError):
        Rational(1.5, 2)


def test_parse():
    assert Rational.parse('3') == Rational(3, 1)
    assert Rational.parse('-6/8') == Rational(-3, 4)
    assert Rational.parse(' 6 / -8 ') == Rational(-3, 4)
    assert Rational('1/2') == Rational(1, 2)


@mark.parametrize('text', ['', 'abc', '1.5', '1/', '/2', '1/2/3', '+3',
                           '- 3', '0x10', '1e3'])
def test_parse_invalid(text):
    with raises(InvalidFormat):
        Rational.parse(text)


def test_parse_zero_denominator():
    with raises(DivisionByZero):
        Rational.parse('3/0')


def test_parse_huge():
    text = '1' * 60 + '/' + '3' * 60
    r = Rational.parse(text)
    # 11...1 / 33...3 is 1/3, however many digits.
    assert r == Rational(1, 3)
    assert str(r) == '1/3'


def test_display():
    assert str(Rational(2, 4)) == '1/2'
    assert str(Rational(3, 1)) == '3'
    assert str(Rational(-6, 4)) == '-3/2'
    assert repr(Rational(-6, 4)) == 'Rational(-3, 2)'


@mark.parametrize('r', [Rational(0), Rational(5), Rational(-5, 3),
                        Rational(10**30 + 1, 10**29)])
def test_display_round_trip(r):
    assert Rational.parse(str(r)) == r


def test_arithmetic():
    assert Rational(1, 2).add(Rational(1, 3)) == Rational(5, 6)
    assert Rational(1, 2).subtract(Rational(1, 3)) == Rational(1, 6)
    assert Rational(1, 3).subtract(Rational(1, 2)) == Rational(-1, 6)
    assert Rational(2, 3).multiply(Rational(3, 4)) == Rational(1, 2)
    assert Rational(2, 3).divide(Rational(-4, 9)) == Rational(-3, 2)


def test_operators():
    assert Rational(1, 2) + Rational(1, 2) == ONE
    assert Rational(1, 2) - 1 == Rational(-1, 2)
    assert 1 - Rational(1, 4) == Rational(3, 4)
    assert 3 * Rational(1, 3) == ONE
    assert 1 / Rational(1, 3) == Rational(3)
    assert -Rational(1, 2) == Rational(-1, 2)
    assert abs(Rational(-1, 2)) == Rational(1, 2)


def test_operands_untouched():
    a, b = Rational(1, 2), Rational(1, 3)
    a.add(b)
    a.divide(b)
    assert (a, b) == (Rational(1, 2), Rational(1, 3))


def test_immutable():
    r = Rational(1, 2)
    with raises(AttributeError):
        r._n = 3
    with raises(AttributeError):
        r.numerator = 3


def test_divide_by_zero():
    with raises(DivisionByZero):
        Rational(5).divide(ZERO)
    with raises(DivisionByZero):
        ZERO.divide(ZERO)
    with raises(DivisionByZero):
        ZERO.reciprocal()


def test_division_by_zero_is_clacky_error():
    with raises(ClackyError):
        Rational(1, 2) / 0


VALUES = [Rational(-3, 2), Rational(-1), ZERO, Rational(1, 3),
          Rational(1, 2), Rational(2, 4), ONE, Rational(10**20, 3)]


@mark.parametrize('a', VALUES)
@mark.parametrize('b', VALUES)
def test_total_order(a, b):
    assert [a < b, a == b, a > b].count(True) == 1
    difference = a.subtract(b)
    assert a.compare(b) == (difference > 0) - (difference < 0)
    assert (a <= b) == (a.compare(b) <= 0)
    assert (a >= b) == (a.compare(b) >= 0)


def test_hash_agrees_with_equality():
    assert hash(Rational(2, 4)) == hash(Rational(1, 2))
    assert len({Rational(2, 4), Rational(1, 2), Rational(-1, -2)}) == 1


def test_compare_with_other_types():
    assert Rational(1, 2) != 'a'
    assert Rational(2) == 2
    with raises(TypeError):
        Rational(1, 2) < 'a'


def test_int():
    assert int(Rational(7, 2)) == 3
    assert int(Rational(-7, 2)) == -3
    assert Rational(4, 2).is_integer()
    assert not Rational(1, 2).is_integer()


def test_pickle():
    r = Rational(-5, 7)
    assert pickle.loads(pickle.dumps(r)) == r


def test_integral_hash_matches_int():
    assert hash(Rational(2)) == hash(2)
    assert hash(Rational(-6, 3)) == hash(-2)
    assert len({2, Rational(2), Rational(4, 2)}) == 1
    assert {Rational(3): 'three'}[3] == 'three'
