"""
limbnum - Arbitrary-precision signed integers on 30-bit limbs.

Usage example:

    import limbnum

    fact = limbnum.BigValue(1)
    for i in range(1, 21):
        fact = fact * i
    assert str(fact) == '2432902008176640000'

Usage example, with the function-style interface:

    from limbnum import create, multiply, to_string

    x = create('0xFFFFFFFFFFFFFFFF')
    assert to_string(multiply(x, x)) == '340282366920938463426481119284349108225'
"""

from .number import BigValue
from .store import LimbStore

__all__ = [
    'BigValue',
    'LimbStore',
    'create',
    'add',
    'subtract',
    'multiply',
    'divide',
    'mod',
    'exponentiate',
    'compare',
    'unary_minus',
    'to_string',
    'to_number',
    'parse',
]

from . import version
__version__ = version.__doc__


def create(content):
    """BigValue from an int, an integral float, a numeric string, or another BigValue."""
    return BigValue(content)


def add(x, y):
    return BigValue(x).add(y)


def subtract(x, y):
    return BigValue(x).subtract(y)


def multiply(x, y):
    return BigValue(x).multiply(y)


def divide(x, y):
    """Truncates toward zero.  Raises BigValue.DivisionByZero."""
    return BigValue(x).divide(y)


def mod(x, y):
    """Remainder with the sign of x."""
    return BigValue(x).mod(y)


def exponentiate(x, y):
    return BigValue(x).exponentiate(y)


def compare(x, y):
    """-1, 0, 1, or None if y is NAN."""
    return BigValue(x).compare(y)


def unary_minus(x):
    return BigValue(x).unary_minus()


def to_string(x, radix=10):
    return BigValue(x).to_string(radix)


def to_number(x):
    return BigValue(x).to_number()


def parse(text, radix=0):
    return BigValue.from_string(text, radix)
