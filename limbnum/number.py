"""
BigValue - an arbitrary-precision signed integer, built on 30-bit limbs.

    assert BigValue(2) ** 100 == 2 ** 100
    assert '-1267650600228229401496703205376' == str(-BigValue(2) ** 100)
    assert BigValue('0xff') == 255 == BigValue(255.0)

A BigValue is immutable.  Every operation makes a new one.

Division truncates toward zero, the way C and JavaScript do, not toward negative infinity
the way Python's // does.  So // and % are not operators here.  Use divide() and mod():

    assert BigValue(-7).divide(2) == -3
    assert BigValue(-7).mod(2) == -1
"""

from limbnum import absolute
from limbnum import compare
from limbnum import convert
from limbnum import division
from limbnum import parse
from limbnum import power
from limbnum import stringify
from limbnum.store import LimbStore


class BigValue(LimbStore):
    """
    Sign and magnitude.  The magnitude is a list of 30-bit limbs, least significant first.

    Construct from an int, an integral float, a numeric string, or another BigValue.
    """

    __slots__ = ()

    def __init__(self, content=None):
        """
        BigValue constructor.

        content - the type can be:
            int              10**100
            float            1e20           (must be integral, no NAN or infinity)
            numeric string   '-1_000'  '0x1F'  '0o17'  '0b101'
            another BigValue BigValue(42)
            None             zero
        """
        if isinstance(content, bool):
            self._from_another(convert.from_int(type(self), int(content)))
        elif isinstance(content, int):
            self._from_another(convert.from_int(type(self), content))
        elif isinstance(content, float):
            self._from_another(convert.from_double(type(self), content))
        elif isinstance(content, str):
            self._from_another(parse.parse(type(self), content))
        elif isinstance(content, LimbStore):
            self._from_another(content)
        elif content is None:
            self._limbs = []
            self._sign = False
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type(self).__name__,
                inner=type(content).__name__,
            ))

    def _from_another(self, another):
        """
        Copy constructor.

            assert BigValue(1) == BigValue(BigValue(1))
        """
        self._limbs = list(another._limbs)
        self._sign = another._sign

    @classmethod
    def from_string(cls, text, radix=0, debug=False):
        """
        Parse text.  radix=0 detects 0x 0o 0b prefixes, otherwise decimal.

        See parse.parse() for the rules.
        """
        return parse.parse(cls, text, radix, debug=debug)

    @classmethod
    def _coerce(cls, other):
        """Another BigValue, or an int made into one.  None for any other type."""
        if isinstance(other, LimbStore):
            return other
        if isinstance(other, int):
            return convert.from_int(cls, int(other))
        return None

    def _operand(self, other):
        """Like _coerce() but raise for unsupported types.  For the methods, not the operators."""
        operand = self._coerce(other)
        if operand is None:
            raise self.ConstructorTypeError("Expecting a {class_name} or an int, not a {other}".format(
                class_name=type(self).__name__,
                other=type(other).__name__,
            ))
        return operand

    def __getstate__(self):
        """For the 'pickle' package, object serialization."""
        return self._sign, list(self._limbs)

    def __setstate__(self, state):
        """For the 'pickle' package, object serialization."""
        (sign, limbs) = state
        self._sign = sign
        self._limbs = list(limbs)

    def __repr__(self):
        """Handle repr(BigValue(x))"""
        return "{class_name}('{digits}')".format(
            class_name=type(self).__name__,
            digits=self.to_string(),
        )

    def __str__(self):
        return self.to_string()

    # Arithmetic methods
    # ------------------
    def add(self, other):
        return absolute.add(self, self._operand(other))

    def subtract(self, other):
        return absolute.subtract(self, self._operand(other))

    def multiply(self, other):
        return absolute.multiply(self, self._operand(other))

    def divide(self, other):
        """Quotient, truncated toward zero."""
        return division.divide(self, self._operand(other))

    def mod(self, other):
        """Remainder, with the sign of self."""
        return division.mod(self, self._operand(other))

    def divmod(self, other):
        """(self.divide(other), self.mod(other)) but only divide once."""
        return division.divmod_(self, self._operand(other))

    def exponentiate(self, exponent):
        return power.exponentiate(self, self._operand(exponent))

    def unary_minus(self):
        return absolute.unary_minus(self)

    def compare(self, other):
        """
        -1, 0, or 1.  Or None if other is NAN.

        other - BigValue, int, or float
        """
        return compare.compare(self, other)

    # Conversions
    # -----------
    def to_string(self, radix=10, debug=False):
        return stringify.to_string(self, radix, debug=debug)

    def hex(self):
        """
        Like hex() of an int.

            assert '-0x1f' == BigValue(-31).hex()
        """
        return stringify.hex_string(self)

    def to_number(self):
        """Float, or +/- infinity beyond 60 bits.  See convert.to_number()."""
        return convert.to_number(self)

    def to_int(self):
        return convert.to_int(self)

    def is_negative(self):
        return self._sign

    # Operators
    # ---------
    def __add__(self, other):
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return absolute.add(self, operand)

    def __radd__(self, other):
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return absolute.add(operand, self)

    def __sub__(self, other):
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return absolute.subtract(self, operand)

    def __rsub__(self, other):
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return absolute.subtract(operand, self)

    def __mul__(self, other):
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return absolute.multiply(self, operand)

    def __rmul__(self, other):
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return absolute.multiply(operand, self)

    def __pow__(self, other):
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return power.exponentiate(self, operand)

    def __rpow__(self, other):
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return power.exponentiate(operand, self)

    def __neg__(self):
        return absolute.unary_minus(self)

    def __pos__(self):
        return self.copy()

    def __abs__(self):
        return self.copy(sign=False)

    # NOTE:  No __floordiv__, __mod__, __divmod__.  Python floors, BigValue truncates.

    def _compare_or_none(self, other):
        """compare(), or NotImplemented for an unsupported type."""
        if not isinstance(other, (LimbStore, int, float)):
            return NotImplemented
        return compare.compare(self, other)

    def __eq__(self, other):
        result = self._compare_or_none(other)
        if result is NotImplemented:
            return NotImplemented
        return result == 0

    def __ne__(self, other):
        result = self._compare_or_none(other)
        if result is NotImplemented:
            return NotImplemented
        return result != 0

    # NOTE:  An unordered result (None, from NAN) makes every ordering False, like float('nan').
    def __lt__(self, other):
        result = self._compare_or_none(other)
        if result is NotImplemented:
            return NotImplemented
        return result is not None and result < 0

    def __le__(self, other):
        result = self._compare_or_none(other)
        if result is NotImplemented:
            return NotImplemented
        return result is not None and result <= 0

    def __gt__(self, other):
        result = self._compare_or_none(other)
        if result is NotImplemented:
            return NotImplemented
        return result is not None and result > 0

    def __ge__(self, other):
        result = self._compare_or_none(other)
        if result is NotImplemented:
            return NotImplemented
        return result is not None and result >= 0

    def __hash__(self):
        """Same as the hash of the equal int, so BigValue(1) and 1 are the same dict key."""
        return hash(self.to_int())

    def __int__(self):
        return self.to_int()

    def __index__(self):
        return self.to_int()

    def __float__(self):
        return self.to_number()

    def __bool__(self):
        return len(self._limbs) != 0
