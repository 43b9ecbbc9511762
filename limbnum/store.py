"""
Limb store - the sign-magnitude representation underneath every BigValue.

A magnitude is a list of limbs, least significant first.
Each limb is a Python int holding 30 bits, 0 to 0x3FFFFFFF.
Think of each limb as a 32-bit slot whose top 2 bits stay zero,
so a sum of two limbs (plus carry) never needs more than 31 bits.

    limbs [0x00000005, 0x00000001] is 1 * 2**30 + 5 == 1073741829

A half-digit is a 15-bit half of a limb.  Multiply and divide work on half-digits
so every partial product fits in 30 bits.

    half-digit 0 is limb 0 bits 0-14
    half-digit 1 is limb 0 bits 15-29
    half-digit 2 is limb 1 bits 0-14
    ...
"""

from limbnum import bits


class LimbStore:
    """
    Sign and limbs.  The normalized form never has a zero top limb.

    Zero is the empty limb list, and its sign is always False.

    Algorithms allocate a store of exactly the size they need,
    fill it, then trim() it.  Nothing resizes in between.
    """

    __slots__ = ('_limbs', '_sign')

    LIMB_BITS = 30
    LIMB_MASK = 0x3FFFFFFF
    HALF_DIGIT_BITS = 15
    HALF_DIGIT_MASK = 0x7FFF

    MAX_LENGTH = 1 << 25   # limbs
    MAX_LENGTH_BITS = MAX_LENGTH * LIMB_BITS

    class ConversionError(ValueError):
        """e.g. BigValue(1.5) or BigValue(float('nan'))"""

    class ConstructorTypeError(ConversionError, TypeError):
        """e.g. BigValue(object()) or BigValue([])"""

    class ParseError(ValueError):
        """e.g. BigValue('x123') or BigValue('-0x1')"""

    class DivisionByZero(ZeroDivisionError):
        """e.g. BigValue(1).divide(BigValue(0))"""

    class InvalidExponent(ValueError):
        """e.g. BigValue(2) ** -1"""

    class ResultTooLarge(OverflowError):
        """e.g. BigValue(3) ** (2**40), or a buffer of more than MAX_LENGTH limbs"""

    class InternalInvariantViolation(AssertionError):
        """A carry or borrow escaped its buffer.  Always a sizing bug, never bad input."""

    @classmethod
    def allocate(cls, length, sign=False):
        """
        Make a zero-filled store of exactly length limbs.

        The instance is of the calling class, so allocating from a BigValue makes a BigValue.
        It skips __init__() because callers fill in the limbs themselves.
        """
        if length > cls.MAX_LENGTH:
            raise cls.ResultTooLarge("{length} limbs is more than the maximum {max}".format(
                length=length,
                max=cls.MAX_LENGTH,
            ))
        store = object.__new__(cls)
        store._limbs = [0] * length
        store._sign = bool(sign)
        return store

    @classmethod
    def zero(cls):
        return cls.allocate(0, False)

    @classmethod
    def one_limb(cls, value, sign=False):
        """A single-limb value.  Caller guarantees 0 < value <= LIMB_MASK."""
        store = cls.allocate(1, sign)
        store._limbs[0] = value
        return store

    @property
    def sign(self):
        """True iff negative."""
        return self._sign

    @property
    def length(self):
        """Number of limbs."""
        return len(self._limbs)

    def limb_at(self, i):
        return self._limbs[i]

    def unsigned_limb_at(self, i):
        """
        The limb, zero-extended.

        Python ints have no sign bit to smear, so this is the limb itself.
        Kept distinct from limb_at() so the comparisons that need an unsigned view say so.
        """
        return self._limbs[i] & 0xFFFFFFFF

    def set_limb(self, i, value):
        self._limbs[i] = value & 0xFFFFFFFF

    def half_digit_at(self, i):
        return (self._limbs[i >> 1] >> ((i & 1) * self.HALF_DIGIT_BITS)) & self.HALF_DIGIT_MASK

    def set_half_digit(self, i, value):
        """Set one 15-bit half of a limb, leaving the other half alone."""
        limb_index = i >> 1
        previous = self._limbs[limb_index]
        if i & 1:
            updated = (previous & self.HALF_DIGIT_MASK) | ((value & self.HALF_DIGIT_MASK) << self.HALF_DIGIT_BITS)
        else:
            updated = (previous & (self.LIMB_MASK ^ self.HALF_DIGIT_MASK)) | (value & self.HALF_DIGIT_MASK)
        self._limbs[limb_index] = updated

    def half_digit_length(self):
        """Number of half-digits, not counting an empty top half of the top limb."""
        length = len(self._limbs)
        if self.unsigned_limb_at(length - 1) <= self.HALF_DIGIT_MASK:
            return length * 2 - 1
        return length * 2

    def clz_msl(self):
        """Leading zero bits of the most significant limb, counting within 30 bits."""
        return bits.clz30(self._limbs[-1])

    def bit_length(self):
        """Bits in the magnitude.  Zero has zero bits."""
        length = len(self._limbs)
        if length == 0:
            return 0
        return length * self.LIMB_BITS - self.clz_msl()

    def is_zero(self):
        return len(self._limbs) == 0

    def trim(self):
        """
        Drop zero limbs from the top.  An empty result becomes positive zero.

        Returns self, so the last line of most algorithms is return result.trim()
        """
        limbs = self._limbs
        while limbs and limbs[-1] == 0:
            limbs.pop()
        if not limbs:
            self._sign = False
        return self

    def copy(self, sign=None):
        """Independent copy.  Optionally with a different sign."""
        store = object.__new__(type(self))
        store._limbs = list(self._limbs)
        store._sign = self._sign if sign is None else bool(sign)
        return store

    def debug_string(self):
        """
        Raw limbs for debugging, least significant first.

        assert 'BigValue[5, 1, ]' == BigValue(1073741829).debug_string()
        """
        parts = [type(self).__name__, '[']
        for limb in self._limbs:
            parts.append(str(limb))
            parts.append(', ')
        parts.append(']')
        return ''.join(parts)

    # Half-digit helpers used by Algorithm D
    # --------------------------------------
    def inplace_add(self, summand, start_index, half_digits):
        """
        Add the low half_digits half-digits of summand into self, at half-digit start_index.

        Return the carry out of the top half-digit (0 or 1).
        """
        carry = 0
        for i in range(half_digits):
            total = self.half_digit_at(start_index + i) + summand.half_digit_at(i) + carry
            carry = total >> 15
            self.set_half_digit(start_index + i, total & 0x7FFF)
        return carry

    def inplace_sub(self, subtrahend, start_index, half_digits):
        """
        Subtract the low half_digits half-digits of subtrahend from self, at half-digit start_index.

        Return the borrow out of the top half-digit (0 or 1).
        """
        if start_index + half_digits > 2 * len(self._limbs):
            raise IndexError("out of bounds:  half-digits {start}+{count} of {limbs} limbs".format(
                start=start_index,
                count=half_digits,
                limbs=len(self._limbs),
            ))
        borrow = 0
        for i in range(half_digits):
            difference = self.half_digit_at(start_index + i) - subtrahend.half_digit_at(i) - borrow
            borrow = (difference >> 15) & 1
            self.set_half_digit(start_index + i, difference & 0x7FFF)
        return borrow

    def inplace_right_shift(self, shift):
        """Shift the whole magnitude right by 0-29 bits."""
        if shift == 0:
            return
        limbs = self._limbs
        carry = limbs[0] >> shift
        last = len(limbs) - 1
        for i in range(last):
            d = limbs[i + 1]
            limbs[i] = ((d << (30 - shift)) & 0x3FFFFFFF) | carry
            carry = d >> shift
        limbs[last] = carry
