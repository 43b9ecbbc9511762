"""
Three-way comparison of a BigValue against a BigValue, an int, or a float.

Returns -1, 0, or 1.  Comparing against NAN returns None, meaning unordered.
Floats are compared exactly, from their IEEE-754 bits, never by converting either side.

    compare(BigValue(2**53 + 1), float(2**53)) == 1
    compare(BigValue(3), 3.5) == -1
"""

import math

from limbnum import absolute
from limbnum import bits
from limbnum import convert
from limbnum.store import LimbStore


def _unequal_sign(left_negative):
    return -1 if left_negative else 1


def _absolute_greater(both_negative):
    return -1 if both_negative else 1


def _absolute_less(both_negative):
    return 1 if both_negative else -1


def compare(x, y):
    if isinstance(y, LimbStore):
        return compare_to_big(x, y)
    if isinstance(y, int):
        return compare_to_int(x, int(y))
    if isinstance(y, float):
        return compare_to_double(x, y)
    raise x.ConstructorTypeError("Cannot compare {class_name} to a {other}".format(
        class_name=type(x).__name__,
        other=type(y).__name__,
    ))


def compare_to_big(x, y):
    x_sign = x.sign
    if x_sign != y.sign:
        return _unequal_sign(x_sign)
    result = absolute.absolute_compare(x, y)
    if result > 0:
        return _absolute_greater(x_sign)
    if result < 0:
        return _absolute_less(x_sign)
    return 0


def compare_to_int(x, y):
    """One-limb ints skip the conversion."""
    if abs(y) > LimbStore.LIMB_MASK:
        return compare_to_big(x, convert.from_int(type(x), y))
    x_sign = x.sign
    y_sign = y < 0
    if x_sign != y_sign:
        return _unequal_sign(x_sign)
    if x.length == 0:
        return 0 if y == 0 else -1
    if x.length > 1:
        return _absolute_greater(x_sign)
    y_abs = abs(y)
    x_digit = x.unsigned_limb_at(0)
    if x_digit > y_abs:
        return _absolute_greater(x_sign)
    if x_digit < y_abs:
        return _absolute_less(x_sign)
    return 0


def compare_to_double(x, y):
    if math.isnan(y):
        return None
    if y == float('+inf'):
        return -1
    if y == float('-inf'):
        return 1
    if y == 0.0:
        if x.length == 0:
            return 0
        return _unequal_sign(x.sign)
    x_sign = x.sign
    y_sign = y < 0.0
    if x_sign != y_sign:
        return _unequal_sign(x_sign)
    if x.length == 0:
        return -1
    (_, raw_exponent, mantissa_high, mantissa_low) = bits.decompose_double(y)
    if raw_exponent == bits.EXPONENT_SPECIAL:
        raise LimbStore.InternalInvariantViolation("implementation bug:  infinity or NAN got past the checks")
    exponent = raw_exponent - bits.EXPONENT_BIAS
    if exponent < 0:
        # |y| < 1, and x is not zero.
        return _absolute_greater(x_sign)

    x_length = x.length
    x_msd = x.unsigned_limb_at(x_length - 1)
    msd_leading_zeros = bits.clz30(x_msd)
    x_bit_length = x_length * 30 - msd_leading_zeros
    y_bit_length = exponent + 1
    if x_bit_length < y_bit_length:
        return _absolute_less(x_sign)
    if x_bit_length > y_bit_length:
        return _absolute_greater(x_sign)

    # Same sign, same bit length.  Shift the mantissa to line up with the limbs, compare limb by limb.
    msd_top_bit = 29 - msd_leading_zeros
    remaining_mantissa_bits = 0
    if msd_top_bit < bits.MANTISSA_HIGH_TOP_BIT:
        shift = bits.MANTISSA_HIGH_TOP_BIT - msd_top_bit
        remaining_mantissa_bits = shift + 32
        compare_mantissa = mantissa_high >> shift
        mantissa_high = bits.u32(mantissa_high << (32 - shift)) | (mantissa_low >> shift)
        mantissa_low = bits.u32(mantissa_low << (32 - shift))
    elif msd_top_bit == bits.MANTISSA_HIGH_TOP_BIT:
        remaining_mantissa_bits = 32
        compare_mantissa = mantissa_high
        mantissa_high = mantissa_low
        mantissa_low = 0
    else:
        shift = msd_top_bit - bits.MANTISSA_HIGH_TOP_BIT
        remaining_mantissa_bits = 32 - shift
        compare_mantissa = bits.u32(mantissa_high << shift) | (mantissa_low >> (32 - shift))
        mantissa_high = bits.u32(mantissa_low << shift)
        mantissa_low = 0
    if x_msd > compare_mantissa:
        return _absolute_greater(x_sign)
    if x_msd < compare_mantissa:
        return _absolute_less(x_sign)

    for limb_index in range(x_length - 2, -1, -1):
        if remaining_mantissa_bits > 0:
            remaining_mantissa_bits -= 30
            compare_mantissa = mantissa_high >> 2
            mantissa_high = bits.u32(mantissa_high << 30) | (mantissa_low >> 2)
            mantissa_low = bits.u32(mantissa_low << 30)
        else:
            compare_mantissa = 0
        digit = x.unsigned_limb_at(limb_index)
        if digit > compare_mantissa:
            return _absolute_greater(x_sign)
        if digit < compare_mantissa:
            return _absolute_less(x_sign)

    # Integer parts are equal.  Any mantissa bits left over are a fractional part of y.
    if mantissa_high != 0 or mantissa_low != 0:
        return _absolute_less(x_sign)
    return 0
