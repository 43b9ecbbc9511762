"""
Conversions between limbs and native Python numbers.

int   --> limbs   exact, any size
float --> limbs   exact, integral floats only, built straight from the IEEE-754 bits
limbs --> float   exact up to one limb, one rounding for two limbs, infinity beyond that
limbs --> int     exact
"""

import math

from limbnum import bits


TWO_TO_THE_30 = 1073741824.0


def from_int(cls, i):
    """Construct a cls instance from a native int, 30 bits at a time."""
    if i == 0:
        return cls.zero()
    sign = i < 0
    magnitude = -i if sign else i
    if magnitude <= cls.LIMB_MASK:
        return cls.one_limb(magnitude, sign)
    length = (magnitude.bit_length() + cls.LIMB_BITS - 1) // cls.LIMB_BITS
    result = cls.allocate(length, sign)
    for limb_index in range(length):
        result.set_limb(limb_index, magnitude & cls.LIMB_MASK)
        magnitude >>= cls.LIMB_BITS
    return result.trim()


def from_double(cls, value):
    """
    Construct a cls instance from an integral float.

    Raise cls.ConversionError for NAN, infinity, or a fractional part.
    """
    if math.isnan(value) or math.isinf(value) or math.floor(value) != value:
        raise cls.ConversionError(
            "The number {value} cannot be converted to {class_name} because it is not an integer".format(
                value=repr(value),
                class_name=cls.__name__,
            )
        )
    if value == 0.0:
        return cls.zero()   # NOTE:  including -0.0
    if -cls.LIMB_MASK <= value <= cls.LIMB_MASK:
        if value < 0.0:
            return cls.one_limb(int(-value), True)
        return cls.one_limb(int(value), False)

    (sign, raw_exponent, mantissa_high, mantissa_low) = bits.decompose_double(value)
    exponent = raw_exponent - bits.EXPONENT_BIAS
    digits = exponent // 30 + 1
    result = cls.allocate(digits, sign)

    # 0-indexed position of most significant bit in most significant limb.
    msd_top_bit = exponent % 30
    # Mantissa bits not yet placed.  They stay shifted to the most significant end of mantissa_high.
    remaining_mantissa_bits = 0

    # First, build the most significant limb by shifting the mantissa into place.
    if msd_top_bit < bits.MANTISSA_HIGH_TOP_BIT:
        shift = bits.MANTISSA_HIGH_TOP_BIT - msd_top_bit
        remaining_mantissa_bits = shift + 32
        digit = mantissa_high >> shift
        mantissa_high = bits.u32(mantissa_high << (32 - shift)) | (mantissa_low >> shift)
        mantissa_low = bits.u32(mantissa_low << (32 - shift))
    elif msd_top_bit == bits.MANTISSA_HIGH_TOP_BIT:
        remaining_mantissa_bits = 32
        digit = mantissa_high
        mantissa_high = mantissa_low
        mantissa_low = 0
    else:
        shift = msd_top_bit - bits.MANTISSA_HIGH_TOP_BIT
        remaining_mantissa_bits = 32 - shift
        digit = bits.u32(mantissa_high << shift) | (mantissa_low >> (32 - shift))
        mantissa_high = bits.u32(mantissa_low << shift)
        mantissa_low = 0
    result.set_limb(digits - 1, digit)

    # Then fill in the rest of the limbs, 30 mantissa bits at a time, then zeros.
    for limb_index in range(digits - 2, -1, -1):
        if remaining_mantissa_bits > 0:
            remaining_mantissa_bits -= 30
            digit = mantissa_high >> 2
            mantissa_high = bits.u32(mantissa_high << 30) | (mantissa_low >> 2)
            mantissa_low = bits.u32(mantissa_low << 30)
        else:
            digit = 0
        result.set_limb(limb_index, digit)
    return result.trim()


def to_number(x):
    """
    Convert to float.

    Beyond two limbs (60 bits) this saturates to +/- infinity.
    That is a known simplification, not IEEE rounding, and callers rely on it.
    """
    length = x.length
    if length == 0:
        return 0.0
    if length == 1:
        magnitude = float(x.unsigned_limb_at(0))
    elif length == 2:
        magnitude = float(x.unsigned_limb_at(1)) * TWO_TO_THE_30 + float(x.unsigned_limb_at(0))
    else:
        magnitude = float('+inf')
    return -magnitude if x.sign else magnitude


def to_int(x):
    """Convert to a native int, exactly."""
    result = 0
    for limb_index in range(x.length - 1, -1, -1):
        result = (result << 30) | x.limb_at(limb_index)
    return -result if x.sign else result
