"""
Bit-level helpers:  IEEE-754 double decomposition, leading-zero counts, bits-per-character table.

The double decomposition reads the raw binary64 bytes.  There is no floating point arithmetic,
so there is no rounding.

    binary64:  1 sign bit, 11 exponent bits (bias 1023), 52 mantissa bits (hidden leading 1)
    SEE:  http://en.wikipedia.org/wiki/Double-precision_floating-point_format
"""

import struct


EXPONENT_BIAS = 0x3FF
EXPONENT_SPECIAL = 0x7FF   # infinity or NAN
HIDDEN_BIT = 0x00100000    # implicit 1 above the 20 high mantissa bits
MANTISSA_HIGH_TOP_BIT = 20


def decompose_double(value):
    """
    Split a float into (sign, biased_exponent, mantissa_high, mantissa_low).

    sign - True if the sign bit is set (including -0.0)
    biased_exponent - 11 bits, 0x3FF for 1.0
    mantissa_high - top 20 mantissa bits, OR the hidden bit 0x00100000
    mantissa_low - bottom 32 mantissa bits

    assert (False, 0x3FF, 0x00100000, 0) == decompose_double(1.0)
    """
    (word_low, word_high) = struct.unpack('<II', struct.pack('<d', value))
    sign = (word_high >> 31) == 1
    biased_exponent = (word_high >> 20) & 0x7FF
    mantissa_high = (word_high & 0xFFFFF) | HIDDEN_BIT
    return sign, biased_exponent, mantissa_high, word_low
assert (False, 0x3FF, 0x00100000, 0) == decompose_double(1.0)
assert (True, 0x400, 0x00180000, 0) == decompose_double(-3.0)
assert (False, 0x433, 0x001FFFFF, 0xFFFFFFFF) == decompose_double(9007199254740991.0)


def u32(x):
    """Truncate to an unsigned 32-bit word, like a shift in a 32-bit register."""
    return x & 0xFFFFFFFF
assert 0x80000000 == u32(1 << 31)
assert 0 == u32(1 << 32)


def clz30(x):
    """Leading zero bits in a 30-bit limb."""
    if x == 0:
        return 30
    return 30 - x.bit_length()
assert 30 == clz30(0)
assert 29 == clz30(1)
assert 0 == clz30(0x3FFFFFFF)


def clz15(x):
    """Leading zero bits in a 15-bit half-digit."""
    return clz30(x) - 15
assert 0 == clz15(0x7FFF)
assert 14 == clz15(1)


# Maximum bits needed per character of a base-N string, times 32 for accuracy.
# Generated by:  [math.ceil(math.log2(radix) * 32) for radix in range(2, 37)]
# (Radix 0 and 1 are placeholders.)
MAX_BITS_PER_CHAR = (
    0, 0, 32, 51, 64, 75, 83, 90, 96,  # 0..8
    102, 107, 111, 115, 119, 122, 126, 128,  # 9..16
    131, 134, 136, 139, 141, 143, 145, 147,  # 17..24
    149, 151, 153, 154, 156, 158, 159, 160,  # 25..32
    162, 163, 165, 166,  # 33..36
)
BITS_PER_CHAR_TABLE_SHIFT = 5
BITS_PER_CHAR_TABLE_MULTIPLIER = 1 << BITS_PER_CHAR_TABLE_SHIFT
assert 37 == len(MAX_BITS_PER_CHAR)
assert 107 == MAX_BITS_PER_CHAR[10]


def is_power_of_two(n):
    return n > 0 and (n & (n - 1)) == 0
assert is_power_of_two(16)
assert not is_power_of_two(10)
