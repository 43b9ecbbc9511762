"""
Render a BigValue as text in radix 2 to 36.

Power-of-two radixes read bits straight out of the limbs.
Other radixes divide and conquer:  split by a power of the radix near the square root,
render both halves, zero-pad the low half.

    to_string(BigValue(-255), 16) == '-ff'
"""

from limbnum import bits
from limbnum import division
from limbnum import power


DIGIT_CHARS = '0123456789abcdefghijklmnopqrstuvwxyz'


def to_string(x, radix=10, debug=False):
    if not 2 <= radix <= 36:
        raise x.ConversionError("Radix must be between 2 and 36, not {}".format(repr(radix)))
    if x.length == 0:
        return '0'
    if bits.is_power_of_two(radix):
        return _to_string_power_of_two(x, radix)
    return _to_string_generic(x, radix, False, debug)


def hex_string(x):
    """
    Python-style hexadecimal, like hex() of an int.

    assert '-0xff' == hex_string(BigValue(-255))
    """
    digits = to_string(x.copy(sign=False), 16)
    if x.sign:
        return '-0x' + digits
    return '0x' + digits


def _small_to_string(value, radix):
    """One limb, unsigned."""
    if radix == 10:
        return str(value)
    if value == 0:
        return '0'
    chars = []
    while value != 0:
        chars.append(DIGIT_CHARS[value % radix])
        value //= radix
    return ''.join(reversed(chars))
assert 'ff' == _small_to_string(255, 16)
assert '0' == _small_to_string(0, 7)
assert '1010' == _small_to_string(10, 2)


def _to_string_power_of_two(x, radix):
    """Each character takes log2(radix) bits.  A character may straddle two limbs."""
    bits_per_char = radix.bit_length() - 1
    char_mask = radix - 1
    length = x.length
    msd = x.limb_at(length - 1)
    chars = []   # least significant first
    digit = 0
    available_bits = 0
    for i in range(length - 1):
        new_digit = x.limb_at(i)
        current = (digit | (new_digit << available_bits)) & char_mask
        chars.append(DIGIT_CHARS[current])
        consumed_bits = bits_per_char - available_bits
        digit = new_digit >> consumed_bits
        available_bits = 30 - consumed_bits
        while available_bits >= bits_per_char:
            chars.append(DIGIT_CHARS[digit & char_mask])
            digit >>= bits_per_char
            available_bits -= bits_per_char
    current = (digit | (msd << available_bits)) & char_mask
    chars.append(DIGIT_CHARS[current])
    digit = msd >> (bits_per_char - available_bits)
    while digit != 0:
        chars.append(DIGIT_CHARS[digit & char_mask])
        digit >>= bits_per_char
    if x.sign:
        chars.append('-')
    return ''.join(reversed(chars))


def _to_string_generic(x, radix, is_recursive_call, debug):
    """
    Divide and conquer.

    Recursive calls render magnitudes only, and render zero as the empty string,
    so a zero low half becomes all padding.  Only the outermost call adds the '-'.
    """
    length = x.length
    if length == 0:
        return ''
    if length == 1:
        result = _small_to_string(x.unsigned_limb_at(0), radix)
        if not is_recursive_call and x.sign:
            result = '-' + result
        return result

    bit_length = x.bit_length()
    max_bits_per_char = bits.MAX_BITS_PER_CHAR[radix]
    min_bits_per_char = max_bits_per_char - 1
    chars_required = bit_length * bits.BITS_PER_CHAR_TABLE_MULTIPLIER
    chars_required += min_bits_per_char - 1
    chars_required //= min_bits_per_char
    second_half_chars = (chars_required + 1) >> 1

    cls = type(x)
    conqueror = power.exponentiate(cls.one_limb(radix, False), cls.one_limb(second_half_chars, False))
    divisor = conqueror.unsigned_limb_at(0)
    if conqueror.length == 1 and divisor <= 0x7FFF:
        (quotient, remainder_digit) = division.absolute_divmod_small(x, divisor)
        second_half = _small_to_string(remainder_digit, radix)
    else:
        (quotient, remainder) = division.absolute_div_large(x, conqueror, want_quotient=True, want_remainder=True)
        second_half = _to_string_generic(remainder.trim(), radix, True, debug)
    quotient.trim()
    if debug:
        print("to_string split {bits} bits at {radix}**{chars}:  {q_len} limb quotient, remainder {remainder}".format(
            bits=bit_length,
            radix=radix,
            chars=second_half_chars,
            q_len=quotient.length,
            remainder=second_half,
        ))
    first_half = _to_string_generic(quotient, radix, True, debug)
    second_half = second_half.rjust(second_half_chars, '0')
    if not is_recursive_call and x.sign:
        first_half = '-' + first_half
    return first_half + second_half
