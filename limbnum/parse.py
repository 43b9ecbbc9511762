"""
Text to BigValue.

    parse(BigValue, '-1,234')      ==  -1234
    parse(BigValue, '0x1F')        ==  31
    parse(BigValue, 'zz', 36)      ==  1295
    parse(BigValue, '  42\n')      ==  42
    parse(BigValue, '')            ==  0

Separators , . _ are dropped anywhere.  Whitespace is allowed only before and after the number.
A sign is allowed only in radix 10, so '-0x1' is an error.
"""

from limbnum import absolute
from limbnum import bits


DIGIT_VALUES = dict()
for _value, _char in enumerate('0123456789abcdefghijklmnopqrstuvwxyz'):
    DIGIT_VALUES[_char] = _value
    DIGIT_VALUES[_char.upper()] = _value
assert 35 == DIGIT_VALUES['Z']

SEPARATORS = ',._'

WHITESPACE_CODES = frozenset(
    list(range(0x09, 0x0D + 1)) +      # tab, LF, VT, FF, CR
    [0x20, 0xA0, 0x1680] +             # space, no-break space, Ogham space mark
    list(range(0x2000, 0x200A + 1)) +  # en quad through hair space
    [0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF]
)


def is_whitespace(char):
    return ord(char) in WHITESPACE_CODES
assert is_whitespace('\u3000')
assert is_whitespace('\ufeff')
assert not is_whitespace('\u200b')
assert not is_whitespace('_')


def parse(cls, text, radix=0, debug=False):
    """
    Parse text in the given radix, or with radix=0 detect it from a 0x 0o 0b prefix.

    Raise cls.ParseError for malformed text,
    cls.ResultTooLarge for text with too many digits to represent.
    """
    if not isinstance(text, str):
        raise cls.ConstructorTypeError("Cannot parse a {}, only a str".format(type(text).__name__))
    if radix != 0 and not 2 <= radix <= 36:
        raise cls.ParseError("Radix must be 0 or between 2 and 36, not {}".format(repr(radix)))
    original_text = text
    for separator in SEPARATORS:
        text = text.replace(separator, '')

    def parse_error(reason):
        return cls.ParseError("Cannot parse {text} as {class_name}:  {reason}".format(
            text=repr(original_text),
            class_name=cls.__name__,
            reason=reason,
        ))

    length = len(text)
    cursor = 0
    while cursor < length and is_whitespace(text[cursor]):
        cursor += 1
    if cursor == length:
        return cls.zero()

    negative = False
    has_sign = False
    has_prefix = False
    leading_zero = False
    if text[cursor] in '+-':
        has_sign = True
        negative = text[cursor] == '-'
        cursor += 1
        if cursor == length:
            raise parse_error("sign with no digits")

    if radix == 0:
        radix = 10
        if text[cursor] == '0':
            cursor += 1
            if cursor < length and text[cursor] in 'xXoObB':
                radix = {'x': 16, 'o': 8, 'b': 2}[text[cursor].lower()]
                has_prefix = True
                cursor += 1
            else:
                leading_zero = True
    elif radix == 16:
        if text[cursor] == '0':
            cursor += 1
            if cursor < length and text[cursor] in 'xX':
                has_prefix = True
                cursor += 1
            else:
                leading_zero = True
    if has_sign and radix != 10:
        raise parse_error("a sign is only allowed in radix 10, not radix {}".format(radix))

    while cursor < length and text[cursor] == '0':
        leading_zero = True
        cursor += 1
    if debug:
        print("parse {text}:  radix {radix}, leading zero {leading_zero}, {chars} chars left".format(
            text=repr(original_text),
            radix=radix,
            leading_zero=leading_zero,
            chars=length - cursor,
        ))

    chars = length - cursor
    bits_per_char = bits.MAX_BITS_PER_CHAR[radix]
    if chars > (1 << 30) // bits_per_char:
        raise cls.ResultTooLarge("{chars} digits in radix {radix} is too many".format(chars=chars, radix=radix))
    roundup = bits.BITS_PER_CHAR_TABLE_MULTIPLIER - 1
    bits_min = (bits_per_char * chars + roundup) >> bits.BITS_PER_CHAR_TABLE_SHIFT
    result = cls.allocate((bits_min + 29) // 30, negative)
    if debug:
        print("parse preallocated {} limbs".format(result.length))

    def digit_at(index):
        """Value of the character at index, or None if it's not a digit in this radix."""
        if index >= length:
            return None
        value = DIGIT_VALUES.get(text[index], radix)
        if value >= radix:
            return None
        return value

    digits_seen = 0
    if bits.is_power_of_two(radix):
        bits_per_char >>= bits.BITS_PER_CHAR_TABLE_SHIFT
        parts = []
        parts_bits = []
        done = False
        while not done:
            part = 0
            part_bits = 0
            while True:
                d = digit_at(cursor)
                if d is None:
                    done = True
                    break
                part_bits += bits_per_char
                part = (part << bits_per_char) | d
                cursor += 1
                digits_seen += 1
                if part_bits + bits_per_char > 30:
                    break
            parts.append(part)
            parts_bits.append(part_bits)
        fill_from_parts(result, parts, parts_bits)
    else:
        done = False
        chars_so_far = 0
        while not done:
            part = 0
            multiplier = 1
            while True:
                d = digit_at(cursor)
                if d is None:
                    done = True
                    break
                m = multiplier * radix
                if m > 0x3FFFFFFF:
                    break
                multiplier = m
                part = part * radix + d
                chars_so_far += 1
                cursor += 1
            roundup = bits.BITS_PER_CHAR_TABLE_MULTIPLIER * 30 - 1
            limbs_so_far = ((bits_per_char * chars_so_far + roundup) >> bits.BITS_PER_CHAR_TABLE_SHIFT) // 30
            if debug:
                print("parse fold {part} times {multiplier} into {limbs} limbs".format(
                    part=part,
                    multiplier=multiplier,
                    limbs=limbs_so_far,
                ))
            absolute.inplace_multiply_add(result, multiplier, part, limbs_so_far)
        digits_seen = chars_so_far

    if (has_sign or has_prefix) and digits_seen == 0 and not leading_zero:
        raise parse_error("no digits")
    while cursor < length:
        if not is_whitespace(text[cursor]):
            raise parse_error("unexpected {char} at {index}".format(
                char=repr(text[cursor]),
                index=cursor,
            ))
        cursor += 1
    return result.trim()


def fill_from_parts(result, parts, parts_bits):
    """
    Lay out packed power-of-two parts as limbs.

    parts - most significant first, each holding parts_bits[i] bits, at most 30
    """
    limb_index = 0
    digit = 0
    bits_in_digit = 0
    for i in range(len(parts) - 1, -1, -1):
        part = parts[i]
        part_bits = parts_bits[i]
        digit |= part << bits_in_digit
        bits_in_digit += part_bits
        if bits_in_digit == 30:
            result.set_limb(limb_index, digit)
            limb_index += 1
            bits_in_digit = 0
            digit = 0
        elif bits_in_digit > 30:
            result.set_limb(limb_index, digit & 0x3FFFFFFF)
            limb_index += 1
            bits_in_digit -= 30
            digit = part >> (part_bits - bits_in_digit)
    if digit != 0:
        if limb_index >= result.length:
            raise result.InternalInvariantViolation("implementation bug:  parts overflow {} limbs".format(result.length))
        result.set_limb(limb_index, digit)
        limb_index += 1
    while limb_index < result.length:
        result.set_limb(limb_index, 0)
        limb_index += 1
