"""
Unit tests for parsing text into a BigValue
"""


import unittest

from limbnum import BigValue
from limbnum.parse import fill_from_parts
from limbnum.parse import is_whitespace


class ParseTests(unittest.TestCase):

    def assertParse(self, expected_int, text, radix=0):
        n = BigValue.from_string(text, radix)
        self.assertEqual(expected_int, n.to_int(), "{} in radix {}".format(repr(text), radix))
        if n.length > 0:
            self.assertNotEqual(0, n.limb_at(n.length - 1))
        else:
            self.assertFalse(n.sign)

    def assertParseError(self, text, radix=0):
        with self.assertRaises(BigValue.ParseError):
            BigValue.from_string(text, radix)


class ParseDecimalTests(ParseTests):

    def test_simple(self):
        self.assertParse(0, '0')
        self.assertParse(1, '1')
        self.assertParse(123, '123')
        self.assertParse(-123, '-123')
        self.assertParse(123, '+123')

    def test_whitespace_around(self):
        self.assertParse(123, '123')
        self.assertParse(123, ' 123 ')
        self.assertParse(123, '   123   ')
        self.assertParse(123, '\t\n123\r\n')
        self.assertParse(-5, '\u3000-5 ')
        self.assertParse(7, '\ufeff7')

    def test_empty_is_zero(self):
        self.assertParse(0, '')
        self.assertParse(0, '   ')
        self.assertParse(0, '\u00a0\u2003')

    def test_leading_zeros(self):
        self.assertParse(0, '000')
        self.assertParse(7, '007')
        self.assertParse(-7, '-007')
        self.assertParse(0, '-0')
        self.assertParse(10, '010')

    def test_separators(self):
        self.assertParse(1234567, '1,234,567')
        self.assertParse(1234567, '1_234_567')
        self.assertParse(1234567, '1.234.567')
        self.assertParse(-1000, '-1_000')

    def test_long(self):
        self.assertParse(10**100, '1' + '0' * 100)
        self.assertParse(-(10**100 - 1), '-' + '9' * 100)
        self.assertParse(2**64, '18446744073709551616')
        self.assertParse(int('31415926535897932384626433832795028841971693993751'),
                         '31415926535897932384626433832795028841971693993751')

    def test_limb_boundaries(self):
        for value in (2**30 - 1, 2**30, 2**60 - 1, 2**60, 10**9, 10**18):
            self.assertParse(value, str(value))

    def test_rejects(self):
        self.assertParseError('-0x1')
        self.assertParseError('x123')
        self.assertParseError('123 x')
        self.assertParseError('-0b0')
        self.assertParseError('12 34')
        self.assertParseError('1e5')
        self.assertParseError('--1')

    def test_sign_without_digits(self):
        self.assertParseError('-')
        self.assertParseError('+')
        self.assertParseError('- ')
        self.assertParseError('  +  ')

    def test_error_message(self):
        try:
            BigValue('12 x')
        except BigValue.ParseError as e:
            self.assertIn("'12 x'", str(e))
            self.assertIn("'x'", str(e))
        else:
            self.fail("BigValue('12 x') should raise")

    def test_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            BigValue('nope')


class ParseRadixTests(ParseTests):

    def test_prefixes(self):
        self.assertParse(255, '0xff')
        self.assertParse(255, '0XFF')
        self.assertParse(8, '0o10')
        self.assertParse(8, '0O10')
        self.assertParse(5, '0b101')
        self.assertParse(5, '0B101')
        self.assertParse(0, '0x0')
        self.assertParse(0, '0x000')

    def test_prefix_without_digits(self):
        self.assertParseError('0x')
        self.assertParseError('0b')
        self.assertParseError('0x ')
        self.assertParseError('0o9')
        self.assertParseError('0b2')

    def test_prefix_only_in_auto_radix(self):
        self.assertParseError('0b101', 10)
        self.assertParseError('0x10', 8)

    def test_sign_only_in_decimal(self):
        self.assertParseError('-ff', 16)
        self.assertParseError('+11', 2)
        self.assertParseError('-0o7')
        self.assertParse(-11, '-11', 10)

    def test_explicit_hex(self):
        self.assertParse(255, 'ff', 16)
        self.assertParse(255, '0xff', 16)
        self.assertParse(0, '0', 16)
        self.assertParse(0xDEADBEEF, 'DeadBeef', 16)

    def test_explicit_radixes(self):
        for radix in range(2, 37):
            self.assertParse(radix - 1, '0123456789abcdefghijklmnopqrstuvwxyz'[radix - 1], radix)
            self.assertParse(radix ** 20 + 1, '1' + '0' * 19 + '1', radix)

    def test_digit_out_of_range(self):
        self.assertParseError('2', 2)
        self.assertParseError('9', 8)
        self.assertParseError('a', 10)
        self.assertParseError('g', 16)

    def test_power_of_two_long(self):
        self.assertParse(2**200 - 1, '0x' + 'f' * 50)
        self.assertParse(2**200, '0x1' + '0' * 50)
        self.assertParse(int('1' * 100, 2), '0b' + '1' * 100)
        self.assertParse(int('7' * 41, 8), '0o' + '7' * 41)
        self.assertParse(int('v' * 20, 32), 'v' * 20, 32)

    def test_other_radixes_long(self):
        self.assertParse(int('z' * 30, 36), 'z' * 30, 36)
        self.assertParse(int('2' * 70, 3), '2' * 70, 3)
        self.assertParse(int('1234567' * 9, 12), '1234567' * 9, 12)

    def test_bad_radix(self):
        with self.assertRaises(BigValue.ParseError):
            BigValue.from_string('1', 1)
        with self.assertRaises(BigValue.ParseError):
            BigValue.from_string('1', 37)
        with self.assertRaises(BigValue.ParseError):
            BigValue.from_string('1', -10)

    def test_not_a_string(self):
        with self.assertRaises(BigValue.ConstructorTypeError):
            BigValue.from_string(123)

    def test_too_many_digits(self):
        # More than 2**30 / 128 hex digits is too many.
        with self.assertRaises(BigValue.ResultTooLarge):
            BigValue.from_string('f' * (2**23 + 1), 16)


class WhitespaceTests(unittest.TestCase):

    def test_ascii(self):
        for char in ' \t\n\v\f\r':
            self.assertTrue(is_whitespace(char), repr(char))
        for char in 'a0_,.+-\x00\x08\x0e':
            self.assertFalse(is_whitespace(char), repr(char))

    def test_unicode(self):
        for code in [0xA0, 0x1680, 0x2000, 0x2005, 0x200A, 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF]:
            self.assertTrue(is_whitespace(chr(code)), hex(code))
        for code in [0x85, 0x180E, 0x200B, 0x200C, 0x2060, 0xFFFE]:
            self.assertFalse(is_whitespace(chr(code)), hex(code))


class FillFromPartsTests(unittest.TestCase):

    def test_whole_limbs(self):
        result = BigValue.allocate(2)
        fill_from_parts(result, [0x1, 0x2], [30, 30])
        self.assertEqual(2**30 + 2, result.trim())

    def test_parts_straddle_limbs(self):
        result = BigValue.allocate(2)
        fill_from_parts(result, [0xABC, 0xFFFFFFF], [12, 28])
        self.assertEqual((0xABC << 28) | 0xFFFFFFF, result.trim())

    def test_parts_overflow(self):
        result = BigValue.allocate(1)
        with self.assertRaises(BigValue.InternalInvariantViolation):
            fill_from_parts(result, [1, 0x3FFFFFFF], [1, 30])

    def test_extra_limbs_zeroed(self):
        result = BigValue.allocate(3)
        result.set_limb(2, 99)
        fill_from_parts(result, [5], [4])
        self.assertEqual(5, result.trim())


if __name__ == '__main__':
    import unittest
    unittest.main()
