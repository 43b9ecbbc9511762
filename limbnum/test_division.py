"""
Unit tests for truncating division, the small-divisor path and Algorithm D
"""


import unittest

from limbnum import BigValue
from limbnum import division


def truncated_divmod(a, b):
    """Python floors.  These truncate toward zero."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


class TruncatedDivmodTests(unittest.TestCase):
    """Make sure the oracle is right before trusting it."""

    def test_signs(self):
        self.assertEqual(( 3,  1), truncated_divmod( 7,  2))
        self.assertEqual((-3, -1), truncated_divmod(-7,  2))
        self.assertEqual((-3,  1), truncated_divmod( 7, -2))
        self.assertEqual(( 3, -1), truncated_divmod(-7, -2))


class DivisionTests(unittest.TestCase):

    def assertDivision(self, a, b):
        (expected_quotient, expected_remainder) = truncated_divmod(a, b)
        x = BigValue(a)
        y = BigValue(b)
        quotient = x.divide(y)
        remainder = x.mod(y)
        self.assertEqual(expected_quotient, quotient.to_int(), "{} / {}".format(a, b))
        self.assertEqual(expected_remainder, remainder.to_int(), "{} % {}".format(a, b))
        (quotient_2, remainder_2) = x.divmod(y)
        self.assertEqual(expected_quotient, quotient_2.to_int())
        self.assertEqual(expected_remainder, remainder_2.to_int())
        for n in (quotient, remainder, quotient_2, remainder_2):
            if n.length > 0:
                self.assertNotEqual(0, n.limb_at(n.length - 1))
            else:
                self.assertFalse(n.sign)

    def test_eighteen_digits_by_three(self):
        x = BigValue('112776680263877595')
        y = BigValue('123')
        self.assertEqual('916883579381118', x.divide(y).to_string())
        self.assertEqual('81', x.mod(y).to_string())

    def test_mod_power_of_two(self):
        x = BigValue('0x10000000000000000')
        y = BigValue('0x100000001')
        self.assertEqual('0x1', x.mod(y).hex())

    def test_signs(self):
        for a in (7, -7):
            for b in (2, -2):
                self.assertDivision(a, b)

    def test_dividend_smaller(self):
        self.assertDivision(5, 10**20)
        self.assertDivision(-5, 10**20)
        self.assertDivision(10**19, -10**20)
        x = BigValue(-5)
        self.assertEqual(x, x.mod(BigValue(10**20)))

    def test_divide_by_one(self):
        self.assertDivision(10**40, 1)
        self.assertDivision(-10**40, 1)
        self.assertDivision(10**40, -1)

    def test_divide_by_itself(self):
        for value in (3, 0x7FFF, 0x8000, 2**30, 10**40, -10**40):
            self.assertDivision(value, value)

    def test_small_divisor(self):
        self.assertDivision(10**40, 7)
        self.assertDivision(-10**40, 0x7FFF)
        self.assertDivision(2**90 - 1, 0x7FFF)
        self.assertDivision(2**90 - 1, 2)

    def test_one_limb_divisor_too_big_for_the_small_path(self):
        self.assertDivision(10**40, 0x8000)
        self.assertDivision(10**40, 0x3FFFFFFF)
        self.assertDivision(-(2**90 - 1), 123456789)

    def test_large_divisor(self):
        self.assertDivision(10**100, 10**50 + 3)
        self.assertDivision(10**100 + 12345, -(2**100 + 7))
        self.assertDivision(2**300 - 1, 2**150 - 1)
        self.assertDivision(3**200, 3**100)
        self.assertDivision(3**200 + 1, 3**100)

    def test_divisor_needs_no_normalization(self):
        self.assertDivision(2**120 - 1, 2**60 - 1)
        self.assertDivision(2**119 + 5, 2**59 + 1)

    def test_quotient_digit_estimate_too_big(self):
        """Cases where qhat from the top half-digits overshoots, so refinement or add-back runs."""
        b = 2**15
        self.assertDivision(b**4 - 1, b**2 - 1)
        self.assertDivision(b**5 // 2, b**2 // 2 + 1)
        self.assertDivision(0x7FFF8000 * b**4, 0x4000 * b + 0x7FFF)
        self.assertDivision(2**89 - 2**60, 2**59 + 2**30 - 1)
        self.assertDivision(4 * b**4 + 3 * b**2, 2 * b**2 + b + 1)

    def test_add_back(self):
        """Knuth's test case for step D6."""
        b = 2**15
        u = 0x7FFF * b**3 + 0x7FFE * b**2
        v = 0x7FFF * b + 0x7FFF
        self.assertDivision(u, v)
        self.assertDivision(0x4000 * b**3 + 0 * b**2 + 1, 0x4000 * b + 1)

    def test_division_by_zero(self):
        with self.assertRaises(BigValue.DivisionByZero):
            BigValue(1).divide(BigValue(0))
        with self.assertRaises(ZeroDivisionError):
            BigValue(1).mod(0)
        with self.assertRaises(ZeroDivisionError):
            BigValue(0).divmod(0)

    def test_zero_dividend(self):
        self.assertDivision(0, 5)
        self.assertDivision(0, -10**30)


class DivisionHelperTests(unittest.TestCase):

    def test_absolute_div_small(self):
        quotient = division.absolute_div_small(BigValue(-1000), 7)
        self.assertFalse(quotient.sign)
        self.assertEqual(142, quotient.trim())

    def test_absolute_mod_small(self):
        self.assertEqual(10**40 % 9, division.absolute_mod_small(BigValue(10**40), 9))
        self.assertEqual(6, division.absolute_mod_small(BigValue(-1000), 7))

    def test_special_left_shift(self):
        x = BigValue(2**30 - 1)
        shifted = division.special_left_shift(x, 3, 1)
        self.assertEqual(2, shifted.length)
        self.assertEqual((2**30 - 1) << 3, shifted.trim())
        self.assertEqual(2**30 - 1, x)

    def test_special_left_shift_no_extra_limb(self):
        x = BigValue(0x1000)
        shifted = division.special_left_shift(x, 2, 0)
        self.assertEqual(1, shifted.length)
        self.assertEqual(0x4000, shifted)

    def test_absolute_div_large_both(self):
        (quotient, remainder) = division.absolute_div_large(
            BigValue(10**30), BigValue(10**15 + 1), want_quotient=True, want_remainder=True,
        )
        self.assertEqual(divmod(10**30, 10**15 + 1), (quotient.trim().to_int(), remainder.trim().to_int()))

    def test_absolute_div_large_ignores_signs(self):
        remainder = division.absolute_div_large(BigValue(-10**30), BigValue(-(10**15 + 1)), False, True)
        self.assertEqual(10**30 % (10**15 + 1), remainder.trim())


if __name__ == '__main__':
    import unittest
    unittest.main()
