"""
Truncating division and remainder.

Quotient rounds toward zero.  Remainder takes the sign of the dividend.

    divide(-7, 2) == -3        mod(-7, 2) == -1
    divide( 7,-2) == -3        mod( 7,-2) ==  1

Small divisors (one limb, at most 0x7FFF) take a linear half-digit scan.
Everything else goes through Knuth's Algorithm D, on 15-bit half-digits so that
a two-half-digit numerator and every qhat * half-digit product fit in 30 bits.
SEE:  Knuth, TAOCP Vol 2, 4.3.1, Algorithm D
"""

from limbnum import absolute
from limbnum import bits
from limbnum.store import LimbStore


def _check_divisor(y):
    if y.length == 0:
        raise LimbStore.DivisionByZero("Division by zero")


def divide(x, y):
    """Quotient, truncated toward zero."""
    _check_divisor(y)
    if absolute.absolute_compare(x, y) < 0:
        return type(x).zero()
    result_sign = x.sign != y.sign
    divisor = y.unsigned_limb_at(0)
    if y.length == 1 and divisor <= 0x7FFF:
        if divisor == 1:
            return x.copy(sign=result_sign)
        quotient = absolute_div_small(x, divisor)
    else:
        quotient = absolute_div_large(x, y, want_quotient=True, want_remainder=False)
    quotient._sign = result_sign
    return quotient.trim()


def mod(x, y):
    """Remainder, with the sign of x."""
    _check_divisor(y)
    if absolute.absolute_compare(x, y) < 0:
        return x.copy()
    divisor = y.unsigned_limb_at(0)
    if y.length == 1 and divisor <= 0x7FFF:
        if divisor == 1:
            return type(x).zero()
        remainder_digit = absolute_mod_small(x, divisor)
        if remainder_digit == 0:
            return type(x).zero()
        return type(x).one_limb(remainder_digit, x.sign)
    remainder = absolute_div_large(x, y, want_quotient=False, want_remainder=True)
    remainder._sign = x.sign
    return remainder.trim()


def divmod_(x, y):
    """(divide(x, y), mod(x, y)) from one pass."""
    _check_divisor(y)
    if absolute.absolute_compare(x, y) < 0:
        return type(x).zero(), x.copy()
    result_sign = x.sign != y.sign
    divisor = y.unsigned_limb_at(0)
    if y.length == 1 and divisor <= 0x7FFF:
        if divisor == 1:
            return x.copy(sign=result_sign), type(x).zero()
        (quotient, remainder_digit) = absolute_divmod_small(x, divisor)
        quotient._sign = result_sign
        if remainder_digit == 0:
            return quotient.trim(), type(x).zero()
        return quotient.trim(), type(x).one_limb(remainder_digit, x.sign)
    (quotient, remainder) = absolute_div_large(x, y, want_quotient=True, want_remainder=True)
    quotient._sign = result_sign
    remainder._sign = x.sign
    return quotient.trim(), remainder.trim()


def absolute_div_small(x, divisor):
    """|x| / divisor, for 0 < divisor <= 0x7FFF.  Returns the untrimmed quotient."""
    return absolute_divmod_small(x, divisor)[0]


def absolute_divmod_small(x, divisor):
    """(untrimmed quotient, remainder as an int) of |x| / divisor, for 0 < divisor <= 0x7FFF."""
    quotient = x.allocate(x.length, False)
    remainder = _div_small_into(x, divisor, quotient)
    return quotient, remainder


def _div_small_into(x, divisor, quotient):
    """
    Fill in quotient = |x| / divisor, two half-digits per limb, most significant first.

    The running remainder is less than divisor, so remainder << 15 | half-digit
    stays within 30 bits.  Returns the final remainder.
    """
    remainder = 0
    for i in range(x.length * 2 - 1, -1, -2):
        numerator = (remainder << 15) | x.half_digit_at(i)
        upper_half = numerator // divisor
        remainder = numerator % divisor
        numerator = (remainder << 15) | x.half_digit_at(i - 1)
        lower_half = numerator // divisor
        remainder = numerator % divisor
        quotient.set_limb(i >> 1, (upper_half << 15) | lower_half)
    return remainder


def absolute_mod_small(x, divisor):
    """|x| % divisor, for 0 < divisor <= 0x7FFF."""
    remainder = 0
    for i in range(x.length * 2 - 1, -1, -1):
        numerator = (remainder << 15) | x.half_digit_at(i)
        remainder = numerator % divisor
    return remainder


def special_left_shift(x, shift, add_digit):
    """
    Copy of |x| shifted left by 0-14 bits, optionally with one extra top limb.

    add_digit - 0 or 1.  The extra limb holds the bits shifted out of the top.
    Without it those bits must be zero, which is true when shifting a divisor by clz15 of its top half-digit.
    """
    n = x.length
    result = x.allocate(n + add_digit, False)
    if shift == 0:
        for i in range(n):
            result.set_limb(i, x.limb_at(i))
        return result
    carry = 0
    for i in range(n):
        d = x.limb_at(i)
        result.set_limb(i, ((d << shift) & 0x3FFFFFFF) | carry)
        carry = d >> (30 - shift)
    if add_digit > 0:
        result.set_limb(n, carry)
    return result


def absolute_div_large(dividend, divisor, want_quotient, want_remainder):
    """
    Algorithm D.  |dividend| / |divisor| where the divisor has 2 or more half-digits.

    Returns the quotient, the remainder, or a (quotient, remainder) tuple,
    per want_quotient and want_remainder.  Results are untrimmed and unsigned.
    """
    n = divisor.half_digit_length()
    n2 = divisor.length
    m = dividend.half_digit_length() - n
    q = None
    if want_quotient:
        q = dividend.allocate((m + 2) >> 1, False)
    qhatv = dividend.allocate((n + 2) >> 1, False)

    # D1.  Normalize, so the top half-digit of the divisor has its high bit set.
    shift = bits.clz15(divisor.half_digit_at(n - 1))
    if shift > 0:
        divisor = special_left_shift(divisor, shift, 0)
    u = special_left_shift(dividend, shift, 1)

    # D2.  Loop over quotient half-digits, most significant first.
    vn1 = divisor.half_digit_at(n - 1)
    vn2 = divisor.half_digit_at(n - 2)
    for j in range(m, -1, -1):
        # D3.  Estimate qhat from the top two half-digits.  It may be up to 2 too big.
        ujn = u.half_digit_at(j + n)
        numerator = (ujn << 15) | u.half_digit_at(j + n - 1)
        qhat = numerator // vn1
        rhat = numerator % vn1
        if qhat > 0x7FFF:
            qhat = 0x7FFF
            rhat = numerator - qhat * vn1
        ujn2 = u.half_digit_at(j + n - 2)
        while rhat <= 0x7FFF and qhat * vn2 > ((rhat << 15) | ujn2):
            qhat -= 1
            rhat += vn1
        # Now qhat is exact or 1 too big.

        # D4.  Multiply and subtract.
        absolute.internal_multiply_add(divisor, qhat, 0, n2, qhatv)
        borrow = u.inplace_sub(qhatv, j, n + 1)
        if borrow != 0:
            # D6.  Add back.
            carry = u.inplace_add(divisor, j, n)
            u.set_half_digit(j + n, (u.half_digit_at(j + n) + carry) & 0x7FFF)
            qhat -= 1

        # D5.
        if want_quotient:
            q.set_half_digit(j, qhat)

    # D8.  Unnormalize the remainder.
    if want_remainder:
        u.inplace_right_shift(shift)
        if want_quotient:
            return q, u
        return u
    if want_quotient:
        return q
    raise LimbStore.InternalInvariantViolation("absolute_div_large() wants neither quotient nor remainder")
