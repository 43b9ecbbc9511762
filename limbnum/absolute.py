"""
Sign-magnitude add, subtract, multiply.

The absolute_ functions work on magnitudes and are told the sign of the result.
add() and subtract() pick the operand order and the sign:

     x +  y  ==   |x| + |y|            same signs
     x + -y  ==   |x| - |y|   if |x| >= |y|
             == -(|y| - |x|)  otherwise

Every limb operation masks to 30 bits and carries with >> 30, so nothing depends on
Python's unlimited ints.  An intermediate never exceeds 32 bits.
"""

from limbnum.store import LimbStore


def absolute_compare(x, y):
    """Compare magnitudes.  Positive, zero, or negative, like the old cmp()."""
    diff = x.length - y.length
    if diff != 0:
        return diff
    i = x.length - 1
    while i >= 0 and x.limb_at(i) == y.limb_at(i):
        i -= 1
    if i < 0:
        return 0
    return 1 if x.unsigned_limb_at(i) > y.unsigned_limb_at(i) else -1


def absolute_add(x, y, result_sign):
    """|x| + |y| with the given sign."""
    if x.length < y.length:
        return absolute_add(y, x, result_sign)
    if x.length == 0:
        return type(x).zero()
    if y.length == 0:
        return x.copy(sign=result_sign)
    result_length = x.length
    if x.clz_msl() == 0 or (y.length == x.length and y.clz_msl() == 0):
        result_length += 1
    result = x.allocate(result_length, result_sign)
    carry = 0
    i = 0
    while i < y.length:
        r = x.limb_at(i) + y.limb_at(i) + carry
        carry = r >> 30
        result.set_limb(i, r & 0x3FFFFFFF)
        i += 1
    while i < x.length:
        r = x.limb_at(i) + carry
        carry = r >> 30
        result.set_limb(i, r & 0x3FFFFFFF)
        i += 1
    if i < result.length:
        result.set_limb(i, carry)
    elif carry != 0:
        raise LimbStore.InternalInvariantViolation("carry escaped a sum of {} limbs".format(result.length))
    return result.trim()


def absolute_sub(x, y, result_sign):
    """|x| - |y| with the given sign.  Caller guarantees |x| >= |y|."""
    if x.length == 0:
        return type(x).zero()
    if y.length == 0:
        return x.copy(sign=result_sign)
    result = x.allocate(x.length, result_sign)
    borrow = 0
    i = 0
    while i < y.length:
        r = x.limb_at(i) - y.limb_at(i) - borrow
        borrow = (r >> 30) & 1
        result.set_limb(i, r & 0x3FFFFFFF)
        i += 1
    while i < x.length:
        r = x.limb_at(i) - borrow
        borrow = (r >> 30) & 1
        result.set_limb(i, r & 0x3FFFFFFF)
        i += 1
    if borrow != 0:
        raise LimbStore.InternalInvariantViolation("borrow escaped, subtrahend was larger")
    return result.trim()


def add(x, y):
    sign = x.sign
    if sign == y.sign:
        return absolute_add(x, y, sign)
    if absolute_compare(x, y) >= 0:
        return absolute_sub(x, y, sign)
    return absolute_sub(y, x, not sign)


def subtract(x, y):
    sign = x.sign
    if sign != y.sign:
        return absolute_add(x, y, sign)
    if absolute_compare(x, y) >= 0:
        return absolute_sub(x, y, sign)
    return absolute_sub(y, x, not sign)


def unary_minus(x):
    if x.length == 0:
        return type(x).zero()
    return x.copy(sign=not x.sign)


def multiply(x, y):
    """Schoolbook multiplication, one row per limb of x."""
    if x.length == 0 or y.length == 0:
        return type(x).zero()
    result_length = x.length + y.length
    if x.clz_msl() + y.clz_msl() >= 30:
        result_length -= 1
    result = x.allocate(result_length, x.sign != y.sign)
    for i in range(x.length):
        multiply_accumulate(y, x.limb_at(i), result, i)
    return result.trim()


def multiply_accumulate(multiplicand, multiplier, accumulator, accumulator_index):
    """
    accumulator += multiplicand * multiplier, starting at limb accumulator_index.

    multiplier is one limb.  Both sides are split into 15-bit halves,
    so each of the four partial products is at most 30 bits:

        low  * low   -->  bits 0-29
        low  * high  -->  bits 15-44   middle, split at bit 15, low half into this limb
        high * low   -->  bits 15-44   middle, high half into the next limb
        high * high  -->  bits 30-59   carried as "high" into the next limb
    """
    if multiplier == 0:
        return
    m2_low = multiplier & 0x7FFF
    m2_high = multiplier >> 15
    carry = 0
    high = 0
    for i in range(multiplicand.length):
        acc = accumulator.limb_at(accumulator_index)
        m1 = multiplicand.limb_at(i)
        m1_low = m1 & 0x7FFF
        m1_high = m1 >> 15
        r_low = m1_low * m2_low
        r_mid1 = m1_low * m2_high
        r_mid2 = m1_high * m2_low
        r_high = m1_high * m2_high
        acc += high + r_low + carry
        carry = acc >> 30
        acc &= 0x3FFFFFFF
        acc += ((r_mid1 & 0x7FFF) << 15) + ((r_mid2 & 0x7FFF) << 15)
        carry += acc >> 30
        high = r_high + (r_mid1 >> 15) + (r_mid2 >> 15)
        accumulator.set_limb(accumulator_index, acc & 0x3FFFFFFF)
        accumulator_index += 1
    while carry != 0 or high != 0:
        acc = accumulator.limb_at(accumulator_index)
        acc += carry + high
        high = 0
        carry = acc >> 30
        accumulator.set_limb(accumulator_index, acc & 0x3FFFFFFF)
        accumulator_index += 1


def internal_multiply_add(source, factor, summand, n, result):
    """
    result = source[0:n] * factor + summand, where factor is a half-digit.

    Any limbs of result above n get the final carry, then zeros.
    If result has exactly n limbs, the carry has nowhere to go and must be zero.
    """
    carry = summand
    high = 0
    for i in range(n):
        digit = source.limb_at(i)
        rx = (digit & 0x7FFF) * factor
        ry = (digit >> 15) * factor
        r = rx + ((ry & 0x7FFF) << 15) + high + carry
        carry = r >> 30
        high = ry >> 15
        result.set_limb(i, r & 0x3FFFFFFF)
    if result.length > n:
        result.set_limb(n, carry + high)
        for i in range(n + 1, result.length):
            result.set_limb(i, 0)
    elif carry + high != 0:
        raise LimbStore.InternalInvariantViolation("implementation bug:  carry escaped {n} limbs".format(n=n))


def inplace_multiply_add(x, multiplier, summand, length):
    """
    x = x * multiplier + summand, in place, touching only the low length limbs.

    The string parser calls this once per chunk of characters.
    A carry out of those limbs means the parser sized something wrong.
    """
    if length > x.length:
        length = x.length
    m_low = multiplier & 0x7FFF
    m_high = multiplier >> 15
    carry = 0
    high = summand
    for i in range(length):
        d = x.limb_at(i)
        d_low = d & 0x7FFF
        d_high = d >> 15
        p_low = d_low * m_low
        p_mid1 = d_low * m_high
        p_mid2 = d_high * m_low
        p_high = d_high * m_high
        result = high + p_low + carry
        carry = result >> 30
        result &= 0x3FFFFFFF
        result += ((p_mid1 & 0x7FFF) << 15) + ((p_mid2 & 0x7FFF) << 15)
        carry += result >> 30
        high = p_high + (p_mid1 >> 15) + (p_mid2 >> 15)
        x.set_limb(i, result & 0x3FFFFFFF)
    if carry != 0 or high != 0:
        raise LimbStore.InternalInvariantViolation(
            "implementation bug:  carry escaped {length} limbs of a parse".format(length=length)
        )
