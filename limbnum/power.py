"""
Integer exponentiation, base ** exponent, by repeated squaring.

Both are BigValues.  The exponent must be non-negative and fit in one limb.
"""

from limbnum import absolute


def exponentiate(base, exponent):
    cls = type(base)
    if exponent.sign:
        raise cls.InvalidExponent("Exponent must be non-negative, not {}".format(exponent.to_string()))
    if exponent.length == 0:
        return cls.one_limb(1, False)
    if base.length == 0:
        return base.copy()
    if base.length == 1 and base.limb_at(0) == 1:
        # (-1) ** even == 1
        if base.sign and (exponent.limb_at(0) & 1) == 0:
            return absolute.unary_minus(base)
        return base.copy()
    if exponent.length > 1:
        raise cls.ResultTooLarge("Exponent {} would exceed the maximum size".format(exponent.to_string()))
    exponent_value = exponent.unsigned_limb_at(0)
    if exponent_value == 1:
        return base.copy()
    if exponent_value >= cls.MAX_LENGTH_BITS:
        raise cls.ResultTooLarge("Exponent {} would exceed the maximum size".format(exponent_value))

    if base.length == 1 and base.limb_at(0) == 2:
        # Just set one bit.
        needed_limbs = 1 + exponent_value // 30
        sign = base.sign and (exponent_value & 1) != 0
        result = cls.allocate(needed_limbs, sign)
        result.set_limb(needed_limbs - 1, 1 << (exponent_value % 30))
        return result

    result = None
    running_square = base
    if exponent_value & 1:
        result = base
    exponent_value >>= 1
    while exponent_value != 0:
        running_square = absolute.multiply(running_square, running_square)
        if exponent_value & 1:
            if result is None:
                result = running_square
            else:
                result = absolute.multiply(result, running_square)
        exponent_value >>= 1
    return result
