LIMB_BITS = 64


def bitw(num: int) -> int:
    num = int(num)
    if num < 0:
        num = -2 * num - 1
    elif num == 0:
        return 1

    return num.bit_length()


def ceil_div(num: int, divisor: int) -> int:
    return (num + divisor - 1) // divisor


def nlimbs(bits: int) -> int:
    """Number of 64-bit limbs needed to hold ``bits`` bits.

    >>> nlimbs(0), nlimbs(64), nlimbs(65)
    (0, 1, 2)
    """
    return ceil_div(bits, LIMB_BITS)
