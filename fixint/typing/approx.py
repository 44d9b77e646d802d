"""Floating point approximations of fixed width unsigned integers.

These map between the integer domain of :class:`~fixint.typing.Uint` and
doubles. Only the 64 most significant bits of a value take part in the
conversion, so values of any width stay within the double exponent range.
"""

import math
import operator

LN2_1P5 = math.log2(1.5)
EXP2_63 = float(1 << 63)


def most_significant_bits(value):
    """Returns the 64 most significant bits of the value and the exponent, such
    that ``value ~= bits * 2**exponent``.

    >>> most_significant_bits(0x1234)
    (4660, 0)
    >>> most_significant_bits(1 << 100)
    (9223372036854775808, 37)
    """
    val = int(value)
    shift = max(val.bit_length() - 64, 0)
    return val >> shift, shift


def approx_log2(value) -> float:
    bits, exp = most_significant_bits(value)
    if bits == 0:
        return -math.inf

    return math.log2(bits) + exp


def approx_log10(value) -> float:
    return approx_log2(value) / math.log2(10)


def approx_log(value, base) -> float:
    return approx_log2(value) / math.log2(base)


def checked_log2(value):
    """Exact floor of the base 2 logarithm, ``None`` for zero."""
    val = int(value)
    if val == 0:
        return None

    return val.bit_length() - 1


def checked_log(value, base):
    """Exact floor of the logarithm in an integer ``base``.

    Returns ``None`` when the logarithm is not defined, i.e. for zero values
    and bases below 2.
    """
    val = int(value)
    base = operator.index(base)
    if val == 0 or base < 2:
        return None

    if base == 2:
        return checked_log2(val)

    res = max(int(approx_log(val, base)), 0)

    # approximation can be off by one in either direction
    while res > 0 and base**res > val:
        res -= 1

    while base**(res + 1) <= val:
        res += 1

    return res


def approx_pow2(dtype, exp: float):
    """Returns the value of type ``dtype`` that approximates ``2**exp``, or
    ``None`` if it is not representable.

    >>> approx_pow2(Uint[64], 10.0)
    Uint[64](1024)
    >>> approx_pow2(Uint[8], 8.0) is None
    True
    """
    exp = float(exp)
    if math.isnan(exp):
        return None

    if exp < LN2_1P5:
        if exp < -1.0:
            return dtype.zero

        return dtype.one if dtype.width > 0 else None

    if exp > dtype.width:
        return None

    shift = math.trunc(exp)
    bits = int(2.0**(exp - shift) * EXP2_63)

    shift -= 63
    if shift < 0:
        val = bits >> -shift
    else:
        val = bits << shift

    if val > dtype.mask:
        return None

    return dtype(val)
