"""Implements the fixed width unsigned integer type :class:`Uint`.

:class:`Uint` is a generic type whose only parameter is the bit width. A
concrete type is obtained by indexing, ``Uint[64]``, and the concrete types
are cached, so ``Uint[64] is Uint[64]``. Objects of concrete types are
immutable ``int`` subclasses that keep all the results of the arithmetic
within the bit width of their type.

Operators wrap around modulo ``2**width``, the same way fixed width hardware
registers do. When the overflow needs to be detected, ``overflowing_*``
methods return the wrapped value together with the overflow flag and
``checked_*`` methods return ``None`` instead of the wrapped value.
"""

import operator

from .approx import (approx_log, approx_log2, approx_log10, approx_pow2, checked_log,
                     checked_log2, most_significant_bits)
from .base import GenericMeta, TemplateArgumentsError, class_and_instance_method
from .math import LIMB_BITS, bitw, nlimbs
from .root import root

LIMB_MASK = (1 << LIMB_BITS) - 1


class UintType(GenericMeta):
    """Fixed width generic unsigned integer data type.

    Generic parameters:
       N: Bit width of the :class:`Uint` representation

    :class:`Uint` is a generic datatype. It represents unsigned integers with
    fixed width binary representation. Concrete data type is obtained by
    indexing:

    >>> u256 = Uint[256]

    """
    def check_param(self, param):
        if isinstance(param, tuple):
            if len(param) != 1:
                raise TemplateArgumentsError(
                    f"{self.__name__} takes exactly one type parameter, got '{param}'")

            param = param[0]

        try:
            w = operator.index(param)
        except TypeError:
            raise TypeError(
                f"{self.__name__} type parameter must be an integer, not '{param}'") from None

        if w < 0:
            raise TypeError(
                f"{self.__name__} type parameter must be a non-negative integer, not '{w}'")

        return w

    @property
    def width(self) -> int:
        if self.is_generic():
            raise ValueError(f"width of the generic type '{self!r}' is not specified")

        return self.__args__[0]

    @property
    def limbs(self) -> int:
        """Number of 64-bit words needed for the representation

        >>> Uint[65].limbs
        2
        """
        return nlimbs(self.width)

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def max(self):
        return self.decode(self.mask)

    @property
    def min(self):
        return self.decode(0)

    @property
    def zero(self):
        return self.decode(0)

    @property
    def one(self):
        return self(1)

    def __str__(self):
        if not self.args:
            return 'u'

        return f'u{self.args[0]}'


def check_width(val, type_):
    if val < 0:
        raise ValueError(f"cannot represent negative numbers with unsigned type '{type_!r}'")

    if val > type_.mask:
        raise ValueError(f"{type_!r} cannot represent value '{val}'")


def _exponent(exp):
    if isinstance(exp, bool):
        raise TypeError(f"exponent must be an integer, not '{exp!r}'")

    try:
        exp = operator.index(exp)
    except TypeError:
        raise TypeError(f"exponent must be an integer, not '{exp!r}'") from None

    if exp < 0:
        raise ValueError(f"exponent must be non-negative, not '{exp}'")

    return exp


class Uint(int, metaclass=UintType):
    """Implements the :class:`Uint` type instance.

    Args:
       val: Integer value to convert to :class:`Uint`

    >>> Uint[16](0xffff)
    Uint[16](65535)

    If the type is not specified, the minimal width needed for the value is
    used:

    >>> Uint(7)
    Uint[3](7)

    """
    def __new__(cls, val: int = 0):
        if type(val) is cls:
            return val

        try:
            val = operator.index(val)
        except TypeError:
            raise ValueError(
                f"cannot convert '{val}' of type '{type(val).__name__}' to '{cls!r}'") from None

        if cls.is_generic():
            if val < 0:
                raise ValueError(f"cannot represent negative numbers with unsigned type '{cls!r}'")

            cls = cls[bitw(val)]

        check_width(val, cls)
        return super(Uint, cls).__new__(cls, val)

    def __repr__(self):
        return f'{type(self)!r}({int(self)})'

    def __str__(self):
        return f'{type(self)!s}({int(self)})'

    @class_and_instance_method
    @property
    def width(self):
        """Returns the number of bits used for the representation

        >>> Uint[8](0).width
        8
        """
        return type(self).width

    @class_and_instance_method
    @property
    def limbs(self):
        return type(self).limbs

    @class_and_instance_method
    @property
    def mask(self):
        return (1 << self.width) - 1

    def code(self):
        return int(self)

    @classmethod
    def decode(cls, val):
        """Creates the object from any int-convertible val, keeping only the
        bits that fit the width.

        >>> Uint[8].decode(0x1ff)
        Uint[8](255)
        """
        return cls(int(val) & cls.mask)

    def _operand(self, other):
        if isinstance(other, Uint):
            if type(other) is not type(self):
                raise TypeError(f"unsupported operand widths: '{type(self)!r}' and '{type(other)!r}'")

            return int(other)

        if isinstance(other, int):
            return int(type(self)(other))

        raise TypeError(f"unsupported operand type: '{type(other).__name__}' for '{type(self)!r}'")

    # Overflow detecting arithmetic

    def overflowing_add(self, other):
        res = int(self) + self._operand(other)
        return self.decode(res), res > self.mask

    def overflowing_sub(self, other):
        res = int(self) - self._operand(other)
        return self.decode(res), res < 0

    def overflowing_mul(self, other):
        res = int(self) * self._operand(other)
        return self.decode(res), res > self.mask

    def overflowing_pow(self, exp):
        """Raises to the power of ``exp``, returning the wrapped result and
        whether the exact result overflowed.

        >>> Uint[8](3).overflowing_pow(5)
        (Uint[8](243), False)
        >>> Uint[8](3).overflowing_pow(6)
        (Uint[8](217), True)
        """
        exp = _exponent(exp)
        base = int(self)

        if base >= 2 and exp * (base.bit_length() - 1) >= self.width:
            # base**exp >= 2**width, only the wrapped value needs computing
            return self.decode(pow(base, exp, 1 << self.width)), True

        res = base**exp
        return self.decode(res), res > self.mask

    def checked_add(self, other):
        res, overflow = self.overflowing_add(other)
        return None if overflow else res

    def checked_sub(self, other):
        res, overflow = self.overflowing_sub(other)
        return None if overflow else res

    def checked_mul(self, other):
        res, overflow = self.overflowing_mul(other)
        return None if overflow else res

    def checked_pow(self, exp):
        res, overflow = self.overflowing_pow(exp)
        return None if overflow else res

    def checked_div(self, other):
        other = self._operand(other)
        if other == 0:
            return None

        return type(self)(int(self) // other)

    def checked_rem(self, other):
        other = self._operand(other)
        if other == 0:
            return None

        return type(self)(int(self) % other)

    def wrapping_add(self, other):
        return self.overflowing_add(other)[0]

    def wrapping_sub(self, other):
        return self.overflowing_sub(other)[0]

    def wrapping_mul(self, other):
        return self.overflowing_mul(other)[0]

    def wrapping_pow(self, exp):
        return self.overflowing_pow(exp)[0]

    def saturating_add(self, other):
        res, overflow = self.overflowing_add(other)
        return type(self).max if overflow else res

    def saturating_sub(self, other):
        res, overflow = self.overflowing_sub(other)
        return type(self).min if overflow else res

    def saturating_mul(self, other):
        res, overflow = self.overflowing_mul(other)
        return type(self).max if overflow else res

    def saturating_pow(self, exp):
        res, overflow = self.overflowing_pow(exp)
        return type(self).max if overflow else res

    pow = wrapping_pow

    # Operators

    def __add__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return self.wrapping_add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return self.wrapping_sub(other)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(other).wrapping_sub(self)

    def __mul__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return self.wrapping_mul(other)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(int(self) // self._operand(other))

    def __rfloordiv__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(other) // self

    def __mod__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(int(self) % self._operand(other))

    def __rmod__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(other) % self

    def __divmod__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return self // other, self % other

    def __pow__(self, exp, mod=None):
        if mod is not None:
            return NotImplemented

        return self.wrapping_pow(exp)

    def __neg__(self):
        return self.decode(-int(self))

    def __pos__(self):
        return self

    def __abs__(self):
        return self

    def __invert__(self):
        return self.decode(~int(self))

    def __and__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(int(self) & self._operand(other))

    __rand__ = __and__

    def __or__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(int(self) | self._operand(other))

    __ror__ = __or__

    def __xor__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(int(self) ^ self._operand(other))

    __rxor__ = __xor__

    def __lshift__(self, shamt):
        shamt = _exponent(shamt)
        if shamt >= self.width:
            return type(self).zero

        return self.decode(int(self) << shamt)

    def __rshift__(self, shamt):
        return type(self)(int(self) >> _exponent(shamt))

    # Bit inspection

    def bit_len(self):
        return int(self).bit_length()

    def leading_zeros(self):
        return self.width - self.bit_len()

    def trailing_zeros(self):
        val = int(self)
        if val == 0:
            return self.width

        return (val & -val).bit_length() - 1

    def count_ones(self):
        return bin(int(self)).count('1')

    def as_limbs(self):
        """Returns the little-endian 64-bit words of the representation

        >>> Uint[128]((1 << 64) | 2).as_limbs()
        (2, 1)
        """
        val = int(self)
        return tuple((val >> (LIMB_BITS * i)) & LIMB_MASK for i in range(self.limbs))

    @classmethod
    def from_limbs(cls, limbs):
        limbs = tuple(limbs)
        if len(limbs) != cls.limbs:
            raise ValueError(f"{cls!r} is made of {cls.limbs} limbs, got {len(limbs)}")

        val = 0
        for i, limb in enumerate(limbs):
            limb = operator.index(limb)
            if limb < 0 or limb > LIMB_MASK:
                raise ValueError(f"limb '{limb}' does not fit {LIMB_BITS} bits")

            val |= limb << (LIMB_BITS * i)

        return cls(val)

    # Approximations and roots

    def most_significant_bits(self):
        return most_significant_bits(self)

    def approx_log2(self):
        return approx_log2(self)

    def approx_log10(self):
        return approx_log10(self)

    def approx_log(self, base):
        return approx_log(self, base)

    def checked_log2(self):
        return checked_log2(self)

    def checked_log(self, base):
        return checked_log(self, base)

    @classmethod
    def approx_pow2(cls, exp):
        return approx_pow2(cls, exp)

    def root(self, degree):
        """Computes the floor of the ``degree``-th root of the number.

        Raises ``ValueError`` if ``degree`` is zero.

        >>> Uint[64](0).root(2)
        Uint[64](0)
        >>> Uint[64](1).root(63)
        Uint[64](1)
        >>> Uint[63](0x1756800000000000).root(34)
        Uint[63](3)
        """
        return root(self, degree)

    def sqrt(self):
        return root(self, 2)
