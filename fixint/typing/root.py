"""Floor of the integer root of fixed width unsigned integers.

The root is computed in two stages. A floating point estimate, obtained by a
``log2``/``pow2`` round trip, seeds the Newton's method for integer roots,
which is then carried out with exact fixed width integer arithmetic:

    x[n+1] = (value // x[n]**(degree-1) + (degree-1)*x[n]) // degree

See <https://en.wikipedia.org/wiki/Integer_square_root#Algorithm_using_Newton's_method>
and <https://gmplib.org/manual/Nth-Root-Algorithm>
"""

import logging
import operator

import attr

from fixint.conf import typing_log


class RootSeedError(ArithmeticError):
    pass


@attr.s(auto_attribs=True, frozen=True)
class RootStep:
    """An estimate of the root accepted by the iteration.

    ``index`` is 0 for the seed (or for the result of an input that needed no
    iteration) and ``overflow`` tells whether ``estimate**(degree-1)`` of the
    previous estimate overflowed while computing this one.
    """
    index: int
    estimate: object
    overflow: bool = False


def check_degree(degree):
    if isinstance(degree, bool):
        raise TypeError(f"degree must be an integer, not '{degree!r}'")

    try:
        degree = operator.index(degree)
    except TypeError:
        raise TypeError(f"degree must be an integer, not '{degree!r}'") from None

    if degree <= 0:
        raise ValueError("degree must be greater than zero")

    return degree


def trivial_root(value, degree):
    """Returns the root for inputs that need no iteration, ``None`` otherwise."""
    dtype = type(value)

    # Also covers the zero width type
    if value == 0:
        return dtype.zero

    # Any non-zero value is below 2**width <= 2**degree
    if degree >= dtype.width:
        return dtype.one

    if degree == 1:
        return value

    return None


def root_seed(value, degree):
    # Root is less than the value, so the approximation always fits the width
    seed = type(value).approx_pow2(value.approx_log2() / degree)
    if seed is None:
        raise RootSeedError(f"cannot seed the {degree}-th root of {value!r}")

    return seed


def newton_step(value, degree, estimate):
    """Computes the next Newton estimate.

    Returns the estimate and whether ``estimate**(degree-1)`` overflowed, in
    which case the estimate is too large for the division term to matter and
    it is taken to be zero.
    """
    dtype = type(value)

    power = estimate.checked_pow(degree - 1)
    if power is None:
        division = dtype.zero
    else:
        division = value // power

    return (division + dtype(degree - 1) * estimate) // dtype(degree), power is None


def root_steps(value, degree):
    """Yields a :class:`RootStep` for the seed and for every Newton estimate
    accepted before the iteration converges. The last yielded estimate is the
    root.

    Raises:
       TypeError: If ``degree`` is not an integer
       ValueError: If ``degree`` is zero
    """
    degree = check_degree(degree)

    res = trivial_root(value, degree)
    if res is not None:
        yield RootStep(0, res)
        return

    result = root_seed(value, degree)
    yield RootStep(0, result)

    # The estimates decrease while above the floor root. The first estimate
    # that does not decrease marks the previous one as the root. The first
    # step is always taken, since the seed may lie below the root.
    first = True
    index = 0
    while True:
        iterate, overflow = newton_step(value, degree, result)
        if not first and iterate >= result:
            return

        first = False
        index += 1
        result = iterate
        yield RootStep(index, result, overflow)


def root(value, degree):
    """Computes the floor of the ``degree``-th root of the fixed width unsigned
    integer ``value``, in the same type as ``value``.

    The number of Newton iterations is not capped. When the seed falls below
    the root, the first estimate may overshoot it by far, and each following
    estimate only shrinks by about ``(degree-1)/degree``. Degrees slightly
    below the width are thus slow: the 696-th root of a 1024-bit value can
    take over a hundred thousand iterations. The result is exact regardless.

    >>> root(Uint[64](0), 2)
    Uint[64](0)
    >>> root(Uint[63](0x0032da8b0f88575d), 64)
    Uint[63](1)
    """
    for step in root_steps(value, degree):
        pass

    log = typing_log()
    if log.isEnabledFor(logging.DEBUG):
        log.debug(f'{value!r}.root({degree}) = {step.estimate!r}, '
                  f'{step.index} Newton iterations')

    return step.estimate
