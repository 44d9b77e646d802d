import pytest
from fixint.typing import Uint


def test_add():
    res = Uint[8](200) + Uint[8](100)
    assert isinstance(res, Uint[8])
    assert res == 44

    assert Uint[8](200) + 100 == 44
    res = 100 + Uint[8](200)
    assert isinstance(res, Uint[8])
    assert res == 44


def test_sub():
    assert Uint[8](1) - Uint[8](2) == 255

    res = 5 - Uint[8](10)
    assert isinstance(res, Uint[8])
    assert res == 251


def test_mul():
    assert Uint[8](16) * Uint[8](16) == 0
    assert Uint[8](15) * 17 == 255
    assert isinstance(3 * Uint[8](5), Uint[8])


def test_div():
    assert Uint[8](7) // 2 == 3
    assert Uint[8](7) % 4 == 3
    assert divmod(Uint[8](7), 2) == (3, 1)

    res = 7 // Uint[8](2)
    assert isinstance(res, Uint[8])
    assert res == 3

    with pytest.raises(ZeroDivisionError):
        Uint[8](1) // 0

    with pytest.raises(ZeroDivisionError):
        Uint[8](1) % Uint[8](0)


def test_operand_width_mismatch():
    with pytest.raises(TypeError):
        Uint[8](1) + Uint[16](1)

    with pytest.raises(TypeError):
        Uint[8](1).checked_mul(Uint[9](1))

    with pytest.raises(ValueError):
        Uint[8](1) + 256


def test_unary():
    assert -Uint[8](1) == 255
    assert -Uint[8](0) == 0
    assert ~Uint[8](0) == 255
    assert ~Uint[0](0) == 0
    assert abs(Uint[8](5)) == 5


def test_bitwise():
    assert Uint[8](0xf0) & 0x3c == 0x30
    assert Uint[8](0xf0) | 0x0f == 0xff
    assert Uint[8](0xf0) ^ Uint[8](0xff) == 0x0f

    assert Uint[8](0x81) << 1 == 2
    assert Uint[8](0x81) << 8 == 0
    assert Uint[8](0x81) >> 7 == 1
    assert isinstance(Uint[8](0x81) >> 7, Uint[8])


def test_overflowing():
    assert Uint[8](255).overflowing_add(1) == (0, True)
    assert Uint[8](254).overflowing_add(1) == (255, False)
    assert Uint[8](0).overflowing_sub(1) == (255, True)
    assert Uint[8](16).overflowing_mul(16) == (0, True)


def test_checked():
    assert Uint[8](255).checked_add(1) is None
    assert Uint[8](0).checked_sub(1) is None
    assert Uint[8](16).checked_mul(16) is None
    assert Uint[8](15).checked_mul(17) == 255

    assert Uint[8](7).checked_div(0) is None
    assert Uint[8](7).checked_div(2) == 3
    assert Uint[8](7).checked_rem(0) is None
    assert Uint[8](7).checked_rem(3) == 1


def test_saturating():
    assert Uint[8](250).saturating_add(10) == 255
    assert Uint[8](5).saturating_sub(10) == 0
    assert Uint[8](16).saturating_mul(16) == 255
    assert Uint[8](2).saturating_pow(8) == 255
    assert Uint[8](2).saturating_pow(7) == 128


def test_pow():
    assert Uint[8](3)**5 == 243
    assert Uint[8](3)**6 == 217
    assert Uint[8](2)**Uint[8](3) == 8
    assert Uint[8](3).pow(6) == 217

    assert Uint[8](3).overflowing_pow(6) == (217, True)
    assert Uint[8](2).overflowing_pow(8) == (0, True)
    assert Uint[8](2).checked_pow(7) == 128
    assert Uint[64](2).checked_pow(64) is None
    assert Uint[64](2).checked_pow(63) == 2**63


def test_pow_edge_cases():
    assert Uint[8](0).checked_pow(0) == 1
    assert Uint[8](0).checked_pow(8181384194531620469) == 0
    assert Uint[8](1).checked_pow(8181384194531620469) == 1
    assert Uint[0](0).overflowing_pow(0) == (0, True)
    assert Uint[0](0).overflowing_pow(1) == (0, False)


def test_pow_huge_exponent():
    res, overflow = Uint[256](3).overflowing_pow(10**18)

    assert overflow
    assert res == pow(3, 10**18, 2**256)


def test_pow_invalid_exponent():
    with pytest.raises(ValueError):
        Uint[8](2).checked_pow(-1)

    with pytest.raises(TypeError):
        Uint[8](2).checked_pow(1.5)

    with pytest.raises(TypeError):
        Uint[8](2).checked_pow(True)


def test_bits():
    assert Uint[64](0).bit_len() == 0
    assert Uint[64](0x80).bit_len() == 8
    assert Uint[64](1).leading_zeros() == 63
    assert Uint[64](0).leading_zeros() == 64
    assert Uint[64](8).trailing_zeros() == 3
    assert Uint[64](0).trailing_zeros() == 64
    assert Uint[8](0xf0).count_ones() == 4


def test_limbs():
    assert Uint[128]((1 << 64) | 2).as_limbs() == (2, 1)
    assert Uint[65](1).as_limbs() == (1, 0)
    assert Uint[0](0).as_limbs() == ()

    assert Uint[65].from_limbs([1, 1]) == (1 << 64) + 1
    assert Uint[0].from_limbs([]) == 0

    val = Uint[1024](3**600)
    assert Uint[1024].from_limbs(val.as_limbs()) == val


def test_limbs_invalid():
    with pytest.raises(ValueError):
        Uint[65].from_limbs([1])

    with pytest.raises(ValueError):
        Uint[65].from_limbs([0, 2])

    with pytest.raises(ValueError):
        Uint[64].from_limbs([2**64])


def test_code():
    assert Uint[8](5).code() == 5
    assert type(Uint[8](5).code()) is int
