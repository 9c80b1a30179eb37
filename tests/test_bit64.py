import random

import pytest
from pydantic import ValidationError

from bitn import bit64
from bitn.bit64 import Int64
from bitn.errors import (
    InsufficientDataError,
    InvalidArgumentError,
    PrecisionExceededError,
)

MASK32 = 0xFFFFFFFF
MASK64 = (1 << 64) - 1


def _pair(value: int) -> Int64:
    return Int64(high=(value >> 32) & MASK32, low=value & MASK32)


def _sample_values(seed: int, count: int = 48) -> list[int]:
    rng = random.Random(seed)
    edges = [
        0,
        1,
        MASK32,
        1 << 32,
        1 << 63,
        MASK64,
        0x123456789ABCDEF0,
        0x7FFFFFFFFFFFFFFF,
    ]
    return edges + [rng.randint(0, MASK64) for _ in range(count)]


class TestInt64Model:
    def test_defaults_to_zero(self) -> None:
        assert bit64.new() == Int64(high=0, low=0)
        assert bit64.is_zero(bit64.new())

    def test_is_immutable(self) -> None:
        value = bit64.new(1, 2)
        with pytest.raises(ValidationError):
            value.high = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        "halves",
        [(-1, 0), (0, 1 << 32), (True, 0), (0, 1.5), ("1", 0)],
    )
    def test_rejects_non_canonical_halves(
        self, halves: tuple[object, object]
    ) -> None:
        with pytest.raises(ValidationError):
            Int64(high=halves[0], low=halves[1])

    def test_is_int64(self) -> None:
        assert bit64.is_int64(bit64.new(1, 2))
        assert not bit64.is_int64((1, 2))

    def test_tuple_operands_are_accepted(self) -> None:
        assert bit64.band((MASK32, 0), (0x12345678, 1)) == Int64(
            high=0x12345678, low=0
        )

    def test_unsupported_operand_type(self) -> None:
        with pytest.raises(TypeError):
            bit64.bnot(5)  # type: ignore[arg-type]

    def test_hashable_and_comparable(self) -> None:
        assert {bit64.new(1, 2), bit64.new(1, 2)} == {bit64.new(1, 2)}
        assert bit64.eq((1, 2), bit64.new(1, 2))
        assert not bit64.eq((1, 2), (2, 1))


class TestBitwise:
    def test_matches_native_sixty_four_bit(self) -> None:
        values = _sample_values(21)
        for a, b in zip(values, reversed(values)):
            pa, pb = _pair(a), _pair(b)
            assert bit64.to_int(bit64.band(pa, pb)) == a & b
            assert bit64.to_int(bit64.bor(pa, pb)) == a | b
            assert bit64.to_int(bit64.bxor(pa, pb)) == a ^ b
            assert bit64.to_int(bit64.bnot(pa)) == ~a & MASK64

    def test_xor_alias(self) -> None:
        assert bit64.xor is bit64.bxor
        assert bit64.is_zero(bit64.xor((3, 4), (3, 4)))


class TestShifts:
    @pytest.mark.parametrize("n", [0, 1, 4, 31, 32, 33, 48, 63, 64, 65, 200])
    def test_lshift_and_rshift_match_native(self, n: int) -> None:
        for x in _sample_values(22, count=16):
            assert bit64.to_int(bit64.lshift(_pair(x), n)) == (
                (x << n) & MASK64
            )
            assert bit64.to_int(bit64.rshift(_pair(x), n)) == x >> n

    @pytest.mark.parametrize("n", [0, 1, 4, 31, 32, 33, 48, 63, 64, 65, 200])
    def test_arshift_matches_signed_native(self, n: int) -> None:
        for x in _sample_values(23, count=16):
            signed = x - (1 << 64) if x >> 63 else x
            expected = (signed >> min(n, 63)) & MASK64
            assert bit64.to_int(bit64.arshift(_pair(x), n)) == expected

    def test_sign_fills_whole_result(self) -> None:
        result = bit64.arshift((0x80000000, 0), 63)
        assert result == Int64(high=MASK32, low=MASK32)

    def test_half_boundary_cases(self) -> None:
        assert bit64.lshift((0, 1), 32) == Int64(high=1, low=0)
        assert bit64.lshift((0, 0x80000000), 1) == Int64(high=1, low=0)
        assert bit64.rshift((1, 0), 1) == Int64(high=0, low=0x80000000)
        assert bit64.arshift((0x80000000, 0), 32) == Int64(
            high=MASK32, low=0x80000000
        )

    def test_zero_shift_returns_operand(self) -> None:
        value = bit64.new(0x80000000, 7)
        assert bit64.lshift(value, 0) == value
        assert bit64.rshift(value, 0) == value
        assert bit64.arshift(value, 0) == value

    def test_negative_shift_is_invalid(self) -> None:
        for fn in (bit64.lshift, bit64.rshift, bit64.arshift):
            with pytest.raises(InvalidArgumentError):
                fn((0, 1), -1)

    def test_aliases(self) -> None:
        assert bit64.lsl is bit64.lshift
        assert bit64.shr is bit64.rshift
        assert bit64.asr is bit64.arshift


class TestRotates:
    def test_sixteen_bit_rotation_crosses_halves(self) -> None:
        assert bit64.rol((0x12345678, 0x9ABCDEF0), 16) == Int64(
            high=0x56789ABC, low=0xDEF01234
        )

    def test_thirty_two_swaps_halves(self) -> None:
        assert bit64.rol((1, 2), 32) == Int64(high=2, low=1)
        assert bit64.ror((1, 2), 32) == Int64(high=2, low=1)

    @pytest.mark.parametrize("n", [0, 1, 16, 31, 32, 33, 47, 63, 64, -1, 130])
    def test_matches_native_rotation(self, n: int) -> None:
        k = n % 64
        for x in _sample_values(24, count=16):
            rol = ((x << k) | (x >> (64 - k))) & MASK64
            ror = ((x >> k) | (x << (64 - k))) & MASK64
            assert bit64.to_int(bit64.rol(_pair(x), n)) == rol
            assert bit64.to_int(bit64.ror(_pair(x), n)) == ror

    def test_rotate_round_trip(self) -> None:
        x = bit64.new(0xDEADBEEF, 0x01234567)
        for n in range(-70, 140, 7):
            assert bit64.rol(bit64.ror(x, n), n) == x
        assert bit64.rol(x, 64) == x


class TestAdd:
    def test_carry_propagates_into_high(self) -> None:
        assert bit64.add((0, MASK32), (0, 1)) == Int64(high=1, low=0)

    def test_wraps_at_sixty_four_bits(self) -> None:
        assert bit64.is_zero(bit64.add((MASK32, MASK32), (0, 1)))

    def test_matches_native_sum(self) -> None:
        values = _sample_values(25)
        for a, b in zip(values, values[1:]):
            total = bit64.add(_pair(a), _pair(b))
            assert bit64.to_int(total) == (a + b) & MASK64


class TestByteCodec:
    def test_encode(self) -> None:
        value = bit64.new(0x01020304, 0x05060708)
        assert bit64.to_be_bytes(value) == bytes(range(1, 9))
        assert bit64.to_le_bytes(value) == bytes(range(8, 0, -1))

    def test_round_trip(self) -> None:
        for x in _sample_values(26):
            pair = _pair(x)
            assert bit64.from_be_bytes(bit64.to_be_bytes(pair)) == pair
            assert bit64.from_le_bytes(bit64.to_le_bytes(pair)) == pair
            assert bit64.to_be_bytes(pair) == x.to_bytes(8, "big")

    def test_decode_at_offset(self) -> None:
        data = b"\xff" + bytes(range(1, 9))
        assert bit64.be_bytes_to_u64(data, 1) == Int64(
            high=0x01020304, low=0x05060708
        )

    def test_short_input(self) -> None:
        with pytest.raises(InsufficientDataError, match="u64"):
            bit64.from_be_bytes(bytes(7))
        with pytest.raises(InsufficientDataError):
            bit64.from_le_bytes(bytes(8), 1)


class TestNumericConversion:
    def test_to_hex(self) -> None:
        assert bit64.to_hex((0x1800, 0x1000)) == "0000180000001000"

    def test_to_number(self) -> None:
        assert bit64.to_number((1, 0)) == 4294967296.0
        assert bit64.to_number((0x1FFFFF, MASK32), strict=True) == float(
            (1 << 53) - 1
        )

    def test_strict_to_number_rejects_values_past_53_bits(self) -> None:
        with pytest.raises(PrecisionExceededError):
            bit64.to_number((0x00200000, 0), strict=True)

    def test_lenient_to_number_rounds(self) -> None:
        assert bit64.to_number((MASK32, MASK32)) == float(1 << 64)

    def test_from_number(self) -> None:
        assert bit64.from_number(4294967296) == Int64(high=1, low=0)
        assert bit64.from_number(4294967296.75) == Int64(high=1, low=0)
        assert bit64.from_number(-1) == Int64(high=MASK32, low=MASK32)

    def test_from_number_rejects_non_finite(self) -> None:
        with pytest.raises(InvalidArgumentError):
            bit64.from_number(float("nan"))

    def test_int_round_trip(self) -> None:
        for x in _sample_values(27):
            assert bit64.to_int(bit64.from_int(x)) == x
            assert int(bit64.from_int(x)) == x
        assert bit64.from_int(1 << 64) == bit64.new()
