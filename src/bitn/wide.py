"""64-bit values as pairs of 32-bit halves.

An ``Int64`` holds ``high * 2**32 + low``. Every 64-bit operation is
composed from the 32-bit operation set applied to the two halves, with
carries and cross-half bits threaded explicitly.
"""

import math
import operator

from pydantic import BaseModel, ConfigDict, Field

from bitn.errors import InvalidArgumentError, PrecisionExceededError
from bitn.fixed import (
    ByteSource,
    FixedWidth,
    as_bytes,
    byte_offset,
    require_bytes,
    shift_amount,
)

MASK32 = 0xFFFFFFFF
MODULUS32 = 1 << 32
MASK64 = (1 << 64) - 1
# Largest high half whose value still fits in a double's 53-bit mantissa.
MAX_SAFE_HIGH = 0x001FFFFF
MAX_SAFE_INTEGER = (1 << 53) - 1


class Int64(BaseModel):
    """Immutable 64-bit unsigned value as a (high, low) pair."""

    model_config = ConfigDict(frozen=True)

    high: int = Field(default=0, ge=0, le=MASK32, strict=True)
    low: int = Field(default=0, ge=0, le=MASK32, strict=True)

    def as_tuple(self) -> tuple[int, int]:
        return (self.high, self.low)

    def __int__(self) -> int:
        return (self.high << 32) | self.low


type Int64Like = Int64 | tuple[int, int]


def coerce(value: Int64Like) -> Int64:
    if isinstance(value, Int64):
        return value
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return Int64(high=value[0], low=value[1])
    raise TypeError(
        "Expected Int64 or a (high, low) pair, "
        f"got {type(value).__name__}"
    )


class Wide64:
    """64-bit operation set composed from a 32-bit ``FixedWidth``."""

    width = 64
    byte_length = 8
    label = "u64"

    def __init__(self, ops32: FixedWidth | None = None):
        if ops32 is None:
            ops32 = FixedWidth(32)
        if ops32.width != 32:
            raise ValueError("Wide64 requires a 32-bit operation set")
        self.ops32 = ops32

    def __repr__(self) -> str:
        return "Wide64()"

    # Construction and inspection

    def new(self, high: int = 0, low: int = 0) -> Int64:
        return Int64(high=high, low=low)

    def is_int64(self, value: object) -> bool:
        return isinstance(value, Int64)

    def eq(self, a: Int64Like, b: Int64Like) -> bool:
        a, b = coerce(a), coerce(b)
        return a.high == b.high and a.low == b.low

    def is_zero(self, x: Int64Like) -> bool:
        x = coerce(x)
        return x.high == 0 and x.low == 0

    def to_hex(self, x: Int64Like) -> str:
        x = coerce(x)
        return f"{x.high:08X}{x.low:08X}"

    # Bitwise operations

    def band(self, a: Int64Like, b: Int64Like) -> Int64:
        a, b = coerce(a), coerce(b)
        o = self.ops32
        return Int64(high=o.band(a.high, b.high), low=o.band(a.low, b.low))

    def bor(self, a: Int64Like, b: Int64Like) -> Int64:
        a, b = coerce(a), coerce(b)
        o = self.ops32
        return Int64(high=o.bor(a.high, b.high), low=o.bor(a.low, b.low))

    def bxor(self, a: Int64Like, b: Int64Like) -> Int64:
        a, b = coerce(a), coerce(b)
        o = self.ops32
        return Int64(high=o.bxor(a.high, b.high), low=o.bxor(a.low, b.low))

    def bnot(self, a: Int64Like) -> Int64:
        a = coerce(a)
        return Int64(high=self.ops32.bnot(a.high), low=self.ops32.bnot(a.low))

    # Shifts

    def lshift(self, x: Int64Like, n: int) -> Int64:
        x = coerce(x)
        n = shift_amount(n)
        o = self.ops32
        if n == 0:
            return x
        if n >= 64:
            return Int64()
        if n >= 32:
            return Int64(high=o.lshift(x.low, n - 32), low=0)
        high = o.bor(o.lshift(x.high, n), o.rshift(x.low, 32 - n))
        return Int64(high=high, low=o.lshift(x.low, n))

    def rshift(self, x: Int64Like, n: int) -> Int64:
        x = coerce(x)
        n = shift_amount(n)
        o = self.ops32
        if n == 0:
            return x
        if n >= 64:
            return Int64()
        if n >= 32:
            return Int64(high=0, low=o.rshift(x.high, n - 32))
        low = o.bor(o.rshift(x.low, n), o.lshift(x.high, 32 - n))
        return Int64(high=o.rshift(x.high, n), low=low)

    def arshift(self, x: Int64Like, n: int) -> Int64:
        """Arithmetic right shift; bit 31 of ``high`` is the sign."""
        x = coerce(x)
        n = shift_amount(n)
        o = self.ops32
        if n == 0:
            return x
        is_negative = o.band(x.high, 0x80000000) != 0
        fill = MASK32 if is_negative else 0
        if n >= 64:
            return Int64(high=fill, low=fill)
        if n >= 32:
            return Int64(high=fill, low=o.arshift(x.high, n - 32))
        low = o.bor(o.rshift(x.low, n), o.lshift(x.high, 32 - n))
        return Int64(high=o.arshift(x.high, n), low=low)

    # Rotates

    def rol(self, x: Int64Like, n: int) -> Int64:
        x = coerce(x)
        n = operator.index(n) % 64
        if n == 0:
            return x
        high, low = x.high, x.low
        if n == 32:
            return Int64(high=low, low=high)
        if n > 32:
            high, low = low, high
            n -= 32
        o = self.ops32
        return Int64(
            high=o.bor(o.lshift(high, n), o.rshift(low, 32 - n)),
            low=o.bor(o.lshift(low, n), o.rshift(high, 32 - n)),
        )

    def ror(self, x: Int64Like, n: int) -> Int64:
        x = coerce(x)
        n = operator.index(n) % 64
        if n == 0:
            return x
        high, low = x.high, x.low
        if n == 32:
            return Int64(high=low, low=high)
        if n > 32:
            high, low = low, high
            n -= 32
        o = self.ops32
        return Int64(
            high=o.bor(o.rshift(high, n), o.lshift(low, 32 - n)),
            low=o.bor(o.rshift(low, n), o.lshift(high, 32 - n)),
        )

    # Arithmetic

    def add(self, a: Int64Like, b: Int64Like) -> Int64:
        """Wraparound addition modulo ``2**64``."""
        a, b = coerce(a), coerce(b)
        low = a.low + b.low
        carry = 0
        if low >= MODULUS32:
            carry = 1
            low -= MODULUS32
        high = (a.high + b.high + carry) % MODULUS32
        return Int64(high=high, low=low)

    # Byte codec

    def to_be_bytes(self, x: Int64Like) -> bytes:
        x = coerce(x)
        return self.ops32.to_be_bytes(x.high) + self.ops32.to_be_bytes(x.low)

    def to_le_bytes(self, x: Int64Like) -> bytes:
        x = coerce(x)
        return self.ops32.to_le_bytes(x.low) + self.ops32.to_le_bytes(x.high)

    def from_be_bytes(self, data: ByteSource, offset: int = 0) -> Int64:
        buf, offset = self._checked(data, offset)
        high = self.ops32.from_be_bytes(buf, offset)
        low = self.ops32.from_be_bytes(buf, offset + 4)
        return Int64(high=high, low=low)

    def from_le_bytes(self, data: ByteSource, offset: int = 0) -> Int64:
        buf, offset = self._checked(data, offset)
        low = self.ops32.from_le_bytes(buf, offset)
        high = self.ops32.from_le_bytes(buf, offset + 4)
        return Int64(high=high, low=low)

    def _checked(self, data: ByteSource, offset: int) -> tuple[bytes, int]:
        offset = byte_offset(offset)
        buf = as_bytes(data)
        require_bytes(buf, offset, self.byte_length, self.label)
        return buf, offset

    # Numeric conversion

    def to_int(self, x: Int64Like) -> int:
        """Exact integer value of the pair."""
        return int(coerce(x))

    def from_int(self, value: int) -> Int64:
        """Pair for ``value`` reduced modulo ``2**64``."""
        value = operator.index(value) & MASK64
        return Int64(high=value >> 32, low=value & MASK32)

    def to_number(self, x: Int64Like, strict: bool = False) -> float:
        """Value as an IEEE-754 double.

        Values above ``2**53 - 1`` cannot be represented exactly. With
        ``strict`` they raise ``PrecisionExceededError``; otherwise the
        nearest double is returned.
        """
        x = coerce(x)
        if strict and x.high > MAX_SAFE_HIGH:
            raise PrecisionExceededError(
                "Value exceeds 53-bit precision "
                f"(max: {MAX_SAFE_INTEGER}): 0x{self.to_hex(x)}"
            )
        return float(x.high * MODULUS32 + x.low)

    def from_number(self, value: int | float) -> Int64:
        """Pair for a number; floats are floored, then wrapped to 64 bits."""
        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidArgumentError(
                    f"Cannot convert non-finite value {value}"
                )
            value = math.floor(value)
        return self.from_int(value)
