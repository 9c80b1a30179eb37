"""Width-parameterized unsigned integer operations for 16 and 32 bits.

Every operation first folds its operands into canonical form, a value in
``[0, 2**width - 1]``, and returns a canonical result. The arithmetic is
delegated to a set of 32-bit primitives (see ``bitn.primitives``); widths
narrower than 32 bits are computed on 32-bit words and masked down.
"""

import math
import operator
from collections.abc import Sequence
from types import ModuleType
from typing import Literal

from bitn import _compat
from bitn.errors import InsufficientDataError, InvalidArgumentError

SUPPORTED_WIDTHS: frozenset[int] = frozenset({16, 32})

type ByteSource = bytes | bytearray | memoryview | Sequence[int]


def shift_amount(n: int) -> int:
    """Validate a shift amount: an integer, never negative."""
    try:
        n = operator.index(n)
    except TypeError as err:
        raise InvalidArgumentError(
            f"Shift amount must be an integer, got {type(n).__name__}"
        ) from err
    if n < 0:
        raise InvalidArgumentError(
            f"Shift amount must be non-negative, got {n}"
        )
    return n


def byte_offset(offset: int) -> int:
    try:
        offset = operator.index(offset)
    except TypeError as err:
        raise InvalidArgumentError(
            f"Offset must be an integer, got {type(offset).__name__}"
        ) from err
    if offset < 0:
        raise InvalidArgumentError(
            f"Offset must be non-negative, got {offset}"
        )
    return offset


def as_bytes(data: ByteSource) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        raise TypeError("Expected a bytes-like object or int sequence, got str")
    return bytes(data)


def require_bytes(buf: bytes, offset: int, count: int, label: str) -> None:
    available = max(len(buf) - offset, 0)
    if available < count:
        raise InsufficientDataError(
            f"Insufficient bytes for {label}: need {count} at offset "
            f"{offset}, have {available}"
        )


class FixedWidth:
    """The operation set for one width, backed by 32-bit primitives."""

    def __init__(self, width: int, primitives: ModuleType | None = None):
        if width not in SUPPORTED_WIDTHS:
            valid = ", ".join(str(w) for w in sorted(SUPPORTED_WIDTHS))
            raise ValueError(f"Unsupported width {width}; expected {valid}")
        self.width = width
        self.mask_value = (1 << width) - 1
        self.sign_bit = 1 << (width - 1)
        self.byte_length = width // 8
        self.label = f"u{width}"
        self._p = primitives if primitives is not None else _compat
        # Distance from the top of a 32-bit word.
        self._pad = 32 - width

    def __repr__(self) -> str:
        return f"FixedWidth({self.width})"

    def mask(self, n: int | float) -> int:
        """Reduce ``n`` modulo ``2**width``; floats are floored first."""
        if isinstance(n, float):
            if not math.isfinite(n):
                raise InvalidArgumentError(f"Cannot mask non-finite value {n}")
            n = math.floor(n)
        else:
            n = operator.index(n)
        return self._p.band(n, self.mask_value)

    # Bitwise operations

    def band(self, a: int, b: int) -> int:
        return self._p.band(self.mask(a), self.mask(b))

    def bor(self, a: int, b: int) -> int:
        return self._p.bor(self.mask(a), self.mask(b))

    def bxor(self, a: int, b: int) -> int:
        return self._p.bxor(self.mask(a), self.mask(b))

    def bnot(self, a: int) -> int:
        return self._p.band(self._p.bnot(self.mask(a)), self.mask_value)

    # Shifts

    def lshift(self, a: int, n: int) -> int:
        n = shift_amount(n)
        a = self.mask(a)
        if n == 0:
            return a
        if n >= self.width:
            return 0
        return self._p.band(self._p.lshift(a, n), self.mask_value)

    def rshift(self, a: int, n: int) -> int:
        n = shift_amount(n)
        a = self.mask(a)
        if n == 0:
            return a
        if n >= self.width:
            return 0
        return self._p.rshift(a, n)

    def arshift(self, a: int, n: int) -> int:
        """Right shift that fills vacated high bits with the sign bit."""
        n = shift_amount(n)
        a = self.mask(a)
        if n == 0:
            return a
        if self._pad == 0:
            return self._p.arshift(a, n)
        # Lift the sign bit to bit 31, shift, then drop back down.
        word = self._p.lshift(a, self._pad)
        return self._p.rshift(self._p.arshift(word, n), self._pad)

    # Rotates

    def rol(self, x: int, n: int) -> int:
        n = operator.index(n) % self.width
        x = self.mask(x)
        if n == 0:
            return x
        p = self._p
        return p.band(
            p.bor(p.lshift(x, n), p.rshift(x, self.width - n)),
            self.mask_value,
        )

    def ror(self, x: int, n: int) -> int:
        n = operator.index(n) % self.width
        x = self.mask(x)
        if n == 0:
            return x
        p = self._p
        return p.band(
            p.bor(p.rshift(x, n), p.lshift(x, self.width - n)),
            self.mask_value,
        )

    # Arithmetic

    def add(self, a: int, b: int) -> int:
        """Wraparound addition modulo ``2**width``."""
        return self._p.band(self.mask(a) + self.mask(b), self.mask_value)

    # Byte codec

    def to_be_bytes(self, x: int) -> bytes:
        return self.mask(x).to_bytes(self.byte_length, "big")

    def to_le_bytes(self, x: int) -> bytes:
        return self.mask(x).to_bytes(self.byte_length, "little")

    def from_be_bytes(self, data: ByteSource, offset: int = 0) -> int:
        return self._parse(data, offset, "big")

    def from_le_bytes(self, data: ByteSource, offset: int = 0) -> int:
        return self._parse(data, offset, "little")

    def _parse(
        self,
        data: ByteSource,
        offset: int,
        byteorder: Literal["big", "little"],
    ) -> int:
        offset = byte_offset(offset)
        buf = as_bytes(data)
        require_bytes(buf, offset, self.byte_length, self.label)
        chunk = buf[offset : offset + self.byte_length]
        return int.from_bytes(chunk, byteorder)
