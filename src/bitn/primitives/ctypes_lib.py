"""32-bit primitives on the fixed-width integer types of ``ctypes``.

``c_uint32`` wraps on construction, so masking comes for free. The
arithmetic shift is taken on ``c_int32``, whose signed result has to be
converted back to the unsigned canonical form.
"""

import ctypes

IMPL_NAME = "ctypes fixed-width integers"

_u32 = ctypes.c_uint32
_i32 = ctypes.c_int32


def to_unsigned(n: int) -> int:
    """Convert a (possibly signed) 32-bit value to unsigned."""
    return _u32(n).value


def band(a: int, b: int) -> int:
    return _u32(_u32(a).value & _u32(b).value).value


def bor(a: int, b: int) -> int:
    return _u32(_u32(a).value | _u32(b).value).value


def bxor(a: int, b: int) -> int:
    return _u32(_u32(a).value ^ _u32(b).value).value


def bnot(a: int) -> int:
    return _u32(~_u32(a).value).value


def lshift(a: int, n: int) -> int:
    if n >= 32:
        return 0
    return _u32(_u32(a).value << n).value


def rshift(a: int, n: int) -> int:
    if n >= 32:
        return 0
    return _u32(a).value >> n


def arshift(a: int, n: int) -> int:
    signed = _i32(_u32(a).value).value
    if n >= 32:
        return to_unsigned(-1 if signed < 0 else 0)
    return to_unsigned(signed >> n)
