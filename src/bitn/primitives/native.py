"""32-bit primitives on Python's integer operators."""

MASK32 = 0xFFFFFFFF
SIGN32 = 0x80000000

IMPL_NAME = "native operators"


def band(a: int, b: int) -> int:
    return a & b & MASK32


def bor(a: int, b: int) -> int:
    return (a | b) & MASK32


def bxor(a: int, b: int) -> int:
    return (a ^ b) & MASK32


def bnot(a: int) -> int:
    return ~a & MASK32


def lshift(a: int, n: int) -> int:
    if n >= 32:
        return 0
    return ((a & MASK32) << n) & MASK32


def rshift(a: int, n: int) -> int:
    if n >= 32:
        return 0
    return (a & MASK32) >> n


def arshift(a: int, n: int) -> int:
    a &= MASK32
    is_negative = a >= SIGN32
    if n >= 32:
        return MASK32 if is_negative else 0
    r = a >> n
    if is_negative:
        r |= (MASK32 << (32 - n)) & MASK32
    return r
