"""32-bit primitives using integer arithmetic only.

No bitwise operator is used. Bits are peeled off with ``%`` and ``//``,
and shifts multiply or divide by exact integer powers of two, so no
intermediate value ever passes through a float.
"""

MASK32 = 0xFFFFFFFF
MODULUS32 = 0x100000000
SIGN32 = 0x80000000

IMPL_NAME = "integer arithmetic"

_POW2: tuple[int, ...] = tuple(2**i for i in range(33))


def _reduce(a: int) -> int:
    return a % MODULUS32


def band(a: int, b: int) -> int:
    a, b = _reduce(a), _reduce(b)
    r = 0
    for bit_val in _POW2[:32]:
        if a == 0 or b == 0:
            break
        if a % 2 == 1 and b % 2 == 1:
            r += bit_val
        a //= 2
        b //= 2
    return r


def bor(a: int, b: int) -> int:
    a, b = _reduce(a), _reduce(b)
    r = 0
    for bit_val in _POW2[:32]:
        if a == 0 and b == 0:
            break
        if a % 2 == 1 or b % 2 == 1:
            r += bit_val
        a //= 2
        b //= 2
    return r


def bxor(a: int, b: int) -> int:
    a, b = _reduce(a), _reduce(b)
    r = 0
    for bit_val in _POW2[:32]:
        if a == 0 and b == 0:
            break
        if a % 2 != b % 2:
            r += bit_val
        a //= 2
        b //= 2
    return r


def bnot(a: int) -> int:
    return MASK32 - _reduce(a)


def lshift(a: int, n: int) -> int:
    if n >= 32:
        return 0
    return (_reduce(a) * _POW2[n]) % MODULUS32


def rshift(a: int, n: int) -> int:
    if n >= 32:
        return 0
    return _reduce(a) // _POW2[n]


def arshift(a: int, n: int) -> int:
    a = _reduce(a)
    is_negative = a >= SIGN32
    if n >= 32:
        return MASK32 if is_negative else 0
    r = a // _POW2[n]
    if is_negative:
        # High n bits set; the low 32-n bits of r are untouched.
        r += MASK32 - (_POW2[32 - n] - 1)
    return r
