"""32-bit unsigned bitwise operations.

Values are plain ints in ``[0, 0xFFFFFFFF]``. Inputs outside that range are
reduced modulo ``2**32`` before use.
"""

from bitn.fixed import FixedWidth

_OPS = FixedWidth(32)

WIDTH = _OPS.width
MASK = _OPS.mask_value
SIGN_BIT = _OPS.sign_bit
BYTE_LENGTH = _OPS.byte_length

mask = _OPS.mask
band = _OPS.band
bor = _OPS.bor
bxor = _OPS.bxor
bnot = _OPS.bnot
lshift = _OPS.lshift
rshift = _OPS.rshift
arshift = _OPS.arshift
rol = _OPS.rol
ror = _OPS.ror
add = _OPS.add
to_be_bytes = _OPS.to_be_bytes
to_le_bytes = _OPS.to_le_bytes
from_be_bytes = _OPS.from_be_bytes
from_le_bytes = _OPS.from_le_bytes

u32_to_be_bytes = to_be_bytes
u32_to_le_bytes = to_le_bytes
be_bytes_to_u32 = from_be_bytes
le_bytes_to_u32 = from_le_bytes


def to_unsigned(n: int) -> int:
    """Reinterpret a signed 32-bit value (e.g. -1) as unsigned."""
    return mask(n)


__all__ = [
    "BYTE_LENGTH",
    "MASK",
    "SIGN_BIT",
    "WIDTH",
    "add",
    "arshift",
    "band",
    "be_bytes_to_u32",
    "bnot",
    "bor",
    "bxor",
    "from_be_bytes",
    "from_le_bytes",
    "le_bytes_to_u32",
    "lshift",
    "mask",
    "rol",
    "ror",
    "rshift",
    "to_be_bytes",
    "to_le_bytes",
    "to_unsigned",
    "u32_to_be_bytes",
    "u32_to_le_bytes",
]
