"""64-bit unsigned bitwise operations on ``Int64`` (high, low) pairs.

Operands may be ``Int64`` instances or plain ``(high, low)`` tuples; results
are always ``Int64``. Use ``to_int``/``from_int`` to move between pairs and
Python integers.
"""

from bitn.wide import Int64, Int64Like, Wide64

_OPS = Wide64()

WIDTH = _OPS.width
BYTE_LENGTH = _OPS.byte_length
MASK = Int64(high=0xFFFFFFFF, low=0xFFFFFFFF)

new = _OPS.new
is_int64 = _OPS.is_int64
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
to_hex = _OPS.to_hex
to_int = _OPS.to_int
from_int = _OPS.from_int
to_number = _OPS.to_number
from_number = _OPS.from_number
eq = _OPS.eq
is_zero = _OPS.is_zero

u64_to_be_bytes = to_be_bytes
u64_to_le_bytes = to_le_bytes
be_bytes_to_u64 = from_be_bytes
le_bytes_to_u64 = from_le_bytes

# Older spellings.
xor = bxor
shr = rshift
lsl = lshift
asr = arshift

__all__ = [
    "BYTE_LENGTH",
    "Int64",
    "Int64Like",
    "MASK",
    "WIDTH",
    "add",
    "arshift",
    "asr",
    "band",
    "be_bytes_to_u64",
    "bnot",
    "bor",
    "bxor",
    "eq",
    "from_be_bytes",
    "from_int",
    "from_le_bytes",
    "from_number",
    "is_int64",
    "is_zero",
    "le_bytes_to_u64",
    "lsl",
    "lshift",
    "new",
    "rol",
    "ror",
    "rshift",
    "shr",
    "to_be_bytes",
    "to_hex",
    "to_int",
    "to_le_bytes",
    "to_number",
    "u64_to_be_bytes",
    "u64_to_le_bytes",
    "xor",
]
