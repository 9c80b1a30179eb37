"""Fixed-width unsigned bitwise operations for 16, 32 and 64 bits."""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _dist_version

from bitn import bit16, bit32, bit64
from bitn._compat import impl_name
from bitn.errors import (
    BitnError,
    InsufficientDataError,
    InvalidArgumentError,
    PrecisionExceededError,
)
from bitn.wide import Int64

try:
    __version__ = _dist_version("bitn")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "dev"


def version() -> str:
    return __version__


__all__ = [
    "BitnError",
    "InsufficientDataError",
    "Int64",
    "InvalidArgumentError",
    "PrecisionExceededError",
    "__version__",
    "bit16",
    "bit32",
    "bit64",
    "impl_name",
    "version",
]
