"""Exception types raised by bitn operations.

Only three conditions are failures. Shifting past the width, rotating by
any amount, additive overflow and complementing boundary values all have
defined results and never raise.
"""


class BitnError(Exception):
    """Base class for bitn failures."""


class InvalidArgumentError(BitnError, ValueError):
    """Raised for a negative or non-integer shift amount or offset."""


class InsufficientDataError(BitnError, ValueError):
    """Raised when a byte parse runs past the end of its input."""


class PrecisionExceededError(BitnError, OverflowError):
    """Raised when a 64-bit value cannot be held exactly in a double."""
