"""Process-wide configuration, read from the environment."""

import os
from enum import Enum

from pydantic import BaseModel, Field

BITN_IMPL_ENV = "BITN_IMPL"


class Impl(str, Enum):
    NATIVE = "native"
    CTYPES = "ctypes"
    ARITHMETIC = "arithmetic"


class BitnSettings(BaseModel):
    impl: Impl = Field(
        default=Impl.NATIVE,
        description="Strategy backing the 32-bit primitive operations",
    )


def load_settings() -> BitnSettings:
    """Build settings from ``BITN_IMPL``, defaulting to native operators."""
    configured = os.environ.get(BITN_IMPL_ENV)
    if not configured:
        return BitnSettings()

    normalized = configured.strip().lower()
    allowed = {impl.value for impl in Impl}
    if normalized not in allowed:
        valid = ", ".join(sorted(allowed))
        raise ValueError(
            f"Invalid {BITN_IMPL_ENV}={configured!r}. Valid values: {valid}"
        )
    return BitnSettings(impl=Impl(normalized))
