"""The 32-bit primitive set selected for this process.

The strategy is resolved once, at import, from ``BITN_IMPL`` and never
changes afterwards. Everything else in bitn calls through the names
bound here.
"""

import logging

from bitn.config import load_settings
from bitn.primitives.registry import get_primitives

_LOGGER = logging.getLogger(__name__)

SETTINGS = load_settings()
_primitives = get_primitives(SETTINGS.impl)

_LOGGER.debug(
    "bitn primitives: %s (%s)", SETTINGS.impl.value, _primitives.IMPL_NAME
)

band = _primitives.band
bor = _primitives.bor
bxor = _primitives.bxor
bnot = _primitives.bnot
lshift = _primitives.lshift
rshift = _primitives.rshift
arshift = _primitives.arshift


def impl_name() -> str:
    return str(_primitives.IMPL_NAME)
