"""Maps primitive strategies to their implementing modules."""

import importlib
from types import ModuleType

from bitn.config import Impl

_IMPL_MODULES: dict[Impl, str] = {
    Impl.NATIVE: "bitn.primitives.native",
    Impl.CTYPES: "bitn.primitives.ctypes_lib",
    Impl.ARITHMETIC: "bitn.primitives.arithmetic",
}

# Every strategy module must define these names.
PRIMITIVE_NAMES: tuple[str, ...] = (
    "band",
    "bor",
    "bxor",
    "bnot",
    "lshift",
    "rshift",
    "arshift",
)


def available_impls() -> list[Impl]:
    return list(_IMPL_MODULES)


def get_primitives(impl: Impl | str) -> ModuleType:
    """Return the primitive module for a strategy name."""
    try:
        impl = Impl(impl)
    except ValueError as err:
        raise ValueError(f"Unsupported primitive strategy: {impl}") from err
    module: ModuleType = importlib.import_module(_IMPL_MODULES[impl])
    missing = [name for name in PRIMITIVE_NAMES if not hasattr(module, name)]
    if missing:
        raise ValueError(
            f"Primitive strategy '{impl.value}' is missing: "
            + ", ".join(missing)
        )
    return module
