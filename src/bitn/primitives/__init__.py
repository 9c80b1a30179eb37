"""Interchangeable 32-bit primitive strategies."""

from bitn.primitives.registry import available_impls, get_primitives

__all__ = [
    "available_impls",
    "get_primitives",
]
