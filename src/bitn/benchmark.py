"""Micro-benchmarks for the per-width operation sets."""

import importlib
import time
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

from bitn import _compat
from bitn.selftest import MODULE_NAMES

DEFAULT_ITERATIONS = 100_000


class BenchmarkResult(BaseModel):
    name: str
    iterations: int = Field(ge=1)
    total_seconds: float = Field(ge=0.0)

    @property
    def ns_per_op(self) -> float:
        return self.total_seconds * 1e9 / self.iterations

    @property
    def ops_per_second(self) -> float:
        if self.total_seconds == 0:
            return float("inf")
        return self.iterations / self.total_seconds


class BenchmarkReport(BaseModel):
    module: str
    impl: str
    results: list[BenchmarkResult] = Field(default_factory=list)


def benchmark_op(
    name: str,
    fn: Callable[[], Any],
    iterations: int = DEFAULT_ITERATIONS,
) -> BenchmarkResult:
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")
    # One untimed call so import and cache effects stay out of the timing.
    fn()
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    elapsed = time.perf_counter() - start
    return BenchmarkResult(
        name=name, iterations=iterations, total_seconds=elapsed
    )


def _operands(module_name: str) -> tuple[Any, Any, Any]:
    if module_name == "bit16":
        return 0xAAAA, 0x5555, 0x8000
    if module_name == "bit32":
        return 0xAAAAAAAA, 0x55555555, 0x80000000
    return (
        (0xAAAAAAAA, 0x55555555),
        (0x55555555, 0xAAAAAAAA),
        (0x80000000, 0),
    )


def run_benchmarks(
    module_name: str,
    iterations: int = DEFAULT_ITERATIONS,
) -> BenchmarkReport:
    """Time the standard operation set of one width module."""
    if module_name not in MODULE_NAMES:
        valid = ", ".join(MODULE_NAMES)
        raise ValueError(f"Unknown module '{module_name}'; expected {valid}")
    mod = importlib.import_module(f"bitn.{module_name}")
    a, b, negative = _operands(module_name)
    if module_name == "bit64":
        a, b, negative = mod.new(*a), mod.new(*b), mod.new(*negative)
    encoded_be = mod.to_be_bytes(a)
    encoded_le = mod.to_le_bytes(a)

    ops: list[tuple[str, Callable[[], Any]]] = [
        ("band", lambda: mod.band(a, b)),
        ("bor", lambda: mod.bor(a, b)),
        ("bxor", lambda: mod.bxor(a, b)),
        ("bnot", lambda: mod.bnot(a)),
        ("lshift", lambda: mod.lshift(a, 8)),
        ("rshift", lambda: mod.rshift(a, 8)),
        ("arshift", lambda: mod.arshift(negative, 8)),
        ("rol", lambda: mod.rol(a, 8)),
        ("ror", lambda: mod.ror(a, 8)),
        ("add", lambda: mod.add(a, b)),
        ("to_be_bytes", lambda: mod.to_be_bytes(a)),
        ("to_le_bytes", lambda: mod.to_le_bytes(a)),
        ("from_be_bytes", lambda: mod.from_be_bytes(encoded_be)),
        ("from_le_bytes", lambda: mod.from_le_bytes(encoded_le)),
    ]
    if module_name != "bit64":
        ops.append(("mask", lambda: mod.mask(0x123456789)))

    report = BenchmarkReport(module=module_name, impl=_compat.impl_name())
    for name, fn in ops:
        report.results.append(benchmark_op(name, fn, iterations))
    return report
