import pytest

from bitn.benchmark import BenchmarkResult, benchmark_op, run_benchmarks
from bitn.selftest import MODULE_NAMES


def test_benchmark_op_counts_calls() -> None:
    calls: list[int] = []
    result = benchmark_op("noop", lambda: calls.append(1), iterations=10)
    # One warm-up call plus the timed iterations.
    assert len(calls) == 11
    assert result.iterations == 10
    assert result.total_seconds >= 0.0
    assert result.ns_per_op >= 0.0


def test_benchmark_op_rejects_zero_iterations() -> None:
    with pytest.raises(ValueError):
        benchmark_op("noop", lambda: None, iterations=0)


def test_ops_per_second_handles_zero_elapsed() -> None:
    result = BenchmarkResult(name="x", iterations=5, total_seconds=0.0)
    assert result.ops_per_second == float("inf")


@pytest.mark.parametrize("module_name", MODULE_NAMES)
def test_run_benchmarks_times_standard_ops(module_name: str) -> None:
    report = run_benchmarks(module_name, iterations=3)
    names = [r.name for r in report.results]
    assert names[:4] == ["band", "bor", "bxor", "bnot"]
    assert "from_le_bytes" in names
    assert ("mask" in names) == (module_name != "bit64")
    assert all(r.iterations == 3 for r in report.results)


def test_run_benchmarks_unknown_module() -> None:
    with pytest.raises(ValueError, match="Unknown module"):
        run_benchmarks("bit128", iterations=1)
