import importlib
import logging
from types import ModuleType
from typing import Annotated, Any

import srsly
import typer

import bitn
from bitn import _compat
from bitn.benchmark import DEFAULT_ITERATIONS, run_benchmarks
from bitn.errors import BitnError
from bitn.primitives import available_impls
from bitn.selftest import MODULE_NAMES, run_selftest
from bitn.wide import Int64

app = typer.Typer(help="Fixed-width bitwise operations for 16/32/64 bits.")

_WIDTH_MODULES: dict[int, str] = {16: "bit16", 32: "bit32", 64: "bit64"}
_UNARY_OPS = frozenset({"mask", "bnot"})
_BINARY_OPS = frozenset({"band", "bor", "bxor", "add"})
_SHIFT_OPS = frozenset({"lshift", "rshift", "arshift", "rol", "ror"})
_ENCODE_OPS = frozenset({"to_be_bytes", "to_le_bytes"})
_DECODE_OPS = frozenset({"from_be_bytes", "from_le_bytes"})
_ALL_OPS = _UNARY_OPS | _BINARY_OPS | _SHIFT_OPS | _ENCODE_OPS | _DECODE_OPS


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level, e.g. DEBUG"),
    ] = "WARNING",
) -> None:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{log_level}'")
    logging.basicConfig(level=level)


def _parse_int(value: str) -> int:
    """Parse an int literal: decimal, 0x, 0o or 0b, optionally negative."""
    try:
        return int(value.strip().replace("_", ""), 0)
    except ValueError as err:
        raise typer.BadParameter(f"Invalid integer '{value}'") from err


def _parse_hex_bytes(value: str) -> bytes:
    cleaned = value.strip().removeprefix("0x").replace(" ", "")
    try:
        return bytes.fromhex(cleaned)
    except ValueError as err:
        raise typer.BadParameter(f"Invalid hex bytes '{value}'") from err


def _resolve_modules(modules: list[str] | None) -> list[str]:
    if not modules:
        return list(MODULE_NAMES)
    for name in modules:
        if name not in MODULE_NAMES:
            valid = ", ".join(MODULE_NAMES)
            typer.echo(
                f"Error: Unknown module '{name}'; expected {valid}", err=True
            )
            raise typer.Exit(1)
    return list(dict.fromkeys(modules))


def _format_result(result: Any, width: int) -> str:
    if isinstance(result, bytes):
        return result.hex()
    if isinstance(result, Int64):
        return f"0x{result.high:08X}{result.low:08X}"
    return f"0x{result:0{width // 4}X}"


def _eval_op(
    module: ModuleType, width: int, op: str, args: list[str]
) -> Any:
    def value(token: str) -> Any:
        parsed = _parse_int(token)
        if width == 64:
            return module.from_int(parsed)
        return parsed

    def expect(count: int) -> None:
        if len(args) != count:
            raise typer.BadParameter(
                f"{op} takes {count} argument(s), got {len(args)}"
            )

    fn = getattr(module, op)
    if op in _UNARY_OPS or op in _ENCODE_OPS:
        expect(1)
        return fn(value(args[0]))
    if op in _BINARY_OPS:
        expect(2)
        return fn(value(args[0]), value(args[1]))
    if op in _SHIFT_OPS:
        expect(2)
        return fn(value(args[0]), _parse_int(args[1]))
    if len(args) not in (1, 2):
        raise typer.BadParameter(
            f"{op} takes DATA [OFFSET], got {len(args)} argument(s)"
        )
    offset = _parse_int(args[1]) if len(args) == 2 else 0
    return fn(_parse_hex_bytes(args[0]), offset)


@app.command()
def version() -> None:
    """Print the library version."""
    typer.echo(bitn.version())


@app.command()
def info() -> None:
    """Show the primitive strategy selected for this process."""
    typer.echo(f"bitn {bitn.version()}")
    typer.echo(
        f"Implementation: {_compat.SETTINGS.impl.value} "
        f"({_compat.impl_name()})"
    )
    available = ", ".join(impl.value for impl in available_impls())
    typer.echo(f"Available: {available}")


@app.command()
def selftest(
    modules: Annotated[
        list[str] | None,
        typer.Argument(help="Modules to test (bit16, bit32, bit64)"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Emit JSON reports")
    ] = False,
) -> None:
    """Run the embedded test vectors."""
    reports = [run_selftest(name) for name in _resolve_modules(modules)]

    if as_json:
        typer.echo(srsly.json_dumps([r.model_dump() for r in reports]))
    else:
        for report in reports:
            typer.echo(
                f"{report.module} ({report.impl}): "
                f"{report.passed}/{report.total} passed"
            )
            for failure in report.failures:
                typer.echo(
                    f"  FAIL: {failure.name}: expected {failure.expected}, "
                    f"got {failure.got}"
                )

    if not all(report.ok for report in reports):
        raise typer.Exit(1)


@app.command()
def benchmark(
    modules: Annotated[
        list[str] | None,
        typer.Argument(help="Modules to benchmark (bit16, bit32, bit64)"),
    ] = None,
    iterations: Annotated[
        int,
        typer.Option("--iterations", "-n", min=1, help="Calls per operation"),
    ] = DEFAULT_ITERATIONS,
    as_json: Annotated[
        bool, typer.Option("--json", help="Emit JSON reports")
    ] = False,
) -> None:
    """Time each operation of the selected modules."""
    reports = [
        run_benchmarks(name, iterations) for name in _resolve_modules(modules)
    ]

    if as_json:
        payload = [
            {
                "module": report.module,
                "impl": report.impl,
                "results": [
                    {
                        **result.model_dump(),
                        "ns_per_op": result.ns_per_op,
                    }
                    for result in report.results
                ],
            }
            for report in reports
        ]
        typer.echo(srsly.json_dumps(payload))
        return

    for report in reports:
        typer.echo(f"{report.module} ({report.impl}):")
        for result in report.results:
            typer.echo(f"  {result.name:<16} {result.ns_per_op:10.1f} ns/op")


@app.command(
    "eval", context_settings={"ignore_unknown_options": True}
)
def eval_op(
    width: Annotated[int, typer.Argument(help="Bit width: 16, 32 or 64")],
    op: Annotated[str, typer.Argument(help="Operation name, e.g. rol")],
    args: Annotated[
        list[str] | None,
        typer.Argument(help="Integer operands; hex strings for byte data"),
    ] = None,
) -> None:
    """Evaluate a single operation and print the result in hex."""
    module_name = _WIDTH_MODULES.get(width)
    if module_name is None:
        typer.echo(f"Error: Unsupported width {width}", err=True)
        raise typer.Exit(1)
    if op not in _ALL_OPS or (width == 64 and op == "mask"):
        typer.echo(f"Error: Unknown operation '{op}'", err=True)
        raise typer.Exit(1)

    module = importlib.import_module(f"bitn.{module_name}")
    try:
        result = _eval_op(module, width, op, args or [])
    except BitnError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    typer.echo(_format_result(result, width))


if __name__ == "__main__":
    app()
