#!/usr/bin/env python3
"""Benchmark every width under each primitive strategy and compare."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys

import srsly

IMPLS = ("native", "ctypes", "arithmetic")
MODULES = ("bit16", "bit32", "bit64")


def _collect(impl: str, modules: list[str], iterations: int) -> list[dict]:
    cmd = [
        sys.executable,
        "-m",
        "bitn.cli",
        "benchmark",
        *modules,
        "--iterations",
        str(iterations),
        "--json",
    ]
    env = dict(os.environ)
    env["BITN_IMPL"] = impl
    proc = subprocess.run(cmd, capture_output=True, text=True, env=env)
    if proc.returncode != 0:
        raise RuntimeError(
            f"benchmark under BITN_IMPL={impl} failed:\n{proc.stderr}"
        )
    return srsly.json_loads(proc.stdout)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "modules",
        nargs="*",
        help="Modules to benchmark (bit16, bit32, bit64). Default: all.",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=20_000,
        help="Calls per operation.",
    )
    parser.add_argument(
        "--impl",
        action="append",
        choices=IMPLS,
        help="Strategy to include (repeatable). Default: all.",
    )
    args = parser.parse_args()

    modules = args.modules or list(MODULES)
    unknown = sorted(set(modules) - set(MODULES))
    if unknown:
        parser.error(f"unknown modules: {', '.join(unknown)}")
    impls = args.impl or list(IMPLS)

    # (module, op) -> impl -> ns/op
    table: dict[tuple[str, str], dict[str, float]] = {}
    for impl in impls:
        try:
            reports = _collect(impl, modules, args.iterations)
        except RuntimeError as err:
            print(err, file=sys.stderr)
            return 1
        for report in reports:
            for result in report["results"]:
                key = (report["module"], result["name"])
                table.setdefault(key, {})[impl] = result["ns_per_op"]

    header = f"{'module':<7} {'op':<14}" + "".join(
        f"{impl:>12}" for impl in impls
    )
    print(header)
    print("-" * len(header))
    for (module, op), timings in table.items():
        cells = "".join(
            f"{timings.get(impl, float('nan')):>12.1f}" for impl in impls
        )
        print(f"{module:<7} {op:<14}{cells}")
    print("\n(ns per operation)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
