import os
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from bitn.config import Impl
from bitn.fixed import FixedWidth
from bitn.primitives import get_primitives
from bitn.wide import Wide64

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
SUBPROCESS_TIMEOUT_SEC = 30.0

IMPLS: tuple[Impl, ...] = tuple(Impl)


def fixed_width_for(impl: Impl, width: int) -> FixedWidth:
    return FixedWidth(width, get_primitives(impl))


def wide64_for(impl: Impl) -> Wide64:
    return Wide64(fixed_width_for(impl, 32))


def run_python(
    code: str,
    *,
    env_overrides: dict[str, str] | None = None,
    timeout_sec: float = SUBPROCESS_TIMEOUT_SEC,
) -> subprocess.CompletedProcess[str]:
    """Run a snippet in a fresh interpreter with ``src`` importable."""
    env = dict(os.environ)
    env.pop("BITN_IMPL", None)
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = (
        f"{SRC_DIR}{os.pathsep}{existing}" if existing else str(SRC_DIR)
    )
    if env_overrides:
        env.update(env_overrides)
    cmd: Sequence[str] = [sys.executable, "-c", code]
    return subprocess.run(  # noqa: S603
        list(cmd),
        check=False,
        capture_output=True,
        text=True,
        env=env,
        timeout=timeout_sec,
    )
