"""Embedded test vectors for each width, runnable without pytest."""

import importlib
import logging
from typing import Any

from pydantic import BaseModel, Field

from bitn import _compat
from bitn.errors import BitnError
from bitn.wide import Int64

_LOGGER = logging.getLogger(__name__)

MODULE_NAMES: tuple[str, ...] = ("bit16", "bit32", "bit64")


class SelftestCase(BaseModel):
    name: str = Field(description="Display name, e.g. 'rol(0x1234, 0x4)'")
    op: str = Field(description="Function name within the width module")
    inputs: list[Any] = Field(default_factory=list)
    expected: Any = Field(default=None, description="Expected return value")
    raises: str | None = Field(
        default=None, description="Expected exception class name"
    )


class SelftestFailure(BaseModel):
    name: str
    expected: str
    got: str


class SelftestReport(BaseModel):
    module: str
    impl: str
    passed: int = 0
    total: int = 0
    failures: list[SelftestFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.passed == self.total


def _fmt(value: Any) -> str:
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return f"0x{value:X}"
    if isinstance(value, (bytes, bytearray)):
        return f"b'{bytes(value).hex()}'"
    if isinstance(value, Int64):
        return _fmt(value.as_tuple())
    if isinstance(value, tuple):
        return "{" + ", ".join(_fmt(item) for item in value) + "}"
    return repr(value)


def _case(
    op: str,
    *inputs: Any,
    expected: Any = None,
    raises: str | None = None,
) -> SelftestCase:
    name = f"{op}({', '.join(_fmt(i) for i in inputs)})"
    return SelftestCase(
        name=name,
        op=op,
        inputs=list(inputs),
        expected=expected,
        raises=raises,
    )


_BIT16_CASES = [
    _case("mask", 0, expected=0),
    _case("mask", 0xFFFF, expected=0xFFFF),
    _case("mask", 0x10000, expected=0),
    _case("mask", 0x10001, expected=1),
    _case("mask", -1, expected=0xFFFF),
    _case("mask", -256, expected=0xFF00),
    _case("band", 0xFF00, 0x00FF, expected=0),
    _case("band", 0xF0F0, 0xFF00, expected=0xF000),
    _case("bor", 0xFF00, 0x00FF, expected=0xFFFF),
    _case("bor", 0, 0, expected=0),
    _case("bxor", 0xAAAA, 0x5555, expected=0xFFFF),
    _case("bxor", 0x1234, 0x1234, expected=0),
    _case("bnot", 0, expected=0xFFFF),
    _case("bnot", 0x1234, expected=0xEDCB),
    _case("lshift", 1, 8, expected=0x100),
    _case("lshift", 0x8000, 1, expected=0),
    _case("lshift", 0x1234, 0, expected=0x1234),
    _case("lshift", 0xFFFF, 16, expected=0),
    _case("rshift", 0x8000, 15, expected=1),
    _case("rshift", 0x1234, 4, expected=0x123),
    _case("rshift", 0xFFFF, 16, expected=0),
    _case("arshift", 0x8000, 1, expected=0xC000),
    _case("arshift", 0x8000, 15, expected=0xFFFF),
    _case("arshift", 0x8000, 16, expected=0xFFFF),
    _case("arshift", 0x4000, 1, expected=0x2000),
    _case("arshift", 0x7FFF, 16, expected=0),
    _case("rol", 0x1234, 4, expected=0x2341),
    _case("rol", 0x8000, 1, expected=1),
    _case("rol", 0x1234, 16, expected=0x1234),
    _case("rol", 0x1234, -4, expected=0x4123),
    _case("ror", 0x1234, 4, expected=0x4123),
    _case("ror", 1, 1, expected=0x8000),
    _case("add", 0xFFFF, 1, expected=0),
    _case("add", 0x8000, 0x8000, expected=0),
    _case("add", 0x1234, 0x1111, expected=0x2345),
    _case("to_be_bytes", 0x1234, expected=b"\x12\x34"),
    _case("to_le_bytes", 0x1234, expected=b"\x34\x12"),
    _case("from_be_bytes", b"\x12\x34", expected=0x1234),
    _case("from_le_bytes", b"\x34\x12", expected=0x1234),
    _case("from_be_bytes", b"\x00\x12\x34", 1, expected=0x1234),
    _case("from_be_bytes", b"\x12", raises="InsufficientDataError"),
    _case("lshift", 1, -1, raises="InvalidArgumentError"),
]

_BIT32_CASES = [
    _case("mask", 0xFFFFFFFF, expected=0xFFFFFFFF),
    _case("mask", 0x100000000, expected=0),
    _case("mask", 0x100000001, expected=1),
    _case("mask", -1, expected=0xFFFFFFFF),
    _case("mask", -256, expected=0xFFFFFF00),
    _case("band", 0xFF00FF00, 0x00FF00FF, expected=0),
    _case("band", 0xF0F0F0F0, 0xFF00FF00, expected=0xF000F000),
    _case("bor", 0xF0F0F0F0, 0x0F0F0F0F, expected=0xFFFFFFFF),
    _case("bxor", 0xAAAAAAAA, 0xFFFFFFFF, expected=0x55555555),
    _case("bnot", 0, expected=0xFFFFFFFF),
    _case("bnot", 0x12345678, expected=0xEDCBA987),
    _case("lshift", 1, 31, expected=0x80000000),
    _case("lshift", 0x12345678, 16, expected=0x56780000),
    _case("lshift", 1, 32, expected=0),
    _case("rshift", 0x80000000, 31, expected=1),
    _case("rshift", 0xFFFFFFFF, 16, expected=0xFFFF),
    _case("rshift", 0xFFFFFFFF, 32, expected=0),
    _case("arshift", 0x80000000, 1, expected=0xC0000000),
    _case("arshift", 0x80000000, 31, expected=0xFFFFFFFF),
    _case("arshift", 0x80000000, 32, expected=0xFFFFFFFF),
    _case("arshift", 0x7FFFFFFF, 1, expected=0x3FFFFFFF),
    _case("arshift", 0xF0000000, 4, expected=0xFF000000),
    _case("rol", 0x12345678, 8, expected=0x34567812),
    _case("rol", 0x80000000, 1, expected=1),
    _case("rol", 0x12345678, 32, expected=0x12345678),
    _case("ror", 0x12345678, 8, expected=0x78123456),
    _case("ror", 1, 1, expected=0x80000000),
    _case("ror", 0x12345678, -8, expected=0x34567812),
    _case("add", 0xFFFFFFFF, 1, expected=0),
    _case("add", 0x80000000, 0x80000000, expected=0),
    _case("add", 0x12345678, 0x11111111, expected=0x23456789),
    _case("to_be_bytes", 0x12345678, expected=b"\x12\x34\x56\x78"),
    _case("to_le_bytes", 0x12345678, expected=b"\x78\x56\x34\x12"),
    _case("from_be_bytes", b"\x12\x34\x56\x78", expected=0x12345678),
    _case("from_le_bytes", b"\x78\x56\x34\x12", expected=0x12345678),
    _case(
        "from_be_bytes",
        b"\x00\x00\x00\x00",
        1,
        raises="InsufficientDataError",
    ),
    _case("rshift", 1, -1, raises="InvalidArgumentError"),
]

_SEQ_BE = bytes(range(1, 9))

_BIT64_CASES = [
    _case(
        "band",
        (0xFFFFFFFF, 0),
        (0x12345678, 0x9ABCDEF0),
        expected=(0x12345678, 0),
    ),
    _case("bor", (0xFF000000, 0), (0, 0xFF), expected=(0xFF000000, 0xFF)),
    _case(
        "bxor",
        (0xAAAAAAAA, 0x55555555),
        (0xFFFFFFFF, 0xFFFFFFFF),
        expected=(0x55555555, 0xAAAAAAAA),
    ),
    _case("bnot", (0, 0), expected=(0xFFFFFFFF, 0xFFFFFFFF)),
    _case("lshift", (0, 1), 32, expected=(1, 0)),
    _case("lshift", (0, 0x80000000), 1, expected=(1, 0)),
    _case("lshift", (0, 1), 63, expected=(0x80000000, 0)),
    _case("lshift", (1, 1), 64, expected=(0, 0)),
    _case(
        "lshift",
        (0x12345678, 0x9ABCDEF0),
        4,
        expected=(0x23456789, 0xABCDEF00),
    ),
    _case("rshift", (1, 0), 32, expected=(0, 1)),
    _case("rshift", (1, 0), 1, expected=(0, 0x80000000)),
    _case("rshift", (0x80000000, 0), 63, expected=(0, 1)),
    _case(
        "rshift",
        (0x12345678, 0x9ABCDEF0),
        4,
        expected=(0x01234567, 0x89ABCDEF),
    ),
    _case("arshift", (0x80000000, 0), 1, expected=(0xC0000000, 0)),
    _case("arshift", (0x80000000, 0), 32, expected=(0xFFFFFFFF, 0x80000000)),
    _case("arshift", (0x40000000, 0), 32, expected=(0, 0x40000000)),
    _case("arshift", (0x80000000, 0), 63, expected=(0xFFFFFFFF, 0xFFFFFFFF)),
    _case("arshift", (0x80000000, 0), 64, expected=(0xFFFFFFFF, 0xFFFFFFFF)),
    _case("arshift", (0x7FFFFFFF, 0xFFFFFFFF), 64, expected=(0, 0)),
    _case(
        "rol",
        (0x12345678, 0x9ABCDEF0),
        16,
        expected=(0x56789ABC, 0xDEF01234),
    ),
    _case(
        "rol",
        (0x12345678, 0x9ABCDEF0),
        32,
        expected=(0x9ABCDEF0, 0x12345678),
    ),
    _case("rol", (0x80000000, 0), 1, expected=(0, 1)),
    _case("rol", (0, 1), 63, expected=(0x80000000, 0)),
    _case(
        "ror",
        (0x12345678, 0x9ABCDEF0),
        16,
        expected=(0xDEF01234, 0x56789ABC),
    ),
    _case("ror", (0, 1), 1, expected=(0x80000000, 0)),
    _case("add", (0, 0xFFFFFFFF), (0, 1), expected=(1, 0)),
    _case("add", (0xFFFFFFFF, 0xFFFFFFFF), (0, 1), expected=(0, 0)),
    _case(
        "add",
        (0x12345678, 0x9ABCDEF0),
        (0x11111111, 0x11111111),
        expected=(0x23456789, 0xABCDF001),
    ),
    _case("to_be_bytes", (0x01020304, 0x05060708), expected=_SEQ_BE),
    _case("to_le_bytes", (0x01020304, 0x05060708), expected=_SEQ_BE[::-1]),
    _case("from_be_bytes", _SEQ_BE, expected=(0x01020304, 0x05060708)),
    _case("from_le_bytes", _SEQ_BE[::-1], expected=(0x01020304, 0x05060708)),
    _case("from_be_bytes", bytes(7), raises="InsufficientDataError"),
    _case("to_hex", (0x1800, 0x1000), expected="0000180000001000"),
    _case("to_number", (0, 1), expected=1.0),
    _case("to_number", (1, 0), expected=4294967296.0),
    _case(
        "to_number",
        (0x001FFFFF, 0xFFFFFFFF),
        True,
        expected=9007199254740991.0,
    ),
    _case("to_number", (0x00200000, 0), True, raises="PrecisionExceededError"),
    _case("from_number", 4294967296, expected=(1, 0)),
    _case("from_number", 9007199254740991, expected=(0x001FFFFF, 0xFFFFFFFF)),
    _case("eq", (1, 2), (1, 2), expected=True),
    _case("eq", (1, 2), (2, 1), expected=False),
    _case("is_zero", (0, 0), expected=True),
    _case("is_zero", (0, 1), expected=False),
    _case("lshift", (0, 1), -1, raises="InvalidArgumentError"),
]

VECTORS: dict[str, list[SelftestCase]] = {
    "bit16": _BIT16_CASES,
    "bit32": _BIT32_CASES,
    "bit64": _BIT64_CASES,
}


def _normalize(value: Any) -> Any:
    if isinstance(value, Int64):
        return value.as_tuple()
    if isinstance(value, list):
        return tuple(value)
    return value


def _run_case(module: Any, case: SelftestCase) -> SelftestFailure | None:
    fn = getattr(module, case.op)
    try:
        result = fn(*case.inputs)
    except BitnError as err:
        got_error = type(err).__name__
        if case.raises == got_error:
            return None
        expected = case.raises or _fmt(case.expected)
        return SelftestFailure(name=case.name, expected=expected, got=got_error)

    if case.raises is not None:
        return SelftestFailure(
            name=case.name, expected=case.raises, got=_fmt(result)
        )
    if _normalize(result) == _normalize(case.expected):
        return None
    return SelftestFailure(
        name=case.name,
        expected=_fmt(_normalize(case.expected)),
        got=_fmt(_normalize(result)),
    )


def run_selftest(module_name: str) -> SelftestReport:
    """Evaluate every vector for one width module and report the outcome."""
    cases = VECTORS.get(module_name)
    if cases is None:
        valid = ", ".join(MODULE_NAMES)
        raise ValueError(f"Unknown module '{module_name}'; expected {valid}")
    module = importlib.import_module(f"bitn.{module_name}")

    report = SelftestReport(module=module_name, impl=_compat.impl_name())
    for case in cases:
        report.total += 1
        failure = _run_case(module, case)
        if failure is None:
            report.passed += 1
            continue
        _LOGGER.debug(
            "%s selftest failed: %s expected %s got %s",
            module_name,
            failure.name,
            failure.expected,
            failure.got,
        )
        report.failures.append(failure)
    return report
