import pytest

from bitn import selftest
from bitn.selftest import (
    MODULE_NAMES,
    VECTORS,
    SelftestCase,
    run_selftest,
)


@pytest.mark.parametrize("module_name", MODULE_NAMES)
def test_all_vectors_pass(module_name: str) -> None:
    report = run_selftest(module_name)
    assert report.failures == []
    assert report.ok
    assert report.total == len(VECTORS[module_name])
    assert report.impl


def test_vectors_cover_every_operation() -> None:
    core_ops = {
        "band",
        "bor",
        "bxor",
        "bnot",
        "lshift",
        "rshift",
        "arshift",
        "rol",
        "ror",
        "add",
        "to_be_bytes",
        "to_le_bytes",
        "from_be_bytes",
        "from_le_bytes",
    }
    for module_name in MODULE_NAMES:
        ops = {case.op for case in VECTORS[module_name]}
        assert core_ops <= ops, module_name


def test_unknown_module() -> None:
    with pytest.raises(ValueError, match="Unknown module"):
        run_selftest("bit8")


def test_mismatch_is_reported_not_raised(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    bad = [
        SelftestCase(name="add(1, 1)", op="add", inputs=[1, 1], expected=3),
        SelftestCase(
            name="lshift(1, -1)",
            op="lshift",
            inputs=[1, -1],
            raises="InsufficientDataError",
        ),
        SelftestCase(
            name="rol(1, 1)", op="rol", inputs=[1, 1], raises="BitnError"
        ),
    ]
    monkeypatch.setitem(selftest.VECTORS, "bit32", bad)
    report = run_selftest("bit32")
    assert not report.ok
    assert report.passed == 0
    assert report.total == 3
    assert [f.got for f in report.failures] == [
        "0x2",
        "InvalidArgumentError",
        "0x2",
    ]
    assert report.failures[0].expected == "0x3"
