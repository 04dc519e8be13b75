"""命令行入口测试"""

import pytest

from atomterms.cli import build_parser, format_terms, main
from atomterms.terms import TermType


@pytest.mark.cli
@pytest.mark.quick
def test_cli_p3(capsys):
    assert main(["-l", "1", "-n", "3"]) == 0
    out = capsys.readouterr().out
    assert out == "\nFound terms:\n^{2}D\n^{2}P\n^{4}S\n"


@pytest.mark.cli
def test_cli_pretty(capsys):
    assert main(["-l", "1", "-n", "2", "--pretty"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-3:] == ["¹D", "³P", "¹S"]


@pytest.mark.cli
def test_cli_verbose_prints_derivation(capsys):
    assert main(["-l", "0", "-n", "1", "-v"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Sublevel: s^{1}\n ----- \n")
    assert "Terms:\n^{2}S\n- " in out
    assert out.endswith("Found terms:\n^{2}S\n")


@pytest.mark.cli
@pytest.mark.quick
def test_cli_capacity_exceeded(capsys):
    assert main(["-l", "1", "-n", "7"]) == 1
    captured = capsys.readouterr()
    assert "6" in captured.err
    assert "Found terms" not in captured.out


@pytest.mark.cli
def test_cli_negative_orbital(capsys):
    assert main(["-l", "-1", "-n", "0"]) == 1
    assert "参数错误" in capsys.readouterr().err


@pytest.mark.cli
def test_cli_missing_argument():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["-l", "1"])
    assert excinfo.value.code == 2


def test_format_terms():
    terms = [TermType.of(1, 2), TermType.of(0, 4)]
    assert format_terms(terms) == ["^{2}P", "^{4}S"]
    assert format_terms(terms, pretty=True) == ["²P", "⁴S"]
