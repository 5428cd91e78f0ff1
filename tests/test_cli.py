"""
Tests for the command-line entry point.
"""

import json
from pathlib import Path

import pytest

from tinyini.__main__ import main


def test_dump_document(example_ini_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(example_ini_path), "--no-color"]) == 0

    dumped = json.loads(capsys.readouterr().out)
    assert dumped["global"] == [["network", "wireless"]]
    assert [s["name"] for s in dumped["sections"]] == ["owner", "database", "variables"]
    assert dumped["sections"][0]["properties"][0] == ["name", "John Doe"]


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["-k", "network"], "wireless"),
        (["-s", "owner", "-k", "name"], "John Doe"),
        (["-s", "database", "-k", "port", "-t", "int"], "143"),
        (["-s", "variables", "-k", "float", "-t", "int"], "12"),
        (["-s", "variables", "-k", "float", "-t", "float"], "12.34"),
        (["-s", "variables", "-k", "string", "-t", "float"], "0.0"),
        (["-s", "variables", "-k", "bool", "-t", "bool"], "true"),
        (["-s", "variables", "-k", "int", "-t", "bool"], "false"),
    ],
)
def test_query_value(
    example_ini_path: Path,
    capsys: pytest.CaptureFixture[str],
    args: list[str],
    expected: str,
) -> None:
    assert main([str(example_ini_path), *args]) == 0
    assert capsys.readouterr().out == expected + "\n"


def test_missing_section(example_ini_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(example_ini_path), "-s", "nope", "-k", "name"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Section not found: [nope]" in captured.err


def test_missing_key(example_ini_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(example_ini_path), "-s", "owner", "-k", "nope"]) == 1
    assert "Key not found in [owner]: nope" in capsys.readouterr().err

    assert main([str(example_ini_path), "-k", "nope"]) == 1
    assert "Key not found in global section: nope" in capsys.readouterr().err


def test_strict_conversion_failure(
    example_ini_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    args = [str(example_ini_path), "-s", "variables", "-k", "float", "-t", "int", "--strict"]

    assert main(args) == 1
    assert "is not a valid integer" in capsys.readouterr().err


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "missing.ini"), "--no-color"]) == 1
    assert "not found" in capsys.readouterr().err


def test_log_file(example_ini_path: Path, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "tinyini.log"

    assert main([str(example_ini_path), "-k", "network", "--log-file", str(log_file)]) == 0

    content = log_file.read_text()
    assert "tinyini.loader" in content
    assert "Loaded" in content


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert "tinyini 0.1.0" in capsys.readouterr().out
