import json
from pathlib import Path

import pytest

from codesense.cli import main


def test_cli_reports_valid_python_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "ok.py"
    path.write_text("x = 1\n", encoding="utf-8")

    status = main([str(path)])

    out = capsys.readouterr().out
    assert status == 0
    assert f"== {path} (python)" in out
    assert "Symbol Table" in out
    assert "Valid Syntax: no syntax errors were found in the code." in out
    assert "Formatted Code" in out


def test_cli_exits_one_when_diagnostics_are_found(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "broken.js"
    path.write_text("let x = (", encoding="utf-8")

    status = main([str(path), "--section", "syntax"])

    out = capsys.readouterr().out
    assert status == 1
    assert "line 1: Unclosed parenthesis\n    hint: Close the delimiter before the end of the input." in out
    assert "Symbol Table" not in out


def test_cli_rejects_mismatched_language(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "script.py"
    path.write_text("x = 1\n", encoding="utf-8")

    status = main([str(path), "--language", "java"])

    captured = capsys.readouterr()
    assert status == 2
    assert "appears to be python code, but the selected language is java" in captured.err
    assert captured.out == ""


def test_cli_reports_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main([str(tmp_path / "missing.c")])

    assert status == 2
    assert "failed to read" in capsys.readouterr().err


def test_cli_json_section_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "main.c"
    path.write_text("int main() {\nreturn 0;\n}", encoding="utf-8")

    status = main([str(path), "--json", "--section", "formatted"])

    [payload] = json.loads(capsys.readouterr().out)
    assert status == 0
    assert payload == {
        "file": str(path),
        "language": "c",
        "formatted": {"code": "int main() {\n  return 0;\n}"},
    }


def test_cli_json_lexical_section_uses_tokens_key(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "one.py"
    path.write_text("return", encoding="utf-8")

    main([str(path), "--json", "--section", "lexical"])

    [payload] = json.loads(capsys.readouterr().out)
    assert payload["tokens"] == [{"lexeme": "return", "category": "keyword", "line": 1}]


def test_cli_json_with_several_files_is_one_document(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    first = tmp_path / "a.py"
    second = tmp_path / "b.c"
    first.write_text("x = 1\n", encoding="utf-8")
    second.write_text("int x;\n", encoding="utf-8")

    status = main([str(first), str(second), "--json", "--section", "syntax", "--no-progress"])

    payload = json.loads(capsys.readouterr().out)
    assert status == 0
    assert [(entry["file"], entry["language"]) for entry in payload] == [(str(first), "python"), (str(second), "c")]
    assert all(entry["syntax"] == {"valid": True, "errors": []} for entry in payload)


def test_cli_reports_file_that_is_not_utf8(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "latin.js"
    path.write_bytes(b"let caf\xe9 = 1;\n")

    status = main([str(path)])

    captured = capsys.readouterr()
    assert status == 2
    assert f"failed to read {path}" in captured.err
    assert captured.out == ""
