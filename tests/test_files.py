from pathlib import Path

from codesense.languages import Language, LanguageMismatchError, language_for_path, read_source_file


def test_language_for_path_uses_extension() -> None:
    assert language_for_path("main.py") == Language.PYTHON
    assert language_for_path(Path("src/app.ts")) == Language.TYPESCRIPT
    assert language_for_path("lib.hpp") == Language.CPP
    assert language_for_path("notes.txt") is None


def test_read_source_file_returns_text(tmp_path: Path) -> None:
    path = tmp_path / "main.java"
    path.write_text("class A {}\n", encoding="utf-8")

    assert read_source_file(path, "java") == "class A {}\n"


def test_read_source_file_accepts_unknown_extensions(tmp_path: Path) -> None:
    path = tmp_path / "snippet.txt"
    path.write_text("let x = 1;", encoding="utf-8")

    assert read_source_file(path, "javascript") == "let x = 1;"


def test_read_source_file_rejects_mismatched_language(tmp_path: Path) -> None:
    path = tmp_path / "script.py"
    path.write_text("x = 1\n", encoding="utf-8")

    try:
        read_source_file(path, "javascript")
    except LanguageMismatchError as exc:
        assert exc.detected == "python"
        assert exc.selected == "javascript"
        assert str(exc) == (
            "The uploaded file (script.py) appears to be python code, but the selected language is javascript."
        )
    else:
        raise AssertionError("Expected LanguageMismatchError for a .py file read as javascript")


def test_language_mismatch_is_a_value_error() -> None:
    assert issubclass(LanguageMismatchError, ValueError)
