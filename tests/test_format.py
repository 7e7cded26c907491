import textwrap

from codesense.format import correct_brace_imbalance, format_code, run_format
from codesense.options import FormatOptions


def _dedent(text: str) -> str:
    return textwrap.dedent(text).strip("\n")


def test_python_indents_after_colon_line() -> None:
    assert format_code("def f():\n  return 1", "python") == "def f():\n    return 1"


def test_python_terminator_dedents_following_line() -> None:
    source = "def f():\nreturn 1\nx = f()"

    assert format_code(source, "python") == "def f():\n    return 1\nx = f()"


def test_python_continuation_clause_after_return() -> None:
    source = "if x:\nreturn 1\nelse:\nreturn 2"

    assert format_code(source, "python") == _dedent(
        """
        if x:
            return 1
        else:
            return 2
        """
    )


def test_python_continuation_clause_without_terminator_keeps_depth() -> None:
    assert format_code("if a:\nx = 1\nelse:\ny = 2", "python") == "if a:\n    x = 1\n    else:\n        y = 2"
    assert format_code("try:\nrun()\nexcept Error:\nhandle()", "python") == (
        "try:\n    run()\n    except Error:\n        handle()"
    )


def test_python_terminator_prefix_must_be_a_whole_word() -> None:
    source = "def f():\nreturned = 1\nreturn returned"

    assert format_code(source, "python") == "def f():\n    returned = 1\n    return returned"


def test_brace_language_nesting() -> None:
    source = _dedent(
        """
        function f(a) {
        if (a) {
        return 1;
        } else {
        return 2;
        }
        }
        """
    )

    assert format_code(source, "javascript") == _dedent(
        """
        function f(a) {
          if (a) {
            return 1;
          } else {
            return 2;
          }
        }
        """
    )


def test_blank_lines_are_emptied() -> None:
    assert format_code("int main() {\n   \nreturn 0;\n}", "c") == "int main() {\n\n  return 0;\n}"


def test_brace_imbalance_correction_for_inner_braces() -> None:
    source = "const o = {a: 1,\nb: 2};\nx;"

    assert format_code(source, "typescript") == "const o = {a: 1,\n  b: 2};\nx;"


def test_single_line_block_keeps_depth() -> None:
    assert format_code("if (x) { y(); }\nz();", "java") == "if (x) { y(); }\nz();"


def test_correct_brace_imbalance_ignores_edge_braces() -> None:
    assert correct_brace_imbalance("} else {", 2) == 2
    assert correct_brace_imbalance("a = {b: {", 1) == 1
    assert correct_brace_imbalance("x = {a: {b: 1,", 0) == 2
    assert correct_brace_imbalance("c}}", 1) == 0


def test_brace_formatter_is_idempotent() -> None:
    source = "class A {\npublic void f() {\nint[] a = {1, 2};\nif (a) {\nb();\n}\n}\n}"

    once = format_code(source, "java")

    assert format_code(once, "java") == once


def test_unknown_language_is_returned_unchanged() -> None:
    source = "  weird {\n stuff"

    assert format_code(source, "ruby") == source


def test_indent_widths_are_configurable() -> None:
    options = FormatOptions(brace_indent_width=4, python_indent_width=2)

    assert format_code("f() {\ng();\n}", "cpp", options) == "f() {\n    g();\n}"
    assert format_code("if x:\ny", "python", options) == "if x:\n  y"


def test_non_positive_indent_width_is_rejected() -> None:
    try:
        FormatOptions(brace_indent_width=0)
    except ValueError as exc:
        assert "brace_indent_width" in str(exc)
    else:
        raise AssertionError("Expected ValueError for zero indent width")


def test_run_format_reports_changes() -> None:
    assert run_format("a;\n", "javascript").changed is False
    result = run_format("{\nb;\n}", "javascript")
    assert result.changed is True
    assert result.formatted_text == "{\n  b;\n}"
