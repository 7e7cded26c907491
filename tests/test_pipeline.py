from codesense import AnalyzerOptions, FormatOptions, analyze
from codesense.lexer import TokenCategory


def test_analyze_assembles_every_section() -> None:
    result = analyze("function foo() { return 1 }", "javascript")

    assert result.language == "javascript"
    assert [token.category for token in result.tokens][:2] == [TokenCategory.KEYWORD, TokenCategory.IDENTIFIER]
    assert result.syntax.valid == (len(result.syntax.errors) == 0)
    assert result.semantic.valid == (len(result.semantic.errors) == 0)
    assert result.formatted.formatted_text == "function foo() { return 1 }"


def test_to_dict_has_serialized_shape() -> None:
    payload = analyze("const x = 5;\nx = 6;", "javascript").to_dict()

    assert set(payload) == {"tokens", "syntax", "semantic", "formatted"}
    assert payload["tokens"][0] == {"lexeme": "const", "category": "keyword", "line": 1}
    assert payload["syntax"] == {"valid": True, "errors": []}
    assert {"message": "Cannot assign to constant 'x'", "line": 2} in payload["semantic"]["errors"]
    assert payload["formatted"] == {"code": "const x = 5;\nx = 6;"}


def test_unknown_language_is_total_and_gates_heuristics() -> None:
    result = analyze("let x = (", "ruby")

    assert result.tokens[0].category == TokenCategory.KEYWORD
    assert [error.message for error in result.syntax.errors] == ["Unclosed parenthesis"]
    assert result.semantic.valid is True
    assert result.formatted.formatted_text == "let x = ("
    assert result.has_errors is True


def test_analyze_is_deterministic() -> None:
    source = "function f(a) {\nif (a) { return a / 0 }\nreturn b;;\n"

    assert analyze(source, "java") == analyze(source, "java")


def test_empty_source_is_valid_everywhere() -> None:
    for language in ("javascript", "typescript", "python", "java", "c", "cpp"):
        result = analyze("", language)
        assert result.tokens == []
        assert result.syntax.valid is True
        assert result.semantic.valid is True
        assert result.formatted.formatted_text == ""


def test_options_reach_the_formatter() -> None:
    options = AnalyzerOptions(format=FormatOptions(python_indent_width=2))

    result = analyze("def f():\nreturn 1", "python", options)

    assert result.formatted.formatted_text == "def f():\n  return 1"
    assert result.has_errors is False
