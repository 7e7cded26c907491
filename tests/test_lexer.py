import pytest

from codesense.languages import Language, get_profile
from codesense.languages.profiles import PROFILES, is_supported_language
from codesense.lexer import Lexer, Token, TokenCategory, dump_tokens, tokenize, tokenize_source


def lex(text: str, language: str = "javascript") -> list[tuple[str, str]]:
    return [(token.category.value, token.lexeme) for token in tokenize_source(text, language)]


def test_function_declaration_tokenizes_with_keywords_and_punctuation() -> None:
    assert lex("function foo() { return 1 }") == [
        ("keyword", "function"),
        ("identifier", "foo"),
        ("punctuation", "("),
        ("punctuation", ")"),
        ("punctuation", "{"),
        ("keyword", "return"),
        ("number", "1"),
        ("punctuation", "}"),
    ]


def test_keyword_wins_equal_length_tie_but_longer_identifier_wins() -> None:
    assert lex("if iffy returnValue") == [
        ("keyword", "if"),
        ("identifier", "iffy"),
        ("identifier", "returnValue"),
    ]


def test_comments_and_whitespace_are_dropped() -> None:
    assert lex("x // trailing comment") == [("identifier", "x")]
    assert lex("/* block */ y") == [("identifier", "y")]


def test_block_comment_beats_shorter_operator_cluster() -> None:
    assert lex("a /* b */ c") == [("identifier", "a"), ("identifier", "c")]


def test_unrecognized_characters_are_skipped_silently() -> None:
    lexer = Lexer("a @ b", get_profile("javascript"))

    tokens = lexer.lex()

    assert [token.lexeme for token in tokens] == ["a", "b"]
    assert lexer.skipped == 1


def test_word_boundary_is_relative_to_scan_position() -> None:
    # `1` cannot end a number before `a`, so it is skipped and `abc` starts a fresh scan.
    assert lex("1abc") == [("identifier", "abc")]


def test_lines_are_one_based_and_matches_never_span_lines() -> None:
    tokens = tokenize_source("let a\n'open\nb'", "javascript")

    assert [(token.lexeme, token.line) for token in tokens] == [
        ("let", 1),
        ("a", 1),
        ("open", 2),
        ("b", 3),
    ]


def test_operator_clusters_are_maximal() -> None:
    assert lex("a += ++b") == [
        ("identifier", "a"),
        ("operator", "+="),
        ("operator", "++"),
        ("identifier", "b"),
    ]


def test_string_and_number_literals() -> None:
    assert lex("'hi' + \"there\" 3.14") == [
        ("string", "'hi'"),
        ("operator", "+"),
        ('string', '"there"'),
        ("number", "3.14"),
    ]


def test_python_triple_quoted_string_is_one_token() -> None:
    assert lex('x = """doc"""', "python") == [
        ("identifier", "x"),
        ("operator", "="),
        ("string", '"""doc"""'),
    ]


def test_python_comment_and_keywords() -> None:
    assert lex("def f(): # comment", "python") == [
        ("keyword", "def"),
        ("identifier", "f"),
        ("punctuation", "("),
        ("punctuation", ")"),
        ("operator", ":"),
    ]


def test_c_preprocessor_directive() -> None:
    assert lex("#include <stdio.h>", "c") == [
        ("preprocessor", "#include"),
        ("operator", "<"),
        ("identifier", "stdio"),
        ("punctuation", "."),
        ("identifier", "h"),
        ("operator", ">"),
    ]


def test_java_single_quotes_are_not_strings() -> None:
    assert ("string", "'c'") not in lex("char c = 'c';", "java")


def test_unknown_language_uses_javascript_profile() -> None:
    assert tokenize_source("let x", "ruby") == tokenize("let x", get_profile("javascript"))
    assert get_profile("ruby").name == "javascript"


def test_tokenize_is_deterministic() -> None:
    source = "const a = b(1, 'x');\nif (a) { a.b = [2]; }"

    assert tokenize_source(source, "typescript") == tokenize_source(source, "typescript")


def test_token_to_dict() -> None:
    token = Token(lexeme="x", category=TokenCategory.IDENTIFIER, line=3)

    assert token.to_dict() == {"lexeme": "x", "category": "identifier", "line": 3}


def test_registry_covers_every_language() -> None:
    assert set(PROFILES) == set(Language)
    assert all(is_supported_language(language) for language in Language)
    assert not is_supported_language("ruby")
    assert get_profile("ruby") is PROFILES[Language.JAVASCRIPT]
    assert Language.CPP.display_name == "C++"


def test_dump_tokens_prints_one_row_per_token(capsys: pytest.CaptureFixture[str]) -> None:
    dump_tokens(tokenize_source("let x", "javascript"))

    assert capsys.readouterr().out.splitlines() == [
        "000 KEYWORD      line=1    lexeme='let'",
        "001 IDENTIFIER   line=1    lexeme='x'",
    ]


def test_word_classes_are_ascii_only() -> None:
    lexer = Lexer("const café = 1;", get_profile("javascript"))

    tokens = lexer.lex()

    assert [(token.category.value, token.lexeme) for token in tokens] == [
        ("keyword", "const"),
        ("identifier", "caf"),
        ("operator", "="),
        ("number", "1"),
        ("punctuation", ";"),
    ]
    assert lexer.skipped == 1
    assert lex("x = ٣", "python") == [("identifier", "x"), ("operator", "=")]
