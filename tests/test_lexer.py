import pytest

from codesuggest.lexer import (
    Token,
    TokenType,
    format_tokens,
    is_keyword,
    tokenize,
    write_tokens,
)


def kinds(result):
    return [token.type for token in result.tokens]


def values(result):
    return [token.value for token in result.tokens]


def test_declaration():
    result = tokenize("int a;")
    assert kinds(result) == [
        TokenType.KEYWORD,
        TokenType.IDENTIFIER,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]
    assert values(result) == ["int", "a", ";", "EOF"]
    assert result.messages == []


def test_always_ends_with_eof():
    result = tokenize("")
    assert result.tokens == [Token(TokenType.EOF, "EOF", 1)]


def test_line_numbers_follow_newlines():
    result = tokenize("a\n\nb\n")
    assert [token.line for token in result.tokens] == [1, 3, 4]


@pytest.mark.parametrize("op", ["==", "<=", ">=", "!=", "<", ">", "!"])
def test_relational_operators(op):
    result = tokenize(f"a {op} b")
    assert result.tokens[1] == Token(TokenType.OPERATOR, op, 1)


@pytest.mark.parametrize("op", ["+", "-", "*", "/"])
def test_arithmetic_operators(op):
    result = tokenize(f"x{op}y")
    assert result.tokens[1] == Token(TokenType.OPERATOR, op, 1)


def test_assignment_versus_equality():
    result = tokenize("a = b == c")
    assert kinds(result)[:5] == [
        TokenType.IDENTIFIER,
        TokenType.ASSIGN,
        TokenType.IDENTIFIER,
        TokenType.OPERATOR,
        TokenType.IDENTIFIER,
    ]


def test_punctuation():
    result = tokenize("(){};")
    assert kinds(result) == [
        TokenType.LPAREN,
        TokenType.RPAREN,
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]


def test_number_takes_a_single_dot():
    result = tokenize("3.14.5")
    assert values(result) == ["3.14", "5", "EOF"]
    assert result.messages == ["Warning: Skipping unknown character '.' (line 1)"]


def test_string_literal():
    result = tokenize('"hi there"')
    assert result.tokens[0] == Token(TokenType.STRING, "hi there", 1)
    assert result.messages == []


def test_unterminated_string():
    result = tokenize('"abc')
    assert result.tokens[0] == Token(TokenType.STRING, "abc", 1)
    assert result.messages == ["Warning: Unterminated string literal at line 1"]


def test_string_is_capped_at_63_characters():
    result = tokenize('"' + "x" * 70 + '"')
    assert result.tokens[0].value == "x" * 63
    assert result.tokens[0].type is TokenType.STRING


def test_backspace_is_skipped_with_warning():
    result = tokenize("a\bb")
    assert values(result) == ["a", "b", "EOF"]
    assert result.messages == ["Warning: Skipping backspace character '\\b' (line 1)"]


def test_misspelled_keyword_gets_suggestion():
    result = tokenize("itn x")
    assert result.tokens[0] == Token(TokenType.IDENTIFIER, "itn", 1)
    assert result.messages == ["Did you mean 'int'? (line 1)"]


def test_identifiers_allow_underscores_and_digits():
    result = tokenize("_foo9 bar_1")
    assert values(result) == ["_foo9", "bar_1", "EOF"]


@pytest.mark.parametrize("word", ["while", "struct", "const", "return"])
def test_keywords(word):
    assert is_keyword(word)
    assert tokenize(word).tokens[0].type is TokenType.KEYWORD


def test_non_keyword():
    assert not is_keyword("main")


def test_format_tokens():
    result = tokenize("int a;")
    text = format_tokens(result.tokens)
    assert text.splitlines()[0] == "Token Type: KEYWORD, Value: int"
    assert text.splitlines()[-1] == "Token Type: EOF, Value: EOF"
    assert text.count("\n") == len(result.tokens)


def test_write_tokens_round_trip(tmp_path):
    result = tokenize("int main() { return 0; }")
    path = tmp_path / "tokens.txt"
    write_tokens(result.tokens, path)
    assert path.read_text(encoding="utf-8") == format_tokens(result.tokens)