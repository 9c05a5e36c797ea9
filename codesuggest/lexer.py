"""Tokenizer for the small C-like input language."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from os import PathLike

from .suggest import format_suggestion

KEYWORDS = frozenset(
    {
        "int", "float", "if", "else", "return", "while",
        "for", "do", "break", "continue", "switch", "case",
        "default", "void", "char", "double", "struct", "const",
    }
)

SUGGESTABLE_KEYWORDS = (
    "int", "float", "char", "double", "void",
    "for", "while", "if", "else", "return",
)


class TokenType(enum.Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING = "STRING"
    OPERATOR = "OPERATOR"
    ASSIGN = "ASSIGN"
    SEMICOLON = "SEMICOLON"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    EOF = "EOF"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int


@dataclass
class LexResult:
    """Tokens produced from a source text, plus warnings and suggestions in order."""

    tokens: list[Token] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)


_PUNCTUATION = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
}

_TOKEN_RE = re.compile(
    r"""
    (?P<space>[ \t\n\v\f\r]+)
  | (?P<backspace>\x08)
  | (?P<ident>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<number>[0-9]+(?:\.[0-9]*)?)
  | "(?P<string>[^"]{0,63})(?P<close>"?)
  | (?P<assign>=(?!=))
  | (?P<relop>[<>!=]=?)
  | (?P<arith>[-+*/])
  | (?P<punct>[(){};])
  | (?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)


def is_keyword(word: str) -> bool:
    """Return True if ``word`` is a reserved keyword."""
    return word in KEYWORDS


def tokenize(code: str) -> LexResult:
    """Split ``code`` into tokens, ending with an EOF token."""
    result = LexResult()
    line = 1

    def add(kind: TokenType, value: str) -> None:
        result.tokens.append(Token(kind, value, line))

    for match in _TOKEN_RE.finditer(code):
        kind = match.lastgroup
        text = match.group()
        if kind == "space":
            line += text.count("\n")
        elif kind == "backspace":
            result.messages.append(
                f"Warning: Skipping backspace character '\\b' (line {line})"
            )
        elif kind == "ident":
            if is_keyword(text):
                add(TokenType.KEYWORD, text)
            else:
                hint = format_suggestion(text, SUGGESTABLE_KEYWORDS, line)
                if hint is not None:
                    result.messages.append(hint)
                add(TokenType.IDENTIFIER, text)
        elif kind == "number":
            add(TokenType.NUMBER, text)
        elif kind in ("string", "close"):
            if not match.group("close"):
                result.messages.append(
                    f"Warning: Unterminated string literal at line {line}"
                )
            add(TokenType.STRING, match.group("string"))
        elif kind == "assign":
            add(TokenType.ASSIGN, "=")
        elif kind in ("relop", "arith"):
            add(TokenType.OPERATOR, text)
        elif kind == "punct":
            add(_PUNCTUATION[text], text)
        else:
            result.messages.append(
                f"Warning: Skipping unknown character '{text}' (line {line})"
            )

    add(TokenType.EOF, "EOF")
    return result


def format_tokens(tokens: list[Token]) -> str:
    """Render tokens as one 'Token Type: ..., Value: ...' line each."""
    return "".join(
        f"Token Type: {token.type.value}, Value: {token.value}\n" for token in tokens
    )


def write_tokens(tokens: list[Token], path: str | PathLike[str]) -> None:
    """Write the token listing to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(format_tokens(tokens))