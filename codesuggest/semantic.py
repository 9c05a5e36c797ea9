"""Semantic checks over a token stream: declarations, types and control headers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .lexer import Token, TokenType
from .suggest import format_suggestion

TYPE_KEYWORDS = ("int", "float", "char", "double", "void")
_MISSPELLING_TARGETS = ("int", "float")
PASSED_MESSAGE = "Semantic analysis passed: All variables and returns are valid"

_END = Token(TokenType.EOF, "", 0)


class SemanticError(Exception):
    """Raised when the token stream breaks a semantic rule."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Semantic Error: {message}")
        self.message = message


@dataclass(frozen=True)
class Symbol:
    name: str
    type: str


class SemanticAnalyzer:
    """Walks the tokens once, recording declarations and checking their use."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens = list(tokens)
        self.symbols: dict[str, Symbol] = {}
        self.messages: list[str] = []

    def _at(self, index: int) -> Token:
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return _END

    def _declare(self, name: str, type_name: str) -> None:
        if name in self.symbols:
            raise SemanticError(f"Redeclaration of variable '{name}'")
        self.symbols[name] = Symbol(name, type_name)

    def _check_assignment(self, index: int, token: Token) -> None:
        target = self._at(index - 2)
        if not (
            index >= 2
            and self._at(index - 1).type is TokenType.ASSIGN
            and target.type is TokenType.IDENTIFIER
        ):
            return
        symbol = self.symbols.get(target.value)
        if symbol is None or token.type is not TokenType.STRING:
            return
        if symbol.type in ("int", "float"):
            raise SemanticError(
                f"Type mismatch - cannot assign string to {symbol.type} variable "
                f"'{target.value}' (line {token.line})"
            )

    def _check_division(self, index: int, token: Token) -> None:
        if index >= len(self.tokens) - 2:
            return
        operator = self._at(index + 1)
        if operator.type is not TokenType.OPERATOR or operator.value != "/":
            return
        divisor = self._at(index + 2)
        if divisor.type is TokenType.NUMBER and divisor.value == "0":
            raise SemanticError(f"Division by zero at line {token.line}")
        if divisor.type is TokenType.IDENTIFIER:
            self.messages.append(
                f"Warning: Potential division by zero at line {token.line} - "
                f"check that '{divisor.value}' is not zero"
            )

    def _check_condition(self, index: int, token: Token) -> None:
        if self._at(index + 1).type is not TokenType.LPAREN:
            raise SemanticError(f"Missing '(' after '{token.value}'")
        j = index + 2
        while self._at(j).type not in (TokenType.RPAREN, TokenType.EOF):
            current = self._at(j)
            if current.type is TokenType.IDENTIFIER and current.value not in self.symbols:
                raise SemanticError(
                    f"Undeclared variable '{current.value}' in condition"
                )
            j += 1
        if self._at(j).type is not TokenType.RPAREN:
            raise SemanticError("Missing ')' in condition")

    def _check_for_header(self, index: int) -> None:
        if self._at(index + 1).type is not TokenType.LPAREN:
            raise SemanticError("Missing '(' after 'for'")
        j = index + 2
        semicolons = 0
        while self._at(j).type not in (TokenType.RPAREN, TokenType.EOF):
            current = self._at(j)
            if current.type is TokenType.IDENTIFIER and current.value not in self.symbols:
                raise SemanticError(
                    f"Undeclared variable '{current.value}' in for loop"
                )
            if current.type is TokenType.SEMICOLON:
                semicolons += 1
            j += 1
        if self._at(j).type is not TokenType.RPAREN:
            raise SemanticError("Missing ')' in for loop")
        if semicolons != 2:
            raise SemanticError("Invalid for loop header (should contain two ';')")

    def analyze(self) -> list[str]:
        """Check every token; return warnings and suggestions, ending with the pass line."""
        self.symbols = {}
        self.messages = []
        in_main = False
        return_found = False

        for i, token in enumerate(self.tokens):
            is_keyword = token.type is TokenType.KEYWORD
            following = self._at(i + 1)

            if (
                is_keyword
                and token.value == "int"
                and following.type is TokenType.IDENTIFIER
                and following.value == "main"
            ):
                in_main = True

            if is_keyword and token.value in TYPE_KEYWORDS:
                if following.type is TokenType.IDENTIFIER and (
                    i == 0 or self._at(i - 1).value != "return"
                ):
                    self._declare(following.value, token.value)
            elif is_keyword:
                hint = format_suggestion(token.value, _MISSPELLING_TARGETS, token.line)
                if hint is not None:
                    self.messages.append(hint)

            if (
                token.type is TokenType.IDENTIFIER
                and token.value not in self.symbols
                and token.value != "main"
            ):
                raise SemanticError(f"Undeclared variable '{token.value}'")

            self._check_assignment(i, token)
            self._check_division(i, token)

            if is_keyword and token.value == "return":
                return_found = True
                if following.type not in (TokenType.NUMBER, TokenType.IDENTIFIER):
                    raise SemanticError("Invalid return value")

            if is_keyword and token.value in ("while", "if"):
                self._check_condition(i, token)

            if is_keyword and token.value == "for":
                self._check_for_header(i)

        if in_main and not return_found:
            raise SemanticError("No return statement in main()")

        self.messages.append(PASSED_MESSAGE)
        return self.messages


def check_semantics(tokens: Iterable[Token]) -> list[str]:
    """Analyse ``tokens``; return the messages or raise SemanticError."""
    return SemanticAnalyzer(tokens).analyze()