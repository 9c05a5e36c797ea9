"""Recursive-descent parser that renders the parse tree in Graphviz DOT form."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

from .lexer import Token, TokenType
from .suggest import format_suggestion

TYPE_KEYWORDS = ("int", "float", "char", "double", "void")
PARAMETER_TYPES = ("int", "float", "char", "double")
_STATEMENT_KEYWORDS = ("return", "if", "while", "for")

_END = Token(TokenType.EOF, "", 0)


class ParseError(Exception):
    """Raised on the first syntax error found."""

    def __init__(
        self,
        error_type: str,
        message: str,
        token: Token,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(
            f"Syntax Error [{error_type}]: {message} at '{token.value}' (line {token.line})"
        )
        self.error_type = error_type
        self.message = message
        self.token = token
        self.suggestion = suggestion


class Parser:
    """Parses a token list into a DOT description of its parse tree."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens = list(tokens)
        self._pos = 0
        self._next_id = 0
        self._lines: list[str] = []

    # token access

    def _peek(self) -> Token:
        if self._pos < len(self.tokens):
            return self.tokens[self._pos]
        return _END

    def _previous(self) -> Token:
        return self.tokens[self._pos - 1]

    def _advance(self) -> Token:
        token = self._peek()
        self._pos += 1
        return token

    def _match(self, kind: TokenType, value: str | None = None) -> bool:
        token = self._peek()
        if token.type is kind and (value is None or token.value == value):
            self._pos += 1
            return True
        return False

    def _at_type(self, types: tuple[str, ...] = TYPE_KEYWORDS) -> bool:
        token = self._peek()
        return token.type is TokenType.KEYWORD and token.value in types

    def _error(self, error_type: str, message: str, suggestion: str | None = None):
        raise ParseError(error_type, message, self._peek(), suggestion)

    def _expect(self, kind: TokenType, error_type: str, message: str) -> None:
        if not self._match(kind):
            self._error(error_type, message)

    def _expect_type(self) -> None:
        if not self._at_type():
            token = self._peek()
            hint = format_suggestion(token.value, TYPE_KEYWORDS, token.line)
            self._error("MissingTypeSpecifier", "Expected type specifier", hint)
        self._pos += 1

    # output

    def _new_node(self, label: str) -> int:
        node_id = self._next_id
        self._next_id += 1
        self._lines.append(f'  node{node_id} [label="{label}"];')
        return node_id

    def _edge(self, parent: int, child: int) -> None:
        self._lines.append(f"  node{parent} -> node{child};")

    def _token_node(self, token: Token) -> int:
        return self._new_node(f"{token.value}\\n[{token.type.value}]")

    def _edge_previous(self, parent: int) -> None:
        self._edge(parent, self._token_node(self._previous()))

    # grammar

    def _expr(self) -> int:
        node = self._new_node("expr")
        token = self._peek()
        if token.type in (TokenType.IDENTIFIER, TokenType.NUMBER, TokenType.STRING):
            self._edge(node, self._token_node(self._advance()))
        elif token.type is TokenType.LPAREN:
            self._edge(node, self._token_node(self._advance()))
            self._edge(node, self._expr())
            self._expect(TokenType.RPAREN, "MissingClosingParenthesis", "Expected ')'")
            self._edge_previous(node)
        else:
            self._error(
                "InvalidExpressionStart", "Expected identifier, number, or '('"
            )

        while self._peek().type is TokenType.OPERATOR:
            self._edge(node, self._token_node(self._advance()))
            self._edge(node, self._expr())
        return node

    def _decl(self) -> int:
        node = self._new_node("decl")
        self._expect_type()
        self._edge_previous(node)
        self._expect(TokenType.IDENTIFIER, "MissingIdentifier", "Expected identifier")
        self._edge_previous(node)
        self._expect(TokenType.SEMICOLON, "MissingSemicolon", "Expected ';'")
        self._edge_previous(node)
        return node

    def _condition_header(self, node: int, keyword: str) -> None:
        self._edge_previous(node)
        self._expect(
            TokenType.LPAREN,
            "MissingOpeningParenthesis",
            f"Expected '(' after '{keyword}'",
        )
        self._edge_previous(node)
        self._edge(node, self._expr())
        self._expect(
            TokenType.RPAREN,
            "MissingClosingParenthesis",
            "Expected ')' after condition",
        )
        self._edge_previous(node)

    def _for_tail(self, node: int) -> None:
        self._edge_previous(node)
        self._expect(
            TokenType.LPAREN,
            "MissingOpeningParenthesis",
            "Expected '(' after 'for'",
        )
        self._edge_previous(node)

        if self._at_type():
            self._edge(node, self._decl())
        elif self._peek().type is TokenType.IDENTIFIER:
            self._edge(node, self._stmt())
        elif not self._match(TokenType.SEMICOLON):
            self._error(
                "MissingForInit", "Expected initialization or ';' in for loop"
            )

        if self._peek().type is not TokenType.SEMICOLON:
            self._edge(node, self._expr())
        self._expect(
            TokenType.SEMICOLON,
            "MissingSemicolon",
            "Expected ';' after for loop condition",
        )

        if self._peek().type is TokenType.IDENTIFIER:
            self._edge(node, self._token_node(self._advance()))
            self._expect(
                TokenType.ASSIGN,
                "MissingAssignmentOperator",
                "Expected '=' in for loop increment",
            )
            self._edge_previous(node)
            self._edge(node, self._expr())
        elif self._peek().type is not TokenType.RPAREN:
            self._error(
                "MissingForIncrement",
                "Expected assignment or ')' in for loop increment",
            )

        self._expect(
            TokenType.RPAREN,
            "MissingClosingParenthesis",
            "Expected ')' after for loop increment",
        )
        self._edge_previous(node)
        self._edge(node, self._block())

    def _stmt(self) -> int:
        node = self._new_node("stmt")

        if self._match(TokenType.IDENTIFIER):
            self._edge_previous(node)
            self._expect(
                TokenType.ASSIGN, "MissingAssignmentOperator", "Expected '='"
            )
            self._edge_previous(node)
            self._edge(node, self._expr())
            self._expect(TokenType.SEMICOLON, "MissingSemicolon", "Expected ';'")
            self._edge_previous(node)
        elif self._match(TokenType.KEYWORD, "return"):
            self._edge_previous(node)
            self._edge(node, self._expr())
            self._expect(
                TokenType.SEMICOLON, "MissingSemicolon", "Expected ';' after return"
            )
            self._edge_previous(node)
        elif self._match(TokenType.KEYWORD, "if"):
            self._condition_header(node, "if")
            self._edge(node, self._block())
            if self._match(TokenType.KEYWORD, "else"):
                self._edge_previous(node)
                self._edge(node, self._block())
        elif self._match(TokenType.KEYWORD, "while"):
            self._condition_header(node, "while")
            self._edge(node, self._block())
        elif self._match(TokenType.KEYWORD, "for"):
            self._for_tail(node)
        else:
            self._error("UnknownStatement", "Unknown statement")
        return node

    def _starts_statement(self) -> bool:
        token = self._peek()
        return token.type is TokenType.IDENTIFIER or token.value in _STATEMENT_KEYWORDS

    def _block(self) -> int:
        node = self._new_node("block")
        self._expect(TokenType.LBRACE, "MissingOpeningBrace", "Expected '{'")
        self._edge_previous(node)

        while self._at_type():
            self._edge(node, self._decl())
        while self._starts_statement():
            self._edge(node, self._stmt())

        self._expect(TokenType.RBRACE, "MissingClosingBrace", "Expected '}'")
        self._edge_previous(node)
        return node

    def _func_def(self) -> int:
        node = self._new_node("func_def")
        self._expect_type()
        self._edge_previous(node)
        self._expect(
            TokenType.IDENTIFIER, "MissingFunctionName", "Expected function name"
        )
        self._edge_previous(node)
        self._expect(
            TokenType.LPAREN,
            "MissingOpeningParenthesis",
            "Expected '(' after function name",
        )
        self._edge_previous(node)

        if self._at_type(PARAMETER_TYPES):
            self._edge(node, self._token_node(self._advance()))
            self._expect(
                TokenType.IDENTIFIER,
                "MissingParameterName",
                "Expected parameter name",
            )
            self._edge_previous(node)

        self._expect(
            TokenType.RPAREN,
            "MissingClosingParenthesis",
            "Expected ')' after parameters",
        )
        self._edge_previous(node)
        self._edge(node, self._block())
        return node

    def _func_def_list(self) -> int:
        node = self._new_node("func_def_list")
        while self._at_type():
            self._edge(node, self._func_def())
        return node

    def _program(self) -> int:
        node = self._new_node("program")
        self._edge(node, self._func_def_list())
        return node

    def parse(self) -> str:
        """Parse the tokens and return the parse tree as DOT text."""
        self._pos = 0
        self._next_id = 0
        self._lines = [
            "digraph ParseTree {",
            '  node [shape=box, fontname="Courier"];',
        ]
        self._program()
        self._lines.append("}")
        return "\n".join(self._lines) + "\n"


def parse_tokens(tokens: Iterable[Token]) -> str:
    """Parse ``tokens`` and return the DOT parse tree; raise ParseError on bad syntax."""
    return Parser(tokens).parse()


def write_parse_tree(tokens: Iterable[Token], path: str | PathLike[str]) -> str:
    """Parse ``tokens`` and write the DOT parse tree to ``path``."""
    dot = parse_tokens(tokens)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(dot)
    return dot