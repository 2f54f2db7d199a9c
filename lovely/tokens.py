"""Token kinds and tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from lovely.span import Span

__all__ = ["TokenKind", "Token"]


class TokenKind(Enum):
    """Every kind of token the lexer can produce."""

    # keywords
    FUN = auto()
    UNIT = auto()
    TRUE = auto()
    FALSE = auto()

    # syntax
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    COLON = auto()
    COMMA = auto()
    TILDE = auto()
    SEMICOLON = auto()
    SINGLE_EQUAL = auto()

    # operators
    EXCLAMATION_MARK = auto()
    PLUS = auto()
    MINUS = auto()
    SLASH = auto()
    ASTERISK = auto()
    BIT_AND = auto()
    BIT_OR = auto()
    BIT_XOR = auto()
    DOUBLE_EQUAL = auto()
    NOT_EQUAL = auto()
    LESS_THAN = auto()
    GREATER_THAN = auto()
    LESS_THAN_OR_EQUAL = auto()
    GREATER_THAN_OR_EQUAL = auto()

    IDENTIFIER = auto()
    INT_LITERAL = auto()

    EOF = auto()

    def __str__(self) -> str:
        return _DISPLAY[self]


_DISPLAY = {
    TokenKind.FUN: "fun",
    TokenKind.UNIT: "unit",
    TokenKind.TRUE: "true",
    TokenKind.FALSE: "false",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    TokenKind.COLON: ":",
    TokenKind.COMMA: ",",
    TokenKind.TILDE: "~",
    TokenKind.SEMICOLON: ";",
    TokenKind.SINGLE_EQUAL: "=",
    TokenKind.EXCLAMATION_MARK: "!",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.SLASH: "/",
    TokenKind.ASTERISK: "*",
    TokenKind.BIT_AND: "&",
    TokenKind.BIT_OR: "|",
    TokenKind.BIT_XOR: "^",
    TokenKind.DOUBLE_EQUAL: "=",
    TokenKind.NOT_EQUAL: "!=",
    TokenKind.LESS_THAN: "<",
    TokenKind.GREATER_THAN: ">",
    TokenKind.LESS_THAN_OR_EQUAL: "<=",
    TokenKind.GREATER_THAN_OR_EQUAL: ">=",
    TokenKind.IDENTIFIER: "identifier",
    TokenKind.INT_LITERAL: "integer literal",
    TokenKind.EOF: "EOF",
}


@dataclass(frozen=True)
class Token:
    """A token kind together with the span it covers."""

    kind: TokenKind
    span: Span

    @classmethod
    def from_size(cls, kind: TokenKind, start: int, size: int) -> Token:
        """Build a token starting at ``start`` and ``size`` characters long."""
        return cls(kind, Span(start, start + size))