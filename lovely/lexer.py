"""Turns source text into a stream of tokens."""

from __future__ import annotations

from collections.abc import Iterator

from lovely.tokens import Token, TokenKind

__all__ = ["LexError", "Lexer", "tokenize"]


class LexError(ValueError):
    """Raised when the lexer meets a character that starts no token."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"illegal token: {char}")
        self.char = char
        self.position = position


_SINGLE_CHAR = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "/": TokenKind.SLASH,
    "*": TokenKind.ASTERISK,
    "&": TokenKind.BIT_AND,
    "|": TokenKind.BIT_OR,
    "^": TokenKind.BIT_XOR,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "~": TokenKind.TILDE,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}

# first char -> (kind alone, kind when followed by '=')
_MAYBE_EQUAL = {
    "=": (TokenKind.SINGLE_EQUAL, TokenKind.DOUBLE_EQUAL),
    "!": (TokenKind.EXCLAMATION_MARK, TokenKind.NOT_EQUAL),
    "<": (TokenKind.LESS_THAN, TokenKind.LESS_THAN_OR_EQUAL),
    ">": (TokenKind.GREATER_THAN, TokenKind.GREATER_THAN_OR_EQUAL),
}

_KEYWORDS = {
    "fun": TokenKind.FUN,
    "unit": TokenKind.UNIT,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}

_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_DIGITS = frozenset("0123456789")
_IDENT_START = _ASCII_LETTERS | {"_"}
_IDENT_CONTINUE = _IDENT_START | _ASCII_DIGITS


class Lexer:
    """Iterator over the tokens of a source text; stops at end of input."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._pos = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self._next_token()
        if token.kind is TokenKind.EOF:
            raise StopIteration
        return token

    def _peek(self) -> str | None:
        return self.source[self._pos] if self._pos < len(self.source) else None

    def _skip_while(self, allowed) -> None:
        source = self.source
        while self._pos < len(source) and allowed(source[self._pos]):
            self._pos += 1

    def _next_token(self) -> Token:
        while True:
            self._skip_while(str.isspace)
            char = self._peek()
            if char != "#":
                break
            self._skip_while(lambda c: c != "\n")

        start = self._pos
        if char is None:
            return Token.from_size(TokenKind.EOF, len(self.source), 1)

        if char in _SINGLE_CHAR:
            self._pos += 1
            return Token.from_size(_SINGLE_CHAR[char], start, 1)

        if char in _MAYBE_EQUAL:
            alone, with_equal = _MAYBE_EQUAL[char]
            self._pos += 1
            if self._peek() == "=":
                self._pos += 1
                return Token.from_size(with_equal, start, 2)
            return Token.from_size(alone, start, 1)

        if char in _IDENT_START:
            self._skip_while(_IDENT_CONTINUE.__contains__)
            word = self.source[start : self._pos]
            kind = _KEYWORDS.get(word, TokenKind.IDENTIFIER)
            return Token.from_size(kind, start, len(word))

        if char in _ASCII_DIGITS:
            self._skip_while(_ASCII_DIGITS.__contains__)
            return Token.from_size(TokenKind.INT_LITERAL, start, self._pos - start)

        raise LexError(char, start)


def tokenize(source: str) -> list[Token]:
    """Return every token of ``source``, without the end-of-input token."""
    return list(Lexer(source))