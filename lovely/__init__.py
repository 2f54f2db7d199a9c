"""Lexer, parser and type-checker data model for the Lovely language."""

__version__ = "0.1.0"
__all__ = ["checker", "lexer", "parser", "span", "syntax", "tokens"]