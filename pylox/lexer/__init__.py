"""
Lox Lexer Package

Implements the scanner that turns Lox source into tokens.

Key Features:
- Byte-level scanning with one-byte lookahead for two-character operators
- String and number literals with line accounting
- Line (//) and block (/* */) comments
- Error aggregation: every bad lexeme in the input is reported
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Lexer, scan_tokens, tokenize_string
from .errors import (
    LexerError, InvalidUtf8Char, UnexpectedCharacter,
    UnterminatedString, UnterminatedComment
)

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "scan_tokens",
    "tokenize_string",
    "LexerError",
    "InvalidUtf8Char",
    "UnexpectedCharacter",
    "UnterminatedString",
    "UnterminatedComment",
]
