"""
Token definitions for the Lox lexer.

This module defines every token type the scanner can produce:
- Single-character punctuation and operators
- One-or-two character comparison operators
- Literals (numbers, strings) and identifiers
- Reserved keywords
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Dict


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # answer, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw source text), literal value
    and the source line it was scanned on.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any                      # Literal payload (float, str) or None
    line: int

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, line={self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.type in {TokenType.NUMBER, TokenType.STRING}

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF


# Lookup tables used by the lexer

SINGLE_CHAR_TOKENS: Dict[int, TokenType] = {
    ord("("): TokenType.LEFT_PAREN,
    ord(")"): TokenType.RIGHT_PAREN,
    ord("{"): TokenType.LEFT_BRACE,
    ord("}"): TokenType.RIGHT_BRACE,
    ord(","): TokenType.COMMA,
    ord("."): TokenType.DOT,
    ord("-"): TokenType.MINUS,
    ord("+"): TokenType.PLUS,
    ord(";"): TokenType.SEMICOLON,
    ord("*"): TokenType.STAR,
}

# Operators that become a two-character token when followed by '='
# first byte -> (without '=', with '=')
EQUAL_SUFFIX_TOKENS: Dict[int, tuple] = {
    ord("!"): (TokenType.BANG, TokenType.BANG_EQUAL),
    ord("="): (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    ord("<"): (TokenType.LESS, TokenType.LESS_EQUAL),
    ord(">"): (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())
