"""
Error handling for the Lox parser.

A syntax error names the offending token, so diagnostics can point at its
lexeme and line. The statement boundary table drives ``Parser.synchronize``.
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when a grammar rule fails to match.

    ``token`` is the token the parser was looking at when it failed.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            line=token.line,
            severity="error",
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def line(self) -> int:
        return self.token.line

    def __str__(self) -> str:
        return self.message


# Keywords that begin a statement; recovery stops in front of them
STATEMENT_KEYWORDS = frozenset({
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})


def create_missing_paren_error(found: Token) -> ParseError:
    """Create the error for a grouping without its closing ')'."""
    return ParseError(
        "Expect ')' after expression.",
        found,
        suggestions=["Add a closing parenthesis ')'"]
    )


def create_expect_expression_error(found: Token) -> ParseError:
    """Create the error for a token that cannot start an expression."""
    return ParseError(
        "Expect expression.",
        found,
        help_text="Expressions start with a literal, '(', '!' or '-'."
    )
