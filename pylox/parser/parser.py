"""
Lox Recursive Descent Parser

One method per grammar rule; the call chain from ``_expression`` down to
``_primary`` encodes operator precedence, lowest first:

    expression -> equality
    equality   -> comparison (("!=" | "==") comparison)*
    comparison -> term ((">" | ">=" | "<" | "<=") term)*
    term       -> factor (("-" | "+") factor)*
    factor     -> unary (("/" | "*") unary)*
    unary      -> ("!" | "-") unary | primary
    primary    -> NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"

Binary levels loop and fold to the left, so they associate left; ``unary``
recurses, so prefix chains nest to the right.

The parser is fail-fast: the first mismatch raises ``ParseError``. The
lexer aggregates instead; once statements exist, the statement driver
should catch each error, call ``synchronize`` and continue so the two
stages report the same way.
"""

import logging
from typing import Callable, List, Union

from ..lexer.tokens import Token, TokenType
from .ast_nodes import Expression, Binary, Unary, Literal, Grouping
from .errors import (
    ParseError, STATEMENT_KEYWORDS,
    create_missing_paren_error, create_expect_expression_error
)

logger = logging.getLogger(__name__)


class Parser:
    """
    Lox expression parser.

    Owns a cursor over an immutable token list that ends with EOF. Build a
    new parser for every token list.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Tokens from the lexer, terminated by an EOF token
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.current = 0

    def parse(self) -> Expression:
        """
        Parse one expression from the token list.

        Tokens after the expression are left unconsumed.

        Raises:
            ParseError: On the first grammar rule that fails to match
        """
        try:
            return self._expression()
        except ParseError as e:
            logger.debug("parse failed at line %d: %s", e.line, e.message)
            raise

    def _expression(self) -> Expression:
        return self._equality()

    def _equality(self) -> Expression:
        return self._binary_level(self._comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def _comparison(self) -> Expression:
        return self._binary_level(
            self._term,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL
        )

    def _term(self) -> Expression:
        return self._binary_level(self._factor, TokenType.MINUS, TokenType.PLUS)

    def _factor(self) -> Expression:
        return self._binary_level(self._unary, TokenType.SLASH, TokenType.STAR)

    def _binary_level(self, operand: Callable[[], Expression], *operators: TokenType) -> Expression:
        """Parse ``operand (operator operand)*`` into a left-nested tree."""
        expr = operand()

        while self._match(*operators):
            operator = self._previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> Expression:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            right = self._unary()
            return Unary(operator, right)

        return self._primary()

    def _primary(self) -> Expression:
        token = self._peek()

        if token.type == TokenType.NUMBER:
            self._advance()
            return Literal.number(token.value)
        if token.type == TokenType.STRING:
            self._advance()
            return Literal.string(token.value)
        if token.type == TokenType.TRUE:
            self._advance()
            return Literal.boolean(True)
        if token.type == TokenType.FALSE:
            self._advance()
            return Literal.boolean(False)
        if token.type == TokenType.NIL:
            self._advance()
            return Literal.nil()

        if token.type == TokenType.LEFT_PAREN:
            self._advance()
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, create_missing_paren_error)
            return Grouping(expr)

        raise create_expect_expression_error(token)

    def synchronize(self):
        """
        Discard tokens up to the next statement boundary.

        Stops after a ';' or in front of a statement keyword, or at EOF.
        """
        self._advance()

        while not self._is_at_end():
            if self._previous().type == TokenType.SEMICOLON:
                return
            if self._peek().type in STATEMENT_KEYWORDS:
                return
            self._advance()

    # Utility methods

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has one of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _consume(self, token_type: TokenType, error: Callable[[Token], ParseError]) -> Token:
        """Consume a token of the expected type or raise ``error(current)``."""
        if self._check(token_type):
            return self._advance()
        raise error(self._peek())

    def _advance(self) -> Token:
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]


def parse_string(source: Union[bytes, str], filename: str = "<string>") -> Expression:
    """
    Convenience function to parse a source string.

    Raises:
        LexerError: The first lexical error, if scanning failed
        ParseError: If parsing fails
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename)
    return Parser(tokens).parse()
