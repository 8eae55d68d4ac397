"""
Lox Lexer - turns source bytes into tokens

Single pass over an immutable byte view with two cursors (``start`` marks
the beginning of the current lexeme, ``current`` the next unread byte) and a
line counter. Bad lexemes are recorded and scanning carries on, so the
caller gets every lexical error of the input from one call.
"""

import logging
from typing import List, Optional, Tuple, Union

from .tokens import Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS
from .errors import (
    LexerError, InvalidUtf8Char, UnexpectedCharacter,
    UnterminatedString, UnterminatedComment
)

logger = logging.getLogger(__name__)

_NUL = 0
_NEWLINE = ord("\n")
_QUOTE = ord('"')
_SLASH = ord("/")
_STAR = ord("*")
_DOT = ord(".")
_EQUAL = ord("=")
_UNDERSCORE = ord("_")
_WHITESPACE = frozenset(b" \r\t")


def _is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def _is_alpha(byte: int) -> bool:
    return 0x61 <= byte <= 0x7A or 0x41 <= byte <= 0x5A or byte == _UNDERSCORE


def _is_alphanumeric(byte: int) -> bool:
    return _is_alpha(byte) or _is_digit(byte)


def _utf8_sequence_length(lead: int) -> int:
    """Length of the UTF-8 sequence introduced by ``lead``, 0 if it cannot start one."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


class Lexer:
    """
    Lox lexical analyzer.

    Converts source code into a list of tokens terminated by exactly one
    EOF token. Errors go to ``self.errors``; a lexer instance is meant to be
    used for one scan and then thrown away.
    """

    def __init__(self, source: Union[bytes, str], filename: str = "<stdin>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source bytes, or text which is encoded as UTF-8
            filename: Name of source file for debug output
        """
        if isinstance(source, str):
            source = source.encode("utf-8", errors="surrogatepass")
        self.source = source
        self.filename = filename
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with the EOF token. Check ``errors``
            (or ``has_errors()``) for problems found along the way.
        """
        while not self._is_at_end():
            self.start = self.current
            try:
                token = self._scan_token()
            except LexerError as e:
                self.errors.append(e)
                continue
            if token is not None:
                self.tokens.append(token)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug(
            "%s: scanned %d tokens, %d errors",
            self.filename, len(self.tokens), len(self.errors)
        )
        return self.tokens

    def _scan_token(self) -> Optional[Token]:
        """Scan one lexeme starting at ``self.start``; None for skipped input."""
        c = self._advance()

        token_type = SINGLE_CHAR_TOKENS.get(c)
        if token_type is not None:
            return self._make_token(token_type)

        pair = EQUAL_SUFFIX_TOKENS.get(c)
        if pair is not None:
            single, double = pair
            return self._make_token(double if self._match(_EQUAL) else single)

        if c == _SLASH:
            if self._match(_SLASH):
                # Line comment runs to the end of the line
                while self._peek() != _NEWLINE and not self._is_at_end():
                    self._advance()
                return None
            if self._match(_STAR):
                self._block_comment()
                return None
            return self._make_token(TokenType.SLASH)

        if c in _WHITESPACE:
            return None

        if c == _NEWLINE:
            self.line += 1
            return None

        if c == _QUOTE:
            return self._string()

        if _is_digit(c):
            return self._number()

        if _is_alpha(c):
            return self._identifier()

        raise self._unexpected_character(c)

    def _block_comment(self):
        """Skip a /* ... */ comment. Comments do not nest."""
        start_line = self.line
        while not self._is_at_end():
            if self._peek() == _STAR and self._peek_next() == _SLASH:
                self._advance()
                self._advance()
                return
            if self._advance() == _NEWLINE:
                self.line += 1
        raise UnterminatedComment(start_line)

    def _string(self) -> Token:
        """Scan a string literal; the opening quote is already consumed."""
        start_line = self.line
        while self._peek() != _QUOTE and not self._is_at_end():
            if self._peek() == _NEWLINE:
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise UnterminatedString(start_line)

        self._advance()  # Closing quote

        value = self._substring(self.start + 1, self.current - 1)
        return self._make_token(TokenType.STRING, value)

    def _number(self) -> Token:
        """Scan a number literal; the first digit is already consumed."""
        while _is_digit(self._peek()):
            self._advance()

        # A trailing '.' without digits after it belongs to the next token
        if self._peek() == _DOT and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        text = self._substring(self.start, self.current)
        return self._make_token(TokenType.NUMBER, float(text))

    def _identifier(self) -> Token:
        """Scan an identifier or keyword."""
        while _is_alphanumeric(self._peek()):
            self._advance()

        text = self._substring(self.start, self.current)
        token_type = KEYWORDS.get(text)
        if token_type is not None:
            return self._make_token(token_type)
        return self._make_token(TokenType.IDENTIFIER, text)

    def _unexpected_character(self, lead: int) -> LexerError:
        """Build the error for a byte that starts no token.

        Multi-byte UTF-8 characters are consumed whole so the error names the
        real character; undecodable bytes are reported one at a time.
        """
        length = _utf8_sequence_length(lead)
        if length == 0:
            return InvalidUtf8Char(self.line)

        end = self.start + length
        try:
            char = self.source[self.start:end].decode("utf-8")
        except UnicodeDecodeError:
            return InvalidUtf8Char(self.line)

        self.current = end
        return UnexpectedCharacter(char, self.line)

    # Utility methods

    def _make_token(self, token_type: TokenType, value=None) -> Token:
        lexeme = self._substring(self.start, self.current)
        return Token(token_type, lexeme, value, self.line)

    def _substring(self, start: int, end: int) -> str:
        try:
            return self.source[start:end].decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidUtf8Char(self.line) from None

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> int:
        """Consume and return the current byte."""
        c = self.source[self.current]
        self.current += 1
        return c

    def _match(self, expected: int) -> bool:
        """Consume the current byte only if it equals ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> int:
        if self._is_at_end():
            return _NUL
        return self.source[self.current]

    def _peek_next(self) -> int:
        if self.current + 1 >= len(self.source):
            return _NUL
        return self.source[self.current + 1]

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


def scan_tokens(source: Union[bytes, str], filename: str = "<stdin>") -> Tuple[List[Token], List[LexerError]]:
    """
    Scan a whole source and return the tokens together with every error.

    Args:
        source: Source bytes or text
        filename: Filename for debug output

    Returns:
        ``(tokens, errors)``; ``errors`` is empty for a clean scan
    """
    lexer = Lexer(source, filename)
    tokens = lexer.scan_tokens()
    return tokens, list(lexer.errors)


def tokenize_string(source: Union[bytes, str], filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Raises:
        LexerError: The first error encountered, if any
    """
    tokens, errors = scan_tokens(source, filename)
    if errors:
        raise errors[0]
    return tokens
