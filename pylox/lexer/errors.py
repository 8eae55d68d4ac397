"""
Error handling for the Lox lexer.

Every lexical problem is a typed exception carrying a diagnostic with the
source line. The lexer collects them instead of stopping, so one scan can
report every bad lexeme in a file.
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Base record for diagnostics (errors, warnings)."""
    message: str
    line: int
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> line {self.line}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception describing one malformed lexeme.

    Subclasses fix the code and message; ``line`` is where the problem
    starts.
    """

    code: Optional[str] = None

    def __init__(
        self,
        message: str,
        line: int,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.message == other.message and self.line == other.line

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.line))


class InvalidUtf8Char(LexerError):
    """A byte sequence in the source is not valid UTF-8."""

    code = "L001"

    def __init__(self, line: int):
        super().__init__(
            f"Invalid UTF-8 character at {line}",
            line,
            help_text="Source files must be encoded as UTF-8."
        )


class UnexpectedCharacter(LexerError):
    """A character that cannot start any token."""

    code = "L002"

    def __init__(self, char: str, line: int):
        if char.isprintable():
            help_text = f"The character '{char}' is not valid in Lox source code."
        else:
            help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
        super().__init__(
            f"Unexpected character `{char}` at {line}",
            line,
            help_text=help_text
        )
        self.char = char


class UnterminatedString(LexerError):
    """Input ended inside a string literal."""

    code = "L003"

    def __init__(self, line: int):
        super().__init__(
            f"Unterminated string starting at {line}",
            line,
            help_text='String literals must be closed with a matching " quote.',
            suggestions=['Add a closing " quote']
        )


class UnterminatedComment(LexerError):
    """Input ended inside a /* block comment */."""

    code = "L004"

    def __init__(self, line: int):
        super().__init__(
            f"Unterminated /* block comment */ starting at {line}",
            line,
            help_text="Block comments must be closed with */.",
            suggestions=["Add a closing */"]
        )