"""
Runs one piece of Lox source through the front end.

``run`` scans, parses and prints, and returns everything the shell needs
as a ``RunResult``. Whether an error happened is part of that result; there
is no interpreter-wide "had error" flag to reset.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .lexer import Lexer, LexerError, Token
from .parser import Parser, ParseError, Expression, AstPrinter

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of running one source text."""
    expression: Optional[Expression] = None
    output: Optional[str] = None
    diagnostics: List[str] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return len(self.diagnostics) > 0


def format_diagnostic(line: int, location: str, message: str) -> str:
    return f"[line {line}] Error{location}: {message}"


def token_location(token: Token) -> str:
    """Location suffix naming the offending token."""
    if token.is_eof:
        return " at end"
    return f" at '{token.lexeme}'"


def lexer_diagnostic(error: LexerError) -> str:
    return format_diagnostic(error.line, "", error.message)


def parse_diagnostic(error: ParseError) -> str:
    return format_diagnostic(error.token.line, token_location(error.token), error.message)


def run(source: Union[bytes, str], filename: str = "<stdin>") -> RunResult:
    """
    Scan, parse and print one source text.

    Lexical errors are all reported and stop the run before parsing; a
    syntax error is reported on its own.
    """
    lexer = Lexer(source, filename)
    tokens = lexer.scan_tokens()
    if lexer.has_errors():
        for error in lexer.errors:
            logger.debug("%s: %s", filename, error.diagnostic)
        return RunResult(diagnostics=[lexer_diagnostic(e) for e in lexer.errors])

    try:
        expression = Parser(tokens).parse()
    except ParseError as e:
        logger.debug("%s: %s", filename, e.diagnostic)
        return RunResult(diagnostics=[parse_diagnostic(e)])

    output = AstPrinter().print(expression)
    logger.debug("%s: %s", filename, output)
    return RunResult(expression=expression, output=output)
