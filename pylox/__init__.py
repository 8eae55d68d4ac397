"""
pylox

Lexical and syntactic front end for the Lox scripting language: a scanner
that turns source into tokens and a recursive descent parser that builds
expression trees from them.

Architecture:
    pylox/
    ├── lexer/           # Tokens, scanner, lexical errors
    ├── parser/          # Expression tree, parser, printer, syntax errors
    ├── runner.py        # One run of the front end, with diagnostics
    └── cli.py           # REPL / script shell

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, scan_tokens
from .parser import Parser, AstPrinter
from .runner import run, RunResult

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "AstPrinter",

    # Entry points
    "scan_tokens",
    "run",
    "RunResult",

    # Version info
    "__version__",
    "__license__",
]
