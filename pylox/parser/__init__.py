"""
Lox Parser Package

Implements the recursive descent expression parser and the expression
tree it produces.

Key Features:
- Precedence and associativity encoded in the rule call chain
- Immutable, structurally comparable expression nodes
- Tag-dispatched visitor contract with a reference printer
- Statement-boundary synchronization for error recovery
"""

from .ast_nodes import (
    ASTNodeType, LiteralType, Expression, ExpressionVisitor,
    Binary, Unary, Literal, Grouping, stringify
)
from .parser import Parser, parse_string
from .ast_printer import AstPrinter, print_ast
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "parse_string",

    # AST nodes
    "ASTNodeType", "LiteralType", "Expression", "ExpressionVisitor",
    "Binary", "Unary", "Literal", "Grouping", "stringify",

    # Printing
    "AstPrinter", "print_ast",

    # Error handling
    "ParseError",
]
