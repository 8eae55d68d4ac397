"""
Reference visitor that renders an expression tree in parenthesized prefix
form, e.g. ``-123 * (45.67)`` becomes ``(* (- 123) (group 45.67))``.
"""

from typing import Any

from ..lexer.tokens import Token
from .ast_nodes import Expression, ExpressionVisitor, LiteralType, stringify


class AstPrinter(ExpressionVisitor[str]):
    """Prints expressions; used by the shell and golden-string tests."""

    def print(self, expr: Expression) -> str:
        return expr.accept(self)

    def _parenthesize(self, name: str, *exprs: Expression) -> str:
        parts = [name]
        parts.extend(expr.accept(self) for expr in exprs)
        return "(" + " ".join(parts) + ")"

    def visit_binary(self, left: Expression, operator: Token, right: Expression) -> str:
        return self._parenthesize(operator.lexeme, left, right)

    def visit_unary(self, operator: Token, right: Expression) -> str:
        return self._parenthesize(operator.lexeme, right)

    def visit_literal(self, value: Any, literal_type: LiteralType) -> str:
        return stringify(value, literal_type)

    def visit_grouping(self, expression: Expression) -> str:
        return self._parenthesize("group", expression)


def print_ast(expr: Expression) -> str:
    """Convenience wrapper around ``AstPrinter().print``."""
    return AstPrinter().print(expr)
