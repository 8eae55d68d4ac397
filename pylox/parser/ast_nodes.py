"""
Abstract Syntax Tree node definitions for Lox expressions.

The node set is closed: Binary, Unary, Literal and Grouping. Every node
carries an ``ASTNodeType`` tag, and ``Expression.accept`` dispatches on that
tag through a fixed table to the matching ``ExpressionVisitor`` method,
handing over the node's fields. Nodes are frozen dataclasses, so trees are
immutable and compare structurally.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Generic, TypeVar

from ..lexer.tokens import Token

T = TypeVar("T")


class ASTNodeType(Enum):
    """Enumeration of all expression node types."""

    BINARY = "Binary"
    UNARY = "Unary"
    LITERAL = "Literal"
    GROUPING = "Grouping"


class LiteralType(Enum):
    """Tag for the value carried by a Literal node."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NIL = "nil"


def stringify(value: Any, literal_type: LiteralType) -> str:
    """Canonical text of a literal value."""
    if literal_type is LiteralType.NIL:
        return "nil"
    if literal_type is LiteralType.BOOLEAN:
        return "true" if value else "false"
    if literal_type is LiteralType.NUMBER:
        if not math.isfinite(value):
            return repr(value)
        # Shortest round-trip digits, written out without an exponent
        text = format(Decimal(repr(value)), "f")
        if text.endswith(".0"):
            text = text[:-2]
        return text
    return value


class ExpressionVisitor(ABC, Generic[T]):
    """Operations over the expression tree, one per node variant."""

    @abstractmethod
    def visit_binary(self, left: "Expression", operator: Token, right: "Expression") -> T:
        pass

    @abstractmethod
    def visit_unary(self, operator: Token, right: "Expression") -> T:
        pass

    @abstractmethod
    def visit_literal(self, value: Any, literal_type: LiteralType) -> T:
        pass

    @abstractmethod
    def visit_grouping(self, expression: "Expression") -> T:
        pass


class Expression:
    """Base class for expressions."""

    node_type: ClassVar[ASTNodeType]

    def accept(self, visitor: ExpressionVisitor[T]) -> T:
        """Dispatch to the visitor method for this node's tag."""
        return _DISPATCH[self.node_type](self, visitor)


@dataclass(frozen=True)
class Binary(Expression):
    """Binary operation expression."""
    left: Expression
    operator: Token
    right: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY


@dataclass(frozen=True)
class Unary(Expression):
    """Prefix operation expression."""
    operator: Token
    right: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.UNARY


@dataclass(frozen=True)
class Literal(Expression):
    """Literal value expression."""
    value: Any
    literal_type: LiteralType

    node_type: ClassVar[ASTNodeType] = ASTNodeType.LITERAL

    def __str__(self) -> str:
        return stringify(self.value, self.literal_type)

    @classmethod
    def number(cls, value: float) -> "Literal":
        return cls(float(value), LiteralType.NUMBER)

    @classmethod
    def string(cls, value: str) -> "Literal":
        return cls(value, LiteralType.STRING)

    @classmethod
    def boolean(cls, value: bool) -> "Literal":
        return cls(value, LiteralType.BOOLEAN)

    @classmethod
    def nil(cls) -> "Literal":
        return cls(None, LiteralType.NIL)


@dataclass(frozen=True)
class Grouping(Expression):
    """Parenthesized expression."""
    expression: Expression

    node_type: ClassVar[ASTNodeType] = ASTNodeType.GROUPING


_DISPATCH: Dict[ASTNodeType, Callable[[Any, ExpressionVisitor], Any]] = {
    ASTNodeType.BINARY: lambda node, v: v.visit_binary(node.left, node.operator, node.right),
    ASTNodeType.UNARY: lambda node, v: v.visit_unary(node.operator, node.right),
    ASTNodeType.LITERAL: lambda node, v: v.visit_literal(node.value, node.literal_type),
    ASTNodeType.GROUPING: lambda node, v: v.visit_grouping(node.expression),
}
