"""Core subpackage (Layer 1 -- depends only on diagnostics)."""

from exprlib.core.expressions import (
    BinaryOp,
    ExprNode,
    Literal,
    UnaryOp,
    count_nodes,
    evaluate_tree,
    to_signed,
    walk,
)
from exprlib.core.tokens import Token, TokenKind

__all__ = [
    "TokenKind",
    "Token",
    "ExprNode",
    "Literal",
    "UnaryOp",
    "BinaryOp",
    "walk",
    "count_nodes",
    "to_signed",
    "evaluate_tree",
]
