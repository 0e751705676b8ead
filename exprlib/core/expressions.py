"""Expression AST nodes and the 64-bit tree-walking evaluator."""

from __future__ import annotations

from abc import ABC
from collections.abc import Iterator
from dataclasses import dataclass

from exprlib.core.tokens import Token
from exprlib.diagnostics.collector import DiagnosticCollector
from exprlib.diagnostics.location import SourceLocation

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1
SIGN_BIT = 1 << (WORD_BITS - 1)


class ExprNode(ABC):
    """Base type for expression nodes. All concrete subclasses are frozen dataclasses.

    A child slot holding ``None`` is an empty subtree left behind by a failed
    parse step; it evaluates to zero.
    """


@dataclass(frozen=True)
class Literal(ExprNode):
    """Integer literal. The token lexeme is a pure digit run."""

    token: Token

    @property
    def value(self) -> int:
        return int(self.token.lexeme)

    @property
    def location(self) -> SourceLocation | None:
        return self.token.location


@dataclass(frozen=True)
class UnaryOp(ExprNode):
    """Unary operation: -operand. The parser never builds one."""

    op: str
    operand: ExprNode | None
    location: SourceLocation | None = None


@dataclass(frozen=True)
class BinaryOp(ExprNode):
    """Binary operation: left op right. Op is one of +, -, *."""

    op: str
    left: ExprNode | None
    right: ExprNode | None
    location: SourceLocation | None = None


def children(node: ExprNode) -> tuple[ExprNode | None, ...]:
    """Return the child slots of *node* in evaluation order."""
    if isinstance(node, BinaryOp):
        return (node.left, node.right)
    elif isinstance(node, UnaryOp):
        return (node.operand,)
    else:
        return ()


def walk(node: ExprNode | None) -> Iterator[ExprNode]:
    """Yield every present node under *node*, children before parents.

    Iterative, so arbitrarily deep trees do not exhaust the call stack.
    """
    stack: list[tuple[ExprNode | None, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if current is None:
            continue
        if expanded:
            yield current
        else:
            stack.append((current, True))
            stack.extend((child, False) for child in reversed(children(current)))


def count_nodes(node: ExprNode | None) -> int:
    """Number of present nodes in the tree rooted at *node*."""
    return sum(1 for _ in walk(node))


def to_signed(value: int) -> int:
    """Reinterpret a 64-bit unsigned value as a signed int64."""
    value &= WORD_MASK
    return value - (1 << WORD_BITS) if value & SIGN_BIT else value


def evaluate_tree(expr: ExprNode | None, diagnostics: DiagnosticCollector | None = None) -> int:
    """
    Evaluate an expression tree with unsigned 64-bit wraparound.

    Nodes are visited in post-order with :func:`walk`, so the left operand
    is always evaluated (and reports its diagnostics) before the right.

    Args:
        expr: Root of the tree, or None for an empty subtree.
        diagnostics: Receives a message for node types, operators or
            literals the evaluator does not know. Those evaluate to 0.

    Returns:
        The result in ``[0, 2**64)``. Use :func:`to_signed` at output
        boundaries.
    """
    if expr is None:
        return 0
    values: dict[int, int] = {}
    for node in walk(expr):
        values[id(node)] = _evaluate_node(node, values, diagnostics)
    return values[id(expr)]


def _evaluate_node(
    node: ExprNode,
    values: dict[int, int],
    diagnostics: DiagnosticCollector | None,
) -> int:
    """Evaluate one node whose children are already in *values*."""

    def operand(child: ExprNode | None) -> int:
        return 0 if child is None else values[id(child)]

    if isinstance(node, Literal):
        lexeme = node.token.lexeme
        if not (lexeme.isascii() and lexeme.isdigit()):
            _report(diagnostics, f"Malformed integer literal {lexeme!r}", node.location)
            return 0
        return node.value & WORD_MASK
    elif isinstance(node, BinaryOp):
        left = operand(node.left)
        right = operand(node.right)
        if node.op == "+":
            return (left + right) & WORD_MASK
        elif node.op == "-":
            return (left - right) & WORD_MASK
        elif node.op == "*":
            return (left * right) & WORD_MASK
        else:
            _report(diagnostics, f"Unknown operator: {node.op!r}", node.location)
            return 0
    elif isinstance(node, UnaryOp):
        if node.op == "-":
            return -operand(node.operand) & WORD_MASK
        else:
            _report(diagnostics, f"Unknown unary operator: {node.op!r}", node.location)
            return 0
    else:
        _report(
            diagnostics,
            f"What tree is this? ({type(node).__name__})",
            getattr(node, "location", None),
        )
        return 0


def _report(
    diagnostics: DiagnosticCollector | None,
    message: str,
    location: SourceLocation | None,
) -> None:
    if diagnostics is not None:
        diagnostics.error(message, location)
