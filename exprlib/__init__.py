"""exprlib: scan, parse and evaluate integer arithmetic expressions.

Layers:

- ``exprlib.diagnostics`` -- locations and diagnostic collection
- ``exprlib.core`` -- tokens, AST nodes and the 64-bit evaluator
- ``exprlib.parser`` -- scanner and recursive-descent parser
- ``exprlib.selftest`` -- table-driven self-test harness
"""

from __future__ import annotations

from exprlib.core import (
    BinaryOp,
    ExprNode,
    Literal,
    Token,
    TokenKind,
    UnaryOp,
    count_nodes,
    evaluate_tree,
    to_signed,
    walk,
)
from exprlib.diagnostics import DiagnosticCollector
from exprlib.parser import ExpressionError, Parser, Scanner, parse

__version__ = "0.1.0"


def evaluate(
    source: str,
    *,
    strict: bool = False,
    diagnostics: DiagnosticCollector | None = None,
    filename: str = "<string>",
) -> int:
    """Evaluate *source* and return the result as a signed 64-bit integer.

    Malformed input is recovered from on a best-effort basis and reported
    to *diagnostics*. With *strict*, leftover input is also reported and
    any diagnostic at all raises :class:`ExpressionError`.
    """
    diag = diagnostics if diagnostics is not None else DiagnosticCollector()
    mark = len(diag)
    scanner = Scanner(source, filename, diag)
    tree = Parser(scanner, diag).parse(require_end=strict)
    value = to_signed(evaluate_tree(tree, diag))
    found = diag.since(mark)
    if strict and found:
        raise ExpressionError(f"Invalid expression {source!r}", found)
    return value


__all__ = [
    "__version__",
    "evaluate",
    "parse",
    "Scanner",
    "Parser",
    "Token",
    "TokenKind",
    "ExprNode",
    "Literal",
    "UnaryOp",
    "BinaryOp",
    "walk",
    "count_nodes",
    "evaluate_tree",
    "to_signed",
    "DiagnosticCollector",
    "ExpressionError",
]
