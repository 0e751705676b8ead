"""Recursive-descent parser for arithmetic expressions.

Grammar, lowest precedence first::

    expression     := additive
    additive       := multiplicative [ (+|-) multiplicative [ (+|-) additive ] ]
    multiplicative := primary        [ * primary           [ * multiplicative ] ]
    primary        := INTEGER | '(' expression ')'

Each binary level combines at most two operators directly and then hands the
rest of the chain to a parse of the same level. One or two
operators associate left to right; longer chains group as
``(a op b) op (rest)``, so ``10 - 4 - 3 - 2`` is ``(10 - 4) - (3 - 2) == 5``.
This grouping is part of the language and must not be normalized.

Syntax errors do not raise. A failed primary yields ``None``, which the
enclosing level combines like any other operand and which evaluates to 0.
"""

from __future__ import annotations

from collections.abc import Callable

from exprlib.core.expressions import BinaryOp, ExprNode, Literal, count_nodes
from exprlib.core.tokens import OPERATOR_SYMBOLS, Token, TokenKind
from exprlib.diagnostics.collector import DiagnosticCollector
from exprlib.parser.scanner import Scanner

_ADDITIVE: frozenset[TokenKind] = frozenset({TokenKind.ADD, TokenKind.MINUS})
_MULTIPLICATIVE: frozenset[TokenKind] = frozenset({TokenKind.MUL})


class Parser:
    """Builds one expression tree from a scanner's token stream.

    The parser is the only thing that advances the scanner. It keeps a count
    of the nodes it builds and of the nodes it throws away while recovering,
    so that ``nodes_built == count_nodes(tree) + nodes_discarded`` holds
    after every parse.
    """

    def __init__(
        self,
        scanner: Scanner,
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self._scanner = scanner
        self._diag = diagnostics if diagnostics is not None else scanner.diagnostics
        self.nodes_built = 0
        self.nodes_discarded = 0

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        return self._scanner.peek()

    def _match(self, kinds: frozenset[TokenKind]) -> Token | None:
        """If the next token is one of *kinds*, consume and return it."""
        tok = self._peek()
        if tok.kind in kinds:
            self._scanner.advance()
            return tok
        return None

    def _binary(self, tok: Token, left: ExprNode | None, right: ExprNode | None) -> BinaryOp:
        self.nodes_built += 1
        return BinaryOp(
            op=OPERATOR_SYMBOLS[tok.kind],
            left=left,
            right=right,
            location=tok.location,
        )

    def _discard(self, tree: ExprNode | None) -> None:
        self.nodes_discarded += count_nodes(tree)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def parse(self, *, require_end: bool = False) -> ExprNode | None:
        """Parse one expression from the current scanner position.

        With *require_end*, a token left over after the expression is
        reported as an error. It is never consumed either way.

        Parentheses nested deeper than the interpreter's recursion limit
        allows are reported as an error and the whole expression is
        dropped.
        """
        built, discarded = self.nodes_built, self.nodes_discarded
        try:
            tree = self.parse_expression()
        except RecursionError:
            tok = self._peek()
            self._diag.error("Expression nested too deeply", tok.location)
            self.nodes_discarded = discarded + (self.nodes_built - built)
            return None
        if require_end:
            tok = self._peek()
            if not tok.is_none:
                self._diag.error(f"Unexpected trailing input {tok.lexeme!r}", tok.location)
        return tree

    def parse_expression(self) -> ExprNode | None:
        """Parse an expression with operator precedence."""
        return self._parse_additive()

    # ------------------------------------------------------------------
    # Binary levels (bounded lookahead, then repeat)
    # ------------------------------------------------------------------

    def _parse_additive(self) -> ExprNode | None:
        """``+`` and ``-``."""
        return self._parse_level(self._parse_multiplicative, _ADDITIVE)

    def _parse_multiplicative(self) -> ExprNode | None:
        """``*``."""
        return self._parse_level(self._parse_primary, _MULTIPLICATIVE)

    def _parse_level(
        self,
        operand: Callable[[], ExprNode | None],
        kinds: frozenset[TokenKind],
    ) -> ExprNode | None:
        """Parse one binary level: ``group [op level]`` where ``group`` is
        ``operand [op operand]``.

        The right-recursive tail is unrolled. Each group that is followed
        by another operator is queued with that operator, and the queue is
        folded from the right once the chain ends, giving the same tree as
        recursing on the level.
        """
        pending: list[tuple[ExprNode | None, Token]] = []
        while True:
            left = operand()
            tok = self._match(kinds)
            if tok is None:
                break
            left = self._binary(tok, left, operand())
            tok = self._match(kinds)
            if tok is None:
                break
            pending.append((left, tok))
        for group, tok in reversed(pending):
            left = self._binary(tok, group, left)
        return left

    # ------------------------------------------------------------------
    # Primary
    # ------------------------------------------------------------------

    def _parse_primary(self) -> ExprNode | None:
        """Parse an integer literal or a parenthesized expression."""
        tok = self._peek()

        if tok.kind == TokenKind.INTEGER:
            self._scanner.advance()
            self.nodes_built += 1
            return Literal(tok)

        if tok.kind == TokenKind.LPAREN:
            self._scanner.advance()
            expr = self.parse_expression()
            close = self._peek()
            if close.kind != TokenKind.RPAREN:
                self._diag.error(
                    "Expected right parenthesis match",
                    close.location,
                    notes=(f"opening parenthesis at {tok.location}",),
                )
                self._discard(expr)
                return None
            self._scanner.advance()
            return expr

        self._diag.error(f"Syntax error in {tok.lexeme!r}", tok.location)
        return None


# ------------------------------------------------------------------
# Convenience function
# ------------------------------------------------------------------


def parse(
    source: str,
    filename: str = "<string>",
    *,
    require_end: bool = False,
) -> tuple[ExprNode | None, DiagnosticCollector]:
    """Parse an arithmetic expression.

    Returns:
        A ``(tree, diagnostics)`` tuple. ``tree`` is None when nothing
        usable was parsed.
    """
    diag = DiagnosticCollector()
    scanner = Scanner(source, filename, diag)
    parser = Parser(scanner, diag)
    tree = parser.parse(require_end=require_end)
    return tree, diag
