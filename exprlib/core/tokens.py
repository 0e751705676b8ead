"""Token definitions for the expression scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from exprlib.diagnostics.location import SourceLocation


class TokenKind(Enum):
    """All token types recognized by the scanner."""

    # End of input, or a lexical error. Either way the caller stops here.
    NONE = auto()

    # Literals
    INTEGER = auto()

    # Operators
    ADD = auto()  # +
    MINUS = auto()  # -
    MUL = auto()  # *

    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )


# Operator spelling for each operator kind, as stored on AST nodes.
OPERATOR_SYMBOLS: dict[TokenKind, str] = {
    TokenKind.ADD: "+",
    TokenKind.MINUS: "-",
    TokenKind.MUL: "*",
}


@dataclass(frozen=True)
class Token:
    """A single token produced by the scanner.

    ``lexeme`` is the digit run for ``INTEGER``, the character itself for
    operators and parentheses, the offending character for a lexical error
    and ``""`` at end of input.
    """

    kind: TokenKind
    lexeme: str
    location: SourceLocation | None = None

    @property
    def is_none(self) -> bool:
        return self.kind == TokenKind.NONE
