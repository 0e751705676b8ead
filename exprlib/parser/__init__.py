"""Parser subpackage (Layer 2 -- depends on core, diagnostics)."""

from exprlib.core.tokens import Token, TokenKind
from exprlib.parser.errors import ExpressionError
from exprlib.parser.parser import Parser, parse
from exprlib.parser.scanner import Scanner

__all__ = [
    "TokenKind",
    "Token",
    "Scanner",
    "Parser",
    "parse",
    "ExpressionError",
]
