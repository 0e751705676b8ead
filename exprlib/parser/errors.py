"""Error type raised by strict callers of the expression pipeline."""

from __future__ import annotations

from exprlib.diagnostics.diagnostic import Diagnostic


class ExpressionError(Exception):
    """Raised when a caller asked for strict validation and diagnostics were recorded.

    The pipeline itself never raises for malformed input; this only wraps
    the diagnostics it produced.
    """

    def __init__(self, message: str, diagnostics: tuple[Diagnostic, ...] = ()) -> None:
        super().__init__(message)
        self.diagnostics = diagnostics

    def __str__(self) -> str:
        lines = [super().__str__()]
        lines.extend(str(d) for d in self.diagnostics)
        return "\n".join(lines)
