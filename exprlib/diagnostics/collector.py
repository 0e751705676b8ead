"""Diagnostic collector shared by the scanner, parser and evaluator."""

from __future__ import annotations

from exprlib.diagnostics.diagnostic import Diagnostic
from exprlib.diagnostics.location import SourceLocation
from exprlib.diagnostics.severity import DiagnosticSeverity


class DiagnosticCollector:
    """Accumulates diagnostics for one or more expression sessions.

    Diagnostics never stop the pipeline. A caller that wants strict
    validation records ``len(collector)`` before a session and treats
    anything in :meth:`since` that mark as failure.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def __len__(self) -> int:
        return len(self._diagnostics)

    def _add(
        self,
        severity: DiagnosticSeverity,
        message: str,
        location: SourceLocation | None,
        notes: tuple[str, ...],
    ) -> None:
        self._diagnostics.append(Diagnostic(severity, message, location, notes))

    def error(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record a problem that dropped part of the expression."""
        self._add(DiagnosticSeverity.ERROR, message, location, notes)

    def warning(
        self,
        message: str,
        location: SourceLocation | None = None,
        *,
        notes: tuple[str, ...] = (),
    ) -> None:
        """Record a problem the scanner recovered from without losing a token."""
        self._add(DiagnosticSeverity.WARNING, message, location, notes)

    def has_errors(self) -> bool:
        """Return True if any error diagnostics have been recorded."""
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def since(self, mark: int) -> tuple[Diagnostic, ...]:
        """Diagnostics recorded after the collector held *mark* entries."""
        return tuple(self._diagnostics[mark:])

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def format_all(self) -> str:
        """One diagnostic per line, notes indented below their diagnostic."""
        return "\n".join(str(d) for d in self._diagnostics)
