"""A single diagnostic line produced while scanning, parsing or evaluating."""

from __future__ import annotations

from dataclasses import dataclass

from exprlib.diagnostics.location import SourceLocation
from exprlib.diagnostics.severity import DiagnosticSeverity


@dataclass(frozen=True)
class Diagnostic:
    """Advisory message attached to an optional source location."""

    severity: DiagnosticSeverity
    message: str
    location: SourceLocation | None = None
    notes: tuple[str, ...] = ()

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        text = f"{loc}{self.severity}: {self.message}"
        for note in self.notes:
            text += f"\n  note: {note}"
        return text
