"""Diagnostic severity levels."""

from __future__ import annotations

from enum import Enum


class DiagnosticSeverity(Enum):
    """ERROR when part of the expression was dropped (it evaluates as 0),
    WARNING when input was skipped but every token survived."""

    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:
        return self.value
