"""Source positions inside an expression string."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A position in expression source. Expressions are single-line, so
    ``line`` is normally 1 and ``column`` does the work."""

    file: str
    line: int  # 1-indexed
    column: int  # 1-indexed
    end_line: int | None = None
    end_column: int | None = None

    @classmethod
    def at_offset(cls, file: str, offset: int, length: int = 0) -> SourceLocation:
        """Build a location from a 0-based character offset."""
        if length > 0:
            return cls(file, 1, offset + 1, end_line=1, end_column=offset + length)
        return cls(file, 1, offset + 1)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
