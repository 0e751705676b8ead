"""Diagnostics subpackage (Layer 0 -- zero internal dependencies)."""

from exprlib.diagnostics.collector import DiagnosticCollector
from exprlib.diagnostics.diagnostic import Diagnostic
from exprlib.diagnostics.location import SourceLocation
from exprlib.diagnostics.severity import DiagnosticSeverity

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
