"""Library-API conformance runner."""

from exprlib import evaluate
from exprlib.diagnostics import DiagnosticCollector
from tests.conformance.runner import EvaluationResult


class InterpreterRunner:
    """Conformance runner that calls ``exprlib.evaluate`` directly."""

    name = "interpreter"

    def evaluate(self, source: str) -> EvaluationResult:
        diag = DiagnosticCollector()
        value = evaluate(source, diagnostics=diag, filename="<test>")
        return EvaluationResult(value=value, diagnostics=[str(d) for d in diag.get_all()])
