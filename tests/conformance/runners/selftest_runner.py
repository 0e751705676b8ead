"""Conformance runner backed by the self-test harness."""

from exprlib.selftest import Case, run_case
from tests.conformance.runner import EvaluationResult


class SelfTestRunner:
    """Runs each expression as a one-row self-test table."""

    name = "selftest"

    def evaluate(self, source: str) -> EvaluationResult:
        # expected value is irrelevant here; only the computed result is reported
        result = run_case(Case(source, 0))
        return EvaluationResult(
            value=result.result,
            diagnostics=[str(d) for d in result.diagnostics],
        )
