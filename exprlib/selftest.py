"""Table-driven self-test: evaluate known expressions and compare results.

The table is either the built-in ``DEFAULT_CASES`` or a YAML file::

    cases:
      - expression: "4 + 3 * 8"
        expected: 28
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from exprlib.core.expressions import evaluate_tree, to_signed
from exprlib.diagnostics.collector import DiagnosticCollector
from exprlib.diagnostics.diagnostic import Diagnostic
from exprlib.parser.parser import Parser
from exprlib.parser.scanner import Scanner


class SelfTestConfigError(Exception):
    """Raised when a case file cannot be loaded or is malformed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


@dataclass(frozen=True)
class Case:
    """One expression and the signed 64-bit value it must evaluate to."""

    expression: str
    expected: int


@dataclass(frozen=True)
class CaseResult:
    case: Case
    result: int
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def passed(self) -> bool:
        return self.result == to_signed(self.case.expected)


DEFAULT_CASES: tuple[Case, ...] = (
    Case("4 + 3 * 8", 4 + 3 * 8),
    Case("(4 + 3) * 8", (4 + 3) * 8),
    Case("(4 + 3 * 8) + 8 * 8 + (4 * 4)", (4 + 3 * 8) + 8 * 8 + (4 * 4)),
)


def load_cases(path: str | Path) -> list[Case]:
    """Load a case table from a YAML file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise SelfTestConfigError("file not found", path) from None
    except OSError as e:
        raise SelfTestConfigError(f"cannot read file: {e.strerror}", path) from e
    except yaml.YAMLError as e:
        raise SelfTestConfigError(f"invalid YAML: {e}", path) from e

    if not isinstance(data, dict) or not isinstance(data.get("cases"), list):
        raise SelfTestConfigError("expected a mapping with a 'cases' list", path)

    cases: list[Case] = []
    for i, entry in enumerate(data["cases"]):
        if not isinstance(entry, dict):
            raise SelfTestConfigError(f"case #{i} is not a mapping", path)
        expression = entry.get("expression")
        expected = entry.get("expected")
        if not isinstance(expression, str):
            raise SelfTestConfigError(f"case #{i}: 'expression' must be a string", path)
        # bool is an int subclass; reject it explicitly
        if not isinstance(expected, int) or isinstance(expected, bool):
            raise SelfTestConfigError(f"case #{i}: 'expected' must be an integer", path)
        cases.append(Case(expression, expected))
    return cases


def run_case(case: Case) -> CaseResult:
    """Scan, parse and evaluate one case with its own scanner and diagnostics."""
    diag = DiagnosticCollector()
    scanner = Scanner(case.expression, "<selftest>", diag)
    tree = Parser(scanner, diag).parse()
    result = to_signed(evaluate_tree(tree, diag))
    return CaseResult(case, result, tuple(diag.get_all()))


def run_cases(cases: tuple[Case, ...] | list[Case] = DEFAULT_CASES) -> list[CaseResult]:
    return [run_case(case) for case in cases]


def format_result(result: CaseResult) -> str:
    status = "passed" if result.passed else "failed"
    return (
        f"Test {status} {result.case.expression} :: "
        f"(my result: {result.result}) == (expected result: {to_signed(result.case.expected)})"
    )
