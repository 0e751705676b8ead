"""
Conformance: best-effort recovery from malformed input
"""
import pytest


# (description, source, expected_value, expected_diagnostic_text)

CASES = [
    ("missing_rparen", "(4 + 3", 0, "expected right parenthesis"),
    ("missing_rparen_in_sum", "10 + (4 + 3", 10, "expected right parenthesis"),
    ("numeric_suffix", "12abc + 3", 15, "skipping trailing characters"),
    ("dotted_suffix", "3.75 * 2", 6, "skipping trailing characters"),
    ("missing_operand", "4 + )", 4, "syntax error in ')'"),
    ("missing_left_operand", "* 3", 0, "syntax error in '*'"),
    ("leading_minus", "-5", -5, "syntax error in '-'"),
    ("empty", "", 0, "syntax error in ''"),
    ("division_unsupported", "8 / 2", 8, "unexpected lexical analysis character '/'"),
    ("identifier_operand", "x + 1", 0, "unexpected lexical analysis character 'x'"),
    ("control_character", "1 +\x07 2", 1, "no such printable character"),
]


@pytest.mark.parametrize(
    "description,source,expected,diagnostic", CASES, ids=[c[0] for c in CASES]
)
def test_arith_recovery(runner, description, source, expected, diagnostic):
    """Malformed input yields a defined value plus a diagnostic, never an exception."""
    result = runner.evaluate(source)
    assert result.value == expected
    assert any(diagnostic in d.lower() for d in result.diagnostics), \
        f"Expected '{diagnostic}' in diagnostics: {result.diagnostics}"
