"""
Conformance: same-level operator chains

Each level combines two operators directly and parses the remainder of the
chain recursively, so chains of three or more operators group as
``(a op b) op (rest)``.
"""
import pytest


# (description, source, expected_value, conventional_left_assoc_value)

CASES = [
    ("sub_one_op", "10 - 4", 6, 6),
    ("sub_two_ops", "10 - 4 - 3", 3, 3),
    ("sub_three_ops", "10 - 4 - 3 - 2", 5, 1),
    ("sub_four_ops", "20 - 5 - 4 - 3 - 2", 16, 6),
    ("mixed_add_sub", "1 + 2 - 3 + 4", -4, 4),
    ("add_chain_is_unaffected", "1 + 2 + 3 + 4 + 5", 15, 15),
    ("mul_chain_is_unaffected", "2 * 3 * 4 * 5", 120, 120),
    ("chain_inside_parens", "(10 - 4 - 3 - 2) * 2", 10, 2),
]


@pytest.mark.parametrize(
    "description,source,expected,conventional", CASES, ids=[c[0] for c in CASES]
)
def test_arith_associativity(runner, description, source, expected, conventional):
    """Chains follow the bounded-lookahead grouping, not plain left association."""
    result = runner.evaluate(source)
    assert result.clean, f"Expected no diagnostics but got: {result.diagnostics}"
    assert result.value == expected
    if expected != conventional:
        assert result.value != conventional
