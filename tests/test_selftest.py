"""Tests for the table-driven self-test harness."""

from __future__ import annotations

import pytest

from exprlib.selftest import (
    DEFAULT_CASES,
    Case,
    CaseResult,
    SelfTestConfigError,
    format_result,
    load_cases,
    run_case,
    run_cases,
)


class TestRunCases:
    def test_default_table_passes(self) -> None:
        results = run_cases()
        assert [r.result for r in results] == [28, 56, 108]
        assert all(r.passed for r in results)

    def test_default_table_contents(self) -> None:
        assert [c.expression for c in DEFAULT_CASES] == [
            "4 + 3 * 8",
            "(4 + 3) * 8",
            "(4 + 3 * 8) + 8 * 8 + (4 * 4)",
        ]

    def test_failure_detected(self) -> None:
        result = run_case(Case("10 - 4 - 3 - 2", 1))
        assert result.result == 5
        assert not result.passed

    def test_diagnostics_captured_per_case(self) -> None:
        first, second = run_cases([Case("(4 + 3", 0), Case("1 + 1", 2)])
        assert first.passed
        assert len(first.diagnostics) == 1
        assert second.diagnostics == ()

    def test_expected_compared_as_signed(self) -> None:
        assert run_case(Case("0 - 1", (1 << 64) - 1)).passed
        assert run_case(Case("0 - 1", -1)).passed


class TestFormatResult:
    def test_passed_line(self) -> None:
        line = format_result(CaseResult(Case("4 + 3 * 8", 28), 28))
        assert line == "Test passed 4 + 3 * 8 :: (my result: 28) == (expected result: 28)"

    def test_failed_line(self) -> None:
        line = format_result(CaseResult(Case("1 - 2", 0), -1))
        assert line.startswith("Test failed 1 - 2 ::")
        assert "(my result: -1)" in line


class TestLoadCases:
    def test_load_valid_file(self, tmp_path) -> None:
        path = tmp_path / "cases.yaml"
        path.write_text(
            "cases:\n"
            "  - expression: \"4 + 3 * 8\"\n"
            "    expected: 28\n"
            "  - expression: \"3 - 5\"\n"
            "    expected: -2\n",
            encoding="utf-8",
        )
        assert load_cases(path) == [Case("4 + 3 * 8", 28), Case("3 - 5", -2)]

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(SelfTestConfigError, match="file not found"):
            load_cases(tmp_path / "nope.yaml")

    def test_directory_is_not_a_case_file(self, tmp_path) -> None:
        with pytest.raises(SelfTestConfigError, match="cannot read file") as exc_info:
            load_cases(tmp_path)
        assert exc_info.value.path == tmp_path

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("cases: [unclosed\n", encoding="utf-8")
        with pytest.raises(SelfTestConfigError, match="invalid YAML"):
            load_cases(path)

    def test_missing_cases_key(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("other: 1\n", encoding="utf-8")
        with pytest.raises(SelfTestConfigError, match="'cases' list"):
            load_cases(path)

    @pytest.mark.parametrize(
        "entry,fragment",
        [
            ("- 42", "not a mapping"),
            ("- expected: 1", "'expression' must be a string"),
            ("- expression: \"1\"\n    expected: \"one\"", "'expected' must be an integer"),
            ("- expression: \"1\"\n    expected: true", "'expected' must be an integer"),
        ],
    )
    def test_malformed_entries(self, tmp_path, entry, fragment) -> None:
        path = tmp_path / "cases.yaml"
        path.write_text(f"cases:\n  {entry}\n", encoding="utf-8")
        with pytest.raises(SelfTestConfigError) as exc_info:
            load_cases(path)
        assert fragment in str(exc_info.value)
        assert exc_info.value.path == path
