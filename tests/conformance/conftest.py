"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.interpreter_runner import InterpreterRunner
from tests.conformance.runners.selftest_runner import SelfTestRunner


def get_available_runners():
    """Return list of available conformance runners."""
    return [InterpreterRunner(), SelfTestRunner()]


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    Parametrized over every runner:
    - interpreter: ``exprlib.evaluate`` with a caller-owned collector
    - selftest: the table-driven harness in ``exprlib.selftest``
    """
    return request.param
