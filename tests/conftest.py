"""
Shared fixtures for validation tests.
"""

from datetime import datetime, timezone

import pytest

from modules.validation import DateParser, InputValidator
from modules.validation.core.registry import unregister_rule

FROZEN_NOW = datetime(2024, 6, 15, 12, 0, 0)


class FrozenDateParser(DateParser):
    """DateParser whose clock is fixed at FROZEN_NOW."""

    def now(self, tz=None):
        if tz is None:
            return FROZEN_NOW
        return FROZEN_NOW.replace(tzinfo=timezone.utc).astimezone(tz)


class ErrorSink:
    """Records every error map reported by the engine."""

    def __init__(self):
        self.calls = []

    def __call__(self, errors):
        self.calls.append(errors)

    @property
    def errors(self):
        assert self.calls, "set_errors was never called"
        return self.calls[-1]


@pytest.fixture
def sink():
    return ErrorSink()


@pytest.fixture
def frozen_clock():
    return FROZEN_NOW


@pytest.fixture
def frozen_validator():
    """InputValidator whose date rules see FROZEN_NOW as the current instant."""
    return InputValidator(date_parser=FrozenDateParser())


@pytest.fixture
def temporary_rules():
    """Names registered during a test are removed afterwards."""
    names = []
    yield names
    for name in names:
        unregister_rule(name)
