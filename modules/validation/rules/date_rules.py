"""
Date rules module.

- DateRule: strict parse against a format (default from the rule context)
- FutureRule / PastRule: lenient parse, compared with the current instant

All parsing goes through the rule context's DateParser so the date library
and the clock can be replaced per engine.
"""

from typing import Any, Mapping, Optional

from modules.validation.core.base import BaseRule, RuleResult
from modules.validation.core.registry import register_rule


@register_rule("date")
class DateRule(BaseRule):
    """
    Value must parse exactly with the given moment-style format.

    Example:
        "birthdate": "date"             # YYYY-MM-DD
        "birthdate": "date:MM/DD/YYYY"
    """

    def parse_param(self, param: Optional[str]) -> str:
        return param or self.context.default_date_format

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        if value is None:
            return self._create_result(passed=True, field=field)

        parsed = self.dates.parse_strict(value, self.value)

        return self._create_result(
            passed=parsed is not None,
            field=field,
            message=f"{field} must be a valid date with format {self.value}"
        )


class _RelativeDateRule(BaseRule):
    """
    Shared logic for future/past.

    A value that is not a date (including None) fails with a distinct
    message; pair with ``nullable`` to allow an absent date.
    """

    # 1 for future, -1 for past
    direction: int = 0
    label: str = ""

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        parsed = self.dates.parse(value)
        if parsed is None:
            return self._create_result(
                passed=False,
                field=field,
                message=f"{field} is not a valid date"
            )

        passed = self.dates.compare_to_now(parsed) == self.direction

        return self._create_result(
            passed=passed,
            field=field,
            message=f"{field} must be a {self.label} date"
        )


@register_rule("future")
class FutureRule(_RelativeDateRule):
    direction = 1
    label = "future"


@register_rule("past")
class PastRule(_RelativeDateRule):
    direction = -1
    label = "past"
