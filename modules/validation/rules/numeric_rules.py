"""
Numeric rules module.

- NumericRule: value must coerce to a number
- MinValueRule / MaxValueRule: numeric bounds

Numbers and numeric strings ("12.5") are coercible; booleans never are.
Bound rules skip values that are not coercible; combine with ``numeric``
to reject them.
"""

from typing import Any, Mapping, Optional

from modules.validation.core.base import BaseRule, RuleResult
from modules.validation.core.coercion import to_number
from modules.validation.core.registry import register_rule


@register_rule("numeric")
class NumericRule(BaseRule):
    """
    Example:
        "price": "numeric"
    """

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        passed = value is None or to_number(value) is not None

        return self._create_result(
            passed=passed,
            field=field,
            message=f"{field} must be a number"
        )


class _BoundRule(BaseRule):
    def parse_param(self, param: Optional[str]) -> float:
        return self._number_param(param)

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        number = to_number(value)
        if number is None:
            return self._create_result(passed=True, field=field)

        return self._create_result(
            passed=self._check(number),
            field=field,
            message=self._message(field)
        )

    def _check(self, number) -> bool:
        raise NotImplementedError

    def _message(self, field: str) -> str:
        raise NotImplementedError


@register_rule("min_value")
class MinValueRule(_BoundRule):
    """
    Number must be >= N.

    Example:
        "age": "min_value:18"  ->  "age must be at least 18"
    """

    def _check(self, number) -> bool:
        return number >= self.value

    def _message(self, field: str) -> str:
        return f"{field} must be at least {self.param}"


@register_rule("max_value")
class MaxValueRule(_BoundRule):
    """Number must be <= N."""

    def _check(self, number) -> bool:
        return number <= self.value

    def _message(self, field: str) -> str:
        return f"{field} cannot be greater than {self.param}"
