"""
Field rules module.

Contains rules that look at a single field value:
- RequiredRule / NotEmptyRule / NullableRule: presence
- MinRule / MaxRule / DigitsRule: string length
- InRule: allowed values
- StringRule / IntegerRule / BooleanRule: value type

Length and choice rules only check strings; other types pass silently.
"""

from typing import Any, List, Mapping, Optional

from modules.validation.core.base import BaseRule, RuleResult
from modules.validation.core.coercion import is_whole_number
from modules.validation.core.registry import register_rule


@register_rule("required")
class RequiredRule(BaseRule):
    """
    Fails when the value is None or an empty string.

    Example:
        "name": "required"
    """

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        passed = value is not None and value != ""

        return self._create_result(
            passed=passed,
            field=field,
            message=f"{field} is required"
        )


@register_rule("not-empty")
class NotEmptyRule(BaseRule):
    """
    Fails only on an empty string. Unlike ``required``, None passes.
    """

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        passed = value != ""

        return self._create_result(
            passed=passed,
            field=field,
            message=f"{field} cannot be blank"
        )


@register_rule("nullable")
class NullableRule(BaseRule):
    """
    Never fails. Its presence lets a None value skip every other rule of
    the field; the engine applies that short-circuit.
    """

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        return self._create_result(passed=True, field=field)


class _LengthRule(BaseRule):
    """Shared parameter handling for min/max/digits."""

    def parse_param(self, param: Optional[str]) -> int:
        return self._int_param(param)

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        if not isinstance(value, str):
            return self._create_result(passed=True, field=field)

        return self._create_result(
            passed=self._check(len(value)),
            field=field,
            message=self._message(field)
        )

    def _check(self, length: int) -> bool:
        raise NotImplementedError

    def _message(self, field: str) -> str:
        raise NotImplementedError


@register_rule("min")
class MinRule(_LengthRule):
    """
    String must have at least N characters.

    Example:
        "username": "min:3"
    """

    def _check(self, length: int) -> bool:
        return length >= self.value

    def _message(self, field: str) -> str:
        return f"{field} must be at least {self.param} characters long"


@register_rule("max")
class MaxRule(_LengthRule):
    """String must have at most N characters."""

    def _check(self, length: int) -> bool:
        return length <= self.value

    def _message(self, field: str) -> str:
        return f"{field} cannot be more than {self.param} characters long"


@register_rule("digits")
class DigitsRule(_LengthRule):
    """
    String must have exactly N characters.

    Only the length is checked, not that the characters are digits.
    """

    def _check(self, length: int) -> bool:
        return length == self.value

    def _message(self, field: str) -> str:
        return f"{field} should be exactly {self.param} characters long"


@register_rule("in")
class InRule(BaseRule):
    """
    String must be one of a comma-separated list.

    Example:
        "role": "in:admin,user,guest"
    """

    def parse_param(self, param: Optional[str]) -> List[str]:
        return self._list_param(param)

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        if not isinstance(value, str):
            return self._create_result(passed=True, field=field)

        return self._create_result(
            passed=value in self.value,
            field=field,
            message=f"{field} must be one of the following values: {', '.join(self.value)}"
        )


@register_rule("string")
class StringRule(BaseRule):
    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        passed = value is None or isinstance(value, str)

        return self._create_result(
            passed=passed,
            field=field,
            message=f"{field} must be a string"
        )


@register_rule("integer")
class IntegerRule(BaseRule):
    """
    Value must be a whole number. Integral floats such as 25.0 pass;
    numeric strings and booleans fail.
    """

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        passed = value is None or is_whole_number(value)

        return self._create_result(
            passed=passed,
            field=field,
            message=f"{field} must be an integer"
        )


@register_rule("boolean")
class BooleanRule(BaseRule):
    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        passed = value is None or isinstance(value, bool)

        return self._create_result(
            passed=passed,
            field=field,
            message=f"{field} must be a boolean"
        )
