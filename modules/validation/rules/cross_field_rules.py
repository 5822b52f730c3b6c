"""
Cross-field rules module.

Rules that read other entries of the input record:
- ConfirmPasswordRule: value must equal the record's confirm_password
- RequiredIfRule: required when another field has a given value
"""

from typing import Any, Mapping, Optional, Tuple

from modules.validation.core.base import BaseRule, RuleResult
from modules.validation.core.exceptions import RuleConfigurationError
from modules.validation.core.registry import register_rule

CONFIRM_PASSWORD_FIELD = "confirm_password"


@register_rule("confirm_password")
class ConfirmPasswordRule(BaseRule):
    """
    Compare the field against ``confirm_password`` in the same record.

    Fails when the confirmation is missing or empty, or when the two values
    differ. Equal values pass.

    Example:
        rules = {"password": "required|password|confirm_password"}
    """

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        confirm = data.get(CONFIRM_PASSWORD_FIELD)

        if confirm is None or confirm == "":
            return self._create_result(
                passed=False,
                field=field,
                message=f"{field} is missing confirm password field"
            )

        return self._create_result(
            passed=confirm == value,
            field=field,
            message=f"{field} is not matching confirm password field"
        )


@register_rule("required_if")
class RequiredIfRule(BaseRule):
    """
    Field is required when ``other`` equals ``expected`` exactly.

    The comparison is type-sensitive: the parameter is a string, so
    ``required_if:count,1`` does not match an integer 1.

    Example:
        "code": "required_if:type,premium"
    """

    def parse_param(self, param: Optional[str]) -> Tuple[str, str]:
        other, sep, expected = self._require_param(param).partition(",")
        if not sep or not other:
            raise RuleConfigurationError(self.rule_name, param, "expected 'field,value'")
        return other, expected

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        other, expected = self.value

        applies = data.get(other) == expected
        passed = not applies or (value is not None and value != "")

        return self._create_result(
            passed=passed,
            field=field,
            message=f"{field} is required when {other} is {expected}"
        )
