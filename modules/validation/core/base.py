"""
Base classes and data models for the rule system.

This module provides the foundation for all rules:
- ParsedRule: One (name, param) token from a rule string
- RuleResult: Standard result format
- RuleContext: Collaborators an engine hands to every rule it creates
- BaseRule: Abstract base class for all rules
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field as dataclass_field
from typing import Any, List, Mapping, Optional

from modules.validation.core.coercion import to_number
from modules.validation.core.dates import DateParser
from modules.validation.core.exceptions import RuleConfigurationError
from shared.utils.config import settings


@dataclass(frozen=True)
class ParsedRule:
    """A single rule token, e.g. ``min:3`` -> ParsedRule("min", "3")."""
    name: str
    param: Optional[str] = None


@dataclass
class RuleResult:
    """
    Standard rule result format.

    All rules must return this format for consistency. ``message`` is only
    meaningful when ``passed`` is False.
    """
    passed: bool
    rule_name: str
    message: str = ""
    field: Optional[str] = None


@dataclass(frozen=True)
class RuleContext:
    """
    Per-engine collaborators passed to each rule instance.

    Attributes:
        dates: Date parsing and clock used by the date rules
        default_date_format: Format for ``date`` when the token has no parameter
    """
    dates: DateParser = dataclass_field(default_factory=DateParser)
    default_date_format: str = dataclass_field(
        default_factory=lambda: settings.VALIDATION_DEFAULT_DATE_FORMAT
    )


class BaseRule(ABC):
    """
    Abstract base class for all rules.

    A rule is instantiated with the parameter of its token and evaluated
    against one field. Rules are stateless apart from their parameter and
    the context of the engine that created them.

    Example:
        @register_rule("uppercase")
        class UppercaseRule(BaseRule):
            def evaluate(self, field, value, data):
                passed = not isinstance(value, str) or value.isupper()
                return self._create_result(passed, field, f"{field} must be uppercase")
    """

    # Set by @register_rule
    rule_name: str = ""

    def __init__(self, param: Optional[str] = None, context: Optional[RuleContext] = None):
        """
        Initialize rule with its token parameter.

        Args:
            param: Raw parameter text after the first ':' (None if absent)
            context: Engine collaborators; a default context when None

        Raises:
            RuleConfigurationError: If the parameter is missing or malformed
        """
        self.context = context or RuleContext()
        self.dates = self.context.dates
        self.param = param
        self.value = self.parse_param(param)

    def parse_param(self, param: Optional[str]) -> Any:
        """Convert the raw parameter. Override in parameterized rules."""
        return param

    @abstractmethod
    def evaluate(
        self,
        field: str,
        value: Any,
        data: Mapping[str, Any]
    ) -> RuleResult:
        """
        Execute rule logic.

        Args:
            field: Field name being validated
            value: Resolved field value (None when absent)
            data: Full input record, for cross-field rules

        Returns:
            RuleResult object
        """
        pass

    def _create_result(
        self,
        passed: bool,
        field: str,
        message: str = ""
    ) -> RuleResult:
        """
        Helper to create RuleResult with common fields.

        The message is dropped when the rule passed.
        """
        return RuleResult(
            passed=passed,
            rule_name=self.rule_name,
            message=message if not passed else "",
            field=field
        )

    # Parameter helpers

    def _require_param(self, param: Optional[str]) -> str:
        if param is None or param == "":
            raise RuleConfigurationError(self.rule_name, param, "parameter is required")
        return param

    def _int_param(self, param: Optional[str]) -> int:
        raw = self._require_param(param)
        try:
            return int(raw.strip())
        except ValueError:
            raise RuleConfigurationError(self.rule_name, param, "expected an integer")

    def _number_param(self, param: Optional[str]) -> float:
        number = to_number(self._require_param(param))
        if number is None:
            raise RuleConfigurationError(self.rule_name, param, "expected a number")
        return number

    def _list_param(self, param: Optional[str]) -> List[str]:
        return self._require_param(param).split(",")
