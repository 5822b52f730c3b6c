"""
InputValidator - Main orchestrator for rule-string validation.

This is the primary entry point for validating form input.
It parses each field's rule string, evaluates the rules in order, resolves
error messages and reports the error map to the caller's callback.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from modules.validation.core.base import ParsedRule, RuleContext
from modules.validation.core.config_loader import ValidationConfigLoader
from modules.validation.core.dates import DateParser
from modules.validation.core.exceptions import RuleConfigurationError
from modules.validation.core.messages import resolve_message
from modules.validation.core.parser import has_rule, parse_rules
from modules.validation.core.registry import RULE_REGISTRY, get_rule
from shared.utils.config import settings
from shared.utils.logger import setup_logger, log_error

# Import rules to trigger registration
from modules.validation import rules as _rules  # noqa: F401

logger = setup_logger(__name__)

ErrorMap = Dict[str, str]
ErrorCallback = Callable[[ErrorMap], Any]

NULLABLE = "nullable"


def resolve_value(data: Mapping[str, Any], field: str) -> Any:
    """Value of field in data; a missing key and an explicit None are both None."""
    return data.get(field)


class InputValidator:
    """
    Rule-string validation engine.

    Orchestrates validation by:
    1. Parsing each field's rule string
    2. Evaluating rules in order, stopping at the first failure per field
    3. Resolving the error message through overrides
    4. Reporting the complete error map once

    The engine keeps no state between calls apart from the message catalog
    and the date parser it was created with.

    Usage:
        validator = InputValidator()
        ok = await validator.validate(
            {"name": "", "age": 16},
            {"name": "required", "age": "integer|min_value:18"},
            set_errors,
        )
    """

    def __init__(
        self,
        messages: Optional[Mapping[str, str]] = None,
        config_path: Optional[str] = None,
        date_parser: Optional[DateParser] = None
    ):
        """
        Initialize validation engine.

        Args:
            messages: Message overrides applied to every call
            config_path: YAML catalog to load. If None, uses
                         settings.VALIDATION_MESSAGES_PATH, then the shipped
                         config/validation/messages.yaml
            date_parser: Date parsing and clock for the date rules
        """
        self._overrides: Dict[str, str] = dict(messages or {})
        self.date_parser = date_parser or DateParser()
        self.config_loader = ValidationConfigLoader(config_path)
        self.messages = self._build_messages()
        self.context = self._build_context()

        logger.debug(
            f"InputValidator initialized with {len(RULE_REGISTRY)} rules "
            f"and {len(self.messages)} message overrides"
        )

    async def validate(
        self,
        data: Mapping[str, Any],
        rules: Mapping[str, str],
        set_errors: ErrorCallback,
        messages: Optional[Mapping[str, str]] = None
    ) -> bool:
        """
        Validate input against rule strings and report the errors.

        ``set_errors`` is called exactly once with the complete error map,
        including when it is empty, so callers can clear previous errors.

        Args:
            data: Input record, field name -> value
            rules: Field name -> rule string, e.g. "required|min:3"
            set_errors: Callback receiving the error map
            messages: Message overrides for this call only

        Returns:
            True if no field failed

        Raises:
            TypeError: If set_errors is not callable
            RuleConfigurationError: If a rule parameter is malformed
        """
        if not callable(set_errors):
            raise TypeError("set_errors must be a callable accepting the error map")

        errors = self.collect_errors(data, rules, messages)
        set_errors(errors)

        return len(errors) == 0

    def collect_errors(
        self,
        data: Mapping[str, Any],
        rules: Mapping[str, str],
        messages: Optional[Mapping[str, str]] = None
    ) -> ErrorMap:
        """
        Evaluate all fields and return the error map without reporting it.

        Args:
            data: Input record
            rules: Field name -> rule string
            messages: Message overrides for this call only

        Returns:
            Field name -> error message, for failed fields only
        """
        overrides = self._merge_messages(messages)
        errors: ErrorMap = {}

        for field, spec in rules.items():
            value = resolve_value(data, field)
            parsed = parse_rules(spec)

            message = self._validate_field(field, value, data, parsed, overrides)
            if message is not None:
                errors[field] = message

        logger.debug(
            f"Validated {len(rules)} fields: "
            f"{len(errors)} failed ({', '.join(errors) or 'none'})"
        )
        return errors

    def _validate_field(
        self,
        field: str,
        value: Any,
        data: Mapping[str, Any],
        parsed: List[ParsedRule],
        overrides: Mapping[str, str]
    ) -> Optional[str]:
        """
        Run one field's rules in order.

        Returns:
            The first failure's message, or None if every rule passed
        """
        if value is None and has_rule(parsed, NULLABLE):
            return None

        for parsed_rule in parsed:
            rule_class = get_rule(parsed_rule.name)

            if not rule_class:
                logger.debug(f"Unknown rule '{parsed_rule.name}' on field '{field}' ignored")
                continue

            try:
                rule = rule_class(parsed_rule.param, self.context)
            except RuleConfigurationError as e:
                log_error(logger, e, context=f"Rule configuration for field '{field}'")
                raise

            result = rule.evaluate(field, value, data)

            if not result.passed:
                return resolve_message(
                    field,
                    parsed_rule.name,
                    overrides,
                    result.message,
                    param=parsed_rule.param
                )

        return None

    def _merge_messages(self, messages: Optional[Mapping[str, str]]) -> Mapping[str, str]:
        if not messages:
            return self.messages

        merged = dict(self.messages)
        merged.update(messages)
        return merged

    def reload_config(self) -> None:
        """Reload the catalog from file, keeping constructor overrides on top."""
        logger.info("Reloading validation message catalog")
        self.config_loader.reload()
        self.messages = self._build_messages()
        self.context = self._build_context()

    def _build_messages(self) -> Dict[str, str]:
        messages: Dict[str, str] = dict(self.config_loader.get_messages())
        messages.update(self._overrides)
        return messages

    def _build_context(self) -> RuleContext:
        date_format = (
            self.config_loader.get_default_date_format()
            or settings.VALIDATION_DEFAULT_DATE_FORMAT
        )
        return RuleContext(dates=self.date_parser, default_date_format=date_format)

    def get_available_rules(self) -> List[str]:
        """
        Get list of all registered rules.

        Returns:
            List of rule names
        """
        return list(RULE_REGISTRY.keys())


async def validate_input(
    data: Mapping[str, Any],
    rules: Mapping[str, str],
    set_errors: ErrorCallback,
    messages: Optional[Mapping[str, str]] = None
) -> bool:
    """
    Validate input against rule strings with a default engine.

    Example:
        errors = {}
        ok = await validate_input(
            {"type": "premium", "code": ""},
            {"code": "required_if:type,premium"},
            errors.update,
        )
        # ok is False, errors == {"code": "code is required when type is premium"}

    Returns:
        True if the reported error map is empty
    """
    return await InputValidator().validate(data, rules, set_errors, messages)
