"""
Input validation module.

Validates form input against Laravel-style rule strings and reports one
error message per failed field.

Main components:
- InputValidator / validate_input: Main orchestrator
- BaseRule: Base class for all rules
- Built-in rules: field, numeric, format, date and cross-field rules

Usage:
    from modules.validation import validate_input

    errors = {}

    def set_errors(error_map):
        errors.clear()
        errors.update(error_map)

    ok = await validate_input(
        {"email": "john@", "password": "secret"},
        {"email": "required|email", "password": "required|min:8"},
        set_errors,
        {"password.min": "Choose a longer password"},
    )

    if not ok:
        for field, message in errors.items():
            print(f"{field}: {message}")
"""

from modules.validation.engine import InputValidator, validate_input, ErrorMap
from modules.validation.core.base import BaseRule, ParsedRule, RuleContext, RuleResult
from modules.validation.core.dates import DateParser
from modules.validation.core.exceptions import ValidationException, RuleConfigurationError, ConfigurationException
from modules.validation.core.parser import parse_rules
from modules.validation.core.registry import register_rule, RULE_REGISTRY

__all__ = [
    'InputValidator',
    'validate_input',
    'ErrorMap',
    'BaseRule',
    'ParsedRule',
    'RuleResult',
    'RuleContext',
    'DateParser',
    'ValidationException',
    'RuleConfigurationError',
    'ConfigurationException',
    'parse_rules',
    'register_rule',
    'RULE_REGISTRY',
]
