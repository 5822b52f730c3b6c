"""
Validation core module.

Contains base classes, parser, registry and utilities for the rule system.
"""

from modules.validation.core.base import BaseRule, ParsedRule, RuleContext, RuleResult
from modules.validation.core.dates import DateParser
from modules.validation.core.exceptions import ValidationException, RuleConfigurationError, ConfigurationException
from modules.validation.core.messages import resolve_message
from modules.validation.core.parser import parse_rules, has_rule
from modules.validation.core.registry import RULE_REGISTRY, register_rule, get_rule, list_rules, is_registered

__all__ = [
    'BaseRule',
    'ParsedRule',
    'RuleResult',
    'RuleContext',
    'DateParser',
    'ValidationException',
    'RuleConfigurationError',
    'ConfigurationException',
    'resolve_message',
    'parse_rules',
    'has_rule',
    'RULE_REGISTRY',
    'register_rule',
    'get_rule',
    'list_rules',
    'is_registered',
]
