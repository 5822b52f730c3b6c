"""
Rules module.

Contains all built-in rules organized by category:
- field_rules: presence, length, choice and type rules
- numeric_rules: numeric coercion and bounds
- format_rules: email, password and URL patterns
- date_rules: date format and future/past checks
- cross_field_rules: rules reading other fields of the record

All rules are automatically registered via decorators.
"""

# Import all rules to trigger registration
from modules.validation.rules import field_rules
from modules.validation.rules import numeric_rules
from modules.validation.rules import format_rules
from modules.validation.rules import date_rules
from modules.validation.rules import cross_field_rules

__all__ = ['field_rules', 'numeric_rules', 'format_rules', 'date_rules', 'cross_field_rules']
