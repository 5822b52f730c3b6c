"""
Custom exceptions for validation module.

Field validation failures are never raised; they are reported through the
error map. These exceptions cover programming and configuration mistakes.
"""


class ValidationException(Exception):
    """Base exception for validation module."""
    pass


class RuleConfigurationError(ValidationException):
    """Exception raised when a rule parameter is missing or malformed."""

    def __init__(self, rule_name: str, param, reason: str):
        self.rule_name = rule_name
        self.param = param
        self.reason = reason
        super().__init__(f"Invalid parameter {param!r} for rule '{rule_name}': {reason}")


class ConfigurationException(ValidationException):
    """Exception raised for message catalog configuration errors."""
    pass
