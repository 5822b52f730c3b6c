"""
Format rules module.

Pattern checks on string values:
- EmailRule: local@domain.tld
- PasswordRule: password strength
- UrlRule: host name with optional scheme, port and path

Non-string values pass silently.
"""

import re
from typing import Any, Mapping

from modules.validation.core.base import BaseRule, RuleResult
from modules.validation.core.registry import register_rule

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

PASSWORD_SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'
_SPECIAL = re.escape(PASSWORD_SPECIAL_CHARACTERS)
PASSWORD_PATTERN = re.compile(
    rf'^(?=.*[A-Za-z])(?=.*[0-9])(?=.*[{_SPECIAL}])[A-Za-z0-9{_SPECIAL}]{{8,}}$'
)

URL_PATTERN = re.compile(
    r'^(?:[a-z][a-z0-9+.-]*://)?'                          # scheme
    r'(?:[^\s:@/]+(?::[^\s@/]*)?@)?'                       # user:pass@
    r'(?:localhost'
    r'|(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,63}'
    r'|\d{1,3}(?:\.\d{1,3}){3})'                           # host
    r'(?::\d{1,5})?'                                       # port
    r'(?:[/?#]\S*)?$',                                     # path, query, fragment
    re.IGNORECASE
)


class _PatternRule(BaseRule):
    pattern: re.Pattern = None

    def evaluate(self, field: str, value: Any, data: Mapping[str, Any]) -> RuleResult:
        if not isinstance(value, str):
            return self._create_result(passed=True, field=field)

        return self._create_result(
            passed=self.pattern.fullmatch(value) is not None,
            field=field,
            message=self._message(field)
        )

    def _message(self, field: str) -> str:
        raise NotImplementedError


@register_rule("email")
class EmailRule(_PatternRule):
    """
    Loose structural check, not deliverability.

    Example:
        "email": "required|email"
    """

    pattern = EMAIL_PATTERN

    def _message(self, field: str) -> str:
        return f"Invalid email address for {field}"


@register_rule("password")
class PasswordRule(_PatternRule):
    """
    At least 8 characters with a letter, a digit and one of
    PASSWORD_SPECIAL_CHARACTERS. No other characters are allowed.
    """

    pattern = PASSWORD_PATTERN

    def _message(self, field: str) -> str:
        return (
            f"{field} must be at least 8 characters long, contain letters, "
            f"numbers, and at least one special character"
        )


@register_rule("url")
class UrlRule(_PatternRule):
    """
    Accepts "https://example.com/path" as well as "example.com".
    """

    pattern = URL_PATTERN

    def _message(self, field: str) -> str:
        return f"{field} must be a valid URL"
