"""
Rule string parser.

A rule string is a pipe-separated list of tokens, each ``name`` or
``name:param``:

    "required|min:3|max:20"
    "date:MM/DD/YYYY"
    "required_if:type,premium"

Only the first ':' separates name from parameter, so parameters may contain
colons ("date:HH:mm"). Names are not checked here; unknown names are
evaluated as no-ops.
"""

from typing import List, Sequence

from modules.validation.core.base import ParsedRule

RULE_SEPARATOR = "|"
PARAM_SEPARATOR = ":"


def parse_rule(token: str) -> ParsedRule:
    """Parse one token into a ParsedRule."""
    name, sep, param = token.strip().partition(PARAM_SEPARATOR)
    return ParsedRule(name=name.strip(), param=param if sep else None)


def parse_rules(spec: str) -> List[ParsedRule]:
    """
    Parse a rule string into ordered rules.

    Empty tokens (e.g. from "required||min:3") are dropped.

    Example:
        >>> parse_rules("required|min:3")
        [ParsedRule(name='required', param=None), ParsedRule(name='min', param='3')]
    """
    return [
        parse_rule(token)
        for token in spec.split(RULE_SEPARATOR)
        if token.strip()
    ]


def has_rule(rules: Sequence[ParsedRule], name: str) -> bool:
    """Check whether a parsed rule list contains a rule name."""
    return any(rule.name == name for rule in rules)
