"""
Error message resolution.

Override keys come in two shapes:
- "<rule>": replaces the message of that rule for every field
- "<field>.<rule>": replaces it for one field only

Field-specific overrides win over rule-wide overrides, which win over the
rule's default message. Override text may use {field}, {rule} and {param}.
"""

from typing import Mapping, Optional


def resolve_message(
    field: str,
    rule_name: str,
    overrides: Optional[Mapping[str, str]],
    default_message: str,
    param: Optional[str] = None
) -> str:
    """
    Pick the effective error message for a failed rule.

    Args:
        field: Field name
        rule_name: Name of the failed rule
        overrides: Optional override map
        default_message: The rule's own message
        param: Rule parameter, for {param} substitution

    Returns:
        Message string
    """
    if not overrides:
        return default_message

    template = overrides.get(f"{field}.{rule_name}")
    if template is None:
        template = overrides.get(rule_name)
    if template is None:
        return default_message

    return render_template(template, field=field, rule=rule_name, param=param)


def render_template(template: str, **values: Optional[str]) -> str:
    """Replace {name} placeholders by plain substitution; unknown braces stay."""
    message = template
    for name, value in values.items():
        message = message.replace("{" + name + "}", "" if value is None else str(value))
    return message
