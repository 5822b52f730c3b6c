"""
Rule name lookup.

Maps the names written in rule strings ("required", "min_value", ...) to
rule classes. Built-in rules add themselves on import; callers can add
their own rule names with the same decorator.
"""

from typing import Dict, Type, Optional
from modules.validation.core.base import BaseRule
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

# Rule name -> rule class; names absent here evaluate as no-ops
RULE_REGISTRY: Dict[str, Type[BaseRule]] = {}


def register_rule(name: str):
    """
    Class decorator binding a rule-string name to a BaseRule subclass.

    The name is also stored on the class as ``rule_name``. Binding a name
    that is already taken replaces the earlier class.

    Usage:
        @register_rule("uppercase")
        class UppercaseRule(BaseRule):
            def evaluate(self, field, value, data):
                ...

    Args:
        name: Rule name as written before ':' in a rule string
    """
    def decorator(cls: Type[BaseRule]):
        previous = RULE_REGISTRY.get(name)
        if previous is not None:
            logger.warning(
                f"Rule name '{name}' rebound: {previous.__name__} replaced by {cls.__name__}"
            )

        cls.rule_name = name
        RULE_REGISTRY[name] = cls
        logger.debug(f"Rule '{name}' bound to {cls.__name__}")
        return cls

    return decorator


def get_rule(name: str) -> Optional[Type[BaseRule]]:
    """Rule class bound to name, or None for an unknown rule."""
    return RULE_REGISTRY.get(name)


def list_rules() -> Dict[str, str]:
    """
    Known rule names.

    Returns:
        Rule name -> rule class name
    """
    return {
        name: cls.__name__
        for name, cls in RULE_REGISTRY.items()
    }


def is_registered(name: str) -> bool:
    return name in RULE_REGISTRY


def unregister_rule(name: str) -> None:
    """Drop a rule name; unknown names are ignored."""
    RULE_REGISTRY.pop(name, None)
