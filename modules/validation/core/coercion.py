"""Numeric coercion shared by numeric rules and rule parameters."""

import math
import re
from decimal import Decimal
from numbers import Number
from typing import Any, Optional, Union

# Plain decimal literal with optional sign and exponent: "12", "-0.5", ".5", "1e3"
_NUMBER_RE = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')


def to_number(value: Any) -> Optional[Union[int, float, Decimal]]:
    """
    Coerce value to a number.

    Booleans, empty strings and non-finite values are not numbers.

    Returns:
        The number, or None if value is not numeric

    Example:
        >>> to_number(" 12.5 ")
        12.5
        >>> to_number(True) is None
        True
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, (int, float, Decimal)):
        return value if _is_finite(value) else None

    if isinstance(value, str):
        text = value.strip()
        if not _NUMBER_RE.match(text):
            return None
        number = float(text)
        return number if math.isfinite(number) else None

    return None


def is_whole_number(value: Any) -> bool:
    """True for ints and integral floats/decimals; never for booleans."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, (float, Decimal)):
        return _is_finite(value) and value == int(value)
    return False


def _is_finite(value: Number) -> bool:
    # ints of any size are finite; math.isfinite overflows past float range
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)
