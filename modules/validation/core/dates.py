"""
Date parsing capability used by the date rules.

Formats are written with moment-style tokens (``YYYY-MM-DD``, ``MM/DD/YYYY``,
``HH:mm``) because that is what rule strings carry. Strict parsing checks the
exact token widths first and then lets ``strptime`` reject impossible
calendar values. Lenient parsing is delegated to dateutil.
"""

import re
from datetime import date, datetime, time, timezone, tzinfo
from functools import lru_cache
from typing import Any, Optional, Pattern, Tuple

from dateutil import parser as date_parser

# token -> (strict regex, strptime directive); longest tokens first
_TOKENS = {
    'YYYY': (r'\d{4}', '%Y'),
    'YY': (r'\d{2}', '%y'),
    'MMMM': (r'[A-Za-z]+', '%B'),
    'MMM': (r'[A-Za-z]+', '%b'),
    'MM': (r'\d{2}', '%m'),
    'M': (r'\d{1,2}', '%m'),
    'DD': (r'\d{2}', '%d'),
    'D': (r'\d{1,2}', '%d'),
    'HH': (r'\d{2}', '%H'),
    'H': (r'\d{1,2}', '%H'),
    'hh': (r'\d{2}', '%I'),
    'h': (r'\d{1,2}', '%I'),
    'mm': (r'\d{2}', '%M'),
    'm': (r'\d{1,2}', '%M'),
    'ss': (r'\d{2}', '%S'),
    's': (r'\d{1,2}', '%S'),
    'SSS': (r'\d{3}', '%f'),
    'A': (r'[AaPp][Mm]', '%p'),
    'a': (r'[AaPp][Mm]', '%p'),
}

_TOKEN_RE = re.compile(
    r'\[[^\]]*\]|' + '|'.join(sorted(_TOKENS, key=len, reverse=True))
)


@lru_cache(maxsize=128)
def compile_format(fmt: str) -> Tuple[Pattern[str], str]:
    """
    Translate a moment-style format into a strict regex and a strptime format.

    Text in square brackets is copied literally, as are characters that are
    not tokens.

    Example:
        >>> pattern, strptime_fmt = compile_format("MM/DD/YYYY")
        >>> strptime_fmt
        '%m/%d/%Y'
    """
    regex_parts = []
    strptime_parts = []
    pos = 0

    for match in _TOKEN_RE.finditer(fmt):
        literal = fmt[pos:match.start()]
        regex_parts.append(re.escape(literal))
        strptime_parts.append(literal.replace('%', '%%'))

        token = match.group(0)
        if token.startswith('['):
            text = token[1:-1]
            regex_parts.append(re.escape(text))
            strptime_parts.append(text.replace('%', '%%'))
        else:
            token_regex, directive = _TOKENS[token]
            regex_parts.append(token_regex)
            strptime_parts.append(directive)
        pos = match.end()

    tail = fmt[pos:]
    regex_parts.append(re.escape(tail))
    strptime_parts.append(tail.replace('%', '%%'))

    return re.compile(''.join(regex_parts)), ''.join(strptime_parts)


def as_datetime(value: Any) -> Optional[datetime]:
    """Return value as a datetime if it already is a date or datetime."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    return None


class DateParser:
    """
    Parses date strings and reports the current instant.

    Rules only talk to this class, so a different date library (or a frozen
    clock in tests) can be handed to ``InputValidator(date_parser=...)``.
    """

    def parse_strict(self, value: Any, fmt: str) -> Optional[datetime]:
        """
        Parse value against fmt with no lenient fallback.

        Returns:
            Parsed datetime, or None if value does not match fmt exactly
        """
        existing = as_datetime(value)
        if existing is not None:
            return existing

        if not isinstance(value, str):
            return None

        pattern, strptime_fmt = compile_format(fmt)
        if not pattern.fullmatch(value):
            return None

        try:
            return datetime.strptime(value, strptime_fmt)
        except ValueError:
            return None

    def parse(self, value: Any) -> Optional[datetime]:
        """
        Parse value leniently (ISO 8601 first, then free-form).

        Returns:
            Parsed datetime, or None if value is not a date
        """
        existing = as_datetime(value)
        if existing is not None:
            return existing

        if not isinstance(value, str) or not value.strip():
            return None

        try:
            return date_parser.isoparse(value)
        except (ValueError, OverflowError):
            pass

        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError):
            return None

    def now(self, tz: Optional[tzinfo] = None) -> datetime:
        """Current instant; naive local time unless tz is given."""
        return datetime.now(tz)

    def compare_to_now(self, instant: datetime) -> int:
        """
        Compare instant against the current instant.

        Aware instants are compared in UTC, naive ones against local time.

        Returns:
            -1 if instant is before now, 1 if after, 0 if equal
        """
        if instant.tzinfo is not None:
            current = self.now(timezone.utc)
        else:
            current = self.now()

        if instant < current:
            return -1
        if instant > current:
            return 1
        return 0
