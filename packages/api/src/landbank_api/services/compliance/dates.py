# This project was developed with assistance from AI tools.
"""Calendar-date helpers shared by the compliance engine.

Everything is normalized to a plain ``date`` (UTC civil day) before
differencing, so day counts never drift across DST transitions.
"""

import logging
from datetime import UTC, date, datetime

logger = logging.getLogger(__name__)


def to_date(value: date | datetime | str | None) -> date | None:
    """Coerce a stored or serialized date value to a ``date``.

    Accepts ``date``, ``datetime`` (aware values are converted to UTC first)
    and ISO-8601 strings (date or datetime). The whole string must parse,
    and an offset in the string is applied the same way as for an aware
    ``datetime``. Returns None when the value is missing or cannot be parsed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return to_date(datetime.fromisoformat(text))
        except ValueError:
            logger.debug("Unparsable date value %r", value)
            return None
    return None


def days_between(start: date, end: date) -> int:
    """Whole days from ``start`` to ``end``; negative when ``end`` is earlier."""
    return (end - start).days
