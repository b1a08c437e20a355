"""Registration date parsing for imported orders."""

from __future__ import annotations

from datetime import date, datetime
from typing import Final

from .errors import InvalidOrderDateError

# Tried in order after ISO-8601.
FALLBACK_DATE_FORMATS: Final[tuple[str, ...]] = ("%Y.%m.%d", "%d.%m.%Y", "%d/%m/%Y")


def parse_order_date(value: str, *, order_number: int) -> date:
    """Return the calendar date for ``value`` or raise ``InvalidOrderDateError``.

    Accepts ISO dates and datetimes (the time part is dropped) plus a few
    dotted/slashed day-first and year-first layouts.
    """

    text = value.strip()
    if not text:
        raise InvalidOrderDateError(order_number, value)

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()  # noqa: DTZ007
        except ValueError:
            continue

    raise InvalidOrderDateError(order_number, value)
