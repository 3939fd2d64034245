"""Civil-date normalization.

Instants (registration and add-on timestamps) are converted to the calendar
date they fall on in the reference zone. Tier boundaries are *not* converted:
they are stored as civil dates already, so they are only truncated.

Nothing in this module raises on bad input; it degrades to "" / None.
"""

from datetime import date, datetime, timezone

from src.tr_common.datetime_utils import reference_zone
from src.tr_tiering.domain.models import Instant

_BOUNDARY_LEN = 10  # len("YYYY-MM-DD")


def parse_instant(value: Instant) -> datetime | None:
    """Parse a raw timestamp into an aware datetime, or None.

    Numbers are epoch milliseconds. Naive datetimes, dates and offset-less
    ISO strings are read as UTC.
    Offset-less strings with a time part are UTC too, not server-local time.
    """
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime(value.year, value.month, value.day)
        elif isinstance(value, (int, float)):
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        elif isinstance(value, str):
            parsed = datetime.fromisoformat(value.strip())
        else:
            return None
    except (ValueError, OverflowError, OSError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _in_reference_zone(value: Instant) -> datetime | None:
    parsed = parse_instant(value)
    if parsed is None:
        return None
    try:
        return parsed.astimezone(reference_zone())
    except (ValueError, OverflowError):
        return None


def to_civil_date(value: Instant) -> str:
    """Return the YYYY-MM-DD date of `value` in the reference zone, or ""."""
    local = _in_reference_zone(value)
    if local is None:
        return ""
    return f"{local.year:04d}-{local.month:02d}-{local.day:02d}"


def normalize_boundary(value: object) -> str | None:
    """Truncate a configured tier boundary to its first 10 characters.

    Shorter (or missing) boundaries yield None so the resolver can apply its
    open-ended defaults.
    """
    if value is None:
        return None
    text = str(value).strip()
    if len(text) < _BOUNDARY_LEN:
        return None
    return text[:_BOUNDARY_LEN]


def format_reference_datetime(value: Instant) -> str:
    """Render an instant for humans, e.g. 'Feb 15, 2024, 12:00:00 PM EST'."""
    local = _in_reference_zone(value)
    if local is None:
        return ""
    return (
        f"{local:%b} {local.day}, {local.year}, "
        f"{local:%I:%M:%S %p} {local.tzname()}"
    )


def format_export_timestamp(moment: datetime) -> str:
    """Render the export moment, e.g. '2/15/2024, 12:00:00 PM'."""
    local = _in_reference_zone(moment)
    if local is None:
        return ""
    hour = local.hour % 12 or 12
    return (
        f"{local.month}/{local.day}/{local.year}, "
        f"{hour}:{local:%M:%S %p}"
    )
