"""UTC and reference-zone datetime utilities."""

from datetime import datetime, timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo

from config.settings import settings


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


@lru_cache(maxsize=8)
def _zone(name: str) -> ZoneInfo:
    return ZoneInfo(name)


def reference_zone() -> tzinfo:
    """Zone used for civil dates and every human-facing timestamp."""
    return _zone(settings.REFERENCE_TIMEZONE)
