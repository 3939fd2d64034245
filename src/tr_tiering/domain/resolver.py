"""Tier resolution: map an instant onto one label of a tier table.

Tables are taken as configured (unsorted, overlapping or gapped). Policy:
  1. sort by start (stable, lexicographic on YYYY-MM-DD)
  2. first tier with start <= d <= end wins
  3. d before every tier  -> first tier (clamp-low)
     d after every tier   -> last tier  (clamp-high)
     d inside a gap       -> N/A
"""

from collections.abc import Sequence
from dataclasses import dataclass

from src.tr_tiering.domain.civil_date import normalize_boundary, to_civil_date
from src.tr_tiering.domain.models import NO_TIER, Instant, PricingTier

OPEN_START = "0000-01-01"
OPEN_END = "9999-12-31"


@dataclass(frozen=True)
class TierRange:
    label: str
    start: str
    end: str

    def contains(self, ymd: str) -> bool:
        return self.start <= ymd <= self.end


def tier_ranges(tiers: Sequence[PricingTier]) -> list[TierRange]:
    """Normalize and sort a tier table into comparable civil-date ranges."""
    ranges = [
        TierRange(
            label=t.label or NO_TIER,
            start=normalize_boundary(t.start_date) or OPEN_START,
            end=normalize_boundary(t.end_date) or OPEN_END,
        )
        for t in tiers
    ]
    return sorted(ranges, key=lambda r: r.start)


def resolve_civil_date(ranges: Sequence[TierRange], ymd: str) -> str:
    """Resolve an already-normalized civil date against sorted ranges."""
    if not ranges or not ymd:
        return NO_TIER
    for r in ranges:
        if r.contains(ymd):
            return r.label
    first, last = ranges[0], ranges[-1]
    if ymd < first.start:
        return first.label
    if ymd > max(r.end for r in ranges):
        return last.label
    return NO_TIER


def resolve_tier(tiers: Sequence[PricingTier], instant: Instant) -> str:
    """Return the tier label for `instant`, or N/A."""
    if not tiers:
        return NO_TIER
    ymd = to_civil_date(instant)
    if not ymd:
        return NO_TIER
    return resolve_civil_date(tier_ranges(tiers), ymd)
