"""Per-category tier counts and discount-code usage.

Always a full recomputation over the registrant snapshot it is given; there
is no incremental path. Every eligible registrant lands on exactly one label
(N/A included), so a category's counts sum to its eligible population.
Cancelled registrants are counted like everyone else.
"""

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from src.tr_common.enums import DiscountType, PricingCategory
from src.tr_common.money import money_to_display, percent_to_display
from src.tr_tiering.domain.attribution import effective_label, is_eligible
from src.tr_tiering.domain.models import (
    NO_TIER,
    AggregationSnapshot,
    Event,
    Registrant,
)

logger = logging.getLogger(__name__)


def normalize_code(code: str | None) -> str:
    """Discount codes compare trimmed and case-insensitively."""
    return (code or "").upper().strip()


def count_by_tier(
    registrants: Iterable[Registrant], event: Event, category: PricingCategory
) -> dict[str, int]:
    counts: Counter[str] = Counter()
    for r in registrants:
        if not is_eligible(r, category):
            continue
        counts[effective_label(r, event, category)] += 1
    return dict(counts)


def count_discount_usage(registrants: Iterable[Registrant]) -> dict[str, int]:
    counts: Counter[str] = Counter()
    for r in registrants:
        code = normalize_code(r.discount_code)
        if code:
            counts[code] += 1
    return dict(counts)


def aggregate(registrants: Iterable[Registrant], event: Event) -> AggregationSnapshot:
    population = list(registrants)
    snapshot = AggregationSnapshot(
        tier_counts={
            category: count_by_tier(population, event, category)
            for category in PricingCategory
        },
        discount_usage=count_discount_usage(population),
    )
    logger.debug(
        "Aggregated event=%s registrants=%d totals=%s",
        event.name,
        len(population),
        {c.value: sum(snapshot.counts_for(c).values()) for c in PricingCategory},
    )
    return snapshot


@dataclass(frozen=True)
class TierRow:
    """One configured tier with the number of registrants attributed to it."""

    label: str
    price: Decimal
    start_date: str | None
    end_date: str | None
    count: int


@dataclass(frozen=True)
class DiscountCodeRow:
    code: str
    discount_type: str
    discount_value: Decimal
    value_display: str
    used_by: int


def summarize_tiers(
    event: Event, category: PricingCategory, counts: dict[str, int]
) -> list[TierRow]:
    """Configured tiers in configured order, each with its label's count."""
    return [
        TierRow(
            label=t.label or NO_TIER,
            price=t.price,
            start_date=t.start_date,
            end_date=t.end_date,
            count=counts.get(t.label or NO_TIER, 0),
        )
        for t in event.tiers_for(category)
    ]


def summarize_discount_codes(event: Event, usage: dict[str, int]) -> list[DiscountCodeRow]:
    rows = []
    for dc in event.discount_codes:
        if dc.discount_type == DiscountType.PERCENTAGE.value:
            display = percent_to_display(dc.discount_value)
        else:
            display = money_to_display(dc.discount_value)
        rows.append(
            DiscountCodeRow(
                code=dc.code,
                discount_type=dc.discount_type,
                discount_value=dc.discount_value,
                value_display=display,
                used_by=usage.get(normalize_code(dc.code), 0),
            )
        )
    return rows
