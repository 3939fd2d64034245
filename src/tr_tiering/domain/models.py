"""Domain models for tr_tiering: pure dataclasses, no business logic.

Events and registrants are read-only snapshots handed over by the external
registration system. Timestamps stay in their raw form (datetime, ISO string,
epoch milliseconds or None); only civil_date.py interprets them.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from src.tr_common.enums import AttributionSource, PricingCategory

Instant = datetime | date | str | int | float | None

NO_TIER = "N/A"


@dataclass(frozen=True)
class PricingTier:
    label: str = NO_TIER
    price: Decimal = Decimal(0)
    start_date: str | None = None   # YYYY-MM-DD or ISO, already civil
    end_date: str | None = None


@dataclass(frozen=True)
class DiscountCode:
    code: str
    discount_type: str = "fixed"
    discount_value: Decimal = Decimal(0)


@dataclass(frozen=True)
class Event:
    name: str
    id: str | None = None
    registration_pricing: tuple[PricingTier, ...] = ()
    companion_pricing: tuple[PricingTier, ...] = ()
    dependent_pricing: tuple[PricingTier, ...] = ()
    discount_codes: tuple[DiscountCode, ...] = ()

    def tiers_for(self, category: PricingCategory) -> tuple[PricingTier, ...]:
        if category is PricingCategory.COMPANION:
            return self.companion_pricing
        if category is PricingCategory.DEPENDENT:
            return self.dependent_pricing
        return self.registration_pricing


@dataclass(frozen=True)
class Registrant:
    id: str
    event_id: str | None = None
    badge_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    organization: str | None = None
    mobile: str | None = None
    status: str | None = None
    cancellation_at: Instant = None
    created_at: Instant = None
    # companion add-on
    companion_ticket: bool = False
    companion_first_name: str | None = None
    companion_last_name: str | None = None
    companion_added_at: Instant = None
    # dependent add-on
    dependent_count: int = 0
    dependents_added_at: Instant = None
    # labels stamped by the pricing computation at registration time
    registration_tier_label: str | None = None
    companion_tier_label: str | None = None
    dependent_tier_label: str | None = None
    discount_code: str | None = None
    discount_amount: Decimal | None = None

    @property
    def is_cancelled(self) -> bool:
        return self.status == "cancelled" or bool(self.cancellation_at)

    @property
    def display_badge_name(self) -> str:
        if self.badge_name:
            return self.badge_name
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


@dataclass(frozen=True)
class Attribution:
    """Effective tier label for one registrant in one category."""

    category: PricingCategory
    label: str
    source: AttributionSource


@dataclass
class AggregationSnapshot:
    """Counts per effective label, one mapping per category, plus code usage."""

    tier_counts: dict[PricingCategory, dict[str, int]] = field(default_factory=dict)
    discount_usage: dict[str, int] = field(default_factory=dict)

    def counts_for(self, category: PricingCategory) -> dict[str, int]:
        return self.tier_counts.get(category, {})
