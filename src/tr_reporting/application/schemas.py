"""Pydantic request/response schemas for tr_reporting.

Inputs mirror the registration system's payloads (camelCase accepted,
snake_case too). Timestamps and amounts are taken loosely and interpreted
in the domain, so a bad value degrades to N/A or 0 instead of a 422.

All JSON responses are wrapped in ApiResponse at the router layer.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.tr_common.enums import RegistrantStatus
from src.tr_common.money import money_to_display, to_decimal
from src.tr_reporting.domain.aggregator import DiscountCodeRow, TierRow
from src.tr_tiering.domain.civil_date import format_reference_datetime
from src.tr_tiering.domain.models import (
    NO_TIER,
    DiscountCode,
    Event,
    PricingTier,
    Registrant,
)

RawInstant = str | int | float | None


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class PricingTierIn(_WireModel):
    label: str | None = None
    price: Any = None
    start_date: str | None = None
    end_date: str | None = None

    def to_domain(self) -> PricingTier:
        return PricingTier(
            label=self.label or NO_TIER,
            price=to_decimal(self.price),
            start_date=self.start_date,
            end_date=self.end_date,
        )


class DiscountCodeIn(_WireModel):
    code: str
    discount_type: str = "fixed"
    discount_value: Any = None

    def to_domain(self) -> DiscountCode:
        return DiscountCode(
            code=self.code,
            discount_type=self.discount_type,
            discount_value=to_decimal(self.discount_value),
        )


class EventIn(_WireModel):
    id: str | int | None = None
    name: str
    registration_pricing: list[PricingTierIn] | None = None
    companion_pricing: list[PricingTierIn] | None = None
    dependent_pricing: list[PricingTierIn] | None = None
    discount_codes: list[DiscountCodeIn] | None = None

    def to_domain(self) -> Event:
        def _tiers(tiers: list[PricingTierIn] | None) -> tuple[PricingTier, ...]:
            return tuple(t.to_domain() for t in tiers or [])

        return Event(
            id=None if self.id is None else str(self.id),
            name=self.name,
            registration_pricing=_tiers(self.registration_pricing),
            companion_pricing=_tiers(self.companion_pricing),
            dependent_pricing=_tiers(self.dependent_pricing),
            discount_codes=tuple(dc.to_domain() for dc in self.discount_codes or []),
        )


class RegistrantIn(_WireModel):
    id: str | int
    event_id: str | int | None = None
    badge_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    organization: str | None = None
    mobile: str | None = None
    status: str | None = None
    cancellation_at: RawInstant = None
    created_at: RawInstant = None
    companion_ticket: bool | None = None
    companion_first_name: str | None = None
    companion_last_name: str | None = None
    companion_added_at: RawInstant = None
    dependent_count: int | None = None
    dependents_added_at: RawInstant = None
    registration_tier_label: str | None = None
    companion_tier_label: str | None = None
    dependent_tier_label: str | None = None
    discount_code: str | None = None
    discount_amount: Any = None

    def to_domain(self) -> Registrant:
        return Registrant(
            id=str(self.id),
            event_id=None if self.event_id is None else str(self.event_id),
            badge_name=self.badge_name,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            organization=self.organization,
            mobile=self.mobile,
            status=self.status,
            cancellation_at=self.cancellation_at,
            created_at=self.created_at,
            companion_ticket=bool(self.companion_ticket),
            companion_first_name=self.companion_first_name,
            companion_last_name=self.companion_last_name,
            companion_added_at=self.companion_added_at,
            dependent_count=max(self.dependent_count or 0, 0),
            dependents_added_at=self.dependents_added_at,
            registration_tier_label=self.registration_tier_label,
            companion_tier_label=self.companion_tier_label,
            dependent_tier_label=self.dependent_tier_label,
            discount_code=self.discount_code,
            discount_amount=(
                None if self.discount_amount is None else to_decimal(self.discount_amount)
            ),
        )


class ReportRequest(_WireModel):
    event: EventIn
    registrants: list[RegistrantIn] = Field(default_factory=list)


class TierUsersRequest(ReportRequest):
    label: str
    query: str = ""


class DiscountUsersRequest(ReportRequest):
    code: str
    query: str = ""


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


class TierRowOut(BaseModel):
    label: str
    price: str
    price_display: str
    start_date: str | None
    end_date: str | None
    count: int

    @classmethod
    def from_domain(cls, row: TierRow) -> "TierRowOut":
        return cls(
            label=row.label,
            price=str(row.price),
            price_display=money_to_display(row.price),
            start_date=row.start_date,
            end_date=row.end_date,
            count=row.count,
        )


class CategorySummary(BaseModel):
    category: str
    display_name: str
    tiers: list[TierRowOut]
    counts: dict[str, int]   # every effective label seen, incl. stored-only and N/A
    total: int


class DiscountCodeOut(BaseModel):
    code: str
    discount_type: str
    value_display: str
    used_by: int

    @classmethod
    def from_domain(cls, row: DiscountCodeRow) -> "DiscountCodeOut":
        return cls(
            code=row.code,
            discount_type=row.discount_type,
            value_display=row.value_display,
            used_by=row.used_by,
        )


class ReportSummary(BaseModel):
    event_id: str | None
    event_name: str
    registrant_count: int
    categories: list[CategorySummary]
    discount_usage: dict[str, int]
    discount_codes: list[DiscountCodeOut]


class RegistrantOut(BaseModel):
    id: str
    badge_name: str
    first_name: str | None
    last_name: str | None
    email: str | None
    organization: str | None
    companion_first_name: str | None
    companion_last_name: str | None
    dependent_count: int
    discount_code: str | None
    discount_amount_display: str
    created_at_display: str
    status: str

    @classmethod
    def from_domain(cls, r: Registrant) -> "RegistrantOut":
        return cls(
            id=r.id,
            badge_name=r.display_badge_name,
            first_name=r.first_name,
            last_name=r.last_name,
            email=r.email,
            organization=r.organization,
            companion_first_name=r.companion_first_name,
            companion_last_name=r.companion_last_name,
            dependent_count=r.dependent_count,
            discount_code=r.discount_code,
            discount_amount_display=money_to_display(to_decimal(r.discount_amount)),
            created_at_display=format_reference_datetime(r.created_at),
            status=(
                RegistrantStatus.CANCELLED if r.is_cancelled else RegistrantStatus.ACTIVE
            ).value,
        )


class LookupResponse(BaseModel):
    items: list[RegistrantOut]
    total: int
