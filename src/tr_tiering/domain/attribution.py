"""Effective tier label per registrant and pricing category.

A label stamped on the registrant at registration time is authoritative:
operators may edit tier dates after people were charged, and historical
attribution must not move. Only unstamped registrants go through the resolver.
"""

from src.tr_common.enums import AttributionSource, PricingCategory
from src.tr_tiering.domain.models import NO_TIER, Attribution, Event, Instant, Registrant
from src.tr_tiering.domain.resolver import resolve_tier


def is_eligible(registrant: Registrant, category: PricingCategory) -> bool:
    """Whether the registrant takes part in `category` at all."""
    if category is PricingCategory.COMPANION:
        return bool(registrant.companion_ticket)
    if category is PricingCategory.DEPENDENT:
        return (registrant.dependent_count or 0) > 0
    return True


def reference_instant(registrant: Registrant, category: PricingCategory) -> Instant:
    """Timestamp the category's tier table is evaluated against."""
    if category is PricingCategory.COMPANION:
        return registrant.companion_added_at or registrant.created_at
    if category is PricingCategory.DEPENDENT:
        return registrant.dependents_added_at or registrant.created_at
    return registrant.created_at


def stored_label(registrant: Registrant, category: PricingCategory) -> str | None:
    if category is PricingCategory.COMPANION:
        return registrant.companion_tier_label
    if category is PricingCategory.DEPENDENT:
        return registrant.dependent_tier_label
    return registrant.registration_tier_label


def attribute(
    registrant: Registrant, event: Event, category: PricingCategory
) -> Attribution:
    """Stored label when present, otherwise the resolver's answer."""
    stored = stored_label(registrant, category)
    if stored:
        return Attribution(category=category, label=stored, source=AttributionSource.STORED)
    inferred = resolve_tier(
        event.tiers_for(category), reference_instant(registrant, category)
    )
    return Attribution(
        category=category,
        label=inferred or NO_TIER,
        source=AttributionSource.INFERRED,
    )


def effective_label(
    registrant: Registrant, event: Event, category: PricingCategory
) -> str:
    return attribute(registrant, event, category).label
