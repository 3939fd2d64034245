"""ReportApplicationService: thin composition layer over the tiering domain.

Every call recomputes from the snapshot it is handed; nothing is cached.
Registrants belonging to another event are dropped before any counting.
"""

import logging
from collections.abc import Sequence

from src.tr_common.errors import EmptyLookupKeyError
from src.tr_common.enums import PricingCategory
from src.tr_reporting.application.schemas import (
    CategorySummary,
    DiscountCodeOut,
    LookupResponse,
    RegistrantOut,
    ReportSummary,
    TierRowOut,
)
from src.tr_reporting.domain.aggregator import (
    aggregate,
    summarize_discount_codes,
    summarize_tiers,
)
from src.tr_reporting.domain.export import build_snapshot
from src.tr_reporting.domain.search import lookup_by_discount_code, lookup_by_tier
from src.tr_reporting.infrastructure.xlsx_writer import render_workbook
from src.tr_tiering.domain.models import Event, Registrant

logger = logging.getLogger(__name__)


def scope_to_event(event: Event, registrants: Sequence[Registrant]) -> list[Registrant]:
    """Keep registrants of `event`; untagged registrants or events match all."""
    if event.id is None:
        return list(registrants)
    return [r for r in registrants if r.event_id is None or r.event_id == event.id]


class ReportApplicationService:
    def summarize(self, event: Event, registrants: Sequence[Registrant]) -> ReportSummary:
        population = scope_to_event(event, registrants)
        snapshot = aggregate(population, event)

        categories = []
        for category in PricingCategory:
            counts = snapshot.counts_for(category)
            categories.append(
                CategorySummary(
                    category=category.value,
                    display_name=category.display_name,
                    tiers=[
                        TierRowOut.from_domain(row)
                        for row in summarize_tiers(event, category, counts)
                    ],
                    counts=counts,
                    total=sum(counts.values()),
                )
            )
        return ReportSummary(
            event_id=event.id,
            event_name=event.name,
            registrant_count=len(population),
            categories=categories,
            discount_usage=snapshot.discount_usage,
            discount_codes=[
                DiscountCodeOut.from_domain(row)
                for row in summarize_discount_codes(event, snapshot.discount_usage)
            ],
        )

    def find_tier_users(
        self,
        event: Event,
        registrants: Sequence[Registrant],
        category: PricingCategory,
        label: str,
        query: str = "",
    ) -> list[Registrant]:
        if not label:
            raise EmptyLookupKeyError("label")
        return lookup_by_tier(scope_to_event(event, registrants), event, category, label, query)

    def lookup_tier_users(
        self,
        event: Event,
        registrants: Sequence[Registrant],
        category: PricingCategory,
        label: str,
        query: str = "",
    ) -> LookupResponse:
        found = self.find_tier_users(event, registrants, category, label, query)
        return LookupResponse(
            items=[RegistrantOut.from_domain(r) for r in found], total=len(found)
        )

    def lookup_discount_users(
        self,
        event: Event,
        registrants: Sequence[Registrant],
        code: str,
        query: str = "",
    ) -> LookupResponse:
        if not code.strip():
            raise EmptyLookupKeyError("code")
        found = lookup_by_discount_code(scope_to_event(event, registrants), code, query)
        return LookupResponse(
            items=[RegistrantOut.from_domain(r) for r in found], total=len(found)
        )

    def export_tier_users(
        self,
        event: Event,
        registrants: Sequence[Registrant],
        category: PricingCategory,
        label: str,
        query: str = "",
    ) -> tuple[bytes, str]:
        """Return (xlsx bytes, file name) for the filtered tier users."""
        found = self.find_tier_users(event, registrants, category, label, query)
        snapshot = build_snapshot(category, label, event, found)
        logger.info(
            "Tier export: event=%s category=%s label=%s rows=%d file=%s",
            event.name, category.value, label, len(found), snapshot.file_name,
        )
        return render_workbook(snapshot), snapshot.file_name
