"""Tests for tr_reporting.domain.aggregator: tier counts and code usage."""

from decimal import Decimal

from src.tr_common.enums import PricingCategory
from src.tr_reporting.domain.aggregator import (
    aggregate,
    count_by_tier,
    count_discount_usage,
    normalize_code,
    summarize_discount_codes,
    summarize_tiers,
)
from src.tr_tiering.domain.models import DiscountCode, Event, PricingTier, Registrant

EVENT = Event(
    name="Annual Summit",
    registration_pricing=(
        PricingTier(label="Early", price=Decimal("199"), start_date="2024-01-01",
                    end_date="2024-03-31"),
        PricingTier(label="Regular", price=Decimal("249"), start_date="2024-04-01",
                    end_date="2024-06-30"),
    ),
    companion_pricing=(
        PricingTier(label="Companion", price=Decimal("75"), start_date="2024-01-01"),
    ),
    discount_codes=(
        DiscountCode(code="SAVE10", discount_type="percentage", discount_value=Decimal("10")),
        DiscountCode(code="FLAT5", discount_type="fixed", discount_value=Decimal("5")),
    ),
)


def _make_registrant(rid: str, **kwargs: object) -> Registrant:
    defaults: dict[str, object] = dict(id=rid, created_at="2024-02-15T17:00:00Z")
    defaults.update(kwargs)
    return Registrant(**defaults)  # type: ignore[arg-type]


def _population() -> list[Registrant]:
    return [
        _make_registrant("1"),
        _make_registrant("2", created_at="2024-05-01T17:00:00Z", companion_ticket=True),
        _make_registrant("3", created_at="2025-01-01T17:00:00Z", status="cancelled"),
        _make_registrant("4", registration_tier_label="Comp", dependent_count=1),
        _make_registrant("5", created_at=None, companion_ticket=True),
        _make_registrant("6", discount_code="save10 "),
        _make_registrant("7", discount_code="SAVE10"),
    ]


class TestCountByTier:
    def test_registration_counts(self) -> None:
        counts = count_by_tier(_population(), EVENT, PricingCategory.REGISTRATION)
        # 1, 6, 7 early; 2 and clamped 3 regular; 4 stored; 5 has no timestamp
        assert counts == {"Early": 3, "Regular": 2, "Comp": 1, "N/A": 1}

    def test_companion_counts_only_ticket_holders(self) -> None:
        counts = count_by_tier(_population(), EVENT, PricingCategory.COMPANION)
        assert counts == {"Companion": 1, "N/A": 1}

    def test_dependent_without_table_is_na(self) -> None:
        counts = count_by_tier(_population(), EVENT, PricingCategory.DEPENDENT)
        assert counts == {"N/A": 1}

    def test_sum_matches_eligible_population(self) -> None:
        pop = _population()
        snapshot = aggregate(pop, EVENT)
        assert sum(snapshot.counts_for(PricingCategory.REGISTRATION).values()) == len(pop)
        assert sum(snapshot.counts_for(PricingCategory.COMPANION).values()) == 2
        assert sum(snapshot.counts_for(PricingCategory.DEPENDENT).values()) == 1

    def test_empty_population(self) -> None:
        assert count_by_tier([], EVENT, PricingCategory.REGISTRATION) == {}


class TestDiscountUsage:
    def test_codes_are_trimmed_and_uppercased(self) -> None:
        assert count_discount_usage(_population()) == {"SAVE10": 2}

    def test_blank_codes_skipped(self) -> None:
        regs = [_make_registrant("1", discount_code="   "), _make_registrant("2")]
        assert count_discount_usage(regs) == {}

    def test_cancelled_registrants_count(self) -> None:
        regs = [_make_registrant("1", discount_code="vip", cancellation_at="2024-03-01")]
        assert count_discount_usage(regs) == {"VIP": 1}

    def test_normalize_code(self) -> None:
        assert normalize_code("  Save10 ") == "SAVE10"
        assert normalize_code(None) == ""


class TestSummaries:
    def test_tier_rows_follow_configured_order(self) -> None:
        counts = {"Regular": 4, "Early": 1, "Stored Only": 2}
        rows = summarize_tiers(EVENT, PricingCategory.REGISTRATION, counts)
        assert [(r.label, r.count) for r in rows] == [("Early", 1), ("Regular", 4)]
        assert rows[0].price == Decimal("199")

    def test_tier_rows_empty_table(self) -> None:
        assert summarize_tiers(EVENT, PricingCategory.DEPENDENT, {"N/A": 3}) == []

    def test_discount_rows_include_unused_codes(self) -> None:
        rows = summarize_discount_codes(EVENT, {"SAVE10": 2})
        assert [(r.code, r.value_display, r.used_by) for r in rows] == [
            ("SAVE10", "10%", 2),
            ("FLAT5", "$5.00", 0),
        ]
