"""Registrant lookup behind an aggregated count.

Results are ordered by last name, then first name, with a locale-style
collation (accents and case ignored first, lowercase before uppercase on
ties). Full ties keep the input order since sorted() is stable.
"""

import unicodedata
from collections.abc import Iterable

from src.tr_common.enums import PricingCategory
from src.tr_reporting.domain.aggregator import normalize_code
from src.tr_tiering.domain.attribution import effective_label, is_eligible
from src.tr_tiering.domain.models import Event, Registrant


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(text: str | None) -> tuple[str, str, str]:
    value = text or ""
    return (_strip_accents(value).casefold(), value.casefold(), value.swapcase())


def _name_key(r: Registrant) -> tuple[tuple[str, str, str], tuple[str, str, str]]:
    return (collation_key(r.last_name), collation_key(r.first_name))


def search_fields(r: Registrant, include_companion: bool = False) -> list[str | None]:
    fields = [r.badge_name, r.first_name, r.last_name, r.email, r.organization]
    if include_companion:
        fields += [r.companion_first_name, r.companion_last_name]
    return fields


def matches_query(r: Registrant, query: str, include_companion: bool = False) -> bool:
    """Case-insensitive substring match over the identity fields."""
    q = (query or "").strip().lower()
    if not q:
        return True
    haystack = " ".join(f for f in search_fields(r, include_companion) if f).lower()
    return q in haystack


def sort_by_name(registrants: Iterable[Registrant]) -> list[Registrant]:
    return sorted(registrants, key=_name_key)


def lookup_by_tier(
    registrants: Iterable[Registrant],
    event: Event,
    category: PricingCategory,
    label: str,
    query: str = "",
) -> list[Registrant]:
    include_companion = category is PricingCategory.COMPANION
    return sort_by_name(
        r
        for r in registrants
        if is_eligible(r, category)
        and effective_label(r, event, category) == label
        and matches_query(r, query, include_companion)
    )


def lookup_by_discount_code(
    registrants: Iterable[Registrant], code: str, query: str = ""
) -> list[Registrant]:
    wanted = normalize_code(code)
    if not wanted:
        return []
    return sort_by_name(
        r
        for r in registrants
        if normalize_code(r.discount_code) == wanted and matches_query(r, query)
    )
