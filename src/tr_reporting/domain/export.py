"""Tier-users export snapshot: metadata rows, header row, one row per registrant.

The snapshot is plain cells (str | int); turning it into a file is the
xlsx writer's job.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from config.settings import settings
from src.tr_common.datetime_utils import utc_now
from src.tr_common.enums import PricingCategory, RegistrantStatus
from src.tr_tiering.domain.attribution import reference_instant
from src.tr_tiering.domain.civil_date import format_export_timestamp, format_reference_datetime
from src.tr_tiering.domain.models import Event, Registrant

Cell = str | int
Row = list[Cell]

FILE_PREFIX = "TierUsers"
FILE_EXTENSION = ".xlsx"

BASE_HEADERS: tuple[str, ...] = (
    "ID", "Badge Name", "First", "Last", "Email", "Organization",
    "Created At (EST)", "Status",
)
COMPANION_HEADERS: tuple[str, ...] = (
    "Companion First", "Companion Last", "Companion Added At (EST)",
)
DEPENDENT_HEADERS: tuple[str, ...] = ("Dependent Count", "Dependent Added At (EST)")

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


@dataclass(frozen=True)
class TierSnapshot:
    file_name: str
    rows: list[Row]
    header_index: int  # position of the column header row within rows

    @property
    def data_rows(self) -> list[Row]:
        return self.rows[self.header_index + 1:]


def sanitize_component(text: str | None, max_length: int | None = None) -> str:
    """Collapse non-alphanumeric runs to '_', trim '_' and cap the length.

    Idempotent: the output only holds [A-Za-z0-9_], never starts or ends
    with '_' and never exceeds max_length.
    """
    limit = settings.EXPORT_NAME_MAX_LENGTH if max_length is None else max_length
    cleaned = _NON_ALNUM.sub("_", str(text or "")).strip("_")
    return cleaned[:limit].rstrip("_")


def export_file_name(event_name: str, category: PricingCategory, label: str) -> str:
    parts = [
        FILE_PREFIX,
        sanitize_component(event_name),
        sanitize_component(category.display_name),
        sanitize_component(label),
    ]
    return "_".join(parts) + FILE_EXTENSION


def headers_for(category: PricingCategory) -> list[str]:
    if category is PricingCategory.COMPANION:
        return [*BASE_HEADERS, *COMPANION_HEADERS]
    if category is PricingCategory.DEPENDENT:
        return [*BASE_HEADERS, *DEPENDENT_HEADERS]
    return list(BASE_HEADERS)


def project_row(r: Registrant, category: PricingCategory) -> Row:
    status = RegistrantStatus.CANCELLED if r.is_cancelled else RegistrantStatus.ACTIVE
    row: Row = [
        r.id,
        r.display_badge_name,
        r.first_name or "",
        r.last_name or "",
        r.email or "",
        r.organization or "",
        format_reference_datetime(r.created_at),
        status.value,
    ]
    if category is PricingCategory.COMPANION:
        row += [
            r.companion_first_name or "",
            r.companion_last_name or "",
            format_reference_datetime(reference_instant(r, category)),
        ]
    elif category is PricingCategory.DEPENDENT:
        row += [
            r.dependent_count or 0,
            format_reference_datetime(reference_instant(r, category)),
        ]
    return row


def build_snapshot(
    category: PricingCategory,
    label: str,
    event: Event,
    rows: Sequence[Registrant],
    exported_at: datetime | None = None,
) -> TierSnapshot:
    """Render a filtered registrant list into an export snapshot.

    An empty `rows` still yields metadata plus the header row.
    """
    moment = exported_at or utc_now()
    table: list[Row] = [
        ["TIER TYPE", category.display_name],
        ["TIER", label],
        ["EVENT", event.name],
        ["EXPORTED AT (EST)", format_export_timestamp(moment)],
        [],
    ]
    header_index = len(table)
    table.append(list(headers_for(category)))
    table.extend(project_row(r, category) for r in rows)
    return TierSnapshot(
        file_name=export_file_name(event.name, category, label),
        rows=table,
        header_index=header_index,
    )
