"""Workbook rendering for export snapshots (openpyxl)."""

import io

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from src.tr_reporting.domain.export import TierSnapshot

SHEET_TITLE = "Tier Users"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_MAX_COLUMN_WIDTH = 50


def render_workbook(snapshot: TierSnapshot) -> bytes:
    """Write the snapshot rows to a single sheet and return the xlsx bytes."""
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    for row in snapshot.rows:
        ws.append(row)

    label_font = Font(bold=True)
    for idx in range(1, snapshot.header_index):
        ws.cell(row=idx, column=1).font = label_font
    header_font = Font(bold=True, size=11)
    for cell in ws[snapshot.header_index + 1]:
        cell.font = header_font

    # Width from the widest value per column, capped
    widths: dict[int, int] = {}
    for row in snapshot.rows[snapshot.header_index:]:
        for col, value in enumerate(row, start=1):
            widths[col] = max(widths.get(col, 0), len(str(value)))
    for col, width in widths.items():
        ws.column_dimensions[get_column_letter(col)].width = min(width + 2, _MAX_COLUMN_WIDTH)

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()
