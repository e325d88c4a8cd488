from __future__ import annotations

from pathlib import Path
from typing import Iterable

from openpyxl import Workbook
from openpyxl.styles import Font

from .models import Part, SortSpec
from .sorting import sort_parts
from .state import total_value


HEADERS = ["Part name", "Quantity", "Price", "Total value"]
PRICE_FORMAT = '"$"#,##0.00'


def export_parts_xlsx(parts: Iterable[Part], path: Path, sort: SortSpec | None = None) -> Path:
    rows = sort_parts(parts, sort or SortSpec())
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    wb = Workbook()
    ws = wb.active
    ws.title = "Inventory"
    ws.append(HEADERS)
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for part in rows:
        ws.append([part.name, int(part.quantity), float(part.price), float(part.total_value)])
    ws.append(["Total", None, None, float(total_value(rows))])
    ws.cell(row=ws.max_row, column=1).font = Font(bold=True)
    for row in ws.iter_rows(min_row=2, min_col=3, max_col=4):
        for cell in row:
            cell.number_format = PRICE_FORMAT
    ws.column_dimensions["A"].width = 32
    wb.save(path)
    return path
