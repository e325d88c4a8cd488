from openpyxl import load_workbook

from pim_app.defaults import INITIAL_PARTS
from pim_app.export import HEADERS, export_parts_xlsx
from pim_app.models import SortSpec


def test_export_writes_sorted_rows_and_total(tmp_path):
    target = export_parts_xlsx(INITIAL_PARTS, tmp_path / "out" / "inventory.xlsx", sort=SortSpec("name", "asc"))
    assert target.exists()
    ws = load_workbook(target).active
    rows = list(ws.iter_rows(values_only=True))
    assert ws.title == "Inventory"
    assert list(rows[0]) == HEADERS
    assert [r[0] for r in rows[1:3]] == ["Brake Pads", "Engine Oil Filter"]
    assert rows[1][1] == 25
    assert rows[-1][0] == "Total"
    assert round(rows[-1][3], 2) == 1787.0
