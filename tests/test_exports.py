from __future__ import annotations

import io
from datetime import date

from openpyxl import load_workbook

from chem_erp.exports import (
    PRODUCTION_COLUMNS,
    SALES_COLUMNS,
    agent_sales_pdf,
    production_frame,
    production_workbook,
    report_filename,
    sales_frame,
    sales_workbook,
    user_sales_pdf,
)
from chem_erp.models import RawMaterialLine
from chem_erp.services.batches import compute_batch


def test_report_filename():
    assert report_filename("agent_sales_report", "John Doe", "pdf") == "agent_sales_report_John_Doe.pdf"
    assert report_filename("user_sales_report", "", "pdf") == "user_sales_report_all.pdf"


def test_pdfs_are_generated(june_sales, make_sale):
    june_sales.append(make_sale(4, "R&D <Lab>", date(2023, 7, 2), 10.0))
    for doc in (agent_sales_pdf(june_sales, "Customer"), user_sales_pdf(june_sales, "")):
        assert doc.startswith(b"%PDF")


def test_pdf_with_no_rows():
    assert agent_sales_pdf([], "nobody").startswith(b"%PDF")


def test_sales_frame_rounds_for_display(make_sale):
    sale = make_sale(amount=100.0, payments=[(date(2023, 6, 1), 33.333)])
    df = sales_frame([sale])
    assert list(df.columns) == SALES_COLUMNS
    assert df.loc[0, "Balance"] == 66.67


def test_sales_workbook_round_trips_headers(june_sales):
    wb = load_workbook(io.BytesIO(sales_workbook(june_sales)))
    ws = wb["Sales"]
    header = [c.value for c in ws[1]]
    assert header == SALES_COLUMNS
    assert ws.max_row == 1 + len(june_sales)


def test_production_workbook():
    batch = compute_batch(
        "B-1",
        date(2023, 6, 10),
        "Basic Detergent",
        [RawMaterialLine("LABSA", 100, 10), RawMaterialLine("Soda Ash", 50, 20)],
    )
    df = production_frame([batch], date_format="%Y-%m-%d")
    assert df.loc[0, "Raw Materials"] == "LABSA (100 kg/L), Soda Ash (50 kg/L)"
    assert df.loc[0, "Price Per Unit"] == 13.33

    ws = load_workbook(io.BytesIO(production_workbook([batch])))["Production Data"]
    assert [c.value for c in ws[1]] == PRODUCTION_COLUMNS
    assert ws.cell(row=2, column=2).value == "B-1"
