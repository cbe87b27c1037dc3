from __future__ import annotations

import io
import re
from typing import Iterable, Sequence
from xml.sax.saxutils import escape

import pandas as pd
from openpyxl.utils import get_column_letter
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from chem_erp.models import ProductionBatch, SaleRecord
from chem_erp.utils import fmt_date, fmt_money

AGENT_COLUMNS = ["Customer", "Balance"]
USER_COLUMNS = ["Customer", "Date", "Product", "Quantity", "Amount", "Payments", "Balance"]
PRODUCTION_COLUMNS = [
    "Date",
    "Batch No",
    "Product",
    "Raw Materials",
    "Total Quantity (kg/L)",
    "Total Raw Material Cost",
    "Price Per Unit",
]
SALES_COLUMNS = ["Sale ID", "Customer", "Date", "Product", "Quantity", "Amount", "Paid", "Balance"]


def report_filename(kind: str, customer_name: str, ext: str) -> str:
    # "agent_sales_report_John_Doe.pdf"; no customer filter -> "..._all.pdf"
    name = re.sub(r"[^A-Za-z0-9_-]+", "_", str(customer_name or "").strip()).strip("_") or "all"
    return f"{kind}_{name}.{ext}"


# -------------------------
# PDF (reportlab)
# -------------------------

def _cell_markup(value) -> str:
    # Lists render one item per line.
    if isinstance(value, (list, tuple)):
        return "<br/>".join(escape(str(v)) for v in value) or "-"
    return escape(str(value))


def _table_pdf(title: str, header: Sequence[str], rows: list[list], *, col_widths=None) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, title=title)
    styles = getSampleStyleSheet()
    cell = styles["BodyText"]

    data = [list(header)] + [[Paragraph(_cell_markup(v), cell) for v in r] for r in rows]

    table = Table(data, repeatRows=1, colWidths=col_widths)
    table.setStyle(TableStyle([
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("FONT", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]))

    elements = [Paragraph(escape(title), styles["Title"]), Spacer(1, 12), table]
    doc.build(elements)
    return buf.getvalue()


def agent_sales_pdf(sales: Iterable[SaleRecord], customer_name: str = "", *, currency: str = "Rs.") -> bytes:
    """Restricted view: customer and outstanding balance only."""
    rows = [[s.customer, fmt_money(s.balance, currency)] for s in sales]
    title = f"Agent Sales Report for {customer_name}" if customer_name else "Agent Sales Report"
    return _table_pdf(title, AGENT_COLUMNS, rows)


def user_sales_pdf(
    sales: Iterable[SaleRecord],
    customer_name: str = "",
    *,
    currency: str = "Rs.",
    date_format: str = "%d %b %Y",
) -> bytes:
    rows = []
    for s in sales:
        payments = [
            f"{fmt_date(p.payment_date, date_format)}: {fmt_money(p.amount, currency)}" for p in s.payments
        ]
        rows.append([
            s.customer,
            fmt_date(s.sale_date, date_format),
            s.product,
            s.quantity,
            fmt_money(s.sale_amount, currency),
            payments,
            fmt_money(s.balance, currency),
        ])
    title = f"User Sales Report for {customer_name}" if customer_name else "User Sales Report"
    return _table_pdf(title, USER_COLUMNS, rows, col_widths=[80, 65, 80, 45, 70, 110, 70])


# -------------------------
# Frames + Excel (pandas / openpyxl)
# -------------------------

def sales_frame(sales: Iterable[SaleRecord], *, date_format: str = "%d %b %Y") -> pd.DataFrame:
    rows = [
        {
            "Sale ID": s.id,
            "Customer": s.customer,
            "Date": fmt_date(s.sale_date, date_format),
            "Product": s.product,
            "Quantity": s.quantity,
            "Amount": round(s.sale_amount, 2),
            "Paid": round(s.payments_total, 2),
            "Balance": round(s.balance, 2),
        }
        for s in sales
    ]
    return pd.DataFrame(rows, columns=SALES_COLUMNS)


def production_frame(batches: Iterable[ProductionBatch], *, date_format: str = "%d %b %Y") -> pd.DataFrame:
    rows = [
        {
            "Date": fmt_date(b.date_of_manufacturing, date_format),
            "Batch No": b.batch_no,
            "Product": b.product,
            "Raw Materials": ", ".join(f"{m.name} ({m.quantity:g} kg/L)" for m in b.raw_materials),
            "Total Quantity (kg/L)": b.total_quantity,
            "Total Raw Material Cost": round(b.total_raw_material_cost, 2),
            "Price Per Unit": round(b.unit_cost, 2),
        }
        for b in batches
    ]
    return pd.DataFrame(rows, columns=PRODUCTION_COLUMNS)


def _frame_xlsx(df: pd.DataFrame, sheet_name: str) -> bytes:
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
        ws = writer.sheets[sheet_name]
        for col, title in enumerate(df.columns, start=1):
            width = max([len(str(title))] + [len(str(v)) for v in df[title].tolist()])
            ws.column_dimensions[get_column_letter(col)].width = min(60, width + 2)
    return buf.getvalue()


def production_workbook(batches: Iterable[ProductionBatch], *, date_format: str = "%d %b %Y") -> bytes:
    return _frame_xlsx(production_frame(batches, date_format=date_format), "Production Data")


def sales_workbook(sales: Iterable[SaleRecord], *, date_format: str = "%d %b %Y") -> bytes:
    return _frame_xlsx(sales_frame(sales, date_format=date_format), "Sales")
