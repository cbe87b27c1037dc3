from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

import pandas as pd

from chem_erp.models import ProductionBatch, RawMaterialLine
from chem_erp.utils import safe_div, to_date
from chem_erp.validation import validate_batch

logger = logging.getLogger(__name__)


def compute_batch(
    batch_no: str,
    date_of_manufacturing,
    product: str,
    raw_materials: Iterable[RawMaterialLine],
    *,
    batch_id: int = 0,
) -> ProductionBatch:
    """
    Aggregate a batch's raw material lines.

    Totals keep full precision; rounding is left to whoever displays them.
    A batch with no quantity has a unit cost of 0.
    """
    lines = tuple(raw_materials)
    total_qty = sum(float(l.quantity) for l in lines)
    total_cost = sum(l.line_cost for l in lines)

    return ProductionBatch(
        id=int(batch_id),
        batch_no=batch_no,
        date_of_manufacturing=date_of_manufacturing,
        product=product,
        raw_materials=lines,
        total_quantity=total_qty,
        total_raw_material_cost=total_cost,
        unit_cost=safe_div(total_cost, total_qty),
    )


EDITOR_COLUMNS = ("Material", "Quantity", "Price/Unit")


def _editor_number(value: Any) -> Optional[float]:
    n = pd.to_numeric(value, errors="coerce")
    return None if pd.isna(n) else float(n)


def lines_from_editor(df: pd.DataFrame) -> list[dict]:
    """
    Raw material rows from the production page's data editor.
    Untouched rows (no name, no quantity, no price) are skipped; cells left
    empty come back as None so validation can name the missing field.
    """
    material, quantity, price = EDITOR_COLUMNS
    lines: list[dict] = []
    for _, r in df.iterrows():
        name = r[material].strip() if isinstance(r[material], str) else ""
        qty = _editor_number(r[quantity])
        ppu = _editor_number(r[price])
        if not name and not qty and not ppu:
            continue
        lines.append({"name": name, "quantity": qty, "price_per_unit": ppu})
    return lines


def record_batch(
    store,
    *,
    batch_no: str,
    date_of_manufacturing: Any,
    product: Optional[str],
    raw_materials: list,
) -> ProductionBatch:
    values = validate_batch(
        batch_no=batch_no,
        date_of_manufacturing=date_of_manufacturing,
        product=product,
        raw_materials=raw_materials,
    )

    batch = compute_batch(
        values["batch_no"],
        values["date_of_manufacturing"],
        values["product"],
        values["raw_materials"],
        batch_id=store.batches.next_id(),
    )
    store.batches.add(batch)

    logger.info(
        "Recorded batch id=%s batch_no=%s lines=%d total_qty=%s unit_cost=%.4f",
        batch.id, batch.batch_no, len(batch.raw_materials), batch.total_quantity, batch.unit_cost,
    )
    return batch


def filter_batches(batches: Iterable[ProductionBatch], *, date_from: Any = None, date_to: Any = None) -> list[ProductionBatch]:
    """
    No `from` date: everything. `from` only: that day onwards.
    Both: the closed range.
    """
    d_from = to_date(date_from)
    d_to = to_date(date_to)
    rows = list(batches)
    if d_from is None:
        return rows
    if d_to is None:
        return [b for b in rows if b.date_of_manufacturing >= d_from]
    return [b for b in rows if d_from <= b.date_of_manufacturing <= d_to]


def batch_totals(batches: Iterable[ProductionBatch]) -> dict:
    rows = list(batches)
    qty = sum(float(b.total_quantity) for b in rows)
    cost = sum(float(b.total_raw_material_cost) for b in rows)
    return {
        "count": len(rows),
        "total_quantity": qty,
        "total_cost": cost,
        "avg_unit_cost": safe_div(cost, qty),
    }
