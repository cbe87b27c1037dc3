from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from chem_erp.models import Expense, FinancialResource, Purchase
from chem_erp.utils import safe_div
from chem_erp.validation import validate_expense, validate_resource

logger = logging.getLogger(__name__)


def purchase_summary(purchases: Iterable[Purchase]) -> dict:
    rows = list(purchases)
    total = sum(float(p.total) for p in rows)
    return {
        "total_purchases": total,
        "total_items": sum(float(p.quantity) for p in rows),
        "average_purchase": safe_div(total, len(rows)),
    }


def record_expense(
    store,
    *,
    expense_date: Any,
    expense_type: str,
    amount: float,
    description: Optional[str] = None,
) -> Expense:
    values = validate_expense(
        expense_date=expense_date,
        expense_type=expense_type,
        amount=amount,
        description=description,
    )
    expense = Expense(id=store.expenses.next_id(), **values)
    store.expenses.add(expense)
    logger.info("Recorded expense id=%s type=%s amount=%.2f", expense.id, expense.expense_type, expense.amount)
    return expense


def record_resource(
    store,
    *,
    resource_date: Any,
    source: str,
    amount: float,
    description: Optional[str] = None,
) -> FinancialResource:
    values = validate_resource(
        resource_date=resource_date,
        source=source,
        amount=amount,
        description=description,
    )
    resource = FinancialResource(id=store.resources.next_id(), **values)
    store.resources.add(resource)
    logger.info("Recorded financial resource id=%s source=%s amount=%.2f", resource.id, resource.source, resource.amount)
    return resource


def totals_by(records: Iterable[Any], key: str) -> dict[str, float]:
    # e.g. totals_by(expenses, "expense_type") -> {"salary": 10000.0, ...}
    out: dict[str, float] = {}
    for r in records:
        k = str(getattr(r, key))
        out[k] = out.get(k, 0.0) + float(r.amount)
    return out
