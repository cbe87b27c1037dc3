from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Optional

from chem_erp.errors import ValidationError
from chem_erp.models import Payment, SaleRecord
from chem_erp.utils import to_date
from chem_erp.validation import validate_payment, validate_sale

logger = logging.getLogger(__name__)


def _initial_payments(payment_date: Optional[date], payment_amount: Optional[float]) -> list[Payment]:
    # A zero amount means no payment was taken at the time of sale.
    if payment_date is None or payment_amount is None:
        return []
    if float(payment_amount) <= 0:
        return []
    return [Payment(payment_date=payment_date, amount=float(payment_amount))]


def record_sale(
    store,
    *,
    customer: str,
    product: str,
    sale_date: Any,
    quantity: int,
    sale_amount: float,
    payment_date: Any = None,
    payment_amount: Optional[float] = None,
) -> SaleRecord:
    values = validate_sale(
        customer=customer,
        product=product,
        sale_date=sale_date,
        quantity=quantity,
        sale_amount=sale_amount,
        payment_date=payment_date,
        payment_amount=payment_amount,
    )

    sale = SaleRecord(
        id=store.sales.next_id(),
        customer=values["customer"],
        product=values["product"],
        sale_date=values["sale_date"],
        quantity=values["quantity"],
        sale_amount=values["sale_amount"],
        payments=_initial_payments(values["payment_date"], values["payment_amount"]),
    )
    store.sales.add(sale)

    logger.info(
        "Recorded sale id=%s customer=%s amount=%.2f balance=%.2f",
        sale.id, sale.customer, sale.sale_amount, sale.balance,
    )
    return sale


def record_payment(sale: SaleRecord, *, payment_date: Any, amount: float) -> SaleRecord:
    """
    Append one payment to a sale's ledger and return the same record.
    Balance follows from the full payment list; overpayment is allowed.
    """
    values = validate_payment(payment_date=payment_date, amount=amount)

    sale.add_payment(Payment(payment_date=values["payment_date"], amount=values["amount"]))

    if sale.balance < 0:
        logger.info("Sale id=%s is overpaid by %.2f", sale.id, -sale.balance)
    logger.info("Recorded payment sale_id=%s amount=%.2f balance=%.2f", sale.id, values["amount"], sale.balance)
    return sale


def post_payment(store, *, sale_id: int, payment_date: Any, amount: float) -> SaleRecord:
    try:
        sale = store.sales.get(int(sale_id))
    except (TypeError, ValueError):
        sale = None
    if sale is None:
        logger.warning("Payment rejected: sale id=%s not found", sale_id)
        raise ValidationError("Sale not found.", "sale_id")
    return record_payment(sale, payment_date=payment_date, amount=amount)


def filter_sales(
    sales: Iterable[SaleRecord],
    *,
    date_from: Any = None,
    date_to: Any = None,
    customer: Optional[str] = None,
) -> list[SaleRecord]:
    """
    Sales inside the (inclusive) date range whose customer contains `customer`,
    case-insensitively. Missing bounds and an empty customer filter pass everything.
    """
    d_from = to_date(date_from)
    d_to = to_date(date_to)
    needle = (customer or "").lower()

    out: list[SaleRecord] = []
    for s in sales:
        if d_from is not None and s.sale_date < d_from:
            continue
        if d_to is not None and s.sale_date > d_to:
            continue
        if needle and needle not in s.customer.lower():
            continue
        out.append(s)
    return out


def ledger_totals(sales: Iterable[SaleRecord]) -> dict:
    rows = list(sales)
    total = sum(float(s.sale_amount) for s in rows)
    collected = sum(s.payments_total for s in rows)
    return {
        "count": len(rows),
        "sales": total,
        "collected": collected,
        "outstanding": total - collected,
    }
