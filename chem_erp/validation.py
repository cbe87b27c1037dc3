"""
Validation boundary.

One function per entity. Each takes raw form values, raises ValidationError on
the first bad field and returns the cleaned values the services build records
from. The services never re-check what passed through here.
"""
from __future__ import annotations

import math
from datetime import date
from typing import Any, Optional

from chem_erp.errors import ValidationError
from chem_erp.models import EXPENSE_TYPES, RESOURCE_SOURCES, RawMaterialLine
from chem_erp.utils import to_date

MIN_DATE = date(1900, 1, 1)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    s = str(value).strip()
    return s if s else None


def _required_text(value: Any, field: str, message: str) -> str:
    s = _text(value)
    if s is None:
        raise ValidationError(message, field)
    return s


def _number(value: Any, field: str, message: str) -> float:
    try:
        n = float(value)
    except (TypeError, ValueError):
        raise ValidationError(message, field)
    if not math.isfinite(n):
        raise ValidationError(message, field)
    return n


def _non_negative(value: Any, field: str, message: str) -> float:
    n = _number(value, field, message)
    if n < 0:
        raise ValidationError(message, field)
    return n


def _real_date(value: Any, field: str, message: str) -> date:
    try:
        d = to_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field.replace('_', ' ').capitalize()} is not a valid date.", field)
    if d is None:
        raise ValidationError(message, field)
    if d < MIN_DATE or d > date.today():
        raise ValidationError(f"{field.replace('_', ' ').capitalize()} must be between 1900-01-01 and today.", field)
    return d


def validate_payment(*, payment_date: Any, amount: Any) -> dict:
    return {
        "payment_date": _real_date(payment_date, "payment_date", "Date of payment is required."),
        "amount": _non_negative(amount, "amount", "Payment amount must be a non-negative number."),
    }


def validate_sale(
    *,
    customer: Any,
    product: Any,
    sale_date: Any,
    quantity: Any,
    sale_amount: Any,
    payment_date: Any = None,
    payment_amount: Any = None,
) -> dict:
    qty = _number(quantity, "quantity", "Quantity must be at least 1.")
    if qty < 1 or qty != int(qty):
        raise ValidationError("Quantity must be at least 1.", "quantity")

    out = {
        "customer": _required_text(customer, "customer", "Customer is required."),
        "product": _required_text(product, "product", "Product is required."),
        "sale_date": _real_date(sale_date, "sale_date", "Date of purchase is required."),
        "quantity": int(qty),
        "sale_amount": _non_negative(sale_amount, "sale_amount", "Amount must be a non-negative number."),
        "payment_date": None,
        "payment_amount": None,
    }

    # Both halves of the initial payment are optional; each is checked when given.
    if _text(payment_date) is not None:
        out["payment_date"] = _real_date(payment_date, "payment_date", "Date of payment is required.")
    if payment_amount is not None:
        out["payment_amount"] = _non_negative(
            payment_amount, "payment_amount", "Payment amount must be a non-negative number."
        )
    return out


def validate_raw_material(line: Any, index: int = 0) -> RawMaterialLine:
    if isinstance(line, RawMaterialLine):
        name, quantity, price = line.name, line.quantity, line.price_per_unit
    else:
        name, quantity, price = line.get("name"), line.get("quantity"), line.get("price_per_unit")

    field = f"raw_materials[{index}]"
    return RawMaterialLine(
        name=_required_text(name, field, "Material name is required."),
        quantity=_non_negative(quantity, field, "Quantity must be a non-negative number."),
        price_per_unit=_non_negative(price, field, "Price must be a non-negative number."),
    )


def validate_batch(*, batch_no: Any, date_of_manufacturing: Any, product: Any, raw_materials: Any) -> dict:
    return {
        "batch_no": _required_text(batch_no, "batch_no", "Batch number is required."),
        "date_of_manufacturing": _real_date(
            date_of_manufacturing, "date_of_manufacturing", "A date of manufacturing is required."
        ),
        "product": _text(product) or "",
        "raw_materials": [validate_raw_material(m, i) for i, m in enumerate(raw_materials or [])],
    }


def validate_customer(*, name: Any, contact_no: Any = None, address: Any = None) -> dict:
    n = _text(name)
    if n is None or len(n) < 2:
        raise ValidationError("Name must be at least 2 characters.", "name")
    return {"name": n, "contact_no": _text(contact_no), "address": _text(address)}


def validate_product(*, name: Any, sku: Any, price: Any) -> dict:
    p = _number(price, "price", "Price must be a positive number.")
    if p <= 0:
        raise ValidationError("Price must be a positive number.", "price")
    return {
        "name": _required_text(name, "name", "Product name is required."),
        "sku": _required_text(sku, "sku", "SKU is required."),
        "price": p,
    }


def validate_expense(*, expense_date: Any, expense_type: Any, amount: Any, description: Any = None) -> dict:
    kind = _text(expense_type)
    if kind not in EXPENSE_TYPES:
        raise ValidationError(f"Expense type must be one of: {', '.join(EXPENSE_TYPES)}.", "expense_type")
    return {
        "expense_date": _real_date(expense_date, "expense_date", "A date is required."),
        "expense_type": kind,
        "amount": _non_negative(amount, "amount", "Amount must be a non-negative number."),
        "description": _text(description),
    }


def validate_resource(*, resource_date: Any, source: Any, amount: Any, description: Any = None) -> dict:
    src = _text(source)
    if src not in RESOURCE_SOURCES:
        raise ValidationError(f"Source must be one of: {', '.join(RESOURCE_SOURCES)}.", "source")
    return {
        "resource_date": _real_date(resource_date, "resource_date", "A date is required."),
        "source": src,
        "amount": _non_negative(amount, "amount", "Amount must be a non-negative number."),
        "description": _text(description),
    }
