from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from datetime import date
from typing import Optional

EXPENSE_TYPES = ("purchase", "salary", "rent", "others")
RESOURCE_SOURCES = ("collections", "loans", "bank_od")

RESOURCE_SOURCE_LABELS = {
    "collections": "Collections",
    "loans": "Loans",
    "bank_od": "Bank OD Account",
}


@dataclass(frozen=True)
class Payment:
    payment_date: date
    amount: float


class _FixedId:
    # `id` is set once by __init__ and cannot be reassigned afterwards.
    def __setattr__(self, name, value):
        if name == "id" and "id" in self.__dict__:
            raise FrozenInstanceError(f"cannot reassign {type(self).__name__}.id")
        super().__setattr__(name, value)


@dataclass
class SaleRecord(_FixedId):
    """
    One sale and its collection history.

    `payments` is append-only; `balance` is always derived from the sale amount
    and the full payment list, never stored.
    """

    id: int
    customer: str
    product: str
    sale_date: date
    quantity: int
    sale_amount: float
    payments: list[Payment] = field(default_factory=list)

    @property
    def payments_total(self) -> float:
        return sum(float(p.amount) for p in self.payments)

    @property
    def balance(self) -> float:
        return float(self.sale_amount) - self.payments_total

    def add_payment(self, payment: Payment) -> None:
        self.payments.append(payment)


@dataclass(frozen=True)
class RawMaterialLine:
    name: str
    quantity: float
    price_per_unit: float

    @property
    def line_cost(self) -> float:
        return float(self.quantity) * float(self.price_per_unit)


@dataclass(frozen=True)
class ProductionBatch:
    # Totals are computed once when the batch is recorded.
    id: int
    batch_no: str
    date_of_manufacturing: date
    product: str
    raw_materials: tuple[RawMaterialLine, ...]
    total_quantity: float
    total_raw_material_cost: float
    unit_cost: float


@dataclass
class Customer(_FixedId):
    id: int
    name: str
    contact_no: Optional[str] = None
    address: Optional[str] = None


@dataclass
class Product:
    id: int
    name: str
    sku: str
    price: float


@dataclass
class InventoryItem:
    id: int
    product: str
    sku: str
    quantity: float
    reorder_level: float

    @property
    def is_low_stock(self) -> bool:
        return float(self.quantity) <= float(self.reorder_level)


@dataclass
class Purchase:
    id: int
    purchase_date: date
    supplier: str
    product: str
    quantity: float
    total: float


@dataclass
class Expense:
    id: int
    expense_date: date
    expense_type: str
    amount: float
    description: Optional[str] = None


@dataclass
class FinancialResource:
    id: int
    resource_date: date
    source: str
    amount: float
    description: Optional[str] = None
