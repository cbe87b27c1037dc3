from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional, TypeVar

import streamlit as st

from chem_erp.models import (
    Customer,
    Expense,
    FinancialResource,
    InventoryItem,
    Product,
    ProductionBatch,
    Purchase,
    SaleRecord,
)
from chem_erp.services.demo_data import seed_store

logger = logging.getLogger(__name__)

T = TypeVar("T")

SESSION_KEY = "chem_erp_store"


class Repository(Generic[T]):
    """
    Ordered, append-only collection of records that carry an integer `id`.
    One writer per repository (the session that owns it).
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: list[T] = list(items)

    def next_id(self) -> int:
        # max + 1 stays collision-free even if the list is ever reordered.
        return max((int(getattr(i, "id")) for i in self._items), default=0) + 1

    def add(self, item: T) -> T:
        self._items.append(item)
        return item

    def get(self, item_id: int) -> Optional[T]:
        for item in self._items:
            if int(getattr(item, "id")) == int(item_id):
                return item
        return None

    def all(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))


@dataclass
class Store:
    customers: Repository[Customer] = field(default_factory=Repository)
    products: Repository[Product] = field(default_factory=Repository)
    inventory: Repository[InventoryItem] = field(default_factory=Repository)
    sales: Repository[SaleRecord] = field(default_factory=Repository)
    batches: Repository[ProductionBatch] = field(default_factory=Repository)
    purchases: Repository[Purchase] = field(default_factory=Repository)
    expenses: Repository[Expense] = field(default_factory=Repository)
    resources: Repository[FinancialResource] = field(default_factory=Repository)

    def counts(self) -> dict[str, int]:
        return {
            "customers": len(self.customers),
            "products": len(self.products),
            "inventory": len(self.inventory),
            "sales": len(self.sales),
            "batches": len(self.batches),
            "purchases": len(self.purchases),
            "expenses": len(self.expenses),
            "resources": len(self.resources),
        }


def get_store() -> Store:
    """One store per browser session, seeded with sample data on first use."""
    if SESSION_KEY not in st.session_state:
        store = Store()
        seed_store(store)
        st.session_state[SESSION_KEY] = store
        logger.info("Created session store: %s", store.counts())
    return st.session_state[SESSION_KEY]


def reset_store() -> Store:
    st.session_state.pop(SESSION_KEY, None)
    return get_store()
