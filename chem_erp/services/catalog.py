from __future__ import annotations

import logging
from typing import Iterable

from chem_erp.models import InventoryItem, Product
from chem_erp.validation import validate_product

logger = logging.getLogger(__name__)


def add_product(store, *, name: str, sku: str, price: float) -> Product:
    values = validate_product(name=name, sku=sku, price=price)
    product = Product(id=store.products.next_id(), **values)
    store.products.add(product)
    logger.info("Added product id=%s sku=%s price=%.2f", product.id, product.sku, product.price)
    return product


def low_stock(items: Iterable[InventoryItem]) -> list[InventoryItem]:
    return [i for i in items if i.is_low_stock]


def inventory_summary(items: Iterable[InventoryItem]) -> dict:
    rows = list(items)
    return {
        "total_products": len(rows),
        "total_stock": sum(float(i.quantity) for i in rows),
        "low_stock_items": len(low_stock(rows)),
    }
