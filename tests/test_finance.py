from __future__ import annotations

from datetime import date

import pytest

from chem_erp.errors import ValidationError
from chem_erp.models import InventoryItem, Purchase
from chem_erp.services.catalog import add_product, inventory_summary, low_stock
from chem_erp.services.finance import purchase_summary, record_expense, record_resource, totals_by


def test_purchase_summary():
    purchases = [
        Purchase(1, date(2023, 6, 1), "Supplier A", "Raw Material X", 1000, 5000),
        Purchase(2, date(2023, 6, 2), "Supplier B", "Raw Material Y", 500, 2500),
    ]
    summary = purchase_summary(purchases)
    assert summary == {"total_purchases": 7500, "total_items": 1500, "average_purchase": 3750}


def test_purchase_summary_empty_has_no_average():
    assert purchase_summary([])["average_purchase"] == 0


def test_record_expense_and_totals(store):
    record_expense(store, expense_date="2023-06-01", expense_type="purchase", amount=5000, description="Raw materials")
    record_expense(store, expense_date="2023-06-15", expense_type="salary", amount=10000)
    record_expense(store, expense_date="2023-06-20", expense_type="salary", amount=500)

    assert [e.id for e in store.expenses] == [1, 2, 3]
    assert totals_by(store.expenses, "expense_type") == {"purchase": 5000, "salary": 10500}


def test_record_expense_rejects_unknown_type(store):
    with pytest.raises(ValidationError, match="Expense type"):
        record_expense(store, expense_date="2023-06-01", expense_type="travel", amount=10)


def test_record_expense_rejects_negative_amount(store):
    with pytest.raises(ValidationError, match="non-negative"):
        record_expense(store, expense_date="2023-06-01", expense_type="rent", amount=-10)


def test_record_resource(store):
    r = record_resource(store, resource_date=date(2023, 6, 15), source="loans", amount=50000, description=" Business loan ")
    assert r.description == "Business loan"
    assert totals_by(store.resources, "source") == {"loans": 50000}

    with pytest.raises(ValidationError):
        record_resource(store, resource_date=date(2023, 6, 15), source="credit_card", amount=1)


def test_add_product_requires_positive_price(store):
    p = add_product(store, name="Basic Detergent", sku="DET001", price=5.99)
    assert p.id == 1

    with pytest.raises(ValidationError, match="positive"):
        add_product(store, name="Free Sample", sku="DET000", price=0)
    with pytest.raises(ValidationError, match="SKU"):
        add_product(store, name="No Sku", sku=" ", price=1)


def test_inventory_summary_and_low_stock():
    items = [
        InventoryItem(1, "Basic Detergent", "DET001", 500, 100),
        InventoryItem(2, "Premium Detergent", "DET002", 75, 75),
        InventoryItem(3, "Eco-Friendly Detergent", "DET003", 10, 50),
    ]
    assert inventory_summary(items) == {"total_products": 3, "total_stock": 585, "low_stock_items": 2}
    assert [i.sku for i in low_stock(items)] == ["DET002", "DET003"]
