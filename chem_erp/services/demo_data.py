from __future__ import annotations

from datetime import date

from chem_erp.models import InventoryItem, Purchase, RawMaterialLine
from chem_erp.services.batches import record_batch
from chem_erp.services.catalog import add_product
from chem_erp.services.customers import add_customer
from chem_erp.services.finance import record_expense, record_resource
from chem_erp.services.ledger import record_sale

DEFAULT_CUSTOMERS = [
    ("John Doe", "1234567890", "123 Main St"),
    ("Jane Smith", "9876543210", "456 Elm St"),
    ("Acme Cleaners", None, None),
]

DEFAULT_PRODUCTS = [
    ("Basic Detergent", "DET001", 5.99),
    ("Premium Detergent", "DET002", 8.99),
    ("Eco-Friendly Detergent", "DET003", 7.99),
]

DEFAULT_INVENTORY = [
    ("Basic Detergent", "DET001", 500, 100),
    ("Premium Detergent", "DET002", 300, 75),
    ("Eco-Friendly Detergent", "DET003", 50, 50),
]

# (date, supplier, product, quantity, total)
DEFAULT_PURCHASES = [
    ("2023-06-01", "Supplier A", "Raw Material X", 1000, 5000),
    ("2023-06-02", "Supplier B", "Raw Material Y", 500, 2500),
    ("2023-06-03", "Supplier C", "Packaging Material", 10000, 1000),
    ("2023-06-04", "Supplier A", "Raw Material Z", 750, 3750),
    ("2023-06-05", "Supplier D", "Chemical Additive", 100, 1000),
]

# (customer, date, product, quantity, amount, initial payment)
DEFAULT_SALES = [
    ("John Doe", "2023-06-01", "Basic Detergent", 10, 1000, 500),
    ("Jane Smith", "2023-06-15", "Premium Detergent", 5, 750, 750),
    ("Acme Cleaners", "2023-07-01", "Eco-Friendly Detergent", 8, 1200, 600),
]

DEFAULT_EXPENSES = [
    ("2023-06-01", "purchase", 5000, "Raw materials"),
    ("2023-06-15", "salary", 10000, "Employee salaries"),
    ("2023-07-01", "rent", 2000, "Office rent"),
]

DEFAULT_RESOURCES = [
    ("2023-06-01", "collections", 10000, "Monthly collections"),
    ("2023-06-15", "loans", 50000, "Business loan"),
    ("2023-07-01", "bank_od", 25000, "Overdraft withdrawal"),
]

DEFAULT_BATCHES = [
    (
        "B-2023-001",
        "2023-06-10",
        "Basic Detergent",
        [("LABSA", 100, 10.0), ("Soda Ash", 50, 20.0)],
    ),
]


def seed_store(store) -> None:
    """Fill an empty store with the sample records shown on first load."""
    for name, contact, address in DEFAULT_CUSTOMERS:
        add_customer(store, name=name, contact_no=contact, address=address)

    for name, sku, price in DEFAULT_PRODUCTS:
        add_product(store, name=name, sku=sku, price=price)

    for product, sku, qty, reorder in DEFAULT_INVENTORY:
        store.inventory.add(
            InventoryItem(
                id=store.inventory.next_id(),
                product=product,
                sku=sku,
                quantity=float(qty),
                reorder_level=float(reorder),
            )
        )

    for d, supplier, product, qty, total in DEFAULT_PURCHASES:
        store.purchases.add(
            Purchase(
                id=store.purchases.next_id(),
                purchase_date=date.fromisoformat(d),
                supplier=supplier,
                product=product,
                quantity=float(qty),
                total=float(total),
            )
        )

    for customer, d, product, qty, amount, paid in DEFAULT_SALES:
        record_sale(
            store,
            customer=customer,
            product=product,
            sale_date=d,
            quantity=qty,
            sale_amount=amount,
            payment_date=d,
            payment_amount=paid,
        )

    for d, kind, amount, desc in DEFAULT_EXPENSES:
        record_expense(store, expense_date=d, expense_type=kind, amount=amount, description=desc)

    for d, source, amount, desc in DEFAULT_RESOURCES:
        record_resource(store, resource_date=d, source=source, amount=amount, description=desc)

    for batch_no, d, product, lines in DEFAULT_BATCHES:
        record_batch(
            store,
            batch_no=batch_no,
            date_of_manufacturing=d,
            product=product,
            raw_materials=[RawMaterialLine(name=n, quantity=q, price_per_unit=p) for n, q, p in lines],
        )
