from __future__ import annotations

from datetime import date

import pytest

from chem_erp.models import Payment, SaleRecord
from chem_erp.store import Store


@pytest.fixture
def store():
    return Store()


@pytest.fixture
def make_sale():
    def _make(sale_id=1, customer="Customer 1", sale_date=date(2023, 6, 1), amount=1000.0, payments=()):
        return SaleRecord(
            id=sale_id,
            customer=customer,
            product="Product A",
            sale_date=sale_date,
            quantity=1,
            sale_amount=amount,
            payments=[Payment(payment_date=d, amount=a) for d, a in payments],
        )

    return _make


@pytest.fixture
def june_sales(make_sale):
    return [
        make_sale(1, "Customer 1", date(2023, 6, 1), 1000.0, [(date(2023, 6, 1), 500.0)]),
        make_sale(2, "Customer 2", date(2023, 6, 15), 750.0, [(date(2023, 6, 15), 750.0)]),
        make_sale(3, "Customer 3", date(2023, 7, 1), 1200.0, [(date(2023, 7, 1), 600.0)]),
    ]
