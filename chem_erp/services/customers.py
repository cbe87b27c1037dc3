from __future__ import annotations

import logging
from typing import Iterable, Optional

from chem_erp.errors import DuplicateError
from chem_erp.models import Customer
from chem_erp.validation import validate_customer

logger = logging.getLogger(__name__)


def _name_key(name: str) -> str:
    return str(name).strip().lower()


def is_duplicate(customers: Iterable[Customer], name: str) -> bool:
    key = _name_key(name)
    return any(_name_key(c.name) == key for c in customers)


def add_customer(
    store,
    *,
    name: str,
    contact_no: Optional[str] = None,
    address: Optional[str] = None,
) -> Customer:
    values = validate_customer(name=name, contact_no=contact_no, address=address)

    if is_duplicate(store.customers, values["name"]):
        logger.warning("Rejected duplicate customer name=%r", values["name"])
        raise DuplicateError(values["name"])

    customer = Customer(
        id=store.customers.next_id(),
        name=values["name"],
        contact_no=values["contact_no"],
        address=values["address"],
    )
    store.customers.add(customer)
    logger.info("Added customer id=%s name=%s", customer.id, customer.name)
    return customer


def customer_names(customers: Iterable[Customer]) -> list[str]:
    return [c.name for c in customers]
