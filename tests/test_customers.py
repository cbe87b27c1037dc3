from __future__ import annotations

import pytest

from chem_erp.errors import DuplicateError, ValidationError
from chem_erp.models import Customer
from chem_erp.services.customers import add_customer, customer_names, is_duplicate


def test_duplicate_name_is_rejected_ignoring_case_and_spaces(store):
    add_customer(store, name="John Doe", contact_no="1234567890", address="123 Main St")

    with pytest.raises(DuplicateError) as exc:
        add_customer(store, name="  john doe ")
    assert exc.value.name.strip() == "john doe"
    assert len(store.customers) == 1


def test_similar_name_is_accepted(store):
    add_customer(store, name="John Doe")
    c = add_customer(store, name="John Doe2")
    assert c.id == 2
    assert [x.name for x in store.customers] == ["John Doe", "John Doe2"]


def test_optional_fields_are_normalised(store):
    c = add_customer(store, name=" Jane Smith ", contact_no="", address="   ")
    assert c.name == "Jane Smith"
    assert c.contact_no is None
    assert c.address is None


def test_name_needs_two_characters(store):
    with pytest.raises(ValidationError, match="at least 2 characters"):
        add_customer(store, name="J")


def test_ids_follow_the_highest_existing_id(store):
    store.customers.add(Customer(id=7, name="Legacy"))
    store.customers.add(Customer(id=3, name="Older"))
    c = add_customer(store, name="New Customer")
    assert c.id == 8


def test_is_duplicate():
    customers = [Customer(id=1, name="John Doe")]
    assert is_duplicate(customers, "JOHN DOE")
    assert not is_duplicate(customers, "John Doe2")
    assert not is_duplicate([], "John Doe")


def test_customer_names_keep_insertion_order(store):
    add_customer(store, name="Zed Traders")
    add_customer(store, name="Acme Cleaners")
    assert customer_names(store.customers) == ["Zed Traders", "Acme Cleaners"]
