"""
Shoppe client tests - model tests.
"""

from decimal import Decimal
from typing import Any, Dict

import pytest
from pydantic import ValidationError

from shoppe.models import (
    Brand,
    CheckoutSessionCreate,
    Customer,
    CustomerUpdate,
    Product,
)


def test_customer_ignores_unknown_fields(customer_payload: Dict[str, Any]) -> None:
    customer = Customer.model_validate({**customer_payload, "marketing_opt_in_level": None})

    assert customer.id == 42
    assert customer.total_spent == Decimal("199.90")
    assert customer.created_at is not None


def test_customer_requires_id() -> None:
    with pytest.raises(ValidationError):
        Customer.model_validate({"email": "a@example.com"})


def test_customer_display_name() -> None:
    assert Customer(id=1, first_name="Alice", last_name="Nader").display_name == "Alice Nader"
    assert Customer(id=1, name="Alice").display_name == "Alice"
    assert Customer(id=1, email="a@example.com").display_name == "a@example.com"


def test_product_price_is_first_variant(product_payload: Dict[str, Any]) -> None:
    product = Product.model_validate(product_payload)

    assert product.price == Decimal("70.00")
    assert Product(id=1).price is None


def test_brand_vendor_is_title() -> None:
    assert Brand(id=1, title="NIKE").vendor == "NIKE"


def test_customer_update_only_dumps_set_fields() -> None:
    update = CustomerUpdate(note="1001")

    assert update.model_dump(exclude_unset=True) == {"note": "1001"}


def test_checkout_form_lowercases_currency() -> None:
    request = CheckoutSessionCreate(
        customer_email="a@example.com",
        currency="EGP",
        product_name="Cap",
        unit_amount=1250,
    )

    form = request.to_form("https://ok.test", "https://no.test")

    assert form["line_items[0][price_data][currency]"] == "egp"
    assert form["line_items[0][price_data][unit_amount_decimal]"] == "1250"
    assert form["line_items[0][quantity]"] == "1"
    assert form["success_url"] == "https://ok.test"
    assert form["cancel_url"] == "https://no.test"


def test_checkout_quantity_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        CheckoutSessionCreate(
            customer_email="a@example.com",
            currency="EGP",
            product_name="Cap",
            unit_amount=100,
            quantity=0,
        )
