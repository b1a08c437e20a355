from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from orderimport.adapters.xml import OrderPayload, ProductPayload, UserPayload


def test_order_payload_accepts_product_alias() -> None:
    payload = OrderPayload.model_validate(
        {
            "no": "3",
            "reg_date": "2024-08-22",
            "user": {"fio": "John", "email": "john@x.com", "password": None},
            "product": [{"name": "P1", "price": "10.00", "quantity": "2"}],
        }
    )

    assert payload.no == 3
    assert payload.products[0].price == Decimal("10.00")
    assert payload.products[0].quantity == 2


def test_order_payload_requires_at_least_one_product() -> None:
    with pytest.raises(ValidationError):
        OrderPayload.model_validate(
            {"no": "1", "user": {"fio": "John", "email": "john@x.com"}, "product": []}
        )


def test_user_payload_rejects_blank_email() -> None:
    with pytest.raises(ValidationError):
        UserPayload.model_validate({"fio": "John", "email": "   "})


def test_product_payload_rejects_non_finite_price() -> None:
    with pytest.raises(ValidationError):
        ProductPayload.model_validate({"name": "P1", "price": "NaN", "quantity": "1"})


@pytest.mark.parametrize("price", ["10.999", "0.001", "12345678901234567.00"])
def test_product_payload_rejects_price_the_store_cannot_hold(price: str) -> None:
    with pytest.raises(ValidationError):
        ProductPayload.model_validate({"name": "P1", "price": price, "quantity": "1"})


def test_product_payload_keeps_two_decimal_price() -> None:
    payload = ProductPayload.model_validate({"name": "P1", "price": "249.90", "quantity": "1"})

    assert payload.price == Decimal("249.90")
