"""Pydantic models describing the order batch document."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class OrderDocumentModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
        frozen=True,
    )


class UserPayload(OrderDocumentModel):
    fio: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str | None = None

    _normalize_password = field_validator("password", mode="before")(_blank_to_none)


class ProductPayload(OrderDocumentModel):
    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0, max_digits=18, decimal_places=2)
    description: str | None = None
    quantity: int = Field(gt=0)

    _normalize_description = field_validator("description", mode="before")(_blank_to_none)


class OrderPayload(OrderDocumentModel):
    no: int
    # Kept raw; an unparseable date fails the batch during reconciliation.
    reg_date: str = ""
    user: UserPayload
    products: list[ProductPayload] = Field(alias="product", min_length=1)

    @field_validator("reg_date", mode="before")
    @classmethod
    def _missing_date_is_blank(cls, value: object) -> object:
        return "" if value is None else value
