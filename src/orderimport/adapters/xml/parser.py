"""Parse XML order batches into import candidates.

Problems with the document as a whole (missing file, unreadable file, broken
markup, no orders) are logged and produce an empty list. Individual orders
without a user or without products are dropped; orders whose fields cannot be
coerced are dropped with a warning.
"""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from lxml import etree
from pydantic import ValidationError

from orderimport.domain.model import ImportLine, ImportOrder, ImportProduct, ImportUser

from .schema import OrderPayload

if TYPE_CHECKING:
    from lxml.etree import _Element

log = getLogger(__name__)

USER_FIELDS = ("fio", "email", "password")
PRODUCT_FIELDS = ("name", "price", "description", "quantity")


class XmlOrderParser:
    """Read ``<orders><order>...</order></orders>`` documents."""

    def __init__(self) -> None:
        self._xml_parser = etree.XMLParser(
            resolve_entities=False,
            no_network=True,
            remove_blank_text=True,
        )

    def parse(self, source: Path | str) -> list[ImportOrder]:
        path = Path(source)
        if not path.is_file():
            log.warning("Order document %s not found", path)
            return []

        try:
            tree = etree.parse(str(path), self._xml_parser)
        except (OSError, etree.XMLSyntaxError) as exc:
            log.warning("Could not load order document %s: %s", path, exc)
            return []

        root = tree.getroot()
        order_elements = root.findall("order")
        if not order_elements:
            log.warning("Order document %s contains no orders", path)
            return []

        orders: list[ImportOrder] = []
        for position, element in enumerate(order_elements, start=1):
            candidate = self._parse_order(element, position=position)
            if candidate is not None:
                orders.append(candidate)

        log.info("Parsed %s of %s orders from %s", len(orders), len(order_elements), path)
        return orders

    def _parse_order(self, element: _Element, *, position: int) -> ImportOrder | None:
        user_element = element.find("user")
        product_elements = element.findall("product")
        if user_element is None or not product_elements:
            log.debug("Skipping order #%s without user or products", position)
            return None

        document = {
            "no": _text(element, "no"),
            "reg_date": _text(element, "reg_date"),
            "user": _fields(user_element, USER_FIELDS),
            "product": [_fields(product, PRODUCT_FIELDS) for product in product_elements],
        }
        try:
            payload = OrderPayload.model_validate(document)
        except ValidationError as exc:
            log.warning(
                "Skipping order #%s (no=%s): %s",
                position,
                document["no"],
                _summarize(exc),
            )
            return None

        return _to_import_order(payload)


def _text(element: _Element, name: str) -> str | None:
    value = element.findtext(name)
    return value.strip() if value is not None else None


def _fields(element: _Element, names: tuple[str, ...]) -> dict[str, str | None]:
    return {name: _text(element, name) for name in names}


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
        for detail in error.errors()
    )


def _to_import_order(payload: OrderPayload) -> ImportOrder:
    return ImportOrder(
        number=payload.no,
        reg_date=payload.reg_date,
        user=ImportUser(
            name=payload.user.fio,
            email=payload.user.email,
            password=payload.user.password,
        ),
        lines=tuple(
            ImportLine(
                product=ImportProduct(
                    name=product.name,
                    price=product.price,
                    description=product.description,
                ),
                quantity=product.quantity,
            )
            for product in payload.products
        ),
    )
