"""Public interface for the XML order document adapter."""

from __future__ import annotations

from .parser import XmlOrderParser
from .schema import OrderPayload, ProductPayload, UserPayload

__all__ = [
    "OrderPayload",
    "ProductPayload",
    "UserPayload",
    "XmlOrderParser",
]
