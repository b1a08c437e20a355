"""Ports for turning source documents into import candidates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from orderimport.domain.model import ImportOrder


@runtime_checkable
class OrderDocumentParser(Protocol):
    """Parse a batch document into import candidates.

    Implementations never raise for a missing or malformed source; they log
    the problem and return an empty list.
    """

    def parse(self, source: Path | str) -> list[ImportOrder]: ...
