"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry already-formatted values from the application layer to the
layout, so the layout never does arithmetic on prices.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogRowDTO:
    """A single row of the shop table."""

    name: str
    price: str  # formatted, e.g. "€1.50"
    stock: int
    quantity: int


@dataclass(frozen=True)
class CartLineDTO:
    """A single cart entry with a non-zero quantity."""

    quantity: int
    name: str
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartSummaryDTO:
    lines: list[CartLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines
