"""Beverage and Catalog — the immutable goods on offer for a session.

The catalog is supplied once at startup and never changes afterwards.
Stock is a fixed ceiling for how many units a customer may put in the cart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from bevshop.domain.exceptions import ValidationError
from bevshop.domain.model.value_objects import Money


@dataclass(frozen=True)
class Beverage:
    """A single catalog entry."""

    name: str
    price: Money
    stock: int

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Beverage name is required")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Price of {self.name} must be Money, got {type(self.price).__name__}"
            )
        # bool is an int subclass but never a meaningful stock level
        if not isinstance(self.stock, int) or isinstance(self.stock, bool):
            raise ValidationError(
                f"Stock of {self.name} must be an integer, got {type(self.stock).__name__}"
            )
        if self.stock < 0:
            raise ValidationError(f"Stock of {self.name} cannot be negative")


@dataclass(frozen=True)
class Catalog:
    """Ordered, non-empty collection of beverages sharing one currency.

    Use ``Catalog.create()`` to build one from any iterable; it enforces
    the invariants the shop relies on (a cursor always has a row to sit
    on, and totals never mix currencies).
    """

    items: tuple[Beverage, ...]

    @staticmethod
    def create(beverages: Iterable[Beverage]) -> Catalog:
        items = tuple(beverages)
        if not items:
            raise ValidationError("Catalog must contain at least one beverage")

        currencies = {b.price.currency for b in items}
        if len(currencies) > 1:
            raise ValidationError(
                f"Catalog mixes currencies: {', '.join(sorted(currencies))}"
            )

        return Catalog(items=items)

    @property
    def currency(self) -> str:
        return self.items[0].price.currency

    @property
    def last_index(self) -> int:
        return len(self.items) - 1

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Beverage:
        return self.items[index]

    def __iter__(self) -> Iterator[Beverage]:
        return iter(self.items)
