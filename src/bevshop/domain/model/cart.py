"""Cart aggregate — requested quantities per catalog position."""

from __future__ import annotations

from dataclasses import dataclass

from bevshop.domain.exceptions import ValidationError
from bevshop.domain.model.beverage import Catalog
from bevshop.domain.model.value_objects import Money


@dataclass(frozen=True)
class Cart:
    """Fixed-size quantities indexed by catalog position.

    Invariants:
    - every quantity is >= 0
    - ``add_one`` never takes a quantity past the stock it is given

    A quantity of zero means the same thing as "not in the cart": both
    are skipped by ``entries()`` and ``total()``. Reading an index the
    cart does not cover also yields zero.

    Operations return a new Cart; boundary attempts return ``self``
    unchanged instead of raising.
    """

    quantities: tuple[int, ...]

    def __post_init__(self) -> None:
        if any(q < 0 for q in self.quantities):
            raise ValidationError("Cart quantities cannot be negative")

    @staticmethod
    def empty(size: int) -> Cart:
        return Cart(quantities=(0,) * size)

    def quantity_of(self, index: int) -> int:
        if 0 <= index < len(self.quantities):
            return self.quantities[index]
        return 0

    def add_one(self, index: int, stock: int) -> Cart:
        """One more unit of *index*, unless that would exceed *stock*."""
        if not 0 <= index < len(self.quantities):
            return self
        if self.quantities[index] >= stock:
            return self
        return self._with(index, self.quantities[index] + 1)

    def remove_one(self, index: int) -> Cart:
        """One unit fewer of *index*, unless it is already zero."""
        if self.quantity_of(index) == 0:
            return self
        return self._with(index, self.quantities[index] - 1)

    @property
    def is_empty(self) -> bool:
        return not any(self.quantities)

    def entries(self) -> list[tuple[int, int]]:
        """``(index, quantity)`` pairs with a non-zero quantity, in catalog order."""
        return [(i, q) for i, q in enumerate(self.quantities) if q > 0]

    def total(self, catalog: Catalog) -> Money:
        result = Money.zero(catalog.currency)
        for index, quantity in self.entries():
            result = result + catalog[index].price * quantity
        return result

    # --- Internal helpers -----------------------------------------------------

    def _with(self, index: int, quantity: int) -> Cart:
        quantities = list(self.quantities)
        quantities[index] = quantity
        return Cart(quantities=tuple(quantities))
