"""Application service: Show Cart use case (query).

Only entries with a non-zero quantity are listed, in catalog order.
The total is the exact Decimal sum of every line total.
"""

from __future__ import annotations

from bevshop.application.dto import CartLineDTO, CartSummaryDTO
from bevshop.domain.model.beverage import Catalog
from bevshop.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self, cart: Cart) -> CartSummaryDTO:
        lines = []
        for index, quantity in cart.entries():
            beverage = self._catalog[index]
            lines.append(
                CartLineDTO(
                    quantity=quantity,
                    name=beverage.name,
                    unit_price=str(beverage.price),
                    line_total=str(beverage.price * quantity),
                )
            )
        return CartSummaryDTO(lines=lines, total=str(cart.total(self._catalog)))
