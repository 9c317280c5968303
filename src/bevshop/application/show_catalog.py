"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from bevshop.application.dto import CatalogRowDTO
from bevshop.domain.model.beverage import Catalog
from bevshop.domain.model.cart import Cart


class ShowCatalogHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self, cart: Cart) -> list[CatalogRowDTO]:
        return [
            CatalogRowDTO(
                name=beverage.name,
                price=str(beverage.price),
                stock=beverage.stock,
                quantity=cart.quantity_of(index),
            )
            for index, beverage in enumerate(self._catalog)
        ]
