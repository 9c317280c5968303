"""Built-in catalog used when no catalog file is given."""

from __future__ import annotations

from bevshop.domain.model.beverage import Beverage, Catalog
from bevshop.domain.model.value_objects import Money
from bevshop.domain.repository.catalog_repository import CatalogRepository

DEFAULT_BEVERAGES = (
    Beverage("Club-Mate", Money.of("1.50"), 24),
    Beverage("Espresso", Money.of("1.00"), 50),
    Beverage("Fritz-Kola", Money.of("2.00"), 12),
    Beverage("Water", Money.of("0.50"), 100),
    Beverage("Beer", Money.of("2.50"), 6),
)


class InMemoryCatalogRepository(CatalogRepository):

    def __init__(self, beverages: tuple[Beverage, ...] = DEFAULT_BEVERAGES) -> None:
        self._beverages = beverages

    def load(self) -> Catalog:
        return Catalog.create(self._beverages)
