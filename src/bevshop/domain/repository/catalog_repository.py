"""Abstract repository for the beverage catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (built-in, JSON file)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bevshop.domain.model.beverage import Catalog


class CatalogRepository(ABC):

    @abstractmethod
    def load(self) -> Catalog:
        """Return the catalog for a new session."""
