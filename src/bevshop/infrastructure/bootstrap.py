"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from bevshop.application.keymap import KeyMap
from bevshop.application.settings import ShopSettings
from bevshop.application.shop_controller import ShopController
from bevshop.domain.repository.catalog_repository import CatalogRepository
from bevshop.infrastructure.persistence.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from bevshop.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from bevshop.infrastructure.tui.app import ShopApp
from bevshop.infrastructure.tui.layout import ShopLayout
from bevshop.infrastructure.tui.theme import Theme


def catalog_repository(catalog_path: Path | None = None) -> CatalogRepository:
    if catalog_path is None:
        return InMemoryCatalogRepository()
    return JsonCatalogRepository(catalog_path)


def shop_app(
    catalog_path: Path | None = None,
    settings: ShopSettings | None = None,
) -> ShopApp:
    """Build a ready-to-run session. Raises DomainException on a bad catalog."""
    catalog = catalog_repository(catalog_path).load()
    settings = settings or ShopSettings()
    keymap = KeyMap()
    return ShopApp(
        controller=ShopController(catalog, settings, keymap),
        layout=ShopLayout(catalog, settings),
        keymap=keymap,
        theme=Theme(),
    )
