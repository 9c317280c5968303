"""JSON-file-backed implementation of CatalogRepository.

The file holds a list of beverages::

    [
      {"name": "Club-Mate", "price": "1.50", "stock": 24, "currency": "EUR"}
    ]

``currency`` is optional. Prices are read as strings (or numbers) and
converted to Decimal without going through float arithmetic.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from bevshop.domain.exceptions import CatalogNotFoundError, ValidationError
from bevshop.domain.model.beverage import Beverage, Catalog
from bevshop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from bevshop.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CatalogRepository interface ------------------------------------------

    def load(self) -> Catalog:
        raw = self._read()
        if not isinstance(raw, list):
            raise ValidationError(f"{self._file_path}: expected a list of beverages")

        catalog = Catalog.create(self._to_beverage(i, item) for i, item in enumerate(raw))
        logger.info("Loaded %d beverage(s) from %s", len(catalog), self._file_path)
        return catalog

    # --- Serialization helpers ------------------------------------------------

    def _read(self) -> object:
        if not self._file_path.is_file():
            raise CatalogNotFoundError(f"Catalog file {self._file_path} not found")
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(f"{self._file_path}: not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise ValidationError(f"{self._file_path}: cannot be read ({exc.strerror})") from exc
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"{self._file_path}: invalid JSON ({exc.msg})") from exc

    def _to_beverage(self, position: int, item: object) -> Beverage:
        if not isinstance(item, dict):
            raise ValidationError(f"{self._file_path}: entry {position} is not an object")
        missing = [key for key in ("name", "price", "stock") if key not in item]
        if missing:
            raise ValidationError(
                f"{self._file_path}: entry {position} is missing {', '.join(missing)}"
            )
        if not isinstance(item["name"], str):
            raise ValidationError(f"{self._file_path}: entry {position} name must be a string")
        if not isinstance(item.get("currency", DEFAULT_CURRENCY), str):
            raise ValidationError(f"{self._file_path}: entry {position} currency must be a string")
        if isinstance(item["price"], bool):
            raise ValidationError(f"Invalid money amount: {item['price']!r}")
        return Beverage(
            name=item["name"],
            price=Money.of(item["price"], item.get("currency", DEFAULT_CURRENCY)),
            stock=item["stock"],
        )
