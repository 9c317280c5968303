"""Shop settings shared by the controller and the layout."""

from __future__ import annotations

from dataclasses import dataclass

from bevshop.domain.exceptions import ValidationError


@dataclass(frozen=True)
class ShopSettings:
    """Tunable presentation parameters.

    ``visible_rows`` is both the height of the catalog table and the
    distance a page-up/page-down moves the cursor.
    """

    visible_rows: int = 5
    name_width: int = 20

    def __post_init__(self) -> None:
        if self.visible_rows < 1:
            raise ValidationError("visible_rows must be at least 1")
        if self.name_width < 1:
            raise ValidationError("name_width must be at least 1")
