"""ApplicationState — the single top-level value the shop runs on.

The state is an immutable snapshot. The controller owns the current
snapshot and replaces it after every event, so any two snapshots can be
compared or rendered independently.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bevshop.domain.exceptions import ValidationError
from bevshop.domain.model.cart import Cart


class Tab(Enum):
    SHOP = "SHOP"
    CART = "CART"


class Phase(Enum):
    SHOP_BROWSING = "SHOP_BROWSING"
    CART_REVIEWING = "CART_REVIEWING"
    CART_CONFIRMING_CHECKOUT = "CART_CONFIRMING_CHECKOUT"
    TERMINATED = "TERMINATED"


@dataclass(frozen=True)
class Viewport:
    """Terminal dimensions in character cells."""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValidationError(
                f"Viewport cannot be negative, got {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class ApplicationState:
    """Everything needed to render one frame and process the next event.

    Invariant: ``checkout_pending`` is only ever True on the cart tab.
    """

    active_tab: Tab
    cursor: int
    cart: Cart
    checkout_pending: bool = False
    viewport: Viewport = Viewport()
    terminated: bool = False

    def __post_init__(self) -> None:
        if self.checkout_pending and self.active_tab is not Tab.CART:
            raise ValidationError("Checkout can only be pending on the cart tab")
        if self.cursor < 0:
            raise ValidationError(f"Cursor cannot be negative, got {self.cursor}")

    @staticmethod
    def start(catalog_size: int, viewport: Viewport | None = None) -> ApplicationState:
        """Fresh session: shop tab, first row selected, nothing in the cart."""
        return ApplicationState(
            active_tab=Tab.SHOP,
            cursor=0,
            cart=Cart.empty(catalog_size),
            viewport=viewport or Viewport(),
        )

    @property
    def phase(self) -> Phase:
        if self.terminated:
            return Phase.TERMINATED
        if self.active_tab is Tab.SHOP:
            return Phase.SHOP_BROWSING
        if self.checkout_pending:
            return Phase.CART_CONFIRMING_CHECKOUT
        return Phase.CART_REVIEWING
