"""Key map: logical key names → shop actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from bevshop.domain.exceptions import ValidationError


class Action(Enum):
    QUIT = "QUIT"
    SHOW_SHOP = "SHOW_SHOP"
    SHOW_CART = "SHOW_CART"
    CURSOR_UP = "CURSOR_UP"
    CURSOR_DOWN = "CURSOR_DOWN"
    PAGE_UP = "PAGE_UP"
    PAGE_DOWN = "PAGE_DOWN"
    HALF_PAGE_UP = "HALF_PAGE_UP"
    HALF_PAGE_DOWN = "HALF_PAGE_DOWN"
    GO_TO_TOP = "GO_TO_TOP"
    GO_TO_BOTTOM = "GO_TO_BOTTOM"
    INCREMENT = "INCREMENT"
    DECREMENT = "DECREMENT"
    CONFIRM = "CONFIRM"
    ACCEPT = "ACCEPT"
    DECLINE = "DECLINE"


DEFAULT_BINDINGS: dict[Action, tuple[str, ...]] = {
    Action.QUIT: ("ctrl+c", "q"),
    Action.SHOW_SHOP: ("s",),
    Action.SHOW_CART: ("c",),
    Action.CURSOR_UP: ("up", "k"),
    Action.CURSOR_DOWN: ("down", "j"),
    Action.PAGE_UP: ("pgup", "b"),
    Action.PAGE_DOWN: ("pgdown", "f", "space"),
    Action.HALF_PAGE_UP: ("u", "ctrl+u"),
    Action.HALF_PAGE_DOWN: ("d", "ctrl+d"),
    Action.GO_TO_TOP: ("home", "g"),
    Action.GO_TO_BOTTOM: ("end", "G"),
    Action.INCREMENT: ("+", "=", "right"),
    Action.DECREMENT: ("-", "left"),
    Action.CONFIRM: ("enter",),
    Action.ACCEPT: ("y",),
    Action.DECLINE: ("n", "esc"),
}


@dataclass(frozen=True)
class KeyMap:
    """Immutable binding table.

    Each key name may be bound to at most one action, otherwise the
    outcome of a key press would depend on lookup order.
    """

    bindings: Mapping[Action, tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_BINDINGS)
    )

    def __post_init__(self) -> None:
        seen: dict[str, Action] = {}
        for action, keys in self.bindings.items():
            for key in keys:
                if key in seen and seen[key] is not action:
                    raise ValidationError(
                        f"Key '{key}' bound to both {seen[key].value} and {action.value}"
                    )
                seen[key] = action
        # frozen dataclass: both tables are fixed here and read-only after
        object.__setattr__(self, "bindings", MappingProxyType(
            {action: tuple(keys) for action, keys in self.bindings.items()}
        ))
        object.__setattr__(self, "_lookup", MappingProxyType(seen))

    def action_for(self, key: str) -> Action | None:
        return self._lookup.get(key)  # type: ignore[attr-defined]

    def keys(self) -> list[str]:
        """Every bound key name, in binding order."""
        return [key for keys in self.bindings.values() for key in keys]
