"""Input events delivered to the controller, one at a time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class KeyPressed:
    """A key press identified by its logical name, e.g. ``"q"`` or ``"ctrl+c"``."""

    key: str


@dataclass(frozen=True)
class Resized:
    width: int
    height: int


Event = Union[KeyPressed, Resized]
