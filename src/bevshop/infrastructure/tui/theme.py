"""Colours for the shop's style classes."""

from __future__ import annotations

from dataclasses import dataclass

from prompt_toolkit.styles import Style


@dataclass(frozen=True)
class Theme:
    highlight: str = "#7D56F4"
    selected_fg: str = "#ffffaf"
    selected_bg: str = "#5f00ff"
    muted: str = "#888888"
    accent: str = "#FFD700"

    def to_style(self) -> Style:
        return Style.from_dict(
            {
                "border": self.highlight,
                "tab": "",
                "tab.active": "bold",
                "table.header": "bold",
                "table.header.border": self.muted,
                "table.selected": f"{self.selected_fg} bg:{self.selected_bg}",
                "help": self.muted,
                "cart.title": "bold underline",
                "cart.empty": self.muted,
                "cart.total": f"bold {self.accent}",
                "cart.prompt": f"bold {self.accent}",
            }
        )
