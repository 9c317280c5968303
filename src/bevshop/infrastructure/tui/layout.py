"""Layout: ApplicationState → Frame.

Rendering is a pure function of the state it is given. The same state
always produces the same frame, and nothing here mutates its input.
"""

from __future__ import annotations

from dataclasses import dataclass

from bevshop.application.dto import CartSummaryDTO, CatalogRowDTO
from bevshop.application.settings import ShopSettings
from bevshop.application.show_cart import ShowCartHandler
from bevshop.application.show_catalog import ShowCatalogHandler
from bevshop.domain.model.beverage import Catalog
from bevshop.domain.model.state import ApplicationState, Tab
from bevshop.infrastructure.tui.boxes import (
    NORMAL_BORDER,
    ROUNDED_BORDER,
    Block,
    Line,
    block_width,
    draw_box,
    fit,
    join_horizontal,
    join_vertical,
    line_width,
    pad_text,
    place,
    text_line,
)

BORDER = "class:border"

TABS = ((Tab.SHOP, "Shop [s]"), (Tab.CART, "Cart [c]"))

INACTIVE_TAB_BORDER = ROUNDED_BORDER.with_bottom("┴", "─", "┴")
ACTIVE_TAB_BORDER = ROUNDED_BORDER.with_bottom("┘", " ", "└")

# Panel below the tabs: the tab row supplies its top edge.
PANEL_PADDING = (2, 0)

CART_SEPARATOR = "  " + "-" * 43

SHOP_HELP = (
    "Use ↑/↓ to select, ←/→ to change quantity.",
    "Press 'c' to view cart, 'q' to quit.",
)


@dataclass(frozen=True)
class Frame:
    """One fully rendered screen."""

    lines: tuple[Line, ...]

    @property
    def width(self) -> int:
        return block_width(list(self.lines))

    @property
    def height(self) -> int:
        return len(self.lines)

    def plain(self) -> str:
        return "\n".join("".join(text for _, text in line) for line in self.lines)

    def fragments(self) -> list[tuple[str, str]]:
        """Flat formatted text, lines separated by newline fragments."""
        result: list[tuple[str, str]] = []
        for i, line in enumerate(self.lines):
            if i:
                result.append(("", "\n"))
            result.extend(line)
        return result


class ShopLayout:

    def __init__(self, catalog: Catalog, settings: ShopSettings | None = None) -> None:
        self._settings = settings or ShopSettings()
        self._show_catalog = ShowCatalogHandler(catalog)
        self._show_cart = ShowCartHandler(catalog)
        self._columns = (
            ("Name", self._settings.name_width),
            ("Price", 10),
            ("Stock", 10),
            ("Qty", 5),
        )

    def render(self, state: ApplicationState) -> Frame:
        if state.active_tab is Tab.CART:
            body = self._cart_body(self._show_cart.handle(state.cart), state.checkout_pending)
        else:
            body = self._shop_body(self._show_catalog.handle(state.cart), state.cursor)

        # Build the tabs once to learn their width; the panel must be at
        # least as wide so the header row can span it exactly.
        tabs = [self._tab(label, tab is state.active_tab, i == 0, i == len(TABS) - 1)
                for i, (tab, label) in enumerate(TABS)]
        tabs_width = sum(block_width(t) for t in tabs)

        panel = draw_box(
            body,
            NORMAL_BORDER,
            style=BORDER,
            width=tabs_width - 2,
            top=False,
            padding=PANEL_PADDING,
            center=True,
        )
        filler = self._filler(block_width(panel) - tabs_width, len(tabs[0]))
        header = join_horizontal(tabs[0], filler, *tabs[1:])

        screen = join_vertical(header, panel)
        return Frame(lines=tuple(place(screen, state.viewport.width, state.viewport.height)))

    # --- Tabs -----------------------------------------------------------------

    def _tab(self, label: str, active: bool, first: bool, last: bool) -> Block:
        border = ACTIVE_TAB_BORDER if active else INACTIVE_TAB_BORDER
        if first:
            border = border.with_bottom("│" if active else "├", border.bottom, border.bottom_right)
        elif last:
            border = border.with_bottom(border.bottom_left, border.bottom, "│" if active else "┤")
        return draw_box(
            [text_line(label, "class:tab.active" if active else "class:tab")],
            border,
            style=BORDER,
            padding=(0, 1),
        )

    def _filler(self, width: int, height: int) -> Block:
        if width <= 0:
            return []
        blank: Line = (("", " " * width),)
        return [blank] * (height - 1) + [((BORDER, INACTIVE_TAB_BORDER.bottom * width),)]

    # --- Shop tab -------------------------------------------------------------

    def _shop_body(self, rows: list[CatalogRowDTO], cursor: int) -> Block:
        header: Line = tuple(
            ("class:table.header", f" {fit(title, width)} ") for title, width in self._columns
        )
        table: Block = [header, (("class:table.header.border", "─" * line_width(header)),)]

        visible = self._settings.visible_rows
        offset = max(0, min(cursor - visible + 1, len(rows) - visible))
        for index in range(offset, offset + visible):
            if index >= len(rows):
                table.append((("", " " * line_width(header)),))
                continue
            row = rows[index]
            style = "class:table.selected" if index == cursor else "class:table.cell"
            values = (row.name, row.price, str(row.stock), str(row.quantity))
            table.append(tuple(
                (style, f" {fit(value, width)} ")
                for value, (_, width) in zip(values, self._columns)
            ))

        return table + [()] + [text_line(hint, "class:help") for hint in SHOP_HELP]

    # --- Cart tab -------------------------------------------------------------

    def _cart_body(self, summary: CartSummaryDTO, checkout_pending: bool) -> Block:
        body: Block = [text_line("Your Current Order:", "class:cart.title"), ()]

        if summary.is_empty:
            return body + [
                text_line("  Your cart is empty!", "class:cart.empty"),
                (),
                (),
                text_line("Go to the 'Shop' tab to add items.", "class:help"),
            ]

        name_width = self._settings.name_width
        for line in summary.lines:
            body.append(text_line(
                f"  {line.quantity}x {pad_text(line.name, name_width)} "
                f"@ {line.unit_price} each = {line.line_total}"
            ))
        body += [
            (),
            text_line(CART_SEPARATOR),
            text_line(f"  Total: {summary.total}", "class:cart.total"),
            (),
            (),
        ]

        if checkout_pending:
            return body + [
                text_line("Confirm purchase? (y/n)", "class:cart.prompt"),
                text_line("(Press 'esc' or 'n' to cancel checkout)", "class:help"),
            ]
        return body + [text_line("Press 'enter' to checkout.", "class:help")]
