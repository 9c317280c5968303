"""Box-drawing helpers over styled lines.

A *line* is a tuple of ``(style, text)`` fragments, the formatted-text
shape prompt_toolkit paints. A *block* is a list of lines. Widths are
measured in terminal cells, so wide glyphs count correctly.

Every helper here returns new lines and leaves its arguments alone.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from prompt_toolkit.formatted_text.utils import fragment_list_width
from prompt_toolkit.utils import get_cwidth

Fragment = tuple[str, str]
Line = tuple[Fragment, ...]
Block = list[Line]

ELLIPSIS = "…"


@dataclass(frozen=True)
class Border:
    top: str
    bottom: str
    left: str
    right: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str

    def with_bottom(self, left: str, middle: str, right: str) -> Border:
        return replace(self, bottom_left=left, bottom=middle, bottom_right=right)


NORMAL_BORDER = Border("─", "─", "│", "│", "┌", "┐", "└", "┘")
ROUNDED_BORDER = Border("─", "─", "│", "│", "╭", "╮", "╰", "╯")


# --- Measuring ----------------------------------------------------------------

def line_width(line: Line) -> int:
    return fragment_list_width(list(line))


def block_width(block: Block) -> int:
    return max((line_width(line) for line in block), default=0)


# --- Text ---------------------------------------------------------------------

def text_line(text: str, style: str = "") -> Line:
    return ((style, text),) if text else ()


def fit(text: str, width: int) -> str:
    """Truncate *text* with an ellipsis and pad it to exactly *width* cells."""
    if get_cwidth(text) > width:
        kept = ""
        for char in text:
            if get_cwidth(kept + char) > width - 1:
                break
            kept += char
        text = kept + ELLIPSIS if width > 0 else ""
    return pad_text(text, width)


def pad_text(text: str, width: int) -> str:
    """Left-justify *text* to *width* cells; longer text is kept whole."""
    return text + " " * max(0, width - get_cwidth(text))


def pad_line(line: Line, width: int, center: bool = False, style: str = "") -> Line:
    """Pad *line* with spaces up to *width*; wider lines are returned as is."""
    gap = width - line_width(line)
    if gap <= 0:
        return line
    left = gap // 2 if center else 0
    right = gap - left
    result = list(line)
    if left:
        result.insert(0, (style, " " * left))
    if right:
        result.append((style, " " * right))
    return tuple(result)


# --- Composition --------------------------------------------------------------

def draw_box(
    block: Block,
    border: Border,
    style: str = "",
    width: int = 0,
    top: bool = True,
    padding: tuple[int, int] = (0, 0),
    center: bool = False,
) -> Block:
    """Surround *block* with *border*.

    ``padding`` is ``(vertical, horizontal)`` blank cells inside the
    border. The inner width is the widest line or *width*, whichever is
    larger; every line is padded to it, centred when *center* is set.
    """
    vertical, horizontal = padding
    inner = max(block_width(block), width)
    blank: Line = ((style, " " * inner),) if inner else ()
    body = [blank] * vertical + [pad_line(line, inner, center) for line in block] + [blank] * vertical

    side = " " * horizontal
    full = inner + 2 * horizontal
    result: Block = []
    if top:
        result.append(((style, border.top_left + border.top * full + border.top_right),))
    for line in body:
        result.append(((style, border.left + side),) + pad_line(line, inner) + ((style, side + border.right),))
    result.append(((style, border.bottom_left + border.bottom * full + border.bottom_right),))
    return result


def join_horizontal(*blocks: Block) -> Block:
    """Place blocks side by side, aligned to their bottom edge."""
    height = max((len(b) for b in blocks), default=0)
    rows: list[list[Fragment]] = [[] for _ in range(height)]
    for block in blocks:
        width = block_width(block)
        padded = [()] * (height - len(block)) + list(block)
        for row, line in zip(rows, padded):
            row.extend(pad_line(line, width))
    return [tuple(row) for row in rows]


def join_vertical(*blocks: Block) -> Block:
    """Stack blocks top to bottom, left aligned and padded to a common width."""
    width = max((block_width(b) for b in blocks), default=0)
    return [pad_line(line, width) for block in blocks for line in block]


def place(block: Block, width: int, height: int) -> Block:
    """Centre *block* in a ``width`` x ``height`` canvas.

    An odd gap puts the extra cell left of and above the block. A
    dimension the block already fills or exceeds is left untouched.
    """
    block_w = block_width(block)
    if width > block_w:
        gap = width - block_w
        left = gap - gap // 2
        block = [
            pad_line(((("", " " * left),) if left else ()) + pad_line(line, block_w), width)
            for line in block
        ]
        block_w = width

    if height > len(block):
        gap = height - len(block)
        above = gap - gap // 2
        blank: Line = (("", " " * block_w),) if block_w else ()
        block = [blank] * above + block + [blank] * (gap - above)
    return block
