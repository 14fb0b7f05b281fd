"""An in-memory grid of styled terminal cells that the screens draw into."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from termpong.geometry import Rect
from termpong.theme import Color


@dataclass(frozen=True)
class Style:
    """Foreground, background and text attributes of a cell."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    italic: bool = False

    def patch(self, other: Style) -> Style:
        """Lay another style over this one; unset colours keep the current ones."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            bold=self.bold or other.bold,
            italic=self.italic or other.italic,
        )


class BorderType(Enum):
    """Border glyphs: top-left, top-right, bottom-left, bottom-right, horizontal, vertical."""

    PLAIN = "┌┐└┘─│"
    ROUNDED = "╭╮╰╯─│"
    DOUBLE = "╔╗╚╝═║"
    THICK = "┏┓┗┛━┃"


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class Cell:
    char: str = " "
    style: Style = field(default_factory=Style)


def center_span(length: int, total: int) -> int:
    """Offset that centres a span of the given length inside total cells."""
    return max(0, total - length) // 2


def _align_offset(length: int, total: int, alignment: Alignment) -> int:
    if alignment is Alignment.CENTER:
        return center_span(length, total)
    if alignment is Alignment.RIGHT:
        return max(0, total - length)
    return 0


class Canvas:
    """A width x height grid of cells, clipped at its edges."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid canvas size: {width}x{height}")
        self.width = width
        self.height = height
        self._cells = [[Cell() for _ in range(width)] for _ in range(height)]

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _set(self, x: int, y: int, char: str | None = None, style: Style | None = None) -> None:
        if not self._contains(x, y):
            return
        cell = self._cells[y][x]
        if char is not None:
            cell.char = char
        if style is not None:
            cell.style = cell.style.patch(style)

    def _set_style(self, rect: Rect, style: Style) -> None:
        for y in range(rect.y, rect.bottom):
            for x in range(rect.x, rect.right):
                self._set(x, y, style=style)

    def put_text(self, x: int, y: int, text: str, style: Style | None = None) -> None:
        """Write text from (x, y) to the right; what falls outside is dropped."""
        for offset, char in enumerate(text):
            self._set(x + offset, y, char, style)

    def fill(self, rect: Rect, char: str = " ", style: Style | None = None) -> None:
        """Set every cell of rect to char, laying style over it."""
        for y in range(rect.y, rect.bottom):
            for x in range(rect.x, rect.right):
                self._set(x, y, char, style)

    def draw_box(
        self,
        rect: Rect,
        border: BorderType = BorderType.PLAIN,
        title: str = "",
        style: Style | None = None,
        title_alignment: Alignment = Alignment.LEFT,
    ) -> None:
        """Style the whole rect and draw a border around it, with an optional title on top."""
        if rect.width <= 0 or rect.height <= 0:
            return
        if style is not None:
            self._set_style(rect, style)
        top_left, top_right, bottom_left, bottom_right, horizontal, vertical = border.value
        last_x, last_y = rect.right - 1, rect.bottom - 1
        for x in range(rect.x + 1, last_x):
            self._set(x, rect.y, horizontal)
            self._set(x, last_y, horizontal)
        for y in range(rect.y + 1, last_y):
            self._set(rect.x, y, vertical)
            self._set(last_x, y, vertical)
        self._set(rect.x, rect.y, top_left)
        self._set(last_x, rect.y, top_right)
        self._set(rect.x, last_y, bottom_left)
        self._set(last_x, last_y, bottom_right)

        available = rect.width - 2
        if title and available > 0:
            shown = title[:available]
            offset = _align_offset(len(shown), available, title_alignment)
            self.put_text(rect.x + 1 + offset, rect.y, shown)

    def text_block(
        self,
        rect: Rect,
        text: str,
        style: Style | None = None,
        alignment: Alignment = Alignment.LEFT,
    ) -> None:
        """Style rect and write text into it line by line, cut to the rect's size."""
        if rect.width <= 0 or rect.height <= 0:
            return
        if style is not None:
            self._set_style(rect, style)
        for row, line in enumerate(text.split("\n")):
            if row >= rect.height:
                break
            shown = line[: rect.width]
            offset = _align_offset(len(shown), rect.width, alignment)
            self.put_text(rect.x + offset, rect.y + row, shown)

    def row(self, y: int) -> str:
        """The characters of one row as a string."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside canvas of height {self.height}")
        return "".join(cell.char for cell in self._cells[y])

    def cell(self, x: int, y: int) -> Cell:
        if not self._contains(x, y):
            raise IndexError(f"cell ({x}, {y}) outside canvas")
        return self._cells[y][x]