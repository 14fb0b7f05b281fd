"""Rectangles and small layout helpers used by the screens."""

from __future__ import annotations

from dataclasses import dataclass

PLAYER_NAME_CHAR_LEN = 16


@dataclass(frozen=True)
class Rect:
    """An axis-aligned area of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        """Column just past the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Row just past the bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def inner(self, horizontal: int, vertical: int) -> Rect:
        """Shrink by a margin on every side; an empty rect if the margin does not fit."""
        if self.width < 2 * horizontal or self.height < 2 * vertical:
            return Rect()
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            self.width - 2 * horizontal,
            self.height - 2 * vertical,
        )


def centered_rect_with_percentage(percent_x: int, percent_y: int, cols: int, rows: int) -> Rect:
    """A rect centred in cols x rows, sized by percentages; at least 5 rows high when possible."""
    width = cols * percent_x // 100
    height = min(max(rows * percent_y // 100, 5), rows)
    return Rect((cols - width) // 2, (rows - height) // 2, width, height)


def centered_rect(width: int, height: int, cols: int, rows: int) -> Rect:
    """A rect of the given size centred in cols x rows, shrunk to fit."""
    actual_width = min(width, cols)
    actual_height = min(height, rows)
    x = (cols - actual_width) // 2
    y = (rows - actual_height) // 2
    return Rect(x, y, actual_width, actual_height)


def pad_name(name: str) -> str:
    """Cut or space-pad a player name to exactly PLAYER_NAME_CHAR_LEN characters."""
    return name[:PLAYER_NAME_CHAR_LEN].ljust(PLAYER_NAME_CHAR_LEN)