"""Colour themes for the game screens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named colour or a 24-bit RGB value."""

    name: str
    rgb: tuple[int, int, int] | None = None

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        for component in (red, green, blue):
            if not 0 <= component <= 255:
                raise ValueError(f"colour component out of range: {component}")
        return cls(f"#{red:02x}{green:02x}{blue:02x}", (red, green, blue))

    @property
    def is_reset(self) -> bool:
        return self.name == "reset"

    def __str__(self) -> str:
        return self.name


Color.RESET = Color("reset")
Color.BLACK = Color("black")
Color.WHITE = Color("white")
Color.YELLOW = Color("yellow")
Color.CYAN = Color("cyan")
Color.GREEN = Color("green")
Color.BLUE = Color("blue")
Color.LIGHT_GREEN = Color("light_green")


@dataclass(frozen=True)
class ThemeColors:
    """The palette a theme assigns to each part of the screen."""

    background: Color
    border: Color
    text: Color
    accent: Color
    player_bar: Color
    player_bar_power: Color
    ball: Color


_rgb = Color.from_rgb


class GameTheme(Enum):
    """Available themes, in cycling order; the value is the display name."""

    MONOKAI = "Monokai"
    SOLARIZED = "Solarized"
    DRACULA = "Dracula"
    GRUVBOX_DARK = "Gruvbox Dark"
    NORD = "Nord"
    ONE_DARK = "One Dark"
    HIGH_CONTRAST = "High Contrast"

    def colors(self) -> ThemeColors:
        return _PALETTES[self]

    def next(self) -> GameTheme:
        members = list(GameTheme)
        return members[(members.index(self) + 1) % len(members)]

    def previous(self) -> GameTheme:
        members = list(GameTheme)
        return members[(members.index(self) - 1) % len(members)]

    def display_name(self) -> str:
        return self.value


_PALETTES = {
    GameTheme.MONOKAI: ThemeColors(
        background=Color.RESET,
        border=_rgb(249, 38, 114),
        text=_rgb(248, 248, 242),
        accent=_rgb(166, 226, 46),
        player_bar=_rgb(102, 217, 239),
        player_bar_power=_rgb(230, 219, 116),
        ball=_rgb(255, 95, 135),
    ),
    GameTheme.SOLARIZED: ThemeColors(
        background=Color.RESET,
        border=_rgb(38, 139, 210),
        text=_rgb(101, 123, 131),
        accent=_rgb(42, 161, 152),
        player_bar=_rgb(133, 153, 0),
        player_bar_power=_rgb(181, 137, 0),
        ball=_rgb(220, 50, 47),
    ),
    GameTheme.DRACULA: ThemeColors(
        background=Color.RESET,
        border=_rgb(255, 121, 198),
        text=_rgb(248, 248, 242),
        accent=_rgb(189, 147, 249),
        player_bar=_rgb(80, 250, 123),
        player_bar_power=_rgb(241, 250, 140),
        ball=_rgb(255, 85, 85),
    ),
    GameTheme.GRUVBOX_DARK: ThemeColors(
        background=Color.RESET,
        border=_rgb(250, 189, 47),
        text=_rgb(235, 219, 178),
        accent=_rgb(184, 187, 38),
        player_bar=_rgb(131, 165, 152),
        player_bar_power=_rgb(254, 128, 25),
        ball=_rgb(251, 73, 52),
    ),
    GameTheme.NORD: ThemeColors(
        background=Color.RESET,
        border=_rgb(136, 192, 208),
        text=_rgb(216, 222, 233),
        accent=_rgb(143, 188, 187),
        player_bar=_rgb(94, 129, 172),
        player_bar_power=_rgb(235, 203, 139),
        ball=_rgb(191, 97, 106),
    ),
    GameTheme.ONE_DARK: ThemeColors(
        background=Color.RESET,
        border=_rgb(198, 120, 221),
        text=_rgb(171, 178, 191),
        accent=_rgb(97, 175, 239),
        player_bar=_rgb(152, 195, 121),
        player_bar_power=_rgb(229, 192, 123),
        ball=_rgb(224, 108, 117),
    ),
    GameTheme.HIGH_CONTRAST: ThemeColors(
        background=Color.BLACK,
        border=Color.WHITE,
        text=Color.WHITE,
        accent=Color.YELLOW,
        player_bar=_rgb(0, 255, 255),
        player_bar_power=_rgb(0, 255, 0),
        ball=_rgb(255, 0, 0),
    ),
}