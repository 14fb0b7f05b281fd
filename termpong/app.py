"""Application state: main menu, player name entry, settings and the running game."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from termpong.game import (
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    Event,
    Game,
    GameType,
    Key,
    RandomSource,
)
from termpong.geometry import PLAYER_NAME_CHAR_LEN, Rect
from termpong.theme import GameTheme

MAIN_MENU_OPTIONS = (
    "Play vs. AI",
    "Play with Friend",
    "I like to watch",
    "Settings",
    "Exit",
)
SETTINGS_ITEM_COUNT = 5
DEFAULT_PLAYER_NAMES = ("Player 1", "Player 2")
COMPUTER_NAME = "Computer"
SCREEN_SAVER_NAMES = ("Forg", "Car")
FAREWELL = "Thanks for playing terminal.pong! 🏓"

_SETTINGS_LABELS = (
    (GameType.AGAINST_AI, "Default Difficulty (vs AI)"),
    (GameType.WITH_FRIEND, "Default Difficulty (with Friend)"),
    (GameType.SCREEN_SAVER, "Default Difficulty (Screensaver)"),
)
_THEME_ITEM = 3
_BACK_ITEM = 4
_DIFFICULTY_STEP = 0.1


class Screen(Enum):
    """Which screen the application shows."""

    MAIN_MENU = "main_menu"
    NAME_INPUT = "name_input"
    GAME = "game"
    SETTINGS = "settings"


def _clamp_difficulty(value: float) -> float:
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, value))


class App:
    """Top-level state machine driven by key presses."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        self.rng = rng
        self.exit = False
        self.screen = Screen.MAIN_MENU
        self.menu_options: tuple[str, ...] = MAIN_MENU_OPTIONS
        self.menu_selected = 0
        self.current_game: Game | None = None
        self.name_input = ""
        self.player_names = ["", ""]
        self.name_slot = 0
        self.last_name_slot = 0
        self.default_difficulty: dict[GameType, float] = {
            GameType.AGAINST_AI: 0.8,
            GameType.WITH_FRIEND: 1.0,
            GameType.SCREEN_SAVER: 1.2,
        }
        self.theme = GameTheme.MONOKAI
        self.settings_selected = 0

    def handle_key(self, key: Key | str) -> None:
        """Route a key press to the current screen; the game screen takes keys via step_game."""
        if self.screen is Screen.MAIN_MENU:
            self.handle_menu_key(key)
        elif self.screen is Screen.NAME_INPUT:
            self.handle_name_key(key)
        elif self.screen is Screen.SETTINGS:
            self.handle_settings_key(key)

    def handle_menu_key(self, key: Key | str) -> None:
        count = len(self.menu_options)
        if key == "q":
            self.exit = True
        elif key is Key.UP:
            self.menu_selected = (self.menu_selected - 1) % count
        elif key is Key.DOWN:
            self.menu_selected = (self.menu_selected + 1) % count
        elif key is Key.ENTER:
            self._choose_menu_item(self.menu_selected)

    def _choose_menu_item(self, index: int) -> None:
        if index in (0, 1):
            self.name_input = ""
            self.player_names = ["", ""]
            self.name_slot = 0
            self.last_name_slot = index
            self.screen = Screen.NAME_INPUT
        elif index == 2:
            self.start_game(GameType.SCREEN_SAVER, SCREEN_SAVER_NAMES)
        elif index == 3:
            self.settings_selected = 0
            self.screen = Screen.SETTINGS
        elif index == 4:
            self.exit = True

    def handle_name_key(self, key: Key | str) -> None:
        if key is Key.ENTER:
            name = self.name_input.strip() or DEFAULT_PLAYER_NAMES[self.name_slot]
            self.player_names[self.name_slot] = name
            self.name_input = ""
            if self.name_slot < self.last_name_slot:
                self.name_slot += 1
            elif self.last_name_slot == 0:
                self.start_game(GameType.AGAINST_AI, (self.player_names[0], COMPUTER_NAME))
            else:
                self.start_game(GameType.WITH_FRIEND, tuple(self.player_names))
        elif key is Key.ESC:
            self.screen = Screen.MAIN_MENU
        elif key is Key.BACKSPACE:
            self.name_input = self.name_input[:-1]
        elif isinstance(key, str) and len(key) == 1:
            if len(self.name_input) < PLAYER_NAME_CHAR_LEN and "!" <= key <= "~":
                self.name_input += key

    def handle_settings_key(self, key: Key | str) -> None:
        if key is Key.UP:
            self.settings_selected = (self.settings_selected - 1) % SETTINGS_ITEM_COUNT
        elif key is Key.DOWN:
            self.settings_selected = (self.settings_selected + 1) % SETTINGS_ITEM_COUNT
        elif key is Key.LEFT:
            self._adjust_setting(-1)
        elif key is Key.RIGHT:
            self._adjust_setting(1)
        elif key is Key.ENTER:
            if self.settings_selected == _BACK_ITEM:
                self.screen = Screen.MAIN_MENU
        elif key is Key.ESC:
            self.screen = Screen.MAIN_MENU

    def _adjust_setting(self, step: int) -> None:
        if self.settings_selected < len(_SETTINGS_LABELS):
            game_type, _ = _SETTINGS_LABELS[self.settings_selected]
            value = self.default_difficulty[game_type] + step * _DIFFICULTY_STEP
            self.default_difficulty[game_type] = _clamp_difficulty(value)
        elif self.settings_selected == _THEME_ITEM:
            self.theme = self.theme.next() if step > 0 else self.theme.previous()

    def start_game(self, game_type: GameType, names: Sequence[str]) -> Game:
        """Create a game of the given type with the configured difficulty and theme."""
        game = Game(
            (names[0], names[1]),
            Rect(),
            game_type,
            self.default_difficulty[game_type],
            rng=self.rng,
        )
        game.theme = self.theme
        self.current_game = game
        self.screen = Screen.GAME
        return game

    def settings_lines(self) -> list[str]:
        """The text of each settings entry, in menu order."""
        lines = [
            f"{label}: {self.default_difficulty[game_type]:.2f}"
            for game_type, label in _SETTINGS_LABELS
        ]
        lines.append(f"Theme: {self.theme.display_name()}")
        lines.append("Back")
        return lines

    def step_game(self, events: Iterable[Event] = ()) -> bool:
        """Advance the running game; back to the main menu when it ends. True while it runs."""
        game = self.current_game
        if game is None:
            self.screen = Screen.MAIN_MENU
            return False
        if not game.tick(events):
            self.current_game = None
            self.screen = Screen.MAIN_MENU
            return False
        return True

    def farewell_lines(self) -> list[str]:
        """Lines printed after the terminal is restored."""
        lines = [FAREWELL]
        if self.current_game is not None:
            left = self.current_game.player(0)
            right = self.current_game.player(1)
            lines.append(f"Final Score: {left.score} - {right.score}")
        return lines