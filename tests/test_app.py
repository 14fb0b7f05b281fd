import random

import pytest

from termpong.app import MAIN_MENU_OPTIONS, App, Screen
from termpong.game import MAX_DIFFICULTY, MIN_DIFFICULTY, GameType, Key
from termpong.geometry import PLAYER_NAME_CHAR_LEN
from termpong.theme import GameTheme


@pytest.fixture
def app():
    return App(rng=random.Random(7))


def select_menu(app, index):
    for _ in range(index):
        app.handle_key(Key.DOWN)
    app.handle_key(Key.ENTER)


def type_text(app, text):
    for char in text:
        app.handle_key(char)


def test_initial_state(app):
    assert app.screen is Screen.MAIN_MENU
    assert app.menu_selected == 0
    assert app.current_game is None
    assert app.theme is GameTheme.MONOKAI
    assert not app.exit


def test_menu_wraps_up_and_down(app):
    app.handle_key(Key.UP)
    assert app.menu_selected == len(MAIN_MENU_OPTIONS) - 1
    app.handle_key(Key.DOWN)
    assert app.menu_selected == 0


def test_menu_full_cycle_returns_to_start(app):
    for _ in range(len(MAIN_MENU_OPTIONS)):
        app.handle_key(Key.DOWN)
    assert app.menu_selected == 0


def test_q_exits(app):
    app.handle_key("q")
    assert app.exit


def test_exit_menu_item(app):
    select_menu(app, 4)
    assert app.exit


def test_settings_menu_item(app):
    app.settings_selected = 3
    select_menu(app, 3)
    assert app.screen is Screen.SETTINGS
    assert app.settings_selected == 0


def test_screen_saver_starts_game(app):
    select_menu(app, 2)
    game = app.current_game
    assert app.screen is Screen.GAME
    assert game.game_type is GameType.SCREEN_SAVER
    assert game.player(0).display_name() == "Forg"
    assert game.player(1).display_name() == "Car"
    assert game.difficulty == pytest.approx(app.default_difficulty[GameType.SCREEN_SAVER])


def test_vs_ai_name_entry(app):
    select_menu(app, 0)
    assert app.screen is Screen.NAME_INPUT
    type_text(app, "Zed")
    assert app.name_input == "Zed"
    app.handle_key(Key.ENTER)
    game = app.current_game
    assert app.screen is Screen.GAME
    assert game.game_type is GameType.AGAINST_AI
    assert game.player(0).display_name() == "Zed"
    assert game.player(1).display_name() == "Computer"


def test_empty_names_use_defaults_with_friend(app):
    select_menu(app, 1)
    app.handle_key(Key.ENTER)
    assert app.screen is Screen.NAME_INPUT
    assert app.name_slot == 1
    app.handle_key(Key.ENTER)
    game = app.current_game
    assert game.game_type is GameType.WITH_FRIEND
    assert game.player(0).display_name() == "Player 1"
    assert game.player(1).display_name() == "Player 2"


def test_name_input_limit_and_filtering(app):
    select_menu(app, 0)
    type_text(app, "a b")
    assert app.name_input == "ab"
    type_text(app, "x" * 40)
    assert len(app.name_input) == PLAYER_NAME_CHAR_LEN


def test_backspace_and_escape(app):
    select_menu(app, 0)
    type_text(app, "abc")
    app.handle_key(Key.BACKSPACE)
    assert app.name_input == "ab"
    app.handle_key(Key.ESC)
    assert app.screen is Screen.MAIN_MENU


def test_game_uses_selected_theme(app):
    app.theme = GameTheme.NORD
    select_menu(app, 2)
    assert app.current_game.theme is GameTheme.NORD


def test_settings_navigation_wraps(app):
    select_menu(app, 3)
    app.handle_key(Key.UP)
    assert app.settings_selected == 4
    app.handle_key(Key.DOWN)
    assert app.settings_selected == 0


def test_settings_difficulty_step(app):
    select_menu(app, 3)
    before = app.default_difficulty[GameType.AGAINST_AI]
    app.handle_key(Key.LEFT)
    after = app.default_difficulty[GameType.AGAINST_AI]
    assert after == pytest.approx(before - 0.1)
    app.handle_key(Key.RIGHT)
    assert app.default_difficulty[GameType.AGAINST_AI] == pytest.approx(before)


def test_settings_difficulty_clamped(app):
    select_menu(app, 3)
    app.handle_key(Key.DOWN)
    for _ in range(40):
        app.handle_key(Key.LEFT)
    assert app.default_difficulty[GameType.WITH_FRIEND] == MIN_DIFFICULTY
    for _ in range(40):
        app.handle_key(Key.RIGHT)
    assert app.default_difficulty[GameType.WITH_FRIEND] == MAX_DIFFICULTY


def test_settings_theme_cycle(app):
    select_menu(app, 3)
    for _ in range(3):
        app.handle_key(Key.DOWN)
    app.handle_key(Key.LEFT)
    assert app.theme is GameTheme.HIGH_CONTRAST
    app.handle_key(Key.RIGHT)
    app.handle_key(Key.RIGHT)
    assert app.theme is GameTheme.SOLARIZED


def test_settings_back_and_escape(app):
    select_menu(app, 3)
    app.handle_key(Key.ENTER)
    assert app.screen is Screen.SETTINGS
    app.handle_key(Key.UP)
    app.handle_key(Key.ENTER)
    assert app.screen is Screen.MAIN_MENU
    select_menu(app, 0)
    app.handle_key(Key.ESC)
    app.menu_selected = 0
    select_menu(app, 3)
    app.handle_key(Key.ESC)
    assert app.screen is Screen.MAIN_MENU


def test_settings_lines(app):
    lines = app.settings_lines()
    assert len(lines) == 5
    assert lines[0] == "Default Difficulty (vs AI): 0.80"
    assert lines[3] == f"Theme: {GameTheme.MONOKAI.display_name()}"
    assert lines[-1] == "Back"


def test_step_game_without_game_returns_to_menu(app):
    app.screen = Screen.GAME
    assert app.step_game() is False
    assert app.screen is Screen.MAIN_MENU


def test_step_game_escape_ends_game(app):
    select_menu(app, 2)
    game = app.current_game
    game.last_update = game.clock() - 10.0
    assert app.step_game([Key.ESC]) is False
    assert app.current_game is None
    assert app.screen is Screen.MAIN_MENU


def test_step_game_keeps_running(app):
    select_menu(app, 2)
    assert app.step_game() is True
    assert app.current_game is not None and app.screen is Screen.GAME


def test_farewell_lines(app):
    assert app.farewell_lines() == ["Thanks for playing terminal.pong! 🏓"]
    select_menu(app, 2)
    lines = app.farewell_lines()
    assert lines[1] == "Final Score: 0 - 0"