import random

from termpong.canvas import Canvas
from termpong.game import Game, GameType
from termpong.game_view import (
    APP_NAME,
    draw_core_elements,
    draw_game,
    pause_options_text,
)
from termpong.geometry import Rect


def make_game(difficulty=1.0, clock_value=100.0):
    return Game(
        ("Alice", "Bob"),
        Rect(0, 0, 130, 28),
        GameType.WITH_FRIEND,
        difficulty,
        rng=random.Random(0),
        clock=lambda: clock_value,
    )


def find_rows(canvas, text):
    return [y for y in range(canvas.height) if text in canvas.row(y)]


def test_draw_game_centres_field():
    game = make_game()
    canvas = Canvas(140, 40)
    draw_game(canvas, game, 100.0)
    area = game.game_area
    assert (area.width, area.height) == (130, 28)
    assert area.x * 2 + area.width == canvas.width
    assert area.y * 2 + area.height + 3 == canvas.height - 1 or (
        area.y * 2 + area.height + 3 == canvas.height
    )


def test_ball_is_drawn_at_its_position():
    game = make_game()
    canvas = Canvas(130, 31)
    draw_game(canvas, game, 100.0)
    bx, by = game.ball.position
    x = game.game_area.x + 1 + bx
    y = game.game_area.y + 1 + by
    assert canvas.cell(x, y).char == "█"
    assert canvas.cell(x + 1, y).char == "█"
    assert canvas.cell(x, y).style.fg == game.theme.colors().ball


def test_paddles_use_bar_colour():
    game = make_game()
    canvas = Canvas(130, 28)
    game.game_area = Rect(0, 0, 130, 28)
    draw_core_elements(canvas, game, 100.0)
    colors = game.theme.colors()
    left = game.player(0)
    top_y = 1 + left.bar_position
    assert canvas.cell(1, top_y).char == "┌"
    for y in range(top_y, top_y + left.bar_length):
        for x in range(1, 4):
            assert canvas.cell(x, y).style.bg == colors.player_bar
    right_x = 1 + (130 - 1) - 4
    assert canvas.cell(right_x, 1 + game.player(1).bar_position).char == "┌"


def test_power_flash_colour_fades():
    game = make_game()
    game.game_area = Rect(0, 0, 130, 28)
    colors = game.theme.colors()
    left = game.player(0)
    left.last_power_used_at = 100.0
    y = 1 + left.bar_position

    flashing = Canvas(130, 28)
    draw_core_elements(flashing, game, 100.1)
    assert flashing.cell(1, y).style.bg == colors.player_bar_power

    faded = Canvas(130, 28)
    draw_core_elements(faded, game, 101.0)
    assert faded.cell(1, y).style.bg == colors.player_bar


def test_pause_popup_only_when_paused():
    game = make_game()
    canvas = Canvas(130, 31)
    draw_game(canvas, game, 100.0)
    assert find_rows(canvas, "Paused - Options") == []

    game.toggle_pause()
    paused = Canvas(130, 31)
    draw_game(paused, game, 100.0)
    assert len(find_rows(paused, "Paused - Options")) == 1
    assert find_rows(paused, "Difficulty: Normal")


def test_pause_options_text_reflects_state():
    game = make_game(difficulty=1.0)
    text = pause_options_text(game)
    assert "Difficulty: Normal (1.00)" in text
    assert "(Current: Monokai)" in text
    assert "[P/Enter] Resume  [Esc] Quit" in text

    game.handle_pause_key("d")
    assert "(Current: Solarized)" in pause_options_text(game)


def test_pause_options_text_difficulty_labels():
    assert "Easy" in pause_options_text(make_game(difficulty=0.2))
    assert "Hard" in pause_options_text(make_game(difficulty=2.0))


def test_small_canvas_shrinks_field():
    game = make_game()
    canvas = Canvas(40, 10)
    draw_game(canvas, game, 100.0)
    assert game.game_area.width == canvas.width
    assert game.game_area.height == canvas.height
    assert all(len(canvas.row(y)) == canvas.width for y in range(canvas.height))