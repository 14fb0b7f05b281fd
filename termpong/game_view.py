"""Drawing of a running game: field, paddles, ball, controls and the pause popup."""

from __future__ import annotations

from termpong.canvas import Alignment, BorderType, Canvas, Style
from termpong.game import Game
from termpong.geometry import Rect, centered_rect

APP_NAME = "terminal.pong"
FIELD_WIDTH = 130
FIELD_HEIGHT = 28
CONTROLS_HEIGHT = 3
POWER_FLASH_SECONDS = 0.2
PAUSE_POPUP_WIDTH = 52
PAUSE_POPUP_HEIGHT = 12
CONTROLS_TEXT = (
    " Player 1: ↑/↓ or mouse wheel, '/'=Power    |    Player 2: W/S, Space=Power    "
    "|    P=Pause    |    Esc=Quit "
)


def _bar_color(game: Game, index: int, now: float):
    colors = game.theme.colors()
    last = game.player(index).last_power_used_at
    if last is not None and now - last < POWER_FLASH_SECONDS:
        return colors.player_bar_power
    return colors.player_bar


def draw_core_elements(canvas: Canvas, game: Game, now: float | None = None) -> None:
    """Draw both paddles and the ball inside the game's area."""
    if now is None:
        now = game.clock()
    colors = game.theme.colors()
    area = game.game_area
    inner = Rect(area.x + 1, area.y + 1, area.width - 1, area.height - 1)

    left = game.player(0)
    canvas.draw_box(
        Rect(inner.x, inner.y + left.bar_position, 3, left.bar_length),
        style=Style(fg=colors.player_bar, bg=_bar_color(game, 0, now)),
    )

    right = game.player(1)
    canvas.draw_box(
        Rect(inner.x + inner.width - 4, inner.y + right.bar_position, 3, right.bar_length),
        style=Style(fg=colors.player_bar, bg=_bar_color(game, 1, now)),
    )

    ball_x, ball_y = game.ball.position
    canvas.text_block(
        Rect(inner.x + ball_x, inner.y + ball_y, 2, 2),
        "██",
        Style(fg=colors.ball),
    )


def pause_options_text(game: Game) -> str:
    """Text of the pause/options popup."""
    return (
        f"\n  Difficulty: {game.difficulty_label()} ({game.difficulty:.2f})\n"
        f" [←/→] Adjust  [D] Toggle Theme (Current: {game.theme.display_name()})\n"
        "  [P/Enter] Resume  [Esc] Quit\n"
    )


def draw_game(canvas: Canvas, game: Game, now: float | None = None) -> None:
    """Lay out and draw the whole game screen; updates the game's area to match."""
    if now is None:
        now = game.clock()
    colors = game.theme.colors()
    area = canvas.area

    width = min(FIELD_WIDTH, area.width)
    field_height = min(FIELD_HEIGHT, area.height)
    controls_height = min(CONTROLS_HEIGHT, area.height - field_height)
    x = area.x + center_span_of(width, area.width)
    y = area.y + center_span_of(field_height + controls_height, area.height)
    game_area = Rect(x, y, width, field_height)
    controls_area = Rect(x, y + field_height, width, controls_height)
    game.game_area = game_area

    canvas.draw_box(
        game_area,
        BorderType.THICK,
        game.block_title(APP_NAME),
        Style(fg=colors.border, bg=colors.background),
        Alignment.CENTER,
    )
    draw_core_elements(canvas, game, now)

    canvas.draw_box(controls_area, BorderType.ROUNDED, style=Style(fg=colors.border))
    canvas.text_block(
        controls_area.inner(1, 1), CONTROLS_TEXT, Style(fg=colors.text), Alignment.CENTER
    )

    if game.is_paused:
        popup = centered_rect(PAUSE_POPUP_WIDTH, PAUSE_POPUP_HEIGHT, area.width, area.height)
        canvas.draw_box(
            popup,
            BorderType.DOUBLE,
            "Paused - Options",
            Style(fg=colors.accent),
            Alignment.CENTER,
        )
        canvas.text_block(
            Rect(popup.x + 2, popup.y + 2, popup.width - 4, popup.height - 4),
            pause_options_text(game),
            Style(fg=colors.text),
            Alignment.CENTER,
        )


def center_span_of(length: int, total: int) -> int:
    return max(0, total - length) // 2