"""Drawing of the menu screens: main menu, name entry, settings and the size warning."""

from __future__ import annotations

from collections.abc import Sequence

from termpong.app import App
from termpong.canvas import Alignment, BorderType, Canvas, Style, center_span
from termpong.geometry import Rect, centered_rect_with_percentage
from termpong.theme import Color

_MENU_HEIGHTS = (12, 13, 5)
_SETTINGS_HEIGHTS = (12, 3)
_BANNER_LINES = (
    ("", None),
    ("terminal", Color.CYAN),
    ("PONG", Color.WHITE),
    ("~~~~~", Color.LIGHT_GREEN),
)
_BANNER_LINE_HEIGHT = 3
_SETTINGS_LINE_HEIGHT = 2
_NAME_LABELS = (
    "Enter Player 1 name (max 16 chars):",
    "Enter Player 2 name (max 16 chars):",
)


def _stack(area: Rect, heights: Sequence[int]) -> list[Rect]:
    """Rows of the given heights, cut to fit and centred vertically in area."""
    taken = []
    remaining = area.height
    for height in heights:
        used = max(0, min(height, remaining))
        taken.append(used)
        remaining -= used
    y = area.y + center_span(sum(taken), area.height)
    rects = []
    for height in taken:
        rects.append(Rect(area.x, y, area.width, height))
        y += height
    return rects


def _centered_width(area: Rect, percent: int) -> Rect:
    width = area.width * percent // 100
    return Rect(area.x + center_span(width, area.width), area.y, width, area.height)


def _center_pad(text: str, width: int) -> str:
    padding = max(0, width - len(text))
    left = padding // 2
    return " " * left + text + " " * (padding - left)


def draw_resize_warning(canvas: Canvas, app: App) -> None:
    """Ask the user to enlarge a terminal that is too small to play in."""
    colors = app.theme.colors()
    area = canvas.area
    popup = centered_rect_with_percentage(60, 20, area.width, area.height)
    style = Style(fg=colors.ball)
    canvas.draw_box(popup, BorderType.THICK, "Warning", style)
    canvas.text_block(
        popup.inner(1, 1), "Terminal too small!\nPlease resize.", style, Alignment.CENTER
    )


def _draw_banner(canvas: Canvas, area: Rect) -> None:
    base = Style(fg=Color.BLUE)
    for index, (text, color) in enumerate(_BANNER_LINES):
        if not text:
            continue
        y = area.y + index * _BANNER_LINE_HEIGHT + _BANNER_LINE_HEIGHT // 2
        if y >= area.bottom:
            break
        style = base.patch(Style(fg=color)) if color is not None else base
        canvas.text_block(
            Rect(area.x, y, area.width, 1), " ".join(text), style, Alignment.CENTER
        )


def draw_main_menu(canvas: Canvas, app: App) -> None:
    """Draw the title banner and the list of menu options."""
    banner_area, options_area, _ = _stack(canvas.area, _MENU_HEIGHTS)
    _draw_banner(canvas, banner_area)

    block = _centered_width(options_area, 30)
    canvas.draw_box(block, BorderType.DOUBLE, style=Style(fg=Color.CYAN))

    inner = _centered_width(block, 90).inner(1, 0)
    normal = Style(fg=Color.GREEN, bold=True)
    selected = Style(fg=Color.WHITE, bg=Color.RESET, bold=True, italic=True)
    for index, option in enumerate(app.menu_options):
        row = (index + 1) * 2
        if row >= inner.height:
            break
        style = selected if index == app.menu_selected else normal
        canvas.text_block(
            Rect(inner.x, inner.y + row, inner.width, 1), option, style, Alignment.CENTER
        )


def draw_name_input(canvas: Canvas, app: App) -> None:
    """Draw the prompt for the player name being entered."""
    area = canvas.area
    popup = centered_rect_with_percentage(60, 20, area.width, area.height)
    label = _NAME_LABELS[0] if app.name_slot == 0 else _NAME_LABELS[1]
    style = Style(fg=Color.GREEN)
    canvas.draw_box(popup, BorderType.THICK, "Player Names", style)
    canvas.text_block(
        popup.inner(1, 1), f"{label}\n> {app.name_input}", style, Alignment.CENTER
    )


def draw_settings(canvas: Canvas, app: App) -> None:
    """Draw the settings list and a preview strip of the selected theme's colours."""
    colors = app.theme.colors()
    settings_area = _centered_width(canvas.area, 50)
    block, preview = _stack(settings_area, _SETTINGS_HEIGHTS)

    canvas.draw_box(block, BorderType.THICK, "Settings", Style(fg=colors.accent))

    lines = app.settings_lines()
    total_height = len(lines) * _SETTINGS_LINE_HEIGHT
    start_y = block.y + max(0, block.height - total_height) // 2
    for index, text in enumerate(lines):
        if index == app.settings_selected:
            shown, style = f"> {text} <", Style(fg=Color.WHITE, bold=True)
        else:
            shown, style = f"  {text}  ", Style(fg=colors.text)
        line_area = Rect(
            block.x + 2, start_y + index * _SETTINGS_LINE_HEIGHT, max(0, block.width - 4), 1
        )
        canvas.text_block(line_area, shown, style, Alignment.CENTER)

    swatches = (
        ("Player Bar", colors.player_bar),
        ("Power Bar", colors.player_bar_power),
        ("Ball", colors.ball),
        ("Text", colors.text),
        ("Accent", colors.accent),
        ("Border", colors.border),
        ("Background", colors.background),
    )
    bar_width = max(0, preview.width - 4)
    swatch_width = bar_width // len(swatches)
    last = len(swatches) - 1
    for index, (_, color) in enumerate(swatches):
        x = preview.x + 2 + index * swatch_width
        width = bar_width - swatch_width * last if index == last else swatch_width
        canvas.text_block(Rect(x, preview.y + 1, max(width, 1), 1), "", Style(bg=color))

    labels = "".join(_center_pad(label, swatch_width) for label, _ in swatches)
    canvas.text_block(
        Rect(preview.x + 2, preview.y + 2, bar_width, 1),
        labels,
        Style(fg=colors.text),
        Alignment.CENTER,
    )