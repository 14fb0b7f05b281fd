"""Curses front end: reads keys and the mouse wheel, draws the screens, runs the loop."""

from __future__ import annotations

import argparse
import curses
import itertools
import sys
import time

from termpong.app import App, Screen
from termpong.canvas import Canvas, Style
from termpong.game import Event, Key, Scroll
from termpong.game_view import FIELD_HEIGHT, FIELD_WIDTH, draw_game
from termpong.geometry import centered_rect
from termpong.screens import draw_main_menu, draw_name_input, draw_resize_warning, draw_settings
from termpong.theme import Color

MIN_WIDTH = FIELD_WIDTH
MIN_HEIGHT = FIELD_HEIGHT
MENU_POLL_MS = 10
GAME_POLL_MS = 5
RESIZE_PAUSE = 0.1

_CODE_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    27: Key.ESC,
    10: Key.ENTER,
    13: Key.ENTER,
    127: Key.BACKSPACE,
    8: Key.BACKSPACE,
}
_CHAR_KEYS = {
    "\x1b": Key.ESC,
    "\n": Key.ENTER,
    "\r": Key.ENTER,
    "\x7f": Key.BACKSPACE,
    "\b": Key.BACKSPACE,
}
_SCREEN_DRAWERS = {
    Screen.MAIN_MENU: draw_main_menu,
    Screen.NAME_INPUT: draw_name_input,
    Screen.SETTINGS: draw_settings,
}
_NAMED_COLORS = {
    "black": curses.COLOR_BLACK,
    "white": curses.COLOR_WHITE,
    "yellow": curses.COLOR_YELLOW,
    "cyan": curses.COLOR_CYAN,
    "green": curses.COLOR_GREEN,
    "blue": curses.COLOR_BLUE,
    "light_green": curses.COLOR_GREEN,
}
_BASIC_RGB = {
    curses.COLOR_BLACK: (0, 0, 0),
    curses.COLOR_RED: (205, 0, 0),
    curses.COLOR_GREEN: (0, 205, 0),
    curses.COLOR_YELLOW: (205, 205, 0),
    curses.COLOR_BLUE: (0, 0, 238),
    curses.COLOR_MAGENTA: (205, 0, 205),
    curses.COLOR_CYAN: (0, 205, 205),
    curses.COLOR_WHITE: (229, 229, 229),
}


def translate_key(code: int | str) -> Key | str | None:
    """Turn a curses key code or character into a game key; None for keys the game ignores."""
    if isinstance(code, str):
        if code in _CHAR_KEYS:
            return _CHAR_KEYS[code]
        return code if len(code) == 1 and code.isprintable() else None
    if code in _CODE_KEYS:
        return _CODE_KEYS[code]
    if 32 <= code < 127:
        return chr(code)
    return None


class _Palette:
    """Maps styles to curses attributes, allocating colour pairs on demand."""

    def __init__(self) -> None:
        self.enabled = False
        self._pairs: dict[tuple[int, int], int] = {(-1, -1): 0}
        try:
            curses.start_color()
            curses.use_default_colors()
            self.enabled = curses.has_colors()
        except curses.error:
            self.enabled = False

    def _number(self, color: Color | None) -> int:
        if color is None or color.is_reset:
            return -1
        if color.rgb is None:
            return _NAMED_COLORS.get(color.name, -1)
        red, green, blue = color.rgb
        if curses.COLORS >= 256:
            def level(value: int) -> int:
                return round(value / 255 * 5)

            return 16 + 36 * level(red) + 6 * level(green) + level(blue)
        return min(
            _BASIC_RGB,
            key=lambda number: sum(
                (a - b) ** 2 for a, b in zip(_BASIC_RGB[number], color.rgb)
            ),
        )

    def attr(self, style: Style) -> int:
        attr = 0
        if style.bold:
            attr |= curses.A_BOLD
        if style.italic:
            attr |= getattr(curses, "A_ITALIC", 0)
        if not self.enabled:
            return attr
        key = (self._number(style.fg), self._number(style.bg))
        pair = self._pairs.get(key)
        if pair is None:
            pair = len(self._pairs)
            if pair >= curses.COLOR_PAIRS:
                return attr
            try:
                curses.init_pair(pair, *key)
            except curses.error:
                return attr
            self._pairs[key] = pair
        return attr | curses.color_pair(pair)


def _blit(stdscr, canvas: Canvas, palette: _Palette) -> None:
    for y in range(canvas.height):
        cells = (canvas.cell(x, y) for x in range(canvas.width))
        x = 0
        for style, run in itertools.groupby(cells, key=lambda cell: cell.style):
            text = "".join(cell.char for cell in run)
            try:
                stdscr.addstr(y, x, text, palette.attr(style))
            except curses.error:
                # Writing the bottom-right cell moves the cursor off screen.
                pass
            x += len(text)
    stdscr.refresh()


def _read_scroll() -> Scroll | None:
    try:
        _, _, _, _, state = curses.getmouse()
    except curses.error:
        return None
    if state & curses.BUTTON4_PRESSED:
        return Scroll.UP
    if state & getattr(curses, "BUTTON5_PRESSED", 0x200000):
        return Scroll.DOWN
    return None


def _read_events(stdscr, timeout_ms: int) -> list[Event]:
    """Wait up to timeout_ms for input, then take everything already pending."""
    events: list[Event] = []
    stdscr.timeout(timeout_ms)
    while True:
        try:
            code = stdscr.get_wch()
        except curses.error:
            break
        stdscr.timeout(0)
        if code == curses.KEY_MOUSE:
            event = _read_scroll()
        else:
            event = translate_key(code)
        if event is not None:
            events.append(event)
    return events


def _setup(stdscr) -> None:
    curses.raw()
    stdscr.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    try:
        curses.set_escdelay(25)
    except (AttributeError, curses.error):
        pass
    curses.mousemask(curses.ALL_MOUSE_EVENTS)


def run(stdscr) -> App:
    """Run the application in an initialised curses screen until the user leaves."""
    _setup(stdscr)
    palette = _Palette()
    app = App()
    size_ok = False
    try:
        while not app.exit:
            rows, cols = stdscr.getmaxyx()
            canvas = Canvas(cols, rows)

            if cols < MIN_WIDTH or rows < MIN_HEIGHT:
                if size_ok:
                    time.sleep(RESIZE_PAUSE)
                    size_ok = False
                for event in _read_events(stdscr, MENU_POLL_MS):
                    if not isinstance(event, Scroll):
                        app.handle_menu_key(event)
                draw_resize_warning(canvas, app)
                _blit(stdscr, canvas, palette)
                continue

            if not size_ok:
                time.sleep(RESIZE_PAUSE)
                if app.current_game is not None:
                    app.current_game.game_area = centered_rect(
                        FIELD_WIDTH, FIELD_HEIGHT, cols, rows
                    )
                size_ok = True

            if app.screen is Screen.GAME:
                events = _read_events(stdscr, GAME_POLL_MS)
                if app.step_game(events) and app.current_game is not None:
                    draw_game(canvas, app.current_game)
                    _blit(stdscr, canvas, palette)
                continue

            for event in _read_events(stdscr, MENU_POLL_MS):
                if not isinstance(event, Scroll):
                    app.handle_key(event)
            drawer = _SCREEN_DRAWERS.get(app.screen)
            if drawer is not None:
                drawer(canvas, app)
                _blit(stdscr, canvas, palette)
    finally:
        try:
            curses.mousemask(0)
        except curses.error:
            pass
    return app


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal and print the final score afterwards."""
    parser = argparse.ArgumentParser(prog="termpong", description="Pong in the terminal.")
    parser.parse_args(argv)
    try:
        app = curses.wrapper(run)
    except (curses.error, OSError) as exc:
        print(f"Game ended with error: {exc}", file=sys.stderr)
        return 1
    for line in app.farewell_lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())