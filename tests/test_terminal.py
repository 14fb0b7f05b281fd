import curses

import pytest

from termpong.game import Key
from termpong.terminal import main, translate_key


@pytest.mark.parametrize(
    "code, expected",
    [
        (curses.KEY_UP, Key.UP),
        (curses.KEY_DOWN, Key.DOWN),
        (curses.KEY_LEFT, Key.LEFT),
        (curses.KEY_RIGHT, Key.RIGHT),
        (curses.KEY_ENTER, Key.ENTER),
        (curses.KEY_BACKSPACE, Key.BACKSPACE),
        (27, Key.ESC),
        (10, Key.ENTER),
        (127, Key.BACKSPACE),
        ("\x1b", Key.ESC),
        ("\n", Key.ENTER),
        ("\r", Key.ENTER),
        ("\x7f", Key.BACKSPACE),
    ],
)
def test_special_keys(code, expected):
    assert translate_key(code) is expected


@pytest.mark.parametrize("char", ["q", "p", "/", " ", "w", "s", "d", "Z"])
def test_character_keys_pass_through(char):
    assert translate_key(char) == char


@pytest.mark.parametrize("char", ["q", "w", "~", " "])
def test_printable_codes_become_characters(char):
    assert translate_key(ord(char)) == char


@pytest.mark.parametrize("code", ["\t", "\x01", curses.KEY_RESIZE, 1, 300000])
def test_ignored_keys(code):
    assert translate_key(code) is None


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "termpong" in capsys.readouterr().out


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2