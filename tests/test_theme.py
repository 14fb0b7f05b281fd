import pytest

from termpong.theme import Color, GameTheme, ThemeColors


def test_theme_order_and_names():
    names = []
    theme = GameTheme.MONOKAI
    for _ in range(7):
        names.append(theme.display_name())
        theme = theme.next()
    assert names == [
        "Monokai",
        "Solarized",
        "Dracula",
        "Gruvbox Dark",
        "Nord",
        "One Dark",
        "High Contrast",
    ]
    assert [member.display_name() for member in GameTheme] == names


def test_next_follows_declared_order():
    assert GameTheme.MONOKAI.next() is GameTheme.SOLARIZED
    assert GameTheme.HIGH_CONTRAST.next() is GameTheme.MONOKAI


def test_previous_wraps_around():
    assert GameTheme.MONOKAI.previous() is GameTheme.HIGH_CONTRAST


def test_next_and_previous_are_inverse():
    assert GameTheme.MONOKAI.next().previous() is GameTheme.MONOKAI
    assert GameTheme.HIGH_CONTRAST.previous().next() is GameTheme.HIGH_CONTRAST
    for theme in GameTheme:
        assert theme.next().previous() is theme
        assert theme.previous().next() is theme


def test_cycling_visits_every_theme_once():
    seen = []
    theme = GameTheme.MONOKAI
    for _ in GameTheme:
        seen.append(theme)
        theme = theme.next()
    assert theme is GameTheme.MONOKAI
    assert set(seen) == set(GameTheme)
    assert len(seen) == len(set(seen))


def test_monokai_palette_values():
    colors = GameTheme.MONOKAI.colors()
    assert colors.border == Color.from_rgb(249, 38, 114)
    assert colors.ball.rgb == (255, 95, 135)
    assert colors.background == Color.RESET


def test_high_contrast_palette():
    colors = GameTheme.HIGH_CONTRAST.colors()
    assert colors.background == Color.BLACK
    assert colors.border == Color.WHITE
    assert colors.accent == Color.YELLOW
    assert colors.ball.rgb == (255, 0, 0)


def test_other_themes_keep_terminal_background():
    assert GameTheme.SOLARIZED.colors().background.is_reset
    checked = 0
    for theme in GameTheme:
        if theme is GameTheme.HIGH_CONTRAST:
            continue
        colors = theme.colors()
        assert colors.background.is_reset
        assert colors.player_bar != colors.player_bar_power
        checked += 1
    assert checked == 6


def test_colors_returns_theme_colors():
    palette = GameTheme.NORD.colors()
    assert isinstance(palette, ThemeColors)
    assert palette.player_bar.rgb == (94, 129, 172)


def test_color_from_rgb_round_trip():
    color = Color.from_rgb(1, 2, 3)
    assert color.rgb == (1, 2, 3)
    assert Color.from_rgb(*color.rgb) == color
    assert not color.is_reset


@pytest.mark.parametrize("components", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_color_from_rgb_rejects_out_of_range(components):
    with pytest.raises(ValueError):
        Color.from_rgb(*components)