# termpong

Pong, played in a terminal window, drawn with the standard `curses` module.
It has no dependencies outside the standard library.

## Installing

    pip install .

## Playing

    termpong

The same entry point can be run as `python -m termpong.terminal`.

The terminal needs to be at least 130 columns wide and 28 rows tall; a
warning is shown until it is resized. When the program ends it prints a
goodbye line, followed by the final score if a game was still running.

The main menu offers:

- **Play vs. AI**: enter your name and play against the computer.
- **Play with Friend**: enter two names and share the keyboard.
- **I like to watch**: two computer players face each other.
- **Settings**: default difficulty for each mode and the colour theme.
- **Exit**

Use Up/Down and Enter to pick an entry; the list wraps around. `q` quits
the program from the menu.

### Entering names

Names take up to 16 printable ASCII characters (no spaces). Backspace
deletes, Enter confirms, and Esc goes back to the menu. An empty name
becomes "Player 1" or "Player 2".

### Settings

Up/Down select an entry. Left/Right change a default difficulty in steps
of 0.1 between 0.00 and 2.00, or cycle the theme. Enter on "Back", or Esc,
returns to the menu. The defaults are 0.80 against the computer, 1.00 with
a friend and 1.20 for watching. Below the list, a strip previews the
colours of the selected theme.

### Controls in a game

| Key                       | Action                   |
|---------------------------|--------------------------|
| Up / Down, mouse wheel    | Move player 1's paddle   |
| `/`                       | Player 1 power move      |
| `w` / `s`                 | Move player 2's paddle   |
| Space                     | Player 2 power move      |
| `p`                       | Pause                    |
| Esc or `q`                | Back to the main menu    |

A power move fires the ball back at double speed. Each player gets ten per
game, and it works only while the ball is level with your paddle, close to
it and coming at you. The lower the difficulty, the earlier you can fire.

### Pause menu

While the game is paused, Left and Right change the difficulty, `d` cycles
through the themes (Monokai, Solarized, Dracula, Gruvbox Dark, Nord,
One Dark, High Contrast), and `p` or Enter resumes. Esc ends the game and
returns to the main menu.

The game gets faster as the difficulty rises (from 15 to 40 frames per
second), and a harder computer player reacts sooner, moves faster and
makes smaller mistakes in predicting where the ball will go.

## Using it as a library

The game logic in `termpong.game` does not depend on a terminal. Input goes
in as events (`Key` members, one-character strings and `Scroll` members),
and a random source and a clock can be passed to `Game`, so it can be run
without a screen:

```python
from termpong.game import Game, GameType, Key
from termpong.geometry import Rect

game = Game(("Ada", "Computer"), Rect(0, 0, 130, 28), GameType.AGAINST_AI)
game.tick([Key.UP])
print(game.block_title("terminal.pong"))
```

`Game.tick` queues the events and, once a frame is due, applies them,
moves the computer paddles and the ball; it returns `False` once the
player quits. `termpong.app.App` holds the menu, name entry and settings
state and is driven with `handle_key` and `step_game`.

Drawing goes into a `termpong.canvas.Canvas`, an in-memory grid of styled
cells; `termpong.game_view.draw_game` and the functions in
`termpong.screens` draw into it, and `Canvas.row` returns a row as text.

## Limitations

- The front end needs `curses`, which the standard library provides on
  POSIX systems only.
- Colours are mapped to the terminal's 256-colour palette, or to the eight
  basic colours on terminals without it.
- The title on the main menu is written in plain spaced letters, not in
  large block lettering.