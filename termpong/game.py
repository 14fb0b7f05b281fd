"""Game state and rules: paddles, ball physics, computer opponents and power moves."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Union

from termpong.geometry import Rect, pad_name
from termpong.theme import GameTheme

DEFAULT_BAR_LENGTH = 5
DEFAULT_BALL_VELOCITY_X = 3
DEFAULT_BALL_VELOCITY_Y = 1
DEFAULT_PADDLE_WIDTH = 3
STARTING_POWER_MOVES = 10
DEFAULT_DIFFICULTY = 1.0
MIN_DIFFICULTY = 0.0
MAX_DIFFICULTY = 2.0
POWER_BALL_VELOCITY = 6
TITLE_WIDTH = 130


class GameType(Enum):
    """Who controls the paddles."""

    AGAINST_AI = "against_ai"
    SCREEN_SAVER = "screen_saver"
    WITH_FRIEND = "with_friend"


class Key(Enum):
    """Non-character keys; character keys are passed as one-character strings."""

    ESC = "esc"
    ENTER = "enter"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    BACKSPACE = "backspace"


class Scroll(Enum):
    """Mouse wheel direction."""

    UP = "up"
    DOWN = "down"


Event = Union[Key, str, Scroll]


class RandomSource(Protocol):
    def random(self) -> float: ...

    def randrange(self, start: int, stop: int) -> int: ...

    def randint(self, a: int, b: int) -> int: ...


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _clamp_difficulty(value: float) -> float:
    return _clamp(value, MIN_DIFFICULTY, MAX_DIFFICULTY)


def _saturating_add(value: int, delta: int) -> int:
    return max(0, min(0xFFFF, value + delta))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass
class ComputerAI:
    """State of a computer-controlled paddle."""

    reaction_delay: float
    prediction_error: float
    max_speed: float
    last_update: float
    last_ball_direction: int = 0
    reaction_timer: float = 0.0
    current_speed: float = 0.0
    target_position: float = 0.0
    fatigue: float = 0.0

    @classmethod
    def for_difficulty(cls, difficulty: float, now: float) -> ComputerAI:
        return cls(
            reaction_delay=0.2 + (2.0 - difficulty) * 0.5,
            prediction_error=2.0 + (1.0 - difficulty) * 2.5,
            max_speed=0.8 + difficulty * 0.85,
            last_update=now,
        )


@dataclass
class Player:
    """One side of the table."""

    name: str
    bar_position: int
    bar_length: int = DEFAULT_BAR_LENGTH
    score: int = 0
    power_moves_left: int = STARTING_POWER_MOVES
    last_power_used_at: float | None = None
    is_computer: bool = False
    computer_ai: ComputerAI | None = None

    def display_name(self) -> str:
        return self.name.rstrip()

    def covers_row(self, row: int) -> bool:
        return self.bar_position <= row < self.bar_position + self.bar_length


@dataclass
class Ball:
    """Ball position and velocity, in cells and cells per frame."""

    position: list[int] = field(default_factory=lambda: [0, 0])
    velocity: list[int] = field(
        default_factory=lambda: [DEFAULT_BALL_VELOCITY_X, DEFAULT_BALL_VELOCITY_Y]
    )
    is_powered: bool = False


class Game:
    """A running match: state, input handling and per-frame updates."""

    def __init__(
        self,
        player_names: tuple[str, str] | list[str],
        game_area: Rect,
        game_type: GameType,
        difficulty: float | None = None,
        rng: RandomSource | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.clock: Callable[[], float] = clock if clock is not None else time.monotonic
        now = self.clock()

        self.game_type = game_type
        self.game_area = game_area
        self.difficulty = _clamp_difficulty(
            DEFAULT_DIFFICULTY if difficulty is None else difficulty
        )
        self.theme = GameTheme.MONOKAI
        self.is_paused = False
        self.should_exit = False
        self.scored_keep_display = False
        self.last_update = now
        self._pending: list[Event] = []

        start_bar = max(0, game_area.height // 2 - DEFAULT_BAR_LENGTH // 2)
        left_ai = game_type is GameType.SCREEN_SAVER
        right_ai = game_type in (GameType.AGAINST_AI, GameType.SCREEN_SAVER)
        self.players = [
            Player(
                name=pad_name(player_names[0]),
                bar_position=start_bar,
                computer_ai=ComputerAI.for_difficulty(self.difficulty, now) if left_ai else None,
            ),
            Player(
                name=pad_name(player_names[1]),
                bar_position=start_bar,
                computer_ai=ComputerAI.for_difficulty(self.difficulty, now) if right_ai else None,
            ),
        ]
        self.ball = Ball(
            position=[max(0, game_area.width - 4) // 2, max(0, game_area.height - 4) // 2]
        )

    def player(self, index: int) -> Player:
        return self.players[index]

    def move_player(self, player_index: int, direction: int) -> None:
        """Move a paddle one row: positive is up, negative is down."""
        if direction == 0:
            return
        player = self.players[player_index]
        if player.is_computer:
            return
        if direction > 0:
            if player.bar_position > 0:
                player.bar_position -= 1
        else:
            inner_height = max(0, self.game_area.height - 2)
            if player.bar_position + player.bar_length < inner_height:
                player.bar_position += 1

    def handle_key(self, key: Key | str) -> None:
        """Apply a key press during play."""
        if key is Key.ESC or key == "q":
            self.should_exit = True
        elif key == "p":
            self.toggle_pause()
        elif key == "/":
            self.power_move(0)
        elif key is Key.UP:
            self.move_player(0, 1)
        elif key is Key.DOWN:
            self.move_player(0, -1)
        elif key == " ":
            self.power_move(1)
        elif key == "w":
            self.move_player(1, 1)
        elif key == "s":
            self.move_player(1, -1)

    def handle_mouse(self, scroll: Scroll) -> None:
        if scroll is Scroll.UP:
            self.move_player(0, 1)
        elif scroll is Scroll.DOWN:
            self.move_player(0, -1)

    def handle_pause_key(self, key: Key | str) -> None:
        """Apply a key press in the pause/options popup."""
        if key == "p" or key is Key.ENTER:
            self.is_paused = False
        elif key is Key.ESC:
            self.should_exit = True
        elif key == "d":
            self.theme = self.theme.next()
        elif key is Key.LEFT:
            self.difficulty = _clamp_difficulty(self.difficulty - 0.1)
        elif key is Key.RIGHT:
            self.difficulty = _clamp_difficulty(self.difficulty + 0.1)

    def toggle_pause(self) -> None:
        self.is_paused = not self.is_paused

    def update_ball_position(self) -> int | None:
        """Advance the ball one frame; return 1 or 2 when it hits that player's paddle."""
        inner_width = max(0, self.game_area.width - 3)
        inner_height = max(0, self.game_area.height - 2)
        ball = self.ball
        left, right = self.players
        right_limit = inner_width - DEFAULT_PADDLE_WIDTH - 1

        new_x = _saturating_add(ball.position[0], ball.velocity[0])
        new_y = _saturating_add(ball.position[1], ball.velocity[1])

        if new_y == 0 or new_y >= inner_height:
            ball.velocity[1] = -ball.velocity[1]
            ball.position[1] = 0 if new_y == 0 else inner_height - 1
        else:
            ball.position[1] = new_y

        if not self.scored_keep_display:
            if new_x <= DEFAULT_PADDLE_WIDTH and ball.velocity[0] < 0 and left.covers_row(new_y):
                ball.velocity[0] = -ball.velocity[0]
                ball.position[0] = DEFAULT_PADDLE_WIDTH
                return 1
            if new_x >= right_limit and ball.velocity[0] > 0 and right.covers_row(new_y):
                ball.velocity[0] = -DEFAULT_BALL_VELOCITY_X
                ball.position[0] = right_limit
                ball.is_powered = False
                return 2

        if new_x < DEFAULT_PADDLE_WIDTH or new_x > right_limit:
            if new_x <= 0 or new_x >= inner_width:
                if new_x <= 0:
                    right.score += 1
                else:
                    left.score += 1
                ball.position = [
                    inner_width // 2,
                    self.rng.randrange(1, max(0, inner_height - 1)),
                ]
                direction = 1 if self.rng.randint(0, 1) == 0 else -1
                ball.velocity[0] = direction * DEFAULT_BALL_VELOCITY_X
                ball.is_powered = False
                self.scored_keep_display = False
                return None
            self.scored_keep_display = True
        ball.position[0] = new_x
        return None

    def update_computer_player(self, player_index: int) -> None:
        """Move a computer-controlled paddle towards where it expects the ball."""
        computer = self.players[player_index]
        ai = computer.computer_ai
        if ai is None:
            return
        ball = self.ball
        rng = self.rng
        screen_saver = self.game_type is GameType.SCREEN_SAVER
        against_ai = self.game_type is GameType.AGAINST_AI

        inner_height = self.game_area.height
        if player_index == 0:
            paddle_x = DEFAULT_PADDLE_WIDTH
        else:
            paddle_x = self.game_area.width - DEFAULT_PADDLE_WIDTH

        now = self.clock()
        dt = max(0.0, now - ai.last_update)
        ai.last_update = now
        if screen_saver:
            ai.fatigue = min(ai.fatigue + dt * 0.001, 0.05)
        else:
            ai.fatigue = min(ai.fatigue + dt * 0.009, 0.3)

        ball_direction_x = _sign(ball.velocity[0])
        if ball_direction_x != ai.last_ball_direction and ball_direction_x != 0:
            ai.last_ball_direction = ball_direction_x
            ai.reaction_timer = ai.reaction_delay + ai.fatigue * 0.5
        ai.reaction_timer = max(ai.reaction_timer - dt, 0.0)

        if player_index == 0:
            is_ball_coming = ball.velocity[0] < 0
        else:
            is_ball_coming = ball.velocity[0] > 0

        bar_length = computer.bar_length
        paddle_center = computer.bar_position + bar_length / 2.0

        if not is_ball_coming or ai.reaction_timer > 0.0:
            center_y = inner_height // 2
            ai.target_position = paddle_center + (center_y - paddle_center) * 0.1
        else:
            time_to_paddle = (paddle_x - ball.position[0]) / ball.velocity[0]
            pred_y = ball.position[1] + ball.velocity[1] * time_to_paddle
            if inner_height > 0:
                while pred_y < 0.0 or pred_y > inner_height:
                    pred_y = -pred_y if pred_y < 0.0 else 2.0 * inner_height - pred_y

            if screen_saver:
                error_magnitude, oops_chance, random_chance = ai.prediction_error * 0.3, 0.01, 0.02
            else:
                error_magnitude = ai.prediction_error * (1.0 + ai.fatigue)
                oops_chance = 0.05 + ai.fatigue * 0.1
                random_chance = 0.1
            pred_y += (rng.random() - 0.5) * error_magnitude
            if rng.random() < oops_chance:
                pred_y += (rng.random() - 0.5) * 3.0
            if rng.random() < random_chance:
                pred_y += (rng.random() - 0.5) * 1.0
            ai.target_position = _clamp(pred_y, 0.0, float(inner_height - bar_length))

        distance = ai.target_position - paddle_center
        desired_speed = min(abs(distance), ai.max_speed)
        acceleration = 2.0
        if abs(distance) > 0.5:
            ai.current_speed = min(ai.current_speed + acceleration * dt, desired_speed)
        else:
            ai.current_speed = max(ai.current_speed - acceleration * dt * 2.0, 0.0)

        if screen_saver:
            jitter = (rng.random() - 0.5) * 0.02 * (1.0 + ai.fatigue)
        elif against_ai:
            jitter = (rng.random() - 0.5) * 0.1 * (1.0 + ai.fatigue)
        else:
            jitter = 0.0
        movement = math.copysign(1.0, distance) * ai.current_speed + jitter

        if against_ai:
            if rng.random() < 0.01 + ai.fatigue * 0.02:
                movement *= 0.3
            elif rng.random() < 0.015:
                movement *= 1.2

        new_pos = _clamp(
            paddle_center + movement, bar_length / 2.0, float(inner_height - bar_length)
        )
        computer.bar_position = max(0, int(new_pos - bar_length / 2.0))

    def power_move(self, player_index: int) -> None:
        """Smash the ball back if it is close to the player's paddle."""
        player = self.players[player_index]
        if player.power_moves_left <= 0:
            return
        ball = self.ball

        if player_index == 0:
            is_ball_approaching = ball.velocity[0] < 0
        else:
            is_ball_approaching = ball.velocity[0] > 0
        within_bar = player.covers_row(ball.position[1])

        min_range, max_range = 4.0, 12.0
        raw_range = (max_range - min_range) * (1.0 - self.difficulty) + min_range
        allowed_range = max(0, math.floor(raw_range + 0.5))

        x = ball.position[0]
        if player_index == 0:
            within_x = 1 < x < 1 + allowed_range
        else:
            right_edge = max(0, self.game_area.width - 1)
            within_x = max(0, right_edge - allowed_range) < x < max(0, right_edge - 1)

        if is_ball_approaching and within_bar and within_x:
            ball.velocity[0] = POWER_BALL_VELOCITY if player_index == 0 else -POWER_BALL_VELOCITY
            ball.is_powered = True
            player.power_moves_left -= 1
            player.last_power_used_at = self.clock()

    def frame_interval(self) -> float:
        """Seconds between frames; faster at higher difficulty."""
        min_fps, max_fps = 15.0, 40.0
        fps = min_fps + (max_fps - min_fps) * self.difficulty
        return math.floor(1000.0 / fps + 0.5) / 1000.0

    def tick(self, events: Iterable[Event] = ()) -> bool:
        """Queue input and advance the game if a frame is due; False once the player quits."""
        self._pending.extend(events)

        if self.is_paused:
            pending, self._pending = self._pending, []
            for event in pending:
                if not isinstance(event, Scroll):
                    self.handle_pause_key(event)
            return not self.should_exit

        now = self.clock()
        if now - self.last_update >= self.frame_interval():
            pending, self._pending = self._pending, []
            for event in pending:
                if isinstance(event, Scroll):
                    self.handle_mouse(event)
                else:
                    self.handle_key(event)
            if self.should_exit:
                return False
            if self.game_type is GameType.AGAINST_AI:
                self.update_computer_player(1)
            elif self.rng.random() < 0.5:
                self.update_computer_player(0)
                self.update_computer_player(1)
            else:
                self.update_computer_player(1)
                self.update_computer_player(0)
            self.update_ball_position()
            self.last_update = self.clock()
        return True

    def block_title(self, app_name: str) -> str:
        """Title of the playing field: both names with scores around the app name."""
        left, right = self.players
        player_text = f"{left.name}({left.score})"
        computer_text = f"{right.name}({right.score})"
        available = max(0, TITLE_WIDTH - (32 + 32 + len(app_name)))
        line = "─" * (available // 2)
        return (
            f" {player_text.rstrip()} {line} {app_name.rstrip()} {line} "
            f"{computer_text.lstrip()} "
        )

    def difficulty_label(self) -> str:
        if self.difficulty < 0.6:
            return "Easy"
        if self.difficulty < 1.3:
            return "Normal"
        return "Hard"