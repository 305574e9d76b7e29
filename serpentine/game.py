"""Snake game state: the snake, the food and the rules that move them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
GRID_SIZE = 40
TIME_LIMIT_MS = 60_000

START_HEALTH = 100
HEALTH_PER_FOOD = 10
START_SPEED = 300
SPEED_STEP = 10
MIN_SPEED = 10
TIME_MODE_DELAY_MS = 100


class Point(NamedTuple):
    """A pixel position on the board, always aligned to the grid."""

    x: int
    y: int


class Direction(Enum):
    """Heading of the snake; the value is the name used for sprites."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "Direction":
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_STEPS = {
    Direction.UP: (0, -GRID_SIZE),
    Direction.DOWN: (0, GRID_SIZE),
    Direction.LEFT: (-GRID_SIZE, 0),
    Direction.RIGHT: (GRID_SIZE, 0),
}


class GameMode(Enum):
    """The ways a round can be played."""

    CLASSIC = "classic"
    HEALTH = "survival"
    TIME = "time"


class GameOverError(RuntimeError):
    """Raised when a finished game is asked to advance."""


@dataclass
class Snake:
    """The snake's segments, head first, with its heading and health."""

    body: list[Point] = field(
        default_factory=lambda: [Point(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)]
    )
    direction: Direction = Direction.RIGHT
    health: int = START_HEALTH

    @property
    def head(self) -> Point:
        """The first segment."""
        return self.body[0]

    def turn(self, direction: Direction) -> None:
        """Change heading unless that would reverse straight into the body."""
        if direction is not self.direction.opposite():
            self.direction = direction

    def next_head(self) -> Point:
        """Where the head goes next, wrapping around the board edges."""
        dx, dy = _STEPS[self.direction]
        x = self.head.x + dx
        y = self.head.y + dy
        if x < 0:
            x = SCREEN_WIDTH - GRID_SIZE
        elif x >= SCREEN_WIDTH:
            x = 0
        if y < 0:
            y = SCREEN_HEIGHT - GRID_SIZE
        elif y >= SCREEN_HEIGHT:
            y = 0
        return Point(x, y)


class Game:
    """One round of play in a given mode."""

    def __init__(self, mode: GameMode = GameMode.CLASSIC, rng: Optional[random.Random] = None):
        self.mode = mode
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    def reset(self) -> None:
        """Put the snake, food, speed and counters back to their start."""
        self.snake = Snake()
        self.food_count = 0
        self.speed = START_SPEED
        self.alive = True
        self.place_food()

    def place_food(self) -> Point:
        """Move the food to a random grid cell and return it."""
        self.food = Point(
            self.rng.randrange(SCREEN_WIDTH // GRID_SIZE) * GRID_SIZE,
            self.rng.randrange(SCREEN_HEIGHT // GRID_SIZE) * GRID_SIZE,
        )
        return self.food

    def step(self) -> bool:
        """Advance the snake one cell; return True if it ate the food."""
        if not self.alive:
            raise GameOverError("the game is over")
        snake = self.snake
        new_head = snake.next_head()
        if self.mode is not GameMode.TIME and new_head in snake.body[1:]:
            self.alive = False
        else:
            snake.body.insert(0, new_head)
            if self.mode is GameMode.HEALTH:
                snake.health -= 1

        ate = snake.head == self.food
        if ate:
            snake.health += HEALTH_PER_FOOD
            self.place_food()
            self.food_count += 1
            if self.speed > MIN_SPEED:
                self.speed -= SPEED_STEP
        else:
            snake.body.pop()

        if snake.health <= 0:
            self.alive = False
        return ate

    def score(self) -> int:
        """The score is the length of the snake."""
        return len(self.snake.body)

    def time_left(self, elapsed_ms: int) -> Optional[int]:
        """Whole seconds remaining in time mode, or None in other modes."""
        if self.mode is not GameMode.TIME:
            return None
        return max(0, (TIME_LIMIT_MS - elapsed_ms) // 1000)

    def update_clock(self, elapsed_ms: int) -> Optional[int]:
        """End a time-mode round once the clock reaches zero; return the time left."""
        left = self.time_left(elapsed_ms)
        if left == 0:
            self.alive = False
        return left

    def delay_ms(self) -> int:
        """Pause between frames for the current mode and speed."""
        if self.mode is GameMode.TIME:
            return TIME_MODE_DELAY_MS
        return self.speed