# serpentine

A snake arcade game played on a 16 × 12 grid of 40-pixel cells in a
640 × 480 window. The snake wraps around the edges of the screen and
grows each time it eats.

## Modes

When the game starts, a menu asks you to pick a mode:

1. **Classic Mode**: the game ends when the snake runs into its own body.
   A frame lasts 300 ms at first, and each piece of food shortens it by
   10 ms, down to a floor of 10 ms.
2. **Survival Mode**: as Classic, but the snake also has health. It
   starts with 100, loses one point on every move and gains ten for each
   piece of food. The game ends when the snake bites itself or its health
   reaches zero.
3. **Time limit Mode**: the snake can pass over itself. You have sixty
   seconds to grow it as long as you can, and it moves at a fixed pace of
   one cell every 100 ms.

Your score is the length of the snake. When a round ends, the game
pauses for three seconds and then shows your score: press **R** to play
again or **Q** to quit. Closing the window quits at any time.

## Controls

| Key         | Action                    |
|-------------|---------------------------|
| Arrow keys  | Steer the snake           |
| 1 / 2 / 3   | Choose a mode in the menu |
| R           | Retry after game over     |
| Q           | Quit after game over      |

A key that points straight back the way the snake is heading is ignored.

## Installing and running

```
pip install .
serpentine
```

Options:

- `--assets DIR`: directory holding the images and sounds (default: the
  current directory).
- `--font FILE`: TrueType font for the on-screen text (default: pygame's
  built-in font).

The asset directory must hold the background `SnakeBG2.png`; without it
the command prints an error and exits with status 1. The sprites
(`head_up.png` … `head_right.png`, `body_horizontal.png`,
`body_vertical.png`, `body_topleft.png`, `body_topright.png`,
`body_bottomleft.png`, `body_bottomright.png`, `tail_up.png` …
`tail_right.png`, `food.png`) and the sounds (`eat.wav`, `lose.wav`) are
optional: any that are missing are simply not drawn or played. Images
are scaled to fit their cell, and the background to fit the window.

## Using the game logic on its own

The rules live in `serpentine.game` and need no display:

```python
import random
from serpentine.game import Direction, Game, GameMode

game = Game(GameMode.CLASSIC, random.Random(1))
game.snake.turn(Direction.UP)
ate = game.step()
print(game.score(), game.snake.head, game.alive)
```

- `Game(mode, rng)` holds the `snake`, the `food` position, `speed`,
  `food_count` and `alive`. `step()` moves the snake one cell and returns
  whether it ate; calling it after the game has ended raises
  `GameOverError`. `update_clock(elapsed_ms)` ends a time-mode round when
  the clock runs out, `time_left(elapsed_ms)` gives the seconds remaining
  (or `None` outside time mode), and `delay_ms()` the pause between frames.
- `Snake` has `body` (head first), `direction`, `health`, the `head`
  property, `turn(direction)` and `next_head()`.

`serpentine.sprites` picks the image name for each segment:
`snake_sprites(body, direction)` returns `(name, position)` pairs for the
head, the middle segments and the tail, built from `head_sprite`,
`body_sprite` and `tail_sprite`. This is handy for drawing the snake some
other way.

## Development

```
pip install .[test]
pytest
```