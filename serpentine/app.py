"""The game window: asset loading, drawing a frame and the main loop."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pygame

from serpentine.game import GRID_SIZE, SCREEN_HEIGHT, SCREEN_WIDTH, Direction, Game, GameMode, Point
from serpentine.render import QuitRequested, draw_background, render_text, show_game_over, show_menu
from serpentine.sprites import snake_sprites

FONT_SIZE = 39
BACKGROUND_FILE = "SnakeBG2.png"
GAME_OVER_PAUSE_MS = 3000

SPRITE_NAMES = (
    "head_up",
    "head_down",
    "head_left",
    "head_right",
    "body_horizontal",
    "body_vertical",
    "body_topleft",
    "body_topright",
    "body_bottomleft",
    "body_bottomright",
    "tail_up",
    "tail_down",
    "tail_left",
    "tail_right",
    "food",
)

_KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class AssetError(Exception):
    """Raised when an asset the game cannot do without fails to load."""


@dataclass
class Assets:
    """Images by sprite name, the background, and the sound effects."""

    background: pygame.Surface
    images: dict[str, pygame.Surface] = field(default_factory=dict)
    eat_sound: Optional[pygame.mixer.Sound] = None
    lose_sound: Optional[pygame.mixer.Sound] = None


def key_to_direction(key: int) -> Optional[Direction]:
    """The direction an arrow key asks for, or None for other keys."""
    return _KEY_DIRECTIONS.get(key)


def _load_image(path: Path) -> Optional[pygame.Surface]:
    if not path.is_file():
        return None
    try:
        image = pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def _load_sound(path: Path) -> Optional[pygame.mixer.Sound]:
    if not pygame.mixer.get_init() or not path.is_file():
        return None
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, OSError):
        return None


def load_assets(asset_dir) -> Assets:
    """Load images and sounds from a directory; the background is required."""
    directory = Path(asset_dir)
    background = _load_image(directory / BACKGROUND_FILE)
    if background is None:
        raise AssetError(f"cannot load background image {directory / BACKGROUND_FILE}")
    images = {}
    for name in SPRITE_NAMES:
        image = _load_image(directory / f"{name}.png")
        if image is not None:
            images[name] = image
    return Assets(
        background=background,
        images=images,
        eat_sound=_load_sound(directory / "eat.wav"),
        lose_sound=_load_sound(directory / "lose.wav"),
    )


def _blit_cell(screen: pygame.Surface, image: pygame.Surface, point: Point) -> None:
    if image.get_size() != (GRID_SIZE, GRID_SIZE):
        image = pygame.transform.scale(image, (GRID_SIZE, GRID_SIZE))
    screen.blit(image, (point[0], point[1]))


def draw_game(
    screen: pygame.Surface,
    font: pygame.font.Font,
    assets: Assets,
    game: Game,
    time_left: Optional[int],
) -> list[tuple[str, Point]]:
    """Draw one frame of play; return the sprites drawn after the food."""
    draw_background(screen, assets.background)
    food_image = assets.images.get("food")
    if food_image is not None:
        _blit_cell(screen, food_image, game.food)

    sprites = snake_sprites(game.snake.body, game.snake.direction)
    for name, point in sprites:
        image = assets.images.get(name)
        if image is not None:
            _blit_cell(screen, image, point)

    render_text(screen, font, f"Score: {game.score()}", 10, 10)
    if game.mode is GameMode.HEALTH:
        render_text(screen, font, f"Health: {game.snake.health}", 10, 40)
    if time_left is not None:
        render_text(screen, font, f"Time Left: {time_left}", 10, 70)
    return sprites


def _play(sound: Optional[pygame.mixer.Sound]) -> None:
    if sound is not None:
        sound.play()


def _play_round(screen, font, assets: Assets, mode: GameMode) -> Game:
    game = Game(mode)
    start = pygame.time.get_ticks()
    while game.alive:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                raise QuitRequested()
            if event.type == pygame.KEYDOWN:
                direction = key_to_direction(event.key)
                if direction is not None:
                    game.snake.turn(direction)
        if game.step():
            _play(assets.eat_sound)
        time_left = game.update_clock(pygame.time.get_ticks() - start)
        draw_game(screen, font, assets, game, time_left)
        pygame.display.flip()
        pygame.time.delay(game.delay_ms())
    return game


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="serpentine", description="Play snake.")
    parser.add_argument("--assets", default=".", help="directory holding images and sounds")
    parser.add_argument("--font", default=None, help="TrueType font file for the text")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the game until the player quits; return the exit status."""
    args = _parse_args(argv)
    pygame.mixer.pre_init(44100, -16, 2, 2048)
    pygame.init()
    try:
        if not pygame.display.get_init() or not pygame.font.get_init():
            print("cannot start video or fonts", file=sys.stderr)
            return 1
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init(44100, -16, 2, 2048)
            except pygame.error as exc:
                print(f"cannot open audio: {exc}", file=sys.stderr)
                return 1
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Snake Game")
        try:
            font = pygame.font.Font(args.font, FONT_SIZE)
        except (pygame.error, OSError) as exc:
            print(f"cannot open font: {exc}", file=sys.stderr)
            return 1
        try:
            assets = load_assets(args.assets)
        except AssetError as exc:
            print(exc, file=sys.stderr)
            return 1

        while True:
            mode = show_menu(screen, font, assets.background)
            game = _play_round(screen, font, assets, mode)
            _play(assets.lose_sound)
            pygame.time.delay(GAME_OVER_PAUSE_MS)
            if not show_game_over(screen, font, assets.background, game.score()):
                return 0
    except QuitRequested:
        return 0
    finally:
        pygame.quit()