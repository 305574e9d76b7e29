import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from serpentine.game import SCREEN_HEIGHT, SCREEN_WIDTH, GameMode
from serpentine.render import (
    TEXT_COLOR,
    QuitRequested,
    draw_background,
    render_text,
    show_game_over,
    show_menu,
)

BLUE = (0, 0, 255)


@pytest.fixture
def screen():
    pygame.display.init()
    pygame.font.init()
    surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.event.clear()
    yield surface
    pygame.display.quit()


@pytest.fixture
def font(screen):
    return pygame.font.Font(None, 24)


@pytest.fixture
def background():
    surface = pygame.Surface((100, 100))
    surface.fill(BLUE)
    return surface


def _has_text_color(surface, rect):
    rect = rect.clip(surface.get_rect())
    return any(
        tuple(surface.get_at((x, y))[:3]) == TEXT_COLOR
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
    )


def _post_key(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_render_text_draws_at_position(font):
    surface = pygame.Surface((200, 100))
    rect = render_text(surface, font, "Score: 1", 10, 20)
    assert rect.topleft == (10, 20)
    assert _has_text_color(surface, rect)


def test_render_text_leaves_area_above_untouched(font):
    surface = pygame.Surface((200, 100))
    rect = render_text(surface, font, "Hello", 10, 50)
    assert rect.top == 50
    assert not _has_text_color(surface, pygame.Rect(0, 0, 200, 50))


def test_draw_background_stretches_to_screen(screen, background):
    draw_background(screen, background)
    assert tuple(screen.get_at((0, 0))[:3]) == BLUE
    assert tuple(screen.get_at((SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1))[:3]) == BLUE


@pytest.mark.parametrize(
    "key, mode",
    [
        (pygame.K_1, GameMode.CLASSIC),
        (pygame.K_2, GameMode.HEALTH),
        (pygame.K_3, GameMode.TIME),
    ],
)
def test_show_menu_returns_chosen_mode(screen, font, background, key, mode):
    _post_key(key)
    assert show_menu(screen, font, background) is mode


def test_show_menu_ignores_other_keys(screen, font, background):
    _post_key(pygame.K_a)
    _post_key(pygame.K_r)
    _post_key(pygame.K_3)
    assert show_menu(screen, font, background) is GameMode.TIME


def test_show_menu_draws_text_over_background(screen, font, background):
    _post_key(pygame.K_1)
    assert show_menu(screen, font, background) is GameMode.CLASSIC
    assert _has_text_color(screen, pygame.Rect(200, 150, 300, 200))
    assert tuple(screen.get_at((5, SCREEN_HEIGHT - 5))[:3]) == BLUE


def test_show_menu_quit_raises(screen, font, background):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    with pytest.raises(QuitRequested):
        show_menu(screen, font, background)


def test_show_game_over_retry(screen, font, background):
    _post_key(pygame.K_r)
    assert show_game_over(screen, font, background, 5) is True


def test_show_game_over_quit_key(screen, font, background):
    _post_key(pygame.K_1)
    _post_key(pygame.K_q)
    assert show_game_over(screen, font, background, 5) is False


def test_show_game_over_window_close_raises(screen, font, background):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    with pytest.raises(QuitRequested):
        show_game_over(screen, font, background, 3)


def test_show_game_over_draws_text(screen, font, background):
    _post_key(pygame.K_r)
    assert show_game_over(screen, font, background, 7) is True
    assert _has_text_color(screen, pygame.Rect(100, 150, 400, 150))