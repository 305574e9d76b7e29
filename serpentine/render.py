"""Text drawing and the menu and game-over screens."""

from __future__ import annotations

import pygame

from serpentine.game import GameMode

TEXT_COLOR = (255, 0, 0)

_MENU_KEYS = {
    pygame.K_1: GameMode.CLASSIC,
    pygame.K_2: GameMode.HEALTH,
    pygame.K_3: GameMode.TIME,
}

_GAME_OVER_KEYS = {
    pygame.K_r: True,
    pygame.K_q: False,
}


class QuitRequested(Exception):
    """Raised when the player closes the window."""


def render_text(surface: pygame.Surface, font: pygame.font.Font, text: str, x: int, y: int) -> pygame.Rect:
    """Draw text in the text colour with its top-left at (x, y); return the area drawn."""
    image = font.render(text, False, TEXT_COLOR)
    return surface.blit(image, (x, y))


def draw_background(screen: pygame.Surface, background: pygame.Surface) -> None:
    """Stretch the background over the whole screen."""
    if background.get_size() != screen.get_size():
        background = pygame.transform.scale(background, screen.get_size())
    screen.blit(background, (0, 0))


def _wait_for_choice(choices: dict):
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            raise QuitRequested()
        if event.type == pygame.KEYDOWN and event.key in choices:
            return choices[event.key]


def show_menu(screen: pygame.Surface, font: pygame.font.Font, background: pygame.Surface) -> GameMode:
    """Show the mode menu and return the mode the player picks."""
    draw_background(screen, background)
    render_text(screen, font, "Select Mode:", 220, 150)
    render_text(screen, font, "1. Classic Mode", 200, 200)
    render_text(screen, font, "2. Survival Mode", 200, 250)
    render_text(screen, font, "3. Time limit Mode", 200, 300)
    pygame.display.flip()
    return _wait_for_choice(_MENU_KEYS)


def show_game_over(
    screen: pygame.Surface, font: pygame.font.Font, background: pygame.Surface, score: int
) -> bool:
    """Show the game-over screen; return True to play again, False to quit."""
    draw_background(screen, background)
    render_text(screen, font, "Game Over!", 250, 150)
    render_text(screen, font, "Press R to Retry or Q to Quit", 100, 200)
    render_text(screen, font, f"Your score is: {score}", 250, 250)
    pygame.display.flip()
    return _wait_for_choice(_GAME_OVER_KEYS)