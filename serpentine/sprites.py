"""Choice of sprite names for each segment of the snake."""

from __future__ import annotations

from typing import Optional, Sequence

from serpentine.game import Direction, Point


def head_sprite(direction: Direction) -> str:
    """Sprite name for the head facing the given direction."""
    return f"head_{direction.value}"


def body_sprite(prev: Point, curr: Point, nxt: Point) -> str:
    """Sprite name for a middle segment given its neighbours."""
    px, py = prev
    cx, cy = curr
    nx, ny = nxt
    if px == cx and nx == cx:
        return "body_vertical"
    if py == cy and ny == cy:
        return "body_horizontal"
    if (px < cx and ny < cy) or (py < cy and nx < cx):
        return "body_topleft"
    if (px > cx and ny < cy) or (py < cy and nx > cx):
        return "body_topright"
    if (px < cx and ny > cy) or (py > cy and nx < cx):
        return "body_bottomleft"
    if (px > cx and ny > cy) or (py > cy and nx > cx):
        return "body_bottomright"
    return "body_horizontal"


def tail_sprite(pre_tail: Point, tail: Point) -> Optional[str]:
    """Sprite name for the last segment, or None if it is not in line."""
    if pre_tail[0] == tail[0]:
        return "tail_down" if pre_tail[1] < tail[1] else "tail_up"
    if pre_tail[1] == tail[1]:
        return "tail_right" if pre_tail[0] < tail[0] else "tail_left"
    return None


def snake_sprites(body: Sequence[Point], direction: Direction) -> list[tuple[str, Point]]:
    """Sprite names with positions, in drawing order: head, body, tail."""
    if not body:
        return []
    sprites: list[tuple[str, Point]] = [(head_sprite(direction), body[0])]
    for prev, curr, nxt in zip(body, body[1:], body[2:]):
        sprites.append((body_sprite(prev, curr, nxt), curr))
    if len(body) >= 2:
        name = tail_sprite(body[-2], body[-1])
        if name is not None:
            sprites.append((name, body[-1]))
    return sprites