from __future__ import annotations

import pygame

from .state import Input

KEY_MAP = {
    pygame.K_UP: Input.UP,
    pygame.K_DOWN: Input.DOWN,
    pygame.K_LEFT: Input.LEFT,
    pygame.K_RIGHT: Input.RIGHT,
    pygame.K_ESCAPE: Input.QUIT,
    pygame.K_q: Input.QUIT,
}


def map_key(key: int) -> Input:
    return KEY_MAP.get(key, Input.NONE)


def collect_input(events) -> Input:
    """Collapse one tick's events into a single input; the last key press wins."""
    last_key = None
    for event in events:
        if event.type == pygame.QUIT:
            return Input.QUIT
        if event.type == pygame.KEYDOWN:
            last_key = event.key
    if last_key is None:
        return Input.NONE
    return map_key(last_key)
