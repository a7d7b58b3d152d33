from __future__ import annotations

import logging
import random

import pygame

from . import config
from .inputs import collect_input
from .logic import initialize, step
from .render import draw_state, init_draw, score_text
from .state import GameState, Input, Status, snapshot

logger = logging.getLogger(__name__)


def tick(
    state: GameState,
    value: Input,
    frame: int,
    rng: random.Random | None = None,
    clock_hz: int = config.CLOCK_HZ,
) -> tuple[GameState, int, bool]:
    """One driver frame: returns (state, next frame, whether the core was stepped).

    Frame 0 is a full step and ignores the input; on other frames a key press
    is a mid step.
    """
    stepped = frame == 0 or value != Input.NONE
    if stepped:
        state = step(Input.NONE if frame == 0 else value, state, rng)
    frame = (frame + 1) % max(clock_hz - state.speed, 1)
    return state, frame, stepped


def _log_transition(prev: GameState, state: GameState) -> None:
    if prev.status != state.status:
        if state.status == Status.OVER:
            logger.info("game over, score %s", score_text(snapshot(state)))
        elif state.status == Status.RUNNING:
            logger.info("restarted")
        elif state.status == Status.EXITED:
            logger.info("exiting")
    elif state.apples_eaten > prev.apples_eaten:
        logger.debug("apple eaten at %d, speed now %d", state.head, state.speed)


def run(rng: random.Random | None = None, clock_hz: int = config.CLOCK_HZ) -> GameState:
    pygame.init()
    try:
        screen = pygame.display.set_mode((config.WIDTH, config.HEIGHT))
        pygame.display.set_caption("gridsnake")
        font = pygame.font.Font(None, config.FONT_SIZE)
        clock = pygame.time.Clock()

        init_draw(screen, font)
        state = initialize(rng)
        logger.info("started, head at %d", state.head)
        draw_state(screen, snapshot(state), font)
        pygame.display.flip()

        frame = 0
        while state.status != Status.EXITED:
            value = collect_input(pygame.event.get())
            prev = state
            state, frame, stepped = tick(state, value, frame, rng, clock_hz)
            if stepped:
                _log_transition(prev, state)
                draw_state(screen, snapshot(state), font)
                pygame.display.flip()
            clock.tick(clock_hz)
    finally:
        pygame.quit()

    return state
