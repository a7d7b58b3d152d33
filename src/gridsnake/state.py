from __future__ import annotations

from collections import namedtuple
from enum import IntEnum

from . import config


class Status(IntEnum):
    EXITED = 0
    RUNNING = 1
    OVER = 2


class Input(IntEnum):
    NONE = 0
    UP = 1
    LEFT = 2
    DOWN = 3
    RIGHT = 4
    QUIT = 5


GameState = namedtuple("GameState", ["status", "board", "head", "tail", "apples_eaten", "speed"])
# status: Status
# board: tuple[int, ...] of packed cells, row-major, BOARD_SIZE long
# head, tail: linear board indices of the snake's ends
# apples_eaten: int
# speed: int, BASE_SPEED + apples_eaten

Snapshot = namedtuple("Snapshot", ["board", "head", "status", "apples_eaten"])


def snapshot(state: GameState) -> Snapshot:
    return Snapshot(
        board=state.board,
        head=state.head,
        status=state.status,
        apples_eaten=state.apples_eaten,
    )


def score(snap: Snapshot | GameState) -> int:
    return snap.apples_eaten * config.SCORE_PER_APPLE


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
