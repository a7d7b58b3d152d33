from __future__ import annotations

import random

from . import config
from .grid import CellKind, index, kind_of, pack


def spawn_apple(board: tuple[int, ...], rng: random.Random | None = None) -> tuple[int, ...]:
    """Return a copy of ``board`` with an apple on a uniformly random empty cell."""
    if rng is None:
        rng = random
    if not any(kind_of(c) == CellKind.EMPTY for c in board):
        raise ValueError("No empty cell left for an apple.")

    while True:
        pos = index(
            rng.randrange(config.BOARD_WIDTH),
            rng.randrange(config.BOARD_HEIGHT),
        )
        if kind_of(board[pos]) == CellKind.EMPTY:
            break

    cells = list(board)
    cells[pos] = pack(CellKind.APPLE)
    return tuple(cells)
