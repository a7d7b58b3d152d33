import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from gridsnake import config  # noqa: E402
from gridsnake.grid import (  # noqa: E402
    KIND_MASK,
    CellKind,
    Direction,
    direction_of,
    empty_board,
    index,
    neighbor,
    pack,
)
from gridsnake.state import GameState, Status  # noqa: E402


def _direction_between(a, b):
    (ax, ay), (bx, by) = a, b
    return {
        (0, -1): Direction.UP,
        (-1, 0): Direction.LEFT,
        (0, 1): Direction.DOWN,
        (1, 0): Direction.RIGHT,
    }[(bx - ax, by - ay)]


def build_state(body, head_dir=None, apples=(), status=Status.RUNNING, apples_eaten=0):
    """Build a state from snake coordinates listed tail first.

    Each segment points at the next one; the head keeps ``head_dir`` or, by
    default, the direction of the segment behind it.
    """
    board = list(empty_board())
    for here, there in zip(body, body[1:]):
        board[index(*here)] = pack(CellKind.SNAKE, _direction_between(here, there))
    if head_dir is None:
        head_dir = _direction_between(body[-2], body[-1])
    board[index(*body[-1])] = pack(CellKind.SNAKE, head_dir)
    for apple in apples:
        board[index(*apple)] = pack(CellKind.APPLE)
    return GameState(
        status=status,
        board=tuple(board),
        head=index(*body[-1]),
        tail=index(*body[0]),
        apples_eaten=apples_eaten,
        speed=config.BASE_SPEED + apples_eaten,
    )


def trace_body(state):
    """Follow the stored directions from tail to head, failing on loops."""
    path = [state.tail]
    seen = {state.tail}
    current = state.tail
    while current != state.head:
        assert state.board[current] & KIND_MASK == CellKind.SNAKE
        current = neighbor(current, direction_of(state.board[current]))
        assert current not in seen, "snake path revisits a cell"
        seen.add(current)
        path.append(current)
    return path


def count_kind(board, kind):
    return sum(1 for c in board if c & KIND_MASK == kind)


@pytest.fixture
def make_state():
    return build_state
