from __future__ import annotations

import random

from . import config
from .apples import spawn_apple
from .grid import (
    EMPTY_CELL,
    KIND_MASK,
    CellKind,
    Direction,
    direction_of,
    empty_board,
    index,
    map_input_to_direction,
    neighbor,
    pack,
    same_axis,
)
from .state import Functor, GameState, Input, Status


def _blank_state() -> GameState:
    head = index(config.BOARD_WIDTH // 2, config.BOARD_HEIGHT // 2)
    return GameState(
        status=Status.RUNNING,
        board=empty_board(),
        head=head,
        tail=head - 2,
        apples_eaten=0,
        speed=config.BASE_SPEED,
    )


def _place_snake(state: GameState) -> GameState:
    board = list(state.board)
    for i in range(state.tail, state.head + 1):
        board[i] = pack(CellKind.SNAKE, Direction.RIGHT)
    return state._replace(board=tuple(board))


def initialize(rng: random.Random | None = None) -> GameState:
    """Fresh running game: a 3-cell snake facing right in the middle and one apple."""
    return (
        Functor(_blank_state())
        .map(_place_snake)
        .map(lambda s: s._replace(board=spawn_apple(s.board, rng)))
        .get()
    )


def _step_over(value: Input, state: GameState, rng) -> GameState:
    if value == Input.QUIT:
        return state._replace(status=Status.EXITED)
    if value == Input.NONE:
        return state._replace()
    # Any other key restarts.
    return initialize(rng)


def _step_running(value: Input, state: GameState, rng) -> GameState:
    head_dir = direction_of(state.board[state.head])

    if value == Input.QUIT:
        return state._replace(status=Status.EXITED)
    if value != Input.NONE:
        user_dir = map_input_to_direction(value)
        # Only turns onto the other axis are accepted; anything else is dropped
        # and the snake does not move this tick.
        if same_axis(user_dir, head_dir):
            return state._replace()
        head_dir = user_dir

    board = list(state.board)
    board[state.head] = pack(CellKind.SNAKE, head_dir)

    next_head = neighbor(state.head, head_dir)
    next_kind = state.board[next_head] & KIND_MASK
    board[next_head] = pack(CellKind.SNAKE, head_dir)
    new_state = state._replace(head=next_head)

    if next_kind == CellKind.SNAKE:
        return new_state._replace(board=tuple(board), status=Status.OVER)

    if next_kind == CellKind.EMPTY:
        tail_dir = direction_of(state.board[state.tail])
        board[state.tail] = EMPTY_CELL
        return new_state._replace(board=tuple(board), tail=neighbor(state.tail, tail_dir))

    if next_kind == CellKind.APPLE:
        apples_eaten = state.apples_eaten + 1
        return new_state._replace(
            board=spawn_apple(tuple(board), rng),
            apples_eaten=apples_eaten,
            speed=config.BASE_SPEED + apples_eaten,
        )

    return new_state._replace(board=tuple(board))


def step(value: Input, state: GameState, rng: random.Random | None = None) -> GameState:
    """Advance the game by one tick. ``state`` is never modified."""
    if state.status == Status.EXITED:
        return state._replace()
    if state.status == Status.OVER:
        return _step_over(value, state, rng)
    return _step_running(value, state, rng)
