"""Packed board cells and board geometry.

A cell is a plain ``int``: bits ``0x0C`` hold the occupancy kind and bits
``0x03`` hold the direction the segment was travelling when it was laid down.
The direction bits only mean something on snake cells.
"""

from __future__ import annotations

from enum import IntEnum

from . import config
from .state import Input


class CellKind(IntEnum):
    EMPTY = 0x00
    APPLE = 0x04
    SNAKE = 0x08


class Direction(IntEnum):
    UP = 0
    LEFT = 1
    DOWN = 2
    RIGHT = 3


KIND_MASK = 0x0C
DIRECTION_MASK = 0x03

EMPTY_CELL = int(CellKind.EMPTY)


def pack(kind: CellKind, direction: Direction = Direction.UP) -> int:
    return int(kind) | int(direction)


def kind_of(cell: int) -> int:
    # Plain int; 0x0C is not a CellKind.
    return cell & KIND_MASK


def direction_of(cell: int) -> Direction:
    return Direction(cell & DIRECTION_MASK)


def index(x: int, y: int) -> int:
    return config.BOARD_WIDTH * y + x


def cell_x(i: int) -> int:
    return i % config.BOARD_WIDTH


def cell_y(i: int) -> int:
    return i // config.BOARD_WIDTH


def neighbor(i: int, direction: Direction) -> int:
    """Index of the adjacent cell, clamped to the board edge."""
    x, y = cell_x(i), cell_y(i)
    if direction == Direction.UP:
        y = max(y - 1, 0)
    elif direction == Direction.LEFT:
        x = max(x - 1, 0)
    elif direction == Direction.DOWN:
        y = min(y + 1, config.BOARD_HEIGHT - 1)
    elif direction == Direction.RIGHT:
        x = min(x + 1, config.BOARD_WIDTH - 1)
    return index(x, y)


_INPUT_DIRECTIONS = {
    Input.UP: Direction.UP,
    Input.LEFT: Direction.LEFT,
    Input.DOWN: Direction.DOWN,
    Input.RIGHT: Direction.RIGHT,
}


def map_input_to_direction(value: Input) -> Direction:
    # Anything that is not a direction key falls back to UP.
    return _INPUT_DIRECTIONS.get(value, Direction.UP)


def same_axis(a: Direction, b: Direction) -> bool:
    return a % 2 == b % 2


def empty_board() -> tuple[int, ...]:
    return (EMPTY_CELL,) * config.BOARD_SIZE
