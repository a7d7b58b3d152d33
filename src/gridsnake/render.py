from __future__ import annotations

import numpy as np
import pygame

from . import config
from .grid import KIND_MASK, CellKind, Direction, cell_x, cell_y, direction_of
from .state import Snapshot, Status, score

HEAD_GLYPHS = {
    Direction.UP: "''",
    Direction.LEFT: ": ",
    Direction.DOWN: "..",
    Direction.RIGHT: " :",
}


def board_kinds(board) -> np.ndarray:
    cells = np.asarray(board, dtype=np.uint8).reshape(config.BOARD_HEIGHT, config.BOARD_WIDTH)
    return cells & KIND_MASK


def head_glyph(direction: Direction) -> str:
    return HEAD_GLYPHS[direction]


def score_text(snap: Snapshot) -> str:
    return f"{score(snap):08d}"


def _cell_rect(x: int, y: int) -> pygame.Rect:
    return pygame.Rect(
        config.BOARD_X + x * config.CELL_W,
        config.BOARD_Y + y * config.CELL_H,
        config.CELL_W,
        config.CELL_H,
    )


def _sidebar_x() -> int:
    return config.BOARD_X + config.BOARD_WIDTH * config.CELL_W + config.CELL_W


def init_draw(screen: pygame.Surface, font: pygame.font.Font) -> None:
    screen.fill(config.BLACK)

    border = pygame.Rect(
        config.BOARD_X - 2,
        config.BOARD_Y - 2,
        config.BOARD_WIDTH * config.CELL_W + 4,
        config.BOARD_HEIGHT * config.CELL_H + 4,
    )
    pygame.draw.rect(screen, config.GREY, border, width=1)

    sx = _sidebar_x()
    bottom = config.BOARD_Y + config.BOARD_HEIGHT * config.CELL_H
    line = font.get_linesize()
    help_lines = [
        (bottom - line * 5, "Move Snake", True),
        (bottom - line * 4, "Arrow Keys", False),
        (bottom - line * 2, "Quit", True),
        (bottom - line * 1, "q or ESC", False),
    ]
    for y, text, underline in help_lines:
        font.set_underline(underline)
        screen.blit(font.render(text, True, config.WHITE), (sx, y))
    font.set_underline(False)

    label = font.render("SCORE   ", True, config.BLACK, config.WHITE)
    screen.blit(label, (sx, config.BOARD_Y))


def draw_state(screen: pygame.Surface, snap: Snapshot, font: pygame.font.Font) -> None:
    board_rect = pygame.Rect(
        config.BOARD_X,
        config.BOARD_Y,
        config.BOARD_WIDTH * config.CELL_W,
        config.BOARD_HEIGHT * config.CELL_H,
    )
    screen.fill(config.BLACK, board_rect)

    kinds = board_kinds(snap.board)
    for y, x in np.argwhere(kinds == CellKind.APPLE):
        pygame.draw.rect(screen, config.RED, _cell_rect(int(x), int(y)))
    for y, x in np.argwhere(kinds == CellKind.SNAKE):
        pygame.draw.rect(screen, config.GREEN, _cell_rect(int(x), int(y)))

    if snap.board[snap.head] & KIND_MASK == CellKind.SNAKE:
        glyph = font.render(head_glyph(direction_of(snap.board[snap.head])), True, config.BLACK)
        rect = _cell_rect(cell_x(snap.head), cell_y(snap.head))
        screen.blit(glyph, glyph.get_rect(center=rect.center))

    sx = _sidebar_x()
    score_pos = (sx, config.BOARD_Y + font.get_linesize())
    screen.fill(config.BLACK, pygame.Rect(score_pos, (config.SIDEBAR_W, font.get_linesize())))
    font.set_bold(True)
    screen.blit(font.render(score_text(snap), True, config.WHITE), score_pos)
    font.set_bold(False)

    if snap.status == Status.OVER:
        font.set_bold(True)
        banner = font.render("GAME OVER!", True, config.WHITE, config.RED)
        font.set_bold(False)
        screen.blit(banner, banner.get_rect(center=board_rect.center))
