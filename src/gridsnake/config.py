from __future__ import annotations

# Board
BOARD_WIDTH = 20
BOARD_HEIGHT = 20
BOARD_SIZE = BOARD_WIDTH * BOARD_HEIGHT

# Gameplay
BASE_SPEED = 850
SCORE_PER_APPLE = 100

# Driver loop rate; a full step happens every (CLOCK_HZ - speed) frames.
CLOCK_HZ = 1000

# Window layout, in pixels. Each board cell is two glyphs wide like a terminal.
CELL_W = 32
CELL_H = 24
BOARD_X = CELL_W // 2
BOARD_Y = CELL_H
SIDEBAR_W = 200
WIDTH = BOARD_X * 2 + BOARD_WIDTH * CELL_W + SIDEBAR_W
HEIGHT = BOARD_Y * 2 + BOARD_HEIGHT * CELL_H
FONT_SIZE = 24

# Colours
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREY = (110, 110, 110)
GREEN = (0, 200, 0)
RED = (220, 0, 0)
