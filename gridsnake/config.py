"""Board geometry and colour settings shared by the game and its renderer."""

ROWS = 40
COLS = 40
CELL_SIZE = 15
PADDING = 3
OFFSET = 70

# Cells at the far edges that the snake skips when it wraps around the board.
WRAP_MARGIN = 0

WINDOW_WIDTH = COLS * CELL_SIZE + (COLS - 1) * PADDING
WINDOW_HEIGHT = ROWS * CELL_SIZE + (ROWS - 1) * PADDING + OFFSET

MAX_SNAKE_LENGTH = ROWS * COLS

SNAKE_COLOR = (233, 240, 245)