from __future__ import annotations

# Board dimensions
BOARD_WIDTH: int = 10
BOARD_HEIGHT: int = 20

# Board / cell encoding
EMPTY: str = ""
CELL_DTYPE = object
