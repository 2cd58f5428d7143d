"""Game module for Falling Blocks.

Exports the board/piece engine and supporting classes:
- create_empty_board, is_valid_move, merge_piece, clear_lines: board operations
- Piece, create_piece, rotate_piece: falling piece construction and rotation
- TetrominoType, CATALOG: the fixed piece catalog
- FallingBlocksGame: headless driver threading a GameState
"""

from .constants import BOARD_HEIGHT, BOARD_WIDTH, EMPTY
from .errors import FallingBlocksError, InvalidBoardError, InvalidPieceError
from .grid import (
    LineClearResult,
    clear_lines,
    create_empty_board,
    format_board,
    is_valid_move,
    merge_piece,
    print_board,
)
from .pieces import (
    CATALOG,
    Piece,
    Position,
    ShapeSpec,
    TetrominoType,
    create_piece,
    rotate_piece,
    spawn_position,
)
from .core import Action, FallingBlocksGame, GameConfig, GameState, drop_position, overlay_piece

__all__ = [
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "EMPTY",
    "FallingBlocksError",
    "InvalidBoardError",
    "InvalidPieceError",
    "LineClearResult",
    "clear_lines",
    "create_empty_board",
    "format_board",
    "is_valid_move",
    "merge_piece",
    "print_board",
    "CATALOG",
    "Piece",
    "Position",
    "ShapeSpec",
    "TetrominoType",
    "create_piece",
    "rotate_piece",
    "spawn_position",
    "Action",
    "FallingBlocksGame",
    "GameConfig",
    "GameState",
    "drop_position",
    "overlay_piece",
]
