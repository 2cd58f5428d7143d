from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .constants import BOARD_HEIGHT, BOARD_WIDTH, CELL_DTYPE, EMPTY
from .errors import InvalidBoardError
from .pieces import Piece, validate_piece


Board = np.ndarray


@dataclass
class LineClearResult:
    board: Board
    lines_cleared: int


def create_empty_board() -> Board:
    """Fresh H x W board with every cell set to EMPTY."""
    return np.full((BOARD_HEIGHT, BOARD_WIDTH), EMPTY, dtype=CELL_DTYPE)


def validate_board(board: Board) -> None:
    if not isinstance(board, np.ndarray):
        raise InvalidBoardError(f"invalid board: expected numpy array, got {type(board).__name__}")
    if board.shape != (BOARD_HEIGHT, BOARD_WIDTH):
        raise InvalidBoardError(
            f"invalid board: expected shape {(BOARD_HEIGHT, BOARD_WIDTH)}, got {board.shape}"
        )
    # Fixed-width string boards would truncate color names on merge
    if board.dtype != CELL_DTYPE:
        raise InvalidBoardError(f"invalid board: expected dtype object, got {board.dtype}")


def is_inside(x: int, y: int) -> bool:
    return 0 <= x < BOARD_WIDTH and 0 <= y < BOARD_HEIGHT


def is_valid_move(board: Board, piece: Piece) -> bool:
    """True iff every occupied cell of `piece` lands inside the board on an empty cell.

    Unoccupied shape cells are ignored, so padding may hang off the board.
    """
    validate_board(board)
    validate_piece(piece)
    for x, y in piece.cells():
        if not is_inside(x, y):
            return False
        if board[y, x] != EMPTY:
            return False
    return True


def merge_piece(board: Board, piece: Piece) -> Board:
    """Copy of `board` with the piece's occupied cells painted in its color.

    Cells falling outside the board are skipped.
    """
    validate_board(board)
    validate_piece(piece)
    merged = board.copy()
    for x, y in piece.cells():
        if is_inside(x, y):
            merged[y, x] = piece.color
    return merged


def clear_lines(board: Board) -> LineClearResult:
    """Drop complete rows and pad the top with empty rows."""
    validate_board(board)
    full = np.all(board != EMPTY, axis=1)
    num = int(full.sum())
    if num == 0:
        return LineClearResult(board=board.copy(), lines_cleared=0)
    new_rows = np.full((num, BOARD_WIDTH), EMPTY, dtype=CELL_DTYPE)
    cleared = np.vstack((new_rows, board[~full]))
    return LineClearResult(board=cleared, lines_cleared=num)


def format_board(board: Board) -> str:
    return "\n".join("".join("█" if cell != EMPTY else "·" for cell in row) for row in board)


def print_board(board: Board) -> None:
    print(format_board(board))
