from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

import numpy as np

from .grid import (
    Board,
    clear_lines,
    create_empty_board,
    is_inside,
    is_valid_move,
    merge_piece,
)
from .pieces import Piece, create_piece, rotate_piece

logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    PAUSE = 5
    NONE = 6


@dataclass
class GameConfig:
    random_seed: Optional[int] = None


@dataclass
class GameState:
    board: Board = field(default_factory=create_empty_board)
    current_piece: Optional[Piece] = None
    score: int = 0
    game_over: bool = False
    paused: bool = False


def drop_position(board: Board, piece: Piece) -> Piece:
    """Move `piece` down until the next row would be invalid."""
    while True:
        lower = piece.moved(0, 1)
        if not is_valid_move(board, lower):
            return piece
        piece = lower


def overlay_piece(board: Board, piece: Optional[Piece]) -> Board:
    # Copy of the board with the falling piece drawn in, for renderers
    state = board.copy()
    if piece is not None:
        for x, y in piece.cells():
            if is_inside(x, y):
                state[y, x] = piece.color
    return state


class FallingBlocksGame:
    """Headless driver threading a GameState through the engine operations.

    Score is the running count of cleared lines.
    """

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.random_seed)
        self._state: GameState
        self.reset()

    @property
    def state(self) -> GameState:
        return self._state

    def reset(self) -> None:
        self._state = GameState(board=create_empty_board())
        self._spawn_piece()

    def _spawn_piece(self) -> None:
        piece = create_piece(self.rng)
        if not is_valid_move(self._state.board, piece):
            logger.debug("spawn blocked for %s at %s, game over", piece.kind, piece.position)
            self._state.current_piece = None
            self._state.game_over = True
            return
        logger.debug("spawned %s at %s", piece.kind, piece.position)
        self._state.current_piece = piece

    def _try_replace(self, candidate: Piece) -> bool:
        if is_valid_move(self._state.board, candidate):
            self._state.current_piece = candidate
            return True
        return False

    def _lock_piece(self) -> int:
        piece = self._state.current_piece
        assert piece is not None
        logger.debug("locking %s at %s", piece.kind, piece.position)
        board = merge_piece(self._state.board, piece)
        result = clear_lines(board)
        self._state.board = result.board
        self._state.score += result.lines_cleared
        self._state.current_piece = None
        if result.lines_cleared:
            logger.debug("cleared %d line(s), score %d", result.lines_cleared, self._state.score)
        self._spawn_piece()
        return result.lines_cleared

    def hard_drop(self) -> int:
        piece = self._state.current_piece
        if piece is None or self._state.paused or self._state.game_over:
            return 0
        self._state.current_piece = drop_position(self._state.board, piece)
        return self._lock_piece()

    def step(self, action: Action) -> GameState:
        state = self._state
        if action == Action.PAUSE:
            if not state.game_over:
                state.paused = not state.paused
            return state
        if state.game_over or state.paused or state.current_piece is None:
            return state

        piece = state.current_piece
        if action == Action.LEFT:
            self._try_replace(piece.moved(-1, 0))
        elif action == Action.RIGHT:
            self._try_replace(piece.moved(1, 0))
        elif action == Action.ROTATE:
            self._try_replace(rotate_piece(piece))
        elif action == Action.SOFT_DROP:
            # Move down, otherwise lock
            if not self._try_replace(piece.moved(0, 1)):
                self._lock_piece()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.NONE:
            pass
        return state

    def board_with_piece(self) -> np.ndarray:
        return overlay_piece(self._state.board, self._state.current_piece)
