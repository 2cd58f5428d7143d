from __future__ import annotations


class FallingBlocksError(Exception):
    """Base class for errors raised by the board/piece engine."""


class InvalidBoardError(FallingBlocksError, ValueError):
    """Board does not have the fixed engine dimensions."""


class InvalidPieceError(FallingBlocksError, ValueError):
    """Piece shape or color is malformed."""
