from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import IntEnum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

import numpy as np

from .constants import BOARD_WIDTH
from .errors import InvalidPieceError


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray
Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class ShapeSpec:
    shape: Shape
    color: str


def _frozen(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


CATALOG: Mapping[TetrominoType, ShapeSpec] = MappingProxyType({
    TetrominoType.I: ShapeSpec(_frozen([[1, 1, 1, 1]]), "#00f0f0"),
    TetrominoType.O: ShapeSpec(_frozen([[1, 1], [1, 1]]), "#f0f000"),
    TetrominoType.T: ShapeSpec(_frozen([[1, 1, 1], [0, 1, 0]]), "#a000f0"),
    TetrominoType.S: ShapeSpec(_frozen([[0, 1, 1], [1, 1, 0]]), "#00f000"),
    TetrominoType.Z: ShapeSpec(_frozen([[1, 1, 0], [0, 1, 1]]), "#f00000"),
    TetrominoType.J: ShapeSpec(_frozen([[1, 0, 0], [1, 1, 1]]), "#0000f0"),
    TetrominoType.L: ShapeSpec(_frozen([[0, 0, 1], [1, 1, 1]]), "#f0a000"),
})


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def moved(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)


def _check_shape(shape) -> None:
    if not isinstance(shape, np.ndarray) or shape.ndim != 2 or shape.size == 0:
        raise InvalidPieceError(f"invalid piece shape: expected a non-empty 2D grid, got {shape!r}")
    if not np.isin(shape, (0, 1)).all():
        raise InvalidPieceError("invalid piece shape: cells must be 0 or 1")


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _coerce_shape(shape) -> Shape:
    try:
        raw = np.asarray(shape)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidPieceError(f"invalid piece shape: {exc}") from exc
    # Check values before the int8 cast, which would truncate or overflow
    _check_shape(raw)
    return raw.astype(np.int8)


def validate_piece(piece: "Piece") -> None:
    """Raise InvalidPieceError unless `piece` has a usable shape, color and position."""
    _check_shape(piece.shape)
    if not isinstance(piece.color, str) or not piece.color:
        raise InvalidPieceError(f"invalid piece color: {piece.color!r}")
    position = piece.position
    if not isinstance(position, Position) or not (_is_int(position.x) and _is_int(position.y)):
        raise InvalidPieceError(f"invalid piece position: {position!r}")


@dataclass(eq=False)
class Piece:
    """The falling unit: occupancy grid, color and top-left board offset.

    `shape` accepts any 2D 0/1 grid and is stored as an int8 array.
    Equality compares shapes by value.
    """

    shape: Shape
    color: str
    position: Position = field(default_factory=lambda: Position(0, 0))
    kind: Optional[TetrominoType] = None

    def __post_init__(self) -> None:
        self.shape = _coerce_shape(self.shape)
        validate_piece(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self.color == other.color
            and self.position == other.position
            and self.kind == other.kind
            and np.array_equal(self.shape, other.shape)
        )

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, position=self.position.moved(dx, dy))

    def cells(self) -> List[Coordinate]:
        """Board coordinates (x, y) covered by occupied shape cells."""
        cells: List[Coordinate] = []
        for dy in range(self.height):
            for dx in range(self.width):
                if self.shape[dy, dx]:
                    cells.append((self.position.x + dx, self.position.y + dy))
        return cells


def spawn_position(shape: Shape) -> Position:
    width = int(np.shape(shape)[1])
    return Position(BOARD_WIDTH // 2 - width // 2, 0)


def create_piece(rng: Optional[random.Random] = None) -> Piece:
    """Pick a catalog entry uniformly at random and place it at the spawn point."""
    rng = rng or random.Random()
    kind = rng.choice(list(TetrominoType))
    entry = CATALOG[kind]
    return Piece(
        shape=entry.shape,
        color=entry.color,
        position=spawn_position(entry.shape),
        kind=kind,
    )


def rotate_piece(piece: Piece) -> Piece:
    """Return a copy of `piece` with its shape turned 90 degrees clockwise.

    Color, position and kind are kept. The result is not checked against
    any board.
    """
    validate_piece(piece)
    # __post_init__ copies the rotated view into a fresh array
    return replace(piece, shape=np.rot90(piece.shape, axes=(1, 0)))
