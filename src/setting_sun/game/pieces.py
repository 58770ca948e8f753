from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import ClassVar, Dict, FrozenSet, Optional, Tuple, Type, Union

from .geometry import Coordinate, Direction, is_inside, shift


class PieceKind(IntEnum):
    SQUARE = 1
    VERTICAL = 2
    HORIZONTAL = 3
    SUN = 4


class _PieceBehaviour:
    """Operations shared by every piece shape.

    Subclasses provide `top_left`, `identity`, `squares()` and `can_move()`.
    """

    WIDTH: ClassVar[int] = 1
    HEIGHT: ClassVar[int] = 1
    kind: ClassVar[PieceKind]

    def dimensions(self) -> Tuple[int, int]:
        return (self.WIDTH, self.HEIGHT)

    def cells(self) -> FrozenSet[Coordinate]:
        return frozenset(square.top_left for square in self.squares())

    def move(self, direction: Direction) -> "Piece":
        # No bounds check: the validator probes transiently out-of-bounds pieces
        return replace(self, top_left=shift(self.top_left, direction))

    def intersects(self, other: "Piece") -> bool:
        return not self.cells().isdisjoint(other.cells())


@dataclass(frozen=True)
class Square(_PieceBehaviour):
    top_left: Coordinate
    identity: Optional[int] = None

    kind: ClassVar[PieceKind] = PieceKind.SQUARE

    def __post_init__(self) -> None:
        object.__setattr__(self, "top_left", tuple(self.top_left))

    def squares(self) -> Tuple["Square", ...]:
        return (self,)

    def can_move(self, direction: Direction) -> bool:
        x, y = shift(self.top_left, direction)
        return is_inside(x, y)


@dataclass(frozen=True)
class _CompositePiece(_PieceBehaviour):
    """A rigid block made of unit squares laid out row by row from `top_left`.

    The unit squares carry no identity; only the composite is addressable.
    """

    top_left: Coordinate
    identity: Optional[int] = None
    _squares: Tuple[Square, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "top_left", tuple(self.top_left))
        x, y = self.top_left
        squares = tuple(
            Square((x + dx, y + dy))
            for dy in range(self.HEIGHT)
            for dx in range(self.WIDTH)
        )
        object.__setattr__(self, "_squares", squares)

    def squares(self) -> Tuple[Square, ...]:
        return self._squares

    def can_move(self, direction: Direction) -> bool:
        return all(square.can_move(direction) for square in self._squares)


@dataclass(frozen=True)
class VerticalRect(_CompositePiece):
    WIDTH: ClassVar[int] = 1
    HEIGHT: ClassVar[int] = 2
    kind: ClassVar[PieceKind] = PieceKind.VERTICAL


@dataclass(frozen=True)
class HorizontalRect(_CompositePiece):
    WIDTH: ClassVar[int] = 2
    HEIGHT: ClassVar[int] = 1
    kind: ClassVar[PieceKind] = PieceKind.HORIZONTAL


@dataclass(frozen=True)
class SunSquare(_CompositePiece):
    WIDTH: ClassVar[int] = 2
    HEIGHT: ClassVar[int] = 2
    kind: ClassVar[PieceKind] = PieceKind.SUN


Piece = Union[Square, VerticalRect, HorizontalRect, SunSquare]

PIECE_TYPES: Dict[PieceKind, Type[_PieceBehaviour]] = {
    PieceKind.SQUARE: Square,
    PieceKind.VERTICAL: VerticalRect,
    PieceKind.HORIZONTAL: HorizontalRect,
    PieceKind.SUN: SunSquare,
}


def make_piece(kind: PieceKind, top_left: Coordinate, identity: Optional[int] = None) -> Piece:
    return PIECE_TYPES[PieceKind(kind)](top_left=tuple(top_left), identity=identity)
