from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

import numpy as np

from .geometry import GRID_HEIGHT, GRID_WIDTH, is_inside
from .pieces import Piece


class PieceNotFoundError(KeyError):
    """Raised when a piece identity is not present on the board."""

    def __init__(self, piece_id: int) -> None:
        super().__init__(piece_id)
        self.piece_id = piece_id

    def __str__(self) -> str:
        return f"Could not find piece with ID {self.piece_id}"


class Board(Mapping[int, Piece]):
    """Immutable snapshot of the puzzle: piece identity -> piece.

    A move never edits a board in place; `replace` returns a new board that
    differs from this one by exactly one entry.
    """

    __slots__ = ("_pieces",)

    def __init__(self, pieces: Iterable[Piece] = ()) -> None:
        table: Dict[int, Piece] = {}
        for piece in pieces:
            if piece.identity is None:
                raise ValueError(f"Board pieces need an identity: {piece!r}")
            if piece.identity in table:
                raise ValueError(f"Duplicate piece identity {piece.identity}")
            table[piece.identity] = piece
        self._pieces = table

    def __getitem__(self, piece_id: int) -> Piece:
        return self._pieces[piece_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def __repr__(self) -> str:
        return f"Board({list(self._pieces.values())!r})"

    def find(self, piece_id: int) -> Piece:
        try:
            return self._pieces[piece_id]
        except KeyError:
            raise PieceNotFoundError(piece_id) from None

    def replace(self, piece: Piece) -> "Board":
        self.find(piece.identity)
        new = Board.__new__(Board)
        new._pieces = {pid: (piece if pid == piece.identity else other) for pid, other in self._pieces.items()}
        return new

    def others(self, piece_id: int) -> Iterator[Piece]:
        for pid, piece in self._pieces.items():
            if pid != piece_id:
                yield piece

    def overlapping_pairs(self) -> List[Tuple[int, int]]:
        pieces = list(self._pieces.values())
        pairs: List[Tuple[int, int]] = []
        for i, first in enumerate(pieces):
            for second in pieces[i + 1 :]:
                if first.intersects(second):
                    pairs.append((first.identity, second.identity))
        return pairs

    def out_of_bounds(self) -> List[int]:
        return [
            pid
            for pid, piece in self._pieces.items()
            if not all(is_inside(x, y) for x, y in piece.cells())
        ]

    def is_consistent(self) -> bool:
        return not self.overlapping_pairs() and not self.out_of_bounds()

    def occupancy(self) -> np.ndarray:
        """Grid of shape (GRID_HEIGHT, GRID_WIDTH): identity + 1 per cell, 0 if empty.

        Cells outside the grid (the Sun after leaving through the exit) are skipped.
        """
        state = np.zeros((GRID_HEIGHT, GRID_WIDTH), dtype=np.int8)
        for pid, piece in self._pieces.items():
            for x, y in piece.cells():
                if is_inside(x, y):
                    state[y, x] = pid + 1
        return state


def format_board(board: Board) -> str:
    rows = []
    for row in board.occupancy():
        rows.append("".join(str(v - 1) if v else "." for v in row))
    return "\n".join(rows)
