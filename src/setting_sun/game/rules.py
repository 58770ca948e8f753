from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .geometry import GRID_HEIGHT, Coordinate, Direction
from .grid import Board
from .pieces import Piece


SUN_ID = 1


@dataclass(frozen=True)
class ExitRule:
    """Where and how the Sun leaves the board.

    Only the resting position before the move is checked; the cells below the
    exit are assumed clear.
    """

    sun_id: int = SUN_ID
    exit_top_left: Coordinate = (1, GRID_HEIGHT - 2)
    exit_direction: Direction = Direction.DOWN

    def __post_init__(self) -> None:
        object.__setattr__(self, "exit_top_left", tuple(self.exit_top_left))
        object.__setattr__(self, "exit_direction", Direction(self.exit_direction))

    def is_winning_move(self, piece_id: int, piece_before_move: Piece, direction: Direction) -> bool:
        if piece_id != self.sun_id or Direction(direction) is not self.exit_direction:
            return False
        return tuple(piece_before_move.top_left) == self.exit_top_left


def is_legal(board: Board, piece_id: int, direction: Direction, rule: ExitRule = ExitRule()) -> bool:
    piece = board.find(piece_id)

    # The Sun may pass through the exit even though it leaves the grid
    if rule.is_winning_move(piece_id, piece, direction):
        return True

    if not piece.can_move(direction):
        return False

    moved = piece.move(direction)
    for other in board.others(piece_id):
        if other.intersects(moved):
            return False
    return True


def legal_directions(board: Board, piece_id: int, rule: ExitRule = ExitRule()) -> List[Direction]:
    return [d for d in Direction if is_legal(board, piece_id, d, rule)]


def legal_moves(board: Board, rule: ExitRule = ExitRule()) -> List[Tuple[int, Direction]]:
    return [(pid, d) for pid in board for d in legal_directions(board, pid, rule)]
