from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from loguru import logger

from .geometry import Coordinate, Direction
from .grid import Board
from .pieces import PieceKind, make_piece
from .rules import SUN_ID, ExitRule, is_legal, legal_directions


class PieceSpec(NamedTuple):
    identity: int
    kind: PieceKind
    top_left: Coordinate


INITIAL_LAYOUT: Tuple[PieceSpec, ...] = (
    PieceSpec(0, PieceKind.VERTICAL, (0, 0)),
    PieceSpec(SUN_ID, PieceKind.SUN, (1, 0)),
    PieceSpec(2, PieceKind.VERTICAL, (3, 0)),
    PieceSpec(3, PieceKind.HORIZONTAL, (1, 2)),
    PieceSpec(4, PieceKind.VERTICAL, (0, 3)),
    PieceSpec(5, PieceKind.SQUARE, (1, 3)),
    PieceSpec(6, PieceKind.SQUARE, (2, 3)),
    PieceSpec(7, PieceKind.VERTICAL, (3, 3)),
    PieceSpec(8, PieceKind.SQUARE, (1, 4)),
    PieceSpec(9, PieceKind.SQUARE, (2, 4)),
)


def build_board(layout: Tuple[PieceSpec, ...] = INITIAL_LAYOUT) -> Board:
    return Board(make_piece(spec.kind, spec.top_left, spec.identity) for spec in layout)


@dataclass
class GameConfig:
    layout: Tuple[PieceSpec, ...] = INITIAL_LAYOUT
    rule: ExitRule = field(default_factory=ExitRule)
    max_episode_steps: int = 1000


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"


class MoveResult(NamedTuple):
    accepted: bool
    won: bool


class SettingSunGame:
    """Owns the current board and applies validated moves to it."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rule = self.config.rule
        self._board = self._initial_board()
        self.status = GameStatus.PLAYING
        self.move_count = 0

    def _initial_board(self) -> Board:
        board = build_board(self.config.layout)
        if self.rule.sun_id not in board:
            raise ValueError(f"Layout has no piece with the Sun identity {self.rule.sun_id}")
        if not board.is_consistent():
            raise ValueError(
                f"Layout pieces overlap {board.overlapping_pairs()} or leave the grid {board.out_of_bounds()}"
            )
        return board

    @property
    def board(self) -> Board:
        return self._board

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    def reset(self) -> Board:
        self._board = self._initial_board()
        self.status = GameStatus.PLAYING
        self.move_count = 0
        logger.info("Puzzle reset")
        return self._board

    def can_move(self, piece_id: int, direction: Direction) -> bool:
        return is_legal(self._board, piece_id, direction, self.rule)

    def legal_directions(self, piece_id: int) -> List[Direction]:
        return legal_directions(self._board, piece_id, self.rule)

    def request_move(self, piece_id: int, direction: Direction) -> MoveResult:
        board = self._board
        # Always re-validate against the current snapshot
        if not is_legal(board, piece_id, direction, self.rule):
            logger.debug("Rejected move of piece {} {}", piece_id, Direction(direction).value)
            return MoveResult(accepted=False, won=False)

        piece = board.find(piece_id)
        won = self.rule.is_winning_move(piece_id, piece, direction)
        self._board = board.replace(piece.move(direction))
        self.move_count += 1
        if won:
            self.status = GameStatus.WON
            logger.info("Sun escaped after {} moves", self.move_count)
        return MoveResult(accepted=True, won=won)
