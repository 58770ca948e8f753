"""Game module for Setting Sun.

Exports the puzzle engine and supporting classes:
- Direction: The four slide directions
- Square, VerticalRect, HorizontalRect, SunSquare: Rigid piece shapes
- Board: Immutable mapping of piece identity to piece
- ExitRule: Win condition for the Sun leaving through the bottom exit
- SettingSunGame: Engine driver owning the current board
"""

from .geometry import GRID_HEIGHT, GRID_WIDTH, Coordinate, Direction
from .pieces import HorizontalRect, Piece, PieceKind, Square, SunSquare, VerticalRect, make_piece
from .grid import Board, PieceNotFoundError, format_board
from .rules import SUN_ID, ExitRule, is_legal, legal_directions, legal_moves
from .core import (
    INITIAL_LAYOUT,
    GameConfig,
    GameStatus,
    MoveResult,
    PieceSpec,
    SettingSunGame,
    build_board,
)

__all__ = [
    "GRID_WIDTH",
    "GRID_HEIGHT",
    "Coordinate",
    "Direction",
    "Piece",
    "PieceKind",
    "Square",
    "VerticalRect",
    "HorizontalRect",
    "SunSquare",
    "make_piece",
    "Board",
    "PieceNotFoundError",
    "format_board",
    "SUN_ID",
    "ExitRule",
    "is_legal",
    "legal_directions",
    "legal_moves",
    "INITIAL_LAYOUT",
    "GameConfig",
    "GameStatus",
    "MoveResult",
    "PieceSpec",
    "SettingSunGame",
    "build_board",
]
