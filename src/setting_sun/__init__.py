"""Setting Sun sliding-block puzzle."""

from .game import Direction, MoveResult, SettingSunGame

__all__ = ["Direction", "MoveResult", "SettingSunGame"]
