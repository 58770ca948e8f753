from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


GRID_WIDTH = 4
GRID_HEIGHT = 5

Coordinate = Tuple[int, int]


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_DELTAS: Dict[Direction, Coordinate] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def shift(position: Coordinate, direction: Direction) -> Coordinate:
    """Translate `position` by one cell in `direction`."""
    dx, dy = _DELTAS[Direction(direction)]
    x, y = position
    return (x + dx, y + dy)


def is_inside(x: int, y: int) -> bool:
    return 0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT
