from __future__ import annotations

from typing import Dict, Tuple

from setting_sun.game import PieceKind


KIND_COLORS: Dict[PieceKind, Tuple[int, int, int]] = {
    PieceKind.SQUARE: (200, 200, 210),
    PieceKind.VERTICAL: (90, 140, 220),
    PieceKind.HORIZONTAL: (120, 200, 120),
    PieceKind.SUN: (240, 160, 40),
}
