from __future__ import annotations

from typing import Iterable, Optional, Tuple

import pygame

from setting_sun.game import GRID_HEIGHT, GRID_WIDTH, Board, Direction, PieceKind
from .palette import KIND_COLORS


def _color_for_kind(kind: PieceKind) -> Tuple[int, int, int]:
    return KIND_COLORS.get(kind, (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 100, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    def window_size(self) -> Tuple[int, int]:
        # Extra row below the board for the exit and status text
        return (
            GRID_WIDTH * self.cell_size + self.margin * 2,
            (GRID_HEIGHT + 1) * self.cell_size + self.margin * 2,
        )

    def cell_at(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        mx, my = pos
        return ((mx - self.margin) // self.cell_size, (my - self.margin) // self.cell_size)

    def _rect(self, x: int, y: int, w: int, h: int) -> pygame.Rect:
        return pygame.Rect(
            self.margin + x * self.cell_size + 2,
            self.margin + y * self.cell_size + 2,
            w * self.cell_size - 4,
            h * self.cell_size - 4,
        )

    def _draw_arrows(self, screen: pygame.Surface, rect: pygame.Rect, directions: Iterable[Direction]) -> None:
        s = self.cell_size // 6
        cx, cy = rect.center
        points = {
            Direction.UP: [(cx, rect.top + 4), (cx - s, rect.top + 4 + s), (cx + s, rect.top + 4 + s)],
            Direction.DOWN: [(cx, rect.bottom - 4), (cx - s, rect.bottom - 4 - s), (cx + s, rect.bottom - 4 - s)],
            Direction.LEFT: [(rect.left + 4, cy), (rect.left + 4 + s, cy - s), (rect.left + 4 + s, cy + s)],
            Direction.RIGHT: [(rect.right - 4, cy), (rect.right - 4 - s, cy - s), (rect.right - 4 - s, cy + s)],
        }
        for direction in directions:
            pygame.draw.polygon(screen, (255, 255, 255), points[direction])

    def draw(
        self,
        screen: pygame.Surface,
        board: Board,
        selected: Optional[int] = None,
        directions: Iterable[Direction] = (),
        message: str = "",
    ) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 36)
        screen.fill((10, 10, 14))
        frame = pygame.Rect(self.margin, self.margin, GRID_WIDTH * self.cell_size, GRID_HEIGHT * self.cell_size)
        pygame.draw.rect(screen, (30, 30, 36), frame)
        # Exit opening on the bottom edge, two cells wide
        exit_rect = pygame.Rect(self.margin + self.cell_size, frame.bottom - 3, 2 * self.cell_size, 6)
        pygame.draw.rect(screen, (240, 160, 40), exit_rect)

        for piece_id, piece in board.items():
            x, y = piece.top_left
            w, h = piece.dimensions()
            rect = self._rect(x, y, w, h)
            pygame.draw.rect(screen, _color_for_kind(piece.kind), rect, border_radius=6)
            if piece_id == selected:
                pygame.draw.rect(screen, (255, 255, 255), rect, 3, border_radius=6)
                self._draw_arrows(screen, rect, directions)
            label = self._font.render(str(piece_id), True, (20, 20, 20))
            screen.blit(label, label.get_rect(center=rect.center))

        if message:
            text = self._font.render(message, True, (230, 230, 230))
            screen.blit(text, text.get_rect(center=(screen.get_width() // 2, frame.bottom + self.cell_size // 2)))
        pygame.display.flip()
