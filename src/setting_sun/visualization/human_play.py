from __future__ import annotations

from typing import Dict, Optional

import pygame
from loguru import logger

from setting_sun.game import Board, Direction, SettingSunGame
from .renderer import Renderer


KEY_TO_DIRECTION: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def piece_at(board: Board, cell) -> Optional[int]:
    for piece_id, piece in board.items():
        if tuple(cell) in piece.cells():
            return piece_id
    return None


def handle_key(game: SettingSunGame, selected: Optional[int], key: int) -> Optional[int]:
    """Apply a key press and return the selection afterwards.

    Moves are ignored once the Sun has escaped; only reset is accepted.
    """
    if key == pygame.K_r:
        game.reset()
        return None
    if key in KEY_TO_DIRECTION and selected is not None and not game.won:
        result = game.request_move(selected, KEY_TO_DIRECTION[key])
        if result.won:
            logger.info("You win!!")
    return selected


def run() -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = SettingSunGame()
        renderer = Renderer()
        screen = pygame.display.set_mode(renderer.window_size())
        pygame.display.set_caption("Setting Sun")

        selected: Optional[int] = None
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    selected = piece_at(game.board, renderer.cell_at(event.pos))
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        selected = handle_key(game, selected, event.key)

            directions = game.legal_directions(selected) if selected is not None else []
            if game.won:
                message = "You win!! Press R to restart"
            else:
                message = f"Moves: {game.move_count}   R: reset"
            renderer.draw(screen, game.board, selected, directions, message)
            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
