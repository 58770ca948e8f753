from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from setting_sun.game import GRID_HEIGHT, GRID_WIDTH, Direction, GameConfig, SettingSunGame
from setting_sun.visualization.palette import KIND_COLORS

DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


class SettingSunEnv(gym.Env):
    """
    Setting Sun as a single-agent environment.

    Action `a` slides piece `piece_ids[a // 4]` one cell in `DIRECTIONS[a % 4]`.
    Illegal moves leave the board unchanged and are penalized. The episode
    terminates when the Sun leaves through the exit.
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        win_reward: float = 1.0,
        invalid_action_penalty: float = -0.1,
        step_penalty: float = -0.01,
    ) -> None:
        super().__init__()
        self.game = SettingSunGame(config)
        self.render_mode = render_mode

        self.win_reward = float(win_reward)
        self.invalid_action_penalty = float(invalid_action_penalty)
        self.step_penalty = float(step_penalty)

        self.piece_ids: List[int] = sorted(self.game.board)
        n = len(self.piece_ids)

        self.observation_space = spaces.Box(low=0, high=n, shape=(GRID_HEIGHT, GRID_WIDTH), dtype=np.int8)
        self.action_space = spaces.Discrete(n * len(DIRECTIONS))

        self._steps = 0

    def decode_action(self, action: int) -> Tuple[int, Direction]:
        index, d = divmod(int(action), len(DIRECTIONS))
        return self.piece_ids[index], DIRECTIONS[d]

    def encode_action(self, piece_id: int, direction: Direction) -> int:
        return self.piece_ids.index(piece_id) * len(DIRECTIONS) + DIRECTIONS.index(Direction(direction))

    def action_masks(self) -> np.ndarray:
        mask = np.zeros((self.action_space.n,), dtype=np.bool_)
        for piece_id in self.piece_ids:
            for direction in self.game.legal_directions(piece_id):
                mask[self.encode_action(piece_id, direction)] = True
        return mask

    def _get_obs(self) -> np.ndarray:
        return self.game.board.occupancy()

    def _get_info(self) -> Dict[str, Any]:
        mask = self.action_masks()
        return {
            "action_mask": mask,
            "legal_moves": [self.decode_action(a) for a in np.flatnonzero(mask)],
            "move_count": self.game.move_count,
            "won": self.game.won,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        if not self.action_space.contains(action):
            raise ValueError(f"Action {action!r} is outside {self.action_space}")
        piece_id, direction = self.decode_action(action)

        result = self.game.request_move(piece_id, direction)

        reward_components: Dict[str, float] = {"step": self.step_penalty}
        if not result.accepted:
            reward_components["invalid"] = self.invalid_action_penalty
        if result.won:
            reward_components["win"] = self.win_reward

        self._steps += 1
        terminated = bool(result.won)
        truncated = not terminated and self._steps >= self.game.config.max_episode_steps

        info = self._get_info()
        info["accepted"] = result.accepted
        info["reward_components"] = reward_components
        return self._get_obs(), float(sum(reward_components.values())), terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            cell = 24
            img = np.full((GRID_HEIGHT * cell, GRID_WIDTH * cell, 3), 30, dtype=np.uint8)
            for piece in self.game.board.values():
                color = KIND_COLORS[piece.kind]
                for x, y in piece.cells():
                    if 0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT:
                        img[y * cell : (y + 1) * cell - 1, x * cell : (x + 1) * cell - 1, :] = color
            return img
        # human rendering delegated to setting_sun.visualization
        return None

    def close(self) -> None:
        pass
