from __future__ import annotations

import numpy as np
import gymnasium as gym
from gymnasium import spaces


class ResampleInvalidActionWrapper(gym.Wrapper):
    """If a sampled action is illegal, resample uniformly among legal ones.

    Useful for agents that ignore the action mask.
    """

    def step(self, action):  # type: ignore[override]
        if isinstance(self.action_space, spaces.Discrete):
            mask = self.action_masks()
            if 0 <= int(action) < mask.shape[0] and not bool(mask[int(action)]):
                valid_idxs = np.flatnonzero(mask)
                if valid_idxs.size > 0:
                    action = int(self.np_random.choice(valid_idxs))
        return self.env.step(action)

    def action_masks(self) -> np.ndarray:
        if hasattr(self.env.unwrapped, "action_masks"):
            return self.env.unwrapped.action_masks()
        raise AttributeError("Underlying env does not provide action_masks")
