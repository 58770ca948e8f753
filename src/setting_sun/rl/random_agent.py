from __future__ import annotations

import argparse
from typing import Optional

import gymnasium as gym
from loguru import logger

import setting_sun.env  # noqa: F401
from setting_sun.env.wrappers import ResampleInvalidActionWrapper
from setting_sun.game import format_board


def run_random(steps: int = 200, seed: Optional[int] = None) -> float:
    env = ResampleInvalidActionWrapper(gym.make("SettingSun-4x5-v0"))
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)
    total_reward = 0.0
    episodes = 0
    for _ in range(steps):
        # Prefer legal actions if available
        legal = info.get("legal_moves", [])
        if legal:
            piece_id, direction = legal[int(env.np_random.integers(len(legal)))]
            action = env.unwrapped.encode_action(piece_id, direction)
        else:
            action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated:
            logger.info("Sun escaped after {} moves", info["move_count"])
        if terminated or truncated:
            episodes += 1
            obs, info = env.reset()
    logger.info("Final board:\n{}", format_board(env.unwrapped.game.board))
    env.close()
    logger.info("Random agent total reward: {:.2f} over {} finished episodes", total_reward, episodes)
    return total_reward


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Random rollout on the Setting Sun puzzle")
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    args = build_parser().parse_args()
    run_random(steps=args.steps, seed=args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
