from __future__ import annotations

import unittest

import gymnasium as gym
import numpy as np

from exit_search import shortest_exit_path

import setting_sun.env  # noqa: F401
from setting_sun.env.setting_sun_env import SettingSunEnv
from setting_sun.env.wrappers import ResampleInvalidActionWrapper
from setting_sun.game import SUN_ID, Direction, GameConfig, PieceKind, build_board
from setting_sun.rl.random_agent import run_random
from setting_sun.visualization.palette import KIND_COLORS


class SettingSunEnvTests(unittest.TestCase):
    def setUp(self) -> None:
        self.env = SettingSunEnv()

    def tearDown(self) -> None:
        self.env.close()

    def test_spaces(self) -> None:
        self.assertEqual(self.env.action_space.n, 40)
        self.assertEqual(self.env.observation_space.shape, (5, 4))

    def test_reset_provides_observation_and_mask(self) -> None:
        obs, info = self.env.reset(seed=0)
        self.assertEqual(obs.shape, (5, 4))
        self.assertEqual(obs.dtype, np.int8)
        self.assertTrue(self.env.observation_space.contains(obs))
        np.testing.assert_array_equal(obs, build_board().occupancy())
        self.assertEqual(int(info["action_mask"].sum()), 6)
        np.testing.assert_array_equal(self.env.action_masks(), info["action_mask"])
        self.assertIn((3, Direction.LEFT), info["legal_moves"])
        self.assertFalse(info["won"])

    def test_action_encoding(self) -> None:
        for action in range(self.env.action_space.n):
            piece_id, direction = self.env.decode_action(action)
            self.assertEqual(self.env.encode_action(piece_id, direction), action)
        self.assertEqual(self.env.decode_action(5), (1, Direction.DOWN))

    def test_legal_step(self) -> None:
        self.env.reset()
        action = self.env.encode_action(0, Direction.DOWN)
        obs, reward, terminated, truncated, info = self.env.step(action)
        self.assertTrue(info["accepted"])
        self.assertAlmostEqual(reward, -0.01)
        self.assertFalse(terminated)
        self.assertFalse(truncated)
        self.assertEqual(int(obs[2, 0]), 1)
        self.assertEqual(info["move_count"], 1)

    def test_illegal_step_is_penalized(self) -> None:
        obs0, _ = self.env.reset()
        action = self.env.encode_action(SUN_ID, Direction.UP)
        obs, reward, terminated, truncated, info = self.env.step(action)
        self.assertFalse(info["accepted"])
        self.assertAlmostEqual(reward, -0.11)
        np.testing.assert_array_equal(obs, obs0)

    def test_action_outside_space(self) -> None:
        self.env.reset()
        with self.assertRaises(ValueError):
            self.env.step(40)

    def test_truncation(self) -> None:
        env = SettingSunEnv(config=GameConfig(max_episode_steps=3))
        env.reset()
        action = env.encode_action(SUN_ID, Direction.UP)
        results = [env.step(action) for _ in range(3)]
        self.assertEqual([r[3] for r in results], [False, False, True])
        self.assertFalse(any(r[2] for r in results))

    def test_winning_episode(self) -> None:
        path = shortest_exit_path(build_board())
        self.assertIsNotNone(path)
        self.env.reset()
        for piece_id, direction in path:
            _, _, terminated, _, _ = self.env.step(self.env.encode_action(piece_id, direction))
            self.assertFalse(terminated)
        obs, reward, terminated, truncated, info = self.env.step(self.env.encode_action(SUN_ID, Direction.DOWN))
        self.assertTrue(terminated)
        self.assertFalse(truncated)
        self.assertTrue(info["won"])
        self.assertAlmostEqual(reward, 0.99)
        # Half of the Sun has left the grid
        self.assertEqual(int(np.count_nonzero(obs == SUN_ID + 1)), 2)

    def test_render_rgb_array(self) -> None:
        env = SettingSunEnv(render_mode="rgb_array")
        env.reset()
        img = env.render()
        self.assertEqual(img.shape, (5 * 24, 4 * 24, 3))
        # Sun cell (1, 0) and square cell (1, 3) use the shared palette
        self.assertEqual(tuple(img[5, 24 + 5]), KIND_COLORS[PieceKind.SUN])
        self.assertEqual(tuple(img[3 * 24 + 5, 24 + 5]), KIND_COLORS[PieceKind.SQUARE])
        self.assertIsNone(SettingSunEnv().render())


class RegistrationAndWrapperTests(unittest.TestCase):
    def test_gym_make(self) -> None:
        env = gym.make("SettingSun-4x5-v0")
        obs, info = env.reset(seed=1)
        self.assertEqual(obs.shape, (5, 4))
        env.close()

    def test_resample_invalid_action(self) -> None:
        env = ResampleInvalidActionWrapper(SettingSunEnv())
        env.reset(seed=3)
        action = env.unwrapped.encode_action(SUN_ID, Direction.UP)
        _, _, _, _, info = env.step(action)
        self.assertTrue(info["accepted"])
        self.assertEqual(info["move_count"], 1)

    def test_random_agent_runs(self) -> None:
        total = run_random(steps=50, seed=0)
        self.assertIsInstance(total, float)
        self.assertLess(total, 0.0)


if __name__ == "__main__":
    unittest.main()
