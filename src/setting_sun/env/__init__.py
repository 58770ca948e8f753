"""Gymnasium environments for Setting Sun."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="SettingSun-4x5-v0",
    entry_point="setting_sun.env.setting_sun_env:SettingSunEnv",
)

__all__ = ["SettingSun-4x5-v0"]
