"""Human-play loop for the arena."""

from __future__ import annotations

if __package__ is None or __package__ == "":
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import logging

import arcade

from tank_combat.config import FLAGS, FPS, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from tank_combat.logging_utils import configure_logging, log_key_values, log_run_context
from tank_combat.tank import Tank
from tank_combat.train.env import TrainingEnv
from tank_combat.ui.renderer import Renderer

LOGGER = logging.getLogger("tank_combat.play")


class HumanGameWindow(arcade.Window):
    """Drives the learner tank from the keyboard."""

    def __init__(self, env: TrainingEnv):
        super().__init__(SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, update_rate=1 / FPS)
        self.env = env
        self.renderer = Renderer(env, SCREEN_WIDTH, SCREEN_HEIGHT)
        self.pressed_keys: set[int] = set()
        self.episode = 0
        self._start_episode()

    def _start_episode(self) -> None:
        self.env.reset()
        self.episode += 1

    def _axis(self, positive_keys, negative_keys) -> float:
        positive = any(key in self.pressed_keys for key in positive_keys)
        negative = any(key in self.pressed_keys for key in negative_keys)
        return float(positive) - float(negative)

    def on_key_press(self, symbol: int, modifiers: int) -> None:
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        self.pressed_keys.add(symbol)

    def on_key_release(self, symbol: int, modifiers: int) -> None:
        self.pressed_keys.discard(symbol)

    def on_update(self, delta_time: float) -> None:
        action = Tank.heuristic(
            move_x=self._axis((arcade.key.D, arcade.key.RIGHT), (arcade.key.A, arcade.key.LEFT)),
            move_y=self._axis((arcade.key.W, arcade.key.UP), (arcade.key.S, arcade.key.DOWN)),
            fire_pressed=arcade.key.SPACE in self.pressed_keys,
        )
        _, _, done, info = self.env.step(action)
        if done:
            log_key_values(
                LOGGER.name,
                {
                    "episode": self.episode,
                    "outcome": info["outcome"] or "timeout",
                    "reward": self.env.learner.controller.accumulated_reward,
                    "steps": info["steps"],
                },
            )
            self._start_episode()

    def on_draw(self) -> None:
        self.clear()
        self.renderer.draw_frame()


def run_human() -> None:
    configure_logging()
    env = TrainingEnv(seed=FLAGS.seed)
    log_run_context(
        "play-human",
        {
            "seed": FLAGS.seed,
            "fps": FPS,
            "step_dt": env.training_settings.step_dt,
        },
    )
    HumanGameWindow(env)
    arcade.run()


if __name__ == "__main__":
    run_human()
