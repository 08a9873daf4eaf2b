"""Training environment wrapping the arena with RL rewards."""

from __future__ import annotations

import logging
import random
from typing import Any, Sequence

import numpy as np

from tank_combat.arena import Arena
from tank_combat.config import ARENA, TANK, TRAINING, ArenaSettings, TankSettings, TrainingSettings
from tank_combat.core import DiscreteAction, MoveDirection, TurnDirection
from tank_combat.core.actions import coerce_action
from tank_combat.runtime import Vec2
from tank_combat.tank import Tank

LOGGER = logging.getLogger(__name__)


class ScriptedOpponent:
    """Random-walk opponent that occasionally fires."""

    def __init__(self, settings: TrainingSettings, rng: random.Random):
        self.settings = settings
        self.rng = rng

    def act(self) -> DiscreteAction:
        move = MoveDirection.STOP
        turn = TurnDirection.NONE
        if self.rng.random() < self.settings.opponent_move_probability:
            move = self.rng.choice([MoveDirection.FORWARD, MoveDirection.BACKWARD])
            turn = self.rng.choice(list(TurnDirection))
        fire = self.rng.random() < self.settings.opponent_fire_probability
        return DiscreteAction(move=move, turn=turn, fire=fire)


class TrainingEnv:
    """Learner tank against a scripted opponent, stepped by a training harness."""

    def __init__(
        self,
        tank_settings: TankSettings = TANK,
        arena_settings: ArenaSettings = ARENA,
        training_settings: TrainingSettings = TRAINING,
        seed: int | None = None,
    ):
        self.training_settings = training_settings
        self.rng = random.Random(seed)
        self.arena = Arena(arena_settings)
        self.learner = self.arena.add_tank(
            Tank(
                "learner",
                tank_settings,
                spawn_center=self.arena.center - Vec2(0.0, arena_settings.spawn_offset),
                spawn_radius=arena_settings.spawn_radius,
            )
        )
        self.opponent = self.arena.add_tank(
            Tank(
                "opponent",
                tank_settings,
                spawn_center=self.arena.center + Vec2(0.0, arena_settings.spawn_offset),
                spawn_radius=arena_settings.spawn_radius,
            )
        )
        self.opponent_policy = ScriptedOpponent(training_settings, self.rng)
        self.steps = 0

    @property
    def tanks(self) -> list[Tank]:
        return self.arena.tanks

    def reset(self) -> np.ndarray:
        self.arena.clear_projectiles()
        self.learner.on_episode_begin(self.rng)
        self.opponent.on_episode_begin(self.rng)
        self.steps = 0
        return self.observation()

    def observation(self) -> np.ndarray:
        controller = self.learner.controller
        return np.array([controller.reload_ratio, controller.health_ratio], dtype=np.float32)

    def step(self, action: DiscreteAction | Sequence[int]) -> tuple[np.ndarray, float, bool, dict[str, Any]]:
        action = coerce_action(action)
        if not self.learner.episode_active:
            return self.observation(), 0.0, True, self._info(truncated=False, events=None)

        dt = self.training_settings.step_dt
        reward_before = self.learner.controller.accumulated_reward

        self.learner.on_action_received(action, dt)
        self.opponent.on_action_received(self.opponent_policy.act(), dt)
        events = self.arena.step(dt)
        for tank in self.tanks:
            tank.update(dt)

        if self.learner.episode_active and not self.opponent.episode_active:
            LOGGER.debug("Opponent episode ended (%s); respawning", self.opponent.controller.state.outcome)
            self.opponent.on_episode_begin(self.rng)

        self.steps += 1
        reward = self.learner.controller.accumulated_reward - reward_before
        truncated = self.learner.episode_active and self.steps >= self.training_settings.max_episode_steps
        done = not self.learner.episode_active or truncated
        return self.observation(), reward, done, self._info(truncated=truncated, events=events)

    def _info(self, truncated: bool, events: dict[str, int] | None) -> dict[str, Any]:
        state = self.learner.controller.state
        return {
            "outcome": state.outcome,
            "health": state.health,
            "reload_ratio": state.reload_ratio,
            "steps": self.steps,
            "truncated": truncated,
            "events": events or {},
        }
