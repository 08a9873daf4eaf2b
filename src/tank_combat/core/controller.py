"""Episode and combat state machine for a single tank."""

from __future__ import annotations

from enum import Enum
import logging
from typing import Callable

from tank_combat.config import (
    PENALTY_DESTROYED,
    PENALTY_LEFT_ARENA,
    PENALTY_MISS,
    REWARD_ENEMY_DESTROYED,
    REWARD_HIT,
    TANK,
    TankSettings,
)
from tank_combat.core.state import EpisodeOutcome, TankState
from tank_combat.errors import ConfigurationError

LOGGER = logging.getLogger(__name__)

EpisodeStartedListener = Callable[[], None]
EpisodeEndedListener = Callable[[EpisodeOutcome], None]
RewardListener = Callable[[float], None]


class FireResult(Enum):
    FIRED = "fired"
    BLOCKED = "blocked"


class TankCombatController:
    """Turns actions and combat events into state changes and reward signals.

    States are Inactive and Active. `reset_episode` moves any state to
    Active; the first terminal event moves Active to Inactive. While
    Inactive every operation other than `reset_episode` is a no-op.
    """

    def __init__(self, settings: TankSettings = TANK, on_fire: Callable[[], object] | None = None):
        self.settings = settings
        self.state = TankState(
            max_health=settings.max_health,
            reload_time=settings.reload_time,
            health=settings.max_health,
        )
        self.on_fire = on_fire
        self._episode_started_listeners: list[EpisodeStartedListener] = []
        self._episode_ended_listeners: list[EpisodeEndedListener] = []
        self._reward_listeners: list[RewardListener] = []

    @property
    def episode_active(self) -> bool:
        return self.state.episode_active

    @property
    def health(self) -> int:
        return self.state.health

    @property
    def accumulated_reward(self) -> float:
        return self.state.accumulated_reward

    @property
    def reload_ratio(self) -> float:
        return self.state.reload_ratio

    @property
    def health_ratio(self) -> float:
        return self.state.health_ratio

    def add_episode_started_listener(self, listener: EpisodeStartedListener) -> None:
        self._episode_started_listeners.append(listener)

    def add_episode_ended_listener(self, listener: EpisodeEndedListener) -> None:
        self._episode_ended_listeners.append(listener)

    def add_reward_listener(self, listener: RewardListener) -> None:
        self._reward_listeners.append(listener)

    def reset_episode(self) -> None:
        state = self.state
        state.health = state.max_health
        state.time_since_last_shot = state.reload_time
        state.episode_active = True
        state.accumulated_reward = 0.0
        state.outcome = None
        state.episode_count += 1
        for listener in self._episode_started_listeners:
            listener()

    def tick(self, delta_time: float) -> float:
        """Advance the reload timer and return the current reload ratio."""
        if delta_time < 0:
            raise ConfigurationError(f"delta_time must be >= 0, got {delta_time}")
        if self.state.episode_active:
            self.state.time_since_last_shot += delta_time
        return self.state.reload_ratio

    def request_fire(self) -> FireResult:
        if not self.state.can_fire:
            return FireResult.BLOCKED

        self.state.time_since_last_shot = 0.0
        if self.on_fire is not None:
            self.on_fire()
        return FireResult.FIRED

    def on_hit(self, target_destroyed: bool) -> None:
        if not self.state.episode_active:
            return

        LOGGER.debug("Hit target%s", " and destroyed it." if target_destroyed else ".")
        if target_destroyed:
            self._add_reward(REWARD_ENEMY_DESTROYED)
            self._end_episode(EpisodeOutcome.ENEMY_DESTROYED)
        else:
            self._add_reward(REWARD_HIT)

    def on_miss(self) -> None:
        if not self.state.episode_active:
            return

        LOGGER.debug("Missed target")
        self._add_reward(PENALTY_MISS)

    def take_damage(self, amount: int) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise ConfigurationError(f"damage must be a positive integer, got {amount!r}")
        if not self.state.episode_active:
            return

        LOGGER.debug("Tank took %d damage", amount)
        remaining = self.state.health - amount
        # Stored health stops at zero; the lethal crossing is decided on the raw value.
        self.state.health = max(0, remaining)
        if remaining <= 0:
            self._add_reward(PENALTY_DESTROYED)
            self._end_episode(EpisodeOutcome.DESTROYED)

    def on_boundary_exit(self) -> None:
        if not self.state.episode_active:
            return

        self._add_reward(PENALTY_LEFT_ARENA)
        self._end_episode(EpisodeOutcome.LEFT_ARENA)

    def _add_reward(self, delta: float) -> None:
        self.state.accumulated_reward += delta
        for listener in self._reward_listeners:
            listener(delta)

    def _end_episode(self, outcome: EpisodeOutcome) -> None:
        self.state.episode_active = False
        self.state.outcome = outcome
        LOGGER.debug("Episode ended: %s", outcome.value)
        for listener in self._episode_ended_listeners:
            listener(outcome)
