"""Per-tank combat state that survives across episodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math


class EpisodeOutcome(Enum):
    ENEMY_DESTROYED = "enemy_destroyed"
    DESTROYED = "destroyed"
    LEFT_ARENA = "left_arena"

    @property
    def is_success(self) -> bool:
        return self is EpisodeOutcome.ENEMY_DESTROYED


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


@dataclass
class TankState:
    """Mutable health, reload and reward bookkeeping for one tank.

    The instance is created once and reset at every episode start; it is
    never replaced.
    """

    max_health: int
    reload_time: float
    health: int = 0
    time_since_last_shot: float = 0.0
    episode_active: bool = False
    accumulated_reward: float = 0.0
    outcome: EpisodeOutcome | None = None
    episode_count: int = 0

    @property
    def reload_ratio(self) -> float:
        return clamp01(self.time_since_last_shot / self.reload_time)

    @property
    def health_ratio(self) -> float:
        return clamp01(self.health / self.max_health)

    @property
    def can_fire(self) -> bool:
        if not self.episode_active:
            return False
        # Summed frame times can land a rounding error short of the reload time.
        return self.time_since_last_shot >= self.reload_time or math.isclose(
            self.time_since_last_shot, self.reload_time
        )
