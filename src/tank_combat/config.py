"""Central configuration for Tank Combat."""

from __future__ import annotations

from dataclasses import dataclass
import os

from tank_combat.errors import ConfigurationError


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _require_positive(name: str, value: float) -> None:
    if value <= 0:
        raise ConfigurationError(f"{name} must be > 0, got {value}")


@dataclass(frozen=True)
class RuntimeFlags:
    log_level: str
    seed: int | None


@dataclass(frozen=True)
class TankSettings:
    max_health: int = 100
    move_speed: float = 10.0
    turn_speed_degrees: float = 180.0
    reload_time: float = 1.0
    muzzle_offset: float = 1.5
    hit_radius: float = 1.0

    def __post_init__(self):
        if isinstance(self.max_health, bool) or not isinstance(self.max_health, int):
            raise ConfigurationError(f"max_health must be an integer, got {self.max_health!r}")
        _require_positive("max_health", self.max_health)
        _require_positive("reload_time", self.reload_time)
        _require_positive("hit_radius", self.hit_radius)
        if self.move_speed < 0 or self.turn_speed_degrees < 0:
            raise ConfigurationError("move_speed and turn_speed_degrees must be >= 0")


@dataclass(frozen=True)
class ArenaSettings:
    arena_radius: float = 25.0
    spawn_radius: float = 10.0
    spawn_offset: float = 10.0
    projectile_speed: float = 30.0
    projectile_range: float = 40.0
    projectile_damage: int = 25

    def __post_init__(self):
        _require_positive("arena_radius", self.arena_radius)
        _require_positive("projectile_speed", self.projectile_speed)
        _require_positive("projectile_range", self.projectile_range)
        if isinstance(self.projectile_damage, bool) or not isinstance(self.projectile_damage, int):
            raise ConfigurationError(f"projectile_damage must be an integer, got {self.projectile_damage!r}")
        _require_positive("projectile_damage", self.projectile_damage)
        if self.spawn_radius < 0:
            raise ConfigurationError(f"spawn_radius must be >= 0, got {self.spawn_radius}")
        if self.spawn_offset + self.spawn_radius >= self.arena_radius:
            raise ConfigurationError("spawn area must lie inside the arena")

    @property
    def diameter(self) -> float:
        return self.arena_radius * 2


@dataclass(frozen=True)
class TrainingSettings:
    step_dt: float = 1 / 50
    max_episode_steps: int = 2500
    opponent_fire_probability: float = 0.05
    opponent_move_probability: float = 0.2

    def __post_init__(self):
        _require_positive("step_dt", self.step_dt)
        _require_positive("max_episode_steps", self.max_episode_steps)
        for name in ("opponent_fire_probability", "opponent_move_probability"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be in [0, 1], got {value}")


FLAGS = RuntimeFlags(
    log_level=os.getenv("TANK_COMBAT_LOG_LEVEL", "INFO"),
    seed=_env_int("TANK_COMBAT_SEED"),
)

TANK = TankSettings()
ARENA = ArenaSettings()
TRAINING = TrainingSettings()

# Runtime
FPS = 60
WINDOW_TITLE = "Tank Combat"
BASELINE_EPISODES = 10

# Rendering
PIXELS_PER_UNIT = 12
SCREEN_WIDTH = int(ARENA.diameter * PIXELS_PER_UNIT) + 40
SCREEN_HEIGHT = SCREEN_WIDTH
TANK_SIZE_PX = 18
BAR_WIDTH_PX = 28
BAR_HEIGHT_PX = 4
BAR_GAP_PX = 2
BAR_OFFSET_PX = 16

# Colors
COLOR_AQUA = (102, 212, 200)
COLOR_DEEP_TEAL = (38, 110, 105)
COLOR_CORAL = (244, 137, 120)
COLOR_BRICK_RED = (150, 62, 54)
COLOR_SLATE_GRAY = (97, 101, 107)
COLOR_CHARCOAL = (28, 30, 36)
COLOR_NEAR_BLACK = (18, 18, 22)
COLOR_SOFT_WHITE = (238, 238, 242)
COLOR_AMBER = (255, 224, 130)
COLOR_HEALTH = (120, 200, 110)

# Action layout
ACTION_BRANCH_NAMES = ["move", "turn", "fire"]
ACTION_BRANCH_SIZE = len(ACTION_BRANCH_NAMES)

# Reward shaping
REWARD_ENEMY_DESTROYED = 1.0
REWARD_HIT = 0.1
PENALTY_MISS = -0.05
PENALTY_DESTROYED = -1.0
PENALTY_LEFT_ARENA = -1.0
REWARD_COMPONENTS = {
    "enemy_destroyed": REWARD_ENEMY_DESTROYED,
    "hit": REWARD_HIT,
    "miss": PENALTY_MISS,
    "destroyed": PENALTY_DESTROYED,
    "left_arena": PENALTY_LEFT_ARENA,
}
