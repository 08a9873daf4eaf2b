"""Tank agent wiring the combat controller to its collaborators."""

from __future__ import annotations

import logging
import random
from typing import Protocol, Sequence

import numpy as np

from tank_combat.config import ARENA, TANK, TankSettings
from tank_combat.core import (
    DiscreteAction,
    FireResult,
    TankCombatController,
    ZoneCategory,
    heuristic_action,
)
from tank_combat.core.actions import coerce_action
from tank_combat.core.zones import is_terminal_zone
from tank_combat.runtime import KinematicBody, Vec2, random_point_in_circle
from tank_combat.ui.tank_ui import TankUI

LOGGER = logging.getLogger(__name__)


class ProjectileSpawner(Protocol):
    def spawn(self, origin: Vec2, orientation: float, owner: "Tank") -> object:
        ...


class Tank:
    """A controllable tank: movement, firing, health and reload state."""

    def __init__(
        self,
        name: str,
        settings: TankSettings = TANK,
        spawn_center: Vec2 = Vec2(0.0, 0.0),
        spawn_radius: float = ARENA.spawn_radius,
        spawner: ProjectileSpawner | None = None,
        ui: TankUI | None = None,
    ):
        self.name = name
        self.settings = settings
        self.spawn_center = spawn_center
        self.spawn_radius = spawn_radius
        self.spawner = spawner
        self.ui = ui if ui is not None else TankUI()
        self.body = KinematicBody(
            position=spawn_center,
            heading=0.0,
            move_speed=settings.move_speed,
            turn_speed_degrees=settings.turn_speed_degrees,
        )
        self.controller = TankCombatController(settings, on_fire=self._spawn_projectile)
        self.last_projectile = None
        self.shots_fired = 0

    def __repr__(self) -> str:
        return f"Tank({self.name!r}, health={self.health}, active={self.episode_active})"

    @property
    def position(self) -> Vec2:
        return self.body.position

    @property
    def heading(self) -> float:
        return self.body.heading

    @property
    def health(self) -> int:
        return self.controller.health

    @property
    def episode_active(self) -> bool:
        return self.controller.episode_active

    def on_episode_begin(self, rng: random.Random | None = None) -> None:
        rng = rng or random.Random()
        self.controller.reset_episode()

        offset = random_point_in_circle(rng, self.spawn_radius)
        self.body.teleport(self.spawn_center + offset, rng.uniform(0.0, 360.0))
        self.last_projectile = None
        self.shots_fired = 0

        self.ui.update_health_bar(1.0)
        self.ui.update_reload_bar(1.0)

    def update(self, delta_time: float) -> None:
        self.ui.update_reload_bar(self.controller.tick(delta_time))

    def collect_observations(self) -> np.ndarray:
        return np.array([self.controller.reload_ratio], dtype=np.float32)

    def on_action_received(self, action: DiscreteAction | Sequence[int], delta_time: float) -> FireResult | None:
        action = coerce_action(action)
        if not self.episode_active:
            return None

        self.body.apply_move(action.move, delta_time)
        self.body.apply_turn(action.turn, delta_time)
        return self.fire(action.fire)

    def fire(self, requested: bool) -> FireResult | None:
        if not requested:
            return None
        return self.controller.request_fire()

    def _spawn_projectile(self) -> None:
        self.shots_fired += 1
        if self.spawner is None:
            return
        origin = self.body.point_ahead(self.settings.muzzle_offset)
        self.last_projectile = self.spawner.spawn(origin, self.body.heading, self)

    def hit_on_target(self, enemy_destroyed: bool) -> None:
        self.controller.on_hit(enemy_destroyed)

    def miss_target(self) -> None:
        self.controller.on_miss()

    def take_damage(self, damage: int) -> None:
        self.controller.take_damage(damage)
        self.ui.update_health_bar(self.controller.health_ratio)

    def on_zone_entered(self, zone: ZoneCategory) -> None:
        if is_terminal_zone(zone):
            LOGGER.debug("%s left the arena", self.name)
            self.controller.on_boundary_exit()

    @staticmethod
    def heuristic(move_x: float, move_y: float, fire_pressed: bool) -> DiscreteAction:
        return heuristic_action(move_x, move_y, fire_pressed)
