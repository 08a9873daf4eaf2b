"""Round arena: projectile flight, hit resolution and boundary checks."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from tank_combat.config import ARENA, ArenaSettings
from tank_combat.core import ZoneCategory
from tank_combat.runtime import Vec2, distance, heading_to_vector, length_squared
from tank_combat.tank import Tank

LOGGER = logging.getLogger(__name__)


@dataclass
class Projectile:
    owner: Tank
    position: Vec2
    direction: Vec2
    travelled: float = 0.0
    resolved: bool = False


def _segment_point_distance(start: Vec2, end: Vec2, point: Vec2) -> float:
    segment = end - start
    segment_length_sq = length_squared(segment)
    if segment_length_sq == 0:
        return distance(start, point)
    t = (point - start).dot(segment) / segment_length_sq
    t = max(0.0, min(1.0, t))
    closest = start + segment * t
    return distance(closest, point)


class Arena:
    """Owns the projectiles in flight and reports combat events to tanks.

    Every projectile resolves exactly once, either as a hit on an opposing
    tank with an active episode or as a miss when it runs out of range or
    leaves the arena.
    """

    def __init__(self, settings: ArenaSettings = ARENA, center: Vec2 = Vec2(0.0, 0.0)):
        self.settings = settings
        self.center = center
        self.tanks: list[Tank] = []
        self.projectiles: list[Projectile] = []

    def add_tank(self, tank: Tank) -> Tank:
        tank.spawner = self
        self.tanks.append(tank)
        return tank

    def spawn(self, origin: Vec2, orientation: float, owner: Tank) -> Projectile:
        projectile = Projectile(owner=owner, position=origin, direction=heading_to_vector(orientation))
        self.projectiles.append(projectile)
        return projectile

    def clear_projectiles(self) -> None:
        self.projectiles = []

    def zone_at(self, position: Vec2) -> ZoneCategory:
        if distance(position, self.center) > self.settings.arena_radius:
            return ZoneCategory.GROUND_CHECK
        return ZoneCategory.ARENA

    def step(self, delta_time: float) -> dict[str, int]:
        """Advance projectiles, then apply boundary checks to every tank."""
        events = {"hits": 0, "kills": 0, "misses": 0, "boundary_exits": 0}

        for projectile in self.projectiles:
            self._step_projectile(projectile, delta_time, events)
        self.projectiles = [projectile for projectile in self.projectiles if not projectile.resolved]

        for tank in self.tanks:
            if not tank.episode_active:
                continue
            zone = self.zone_at(tank.position)
            if zone is not ZoneCategory.ARENA:
                tank.on_zone_entered(zone)
                events["boundary_exits"] += 1
        return events

    def _step_projectile(self, projectile: Projectile, delta_time: float, events: dict[str, int]) -> None:
        step_length = self.settings.projectile_speed * delta_time
        remaining = self.settings.projectile_range - projectile.travelled
        step_length = max(0.0, min(step_length, remaining))

        start = projectile.position
        end = start + projectile.direction * step_length
        projectile.position = end
        projectile.travelled += step_length

        target = self._first_target_hit(projectile, start, end)
        if target is not None:
            projectile.resolved = True
            target.take_damage(self.settings.projectile_damage)
            destroyed = target.health <= 0
            LOGGER.debug("%s hit %s (destroyed=%s)", projectile.owner.name, target.name, destroyed)
            projectile.owner.hit_on_target(destroyed)
            events["hits"] += 1
            if destroyed:
                events["kills"] += 1
            return

        out_of_range = math.isclose(projectile.travelled, self.settings.projectile_range) or (
            projectile.travelled >= self.settings.projectile_range
        )
        if out_of_range or self.zone_at(end) is not ZoneCategory.ARENA:
            projectile.resolved = True
            projectile.owner.miss_target()
            events["misses"] += 1

    def _first_target_hit(self, projectile: Projectile, start: Vec2, end: Vec2) -> Tank | None:
        candidates = []
        for tank in self.tanks:
            if tank is projectile.owner or not tank.episode_active:
                continue
            if _segment_point_distance(start, end, tank.position) <= tank.settings.hit_radius:
                candidates.append((distance(start, tank.position), tank))
        if not candidates:
            return None
        return min(candidates, key=lambda item: item[0])[1]
