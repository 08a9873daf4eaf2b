"""Ground-plane geometry and the kinematic movement executor."""

from __future__ import annotations

import math
import random

from pyglet.math import Vec2

from tank_combat.core.actions import MoveDirection, TurnDirection


def heading_to_vector(heading_degrees: float) -> Vec2:
    """Unit forward vector; heading 0 faces +y and grows clockwise."""
    radians = math.radians(heading_degrees)
    return Vec2(math.sin(radians), math.cos(radians))


def length_squared(vector: Vec2) -> float:
    return vector.dot(vector)


def distance(point_a: Vec2, point_b: Vec2) -> float:
    return math.sqrt(length_squared(point_a - point_b))


def normalize_angle_degrees(angle: float) -> float:
    return angle % 360.0


def random_point_in_circle(rng: random.Random, radius: float) -> Vec2:
    r = radius * math.sqrt(rng.random())
    theta = rng.uniform(0.0, 2.0 * math.pi)
    return Vec2(r * math.cos(theta), r * math.sin(theta))


class KinematicBody:
    """Position and heading integrated directly from discrete commands."""

    def __init__(self, position: Vec2, heading: float, move_speed: float, turn_speed_degrees: float):
        self.position = position
        self.heading = normalize_angle_degrees(heading)
        self.move_speed = move_speed
        self.turn_speed_degrees = turn_speed_degrees
        self.velocity = Vec2(0.0, 0.0)

    @property
    def forward(self) -> Vec2:
        return heading_to_vector(self.heading)

    def apply_move(self, direction: MoveDirection, delta_time: float) -> Vec2:
        """Move along the heading and return the displacement."""
        displacement = self.forward * (self.move_speed * delta_time * int(direction))
        self.position = self.position + displacement
        self.velocity = displacement * (1.0 / delta_time) if delta_time > 0 else Vec2(0.0, 0.0)
        return displacement

    def apply_turn(self, direction: TurnDirection, delta_time: float) -> float:
        turn_amount = int(direction) * self.turn_speed_degrees * delta_time
        self.heading = normalize_angle_degrees(self.heading + turn_amount)
        return turn_amount

    def teleport(self, position: Vec2, heading: float) -> None:
        self.position = position
        self.heading = normalize_angle_degrees(heading)
        self.velocity = Vec2(0.0, 0.0)

    def point_ahead(self, offset: float) -> Vec2:
        return self.position + self.forward * offset
