"""Runtime helpers for Tank Combat."""

from .geometry import (
    KinematicBody,
    Vec2,
    distance,
    heading_to_vector,
    length_squared,
    normalize_angle_degrees,
    random_point_in_circle,
)

__all__ = [
    "KinematicBody",
    "Vec2",
    "distance",
    "heading_to_vector",
    "length_squared",
    "normalize_angle_degrees",
    "random_point_in_circle",
]
