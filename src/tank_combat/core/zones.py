"""Trigger zone categories resolved when the arena is configured."""

from enum import Enum


class ZoneCategory(Enum):
    ARENA = "arena"
    GROUND_CHECK = "ground_check"


TERMINAL_ZONES = frozenset({ZoneCategory.GROUND_CHECK})


def is_terminal_zone(zone: ZoneCategory) -> bool:
    return zone in TERMINAL_ZONES
