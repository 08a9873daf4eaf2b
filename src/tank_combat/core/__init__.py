"""Core combat modules."""

from .actions import IDLE, DiscreteAction, MoveDirection, TurnDirection, heuristic_action
from .controller import FireResult, TankCombatController
from .state import EpisodeOutcome, TankState
from .zones import ZoneCategory

__all__ = [
    "IDLE",
    "DiscreteAction",
    "EpisodeOutcome",
    "FireResult",
    "MoveDirection",
    "TankCombatController",
    "TankState",
    "TurnDirection",
    "ZoneCategory",
    "heuristic_action",
]
