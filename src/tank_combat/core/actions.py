"""Discrete move/turn/fire action buffers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import numbers
from typing import Sequence

from tank_combat.config import ACTION_BRANCH_NAMES, ACTION_BRANCH_SIZE
from tank_combat.errors import InvalidActionError


class MoveDirection(IntEnum):
    BACKWARD = -1
    STOP = 0
    FORWARD = 1


class TurnDirection(IntEnum):
    LEFT = -1
    NONE = 0
    RIGHT = 1


def _branch_value(raw, name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, numbers.Integral):
        raise InvalidActionError(f"{name} branch must be an integer, got {raw!r}")
    return int(raw)


@dataclass(frozen=True)
class DiscreteAction:
    """One decision step: a move code, a turn code and a fire flag."""

    move: MoveDirection = MoveDirection.STOP
    turn: TurnDirection = TurnDirection.NONE
    fire: bool = False

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiscreteAction":
        if len(values) != ACTION_BRANCH_SIZE:
            raise InvalidActionError(
                f"expected {ACTION_BRANCH_SIZE} action branches (move, turn, fire), got {len(values)}"
            )

        move, turn, fire = (
            _branch_value(value, name) for value, name in zip(values, ACTION_BRANCH_NAMES)
        )
        try:
            move_direction = MoveDirection(move)
            turn_direction = TurnDirection(turn)
        except ValueError as exc:
            raise InvalidActionError(f"move and turn must be in {{-1, 0, 1}}, got {move}, {turn}") from exc
        if fire not in (0, 1):
            raise InvalidActionError(f"fire must be 0 or 1, got {fire}")
        return cls(move=move_direction, turn=turn_direction, fire=bool(fire))

    def as_tuple(self) -> tuple[int, int, int]:
        return int(self.move), int(self.turn), int(self.fire)


IDLE = DiscreteAction()


def coerce_action(action: DiscreteAction | Sequence[int]) -> DiscreteAction:
    if isinstance(action, DiscreteAction):
        return action
    return DiscreteAction.from_sequence(action)


def _axis_sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def heuristic_action(move_x: float, move_y: float, fire_pressed: bool) -> DiscreteAction:
    """Map a 2D input axis and a fire button to a discrete action.

    Positive y drives forward, positive x turns right.
    """
    return DiscreteAction(
        move=MoveDirection(_axis_sign(move_y)),
        turn=TurnDirection(_axis_sign(move_x)),
        fire=bool(fire_pressed),
    )
