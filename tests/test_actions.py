import pytest

from tank_combat.core import IDLE, DiscreteAction, MoveDirection, TurnDirection, heuristic_action
from tank_combat.errors import InvalidActionError


def test_from_sequence_maps_branches():
    action = DiscreteAction.from_sequence([1, -1, 1])

    assert action.move is MoveDirection.FORWARD
    assert action.turn is TurnDirection.LEFT
    assert action.fire is True
    assert action.as_tuple() == (1, -1, 1)


def test_idle_action():
    assert IDLE.as_tuple() == (0, 0, 0)
    assert DiscreteAction.from_sequence((0, 0, 0)) == IDLE


@pytest.mark.parametrize(
    "values",
    [
        [1, 0],
        [0, 0, 0, 0],
        [2, 0, 0],
        [0, -2, 0],
        [0, 0, -1],
        [0.5, 0, 0],
        [1.0, 0, 0],
        [0, 0, 1.0],
        ["1", 0, 0],
        [None, 0, 0],
    ],
)
def test_from_sequence_rejects_malformed_buffers(values):
    with pytest.raises(InvalidActionError):
        DiscreteAction.from_sequence(values)


@pytest.mark.parametrize(
    "move_x, move_y, fire, expected",
    [
        (0.0, 1.0, False, (1, 0, 0)),
        (0.0, -0.3, False, (-1, 0, 0)),
        (0.7, 0.0, True, (0, 1, 1)),
        (-1.0, 1.0, False, (1, -1, 0)),
        (0.0, 0.0, False, (0, 0, 0)),
    ],
)
def test_heuristic_action(move_x, move_y, fire, expected):
    assert heuristic_action(move_x, move_y, fire).as_tuple() == expected


def test_from_sequence_accepts_numpy_integers():
    import numpy as np

    action = DiscreteAction.from_sequence(np.array([-1, 1, 0], dtype=np.int64))

    assert action.as_tuple() == (-1, 1, 0)
