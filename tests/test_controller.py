import pytest

from tank_combat.config import TankSettings
from tank_combat.core import EpisodeOutcome, FireResult, TankCombatController
from tank_combat.errors import ConfigurationError


def make_controller(**overrides):
    fired = []
    controller = TankCombatController(TankSettings(**overrides), on_fire=lambda: fired.append(True))
    return controller, fired


def test_starts_inactive_and_ignores_events():
    controller, fired = make_controller()

    assert not controller.episode_active
    assert controller.request_fire() is FireResult.BLOCKED
    controller.on_miss()
    controller.on_hit(True)
    controller.take_damage(10)
    controller.on_boundary_exit()
    controller.tick(5.0)

    assert controller.accumulated_reward == 0.0
    assert controller.health == 100
    assert controller.state.time_since_last_shot == 0.0
    assert fired == []


def test_reset_episode_restores_full_state():
    controller, _ = make_controller(max_health=80, reload_time=2.0)
    controller.reset_episode()
    controller.request_fire()
    controller.take_damage(30)
    controller.on_miss()
    controller.on_boundary_exit()

    controller.reset_episode()

    state = controller.state
    assert state.health == 80
    assert state.time_since_last_shot == 2.0
    assert state.episode_active
    assert state.accumulated_reward == 0.0
    assert state.outcome is None
    assert state.episode_count == 2
    assert controller.request_fire() is FireResult.FIRED


def test_reload_gating():
    controller, fired = make_controller(reload_time=1.0)
    controller.reset_episode()

    assert controller.request_fire() is FireResult.FIRED
    assert controller.state.time_since_last_shot == 0.0

    for _ in range(3):
        controller.tick(0.25)
        assert controller.request_fire() is FireResult.BLOCKED
    assert controller.reload_ratio == pytest.approx(0.75)

    controller.tick(0.25)
    assert controller.request_fire() is FireResult.FIRED
    assert controller.request_fire() is FireResult.BLOCKED
    assert len(fired) == 2


def test_tick_returns_clamped_reload_ratio():
    controller, _ = make_controller(reload_time=1.0)
    controller.reset_episode()
    controller.request_fire()

    assert controller.tick(0.5) == pytest.approx(0.5)
    assert controller.tick(3.0) == 1.0


def test_negative_tick_is_rejected():
    controller, _ = make_controller()
    controller.reset_episode()

    with pytest.raises(ConfigurationError):
        controller.tick(-0.1)


def test_reward_accounting_sequence():
    controller, _ = make_controller()
    controller.reset_episode()

    controller.on_miss()
    controller.on_hit(False)
    controller.on_hit(True)

    assert controller.accumulated_reward == pytest.approx(1.05)
    assert not controller.episode_active
    assert controller.state.outcome is EpisodeOutcome.ENEMY_DESTROYED


def test_damage_decreases_health_until_lethal():
    controller, _ = make_controller(max_health=100)
    controller.reset_episode()

    controller.take_damage(30)
    assert controller.health == 70
    assert controller.episode_active
    assert controller.accumulated_reward == 0.0

    controller.take_damage(80)
    assert controller.health == 0
    assert controller.accumulated_reward == pytest.approx(-1.0)
    assert not controller.episode_active
    assert controller.state.outcome is EpisodeOutcome.DESTROYED


def test_exact_lethal_damage_ends_episode():
    controller, _ = make_controller(max_health=50)
    controller.reset_episode()

    controller.take_damage(50)

    assert controller.health == 0
    assert controller.state.outcome is EpisodeOutcome.DESTROYED


def test_damage_after_episode_end_is_ignored():
    controller, _ = make_controller()
    controller.reset_episode()
    controller.on_boundary_exit()

    controller.take_damage(40)

    assert controller.health == 100


@pytest.mark.parametrize("amount", [0, -5, 2.5, True])
def test_invalid_damage_is_rejected(amount):
    controller, _ = make_controller()
    controller.reset_episode()

    with pytest.raises(ConfigurationError):
        controller.take_damage(amount)
    assert controller.health == 100


def test_first_terminal_event_wins():
    controller, _ = make_controller(max_health=10)
    ended = []
    controller.add_episode_ended_listener(ended.append)
    controller.reset_episode()

    controller.on_boundary_exit()
    controller.take_damage(20)
    controller.on_hit(True)
    controller.on_boundary_exit()

    assert ended == [EpisodeOutcome.LEFT_ARENA]
    assert controller.accumulated_reward == pytest.approx(-1.0)
    assert controller.health == 10


def test_listeners_receive_events_in_order():
    controller, _ = make_controller()
    events = []
    controller.add_episode_started_listener(lambda: events.append("started"))
    controller.add_reward_listener(lambda delta: events.append(("reward", delta)))
    controller.add_episode_ended_listener(lambda outcome: events.append(("ended", outcome)))

    controller.reset_episode()
    controller.on_hit(False)
    controller.on_hit(True)

    assert events == [
        "started",
        ("reward", 0.1),
        ("reward", 1.0),
        ("ended", EpisodeOutcome.ENEMY_DESTROYED),
    ]


def test_fire_without_spawner_still_resets_timer():
    controller = TankCombatController(TankSettings())
    controller.reset_episode()

    assert controller.request_fire() is FireResult.FIRED
    assert controller.reload_ratio == 0.0


def test_fire_ready_when_fractional_ticks_sum_to_reload_time():
    controller, fired = make_controller(reload_time=1.0)
    controller.reset_episode()
    controller.request_fire()

    for _ in range(9):
        controller.tick(0.1)
    assert controller.request_fire() is FireResult.BLOCKED

    controller.tick(0.1)
    assert controller.request_fire() is FireResult.FIRED
    assert len(fired) == 2
