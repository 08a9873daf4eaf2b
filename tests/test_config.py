import pytest

from tank_combat import config
from tank_combat.config import ArenaSettings, TankSettings, TrainingSettings
from tank_combat.errors import ConfigurationError


def test_default_tank_settings():
    settings = TankSettings()

    assert settings.max_health == 100
    assert settings.move_speed == 10.0
    assert settings.turn_speed_degrees == 180.0
    assert settings.reload_time == 1.0


def test_reward_components_cover_every_signal():
    assert config.REWARD_COMPONENTS == {
        "enemy_destroyed": 1.0,
        "hit": 0.1,
        "miss": -0.05,
        "destroyed": -1.0,
        "left_arena": -1.0,
    }


@pytest.mark.parametrize(
    "factory",
    [
        lambda: TankSettings(max_health=0),
        lambda: TankSettings(max_health=10.5),
        lambda: TankSettings(reload_time=0.0),
        lambda: TankSettings(move_speed=-1.0),
        lambda: ArenaSettings(spawn_offset=20.0, spawn_radius=10.0),
        lambda: ArenaSettings(projectile_damage=0),
        lambda: TrainingSettings(step_dt=0.0),
        lambda: TrainingSettings(opponent_fire_probability=1.5),
    ],
)
def test_invalid_settings_are_rejected(factory):
    with pytest.raises(ConfigurationError):
        factory()


def test_env_int_parses_and_validates(monkeypatch):
    monkeypatch.setenv("TANK_COMBAT_TEST_SEED", "42")
    assert config._env_int("TANK_COMBAT_TEST_SEED") == 42

    monkeypatch.setenv("TANK_COMBAT_TEST_SEED", " ")
    assert config._env_int("TANK_COMBAT_TEST_SEED") is None

    monkeypatch.setenv("TANK_COMBAT_TEST_SEED", "abc")
    with pytest.raises(ConfigurationError):
        config._env_int("TANK_COMBAT_TEST_SEED")
