import logging

from tank_combat.play_baseline import BaselineRunner


def test_baseline_runner_plays_requested_episodes(caplog):
    caplog.set_level(logging.INFO, logger="tank_combat.baseline")
    runner = BaselineRunner(seed=5)

    outcomes = runner.run(episodes=2)

    assert sum(outcomes.values()) == 2
    assert set(outcomes) <= {"enemy_destroyed", "destroyed", "left_arena", "timeout"}
    assert caplog.records[-1].getMessage().startswith("Summary\tepisodes=2")


def test_baseline_episode_summary_fields():
    summary = BaselineRunner(seed=9).run_episode()

    assert set(summary) == {"outcome", "reward", "steps"}
    assert summary["steps"] >= 1
