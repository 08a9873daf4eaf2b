import logging

from tank_combat.core import EpisodeOutcome
from tank_combat.logging_utils import format_key_values, log_key_values, log_run_context


def test_format_key_values_skips_none_and_formats_values():
    text = format_key_values(
        {"episode": 3, "render": True, "reward": 0.5, "outcome": EpisodeOutcome.LEFT_ARENA, "seed": None}
    )

    assert text == "episode=3\trender=on\treward=0.500\toutcome=left_arena"


def test_log_key_values_with_prefix(caplog):
    caplog.set_level(logging.INFO, logger="tank_combat.test")

    log_key_values("tank_combat.test", {"wins": 2}, prefix="Summary")

    assert caplog.records[-1].getMessage() == "Summary\twins=2"


def test_log_run_context_titles_keys(caplog):
    caplog.set_level(logging.INFO, logger="tank_combat.run")

    log_run_context("play-baseline", {"episodes": 5, "step_dt": 0.02, "seed": None})

    assert caplog.records[-1].getMessage() == "Play Baseline\tEpisodes: 5\tStep Dt: 0.020"
