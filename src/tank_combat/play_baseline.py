"""Run a random policy headlessly to get baseline episode statistics."""

from __future__ import annotations

if __package__ in {None, ""}:
    import sys
    from pathlib import Path

    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from collections import Counter
import logging
import random

from tank_combat.config import BASELINE_EPISODES, FLAGS
from tank_combat.core import DiscreteAction, MoveDirection, TurnDirection
from tank_combat.logging_utils import configure_logging, log_key_values, log_run_context
from tank_combat.train.env import TrainingEnv

LOGGER = logging.getLogger("tank_combat.baseline")


class BaselineRunner:
    """Plays episodes with uniformly random discrete actions."""

    def __init__(self, seed: int | None = None):
        self.env = TrainingEnv(seed=seed)
        self.rng = random.Random(seed)

    def select_action(self) -> DiscreteAction:
        return DiscreteAction(
            move=self.rng.choice(list(MoveDirection)),
            turn=self.rng.choice(list(TurnDirection)),
            fire=self.rng.random() < 0.5,
        )

    def run_episode(self) -> dict[str, object]:
        self.env.reset()
        done = False
        total_reward = 0.0
        info: dict[str, object] = {}
        while not done:
            _, reward, done, info = self.env.step(self.select_action())
            total_reward += reward
        outcome = info["outcome"].value if info["outcome"] is not None else "timeout"
        return {"outcome": outcome, "reward": total_reward, "steps": info["steps"]}

    def run(self, episodes: int = BASELINE_EPISODES) -> Counter:
        outcomes: Counter = Counter()
        total_reward = 0.0
        for episode in range(1, episodes + 1):
            summary = self.run_episode()
            outcomes[summary["outcome"]] += 1
            total_reward += summary["reward"]
            log_key_values(LOGGER.name, {"episode": episode, **summary})

        log_key_values(
            LOGGER.name,
            {
                "episodes": episodes,
                "wins": outcomes["enemy_destroyed"],
                "avg_reward": total_reward / max(1, episodes),
            },
            prefix="Summary",
        )
        return outcomes


def run_baseline(episodes: int = BASELINE_EPISODES) -> Counter:
    configure_logging()
    log_run_context("play-baseline", {"episodes": episodes, "seed": FLAGS.seed})
    return BaselineRunner(seed=FLAGS.seed).run(episodes=episodes)


if __name__ == "__main__":
    run_baseline()
