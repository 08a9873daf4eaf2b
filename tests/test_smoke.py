from tank_combat.core import IDLE
from tank_combat.train.env import TrainingEnv


def test_import_package():
    import tank_combat

    assert tank_combat.__version__


def test_env_runs_a_few_steps():
    env = TrainingEnv(seed=7)
    observation = env.reset()

    assert observation.shape == (2,)
    for _ in range(10):
        observation, reward, done, info = env.step(IDLE)

    assert info["steps"] == 10
    assert not done
