"""Module entrypoint for `python -m tank_combat`."""

from tank_combat.play_human import run_human


if __name__ == "__main__":
    run_human()
