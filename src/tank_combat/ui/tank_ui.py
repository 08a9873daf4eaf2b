"""Health and reload bar state shown above each tank."""

from __future__ import annotations

from tank_combat.core.state import clamp01


class TankUI:
    """Fill amounts for the two billboard bars."""

    def __init__(self):
        self.reload_fill = 1.0
        self.health_fill = 1.0

    def update_reload_bar(self, fill_amount: float) -> None:
        self.reload_fill = clamp01(fill_amount)

    def update_health_bar(self, fill_amount: float) -> None:
        self.health_fill = clamp01(fill_amount)
