"""Arcade renderer for the tank arena and the billboard bars."""

from __future__ import annotations

import arcade

from tank_combat.config import (
    BAR_GAP_PX,
    BAR_HEIGHT_PX,
    BAR_OFFSET_PX,
    BAR_WIDTH_PX,
    COLOR_AMBER,
    COLOR_AQUA,
    COLOR_BRICK_RED,
    COLOR_CHARCOAL,
    COLOR_CORAL,
    COLOR_DEEP_TEAL,
    COLOR_HEALTH,
    COLOR_NEAR_BLACK,
    COLOR_SLATE_GRAY,
    COLOR_SOFT_WHITE,
    PIXELS_PER_UNIT,
    TANK_SIZE_PX,
)
from tank_combat.runtime import Vec2

TANK_COLORS = [
    (COLOR_DEEP_TEAL, COLOR_AQUA),
    (COLOR_BRICK_RED, COLOR_CORAL),
]


class Renderer:
    """Draw tanks, projectiles and per-tank bars with Arcade primitives."""

    def __init__(self, env, width: int, height: int):
        self.env = env
        self.width = int(width)
        self.height = int(height)

    def to_screen(self, position: Vec2) -> tuple[float, float]:
        center = self.env.arena.center
        return (
            self.width / 2 + (position.x - center.x) * PIXELS_PER_UNIT,
            self.height / 2 + (position.y - center.y) * PIXELS_PER_UNIT,
        )

    def draw_frame(self) -> None:
        arcade.draw_lbwh_rectangle_filled(0, 0, self.width, self.height, COLOR_NEAR_BLACK)
        center_x, center_y = self.to_screen(self.env.arena.center)
        radius_px = self.env.arena.settings.arena_radius * PIXELS_PER_UNIT
        arcade.draw_circle_filled(center_x, center_y, radius_px, COLOR_CHARCOAL)
        arcade.draw_circle_outline(center_x, center_y, radius_px, COLOR_SLATE_GRAY, 2)

        for index, tank in enumerate(self.env.tanks):
            if not tank.episode_active:
                continue
            fill_color, outline_color = TANK_COLORS[index % len(TANK_COLORS)]
            self._draw_tank(tank, fill_color, outline_color)

        for projectile in self.env.arena.projectiles:
            x, y = self.to_screen(projectile.position)
            arcade.draw_circle_filled(x, y, 3, COLOR_AMBER)

    def _draw_tank(self, tank, fill_color, outline_color) -> None:
        x, y = self.to_screen(tank.position)
        half = TANK_SIZE_PX / 2
        arcade.draw_lbwh_rectangle_filled(x - half, y - half, TANK_SIZE_PX, TANK_SIZE_PX, outline_color)
        arcade.draw_lbwh_rectangle_filled(x - half + 3, y - half + 3, TANK_SIZE_PX - 6, TANK_SIZE_PX - 6, fill_color)

        barrel_end = tank.body.point_ahead(tank.settings.muzzle_offset)
        end_x, end_y = self.to_screen(barrel_end)
        arcade.draw_line(x, y, end_x, end_y, COLOR_SOFT_WHITE, 2)

        # Bars stay screen-aligned regardless of the tank heading.
        bar_left = x - BAR_WIDTH_PX / 2
        health_bottom = y + BAR_OFFSET_PX
        reload_bottom = health_bottom + BAR_HEIGHT_PX + BAR_GAP_PX
        self._draw_bar(bar_left, health_bottom, tank.ui.health_fill, COLOR_HEALTH)
        self._draw_bar(bar_left, reload_bottom, tank.ui.reload_fill, COLOR_AMBER)

    @staticmethod
    def _draw_bar(left: float, bottom: float, fill_amount: float, color) -> None:
        arcade.draw_lbwh_rectangle_filled(left, bottom, BAR_WIDTH_PX, BAR_HEIGHT_PX, COLOR_SLATE_GRAY)
        if fill_amount > 0:
            arcade.draw_lbwh_rectangle_filled(left, bottom, BAR_WIDTH_PX * fill_amount, BAR_HEIGHT_PX, color)
