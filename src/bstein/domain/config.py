from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    # Horizontal movement (units/step)
    move_accel: float = 0.7
    max_speed: float = 4.0
    friction: float = 0.85

    # Vertical movement (units/step)
    gravity: float = 0.9
    jump_velocity: float = -14.0
    max_fall: float = 24.0
    fall_limit: float = 1000.0  # y past this counts as falling out of the level

    # Extra reach added to object radii for proximity checks
    coin_reach: float = 14.0
    hazard_reach: float = 12.0
    goal_reach: float = 14.0

    # Player
    spawn_x: float = 60.0
    spawn_y: float = 0.0
    player_w: float = 28.0
    player_h: float = 36.0

    # Camera
    max_scroll_x: float = 4000.0

    def __post_init__(self) -> None:
        if self.gravity <= 0:
            raise ValueError("gravity must be > 0")
        if self.move_accel <= 0 or self.max_speed <= 0:
            raise ValueError("move_accel/max_speed must be > 0")
        if not 0 < self.friction <= 1:
            raise ValueError("friction must be in (0, 1]")
        if self.jump_velocity >= 0:
            raise ValueError("jump_velocity must be negative (up)")
        if self.max_fall <= 0:
            raise ValueError("max_fall must be > 0")
        if self.player_w <= 0 or self.player_h <= 0:
            raise ValueError("player w/h must be > 0")
        if self.max_scroll_x < 0:
            raise ValueError("max_scroll_x must be >= 0")
