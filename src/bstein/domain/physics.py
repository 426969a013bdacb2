"""One fixed simulation step for the player: intent, gravity, integration, collisions.

Units are world units per step; there is no dt. Collisions are resolved against
every platform in list order, with no broad phase.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Protocol

from bstein.domain.config import GameConfig
from bstein.domain.game_state import Player
from bstein.domain.input_state import InputState
from bstein.domain.level import Level


class Rect(Protocol):
    x: float
    y: float
    w: float
    h: float


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def rects_overlap(a: Rect, b: Rect) -> bool:
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


def apply_intent(p: Player, inp: InputState, config: GameConfig) -> Player:
    vx, facing = p.vx, p.facing
    if inp.left:
        vx -= config.move_accel
        facing = -1
    if inp.right:
        vx += config.move_accel
        facing = 1
    if not inp.left and not inp.right:
        vx *= config.friction
    vx = clamp(vx, -config.max_speed, config.max_speed)

    vy, grounded = p.vy, p.grounded
    if inp.jump_pressed and grounded and p.alive:
        vy = config.jump_velocity
        grounded = False

    return replace(p, vx=vx, vy=vy, grounded=grounded, facing=facing)


def integrate(p: Player, config: GameConfig) -> Player:
    vy = min(p.vy + config.gravity, config.max_fall)
    return replace(p, x=p.x + p.vx, y=p.y + vy, vy=vy)


def resolve_collisions(p: Player, prev_y: float, level: Level) -> Player:
    """Push the player out of every overlapping platform.

    prev_y is the player's y before this step's vertical displacement; it decides
    whether an overlap is a landing, a ceiling bump or a side hit.
    """
    p = replace(p, grounded=False)
    prev_top = prev_y
    prev_bottom = prev_y + p.h

    for plat in level.platforms:
        if not rects_overlap(p, plat):
            continue

        if prev_bottom <= plat.y and p.vy > 0:
            # landed
            p = replace(p, y=plat.y - p.h, vy=0.0, grounded=True)
        elif prev_top >= plat.y + plat.h and p.vy < 0:
            # hit ceiling
            p = replace(p, y=plat.y + plat.h, vy=0.0)
        elif p.vx > 0:
            p = replace(p, x=plat.x - p.w, vx=0.0)
        elif p.vx < 0:
            p = replace(p, x=plat.x + plat.w, vx=0.0)
        else:
            p = replace(p, vx=0.0)

    return p


def step_player(p: Player, inp: InputState, level: Level, config: GameConfig) -> Player:
    p = apply_intent(p, inp, config)
    prev_y = p.y
    p = integrate(p, config)
    return resolve_collisions(p, prev_y, level)
