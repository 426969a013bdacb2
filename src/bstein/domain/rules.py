from __future__ import annotations

import logging
from dataclasses import replace

from bstein.domain.config import GameConfig
from bstein.domain.game_state import Player, Status
from bstein.domain.level import Level

logger = logging.getLogger(__name__)


def within(px: float, py: float, cx: float, cy: float, reach: float) -> bool:
    # Squared distances only; no sqrt per object per frame.
    dx = px - cx
    dy = py - cy
    return dx * dx + dy * dy < reach * reach


def collect_coins(p: Player, level: Level, config: GameConfig) -> tuple[Player, Level]:
    px, py = p.center
    picked = 0
    coins = []
    for c in level.coins:
        if not c.taken and within(px, py, c.x, c.y, c.r + config.coin_reach):
            c = replace(c, taken=True)
            picked += 1
            logger.debug("coin taken at (%.0f, %.0f)", c.x, c.y)
        coins.append(c)

    if not picked:
        return p, level
    return replace(p, coins=p.coins + picked), replace(level, coins=tuple(coins))


def check_death(p: Player, level: Level, config: GameConfig) -> Player:
    px, py = p.center
    for h in level.hazards:
        if within(px, py, h.x, h.y, h.r + config.hazard_reach):
            logger.info("player hit hazard at (%.0f, %.0f)", h.x, h.y)
            return replace(p, status=Status.DEAD)

    if p.y > config.fall_limit:
        logger.info("player fell out of the level (y=%.1f)", p.y)
        return replace(p, status=Status.DEAD)
    return p


def check_goal(p: Player, level: Level, config: GameConfig) -> tuple[Player, Level]:
    goal = level.goal
    if goal is None or goal.taken:
        return p, level

    px, py = p.center
    if not within(px, py, goal.x, goal.y, goal.r + config.goal_reach):
        return p, level

    logger.info("goal reached with %d coin(s)", p.coins)
    return replace(p, status=Status.WON), replace(level, goal=replace(goal, taken=True))


def apply_rules(p: Player, level: Level, config: GameConfig) -> tuple[Player, Level]:
    """Run pickups and the alive -> dead / alive -> won transitions.

    Nothing here runs once the player is dead or has won; only a respawn brings
    the status back to alive.
    """
    if not p.alive:
        return p, level

    p, level = collect_coins(p, level, config)
    p = check_death(p, level, config)
    if not p.alive:
        return p, level
    return check_goal(p, level, config)
