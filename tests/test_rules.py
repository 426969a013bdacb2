from __future__ import annotations

from bstein.domain.game_state import Player, Status
from bstein.domain.level import Coin, Goal, Hazard, Level, Platform
from bstein.domain.rules import apply_rules, within

GROUND = (Platform(x=0.0, y=420.0, w=540.0, h=24.0),)


def at_center(cx: float, cy: float, **kw) -> Player:
    # 28x36 player whose centre is (cx, cy)
    return Player(x=cx - 14.0, y=cy - 18.0, w=28.0, h=36.0, **kw)


def test_within_is_strict():
    assert within(0.0, 0.0, 3.0, 4.0, 5.01)
    assert not within(0.0, 0.0, 3.0, 4.0, 5.0)


def test_hazard_kills_inside_reach(config):
    level = Level(platforms=GROUND, hazards=(Hazard(x=200.0, y=428.0, r=14.0),))
    p, _ = apply_rules(at_center(200.0, 410.0), level, config)
    assert p.status is Status.DEAD


def test_hazard_reach_boundary_is_safe(config):
    level = Level(platforms=GROUND, hazards=(Hazard(x=200.0, y=428.0, r=14.0),))
    # exactly 14 + 12 away
    p, _ = apply_rules(at_center(200.0, 402.0), level, config)
    assert p.status is Status.ALIVE


def test_falling_out_of_level_kills(config):
    p, _ = apply_rules(Player(x=600.0, y=1001.0, w=28.0, h=36.0), Level(platforms=GROUND), config)
    assert p.status is Status.DEAD


def test_coin_pickup_counts_each_coin_once(config):
    level = Level(platforms=GROUND, coins=(Coin(x=100.0, y=100.0), Coin(x=110.0, y=100.0), Coin(x=400.0, y=100.0)))
    p, level = apply_rules(at_center(105.0, 100.0), level, config)
    assert p.coins == 2
    assert [c.taken for c in level.coins] == [True, True, False]

    # standing still on taken coins adds nothing
    p, level = apply_rules(p, level, config)
    assert p.coins == 2
    assert level.coins_taken == 2


def test_goal_wins_and_is_taken(config):
    level = Level(platforms=GROUND, goal=Goal(x=300.0, y=290.0))
    p, level = apply_rules(at_center(300.0, 300.0), level, config)
    assert p.status is Status.WON
    assert level.goal is not None and level.goal.taken


def test_hazard_beats_goal_on_the_same_frame(config):
    level = Level(platforms=GROUND, hazards=(Hazard(x=300.0, y=300.0),), goal=Goal(x=300.0, y=300.0))
    p, level = apply_rules(at_center(300.0, 300.0), level, config)
    assert p.status is Status.DEAD
    assert level.goal is not None and not level.goal.taken


def test_no_checks_once_dead(config):
    level = Level(platforms=GROUND, coins=(Coin(x=100.0, y=100.0),), goal=Goal(x=100.0, y=100.0))
    p, after = apply_rules(at_center(100.0, 100.0, status=Status.DEAD), level, config)
    assert p.status is Status.DEAD
    assert p.coins == 0
    assert after is level


def test_won_player_ignores_hazards(config):
    level = Level(platforms=GROUND, hazards=(Hazard(x=100.0, y=100.0),))
    p, _ = apply_rules(at_center(100.0, 100.0, status=Status.WON), level, config)
    assert p.status is Status.WON


def test_level_without_goal(config):
    p, _ = apply_rules(at_center(100.0, 100.0), Level(platforms=GROUND), config)
    assert p.status is Status.ALIVE
