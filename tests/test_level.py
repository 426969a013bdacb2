from __future__ import annotations

import pytest

from bstein.domain.exceptions import InvalidLevelError
from bstein.domain.level import GROUND_Y, Coin, Hazard, Level, Platform, build_level


def test_built_level_layout():
    level = build_level()
    assert len(level.platforms) == 25
    assert len(level.coins) == 15
    assert len(level.hazards) == 5
    assert level.goal is not None
    assert (level.goal.x, level.goal.y, level.goal.r) == (3720.0, 290.0, 14.0)

    ground = [p for p in level.platforms if p.y == GROUND_Y]
    assert [p.x for p in ground] == [i * 640.0 for i in range(10)]
    assert all(h.r == 14.0 and h.y == GROUND_Y + 8.0 for h in level.hazards)


def test_built_level_starts_untaken():
    level = build_level()
    assert level.coins_taken == 0
    assert not any(c.taken for c in level.coins)
    assert level.goal is not None and not level.goal.taken


def test_each_build_is_a_fresh_equal_value():
    a, b = build_level(), build_level()
    assert a == b
    assert a is not b


@pytest.mark.parametrize(
    "kwargs",
    [
        {"platforms": (Platform(x=0.0, y=0.0, w=0.0, h=10.0),)},
        {"platforms": (Platform(x=0.0, y=0.0, w=10.0, h=-1.0),)},
        {"platforms": (), "coins": (Coin(x=0.0, y=0.0, r=0.0),)},
        {"platforms": (), "hazards": (Hazard(x=0.0, y=0.0, r=-3.0),)},
    ],
)
def test_invalid_geometry_is_rejected(kwargs):
    with pytest.raises(InvalidLevelError):
        Level(**kwargs)


def test_invalid_level_error_is_a_value_error():
    assert issubclass(InvalidLevelError, ValueError)
