from __future__ import annotations

from collections.abc import Callable

import pytest

from bstein.domain.config import GameConfig
from bstein.domain.game_state import Camera, GameState, Player
from bstein.domain.level import Level, Platform
from bstein.domain.world import World


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def world(config: GameConfig) -> World:
    return World(config)


@pytest.fixture
def flat_level() -> Level:
    return Level(platforms=(Platform(x=0.0, y=420.0, w=540.0, h=24.0),))


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    def _make(level: Level, **player_fields: object) -> GameState:
        fields: dict[str, object] = {"x": 60.0, "y": 0.0, "w": 28.0, "h": 36.0}
        fields.update(player_fields)
        return GameState(player=Player(**fields), level=level, camera=Camera())

    return _make
