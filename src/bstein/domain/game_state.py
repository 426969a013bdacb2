from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bstein.domain.config import GameConfig
from bstein.domain.level import Level


class Status(Enum):
    ALIVE = "alive"
    DEAD = "dead"
    WON = "won"


@dataclass(frozen=True)
class Player:
    x: float
    y: float
    w: float
    h: float
    vx: float = 0.0
    vy: float = 0.0
    grounded: bool = False
    facing: int = 1   # +1 right, -1 left
    coins: int = 0
    status: Status = Status.ALIVE

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.w / 2.0, self.y + self.h / 2.0

    @property
    def alive(self) -> bool:
        return self.status is Status.ALIVE


@dataclass(frozen=True)
class Camera:
    x: float = 0.0
    y: float = 0.0  # no vertical scrolling


@dataclass(frozen=True)
class GameState:
    player: Player
    level: Level
    camera: Camera

    @property
    def can_reset(self) -> bool:
        return not self.player.alive


def spawn_player(config: GameConfig) -> Player:
    return Player(x=config.spawn_x, y=config.spawn_y, w=config.player_w, h=config.player_h)


def new_game(level: Level, config: GameConfig) -> GameState:
    return GameState(player=spawn_player(config), level=level, camera=Camera())
