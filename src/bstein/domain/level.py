from __future__ import annotations

from dataclasses import dataclass

from bstein.domain.exceptions import InvalidLevelError


@dataclass(frozen=True)
class Platform:
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class Coin:
    x: float
    y: float
    r: float = 8.0
    taken: bool = False


@dataclass(frozen=True)
class Hazard:
    x: float
    y: float
    r: float = 12.0


@dataclass(frozen=True)
class Goal:
    x: float
    y: float
    r: float = 14.0
    taken: bool = False


@dataclass(frozen=True)
class Level:
    platforms: tuple[Platform, ...]
    coins: tuple[Coin, ...] = ()
    hazards: tuple[Hazard, ...] = ()
    goal: Goal | None = None

    def __post_init__(self) -> None:
        for i, p in enumerate(self.platforms):
            if p.w <= 0 or p.h <= 0:
                raise InvalidLevelError(f"platforms[{i}] w/h must be > 0")
        circles = [*self.coins, *self.hazards]
        if self.goal is not None:
            circles.append(self.goal)
        for c in circles:
            if c.r <= 0:
                raise InvalidLevelError(f"{type(c).__name__} at ({c.x}, {c.y}) needs r > 0")

    @property
    def coins_taken(self) -> int:
        return sum(1 for c in self.coins if c.taken)


GROUND_Y = 420.0

_FLOATING = (
    (200, 340, 120), (360, 300, 100), (520, 260, 120),
    (760, 360, 120), (980, 320, 120), (1240, 280, 160),
    (1500, 360, 120), (1700, 320, 120), (1900, 280, 160),
    (2160, 240, 160), (2440, 300, 120), (2680, 260, 160),
    (2960, 220, 160), (3240, 260, 160), (3480, 320, 120),
)

_COIN_SPOTS = (
    (220, 310), (380, 270), (540, 230),
    (800, 330), (1000, 290), (1280, 250),
    (1520, 330), (1720, 290), (1940, 250),
    (2180, 210), (2460, 270), (2700, 230),
    (2980, 190), (3260, 230), (3500, 290),
)


def build_level() -> Level:
    """Build the hand-made multi-screen level with everything untaken."""
    # Ground segments with 100-unit gaps between them
    platforms = [Platform(x=i * 640.0, y=GROUND_Y, w=540.0, h=24.0) for i in range(10)]
    platforms += [Platform(x=float(x), y=float(y), w=float(w), h=16.0) for x, y, w in _FLOATING]

    coins = tuple(Coin(x=float(x), y=float(y)) for x, y in _COIN_SPOTS)

    # Spikes just before each ground gap
    hazards = tuple(Hazard(x=k * 640.0 - 40.0, y=GROUND_Y + 8.0, r=14.0) for k in range(1, 6))

    return Level(
        platforms=tuple(platforms),
        coins=coins,
        hazards=hazards,
        goal=Goal(x=3720.0, y=290.0),
    )
