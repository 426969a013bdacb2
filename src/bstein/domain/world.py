from __future__ import annotations

import logging
from collections.abc import Callable

from bstein.domain.camera import follow
from bstein.domain.config import GameConfig
from bstein.domain.exceptions import ResetNotAllowed
from bstein.domain.game_state import GameState, new_game
from bstein.domain.input_state import InputState
from bstein.domain.level import Level, build_level
from bstein.domain.physics import step_player
from bstein.domain.rules import apply_rules

logger = logging.getLogger(__name__)


class World:
    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        level_factory: Callable[[], Level] = build_level,
    ) -> None:
        self.config = config or GameConfig()
        self._level_factory = level_factory

    def new_game(self) -> GameState:
        return new_game(self._level_factory(), self.config)

    def step(self, state: GameState, inp: InputState, *, view_width: float) -> GameState:
        cfg = self.config

        # ----- Movement + collisions -----
        player = step_player(state.player, inp, state.level, cfg)

        # ----- Pickups, hazards, goal -----
        player, level = apply_rules(player, state.level, cfg)
        if player.status is not state.player.status:
            logger.debug("status %s -> %s", state.player.status.value, player.status.value)

        # ----- Camera -----
        camera = follow(player, view_width, cfg.max_scroll_x)

        return GameState(player=player, level=level, camera=camera)

    def respawn(self, state: GameState) -> GameState:
        """Rebuild the level and put the player back at spawn.

        Only allowed once the run is over (dead or won).
        """
        if not state.can_reset:
            raise ResetNotAllowed("player is still alive")
        logger.info("respawn after %s with %d coin(s)", state.player.status.value, state.player.coins)
        return self.new_game()
