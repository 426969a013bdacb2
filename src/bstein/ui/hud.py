from __future__ import annotations

from bstein.domain.game_state import Player, Status

GOAL_NAME = "Goldstein’s Penny"

_MESSAGES = {
    Status.ALIVE: f"Find {GOAL_NAME} →",
    Status.DEAD: "Ouch. Tap to respawn.",
    Status.WON: f"You found {GOAL_NAME}!",
}


def score_text(player: Player) -> str:
    return f"Coins: {player.coins}"


def status_message(player: Player) -> str:
    return _MESSAGES[player.status]
