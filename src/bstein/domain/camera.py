from bstein.domain.game_state import Camera, Player
from bstein.domain.physics import clamp


def follow(player: Player, view_width: float, max_scroll: float) -> Camera:
    # Keep the player centred horizontally, never scrolling past either level edge.
    x = clamp(player.x + player.w / 2.0 - view_width / 2.0, 0.0, max_scroll)
    return Camera(x=x, y=0.0)
