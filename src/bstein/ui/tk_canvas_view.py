from __future__ import annotations

import math
import tkinter as tk

from bstein.domain.game_state import GameState, Player
from bstein.ui.hud import score_text, status_message

SKY = "#141820"
FAR_HILLS = "#1b2230"
NEAR_HILLS = "#222b3b"
PLATFORM = "#2b3340"
PLATFORM_TOP = "#3c4758"
COIN = "#f6d354"
COIN_EDGE = "#b99431"
HAZARD = "#a33a3a"
GOAL = "#ffd970"
GOAL_EDGE = "#c7a03d"
GOAL_SPARK = "#fff2a8"
BODY = "#9cc0ff"
SKIN = "#f0d0b0"
HAT = "#3b2f1e"
EYE = "#222"
TEXT = "#e8ecf4"


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, width: int, height: int) -> None:
        self._w = width
        self._h = height

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, bg=SKY)
        self.canvas.pack(fill="both", expand=True)
        self.canvas.bind("<Configure>", self._on_resize)

    @property
    def view_width(self) -> int:
        return self._w

    def _on_resize(self, evt: tk.Event) -> None:
        self._w = max(1, int(evt.width))
        self._h = max(1, int(evt.height))

    def render_game(self, state: GameState) -> None:
        c = self.canvas
        c.delete("all")

        cam_x = state.camera.x
        cam_y = state.camera.y
        self._draw_parallax(cam_x)

        left, right = cam_x, cam_x + self._w
        lvl = state.level

        for p in lvl.platforms:
            if p.x + p.w < left or p.x > right:
                continue
            x, y = p.x - cam_x, p.y - cam_y
            c.create_rectangle(x, y, x + p.w, y + p.h, outline="", fill=PLATFORM)
            c.create_rectangle(x, y, x + p.w, y + 4, outline="", fill=PLATFORM_TOP)

        for coin in lvl.coins:
            if coin.taken:
                continue
            self._circle(coin.x - cam_x, coin.y - cam_y, coin.r, fill=COIN, outline=COIN_EDGE, width=2)

        for h in lvl.hazards:
            self._circle(h.x - cam_x, h.y - cam_y, h.r, fill=HAZARD, outline="")

        goal = lvl.goal
        if goal is not None:
            gx, gy = goal.x - cam_x, goal.y - cam_y
            self._circle(gx, gy, goal.r, fill=GOAL, outline=GOAL_EDGE, width=3)
            c.create_line(gx - 4, gy, gx + 4, gy, fill=GOAL_SPARK)
            c.create_line(gx, gy - 4, gx, gy + 4, fill=GOAL_SPARK)

        self._draw_player(state.player, cam_x, cam_y)

        c.create_text(10, 10, anchor="nw", text=score_text(state.player), fill=TEXT, font=("TkDefaultFont", 14, "bold"))
        c.create_text(
            self._w / 2.0, 10, anchor="n", text=status_message(state.player), fill=TEXT, font=("TkDefaultFont", 12)
        )

    def _circle(self, x: float, y: float, r: float, **opts: object) -> None:
        self.canvas.create_oval(x - r, y - r, x + r, y + r, **opts)

    def _draw_player(self, p: Player, cam_x: float, cam_y: float) -> None:
        c = self.canvas
        x, y, w, h = p.x - cam_x, p.y - cam_y, p.w, p.h
        mid = x + w / 2.0

        # body, head, hat (brim + crown)
        c.create_rectangle(x, y, x + w, y + h, outline="", fill=BODY)
        c.create_rectangle(mid - 10, y - 16, mid + 10, y, outline="", fill=SKIN)
        c.create_rectangle(mid - 12, y - 22, mid + 12, y - 16, outline="", fill=HAT)
        c.create_rectangle(mid - 8, y - 28, mid + 8, y - 22, outline="", fill=HAT)

        eye_x = x + (w - 10 if p.facing > 0 else 2)
        c.create_rectangle(eye_x, y - 12, eye_x + 4, y - 8, outline="", fill=EYE)

    def _draw_parallax(self, cam_x: float) -> None:
        c = self.canvas
        h = self._h
        ox = -cam_x * 0.3

        # fmod keeps the sign of ox so layers scroll left as the camera moves right.
        for i in range(8):
            base = i * 300 + math.fmod(ox, 300)
            c.create_rectangle(base, h - 160, base + 200, h - 120, outline="", fill=FAR_HILLS)
            c.create_rectangle(base + 100, h - 200, base + 280, h - 164, outline="", fill=FAR_HILLS)

        for i in range(8):
            base = i * 260 + math.fmod(ox * 0.8, 260)
            c.create_rectangle(base, h - 120, base + 180, h - 90, outline="", fill=NEAR_HILLS)
