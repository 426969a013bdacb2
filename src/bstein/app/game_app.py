from __future__ import annotations

import logging
import tkinter as tk

from bstein.app.game_loop import GameLoop
from bstein.app.input_latch import InputLatch
from bstein.app.stepper import FixedStepper
from bstein.domain.config import GameConfig
from bstein.domain.input_state import InputState
from bstein.domain.world import World
from bstein.ui.input_mapper import TkInputMapper
from bstein.ui.tk_canvas_view import TkCanvasView

logger = logging.getLogger(__name__)


class GameApp:
    def __init__(self, *, config: GameConfig | None = None, fps: int = 60) -> None:
        self.root = tk.Tk()
        self.root.title("Bstein’s Adventure")
        self.root.minsize(320, 240)

        # One place for content widgets
        self.content = tk.Frame(self.root)
        self.content.pack(fill="both", expand=True)

        self.latch = InputLatch()
        self.input = TkInputMapper(self.root, self.latch)

        self.world = World(config)
        self.state = self.world.new_game()

        # --- Play view (canvas) ---
        self.play_view = TkCanvasView(self.content, width=800, height=450)
        self.play_view.canvas.bind("<Button-1>", self._on_pointer_down)

        # --- On-screen controls ---
        self._install_touch_controls()

        # One domain step per 1/60 s regardless of how often the loop ticks.
        self.stepper = FixedStepper(sample_fn=self.latch.sample, step_fn=self._step)
        self.loop = GameLoop(
            root=self.root,
            stepper=self.stepper,
            render_fn=self._render,
            fps=fps,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def _install_touch_controls(self) -> None:
        bar = tk.Frame(self.root)
        bar.pack(side="bottom", fill="x")

        for text, intent, side in (("◀", "left", "left"), ("▶", "right", "left"), ("▲", "jump", "right")):
            btn = tk.Button(bar, text=text, width=6, height=2, takefocus=0)
            btn.pack(side=side, padx=8, pady=8)
            self.input.bind_button(btn, intent)

    def run(self) -> None:
        logger.info("starting with %d platform(s), %d coin(s)", len(self.state.level.platforms), len(self.state.level.coins))
        self.loop.start()
        self.root.mainloop()

    # ---------- Reset ----------

    def _on_pointer_down(self, _evt: tk.Event) -> None:
        # Tapping only restarts a finished run.
        if not self.state.can_reset:
            return
        self.state = self.world.respawn(self.state)
        self.stepper.reset()

    # ---------- Game loop ----------

    def _step(self, inp: InputState) -> None:
        self.state = self.world.step(self.state, inp, view_width=self.play_view.view_width)

    def _render(self) -> None:
        self.play_view.render_game(self.state)

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()
