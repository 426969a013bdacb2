from __future__ import annotations

import logging
import time
import tkinter as tk
from collections.abc import Callable

from bstein.app.stepper import FixedStepper

logger = logging.getLogger(__name__)

# Longest frame time fed to the stepper (after pauses, minimize, debugger stops).
MAX_FRAME_DT = 0.1


class GameLoop:
    """
    Drives a FixedStepper and a render callback from tkinter's `after()` timer.

    Each tick measures the real time since the previous one, so ticks that fire
    late or early only change how many fixed steps run, not the game speed.
    """

    def __init__(
        self,
        *,
        root: tk.Tk,
        stepper: FixedStepper,
        render_fn: Callable[[], None],
        fps: int = 60,
    ) -> None:
        self._root = root
        self._stepper = stepper
        self._render_fn = render_fn
        self._frame_s = 1.0 / max(1, fps)

        self._after_id: str | None = None
        self._last_t: float | None = None

    def start(self) -> None:
        if self._after_id is not None:
            return
        self._last_t = time.monotonic()
        self._stepper.reset()
        logger.debug("loop started at %.1f ms/frame", self._frame_s * 1000.0)
        self._schedule(self._frame_s)

    def stop(self) -> None:
        after_id, self._after_id = self._after_id, None
        self._last_t = None
        if after_id is None:
            return
        try:
            self._root.after_cancel(after_id)
        except tk.TclError:
            # Root may already be destroyed during shutdown.
            pass

    def _schedule(self, delay_s: float) -> None:
        self._after_id = self._root.after(max(1, round(delay_s * 1000.0)), self._tick)

    def _tick(self) -> None:
        if self._last_t is None:
            return

        now = time.monotonic()
        dt = min(now - self._last_t, MAX_FRAME_DT)
        self._last_t = now

        try:
            self._stepper.advance(dt)
            self._render_fn()
        except Exception:
            # Fail fast rather than keep stepping a corrupt state.
            logger.exception("frame failed; stopping loop")
            self.stop()
            raise

        # Subtract the time this frame took so the tick rate stays near fps.
        spent = time.monotonic() - now
        self._schedule(self._frame_s - spent)
