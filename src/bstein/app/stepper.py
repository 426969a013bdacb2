from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from bstein.domain.input_state import InputState


class FixedStepper:
    """
    Turns variable frame times into whole domain steps of `step_dt` seconds.

    A jump press stays pending until a step consumes it, so a press sampled on a
    frame that runs zero steps still reaches the next step, and a frame that
    runs several catch-up steps hands it to the first one only.
    """

    def __init__(
        self,
        *,
        sample_fn: Callable[[], InputState],
        step_fn: Callable[[InputState], None],
        step_dt: float = 1.0 / 60.0,
        max_steps: int = 5,
    ) -> None:
        if step_dt <= 0:
            raise ValueError("step_dt must be > 0")
        if max_steps < 1:
            raise ValueError("max_steps must be >= 1")

        self._sample_fn = sample_fn
        self._step_fn = step_fn
        self._step_dt = step_dt
        self._max_steps = max_steps

        self._accum = 0.0
        self._pending_jump = False

    def reset(self) -> None:
        self._accum = 0.0
        self._pending_jump = False

    def advance(self, dt: float) -> int:
        """Run as many steps as `dt` (plus leftovers) pays for; returns how many ran."""
        self._accum += dt
        inp = self._sample_fn()
        self._pending_jump = self._pending_jump or inp.jump_pressed

        steps = 0
        while self._accum >= self._step_dt and steps < self._max_steps:
            self._step_fn(replace(inp, jump_pressed=self._pending_jump))
            self._pending_jump = False
            self._accum -= self._step_dt
            steps += 1

        if self._accum >= self._step_dt:
            # Fell too far behind; drop the backlog instead of spiralling.
            self._accum = 0.0
        return steps
