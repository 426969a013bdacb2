from __future__ import annotations

from bstein.domain.input_state import InputState


class InputLatch:
    """
    Collects press/release events from any source (keys, on-screen buttons)
    and hands out one InputState per frame.

    Left/right are level-triggered: held while any source holds them.
    Jump is edge-triggered: one press yields exactly one jump_pressed sample.
    """

    def __init__(self) -> None:
        self._left: set[str] = set()
        self._right: set[str] = set()
        self._jump_down: set[str] = set()
        self._jump_pressed_edge = False

    def set_left(self, source: str, down: bool) -> None:
        _hold(self._left, source, down)

    def set_right(self, source: str, down: bool) -> None:
        _hold(self._right, source, down)

    def set_jump(self, source: str, down: bool) -> None:
        if down:
            # Auto-repeat delivers extra key-downs without key-ups; ignore them.
            if source not in self._jump_down:
                self._jump_pressed_edge = True
            self._jump_down.add(source)
        else:
            self._jump_down.discard(source)

    def release_all(self) -> None:
        # Focus loss: we will never see the matching key-ups.
        self._left.clear()
        self._right.clear()
        self._jump_down.clear()

    def sample(self) -> InputState:
        # “Pressed this frame” semantics for jump.
        pressed = self._jump_pressed_edge
        self._jump_pressed_edge = False
        return InputState(left=bool(self._left), right=bool(self._right), jump_pressed=pressed)


def _hold(sources: set[str], source: str, down: bool) -> None:
    if down:
        sources.add(source)
    else:
        sources.discard(source)
