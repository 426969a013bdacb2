from __future__ import annotations

import tkinter as tk

from bstein.app.input_latch import InputLatch

_LEFT_KEYS = {"left", "a"}
_RIGHT_KEYS = {"right", "d"}
_JUMP_KEYS = {"space", "up", "w"}


class TkInputMapper:
    """Feeds keyboard and on-screen button events into an InputLatch."""

    def __init__(self, root: tk.Tk, latch: InputLatch) -> None:
        self._latch = latch

        root.bind("<KeyPress>", lambda e: self._on_key(e, True))
        root.bind("<KeyRelease>", lambda e: self._on_key(e, False))
        root.bind("<FocusOut>", lambda _e: latch.release_all())

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_key(self, evt: tk.Event, down: bool) -> None:
        k = str(evt.keysym).lower()
        source = f"key:{k}"
        if k in _LEFT_KEYS:
            self._latch.set_left(source, down)
        elif k in _RIGHT_KEYS:
            self._latch.set_right(source, down)
        elif k in _JUMP_KEYS:
            self._latch.set_jump(source, down)

    def bind_button(self, widget: tk.Widget, intent: str) -> None:
        """Make an on-screen button behave like a held key for `intent`."""
        setters = {
            "left": self._latch.set_left,
            "right": self._latch.set_right,
            "jump": self._latch.set_jump,
        }
        if intent not in setters:
            raise ValueError(f"unknown intent: {intent!r}")
        setter = setters[intent]
        source = f"button:{intent}"

        widget.bind("<ButtonPress-1>", lambda _e: setter(source, True))
        widget.bind("<ButtonRelease-1>", lambda _e: setter(source, False))
        widget.bind("<Leave>", lambda _e: setter(source, False))
