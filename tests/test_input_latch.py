from __future__ import annotations

from bstein.app.input_latch import InputLatch
from bstein.domain.input_state import InputState


def test_idle():
    assert InputLatch().sample() == InputState()


def test_jump_is_edge_triggered():
    latch = InputLatch()
    latch.set_jump("key:space", True)
    assert latch.sample().jump_pressed is True
    # still held: no second jump
    assert latch.sample().jump_pressed is False


def test_auto_repeat_does_not_retrigger_jump():
    latch = InputLatch()
    latch.set_jump("key:space", True)
    latch.sample()
    latch.set_jump("key:space", True)
    assert latch.sample().jump_pressed is False

    latch.set_jump("key:space", False)
    latch.set_jump("key:space", True)
    assert latch.sample().jump_pressed is True


def test_quick_tap_between_frames_still_jumps():
    latch = InputLatch()
    latch.set_jump("button:jump", True)
    latch.set_jump("button:jump", False)
    assert latch.sample().jump_pressed is True


def test_direction_held_while_any_source_holds_it():
    latch = InputLatch()
    latch.set_left("key:left", True)
    latch.set_left("key:a", True)
    latch.set_left("key:left", False)
    assert latch.sample().left is True
    latch.set_left("key:a", False)
    assert latch.sample().left is False


def test_keys_and_buttons_combine():
    latch = InputLatch()
    latch.set_right("button:right", True)
    latch.set_left("key:a", True)
    s = latch.sample()
    assert s.left and s.right


def test_release_all():
    latch = InputLatch()
    latch.set_left("key:left", True)
    latch.set_right("key:d", True)
    latch.set_jump("key:w", True)
    latch.sample()
    latch.release_all()
    assert latch.sample() == InputState()
