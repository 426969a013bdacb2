from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    left: bool = False
    right: bool = False
    jump_pressed: bool = False  # true only on the frame the key is pressed
