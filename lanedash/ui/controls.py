from __future__ import annotations

"""Movement intents shared between the input handlers and the frame loop."""


class Controls:
    """Two booleans read once per frame by the player controller.

    Keyboard holds set and clear one side at a time; a touch or pointer
    press picks a side by which half of the screen it lands on.
    """

    def __init__(self):
        self.left_pressed = False
        self.right_pressed = False

    def press(self, direction: int) -> None:
        if direction < 0:
            self.left_pressed = True
        elif direction > 0:
            self.right_pressed = True

    def release(self, direction: int) -> None:
        if direction < 0:
            self.left_pressed = False
        elif direction > 0:
            self.right_pressed = False

    def touch(self, x: float, width: float) -> None:
        if x < width / 2:
            self.left_pressed, self.right_pressed = True, False
        else:
            self.left_pressed, self.right_pressed = False, True

    def release_all(self) -> None:
        self.left_pressed = False
        self.right_pressed = False
