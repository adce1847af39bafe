"""Press/release state tracking for keys and mouse buttons."""

from __future__ import annotations

from enum import Enum


class ButtonState(Enum):
    """State of a key or mouse button across frames.

    Transitions::

        RELEASED --press()--> JUST_PRESSED --end_frame()--> PRESSED
            ^                                                  |
            |                                              release()
            |                                                  v
            +---------------end_frame()--------------- JUST_RELEASED

    The state is immutable; the transition methods return the next state.
    """

    JUST_PRESSED = "just_pressed"
    PRESSED = "pressed"
    JUST_RELEASED = "just_released"
    RELEASED = "released"

    def is_pressed(self) -> bool:
        """True while the button is down, including the frame it went down."""
        return self in (ButtonState.JUST_PRESSED, ButtonState.PRESSED)

    def is_just_pressed(self) -> bool:
        """True only in the frame the button went down."""
        return self is ButtonState.JUST_PRESSED

    def is_just_released(self) -> bool:
        """True only in the frame the button went up."""
        return self is ButtonState.JUST_RELEASED

    def is_released(self) -> bool:
        """True while the button is up, including the frame it went up."""
        return self in (ButtonState.JUST_RELEASED, ButtonState.RELEASED)

    def press(self) -> ButtonState:
        """Return the state after a press; pressing a held button changes nothing."""
        return self if self.is_pressed() else ButtonState.JUST_PRESSED

    def release(self) -> ButtonState:
        """Return the state after a release; releasing an up button changes nothing."""
        return ButtonState.JUST_RELEASED if self.is_pressed() else self

    def end_frame(self) -> ButtonState:
        """Return the state for the next frame, settling the 'just' states."""
        if self is ButtonState.JUST_PRESSED:
            return ButtonState.PRESSED
        if self is ButtonState.JUST_RELEASED:
            return ButtonState.RELEASED
        return self