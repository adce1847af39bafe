"""Mouse input state tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from .button_state import ButtonState
from .keyboard import ElementState


@dataclass(frozen=True)
class Vec2:
    """Two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)


Vec2.ZERO = Vec2(0.0, 0.0)


class MouseButton(Enum):
    """Mouse buttons that are tracked."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    BACK = "back"
    FORWARD = "forward"


class CursorMode(Enum):
    """How the cursor behaves relative to the window."""

    NORMAL = "normal"
    CONFINED = "confined"
    LOCKED = "locked"


@dataclass(frozen=True)
class LineDelta:
    """Scroll amount in lines."""

    x: float
    y: float


@dataclass(frozen=True)
class PixelDelta:
    """Scroll amount in pixels."""

    x: float
    y: float


ScrollDelta = Union[LineDelta, PixelDelta]

_PIXELS_PER_LINE = 100.0


def _released_buttons() -> dict[MouseButton, ButtonState]:
    return {button: ButtonState.RELEASED for button in MouseButton}


@dataclass
class MouseState:
    """Cursor position, per-frame motion, button states and scroll."""

    position: Vec2 = Vec2()
    delta: Vec2 = Vec2()
    raw_delta: Vec2 = Vec2()
    scroll_delta: Vec2 = Vec2()
    buttons: dict[MouseButton, ButtonState] = field(default_factory=_released_buttons)
    cursor_mode: CursorMode = CursorMode.NORMAL

    def set_position(self, x: float, y: float) -> None:
        """Move the cursor, recording the movement as this frame's delta."""
        new_position = Vec2(float(x), float(y))
        self.delta = new_position - self.position
        self.position = new_position

    def add_raw_motion(self, delta_x: float, delta_y: float) -> None:
        """Accumulate raw device motion, independent of the cursor."""
        self.raw_delta = self.raw_delta + Vec2(float(delta_x), float(delta_y))

    def process_button(self, button: MouseButton | int, state: ElementState) -> None:
        """Apply a button event; buttons other than the tracked five are ignored."""
        if not isinstance(button, MouseButton):
            return
        current = self.buttons[button]
        if state is ElementState.PRESSED:
            self.buttons[button] = current.press()
        else:
            self.buttons[button] = current.release()

    def process_scroll(self, delta: ScrollDelta) -> None:
        """Accumulate scroll; pixel amounts are converted to approximate lines."""
        if isinstance(delta, PixelDelta):
            step = Vec2(delta.x / _PIXELS_PER_LINE, delta.y / _PIXELS_PER_LINE)
        else:
            step = Vec2(delta.x, delta.y)
        self.scroll_delta = self.scroll_delta + step

    def is_pressed(self, button: MouseButton) -> bool:
        """True while the button is down."""
        return self.buttons[button].is_pressed()

    def is_just_pressed(self, button: MouseButton) -> bool:
        """True only in the frame the button went down."""
        return self.buttons[button].is_just_pressed()

    def is_just_released(self, button: MouseButton) -> bool:
        """True only in the frame the button went up."""
        return self.buttons[button].is_just_released()

    def set_cursor_mode(self, mode: CursorMode) -> None:
        """Record the cursor mode; applying it to a window is up to the caller."""
        self.cursor_mode = mode

    def end_frame(self) -> None:
        """Settle button transitions and reset the per-frame deltas."""
        self.buttons = {b: s.end_frame() for b, s in self.buttons.items()}
        self.delta = Vec2.ZERO
        self.raw_delta = Vec2.ZERO
        self.scroll_delta = Vec2.ZERO

    def clear(self) -> None:
        """Reset everything to the initial state."""
        self.position = Vec2.ZERO
        self.delta = Vec2.ZERO
        self.raw_delta = Vec2.ZERO
        self.scroll_delta = Vec2.ZERO
        self.buttons = _released_buttons()
        self.cursor_mode = CursorMode.NORMAL