"""Input manager combining keyboard, mouse and action mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .action import ActionMap, InputBinding
from .keyboard import ElementState, KeyboardState, KeyCode, KeyEvent
from .modifiers import Modifiers
from .mouse import CursorMode, MouseButton, MouseState, ScrollDelta, Vec2


@dataclass(frozen=True)
class KeyboardInput:
    """Window event: a key went down or up."""

    event: KeyEvent


@dataclass(frozen=True)
class ModifiersChanged:
    """Window event: the held modifier set changed."""

    modifiers: Modifiers


@dataclass(frozen=True)
class CursorMoved:
    """Window event: the cursor moved to a window position."""

    x: float
    y: float


@dataclass(frozen=True)
class MouseInput:
    """Window event: a mouse button went down or up.

    ``button`` is an int for buttons beyond the five tracked ones.
    """

    button: MouseButton | int
    state: ElementState


@dataclass(frozen=True)
class MouseWheel:
    """Window event: the scroll wheel moved."""

    delta: ScrollDelta


@dataclass(frozen=True)
class MouseMotion:
    """Device event: raw mouse motion."""

    delta_x: float
    delta_y: float


WindowEvent = Union[KeyboardInput, ModifiersChanged, CursorMoved, MouseInput, MouseWheel]


@dataclass
class InputManager:
    """Keyboard, mouse and action state for one window.

    Call :meth:`update` at the start of each frame before querying actions
    and :meth:`end_frame` at its end.
    """

    keyboard: KeyboardState = field(default_factory=KeyboardState)
    mouse: MouseState = field(default_factory=MouseState)
    actions: ActionMap = field(default_factory=ActionMap)

    @classmethod
    def with_actions(cls, actions: ActionMap) -> InputManager:
        """Create a manager with preconfigured actions."""
        return cls(actions=actions)

    def process_window_event(self, event: object) -> bool:
        """Apply a window event; return True if it was an input event."""
        if isinstance(event, KeyboardInput):
            self.keyboard.process_key_event(event.event)
        elif isinstance(event, ModifiersChanged):
            self.keyboard.set_modifiers(event.modifiers)
        elif isinstance(event, CursorMoved):
            self.mouse.set_position(event.x, event.y)
        elif isinstance(event, MouseInput):
            self.mouse.process_button(event.button, event.state)
        elif isinstance(event, MouseWheel):
            self.mouse.process_scroll(event.delta)
        else:
            return False
        return True

    def process_device_event(self, event: object) -> None:
        """Apply a device event; only raw mouse motion is used."""
        if isinstance(event, MouseMotion):
            self.mouse.add_raw_motion(event.delta_x, event.delta_y)

    def update(self) -> None:
        """Recompute action states from the current keyboard and mouse."""
        self.actions.update(self.keyboard, self.mouse)

    def end_frame(self) -> None:
        """Settle per-frame transitions and reset the mouse deltas."""
        self.keyboard.end_frame()
        self.mouse.end_frame()
        self.actions.end_frame()

    def is_key_pressed(self, key: KeyCode) -> bool:
        """True while the key is down."""
        return self.keyboard.is_pressed(key)

    def is_key_just_pressed(self, key: KeyCode) -> bool:
        """True only in the frame the key went down."""
        return self.keyboard.is_just_pressed(key)

    def is_key_just_released(self, key: KeyCode) -> bool:
        """True only in the frame the key went up."""
        return self.keyboard.is_just_released(key)

    @property
    def modifiers(self) -> Modifiers:
        """The held modifier keys."""
        return self.keyboard.modifiers

    @property
    def mouse_position(self) -> Vec2:
        """Cursor position in window coordinates."""
        return self.mouse.position

    @property
    def mouse_delta(self) -> Vec2:
        """Cursor movement since the last frame."""
        return self.mouse.delta

    @property
    def mouse_raw_delta(self) -> Vec2:
        """Raw device motion since the last frame."""
        return self.mouse.raw_delta

    @property
    def scroll_delta(self) -> Vec2:
        """Scroll amount since the last frame, in lines."""
        return self.mouse.scroll_delta

    def is_mouse_pressed(self, button: MouseButton) -> bool:
        """True while the mouse button is down."""
        return self.mouse.is_pressed(button)

    def is_mouse_just_pressed(self, button: MouseButton) -> bool:
        """True only in the frame the mouse button went down."""
        return self.mouse.is_just_pressed(button)

    def is_mouse_just_released(self, button: MouseButton) -> bool:
        """True only in the frame the mouse button went up."""
        return self.mouse.is_just_released(button)

    @property
    def cursor_mode(self) -> CursorMode:
        """The recorded cursor mode."""
        return self.mouse.cursor_mode

    def set_cursor_mode(self, mode: CursorMode) -> None:
        """Record the cursor mode; applying it to the window is up to the caller."""
        self.mouse.set_cursor_mode(mode)

    def bind_action(
        self, action: str, binding: InputBinding | KeyCode | MouseButton
    ) -> None:
        """Bind an input to an action."""
        self.actions.bind(action, binding)

    def is_action_pressed(self, action: str) -> bool:
        """True while the action is active."""
        return self.actions.is_pressed(action)

    def is_action_just_pressed(self, action: str) -> bool:
        """True only in the frame the action became active."""
        return self.actions.is_just_pressed(action)

    def is_action_just_released(self, action: str) -> bool:
        """True only in the frame the action stopped being active."""
        return self.actions.is_just_released(action)

    def clear(self) -> None:
        """Reset keyboard and mouse state; action bindings are kept."""
        self.keyboard.clear()
        self.mouse.clear()