"""Named actions bound to keyboard and mouse inputs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from .button_state import ButtonState
from .keyboard import KeyboardState, KeyCode
from .modifiers import Modifiers
from .mouse import MouseButton, MouseState


@dataclass(frozen=True)
class KeyBinding:
    """A keyboard key."""

    key: KeyCode


@dataclass(frozen=True)
class KeyWithModifiersBinding:
    """A keyboard key that only counts while the given modifiers are held."""

    key: KeyCode
    modifiers: Modifiers


@dataclass(frozen=True)
class MouseBinding:
    """A mouse button."""

    button: MouseButton


InputBinding = Union[KeyBinding, KeyWithModifiersBinding, MouseBinding]

_BINDING_TYPES = (KeyBinding, KeyWithModifiersBinding, MouseBinding)


def to_binding(value: InputBinding | KeyCode | MouseButton) -> InputBinding:
    """Turn a key code, mouse button or binding into a binding."""
    if isinstance(value, _BINDING_TYPES):
        return value
    if isinstance(value, KeyCode):
        return KeyBinding(value)
    if isinstance(value, MouseButton):
        return MouseBinding(value)
    raise TypeError(f"cannot bind an action to {value!r}")


def _is_down(binding: InputBinding, keyboard: KeyboardState, mouse: MouseState) -> bool:
    if isinstance(binding, KeyWithModifiersBinding):
        return keyboard.is_pressed(binding.key) and binding.modifiers in keyboard.modifiers
    if isinstance(binding, KeyBinding):
        return keyboard.is_pressed(binding.key)
    return mouse.is_pressed(binding.button)


def _went_down(binding: InputBinding, keyboard: KeyboardState, mouse: MouseState) -> bool:
    if isinstance(binding, KeyWithModifiersBinding):
        return (
            keyboard.is_just_pressed(binding.key)
            and binding.modifiers in keyboard.modifiers
        )
    if isinstance(binding, KeyBinding):
        return keyboard.is_just_pressed(binding.key)
    return mouse.is_just_pressed(binding.button)


def _went_up(binding: InputBinding, keyboard: KeyboardState, mouse: MouseState) -> bool:
    if isinstance(binding, MouseBinding):
        return mouse.is_just_released(binding.button)
    return keyboard.is_just_released(binding.key)


@dataclass
class _Action:
    bindings: list[InputBinding] = field(default_factory=list)
    state: ButtonState = ButtonState.RELEASED

    def add(self, binding: InputBinding) -> None:
        if binding not in self.bindings:
            self.bindings.append(binding)

    def remove(self, binding: InputBinding) -> None:
        self.bindings = [b for b in self.bindings if b != binding]


class ActionMap:
    """Maps action names to one or more input bindings."""

    def __init__(self) -> None:
        self._actions: dict[str, _Action] = {}

    def __repr__(self) -> str:
        return f"ActionMap({sorted(self._actions)!r})"

    @classmethod
    def builder(cls) -> ActionMapBuilder:
        """Start building an action map fluently."""
        return ActionMapBuilder()

    def bind(self, action: str, binding: InputBinding | KeyCode | MouseButton) -> None:
        """Add a binding to an action, creating the action if needed."""
        self._actions.setdefault(action, _Action()).add(to_binding(binding))

    def unbind(self, action: str, binding: InputBinding | KeyCode | MouseButton) -> None:
        """Remove a binding from an action, if the action exists."""
        entry = self._actions.get(action)
        if entry is not None:
            entry.remove(to_binding(binding))

    def clear_bindings(self, action: str) -> None:
        """Remove every binding of an action, keeping the action itself."""
        entry = self._actions.get(action)
        if entry is not None:
            entry.bindings.clear()

    def get_bindings(self, action: str) -> tuple[InputBinding, ...] | None:
        """Return the bindings of an action, or None if it is unknown."""
        entry = self._actions.get(action)
        return None if entry is None else tuple(entry.bindings)

    def update(self, keyboard: KeyboardState, mouse: MouseState) -> None:
        """Recompute every action's state from the keyboard and mouse."""
        for entry in self._actions.values():
            any_pressed = any(_is_down(b, keyboard, mouse) for b in entry.bindings)
            any_just_pressed = any(
                _went_down(b, keyboard, mouse) for b in entry.bindings
            )
            any_just_released = not any_pressed and any(
                _went_up(b, keyboard, mouse) for b in entry.bindings
            )

            if any_just_pressed and not entry.state.is_pressed():
                entry.state = ButtonState.JUST_PRESSED
            elif any_just_released:
                entry.state = ButtonState.JUST_RELEASED
            elif any_pressed and entry.state is ButtonState.JUST_PRESSED:
                entry.state = ButtonState.PRESSED
            elif not any_pressed and entry.state is ButtonState.JUST_RELEASED:
                entry.state = ButtonState.RELEASED

    def _state(self, action: str) -> ButtonState:
        entry = self._actions.get(action)
        return ButtonState.RELEASED if entry is None else entry.state

    def is_pressed(self, action: str) -> bool:
        """True while the action is active."""
        return self._state(action).is_pressed()

    def is_just_pressed(self, action: str) -> bool:
        """True only in the frame the action became active."""
        return self._state(action).is_just_pressed()

    def is_just_released(self, action: str) -> bool:
        """True only in the frame the action stopped being active."""
        return self._state(action).is_just_released()

    def end_frame(self) -> None:
        """Settle the per-frame action transitions."""
        for entry in self._actions.values():
            entry.state = entry.state.end_frame()


class ActionMapBuilder:
    """Fluent construction of an ActionMap."""

    def __init__(self) -> None:
        self._actions = ActionMap()

    def bind(
        self, action: str, binding: InputBinding | KeyCode | MouseButton
    ) -> ActionMapBuilder:
        """Add a binding to an action."""
        self._actions.bind(action, binding)
        return self

    def bind_many(
        self, action: str, bindings: Iterable[InputBinding | KeyCode | MouseButton]
    ) -> ActionMapBuilder:
        """Add several bindings to an action."""
        for binding in bindings:
            self._actions.bind(action, binding)
        return self

    def build(self) -> ActionMap:
        """Return the built action map."""
        return self._actions