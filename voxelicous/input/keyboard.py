"""Keyboard input state tracking."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum

from .button_state import ButtonState
from .modifiers import Modifiers


def _key_code_members() -> dict[str, str]:
    members = {f"KEY_{c}": f"Key{c}" for c in string.ascii_uppercase}
    members.update({f"DIGIT_{d}": f"Digit{d}" for d in range(10)})
    members.update({f"F{n}": f"F{n}" for n in range(1, 13)})
    members.update(
        {
            "SPACE": "Space",
            "ENTER": "Enter",
            "ESCAPE": "Escape",
            "TAB": "Tab",
            "BACKSPACE": "Backspace",
            "DELETE": "Delete",
            "INSERT": "Insert",
            "HOME": "Home",
            "END": "End",
            "PAGE_UP": "PageUp",
            "PAGE_DOWN": "PageDown",
            "ARROW_UP": "ArrowUp",
            "ARROW_DOWN": "ArrowDown",
            "ARROW_LEFT": "ArrowLeft",
            "ARROW_RIGHT": "ArrowRight",
            "SHIFT_LEFT": "ShiftLeft",
            "SHIFT_RIGHT": "ShiftRight",
            "CONTROL_LEFT": "ControlLeft",
            "CONTROL_RIGHT": "ControlRight",
            "ALT_LEFT": "AltLeft",
            "ALT_RIGHT": "AltRight",
            "SUPER_LEFT": "SuperLeft",
            "SUPER_RIGHT": "SuperRight",
            "CAPS_LOCK": "CapsLock",
            "MINUS": "Minus",
            "EQUAL": "Equal",
            "COMMA": "Comma",
            "PERIOD": "Period",
            "SLASH": "Slash",
            "BACKSLASH": "Backslash",
            "SEMICOLON": "Semicolon",
            "QUOTE": "Quote",
            "BRACKET_LEFT": "BracketLeft",
            "BRACKET_RIGHT": "BracketRight",
            "BACKQUOTE": "Backquote",
        }
    )
    return members


KeyCode = Enum(  # type: ignore[misc]
    "KeyCode", _key_code_members(), module=__name__, qualname="KeyCode"
)
KeyCode.__doc__ = "Physical key identifier, independent of keyboard layout."


class ElementState(Enum):
    """Whether a key or button went down or up."""

    PRESSED = "pressed"
    RELEASED = "released"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press or release.

    ``physical_key`` is None for keys the platform could not identify.
    """

    physical_key: KeyCode | None
    state: ElementState


@dataclass
class KeyboardState:
    """State of every key seen so far, plus the held modifiers."""

    keys: dict[KeyCode, ButtonState] = field(default_factory=dict)
    modifiers: Modifiers = Modifiers(0)

    def process_key_event(self, event: KeyEvent) -> None:
        """Apply a key event; events for unidentified keys are ignored."""
        key = event.physical_key
        if key is None:
            return
        current = self.keys.get(key, ButtonState.RELEASED)
        if event.state is ElementState.PRESSED:
            self.keys[key] = current.press()
        else:
            self.keys[key] = current.release()

    def set_modifiers(self, modifiers: Modifiers) -> None:
        """Replace the held modifier set."""
        self.modifiers = modifiers

    def _state(self, key: KeyCode) -> ButtonState:
        return self.keys.get(key, ButtonState.RELEASED)

    def is_pressed(self, key: KeyCode) -> bool:
        """True while the key is down."""
        return self._state(key).is_pressed()

    def is_just_pressed(self, key: KeyCode) -> bool:
        """True only in the frame the key went down."""
        return self._state(key).is_just_pressed()

    def is_just_released(self, key: KeyCode) -> bool:
        """True only in the frame the key went up."""
        return self._state(key).is_just_released()

    def end_frame(self) -> None:
        """Settle the per-frame key transitions."""
        self.keys = {key: state.end_frame() for key, state in self.keys.items()}

    def clear(self) -> None:
        """Forget all key states and modifiers."""
        self.keys.clear()
        self.modifiers = Modifiers(0)