"""Modifier key flags."""

from __future__ import annotations

from enum import Flag


class Modifiers(Flag):
    """Set of held modifier keys (Shift, Ctrl, Alt, Super)."""

    SHIFT = 0b0001
    CTRL = 0b0010
    ALT = 0b0100
    SUPER = 0b1000

    def shift(self) -> bool:
        """True if Shift is held."""
        return Modifiers.SHIFT in self

    def ctrl(self) -> bool:
        """True if Control is held."""
        return Modifiers.CTRL in self

    def alt(self) -> bool:
        """True if Alt is held."""
        return Modifiers.ALT in self

    def super_key(self) -> bool:
        """True if the Super/Windows/Command key is held."""
        return Modifiers.SUPER in self

    @classmethod
    def from_state(
        cls, shift: bool, control: bool, alt: bool, super_key: bool
    ) -> Modifiers:
        """Build the flag set from individual key states."""
        result = cls(0)
        if shift:
            result |= cls.SHIFT
        if control:
            result |= cls.CTRL
        if alt:
            result |= cls.ALT
        if super_key:
            result |= cls.SUPER
        return result