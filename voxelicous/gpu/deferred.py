"""Deferred buffer deletion for rendering with several frames in flight.

A buffer may still be used by an earlier frame when it is dropped, so it is
queued here and freed only once enough frames have passed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class BufferAllocator(Protocol):
    """Anything that can free a GPU buffer."""

    def free_buffer(self, buffer: Any) -> None: ...


@dataclass
class PendingDeletion:
    """A buffer waiting to be freed and the frame it was queued in."""

    buffer: Any
    frame_queued: int


class DeferredDeletionQueue:
    """Holds buffers for ``frames_in_flight`` frames before freeing them."""

    def __init__(self, frames_in_flight: int) -> None:
        self.frames_in_flight = frames_in_flight
        self._pending: list[PendingDeletion] = []

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def pending_count(self) -> int:
        """Number of buffers waiting to be freed."""
        return len(self._pending)

    def queue(self, buffer: Any, frame_number: int) -> None:
        """Queue a buffer that stopped being needed in ``frame_number``."""
        self._pending.append(PendingDeletion(buffer, frame_number))

    def process(self, allocator: BufferAllocator, current_frame_number: int) -> None:
        """Free buffers queued more than ``frames_in_flight`` frames ago.

        Call at the start of each frame. Buffers are removed from the queue
        before they are freed; an allocator error propagates.
        """
        cutoff = max(0, current_frame_number - self.frames_in_flight)
        to_free = [p for p in self._pending if p.frame_queued < cutoff]
        self._pending = [p for p in self._pending if p.frame_queued >= cutoff]
        for pending in to_free:
            allocator.free_buffer(pending.buffer)

    def flush(self, allocator: BufferAllocator) -> None:
        """Free every queued buffer now, e.g. at shutdown once the device is idle."""
        to_free, self._pending = self._pending, []
        for pending in to_free:
            allocator.free_buffer(pending.buffer)

    def set_frames_in_flight(self, frames_in_flight: int) -> None:
        """Change how many frames buffers are held for."""
        self.frames_in_flight = frames_in_flight