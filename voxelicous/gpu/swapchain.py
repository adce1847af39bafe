"""Surface format, present mode and extent selection for swapchains."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import SwapchainCreationError

UNDEFINED_EXTENT_DIMENSION = 0xFFFFFFFF
"""Marks a surface whose extent is chosen by the swapchain, not the window."""


class Format(Enum):
    """Image formats relevant to presentation and depth."""

    UNDEFINED = 0
    R8G8B8A8_UNORM = 37
    R8G8B8A8_SRGB = 43
    B8G8R8A8_UNORM = 44
    B8G8R8A8_SRGB = 50
    D32_SFLOAT = 126


class ColorSpace(Enum):
    """Colour spaces a surface can present in."""

    SRGB_NONLINEAR = 0
    EXTENDED_SRGB_LINEAR = 1000104002


class PresentMode(Enum):
    """How presented images are queued for display."""

    IMMEDIATE = 0
    MAILBOX = 1
    FIFO = 2
    FIFO_RELAXED = 3


@dataclass(frozen=True)
class Extent2D:
    """Width and height in pixels."""

    width: int
    height: int


@dataclass(frozen=True)
class SurfaceFormat:
    """A format paired with the colour space it is presented in."""

    format: Format
    color_space: ColorSpace


@dataclass
class SurfaceCapabilities:
    """What a surface supports, as reported for one device.

    ``max_image_count`` of 0 means there is no upper limit. A
    ``current_extent`` width of :data:`UNDEFINED_EXTENT_DIMENSION` means the
    extent is picked by the swapchain within the min/max bounds.
    """

    min_image_count: int = 1
    max_image_count: int = 0
    current_extent: Extent2D = Extent2D(UNDEFINED_EXTENT_DIMENSION, UNDEFINED_EXTENT_DIMENSION)
    min_image_extent: Extent2D = Extent2D(1, 1)
    max_image_extent: Extent2D = Extent2D(16384, 16384)
    formats: list[SurfaceFormat] = field(default_factory=list)
    present_modes: list[PresentMode] = field(default_factory=list)

    def recommended_format(self) -> SurfaceFormat:
        """The surface format the engine would pick."""
        return select_surface_format(self.formats)

    def recommended_present_mode(self, vsync: bool) -> PresentMode:
        """The present mode the engine would pick."""
        return select_present_mode(self.present_modes, vsync)

    def extent_for(self, width: int, height: int) -> Extent2D:
        """The swapchain extent for a window of the given size."""
        return calculate_extent(self, width, height)


_PREFERRED_FORMAT = SurfaceFormat(Format.B8G8R8A8_SRGB, ColorSpace.SRGB_NONLINEAR)


def select_surface_format(available: list[SurfaceFormat]) -> SurfaceFormat:
    """Prefer BGRA8 sRGB in the non-linear sRGB space, else the first format.

    Raises SwapchainCreationError if no formats are available.
    """
    if not available:
        raise SwapchainCreationError("surface reports no formats")
    return next((f for f in available if f == _PREFERRED_FORMAT), available[0])


def select_present_mode(available: list[PresentMode], vsync: bool) -> PresentMode:
    """FIFO with vsync; otherwise mailbox, then immediate, then FIFO."""
    if vsync:
        return PresentMode.FIFO
    for preferred in (PresentMode.MAILBOX, PresentMode.IMMEDIATE):
        if preferred in available:
            return preferred
    return PresentMode.FIFO


def _clamp(value: int, low: int, high: int) -> int:
    if low > high:
        raise ValueError(f"invalid extent bounds: {low} > {high}")
    return max(low, min(value, high))


def calculate_extent(
    capabilities: SurfaceCapabilities, desired_width: int, desired_height: int
) -> Extent2D:
    """Use the surface's current extent, or clamp the desired size to its bounds."""
    if capabilities.current_extent.width != UNDEFINED_EXTENT_DIMENSION:
        return capabilities.current_extent
    return Extent2D(
        width=_clamp(
            desired_width,
            capabilities.min_image_extent.width,
            capabilities.max_image_extent.width,
        ),
        height=_clamp(
            desired_height,
            capabilities.min_image_extent.height,
            capabilities.max_image_extent.height,
        ),
    )


def swapchain_image_count(capabilities: SurfaceCapabilities) -> int:
    """One image more than the minimum, capped by the maximum if there is one."""
    count = capabilities.min_image_count + 1
    if 0 < capabilities.max_image_count < count:
        count = capabilities.max_image_count
    return count