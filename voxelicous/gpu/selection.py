"""Instance extensions, physical device selection and queue family discovery."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Flag

from .capabilities import (
    GpuCapabilities,
    PhysicalDeviceInfo,
    api_version_major,
    api_version_minor,
)
from .errors import NoSuitableDeviceError

_RAY_TRACING_PIPELINE = "VK_KHR_ray_tracing_pipeline"
_ACCELERATION_STRUCTURE = "VK_KHR_acceleration_structure"
_DEFERRED_HOST_OPERATIONS = "VK_KHR_deferred_host_operations"
_RAY_QUERY = "VK_KHR_ray_query"
_SWAPCHAIN = "VK_KHR_swapchain"

_DEVICE_TYPE_SCORES = {
    "discrete_gpu": 1000,
    "integrated_gpu": 100,
    "virtual_gpu": 50,
}


class QueueFlags(Flag):
    """Operations a queue family supports."""

    GRAPHICS = 0x1
    COMPUTE = 0x2
    TRANSFER = 0x4
    SPARSE_BINDING = 0x8


@dataclass(frozen=True)
class QueueFamilyIndices:
    """Queue family chosen for each kind of work."""

    graphics: int
    compute: int
    transfer: int

    def unique(self) -> frozenset[int]:
        """The distinct families among the three."""
        return frozenset((self.graphics, self.compute, self.transfer))


def required_instance_extensions(platform: str | None = None) -> list[str]:
    """Instance extensions the engine needs on the given platform.

    ``platform`` follows :data:`sys.platform`; it defaults to the running one.
    """
    platform = sys.platform if platform is None else platform
    extensions = ["VK_KHR_surface"]
    if platform == "win32":
        extensions.append("VK_KHR_win32_surface")
    elif platform.startswith("linux"):
        extensions.extend(["VK_KHR_xlib_surface", "VK_KHR_wayland_surface"])
    elif platform == "darwin":
        extensions.extend(["VK_EXT_metal_surface", "VK_KHR_portability_enumeration"])
    extensions.append("VK_KHR_get_physical_device_properties2")
    return extensions


def validation_layers() -> list[str]:
    """Validation layers enabled in debug setups."""
    return ["VK_LAYER_KHRONOS_validation"]


def _supports_vulkan_1_3(api_version: int) -> bool:
    major = api_version_major(api_version)
    minor = api_version_minor(api_version)
    return not (major < 1 or (major == 1 and minor < 3))


def score_physical_device(device: PhysicalDeviceInfo, require_ray_tracing: bool) -> int:
    """Score a device for selection; -1 means it is unusable."""
    if not _supports_vulkan_1_3(device.api_version):
        return -1

    has_ray_tracing = (
        _RAY_TRACING_PIPELINE in device.extensions
        and _ACCELERATION_STRUCTURE in device.extensions
    )
    if require_ray_tracing and not has_ray_tracing:
        return -1

    score = _DEVICE_TYPE_SCORES.get(device.device_type, 0)
    if has_ray_tracing:
        score += 500
    score += device.device_local_memory_mb() // 1024
    if device.geometry_shader:
        score += 10
    return score


def select_physical_device(
    devices: Iterable[PhysicalDeviceInfo], require_ray_tracing: bool
) -> PhysicalDeviceInfo:
    """Pick the highest-scoring device.

    Raises NoSuitableDeviceError if there are no devices or none scores above zero.
    """
    best: PhysicalDeviceInfo | None = None
    best_score = 0
    for device in devices:
        score = score_physical_device(device, require_ray_tracing)
        if score > best_score:
            best_score = score
            best = device
    if best is None:
        raise NoSuitableDeviceError()
    return best


def find_queue_families(queue_families: Sequence[QueueFlags]) -> QueueFamilyIndices:
    """Choose graphics, compute and transfer families, preferring dedicated ones.

    Compute falls back to the graphics family and transfer to the compute family.
    Raises NoSuitableDeviceError if no family supports graphics.
    """
    graphics: int | None = None
    compute: int | None = None
    transfer: int | None = None

    for index, flags in enumerate(queue_families):
        has_graphics = QueueFlags.GRAPHICS in flags
        has_compute = QueueFlags.COMPUTE in flags
        if compute is None and has_compute and not has_graphics:
            compute = index
        if (
            transfer is None
            and QueueFlags.TRANSFER in flags
            and not has_graphics
            and not has_compute
        ):
            transfer = index
        if graphics is None and has_graphics:
            graphics = index

    if graphics is None:
        raise NoSuitableDeviceError()
    if compute is None:
        compute = graphics
    if transfer is None:
        transfer = compute
    return QueueFamilyIndices(graphics=graphics, compute=compute, transfer=transfer)


def required_device_extensions(capabilities: GpuCapabilities) -> list[str]:
    """Device extensions to enable for the given capabilities."""
    extensions = [_SWAPCHAIN]
    ray_tracing = capabilities.ray_tracing
    if ray_tracing.has_hardware_rt():
        extensions.extend(
            [_RAY_TRACING_PIPELINE, _ACCELERATION_STRUCTURE, _DEFERRED_HOST_OPERATIONS]
        )
        if ray_tracing.ray_query:
            extensions.append(_RAY_QUERY)
    return extensions