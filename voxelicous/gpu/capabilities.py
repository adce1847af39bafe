"""GPU capability detection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

_MIB = 1024 * 1024


def make_api_version(variant: int, major: int, minor: int, patch: int) -> int:
    """Pack a Vulkan API version number."""
    return (variant << 29) | (major << 22) | (minor << 12) | patch


def api_version_major(version: int) -> int:
    """Major component of a packed Vulkan version."""
    return (version >> 22) & 0x7F


def api_version_minor(version: int) -> int:
    """Minor component of a packed Vulkan version."""
    return (version >> 12) & 0x3FF


def api_version_patch(version: int) -> int:
    """Patch component of a packed Vulkan version."""
    return version & 0xFFF


@dataclass(frozen=True)
class GpuVendor:
    """GPU vendor, identified by PCI vendor ID."""

    name: str
    vendor_id: int

    NVIDIA: ClassVar[GpuVendor]
    AMD: ClassVar[GpuVendor]
    INTEL: ClassVar[GpuVendor]
    APPLE: ClassVar[GpuVendor]

    @classmethod
    def from_vendor_id(cls, vendor_id: int) -> GpuVendor:
        """Identify the vendor from a PCI vendor ID."""
        for known in (cls.NVIDIA, cls.AMD, cls.INTEL, cls.APPLE):
            if known.vendor_id == vendor_id:
                return known
        return cls("Other", vendor_id)

    def is_nvidia(self) -> bool:
        """True for Nvidia GPUs."""
        return self == GpuVendor.NVIDIA

    def __str__(self) -> str:
        if self.name == "Other":
            return f"Other({self.vendor_id})"
        return self.name


GpuVendor.NVIDIA = GpuVendor("Nvidia", 0x10DE)
GpuVendor.AMD = GpuVendor("Amd", 0x1002)
GpuVendor.INTEL = GpuVendor("Intel", 0x8086)
GpuVendor.APPLE = GpuVendor("Apple", 0x106B)


@dataclass(frozen=True)
class RayTracingCapabilities:
    """Ray tracing support details."""

    pipeline: bool = False
    ray_query: bool = False
    acceleration_structure: bool = False
    max_ray_recursion_depth: int = 0
    max_ray_hit_attribute_size: int = 0

    def has_hardware_rt(self) -> bool:
        """True when both the RT pipeline and acceleration structures are available."""
        return self.pipeline and self.acceleration_structure


@dataclass(frozen=True)
class MemoryHeap:
    """One memory heap of a device."""

    size: int
    device_local: bool = False


@dataclass(frozen=True)
class DeviceLimits:
    """Device limits that the engine cares about."""

    max_memory_allocation_count: int = 0
    max_compute_work_group_size: tuple[int, int, int] = (0, 0, 0)
    max_compute_work_group_invocations: int = 0
    max_compute_shared_memory_size: int = 0


@dataclass
class PhysicalDeviceInfo:
    """Properties reported by a physical device.

    ``device_type`` is one of "discrete_gpu", "integrated_gpu", "virtual_gpu",
    "cpu" or "other". The ray tracing limits are only meaningful when the
    ray tracing extensions are present.
    """

    vendor_id: int
    device_name: str
    api_version: int
    driver_version: int = 0
    device_type: str = "other"
    memory_heaps: list[MemoryHeap] = field(default_factory=list)
    limits: DeviceLimits = field(default_factory=DeviceLimits)
    extensions: frozenset[str] = field(default_factory=frozenset)
    geometry_shader: bool = False
    max_ray_recursion_depth: int = 0
    max_ray_hit_attribute_size: int = 0

    def __post_init__(self) -> None:
        self.extensions = frozenset(self.extensions)
        self.memory_heaps = list(self.memory_heaps)

    def device_local_memory_mb(self) -> int:
        """Total device-local memory in whole MiB, summed per heap."""
        return sum(heap.size // _MIB for heap in self.memory_heaps if heap.device_local)


def _ray_tracing_capabilities(
    device: PhysicalDeviceInfo, extensions: Iterable[str]
) -> RayTracingCapabilities:
    available = frozenset(extensions)
    has_pipeline = "VK_KHR_ray_tracing_pipeline" in available
    has_ray_query = "VK_KHR_ray_query" in available
    has_accel = "VK_KHR_acceleration_structure" in available
    if not has_pipeline or not has_accel:
        return RayTracingCapabilities()
    return RayTracingCapabilities(
        pipeline=has_pipeline,
        ray_query=has_ray_query,
        acceleration_structure=has_accel,
        max_ray_recursion_depth=device.max_ray_recursion_depth,
        max_ray_hit_attribute_size=device.max_ray_hit_attribute_size,
    )


@dataclass(frozen=True)
class GpuCapabilities:
    """Capabilities detected on a GPU."""

    vendor: GpuVendor
    device_name: str
    api_version: int
    driver_version: int
    supports_dynamic_rendering: bool
    supports_synchronization2: bool
    supports_buffer_device_address: bool
    supports_descriptor_indexing: bool
    supports_scalar_block_layout: bool
    ray_tracing: RayTracingCapabilities
    device_local_memory_mb: int
    max_memory_allocation_count: int
    max_compute_workgroup_size: tuple[int, int, int]
    max_compute_workgroup_invocations: int
    max_compute_shared_memory_size: int
    available_extensions: frozenset[str]

    @classmethod
    def query(cls, device: PhysicalDeviceInfo) -> GpuCapabilities:
        """Derive capabilities from a device's reported properties."""
        extensions = frozenset(device.extensions)
        api_version = device.api_version
        has_vulkan_1_3 = (
            api_version_major(api_version) >= 1 and api_version_minor(api_version) >= 3
        )
        limits = device.limits
        return cls(
            vendor=GpuVendor.from_vendor_id(device.vendor_id),
            device_name=device.device_name,
            api_version=api_version,
            driver_version=device.driver_version,
            supports_dynamic_rendering=has_vulkan_1_3,
            supports_synchronization2=has_vulkan_1_3,
            supports_buffer_device_address=has_vulkan_1_3
            or "VK_KHR_buffer_device_address" in extensions,
            supports_descriptor_indexing=has_vulkan_1_3
            or "VK_EXT_descriptor_indexing" in extensions,
            supports_scalar_block_layout=has_vulkan_1_3
            or "VK_EXT_scalar_block_layout" in extensions,
            ray_tracing=_ray_tracing_capabilities(device, extensions),
            device_local_memory_mb=device.device_local_memory_mb(),
            max_memory_allocation_count=limits.max_memory_allocation_count,
            max_compute_workgroup_size=tuple(limits.max_compute_work_group_size),
            max_compute_workgroup_invocations=limits.max_compute_work_group_invocations,
            max_compute_shared_memory_size=limits.max_compute_shared_memory_size,
            available_extensions=extensions,
        )

    def meets_requirements(self) -> bool:
        """Vulkan 1.3, buffer device address and at least 1 GiB of VRAM."""
        major = api_version_major(self.api_version)
        minor = api_version_minor(self.api_version)
        if major < 1 or (major == 1 and minor < 3):
            return False
        if not self.supports_buffer_device_address:
            return False
        return self.device_local_memory_mb >= 1024

    def summary(self) -> str:
        """One-line human-readable description."""
        rt_status = (
            "Hardware RT" if self.ray_tracing.has_hardware_rt() else "Compute fallback"
        )
        return (
            f"{self.device_name} ({self.vendor}) - Vulkan "
            f"{api_version_major(self.api_version)}."
            f"{api_version_minor(self.api_version)}."
            f"{api_version_patch(self.api_version)} - "
            f"{self.device_local_memory_mb} MB VRAM - {rt_status}"
        )