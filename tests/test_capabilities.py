import pytest

from voxelicous.gpu.capabilities import (
    DeviceLimits,
    GpuCapabilities,
    GpuVendor,
    MemoryHeap,
    PhysicalDeviceInfo,
    RayTracingCapabilities,
    api_version_major,
    api_version_minor,
    api_version_patch,
    make_api_version,
)

GIB = 1024 * 1024 * 1024
MIB = 1024 * 1024

RT_EXTENSIONS = {
    "VK_KHR_ray_tracing_pipeline",
    "VK_KHR_acceleration_structure",
    "VK_KHR_ray_query",
}


def make_device(**overrides):
    values = dict(
        vendor_id=0x10DE,
        device_name="Test GPU",
        api_version=make_api_version(0, 1, 3, 250),
        driver_version=7,
        memory_heaps=[MemoryHeap(8 * GIB, device_local=True), MemoryHeap(16 * GIB)],
        limits=DeviceLimits(4096, (1024, 1024, 64), 1024, 49152),
        extensions=set(),
    )
    values.update(overrides)
    return PhysicalDeviceInfo(**values)


def test_vendor_identification():
    assert GpuVendor.from_vendor_id(0x10DE) == GpuVendor.NVIDIA
    assert GpuVendor.from_vendor_id(0x1002) == GpuVendor.AMD
    assert GpuVendor.from_vendor_id(0x8086) == GpuVendor.INTEL
    assert GpuVendor.from_vendor_id(0x106B) == GpuVendor.APPLE


def test_unknown_vendor_keeps_id():
    vendor = GpuVendor.from_vendor_id(0x1234)
    assert vendor.vendor_id == 0x1234
    assert str(vendor) == f"Other({0x1234})"
    assert not vendor.is_nvidia()


def test_is_nvidia():
    assert GpuVendor.NVIDIA.is_nvidia()
    assert not GpuVendor.AMD.is_nvidia()


@pytest.mark.parametrize(
    ("major", "minor", "patch"), [(1, 3, 0), (1, 2, 198), (1, 3, 4095), (0, 0, 1)]
)
def test_api_version_round_trip(major, minor, patch):
    version = make_api_version(0, major, minor, patch)
    assert api_version_major(version) == major
    assert api_version_minor(version) == minor
    assert api_version_patch(version) == patch


def test_api_version_packing():
    assert make_api_version(0, 1, 3, 0) == (1 << 22) | (3 << 12)


def test_has_hardware_rt():
    assert not RayTracingCapabilities().has_hardware_rt()
    assert RayTracingCapabilities(pipeline=True, acceleration_structure=True).has_hardware_rt()
    assert not RayTracingCapabilities(pipeline=True).has_hardware_rt()


def test_device_local_memory_counts_only_local_heaps():
    device = make_device(
        memory_heaps=[
            MemoryHeap(2 * GIB, device_local=True),
            MemoryHeap(256 * MIB + 5, device_local=True),
            MemoryHeap(32 * GIB),
        ]
    )
    assert device.device_local_memory_mb() == 2048 + 256


def test_query_vulkan_1_3_device():
    caps = GpuCapabilities.query(make_device())
    assert caps.vendor == GpuVendor.NVIDIA
    assert caps.device_name == "Test GPU"
    assert caps.driver_version == 7
    assert caps.supports_dynamic_rendering
    assert caps.supports_synchronization2
    assert caps.supports_buffer_device_address
    assert caps.supports_descriptor_indexing
    assert caps.supports_scalar_block_layout
    assert caps.device_local_memory_mb == 8192
    assert caps.max_memory_allocation_count == 4096
    assert caps.max_compute_workgroup_size == (1024, 1024, 64)
    assert caps.max_compute_workgroup_invocations == 1024
    assert caps.max_compute_shared_memory_size == 49152
    assert caps.ray_tracing == RayTracingCapabilities()


def test_query_older_device_uses_extensions():
    device = make_device(
        api_version=make_api_version(0, 1, 2, 0),
        extensions={"VK_KHR_buffer_device_address"},
    )
    caps = GpuCapabilities.query(device)
    assert not caps.supports_dynamic_rendering
    assert not caps.supports_synchronization2
    assert caps.supports_buffer_device_address
    assert not caps.supports_descriptor_indexing
    assert not caps.supports_scalar_block_layout
    assert caps.available_extensions == frozenset({"VK_KHR_buffer_device_address"})


def test_query_ray_tracing():
    device = make_device(
        extensions=RT_EXTENSIONS, max_ray_recursion_depth=31, max_ray_hit_attribute_size=32
    )
    rt = GpuCapabilities.query(device).ray_tracing
    assert rt == RayTracingCapabilities(True, True, True, 31, 32)


def test_query_ray_tracing_needs_acceleration_structure():
    device = make_device(
        extensions={"VK_KHR_ray_tracing_pipeline", "VK_KHR_ray_query"},
        max_ray_recursion_depth=31,
    )
    assert GpuCapabilities.query(device).ray_tracing == RayTracingCapabilities()


def test_meets_requirements():
    assert GpuCapabilities.query(make_device()).meets_requirements()


def test_requirements_reject_old_vulkan():
    device = make_device(api_version=make_api_version(0, 1, 2, 0))
    assert not GpuCapabilities.query(device).meets_requirements()


def test_requirements_reject_small_vram():
    device = make_device(memory_heaps=[MemoryHeap(1023 * MIB, device_local=True)])
    assert not GpuCapabilities.query(device).meets_requirements()


def test_requirements_accept_exactly_one_gib():
    device = make_device(memory_heaps=[MemoryHeap(GIB, device_local=True)])
    assert GpuCapabilities.query(device).meets_requirements()


def test_summary_compute_fallback():
    caps = GpuCapabilities.query(make_device())
    assert caps.summary() == "Test GPU (Nvidia) - Vulkan 1.3.250 - 8192 MB VRAM - Compute fallback"


def test_summary_hardware_rt():
    caps = GpuCapabilities.query(make_device(vendor_id=0x1002, extensions=RT_EXTENSIONS))
    assert caps.summary() == "Test GPU (Amd) - Vulkan 1.3.250 - 8192 MB VRAM - Hardware RT"