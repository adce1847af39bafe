"""GPU error types."""

from __future__ import annotations


class GpuError(Exception):
    """Base class for GPU errors; raised directly for errors of no specific kind."""

    prefix: str = ""

    def __init__(self, message: str = "") -> None:
        self.message = message
        text = f"{self.prefix}: {message}" if self.prefix else message
        super().__init__(text)


class VulkanError(GpuError):
    """A Vulkan call returned an error result."""

    prefix = "Vulkan error"

    def __init__(self, result: str) -> None:
        self.result = result
        super().__init__(result)


class NoSuitableDeviceError(GpuError):
    """No GPU meets the engine's requirements."""

    def __init__(self) -> None:
        super().__init__("No suitable GPU found")


class ExtensionNotSupportedError(GpuError):
    """A required extension is not supported."""

    prefix = "Required extension not supported"


class AllocationFailedError(GpuError):
    """A memory allocation failed."""

    prefix = "Memory allocation failed"


class SurfaceCreationError(GpuError):
    """A presentation surface could not be created."""

    prefix = "Surface creation failed"


class SwapchainCreationError(GpuError):
    """A swapchain could not be created."""

    prefix = "Swapchain creation failed"


class ShaderCompilationError(GpuError):
    """A shader module could not be created."""

    prefix = "Shader compilation failed"


class PipelineCreationError(GpuError):
    """A pipeline could not be created."""

    prefix = "Pipeline creation failed"


class ResourceNotFoundError(GpuError):
    """A requested resource does not exist."""

    prefix = "Resource not found"


class InvalidStateError(GpuError):
    """An operation was attempted in an invalid state."""

    prefix = "Invalid state"