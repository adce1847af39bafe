# voxelicous

Engine-side logic for a voxel game, written so that it runs without a window
or a graphics API:

- **Input** (`voxelicous.input`): per-frame button states, modifier flags,
  keyboard and mouse tracking, and named actions that several keys or buttons
  can trigger. `InputManager` ties these together.
- **GPU** (`voxelicous.gpu`): capability checks, physical-device scoring and
  selection, queue-family choice, swapchain format, present-mode, extent and
  image-count selection, and a deferred deletion queue for frames in flight.
  All of it works on plain descriptions of devices and surfaces.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input

```python
from voxelicous.input.action import ActionMap
from voxelicous.input.keyboard import ElementState, KeyCode, KeyEvent
from voxelicous.input.manager import InputManager, KeyboardInput

actions = (
    ActionMap.builder()
    .bind("move_forward", KeyCode.KEY_W)
    .bind("move_forward", KeyCode.ARROW_UP)
    .bind("jump", KeyCode.SPACE)
    .build()
)
manager = InputManager.with_actions(actions)

# Feed window events as they arrive.
manager.process_window_event(KeyboardInput(KeyEvent(KeyCode.SPACE, ElementState.PRESSED)))

# Once per frame:
manager.update()
assert manager.is_action_just_pressed("jump")
manager.end_frame()
```

Call `update()` at the start of each frame, before you query actions. Call
`end_frame()` at the end of every frame. It turns "just pressed" into
"pressed" and "just released" into "released", and it resets the mouse
deltas.

A `ButtonState` moves through these states. Its methods return the next
state and do not change the value they are called on:

```
RELEASED --press--> JUST_PRESSED --end_frame--> PRESSED
   ^                                               |
   +---end_frame--- JUST_RELEASED <---release------+
```

### Events

`InputManager.process_window_event` accepts the following events and returns
`True` for them. For any other object it returns `False`:

- `KeyboardInput(KeyEvent(key, state))`. A `KeyEvent` with
  `physical_key=None` is ignored.
- `ModifiersChanged(modifiers)`, where `modifiers` is a `Modifiers` flag set:
  `SHIFT`, `CTRL`, `ALT`, `SUPER`. `Modifiers.from_state(shift, control, alt,
  super_key)` builds the set from separate booleans.
- `CursorMoved(x, y)`. It sets the position, and the change from the last
  position becomes `mouse_delta`.
- `MouseInput(button, state)`. Buttons that are not one of the five
  `MouseButton` members, for example an `int`, are ignored.
- `MouseWheel(delta)`. `delta` is a `LineDelta` or a `PixelDelta`. Pixel
  amounts are divided by 100 and added as lines.

`process_device_event(MouseMotion(dx, dy))` adds raw motion to
`mouse_raw_delta`. This is the value to use with a locked cursor.

### Bindings

An action can be bound to a `KeyCode`, a `MouseButton`, or an explicit binding:
`KeyBinding`, `KeyWithModifiersBinding` (the key counts only while the given
modifiers are held) or `MouseBinding`. Adding the same binding twice has no
effect. `get_bindings` returns a tuple of bindings, or `None` for an unknown
action. `unbind` and `clear_bindings` remove bindings. `to_binding` raises
`TypeError` for values that cannot be bound.

`set_cursor_mode` records `CursorMode.NORMAL`, `CONFINED` or `LOCKED`.
Applying the mode to a real window is up to the caller. `InputManager.clear()`
resets the keyboard and mouse state and keeps the action bindings.

## GPU selection

```python
from voxelicous.gpu.capabilities import (
    GpuCapabilities, MemoryHeap, PhysicalDeviceInfo, make_api_version,
)
from voxelicous.gpu.selection import (
    QueueFlags, find_queue_families, required_device_extensions, select_physical_device,
)

device = PhysicalDeviceInfo(
    vendor_id=0x10DE,
    device_name="Example GPU",
    api_version=make_api_version(0, 1, 3, 0),
    device_type="discrete_gpu",
    memory_heaps=[MemoryHeap(8 * 1024**3, device_local=True)],
)
chosen = select_physical_device([device], require_ray_tracing=False)
caps = GpuCapabilities.query(chosen)
caps.meets_requirements()          # True
caps.summary()                     # 'Example GPU (Nvidia) - Vulkan 1.3.0 - 8192 MB VRAM - Compute fallback'
required_device_extensions(caps)   # ['VK_KHR_swapchain']

families = find_queue_families([
    QueueFlags.GRAPHICS | QueueFlags.COMPUTE | QueueFlags.TRANSFER,
    QueueFlags.TRANSFER,
])
# QueueFamilyIndices(graphics=0, compute=0, transfer=1)
```

- `score_physical_device` returns -1 for devices without Vulkan 1.3. It also
  returns -1 for devices without ray tracing when ray tracing is required.
  Other devices score as follows:
  - 1000 for a discrete GPU, 100 for an integrated GPU, 50 for a virtual GPU;
  - 500 more for hardware ray tracing;
  - one more per GiB of device-local memory;
  - 10 more for geometry shaders.
- `select_physical_device` returns the highest-scoring device. It raises
  `NoSuitableDeviceError` when no device scores above zero.
- `find_queue_families` prefers dedicated compute and transfer families.
  Compute falls back to graphics, and transfer falls back to compute. It
  raises `NoSuitableDeviceError` when no family supports graphics.
- `GpuCapabilities.meets_requirements()` requires Vulkan 1.3, buffer device
  address and at least 1024 MB of device-local memory.
- `required_instance_extensions(platform)` follows `sys.platform` values.
  `validation_layers()` lists the Khronos validation layer.

## Swapchain choices

```python
from voxelicous.gpu.swapchain import (
    ColorSpace, Format, PresentMode, SurfaceCapabilities, SurfaceFormat, swapchain_image_count,
)

surface = SurfaceCapabilities(
    min_image_count=2,
    max_image_count=3,
    formats=[SurfaceFormat(Format.B8G8R8A8_SRGB, ColorSpace.SRGB_NONLINEAR)],
    present_modes=[PresentMode.FIFO, PresentMode.MAILBOX],
)
surface.recommended_present_mode(vsync=False)  # PresentMode.MAILBOX
surface.extent_for(1920, 1080)                 # Extent2D(width=1920, height=1080)
swapchain_image_count(surface)                 # 3
```

- `select_surface_format` prefers BGRA8 sRGB in the non-linear sRGB colour
  space. If that is not offered it takes the first format. It raises
  `SwapchainCreationError` when no formats are offered.
- `select_present_mode` always returns FIFO when vsync is on. Without vsync it
  prefers mailbox, then immediate, then FIFO.
- `calculate_extent` returns the surface's current extent when the surface
  defines one. Otherwise it clamps the requested size to the surface's
  bounds.

## Deferred deletion

`DeferredDeletionQueue(frames_in_flight)` holds buffers until no frame in
flight can still use them:

- `queue(buffer, frame_number)` adds a buffer to the queue.
- `process(allocator, current_frame_number)` frees the buffers that were
  queued before `current_frame_number - frames_in_flight`. It frees a buffer
  by calling `allocator.free_buffer(buffer)`.
- `flush(allocator)` frees every queued buffer.
- `pending_count` and `len()` give the number of buffers waiting.

## Errors

All GPU errors derive from `voxelicous.gpu.errors.GpuError`. The subclasses
are:

- `VulkanError`
- `NoSuitableDeviceError`
- `ExtensionNotSupportedError`
- `AllocationFailedError`
- `SurfaceCreationError`
- `SwapchainCreationError`
- `ShaderCompilationError`
- `PipelineCreationError`
- `ResourceNotFoundError`
- `InvalidStateError`

Each one puts a fixed prefix in front of its message, for example
`"Invalid state: ..."`.

## What this package does not do

This package makes no graphics API calls and does not open windows.

- It does not create instances, devices, surfaces, swapchains, pipelines,
  command buffers or synchronisation objects.
- It does not allocate GPU memory.
- It does not read events from a windowing library.

The caller describes the devices, queue families and surfaces, and the caller
delivers input events as the event objects above. The package makes the
choices and tracks the state.