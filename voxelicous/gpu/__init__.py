"""GPU capability checks, device and queue selection, swapchain choices, deferred deletion and errors."""