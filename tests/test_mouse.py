from voxelicous.input.keyboard import ElementState
from voxelicous.input.mouse import (
    CursorMode,
    LineDelta,
    MouseButton,
    MouseState,
    PixelDelta,
    Vec2,
)


def test_mouse_position():
    mouse = MouseState()

    mouse.set_position(100.0, 200.0)
    assert mouse.position == Vec2(100.0, 200.0)

    mouse.set_position(150.0, 220.0)
    assert mouse.position == Vec2(150.0, 220.0)
    assert mouse.delta == Vec2(50.0, 20.0)


def test_mouse_buttons():
    mouse = MouseState()

    assert not mouse.is_pressed(MouseButton.LEFT)

    mouse.process_button(MouseButton.LEFT, ElementState.PRESSED)
    assert mouse.is_pressed(MouseButton.LEFT)
    assert mouse.is_just_pressed(MouseButton.LEFT)

    mouse.end_frame()
    assert mouse.is_pressed(MouseButton.LEFT)
    assert not mouse.is_just_pressed(MouseButton.LEFT)

    mouse.process_button(MouseButton.LEFT, ElementState.RELEASED)
    assert not mouse.is_pressed(MouseButton.LEFT)
    assert mouse.is_just_released(MouseButton.LEFT)


def test_scroll_delta():
    mouse = MouseState()

    mouse.process_scroll(LineDelta(0.0, 1.0))
    assert mouse.scroll_delta == Vec2(0.0, 1.0)

    mouse.process_scroll(LineDelta(0.5, 0.5))
    assert mouse.scroll_delta == Vec2(0.5, 1.5)

    mouse.end_frame()
    assert mouse.scroll_delta == Vec2.ZERO


def test_raw_motion():
    mouse = MouseState()

    mouse.add_raw_motion(10.0, 20.0)
    assert mouse.raw_delta == Vec2(10.0, 20.0)

    mouse.add_raw_motion(5.0, 5.0)
    assert mouse.raw_delta == Vec2(15.0, 25.0)

    mouse.end_frame()
    assert mouse.raw_delta == Vec2.ZERO


def test_pixel_scroll_is_scaled_to_lines():
    mouse = MouseState()
    mouse.process_scroll(PixelDelta(100.0, 250.0))
    assert mouse.scroll_delta == Vec2(1.0, 2.5)


def test_other_button_ignored():
    mouse = MouseState()
    mouse.process_button(8, ElementState.PRESSED)
    assert not any(mouse.is_pressed(button) for button in MouseButton)


def test_end_frame_resets_position_delta_but_keeps_position():
    mouse = MouseState()
    mouse.set_position(3.0, 4.0)
    mouse.end_frame()
    assert mouse.delta == Vec2.ZERO
    assert mouse.position == Vec2(3.0, 4.0)


def test_cursor_mode():
    mouse = MouseState()
    assert mouse.cursor_mode is CursorMode.NORMAL
    mouse.set_cursor_mode(CursorMode.LOCKED)
    assert mouse.cursor_mode is CursorMode.LOCKED


def test_clear_resets_everything():
    mouse = MouseState()
    mouse.set_position(10.0, 10.0)
    mouse.add_raw_motion(1.0, 1.0)
    mouse.process_scroll(LineDelta(1.0, 1.0))
    mouse.process_button(MouseButton.RIGHT, ElementState.PRESSED)
    mouse.set_cursor_mode(CursorMode.CONFINED)

    mouse.clear()

    assert mouse.position == Vec2.ZERO
    assert mouse.delta == Vec2.ZERO
    assert mouse.raw_delta == Vec2.ZERO
    assert mouse.scroll_delta == Vec2.ZERO
    assert not mouse.is_pressed(MouseButton.RIGHT)
    assert mouse.cursor_mode is CursorMode.NORMAL


def test_vec2_arithmetic():
    assert Vec2(1.0, 2.0) + Vec2(3.0, 4.0) == Vec2(4.0, 6.0)
    assert Vec2(5.0, 5.0) - Vec2(2.0, 1.0) == Vec2(3.0, 4.0)