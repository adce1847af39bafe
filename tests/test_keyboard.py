from voxelicous.input.keyboard import ElementState, KeyboardState, KeyCode, KeyEvent
from voxelicous.input.modifiers import Modifiers


def press(key):
    return KeyEvent(key, ElementState.PRESSED)


def release(key):
    return KeyEvent(key, ElementState.RELEASED)


def test_key_press_and_release():
    keyboard = KeyboardState()

    assert not keyboard.is_pressed(KeyCode.KEY_W)
    assert not keyboard.is_just_pressed(KeyCode.KEY_W)

    keyboard.process_key_event(press(KeyCode.KEY_W))
    assert keyboard.is_pressed(KeyCode.KEY_W)
    assert keyboard.is_just_pressed(KeyCode.KEY_W)

    keyboard.end_frame()
    assert keyboard.is_pressed(KeyCode.KEY_W)
    assert not keyboard.is_just_pressed(KeyCode.KEY_W)

    keyboard.process_key_event(release(KeyCode.KEY_W))
    assert not keyboard.is_pressed(KeyCode.KEY_W)
    assert keyboard.is_just_released(KeyCode.KEY_W)

    keyboard.end_frame()
    assert not keyboard.is_pressed(KeyCode.KEY_W)
    assert not keyboard.is_just_released(KeyCode.KEY_W)


def test_modifiers():
    keyboard = KeyboardState()
    keyboard.set_modifiers(Modifiers.SHIFT | Modifiers.CTRL)
    assert keyboard.modifiers.shift()
    assert keyboard.modifiers.ctrl()
    assert not keyboard.modifiers.alt()


def test_unidentified_key_ignored():
    keyboard = KeyboardState()
    keyboard.process_key_event(KeyEvent(None, ElementState.PRESSED))
    assert keyboard.keys == {}


def test_keys_are_independent():
    keyboard = KeyboardState()
    keyboard.process_key_event(press(KeyCode.SPACE))
    assert keyboard.is_pressed(KeyCode.SPACE)
    assert not keyboard.is_pressed(KeyCode.KEY_A)


def test_repeat_press_stays_held():
    keyboard = KeyboardState()
    keyboard.process_key_event(press(KeyCode.KEY_A))
    keyboard.end_frame()
    keyboard.process_key_event(press(KeyCode.KEY_A))
    assert keyboard.is_pressed(KeyCode.KEY_A)
    assert not keyboard.is_just_pressed(KeyCode.KEY_A)


def test_clear_resets_keys_and_modifiers():
    keyboard = KeyboardState()
    keyboard.process_key_event(press(KeyCode.KEY_A))
    keyboard.set_modifiers(Modifiers.ALT)
    keyboard.clear()
    assert not keyboard.is_pressed(KeyCode.KEY_A)
    assert keyboard.modifiers == Modifiers(0)


def test_key_code_values():
    assert KeyCode("KeyW") is KeyCode.KEY_W
    assert KeyCode("ArrowUp") is KeyCode.ARROW_UP
    assert KeyCode("Digit0") is KeyCode.DIGIT_0

    keyboard = KeyboardState()
    keyboard.process_key_event(press(KeyCode("ArrowUp")))
    assert keyboard.is_pressed(KeyCode.ARROW_UP)