from voxelicous.input.button_state import ButtonState


def test_button_state_transitions():
    state = ButtonState.RELEASED
    assert not state.is_pressed()
    assert not state.is_just_pressed()
    assert state.is_released()

    state = state.press()
    assert state.is_pressed()
    assert state.is_just_pressed()
    assert not state.is_released()

    state = state.end_frame()
    assert state.is_pressed()
    assert not state.is_just_pressed()

    state = state.release()
    assert not state.is_pressed()
    assert state.is_just_released()
    assert state.is_released()

    state = state.end_frame()
    assert not state.is_pressed()
    assert not state.is_just_released()
    assert state.is_released()


def test_double_press_ignored():
    state = ButtonState.JUST_PRESSED
    state = state.press()
    assert state is ButtonState.JUST_PRESSED

    state = state.end_frame()
    state = state.press()
    assert state is ButtonState.PRESSED


def test_double_release_ignored():
    state = ButtonState.RELEASED
    state = state.release()
    assert state is ButtonState.RELEASED


def test_release_of_just_released_is_unchanged():
    assert ButtonState.JUST_RELEASED.release() is ButtonState.JUST_RELEASED


def test_end_frame_keeps_settled_states():
    assert ButtonState.PRESSED.end_frame() is ButtonState.PRESSED
    assert ButtonState.RELEASED.end_frame() is ButtonState.RELEASED


def test_press_from_just_released_starts_new_press():
    assert ButtonState.JUST_RELEASED.press() is ButtonState.JUST_PRESSED