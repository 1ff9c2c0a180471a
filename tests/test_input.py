import pytest

from ekgui.input import (
    InputEvent,
    InputEventType,
    InputService,
    SpecialKey,
    Timer,
)


class FakeClock:
    def __init__(self, now: float = 10_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(clock):
    return InputService(viewport=(800.0, 600.0), clock=clock)


def key_down(name, special=None):
    return InputEvent(InputEventType.KEY_DOWN, key_name=name, special_key=special)


def key_up(name, special=None):
    return InputEvent(InputEventType.KEY_UP, key_name=name, special_key=special)


def mouse_down(button=1):
    return InputEvent(InputEventType.MOUSE_BUTTON_DOWN, mouse_button=button)


def test_timer_reach_and_reset(clock):
    timer = Timer(clock)
    assert timer.reset() is True
    clock.now += 100
    assert timer.interval() == 100
    assert not timer.reach(500)
    clock.now += 500
    assert timer.reach(500)


def test_mouse_press_fires_binding_until_update(service):
    service.on_event(mouse_down(1))
    assert service.get_input_state("mouse-1")
    assert service.get_input_state("mouse")
    assert service.get_input_bind_state("button-activity")
    assert service.input.was_pressed
    service.on_update()
    assert not service.get_input_state("mouse-1")
    assert not service.get_input_bind_state("button-activity")


def test_double_click_within_interval(service, clock):
    service.on_event(mouse_down(1))
    assert not service.get_input_state("mouse-1-double")
    service.on_update()
    clock.now += 100
    service.on_event(mouse_down(1))
    assert service.get_input_state("mouse-1-double")
    assert service.get_input_bind_state("listbox-activity-open")


def test_motion_clears_double_click(service, clock):
    service.on_event(mouse_down(1))
    clock.now += 100
    service.on_event(mouse_down(1))
    assert service.get_input_state("mouse-1-double")
    service.on_event(InputEvent(InputEventType.MOUSE_MOTION, mouse_motion_x=5, mouse_motion_y=7))
    assert not service.get_input_state("mouse-1-double")
    assert (service.input.interact.x, service.input.interact.y) == (5.0, 7.0)


def test_slow_second_click_is_not_double(service, clock):
    service.on_event(mouse_down(1))
    service.on_update()
    clock.now += 600
    service.on_event(mouse_down(1))
    assert not service.get_input_state("mouse-1-double")


def test_ctrl_combination_fires_select_all(service):
    service.on_event(key_down("lctrl", SpecialKey.LEFT_CTRL))
    assert service.get_input_bind_state("textbox-action-modifier")
    service.on_event(key_down("a"))
    assert service.get_input_state("lctrl+a")
    assert service.get_input_state("abs-a")
    assert service.get_input_bind_state("textbox-action-select-all")
    assert service.contains_unit("lctrl+a")
    service.on_update()
    assert not service.get_input_state("lctrl+a")
    assert not service.contains_unit("lctrl+a")


def test_complete_with_units_order(service):
    assert service.complete_with_units("x") == "x"
    service.on_event(key_down("lshift", SpecialKey.LEFT_SHIFT))
    service.on_event(key_down("lctrl", SpecialKey.LEFT_CTRL))
    assert service.complete_with_units("x") == "lctrl+lshift+x"
    service.on_event(key_up("lctrl", SpecialKey.LEFT_CTRL))
    assert service.complete_with_units("x") == "lshift+x"


def test_special_key_up_state(service):
    service.on_event(key_down("lshift", SpecialKey.LEFT_SHIFT))
    assert service.get_input_bind_state("textbox-action-select")
    service.on_event(key_up("lshift", SpecialKey.LEFT_SHIFT))
    assert not service.get_input_state("lshift")
    assert service.get_input_state("lshift-up")
    assert not service.get_input_bind_state("textbox-action-select")
    assert service.input.was_released


def test_plain_key_name_is_lowercased(service):
    service.on_event(key_down("Backspace"))
    assert service.get_input_state("abs-backspace")
    assert service.get_input_bind_state("textbox-action-delete-left")
    service.on_event(key_up("Backspace"))
    assert service.get_input_state("abs-backspace-up")


def test_insert_and_erase_single_binding(service):
    service.insert_input_bind("custom", "f1")
    service.insert_input_bind("custom", "f1")
    service.set_input_state("f1", True)
    assert service.get_input_bind_state("custom")
    service.set_input_state("f1", False)
    service.erase_input_bind("custom", "f1")
    service.set_input_state("f1", True)
    assert not service.get_input_bind_state("custom")


def test_erase_whole_tag(service):
    service.erase_input_bind("button-activity")
    service.on_event(mouse_down(1))
    assert not service.get_input_bind_state("button-activity")
    assert service.get_input_bind_state("checkbox-activity")


def test_set_input_bind_state_cleared_on_update(service):
    service.set_input_bind_state("clipboard-copy", True)
    assert service.get_input_bind_state("clipboard-copy")
    service.on_update()
    assert not service.get_input_bind_state("clipboard-copy")
    service.set_input_bind_state("no-such-tag", True)
    assert not service.get_input_bind_state("no-such-tag")


def test_mouse_wheel_states_and_intensity(service):
    event = InputEvent(
        InputEventType.MOUSE_WHEEL,
        mouse_wheel_y=1,
        mouse_wheel_precise_x=2.0,
        mouse_wheel_precise_y=3.0,
    )
    service.on_event(event)
    assert service.get_input_state("mouse-wheel-up")
    assert not service.get_input_state("mouse-wheel-down")
    assert service.get_input_bind_state("slider-bar-increase")
    assert service.input.interact.w == pytest.approx(3.0 * 0.2)
    # A second wheel event at once scrolls harder.
    service.on_event(event)
    assert service.input.interact.w > 3.0
    assert service.input.interact.z == pytest.approx(2.0 * 1.5)
    service.on_update()
    assert not service.get_input_state("mouse-wheel-up")
    assert not service.get_input_state("mouse-wheel")


def test_finger_swipe(service):
    event = InputEvent(
        InputEventType.FINGER_MOTION, finger_x=0.5, finger_y=0.25, finger_dy=0.9
    )
    service.on_event(event)
    assert service.input.interact.x == pytest.approx(400.0)
    assert service.input.interact.y == pytest.approx(150.0)
    assert service.get_input_state("finger-swipe")
    assert service.get_input_state("finger-swipe-up")
    assert service.get_input_bind_state("scrollbar-scroll")
    service.on_update()
    assert not service.get_input_state("finger-swipe")


@pytest.mark.parametrize("held_ms, expected", [(800, True), (100, False)])
def test_finger_hold(service, clock, held_ms, expected):
    service.on_event(InputEvent(InputEventType.FINGER_DOWN))
    assert service.get_input_state("finger-click")
    clock.now += held_ms
    service.on_event(InputEvent(InputEventType.FINGER_UP))
    assert service.get_input_state("finger-hold") is expected
    assert not service.get_input_state("finger-click")
    assert service.input.interact.z == 0.0


def test_text_input_flags_reset_per_event(service):
    service.on_event(InputEvent(InputEventType.TEXT_INPUT))
    assert service.input.was_typed and service.input.was_pressed
    service.on_event(InputEvent(InputEventType.MOUSE_MOTION))
    assert not service.input.was_typed
    assert service.input.has_motion


def test_unknown_state_defaults_false(service):
    assert service.get_input_state("never-seen") is False
    assert service.get_input_bind_state("never-bound") is False