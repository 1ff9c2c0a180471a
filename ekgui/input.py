"""Input service: turns raw input events into named input states and bindings."""

from __future__ import annotations

import enum
import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

_log = logging.getLogger(__name__)

Clock = Callable[[], float]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class SpecialKey(enum.IntEnum):
    """Modifier keys that prefix the names of other inputs."""

    LEFT_SHIFT = 0
    RIGHT_SHIFT = 1
    LEFT_CTRL = 2
    RIGHT_CTRL = 3
    LEFT_ALT = 4
    RIGHT_ALT = 5
    TAB = 6


# The key name's first letter is put in front of these while the key is held,
# so "lshift" gives "lshift+" and "altgr" gives "altgr+".
_SPECIAL_KEY_SUFFIX = {
    SpecialKey.LEFT_SHIFT: "shift+",
    SpecialKey.RIGHT_SHIFT: "shift+",
    SpecialKey.LEFT_CTRL: "ctrl+",
    SpecialKey.RIGHT_CTRL: "ctrl+",
    SpecialKey.LEFT_ALT: "lt+",
    SpecialKey.RIGHT_ALT: "ltgr+",
    SpecialKey.TAB: "ab+",
}

_UNIT_ORDER = (
    SpecialKey.LEFT_CTRL,
    SpecialKey.RIGHT_CTRL,
    SpecialKey.LEFT_SHIFT,
    SpecialKey.RIGHT_SHIFT,
    SpecialKey.LEFT_ALT,
    SpecialKey.RIGHT_ALT,
    SpecialKey.TAB,
)


class InputEventType(enum.Enum):
    TEXT_INPUT = "text_input"
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    MOUSE_BUTTON_DOWN = "mouse_button_down"
    MOUSE_BUTTON_UP = "mouse_button_up"
    MOUSE_MOTION = "mouse_motion"
    MOUSE_WHEEL = "mouse_wheel"
    FINGER_DOWN = "finger_down"
    FINGER_UP = "finger_up"
    FINGER_MOTION = "finger_motion"


@dataclass
class InputEvent:
    """A platform-neutral input event."""

    type: InputEventType
    key_name: str = ""
    special_key: Optional[SpecialKey] = None
    mouse_button: int = 0
    mouse_motion_x: float = 0.0
    mouse_motion_y: float = 0.0
    mouse_wheel_x: int = 0
    mouse_wheel_y: int = 0
    mouse_wheel_precise_x: float = 0.0
    mouse_wheel_precise_y: float = 0.0
    finger_x: float = 0.0
    finger_y: float = 0.0
    finger_dx: float = 0.0
    finger_dy: float = 0.0


class Timer:
    """Measures milliseconds elapsed since the last reset."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or _monotonic_ms
        self.elapsed_ticks: float = 0.0

    def interval(self) -> float:
        """Milliseconds since the last reset."""
        return self._clock() - self.elapsed_ticks

    def reach(self, ms: float) -> bool:
        """Whether more than ``ms`` milliseconds passed since the last reset."""
        return self.interval() > ms

    def reset(self) -> bool:
        """Restart the timer; always True so it chains in conditions."""
        self.elapsed_ticks = self._clock()
        return True


@dataclass
class Interact:
    """Pointer position (x, y) and scroll or swipe amounts (z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass
class InputState:
    """Per-event flags and the current interaction point."""

    was_pressed: bool = False
    was_released: bool = False
    has_motion: bool = False
    was_typed: bool = False
    was_wheel: bool = False
    interact: Interact = field(default_factory=Interact)
    timing_last_interact: Timer = field(default_factory=Timer)
    ui_timing: Timer = field(default_factory=Timer)


@dataclass(eq=False)
class _InputBind:
    state: bool = False
    registry: list[str] = field(default_factory=list)


_DEFAULT_BINDINGS = (
    ("frame-drag-activity", "mouse-1"),
    ("frame-drag-activity", "finger-click"),
    ("frame-resize-activity", "mouse-1"),
    ("frame-resize-activity", "finger-click"),
    ("button-activity", "mouse-1"),
    ("button-activity", "finger-click"),
    ("checkbox-activity", "mouse-1"),
    ("checkbox-activity", "finger-click"),
    ("popup-activity", "mouse-1"),
    ("popup-activity", "finger-click"),
    ("textbox-activity", "mouse-1"),
    ("textbox-activity", "finger-click"),
    ("textbox-action-activity", "return"),
    ("textbox-action-activity", "keypad enter"),
    ("textbox-action-select-all", "lctrl+a"),
    ("textbox-action-select-all", "rctrl+a"),
    ("textbox-action-select-all-inline", "mouse-1"),
    ("textbox-action-select", "lshift"),
    ("textbox-action-select", "rshift"),
    ("textbox-action-select-word", "mouse-1-double"),
    ("textbox-action-select-word", "finger-hold"),
    ("textbox-action-delete-left", "abs-backspace"),
    ("textbox-action-delete-right", "abs-delete"),
    ("textbox-action-break-line", "return"),
    ("textbox-action-break-line", "keypad enter"),
    ("textbox-action-break-line", "lshift+return"),
    ("textbox-action-break-line", "rshift+return"),
    ("textbox-action-tab", "tab"),
    ("textbox-action-modifier", "lctrl"),
    ("textbox-action-modifier", "rctrl"),
    ("textbox-action-up", "abs-up"),
    ("textbox-action-down", "abs-down"),
    ("textbox-action-right", "abs-right"),
    ("textbox-action-left", "abs-left"),
    ("clipboard-copy", "lctrl+c"),
    ("clipboard-copy", "rctrl+c"),
    ("clipboard-copy", "copy"),
    ("clipboard-paste", "lctrl+v"),
    ("clipboard-paste", "rctrl+v"),
    ("clipboard-paste", "paste"),
    ("clipboard-cut", "lctrl+x"),
    ("clipboard-cut", "rctrl+x"),
    ("clipboard-cut", "cut"),
    ("listbox-activity-open", "mouse-1-double"),
    ("listbox-activity-open", "finger-hold"),
    ("listbox-activity-select", "mouse-1"),
    ("listbox-activity-select", "finger-click"),
    ("listbox-activity-select-many", "lctrl+mouse-1"),
    ("listbox-activity-select-many", "rctrl+mouse-1"),
    ("slider-drag-activity", "mouse-1"),
    ("slider-drag-activity", "finger-click"),
    ("slider-bar-increase", "mouse-wheel-up"),
    ("slider-bar-decrease", "mouse-wheel-down"),
    ("slider-bar-modifier", "lctrl"),
    ("slider-bar-modifier", "rctrl"),
    ("scrollbar-drag", "mouse-1"),
    ("scrollbar-drag", "finger-click"),
    ("scrollbar-scroll", "mouse-wheel"),
    ("scrollbar-scroll", "finger-swipe"),
    ("scrollbar-scroll", "lshift+mouse-wheel"),
    ("scrollbar-scroll", "rshift+mouse-wheel"),
    ("scrollbar-horizontal-scroll", "lshift+mouse-wheel"),
    ("scrollbar-horizontal-scroll", "rshift+mouse-wheel"),
)

_DOUBLE_INTERACT_MS = 500
_FINGER_HOLD_MS = 750
_SWIPE_FACTOR = 0.01


class InputService:
    """Keeps named input states and the tagged bindings that follow them."""

    def __init__(
        self,
        *,
        viewport: tuple[float, float] = (0.0, 0.0),
        clock: Optional[Clock] = None,
        load_defaults: bool = True,
    ) -> None:
        self.viewport_width, self.viewport_height = viewport
        self.input = InputState(
            timing_last_interact=Timer(clock), ui_timing=Timer(clock)
        )
        self._special_key_letter: dict[SpecialKey, Optional[str]] = {
            key: None for key in SpecialKey
        }
        self._input_map: dict[str, bool] = {}
        self._bindings: dict[str, list[_InputBind]] = {}
        self._binds: dict[str, _InputBind] = {}
        self._released: list[str] = []
        self._units_pressed: list[str] = []
        self._double_click_pressed: list[str] = []
        self._just_fired: list[_InputBind] = []
        self._special_keys_released = False
        self._finger_hold_event = False
        self._finger_swipe_event = False
        self._double_interact = Timer(clock)
        self._last_wheel = Timer(clock)

        if load_defaults:
            _log.debug("Registering default user-input bindings")
            for tag, input_name in _DEFAULT_BINDINGS:
                self.insert_input_bind(tag, input_name)

    # -- bindings ---------------------------------------------------------

    def insert_input_bind(self, tag: str, input_name: str) -> None:
        """Make the tag follow the state of ``input_name``."""
        bind_list = self._bindings.setdefault(input_name, [])
        bind = self._binds.setdefault(tag, _InputBind())
        if any(existing is bind for existing in bind_list):
            return
        bind_list.append(bind)
        bind.registry.append(input_name)

    def erase_input_bind(self, tag: str, input_name: Optional[str] = None) -> None:
        """Unbind one input from the tag, or the whole tag when no input is given."""
        if input_name is None:
            bind = self._binds.pop(tag, None)
            if bind is None:
                return
            for name in bind.registry:
                bind_list = self._bindings.get(name, [])
                for index, existing in enumerate(bind_list):
                    if existing is bind:
                        del bind_list[index]
                        break
            return

        bind = self._binds.get(tag)
        bind_list = self._bindings.get(input_name)
        if bind is None or not bind_list:
            return
        for index, existing in enumerate(bind_list):
            if existing is bind:
                del bind_list[index]
                break
        else:
            return
        if input_name in bind.registry:
            bind.registry.remove(input_name)

    def set_input_state(self, key: str, state: bool) -> None:
        """Set a named input and every tag bound to it."""
        self._input_map[key] = state
        for bind in self._bindings.get(key, ()):
            bind.state = state

    def set_input_bind_state(self, tag: str, state: bool) -> None:
        """Fire a tag directly; it is cleared again on the next update."""
        bind = self._binds.get(tag)
        if bind is None:
            return
        bind.state = state
        self._just_fired.append(bind)

    def get_input_state(self, key: str) -> bool:
        return self._input_map.get(key, False)

    def get_input_bind_state(self, tag: str) -> bool:
        bind = self._binds.get(tag)
        return bind.state if bind is not None else False

    def complete_with_units(self, key_name: str) -> str:
        """Prefix ``key_name`` with the held modifiers, e.g. ``lctrl+a``."""
        prefix = "".join(
            letter + _SPECIAL_KEY_SUFFIX[key]
            for key in _UNIT_ORDER
            if (letter := self._special_key_letter[key])
        )
        return prefix + key_name

    def contains_unit(self, label: str) -> bool:
        return label in self._units_pressed

    # -- events -----------------------------------------------------------

    def _press(self, name: str) -> None:
        self.set_input_state(name, True)
        self._released.append(name)

    def on_event(self, event: InputEvent) -> None:
        """Update input states from one event."""
        state = self.input
        state.was_pressed = False
        state.was_released = False
        state.has_motion = False
        state.was_typed = False
        interact = state.interact
        kind = event.type

        if kind is InputEventType.TEXT_INPUT:
            state.was_pressed = True
            state.was_typed = True

        elif kind is InputEventType.KEY_DOWN:
            state.was_pressed = True
            key_name = event.key_name
            if event.special_key is not None:
                self._special_key_letter[event.special_key] = key_name[:1] or None
                self.set_input_state(key_name, True)
                self._special_keys_released = True
            else:
                key_name = key_name.lower()
                self._press("abs-" + key_name)
                combined = self.complete_with_units(key_name)
                self._press(combined)
                if combined != key_name and not self.contains_unit(combined):
                    self._units_pressed.append(combined)

        elif kind is InputEventType.KEY_UP:
            state.was_released = True
            key_name = event.key_name
            if event.special_key is not None:
                self._special_key_letter[event.special_key] = None
                self.set_input_state(key_name, False)
                self._special_keys_released = True
                self.set_input_state(key_name + "-up", True)
            else:
                key_name = key_name.lower()
                self._press("abs-" + key_name + "-up")
                self._press(self.complete_with_units(key_name) + "-up")

        elif kind is InputEventType.MOUSE_BUTTON_DOWN:
            self._press("mouse")
            state.was_pressed = True
            combined = self.complete_with_units(f"mouse-{event.mouse_button}")
            self._press(combined)
            reached = self._double_interact.reach(_DOUBLE_INTERACT_MS)
            if not reached:
                double = combined + "-double"
                self.set_input_state(double, True)
                self._double_click_pressed.append(double)
                self._released.append(double)
            else:
                self._double_interact.reset()

        elif kind is InputEventType.MOUSE_BUTTON_UP:
            state.was_released = True
            self._press("mouse-up")
            self._press(self.complete_with_units(f"mouse-{event.mouse_button}") + "-up")

        elif kind is InputEventType.MOUSE_MOTION:
            state.has_motion = True
            interact.x = float(event.mouse_motion_x)
            interact.y = float(event.mouse_motion_y)

        elif kind is InputEventType.MOUSE_WHEEL:
            self._press(self.complete_with_units("mouse-wheel"))
            state.was_wheel = True
            self.set_input_state("mouse-wheel-up", event.mouse_wheel_y > 0)
            self.set_input_state("mouse-wheel-down", event.mouse_wheel_y < 0)
            self.set_input_state("mouse-wheel-right", event.mouse_wheel_x > 0)
            self.set_input_state("mouse-wheel-left", event.mouse_wheel_x < 0)

            # Scroll intensity grows as wheel events come closer together.
            elapsed = min(max(int(self._last_wheel.interval()), 0), 1000)
            intensity = (1000 - elapsed) / 1000.0
            if intensity > 0.99:
                intensity += 0.5
            intensity = max(intensity, 0.2)
            interact.z = event.mouse_wheel_precise_x * intensity
            interact.w = event.mouse_wheel_precise_y * intensity
            self._last_wheel.reset()

        elif kind is InputEventType.FINGER_DOWN:
            state.was_pressed = True
            state.timing_last_interact.reset()
            reached = self._double_interact.reach(_DOUBLE_INTERACT_MS)
            interact.x = event.finger_x * self.viewport_width
            interact.y = event.finger_y * self.viewport_height
            self.set_input_state("finger-click", True)
            self.set_input_state("finger-click-double", not reached)
            if reached:
                self._double_interact.reset()

        elif kind is InputEventType.FINGER_UP:
            state.was_released = True
            self._finger_hold_event = state.timing_last_interact.reach(_FINGER_HOLD_MS)
            self.set_input_state("finger-hold", self._finger_hold_event)
            self.set_input_state("finger-click", False)
            self.set_input_state("finger-click-double", False)
            self.set_input_state("finger-swipe", False)
            self.set_input_state("finger-swipe-up", False)
            self.set_input_state("finger-swipe-down", False)
            interact.x = event.finger_x * self.viewport_width
            interact.y = event.finger_y * self.viewport_height
            interact.z = 0.0
            interact.w = 0.0

        elif kind is InputEventType.FINGER_MOTION:
            state.has_motion = True
            interact.x = event.finger_x * self.viewport_width
            interact.y = event.finger_y * self.viewport_height
            interact.z = event.finger_dx * (self.viewport_width / 9.0)
            interact.w = event.finger_dy * self.viewport_height / 9.0
            self.set_input_state(
                "finger-swipe",
                abs(interact.w) > _SWIPE_FACTOR or abs(interact.z) > _SWIPE_FACTOR,
            )
            self.set_input_state("finger-swipe-up", interact.w > _SWIPE_FACTOR)
            self.set_input_state("finger-swipe-down", interact.w < -_SWIPE_FACTOR)
            self._finger_swipe_event = True
            state.timing_last_interact.reset()

        if state.has_motion and self._double_click_pressed:
            for name in self._double_click_pressed:
                self.set_input_state(name, False)
            self._double_click_pressed.clear()

    def on_update(self) -> None:
        """Clear the one-frame states left by the events of this frame."""
        state = self.input
        if state.ui_timing.reach(1000):
            state.ui_timing.reset()

        if state.was_wheel:
            self.set_input_state("mouse-wheel", False)
            self.set_input_state("mouse-wheel-up", False)
            self.set_input_state("mouse-wheel-down", False)
            state.was_wheel = False

        if self._finger_swipe_event:
            self.set_input_state("finger-swipe", False)
            self.set_input_state("finger-swipe-up", False)
            self.set_input_state("finger-swipe-down", False)
            self._finger_swipe_event = False

        self._finger_hold_event = False

        if self._special_keys_released:
            for name in self._units_pressed:
                self.set_input_state(name, False)
            self._units_pressed.clear()
            self._special_keys_released = False

        for name in self._released:
            self.set_input_state(name, False)
        self._released.clear()

        for bind in self._just_fired:
            bind.state = False
        self._just_fired.clear()