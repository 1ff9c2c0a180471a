# ekgui

Three services from the core of a small GUI toolkit: an input service that
turns raw events into named input states and action bindings, a deferred
task queue, and a set of colour themes. Nothing here draws anything, so a
rendering backend can sit on top of it.

## Installation

```
pip install ekgui
```

Python 3.10 or later is required. The package has no dependencies outside
the standard library.

## What is inside

### `ekgui.tasks`

- `Task`: a callable (`function`) paired with the `info` it is called with.
  Calling the task runs `function(info)`.
- `TaskHandler`: `dispatch(task)` queues a task unless it is already
  waiting. `on_update()` runs every queued task in dispatch order and empties
  the queue. `allocate(task)` keeps a task and returns its index, and
  `dispatch_pre_allocated(index)` queues it later. An unknown index raises
  `IndexError`. The `pending` property counts the queued tasks.

### `ekgui.theme`

- `Color`: an 8-bit RGBA colour. A channel outside 0–255 raises `ValueError`.
  `normalized()` returns the four channels as floats in [0, 1].
- `FrameTheme`, `ButtonTheme`, `CheckboxTheme`, `SliderTheme`, `LabelTheme`,
  `PopupTheme`, `TextboxTheme`, `ScrollbarTheme`, `ListboxTheme`: the colours
  and metrics for each kind of widget. `Theme` gathers them under a name.
- `default_themes()`: returns the built-in `dark`, `light`, `light-pinky` and
  `dark-pinky` themes.
- `ThemeService`: keeps themes by name in `themes` and a copy of the chosen
  one in `current_theme`. By default it loads the built-in themes and selects
  `dark`. Pass `load_defaults=False` to start empty. `add(theme)` registers
  a theme. `set_current_theme(name)` raises `ThemeNotFoundError` (a
  `KeyError`) for a name it does not know.

### `ekgui.input`

- `InputEvent` and `InputEventType`: platform-neutral key, mouse, wheel,
  text and touch events. `SpecialKey` marks the modifier keys.
- `InputService.on_event(event)` sets named input states such as
  `"abs-backspace"`, `"lctrl+a"`, `"mouse-1"`, `"mouse-1-double"`,
  `"mouse-wheel-up"`, `"finger-click"` and `"finger-swipe"`. It also updates
  the pointer position and the scroll amounts in `service.input.interact`.
  `on_update()` clears the states that last one frame.
- Bindings map input names to action tags. `insert_input_bind(tag, name)`
  adds one, `erase_input_bind(tag, name)` removes one, and
  `erase_input_bind(tag)` removes the whole tag. `get_input_bind_state(tag)`
  reads the state of a tag. `set_input_bind_state(tag, state)` sets a tag
  directly until the next update. The service starts with a default set of
  bindings, such as `"button-activity"` on `"mouse-1"` and
  `"clipboard-copy"` on `"lctrl+c"`. Pass `load_defaults=False` to start
  without them.
- `complete_with_units(key_name)` puts the modifiers currently held in front
  of a key name.
- `Timer` measures milliseconds since its last `reset()`. The service takes
  an optional `clock` (a callable returning milliseconds) so that timing can
  be controlled. It also takes a `viewport` (width, height), which scales
  touch coordinates.

## Example

```python
from ekgui.tasks import Task, TaskHandler
from ekgui.theme import ThemeService
from ekgui.input import InputEvent, InputEventType, InputService, SpecialKey

handler = TaskHandler()
handler.dispatch(Task(function=lambda info: print("ran", info), info="hello"))
handler.on_update()

themes = ThemeService()
themes.set_current_theme("light")

service = InputService()
service.on_event(InputEvent(InputEventType.KEY_DOWN, key_name="lctrl",
                            special_key=SpecialKey.LEFT_CTRL))
service.on_event(InputEvent(InputEventType.KEY_DOWN, key_name="a"))
assert service.get_input_state("lctrl+a")
assert service.get_input_bind_state("textbox-action-select-all")
service.on_update()
```

## What this package does not do

There are no widgets, no layout and no rendering here. The themes hold
colours and metrics, but nothing reads them to draw. The input service reads
no events from a window system, so the application must build the
`InputEvent`s itself and pass them to `on_event`.

## Running the tests

```
pip install ekgui[test]
pytest
```