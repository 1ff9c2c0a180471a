"""Colour themes for widgets and the service that selects the current one."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def normalized(self) -> tuple[float, float, float, float]:
        """The colour as four floats in [0, 1]."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)


_CLEAR = Color(0, 0, 0, 0)


@dataclass
class FrameTheme:
    background: Color = _CLEAR
    border: Color = _CLEAR
    outline: Color = _CLEAR
    activity_offset: int = 0


@dataclass
class ButtonTheme:
    background: Color = _CLEAR
    string: Color = _CLEAR
    outline: Color = _CLEAR
    activity: Color = _CLEAR
    highlight: Color = _CLEAR


@dataclass
class CheckboxTheme:
    background: Color = _CLEAR
    string: Color = _CLEAR
    outline: Color = _CLEAR
    activity: Color = _CLEAR
    highlight: Color = _CLEAR


@dataclass
class SliderTheme:
    background: Color = _CLEAR
    bar_background: Color = _CLEAR
    string: Color = _CLEAR
    outline: Color = _CLEAR
    activity: Color = _CLEAR
    highlight: Color = _CLEAR
    activity_bar: Color = _CLEAR
    bar_outline: Color = _CLEAR
    bar_thickness: int = 0
    target_thickness: int = 0


@dataclass
class LabelTheme:
    string: Color = _CLEAR
    background: Color = _CLEAR
    outline: Color = _CLEAR


@dataclass
class PopupTheme:
    background: Color = _CLEAR
    string: Color = _CLEAR
    outline: Color = _CLEAR
    highlight: Color = _CLEAR
    separator: Color = _CLEAR
    drop_animation_delay: int = 0


@dataclass
class TextboxTheme:
    background: Color = _CLEAR
    string: Color = _CLEAR
    outline: Color = _CLEAR
    cursor: Color = _CLEAR
    select: Color = _CLEAR


@dataclass
class ScrollbarTheme:
    background: Color = _CLEAR
    outline: Color = _CLEAR
    activity: Color = _CLEAR
    highlight: Color = _CLEAR
    pixel_thickness: int = 0
    min_bar_size: float = 0.0


@dataclass
class ListboxTheme:
    header_background: Color = _CLEAR
    header_highlight: Color = _CLEAR
    header_outline: Color = _CLEAR
    header_string: Color = _CLEAR
    item_background: Color = _CLEAR
    item_string: Color = _CLEAR
    item_outline: Color = _CLEAR
    item_highlight: Color = _CLEAR
    item_highlight_outline: Color = _CLEAR
    item_focused: Color = _CLEAR
    item_focused_outline: Color = _CLEAR
    line_separator: Color = _CLEAR
    outline: Color = _CLEAR
    background: Color = _CLEAR
    drag_outline: Color = _CLEAR
    drag_background: Color = _CLEAR


@dataclass
class Theme:
    """A named set of widget colours and metrics."""

    name: str = ""
    author: str = ""
    description: str = ""
    symmetric_layout: bool = False
    frame: FrameTheme = field(default_factory=FrameTheme)
    button: ButtonTheme = field(default_factory=ButtonTheme)
    checkbox: CheckboxTheme = field(default_factory=CheckboxTheme)
    slider: SliderTheme = field(default_factory=SliderTheme)
    label: LabelTheme = field(default_factory=LabelTheme)
    popup: PopupTheme = field(default_factory=PopupTheme)
    textbox: TextboxTheme = field(default_factory=TextboxTheme)
    scrollbar: ScrollbarTheme = field(default_factory=ScrollbarTheme)
    listbox: ListboxTheme = field(default_factory=ListboxTheme)


class ThemeNotFoundError(KeyError):
    """Raised when selecting a theme name that was never added."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"could not find theme named {self.name!r}"


_BLUE = (44, 166, 255)
_PINK = (245, 169, 184)
_AUTHOR = "ekgui"


def _accent(rgb: tuple[int, int, int], alpha: int) -> Color:
    return Color(*rgb, alpha)


def _dark_theme(name: str, description: str, accent: tuple[int, int, int]) -> Theme:
    return Theme(
        name=name,
        author=_AUTHOR,
        description=description,
        symmetric_layout=True,
        frame=FrameTheme(
            background=Color(43, 43, 43, 255),
            border=Color(190, 190, 190, 0),
            outline=Color(30, 40, 60, 100),
            activity_offset=18,
        ),
        button=ButtonTheme(
            background=Color(85, 85, 85, 50),
            string=Color(202, 202, 202, 255),
            outline=Color(202, 207, 222, 0),
            activity=_accent(accent, 100),
            highlight=_accent(accent, 50),
        ),
        checkbox=CheckboxTheme(
            background=Color(85, 85, 85, 0),
            string=Color(202, 202, 202, 255),
            outline=Color(202, 207, 222, 0),
            activity=_accent(accent, 200),
            highlight=_accent(accent, 50),
        ),
        slider=SliderTheme(
            background=Color(85, 85, 85, 50),
            bar_background=Color(85, 85, 85, 50),
            string=Color(202, 202, 202, 255),
            outline=Color(202, 207, 222, 0),
            activity=_accent(accent, 200),
            highlight=_accent(accent, 50),
            activity_bar=_accent(accent, 200),
            bar_outline=Color(202, 207, 222, 0),
            bar_thickness=100,
            target_thickness=0,
        ),
        label=LabelTheme(string=Color(202, 202, 202, 255)),
        popup=PopupTheme(
            background=Color(43, 43, 43, 255),
            string=Color(202, 202, 202, 255),
            outline=Color(43, 43, 43, 0),
            highlight=_accent(accent, 50),
            separator=Color(141, 141, 141, 50),
            drop_animation_delay=120,
        ),
        textbox=TextboxTheme(
            background=Color(242, 242, 242, 255),
            string=Color(141, 141, 141, 255),
            outline=Color(141, 141, 141, 50),
            cursor=Color(202, 202, 202, 255),
            select=_accent(accent, 50),
        ),
        scrollbar=ScrollbarTheme(
            background=Color(85, 85, 85, 255),
            outline=Color(202, 207, 222, 150),
            activity=_accent(accent, 200),
            highlight=_accent(accent, 50),
            pixel_thickness=4,
            min_bar_size=30.0,
        ),
        listbox=ListboxTheme(
            header_background=Color(85, 85, 85, 255),
            header_highlight=_accent(accent, 50),
            header_outline=Color(141, 141, 141, 100),
            header_string=Color(202, 202, 202, 255),
            item_background=Color(85, 85, 85, 0),
            item_string=Color(202, 202, 202, 255),
            item_outline=Color(141, 141, 141, 0),
            item_highlight=_accent(accent, 50),
            item_highlight_outline=Color(141, 141, 141, 0),
            item_focused=_accent(accent, 100),
            item_focused_outline=Color(141, 141, 141, 0),
            line_separator=Color(141, 141, 141, 100),
            outline=Color(141, 141, 141, 100),
            background=Color(85, 85, 85, 50),
            drag_outline=Color(141, 141, 141, 100),
            drag_background=Color(85, 85, 85, 50),
        ),
    )


def _light_theme(name: str, description: str, accent: tuple[int, int, int]) -> Theme:
    return Theme(
        name=name,
        author=_AUTHOR,
        description=description,
        symmetric_layout=True,
        frame=FrameTheme(
            background=Color(242, 242, 242, 255),
            border=Color(190, 190, 190, 0),
            outline=Color(202, 207, 222, 150),
            activity_offset=18,
        ),
        button=ButtonTheme(
            background=Color(204, 204, 204, 50),
            string=Color(141, 141, 141, 255),
            outline=Color(202, 207, 222, 0),
            activity=_accent(accent, 100),
            highlight=_accent(accent, 50),
        ),
        checkbox=CheckboxTheme(
            background=Color(204, 204, 204, 0),
            string=Color(141, 141, 141, 255),
            outline=Color(202, 207, 222, 0),
            activity=_accent(accent, 200),
            highlight=_accent(accent, 50),
        ),
        slider=SliderTheme(
            background=Color(204, 204, 204, 50),
            bar_background=Color(204, 204, 204, 50),
            string=Color(141, 141, 141, 255),
            outline=Color(202, 207, 222, 0),
            activity=_accent(accent, 200),
            highlight=_accent(accent, 50),
            activity_bar=_accent(accent, 200),
            bar_outline=_accent(accent, 200),
            bar_thickness=16,
            target_thickness=0,
        ),
        label=LabelTheme(string=Color(141, 141, 141, 255)),
        popup=PopupTheme(
            background=Color(242, 242, 242, 255),
            string=Color(141, 141, 141, 255),
            outline=Color(30, 40, 60, 0),
            highlight=Color(206, 225, 239, 255),
            separator=Color(202, 207, 222, 150),
            drop_animation_delay=120,
        ),
        textbox=TextboxTheme(
            background=Color(242, 242, 242, 255),
            string=Color(141, 141, 141, 255),
            outline=Color(202, 207, 222, 150),
            cursor=Color(141, 141, 141, 255),
            select=_accent(accent, 50),
        ),
        scrollbar=ScrollbarTheme(
            background=Color(202, 202, 202, 255),
            outline=Color(202, 207, 222, 150),
            activity=_accent(accent, 200),
            highlight=_accent(accent, 50),
            pixel_thickness=4,
            min_bar_size=30.0,
        ),
        listbox=ListboxTheme(
            header_background=Color(204, 204, 204, 255),
            header_highlight=_accent(accent, 50),
            header_outline=Color(202, 207, 222, 50),
            header_string=Color(141, 141, 141, 255),
            item_background=Color(204, 204, 204, 0),
            item_string=Color(141, 141, 141, 255),
            item_outline=Color(202, 207, 222, 50),
            item_highlight=_accent(accent, 50),
            item_highlight_outline=Color(202, 207, 222, 0),
            item_focused=_accent(accent, 100),
            item_focused_outline=Color(202, 207, 222, 0),
            line_separator=Color(202, 207, 222, 100),
            outline=Color(202, 207, 222, 100),
            background=Color(204, 204, 204, 50),
            drag_outline=Color(202, 207, 222, 100),
            drag_background=Color(204, 204, 204, 50),
        ),
    )


def default_themes() -> list[Theme]:
    """The built-in themes, in registration order."""
    return [
        _dark_theme("dark", "Pasted dark-theme... mwm", _BLUE),
        _light_theme("light", "Pasted light-theme... moow", _BLUE),
        _light_theme("light-pinky", "Pasted light-theme... moow", _PINK),
        _dark_theme("dark-pinky", "Pasted dark-theme... mooo mwm", _PINK),
    ]


class ThemeService:
    """Holds the known themes and a copy of the one currently in use."""

    def __init__(self, *, load_defaults: bool = True) -> None:
        self.themes: dict[str, Theme] = {}
        self.current_theme: Theme = Theme()
        if load_defaults:
            _log.debug("Initialising theme-service theme-scheme based")
            dark, light, light_pinky, dark_pinky = default_themes()
            self.add(dark)
            self.add(light)
            self.set_current_theme("dark")
            self.add(light_pinky)
            self.add(dark_pinky)

    def add(self, theme: Theme) -> None:
        """Register a theme, replacing any with the same name."""
        self.themes[theme.name] = copy.deepcopy(theme)

    def set_current_theme(self, name: str) -> None:
        """Make the named theme current; raises ThemeNotFoundError if unknown."""
        if self.current_theme.name == name:
            return
        try:
            theme = self.themes[name]
        except KeyError:
            _log.warning("Could not find theme named %r", name)
            raise ThemeNotFoundError(name) from None
        self.current_theme = copy.deepcopy(theme)