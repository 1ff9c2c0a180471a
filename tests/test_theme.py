import pytest

from ekgui.theme import (
    Color,
    Theme,
    ThemeNotFoundError,
    ThemeService,
    default_themes,
)


def test_default_theme_names_in_order():
    assert [t.name for t in default_themes()] == ["dark", "light", "light-pinky", "dark-pinky"]


def test_service_starts_with_dark_theme():
    service = ThemeService()
    assert service.current_theme.name == "dark"
    assert set(service.themes) == {"dark", "light", "light-pinky", "dark-pinky"}


def test_pinned_values_from_source():
    themes = {t.name: t for t in default_themes()}
    assert themes["dark"].frame.background == Color(43, 43, 43, 255)
    assert themes["dark"].slider.bar_thickness == 100
    assert themes["light"].slider.bar_thickness == 16
    assert themes["dark-pinky"].button.activity == Color(245, 169, 184, 100)
    assert themes["light"].popup.highlight == Color(206, 225, 239, 255)


def test_pinky_variants_differ_from_base_only_in_accent():
    themes = {t.name: t for t in default_themes()}
    assert themes["dark"].frame == themes["dark-pinky"].frame
    assert themes["light"].textbox.background == themes["light-pinky"].textbox.background
    assert themes["dark"].button.highlight != themes["dark-pinky"].button.highlight


def test_unknown_theme_raises_and_keeps_current():
    service = ThemeService()
    with pytest.raises(ThemeNotFoundError):
        service.set_current_theme("missing")
    assert service.current_theme.name == "dark"


def test_switching_theme_copies_it():
    service = ThemeService()
    service.set_current_theme("light")
    assert service.current_theme == service.themes["light"]
    service.current_theme.frame.activity_offset = 99
    assert service.themes["light"].frame.activity_offset == 18


def test_add_replaces_theme_with_same_name():
    service = ThemeService(load_defaults=False)
    service.add(Theme(name="custom", description="first"))
    service.add(Theme(name="custom", description="second"))
    service.set_current_theme("custom")
    assert service.current_theme.description == "second"
    assert list(service.themes) == ["custom"]


def test_selecting_current_name_succeeds_without_registration():
    service = ThemeService(load_defaults=False)
    service.set_current_theme("")
    assert service.current_theme.name == ""
    with pytest.raises(ThemeNotFoundError):
        service.set_current_theme("dark")


def test_color_validation_and_normalisation():
    assert Color(255, 0, 255, 0).normalized() == (1.0, 0.0, 1.0, 0.0)
    with pytest.raises(ValueError):
        Color(256, 0, 0, 0)