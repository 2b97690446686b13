"""Tests para core/preferences.py - Preferencias, tema y menú."""

import json

import pytest

from portfolio_forms.core import MenuController, PreferenceStore, ThemeController, ThemeMode


@pytest.fixture
def prefs_path(tmp_path):
    return tmp_path / "prefs" / "preferences.json"


class TestPreferenceStore:

    def test_memory_only(self):
        store = PreferenceStore()
        store.set("theme", "dark")
        assert store.get("theme") == "dark"
        assert store.get("missing", "x") == "x"

    def test_persists_to_json(self, prefs_path):
        PreferenceStore(prefs_path).set("theme", "dark")
        assert json.loads(prefs_path.read_text()) == {"theme": "dark"}
        assert PreferenceStore(prefs_path).get("theme") == "dark"

    def test_unreadable_file_raises_value_error(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError):
            PreferenceStore(path)


class TestThemeController:

    def test_defaults_to_light(self):
        assert ThemeController(PreferenceStore()).theme == ThemeMode.LIGHT

    def test_toggle_persists_and_announces(self, prefs_path):
        controller = ThemeController(PreferenceStore(prefs_path))
        announcement = controller.toggle()
        assert announcement == "Theme changed to dark mode"
        assert controller.theme == ThemeMode.DARK
        assert ThemeController(PreferenceStore(prefs_path)).theme == ThemeMode.DARK

    def test_toggle_back(self):
        controller = ThemeController(PreferenceStore())
        controller.toggle()
        controller.toggle()
        assert controller.theme == ThemeMode.LIGHT
        assert controller.icon == "☀"

    def test_unknown_stored_theme_falls_back(self):
        store = PreferenceStore()
        store.set("theme", "sepia")
        assert ThemeController(store).theme == ThemeMode.LIGHT


class TestMenuController:

    def test_toggle(self):
        menu = MenuController()
        assert menu.toggle() is True
        assert menu.scroll_locked
        assert menu.toggle() is False

    def test_escape_returns_focus_only_when_open(self):
        menu = MenuController()
        assert menu.handle_escape() is False
        menu.toggle()
        assert menu.handle_escape() is True
        assert not menu.expanded

    def test_outside_click_closes(self):
        menu = MenuController()
        menu.toggle()
        menu.handle_outside_click()
        assert not menu.expanded

    def test_resize_above_breakpoint_closes(self):
        menu = MenuController()
        menu.toggle()
        menu.handle_resize(600)
        assert menu.expanded
        menu.handle_resize(1024)
        assert not menu.expanded
