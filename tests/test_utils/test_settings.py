"""Tests for persisted editor settings."""

import pytest

from sprite_utils import EditorConfig, SettingsManager


@pytest.fixture
def settings(tmp_path):
    return SettingsManager(str(tmp_path / "settings.ini"))


class TestSettingsManager:
    def test_defaults(self, settings):
        assert settings.get_last_file() == ""
        config = settings.load_editor_config()
        assert config == EditorConfig()

    def test_values_round_trip(self, settings):
        settings.set_last_file("/tmp/sprite.ssp")
        settings.set_canvas_size(24)
        settings.set_animation_fps(12)
        settings.set_gradient_size(150)
        assert settings.get_last_file() == "/tmp/sprite.ssp"
        config = settings.load_editor_config()
        assert config.canvas_size == 24
        assert config.animation_fps == 12
        assert config.gradient_size == 150

    def test_persists_to_disk(self, tmp_path):
        path = str(tmp_path / "settings.ini")
        first = SettingsManager(path)
        first.set_canvas_size(20)
        first.sync()
        assert SettingsManager(path).get_canvas_size() == 20

    def test_out_of_range_canvas_size_falls_back(self, settings):
        settings.set_canvas_size(500)
        settings.set_animation_fps(-3)
        config = settings.load_editor_config()
        assert config.canvas_size == EditorConfig.canvas_size
        assert config.animation_fps == 0
