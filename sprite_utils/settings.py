"""
Settings Manager
Handles editor settings persistence
"""

from dataclasses import dataclass
from typing import Optional

from PyQt6.QtCore import QSettings


@dataclass
class EditorConfig:
    """Editor defaults, overridable through persisted settings."""

    canvas_size: int = 16
    gradient_size: int = 200
    recent_color_capacity: int = 5
    min_canvas_size: int = 1
    max_canvas_size: int = 32
    animation_fps: int = 0


class SettingsManager:
    """Manages editor settings"""

    def __init__(self, ini_path: Optional[str] = None):
        if ini_path:
            self.settings = QSettings(ini_path, QSettings.Format.IniFormat)
        else:
            self.settings = QSettings('SpriteEditor', 'Settings')

    def get_last_file(self) -> str:
        """Get the last opened or saved project"""
        return self.settings.value('last_file', '', type=str)

    def set_last_file(self, filename: str):
        """Save the last opened or saved project"""
        self.settings.setValue('last_file', filename)

    def get_canvas_size(self, default: int = EditorConfig.canvas_size) -> int:
        """Get the canvas size used for new projects"""
        return self.settings.value('canvas_size', default, type=int)

    def set_canvas_size(self, size: int):
        self.settings.setValue('canvas_size', size)

    def get_animation_fps(self, default: int = EditorConfig.animation_fps) -> int:
        """Get the preview speed"""
        return self.settings.value('animation_fps', default, type=int)

    def set_animation_fps(self, fps: int):
        self.settings.setValue('animation_fps', fps)

    def get_gradient_size(self, default: int = EditorConfig.gradient_size) -> int:
        """Get the side length of the color picker gradient"""
        return self.settings.value('gradient_size', default, type=int)

    def set_gradient_size(self, size: int):
        self.settings.setValue('gradient_size', size)

    def load_editor_config(self) -> EditorConfig:
        """Build an editor config from stored values, clamped to sane ranges"""
        config = EditorConfig()
        size = self.get_canvas_size(config.canvas_size)
        if config.min_canvas_size <= size <= config.max_canvas_size:
            config.canvas_size = size
        config.gradient_size = max(1, self.get_gradient_size(config.gradient_size))
        config.animation_fps = max(0, self.get_animation_fps(config.animation_fps))
        return config

    def sync(self):
        """Flush pending writes to storage"""
        self.settings.sync()
