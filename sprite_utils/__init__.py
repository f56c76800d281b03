"""
Utils module for the sprite editor
Contains project file I/O, settings and the diagnostics log
"""

from .file_loader import load_json_project, save_json_project
from .settings import EditorConfig, SettingsManager
from .diagnostics import DiagnosticsConfig, DiagnosticsManager

__all__ = [
    'load_json_project',
    'save_json_project',
    'EditorConfig',
    'SettingsManager',
    'DiagnosticsConfig',
    'DiagnosticsManager',
]
