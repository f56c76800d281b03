"""
Core module for the sprite editor
Contains the frame store, edit history, preview player and color picker
"""

from .data_structures import (
    Frame,
    EditComponent,
    Edit,
    Tool,
)
from .errors import (
    SpriteEditorError,
    OutOfRangeIndex,
    OutOfCanvasPosition,
    NoActiveEditError,
    AnimationRunningError,
    MalformedProjectData,
)
from .edit_journal import EditJournal
from .frame_store import FrameStore
from .animation_player import AnimationPlayer
from .color_picker import ColorPicker
from .recent_colors import RecentColors, are_similar_colors
from .project_format import encode_project, decode_project
from .editor_session import EditorSession

__all__ = [
    'Frame',
    'EditComponent',
    'Edit',
    'Tool',
    'SpriteEditorError',
    'OutOfRangeIndex',
    'OutOfCanvasPosition',
    'NoActiveEditError',
    'AnimationRunningError',
    'MalformedProjectData',
    'EditJournal',
    'FrameStore',
    'AnimationPlayer',
    'ColorPicker',
    'RecentColors',
    'are_similar_colors',
    'encode_project',
    'decode_project',
    'EditorSession',
]
