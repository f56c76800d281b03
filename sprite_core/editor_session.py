"""
Editor Session
The object the view talks to: owns the frame store, edit history, preview
player, color picker and recent colors, and reports every change through Qt
signals. The view never reaches into the components to mutate them.
"""

from typing import Any, Dict, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QColor

from sprite_utils.diagnostics import DiagnosticsManager
from sprite_utils.file_loader import load_json_project, save_json_project
from sprite_utils.settings import EditorConfig, SettingsManager

from .animation_player import AnimationPlayer
from .color_picker import ColorPicker
from .data_structures import Frame, Position, Tool, transparent
from .edit_journal import EditJournal
from .errors import (
    AnimationRunningError,
    MalformedProjectData,
    NoActiveEditError,
    OutOfCanvasPosition,
    OutOfRangeIndex,
)
from .frame_store import FrameStore
from .project_format import decode_project, encode_project
from .recent_colors import RecentColors


class EditorSession(QObject):
    """State of one open sprite project"""

    # Frames
    frame_updated = pyqtSignal(int)
    current_frame_changed = pyqtSignal(int)
    frame_added = pyqtSignal(int)
    frame_removed = pyqtSignal(int)
    frames_reset = pyqtSignal(int)
    canvas_size_changed = pyqtSignal(int)
    deletion_blocked = pyqtSignal()
    # History
    history_changed = pyqtSignal(bool, bool)
    # Preview
    animation_frame_ready = pyqtSignal(int, object)
    animation_started = pyqtSignal()
    animation_stopped = pyqtSignal()
    preview_reset = pyqtSignal()
    # Colors and tools
    color_changed = pyqtSignal(QColor)
    recent_colors_changed = pyqtSignal(list)
    tool_changed = pyqtSignal(object)
    # Files
    save_location_required = pyqtSignal()

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        settings: Optional[SettingsManager] = None,
        diagnostics: Optional[DiagnosticsManager] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self.settings = settings
        if config is None:
            config = settings.load_editor_config() if settings else EditorConfig()
        self.config = config
        self.diagnostics = diagnostics or DiagnosticsManager(parent=self)

        self.journal = EditJournal(lambda index: self.frames.frame(index))
        self.frames = FrameStore(config.canvas_size, journal=self.journal,
                                 is_playing=lambda: self.player.playing)

        self.player = AnimationPlayer(self.frames, self)
        self.player.frame_ready.connect(self.animation_frame_ready)
        self.player.started.connect(self.animation_started)
        self.player.stopped.connect(self.animation_stopped)
        self.player.preview_reset.connect(self.preview_reset)
        if config.animation_fps > 0:
            self.player.set_speed(config.animation_fps)

        self.picker = ColorPicker(config.gradient_size, self)
        self.recent_colors = RecentColors(config.recent_color_capacity)
        self.recent_colors.add(self.picker.current_color())
        self.tool = Tool.PEN
        self.current_color: QColor = self.recent_colors.last()
        self.picker.color_changed.connect(self._on_picker_color_changed)

        self.save_path: Optional[str] = None

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #
    @property
    def canvas_size(self) -> int:
        return self.frames.canvas_size

    @property
    def current_frame_index(self) -> int:
        return self.frames.current_index

    def frame(self, index: int) -> Frame:
        return self.frames.frame(index)

    # ------------------------------------------------------------------ #
    # Frames
    # ------------------------------------------------------------------ #
    def create_frame(self) -> int:
        """Append a blank frame and focus it"""
        index = self.frames.create_frame()
        self._announce_new_frame(index)
        self.diagnostics.log_frames(f"Created frame {index}", frame_index=index)
        return index

    def duplicate_frame(self) -> int:
        """Append a copy of the current frame and focus it"""
        source = self.frames.current_index
        index = self.frames.duplicate_current()
        self._announce_new_frame(index)
        self.diagnostics.log_frames(f"Duplicated frame {source} as frame {index}", frame_index=index)
        return index

    def _announce_new_frame(self, index: int):
        self.frame_added.emit(index)
        self.frame_updated.emit(index)
        self.current_frame_changed.emit(index)

    def delete_frame(self) -> bool:
        """
        Delete the current frame

        Returns:
            True if a frame was deleted
        """
        removed = self.frames.current_index
        try:
            deleted = self.frames.delete_current()
        except AnimationRunningError as exc:
            self.diagnostics.log_frames(str(exc), frame_index=removed, severity="WARNING")
            self.deletion_blocked.emit()
            return False
        if not deleted:
            self.diagnostics.log_frames("The base frame cannot be deleted.", frame_index=removed)
            return False

        self.frame_removed.emit(removed)
        self.current_frame_changed.emit(self.frames.current_index)
        self._emit_history_state()
        self.diagnostics.log_frames(f"Deleted frame {removed}", frame_index=removed)
        return True

    def select_frame(self, index: int) -> bool:
        try:
            self.frames.select(index)
        except OutOfRangeIndex as exc:
            self.diagnostics.log_frames(str(exc), frame_index=index, severity="WARNING")
            return False
        self.current_frame_changed.emit(index)
        return True

    def clear_current_frame(self):
        """Erase every pixel of the current frame and forget its history"""
        index = self.frames.current_index
        edit = self.journal.current_edit
        if edit is not None and edit.frame_index == index:
            self.journal.current_edit = None
        self.frames.current_frame.fill(transparent())
        self.journal.clear_for_frame(index)
        self.frame_updated.emit(index)
        self._emit_history_state()
        self.diagnostics.log_frames(f"Cleared frame {index}", frame_index=index)

    # ------------------------------------------------------------------ #
    # Edits
    # ------------------------------------------------------------------ #
    def begin_edit(self):
        """Start recording an edit on the current frame (pointer down)"""
        self.journal.begin_edit(self.frames.current_index)
        self._emit_history_state()

    def add_edit_component(self, position: Position, old_color: QColor, new_color: QColor) -> bool:
        try:
            self.journal.add_component(position, old_color, new_color)
        except NoActiveEditError as exc:
            self.diagnostics.log_edits(str(exc), severity="ERROR")
            return False
        except OutOfCanvasPosition as exc:
            self.diagnostics.log_edits(str(exc), frame_index=self.journal.current_edit.frame_index,
                                       severity="WARNING")
            return False
        return True

    def draw_pixel(self, x: int, y: int) -> bool:
        """
        Paint one pixel of the frame being edited with the current color

        Returns:
            True if the pixel changed
        """
        edit = self.journal.current_edit
        if edit is None:
            self.diagnostics.log_edits(f"Pixel ({x}, {y}) drawn with no edit in progress", severity="ERROR")
            return False
        frame = self.frames.frame(edit.frame_index)
        if not frame.contains(x, y):
            return False

        old_color = frame.pixel(x, y)
        new_color = self.current_color
        if old_color.rgba() == new_color.rgba():
            return False
        self.journal.add_component((x, y), old_color, new_color)
        frame.set_pixel(x, y, new_color)
        self.frame_updated.emit(edit.frame_index)
        return True

    def end_edit(self) -> bool:
        """Finish the edit in progress (pointer up)"""
        edit = self.journal.current_edit
        committed = self.journal.end_edit()
        if committed:
            self.diagnostics.log_edits(
                f"Recorded edit of {len(edit.components)} pixel(s)",
                frame_index=edit.frame_index,
                severity="DEBUG",
            )
        self._emit_history_state()
        return committed

    def clear_edits_on_frame(self, index: int) -> bool:
        if not 0 <= index < self.frames.frame_count:
            self.diagnostics.log_edits(f"No frame {index} to clear history for", severity="WARNING")
            return False
        self.journal.clear_for_frame(index)
        self._emit_history_state()
        return True

    def undo(self) -> bool:
        index = self.journal.undo()
        if index is None:
            self.diagnostics.log_edits("Nothing to undo.")
            return False
        self.frame_updated.emit(index)
        self._emit_history_state()
        self.diagnostics.log_edits(f"Undid edit on frame {index}", frame_index=index)
        return True

    def redo(self) -> bool:
        index = self.journal.redo()
        if index is None:
            self.diagnostics.log_edits("Nothing to redo.")
            return False
        self.frame_updated.emit(index)
        self._emit_history_state()
        self.diagnostics.log_edits(f"Redid edit on frame {index}", frame_index=index)
        return True

    def _emit_history_state(self):
        self.history_changed.emit(self.journal.can_undo, self.journal.can_redo)

    # ------------------------------------------------------------------ #
    # Preview
    # ------------------------------------------------------------------ #
    def toggle_animation(self) -> bool:
        running = self.player.toggle()
        if not running and self.player.interval_ms <= 0:
            self.diagnostics.log_animation("Set a frame rate above 0 to play the preview.")
        return running

    def set_animation_speed(self, fps: int):
        self.player.set_speed(fps)
        if self.settings:
            self.settings.set_animation_fps(max(0, fps))

    # ------------------------------------------------------------------ #
    # Colors and tools
    # ------------------------------------------------------------------ #
    def pick_color_at(self, point: Position) -> bool:
        """Select a gradient point directly; points outside the gradient are ignored"""
        if not self.picker.is_in_gradient_bounds(point):
            return False
        self.picker.update_current_color(point)
        return True

    def press_picker(self, point: Position):
        self.picker.press(point)

    def drag_picker(self, point: Position):
        self.picker.drag(point)

    def release_picker(self):
        self.picker.release()

    def set_hue(self, value: int):
        """Move the hue slider; the color is only announced by release_hue()"""
        self.picker.set_hue(value)

    def release_hue(self):
        self.picker.release_hue()

    def select_recent_color(self, color: QColor):
        self.picker.select_recent(color)

    def set_tool(self, tool: Tool):
        """Pen draws with the most recent color, eraser with transparency"""
        self.tool = tool
        if tool is Tool.ERASER:
            self.current_color = transparent()
        else:
            self.current_color = self.recent_colors.last() or self.picker.current_color()
        self.tool_changed.emit(tool)
        self.color_changed.emit(QColor(self.current_color))

    def _on_picker_color_changed(self, color: QColor):
        self.recent_colors.add(color)
        self.recent_colors_changed.emit(self.recent_colors.colors())
        self.diagnostics.log_color(
            f"Selected hsv({color.hue()}, {color.saturation()}, {color.value()})", severity="DEBUG"
        )
        self.set_tool(Tool.PEN)

    # ------------------------------------------------------------------ #
    # Projects and files
    # ------------------------------------------------------------------ #
    def new_project(self, size: int):
        """
        Replace the project with a single blank frame

        Raises:
            ValueError: size outside the configured canvas size range
        """
        if not self.config.min_canvas_size <= size <= self.config.max_canvas_size:
            raise ValueError(
                f"Canvas size must be between {self.config.min_canvas_size} "
                f"and {self.config.max_canvas_size}, got {size}"
            )
        self._reset_project([Frame.blank(size)], size)
        self.save_path = None
        if self.settings:
            self.settings.set_canvas_size(size)
        self.diagnostics.log_file(f"New {size}x{size} project")

    def load_project(self, data: Dict[str, Any]) -> bool:
        """
        Replace the project with decoded project data

        Invalid data leaves the current project untouched.
        """
        try:
            frames, size = decode_project(data)
        except MalformedProjectData as exc:
            self.diagnostics.log_file(f"Could not load project: {exc}", severity="ERROR")
            return False
        self._reset_project(frames, size)
        return True

    def save_project(self) -> Dict[str, Any]:
        return encode_project(self.frames.frames, self.frames.canvas_size)

    def save_file(self, path: str) -> bool:
        if not save_json_project(path, self.save_project()):
            self.diagnostics.log_file(f"Failed to save {path}", severity="ERROR")
            return False
        self.save_path = path
        if self.settings:
            self.settings.set_last_file(path)
        self.diagnostics.log_file(f"Saved {path}", severity="SUCCESS")
        return True

    def open_file(self, path: str) -> bool:
        data = load_json_project(path)
        if data is None:
            self.diagnostics.log_file(f"Could not read {path}", severity="ERROR")
            return False
        if not self.load_project(data):
            return False
        self.save_path = path
        if self.settings:
            self.settings.set_last_file(path)
        self.diagnostics.log_file(f"Opened {path}", severity="SUCCESS")
        return True

    def save(self) -> bool:
        """Save to the remembered location, or ask the view for one"""
        if self.save_path is None:
            self.save_location_required.emit()
            return False
        return self.save_file(self.save_path)

    def _reset_project(self, frames, size: int):
        self.frames.replace_all(frames, size)
        self.canvas_size_changed.emit(size)
        self.frames_reset.emit(self.frames.frame_count)
        for index in range(self.frames.frame_count):
            self.frame_updated.emit(index)
        self.current_frame_changed.emit(0)

        self.recent_colors.clear()
        self.picker.reset()
        self.player.reset()
        self._emit_history_state()

    def history_depths(self) -> Tuple[int, int]:
        return len(self.journal.undo_stack), len(self.journal.redo_stack)
