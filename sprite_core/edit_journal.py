"""
Edit Journal
Pixel-diff undo/redo history addressed by frame index
"""

from typing import Callable, List, Optional

from PyQt6.QtGui import QColor

from .data_structures import Edit, Frame, Position
from .errors import NoActiveEditError, OutOfCanvasPosition


class EditJournal:
    """
    Records pixel edits against frame indices and replays them for undo/redo.

    An edit is recorded between begin_edit() and end_edit(); empty edits are
    discarded. The journal never reads pixels itself: callers supply the old
    color of every changed pixel, and positions outside the edited frame are
    rejected with OutOfCanvasPosition. Undo and redo write straight into the frame
    returned by ``frame_lookup``.

    on_frame_inserted()/on_frame_removed() must be called every time the frame
    sequence changes shape, otherwise stacked edits address the wrong frames.
    """

    def __init__(self, frame_lookup: Callable[[int], Frame]):
        self.frame_lookup = frame_lookup
        self.undo_stack: List[Edit] = []
        self.redo_stack: List[Edit] = []
        self.current_edit: Optional[Edit] = None

    @property
    def is_recording(self) -> bool:
        return self.current_edit is not None

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    # ------------------------------------------------------------------ #
    # Recording
    # ------------------------------------------------------------------ #
    def begin_edit(self, frame_index: int):
        """Start recording a new edit on the given frame"""
        if self.current_edit is not None:
            self.end_edit()
        self.redo_stack.clear()
        self.current_edit = Edit(frame_index)

    def add_component(self, position: Position, old_color: QColor, new_color: QColor):
        if self.current_edit is None:
            raise NoActiveEditError(f"Cannot record pixel {tuple(position)}: no edit in progress")
        frame = self.frame_lookup(self.current_edit.frame_index)
        x, y = position
        if not frame.contains(x, y):
            raise OutOfCanvasPosition(position, frame.size)
        self.current_edit.add_component(position, old_color, new_color)

    def end_edit(self) -> bool:
        """
        Finish the edit in progress

        Returns:
            True if the edit was committed, False if it was empty or absent
        """
        edit, self.current_edit = self.current_edit, None
        if edit is None or edit.is_empty:
            return False
        self.undo_stack.append(edit)
        return True

    # ------------------------------------------------------------------ #
    # Replay
    # ------------------------------------------------------------------ #
    def undo(self) -> Optional[int]:
        """
        Revert the most recent edit

        Returns:
            Index of the frame that changed, or None if there was nothing to undo
        """
        if not self.undo_stack:
            return None
        edit = self.undo_stack.pop()
        self._apply(edit, undo=True)
        self.redo_stack.append(edit)
        return edit.frame_index

    def redo(self) -> Optional[int]:
        """
        Reapply the most recently undone edit

        Returns:
            Index of the frame that changed, or None if there was nothing to redo
        """
        if not self.redo_stack:
            return None
        edit = self.redo_stack.pop()
        self._apply(edit, undo=False)
        self.undo_stack.append(edit)
        return edit.frame_index

    def _apply(self, edit: Edit, *, undo: bool):
        frame = self.frame_lookup(edit.frame_index)
        components = reversed(edit.components) if undo else edit.components
        for component in components:
            x, y = component.position
            frame.set_pixel(x, y, component.old_color if undo else component.new_color)

    # ------------------------------------------------------------------ #
    # Frame index remapping
    # ------------------------------------------------------------------ #
    def on_frame_inserted(self, at_index: int):
        """Shift every edit on a frame at or after ``at_index`` up by one"""
        for edit in self._all_edits():
            if edit.frame_index >= at_index:
                edit.frame_index += 1

    def on_frame_removed(self, at_index: int):
        """Drop edits on the removed frame and shift later ones down by one"""
        self.undo_stack = [e for e in self.undo_stack if e.frame_index != at_index]
        self.redo_stack = [e for e in self.redo_stack if e.frame_index != at_index]
        if self.current_edit is not None and self.current_edit.frame_index == at_index:
            self.current_edit = None
        for edit in self._all_edits():
            if edit.frame_index > at_index:
                edit.frame_index -= 1

    def clear_for_frame(self, index: int):
        """Forget all history of one frame, leaving other frames untouched"""
        self.undo_stack = [e for e in self.undo_stack if e.frame_index != index]
        self.redo_stack = [e for e in self.redo_stack if e.frame_index != index]

    def clear_all(self):
        self.undo_stack.clear()
        self.redo_stack.clear()
        self.current_edit = None

    def _all_edits(self) -> List[Edit]:
        edits = self.undo_stack + self.redo_stack
        if self.current_edit is not None:
            edits.append(self.current_edit)
        return edits
