"""
Frame Store
Owns the ordered sequence of frames and the current frame index
"""

from typing import Callable, List, Optional, Sequence

from .data_structures import Frame
from .edit_journal import EditJournal
from .errors import AnimationRunningError, OutOfRangeIndex


class FrameStore:
    """
    Ordered, index-addressed sequence of equal-sized frames.

    The store always holds at least one frame. Whenever the sequence changes
    shape, the attached edit journal is told about it before the current index
    moves, so recorded edits keep pointing at the frames they were made on.
    """

    def __init__(
        self,
        canvas_size: int = 16,
        journal: Optional[EditJournal] = None,
        is_playing: Optional[Callable[[], bool]] = None,
    ):
        """
        Args:
            canvas_size: Side length of every frame, in pixels
            journal: Edit history to keep in sync with the frame sequence
            is_playing: Returns True while the preview animation runs
        """
        self.canvas_size: int = canvas_size
        self.journal = journal
        self.is_playing = is_playing or (lambda: False)
        self._frames: List[Frame] = [Frame.blank(canvas_size)]
        self._current_index: int = 0

    # ------------------------------------------------------------------ #
    # Access
    # ------------------------------------------------------------------ #
    def __len__(self) -> int:
        return len(self._frames)

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_frame(self) -> Frame:
        return self._frames[self._current_index]

    @property
    def frames(self) -> Sequence[Frame]:
        return tuple(self._frames)

    def frame(self, index: int) -> Frame:
        self._check_index(index)
        return self._frames[index]

    def _check_index(self, index: int):
        if not 0 <= index < len(self._frames):
            raise OutOfRangeIndex(index, len(self._frames))

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #
    def insert_frame(self, index: int, frame: Optional[Frame] = None) -> int:
        """
        Insert a frame at the given position and make it current

        Args:
            index: Position of the new frame (0..frame_count)
            frame: Frame to insert; a blank frame when omitted

        Returns:
            Index of the inserted frame
        """
        if not 0 <= index <= len(self._frames):
            raise OutOfRangeIndex(index, len(self._frames) + 1)
        if frame is None:
            frame = Frame.blank(self.canvas_size)
        self._frames.insert(index, frame)
        # Remap history before the new frame becomes current
        if self.journal is not None:
            self.journal.on_frame_inserted(index)
        self._current_index = index
        return index

    def create_frame(self) -> int:
        """Append a blank frame and make it current"""
        return self.insert_frame(len(self._frames))

    def duplicate_current(self) -> int:
        """Append a deep copy of the current frame and make it current"""
        return self.insert_frame(len(self._frames), self.current_frame.copy())

    def delete_current(self) -> bool:
        """
        Delete the current frame

        Returns:
            True if a frame was removed, False when only the base frame remains

        Raises:
            AnimationRunningError: the preview animation is playing
        """
        if self.is_playing():
            raise AnimationRunningError()
        if len(self._frames) <= 1:
            return False

        removed = self._current_index
        del self._frames[removed]
        if self.journal is not None:
            self.journal.on_frame_removed(removed)
        if removed > 0:
            self._current_index = removed - 1
        return True

    def select(self, index: int):
        self._check_index(index)
        self._current_index = index

    def replace_all(self, frames: Sequence[Frame], canvas_size: int):
        """
        Swap in a whole new frame sequence (new project or file load)

        Edit history is cleared since it refers to the old frames.
        """
        if not frames:
            raise ValueError("A project needs at least one frame")
        for frame in frames:
            if frame.size != canvas_size:
                raise ValueError(f"Frame size {frame.size} does not match canvas size {canvas_size}")
        self._frames = list(frames)
        self.canvas_size = canvas_size
        self._current_index = 0
        if self.journal is not None:
            self.journal.clear_all()
