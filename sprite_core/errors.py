"""
Error types raised by the editing engine.
All of them are recoverable; the editor session reports them to the view.
"""


class SpriteEditorError(Exception):
    """Base class for editor errors"""


class OutOfRangeIndex(SpriteEditorError, IndexError):
    """A frame index outside the current frame sequence"""

    def __init__(self, index: int, frame_count: int):
        super().__init__(f"Frame index {index} out of range (0..{frame_count - 1})")
        self.index = index
        self.frame_count = frame_count


class NoActiveEditError(SpriteEditorError, RuntimeError):
    """An edit component was added while no edit was being recorded"""

    def __init__(self, message: str = "No edit in progress"):
        super().__init__(message)


class AnimationRunningError(SpriteEditorError, RuntimeError):
    """Frame deletion attempted while the preview animation is playing"""

    def __init__(self, message: str = "Cannot delete a frame while the animation is running"):
        super().__init__(message)


class MalformedProjectData(SpriteEditorError, ValueError):
    """Project data is missing fields or holds invalid values"""


class OutOfCanvasPosition(SpriteEditorError, IndexError):
    """A pixel position outside the frame an edit is recorded on"""

    def __init__(self, position, size: int):
        super().__init__(f"Pixel {tuple(position)} outside the {size}x{size} canvas")
        self.position = tuple(position)
        self.size = size
