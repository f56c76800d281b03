"""
Animation Player
Handles preview playback: timing, frame cycling and start/stop state
"""

from typing import Optional

from PyQt6.QtCore import QObject, QTimer, Qt, pyqtSignal

from .frame_store import FrameStore


class AnimationPlayer(QObject):
    """Cycles through the frame store at a fixed rate for the preview pane"""

    frame_ready = pyqtSignal(int, object)
    started = pyqtSignal()
    stopped = pyqtSignal()
    preview_reset = pyqtSignal()

    def __init__(self, frames: FrameStore, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.frames = frames
        self.playing: bool = False
        self.preview_index: int = 0
        self.interval_ms: int = 0
        self.fps: int = 0

        self._timer = QTimer(self)
        self._timer.setSingleShot(False)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self.tick)

    @property
    def timer_active(self) -> bool:
        return self._timer.isActive()

    def toggle(self) -> bool:
        """
        Start playback if stopped (and a speed is set), otherwise stop it

        Returns:
            Whether the player is running afterwards
        """
        if not self.playing and self.interval_ms > 0:
            self._timer.start(self.interval_ms)
            self.playing = True
            self.started.emit()
        elif self.playing:
            self._stop()
        return self.playing

    def set_speed(self, fps: int):
        """
        Change the playback rate

        Args:
            fps: Frames per second; 0 or less stops playback and disables it.
                The interval never drops below 1 ms.
        """
        if fps <= 0:
            self.fps = 0
            self.interval_ms = 0
            if self.playing:
                self._stop()
            else:
                self._timer.stop()
            return

        self.fps = fps
        self.interval_ms = max(1, round(1000 / fps))
        self._timer.setInterval(self.interval_ms)
        if self.playing and not self._timer.isActive():
            self._timer.start()

    def tick(self):
        """Show the frame at the preview index and advance, wrapping to 0"""
        frame_count = self.frames.frame_count
        if self.preview_index >= frame_count:
            self.preview_index = 0
        index = self.preview_index
        self.frame_ready.emit(index, self.frames.frame(index).to_image())
        self.preview_index = (index + 1) % frame_count

    def show_first_frame(self):
        self.frame_ready.emit(0, self.frames.frame(0).to_image())

    def reset(self):
        """Stopped, speed 0, index 0; used for new and opened projects"""
        self._timer.stop()
        self.playing = False
        self.preview_index = 0
        self.fps = 0
        self.interval_ms = 0
        self._timer.setInterval(0)
        self.preview_reset.emit()
        self.show_first_frame()

    def _stop(self):
        self._timer.stop()
        self.playing = False
        self.preview_index = 0
        self.show_first_frame()
        self.stopped.emit()
