"""
Color Picker
Maps points on the saturation/value gradient square plus a hue slider value
to HSV colors and back.
"""

from typing import List, Optional, Sequence, Tuple

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QColor

from .data_structures import Position
from .recent_colors import RECENT_COLOR_CAPACITY

MAX_COLOR_VAL = 255
MAX_COLOR_HUE = 359
DEFAULT_GRADIENT_SIZE = 200


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class ColorPicker(QObject):
    """
    Picker state: a hue slider value and a selected point in the gradient.

    The gradient shows full value at the top and zero saturation at the left,
    and the hue slider runs backwards, so both the value axis and the hue are
    inverted. Points are local to the gradient square (origin top-left).
    """

    color_changed = pyqtSignal(QColor)
    gradient_hue_changed = pyqtSignal(int)

    def __init__(self, gradient_size: int = DEFAULT_GRADIENT_SIZE, parent: Optional[QObject] = None):
        super().__init__(parent)
        if gradient_size <= 0:
            raise ValueError("Gradient size must be positive")
        self.gradient_size = gradient_size
        self.hue: int = 0
        self.current_point: Position = self.default_point()

    # ------------------------------------------------------------------ #
    # Geometry <-> color
    # ------------------------------------------------------------------ #
    def default_point(self) -> Position:
        # Bottom-left corner, nudged inwards so the selection marker stays visible
        return (2, self.gradient_size - 3)

    def color_at(self, point: Position, hue: int) -> QColor:
        """
        Color under a gradient point for a given hue slider value

        Args:
            point: (x, y) inside the gradient square
            hue: Hue slider value, 0-359

        Returns:
            HSV color
        """
        size = self.gradient_size
        x, y = int(point[0]), int(point[1])
        saturation = _clamp(x * MAX_COLOR_VAL // size, 0, MAX_COLOR_VAL)
        value = MAX_COLOR_VAL - _clamp(y * MAX_COLOR_VAL // size, 0, MAX_COLOR_VAL)
        return QColor.fromHsv(MAX_COLOR_HUE - _clamp(int(hue), 0, MAX_COLOR_HUE), saturation, value)

    def point_and_hue_for(self, color: QColor) -> Tuple[Position, int]:
        """
        Inverse of color_at()

        Coordinates are rounded up so that color_at() on the result returns
        the same saturation and value for every color the gradient can produce.
        Achromatic colors without a hue map to hue 0.

        Returns:
            ((x, y), hue slider value)
        """
        size = self.gradient_size
        hue = _clamp(MAX_COLOR_HUE - max(color.hue(), 0), 0, MAX_COLOR_HUE)
        x = -(-size * color.saturation() // MAX_COLOR_VAL)
        y = -(-size * (MAX_COLOR_VAL - color.value()) // MAX_COLOR_VAL)
        return (x, y), hue

    def is_in_gradient_bounds(self, point: Position) -> bool:
        """Strictly inside the square; the edges do not count"""
        x, y = point
        return 0 < x < self.gradient_size and 0 < y < self.gradient_size

    def current_color(self) -> QColor:
        return self.color_at(self.current_point, self.hue)

    def gradient_color(self) -> QColor:
        """Fully saturated color the gradient square is tinted with"""
        return QColor.fromHsv(MAX_COLOR_HUE - self.hue, MAX_COLOR_VAL, MAX_COLOR_VAL)

    # ------------------------------------------------------------------ #
    # Pointer and slider input
    # ------------------------------------------------------------------ #
    def press(self, point: Position):
        point = (int(point[0]), int(point[1]))
        if self.is_in_gradient_bounds(point) and point != self.current_point:
            self.update_current_color(point)

    def drag(self, point: Position):
        point = (int(point[0]), int(point[1]))
        if self.is_in_gradient_bounds(point):
            self.current_point = point

    def release(self):
        self.update_current_color(self.current_point)

    def update_current_color(self, point: Position):
        self.current_point = (int(point[0]), int(point[1]))
        self.color_changed.emit(self.current_color())

    def set_hue(self, value: int):
        """Move the hue slider; the color is only announced by release_hue()"""
        self.hue = _clamp(int(value), 0, MAX_COLOR_HUE)
        self.gradient_hue_changed.emit(MAX_COLOR_HUE - self.hue)

    def release_hue(self):
        self.update_current_color(self.current_point)

    def select_recent(self, color: QColor):
        """Move the slider and selection point to a recent swatch's color"""
        point, hue = self.point_and_hue_for(color)
        self.set_hue(hue)
        self.current_point = point
        self.color_changed.emit(QColor(color))

    def reset(self):
        """Back to hue 0 and the default point (new or opened project)"""
        self.current_point = self.default_point()
        self.set_hue(0)
        self.color_changed.emit(self.current_color())

    @staticmethod
    def recent_colors(colors: Sequence[QColor], capacity: int = RECENT_COLOR_CAPACITY) -> List[Optional[QColor]]:
        """
        Swatches to draw, most recent first

        Args:
            colors: Recent colors ordered oldest to newest
            capacity: Number of swatch slots

        Returns:
            One entry per slot; None marks an empty (transparent) swatch
        """
        newest_first = [QColor(c) for c in reversed(colors)][:capacity]
        return newest_first + [None] * (capacity - len(newest_first))
