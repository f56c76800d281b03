"""
Recent Colors
Bounded, most-recently-used color history with near-duplicate merging
"""

from typing import Iterator, List, Optional

from PyQt6.QtGui import QColor

RECENT_COLOR_CAPACITY = 5
SIMILARITY_THRESHOLD = 3


def are_similar_colors(first: QColor, second: QColor) -> bool:
    """Same hue, and saturation and value each differ by less than the threshold"""
    return (
        abs(first.value() - second.value()) < SIMILARITY_THRESHOLD
        and abs(first.saturation() - second.saturation()) < SIMILARITY_THRESHOLD
        and first.hue() == second.hue()
    )


class RecentColors:
    """Ordered oldest to newest; the newest entry is the pen color"""

    def __init__(self, capacity: int = RECENT_COLOR_CAPACITY):
        if capacity < 1:
            raise ValueError("Recent color capacity must be at least 1")
        self.capacity = capacity
        self._colors: List[QColor] = []

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[QColor]:
        return iter(list(self._colors))

    def colors(self) -> List[QColor]:
        return [QColor(c) for c in self._colors]

    def last(self) -> Optional[QColor]:
        return QColor(self._colors[-1]) if self._colors else None

    def add(self, color: QColor):
        """
        Record a color as the most recent

        A similar color already in the list is removed rather than kept twice;
        when the list is full the oldest color is dropped.
        """
        for index, existing in enumerate(self._colors):
            if are_similar_colors(existing, color):
                del self._colors[index]
                break
        if len(self._colors) >= self.capacity:
            del self._colors[0]
        self._colors.append(QColor(color))

    def clear(self):
        self._colors.clear()
