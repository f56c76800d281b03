"""
Data structures for the sprite editor
Defines the frame, edit and tool types shared by the editing engine
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

import numpy as np
from PIL import Image
from PyQt6.QtGui import QColor


Position = Tuple[int, int]


def transparent() -> QColor:
    """Fully transparent black, the color of an empty pixel"""
    return QColor(0, 0, 0, 0)


class Tool(Enum):
    """Drawing tools available on the canvas"""
    PEN = "pen"
    ERASER = "eraser"


@dataclass(eq=False)
class Frame:
    """One square RGBA raster in the animation sequence"""
    pixels: np.ndarray

    @classmethod
    def blank(cls, size: int) -> "Frame":
        """Create a fully transparent frame with the given side length"""
        return cls(np.zeros((size, size, 4), dtype=np.uint8))

    @property
    def size(self) -> int:
        return int(self.pixels.shape[0])

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def pixel(self, x: int, y: int) -> QColor:
        r, g, b, a = (int(v) for v in self.pixels[y, x])
        return QColor(r, g, b, a)

    def set_pixel(self, x: int, y: int, color: QColor):
        self.pixels[y, x] = color.getRgb()

    def fill(self, color: QColor):
        self.pixels[:, :] = color.getRgb()

    def copy(self) -> "Frame":
        return Frame(self.pixels.copy())

    def to_image(self) -> Image.Image:
        """
        Convert the frame to a PIL image

        Returns:
            RGBA image sharing no memory with the frame
        """
        return Image.fromarray(self.pixels.copy())


@dataclass(frozen=True)
class EditComponent:
    """A single pixel change: where it happened and the colors before and after"""
    position: Position
    old_color: QColor
    new_color: QColor

    def __post_init__(self):
        # Copy the colors so later mutation by the caller cannot rewrite history
        object.__setattr__(self, "position", (int(self.position[0]), int(self.position[1])))
        object.__setattr__(self, "old_color", QColor(self.old_color))
        object.__setattr__(self, "new_color", QColor(self.new_color))


@dataclass
class Edit:
    """An undoable group of pixel changes made on one frame"""
    frame_index: int
    components: List[EditComponent] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.components

    def add_component(self, position: Position, old_color: QColor, new_color: QColor):
        self.components.append(EditComponent(position, old_color, new_color))
