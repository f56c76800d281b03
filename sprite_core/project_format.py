"""
Project Format
Converts the frame sequence to and from the persisted project document:

    {
        "height": size, "width": size, "numberOfFrames": n,
        "frames": {"frame0": [[[r, g, b, a], ...], ...], ...}
    }

Rows are stored top to bottom, pixels left to right.
"""

from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from .data_structures import Frame
from .errors import MalformedProjectData


def frame_key(index: int) -> str:
    return f"frame{index}"


def encode_project(frames: Sequence[Frame], canvas_size: int) -> Dict[str, Any]:
    """
    Build the project document for a frame sequence

    Args:
        frames: Frames in playback order
        canvas_size: Side length shared by all frames

    Returns:
        JSON-serialisable dictionary
    """
    return {
        "height": canvas_size,
        "width": canvas_size,
        "numberOfFrames": len(frames),
        "frames": {frame_key(i): frame.pixels.tolist() for i, frame in enumerate(frames)},
    }


def _require_int(data: Dict[str, Any], key: str) -> int:
    if key not in data:
        raise MalformedProjectData(f"Missing field '{key}'")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedProjectData(f"Field '{key}' must be an integer, got {value!r}")
    return value


def _decode_frame(rows: Any, size: int, key: str) -> Frame:
    try:
        values = np.asarray(rows)
    except (ValueError, TypeError) as exc:
        raise MalformedProjectData(f"{key}: pixel rows are not a regular grid ({exc})") from exc

    if values.shape != (size, size, 4):
        raise MalformedProjectData(f"{key}: expected shape {(size, size, 4)}, got {values.shape}")
    if values.dtype.kind not in "iu":
        raise MalformedProjectData(f"{key}: pixel channels must be integers")
    if values.min() < 0 or values.max() > 255:
        raise MalformedProjectData(f"{key}: pixel channels must be within 0-255")
    return Frame(values.astype(np.uint8))


def decode_project(data: Any) -> Tuple[List[Frame], int]:
    """
    Validate a project document and build its frames

    Nothing is returned unless the whole document is valid.

    Returns:
        (frames, canvas_size)

    Raises:
        MalformedProjectData: a field is missing or invalid
    """
    if not isinstance(data, dict):
        raise MalformedProjectData("Project data must be an object")

    size = _require_int(data, "height")
    if size < 1:
        raise MalformedProjectData(f"Canvas size must be positive, got {size}")
    if "width" in data and data["width"] != size:
        raise MalformedProjectData(f"Width {data['width']!r} does not match height {size}")

    count = _require_int(data, "numberOfFrames")
    if count < 1:
        raise MalformedProjectData(f"A project needs at least one frame, got {count}")

    frame_data = data.get("frames")
    if not isinstance(frame_data, dict):
        raise MalformedProjectData("Missing or invalid 'frames' object")

    frames = []
    for index in range(count):
        key = frame_key(index)
        if key not in frame_data:
            raise MalformedProjectData(f"Missing frame '{key}'")
        frames.append(_decode_frame(frame_data[key], size, key))
    return frames, size
