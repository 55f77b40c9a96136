from pathlib import Path

import numpy as np
from PIL import Image

from .render import Frame


def frame_to_array(frame: Frame) -> np.ndarray:
    """
    View the buffer the way a 2-D canvas consumes it: consecutive runs of
    `width` pixels are rows. Returns a (height, width, 4) uint8 array.
    """
    arr = np.frombuffer(frame.data, dtype=np.uint8)
    return arr.reshape(frame.height, frame.width, 4)


def frame_to_image(frame: Frame) -> Image.Image:
    return Image.fromarray(frame_to_array(frame))


def save_frame(frame: Frame, path) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    frame_to_image(frame).save(out_path)
    return out_path
