import sys
from pathlib import Path

import numpy as np
from PIL import Image

# Add repo root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from escape_fractals.display import frame_to_array, frame_to_image, save_frame
from escape_fractals.render import render


def test_array_is_rows_of_width_pixels():
    frame = render(3, 2, "mandel", -0.15, 0.65, 20)
    arr = frame_to_array(frame)
    assert arr.shape == (4, 6, 4)
    assert arr.dtype == np.uint8
    # row-major reading of the byte sequence
    np.testing.assert_array_equal(arr.reshape(-1), np.frombuffer(frame.data, dtype=np.uint8))
    assert np.all(arr[..., 3] == 255)


def test_image_and_png_roundtrip(tmp_path):
    frame = render(4, 4, "julia", -0.15, 0.65, 50)
    img = frame_to_image(frame)
    assert img.mode == "RGBA"
    assert img.size == (8, 8)

    out = save_frame(frame, tmp_path / "nested" / "julia.png")
    assert out.exists()
    with Image.open(out) as reloaded:
        assert reloaded.size == (8, 8)
        np.testing.assert_array_equal(np.asarray(reloaded.convert("RGBA")), frame_to_array(frame))
