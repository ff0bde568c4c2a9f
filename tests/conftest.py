import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def write_image(tmp_path):
    """Save a solid-color image with Pillow and return its path."""
    def _write(name, mode, size, color):
        path = tmp_path / name
        Image.new(mode, size, color).save(path)
        return path
    return _write


@pytest.fixture
def write_pixels(tmp_path):
    """Save an H x W x C uint8 array with Pillow and return its path."""
    def _write(name, pixels):
        path = tmp_path / name
        Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(path)
        return path
    return _write
