"""
Image I/O utilities
"""

import logging
from pathlib import Path
from typing import Dict, List, Tuple, Union

import numpy as np
import cv2
from PIL import Image

from ..errors import ImageNotFoundError
from ..models.image import ImageBuffer, Transparency


logger = logging.getLogger(__name__)


# Pillow mode -> (color components, bits per pixel)
MODE_INFO: Dict[str, Tuple[int, int]] = {
    '1': (1, 1),
    'L': (1, 8),
    'LA': (1, 16),
    'P': (3, 8),
    'PA': (3, 16),
    'RGB': (3, 24),
    'RGBA': (3, 32),
    'RGBX': (3, 32),
    'RGBa': (3, 32),
    'CMYK': (4, 32),
    'YCbCr': (3, 24),
    'LAB': (3, 24),
    'HSV': (3, 24),
    'I': (1, 32),
    'I;16': (1, 16),
    'I;16B': (1, 16),
    'I;16L': (1, 16),
    'F': (1, 32),
}

ALPHA_MODES = {'LA', 'PA', 'RGBA', 'RGBa'}

# Modes Pillow cannot turn into RGBA directly
_WIDE_GRAY_MODES = {'I', 'I;16', 'I;16B', 'I;16L', 'F'}


def classify_transparency(image: Image.Image) -> Transparency:
    """
    Alpha bands are translucent, a transparent color or palette entries
    that are either fully on or off are a bitmask
    """
    if image.mode in ALPHA_MODES:
        return Transparency.TRANSLUCENT

    transparency = image.info.get('transparency')
    if transparency is None:
        return Transparency.OPAQUE
    if image.mode == 'P' and isinstance(transparency, bytes):
        if all(a in (0, 255) for a in transparency):
            return Transparency.BITMASK
        return Transparency.TRANSLUCENT
    return Transparency.BITMASK


def sample_bits(image: Image.Image) -> int:
    """
    Bits per sample as stored in the file. Pillow opens 16-bit RGB and
    RGBA PNGs in 8-bit modes, so the raw mode of the pending tile is
    checked; this only works before load().
    """
    for tile in image.tile:
        args = tile[3]
        rawmode = args[0] if isinstance(args, tuple) and args else args
        if isinstance(rawmode, str) and ';16' in rawmode:
            return 16
    return 8


def color_model(image: Image.Image) -> Tuple[int, int]:
    """(color components, bits per pixel) of an unloaded image"""
    components, depth = MODE_INFO.get(image.mode, (0, 0))
    if image.mode in ('RGB', 'RGBA') and sample_bits(image) == 16:
        depth = 16 * len(image.getbands())
    return components, depth


def to_rgba(image: Image.Image) -> np.ndarray:
    """H x W x 4 uint8 array; images without alpha come out opaque"""
    if image.mode in _WIDE_GRAY_MODES:
        image = image.convert('L')
    return np.array(image.convert('RGBA'), dtype=np.uint8)


class ImageLoader:
    """
    Decodes image files into pixel buffers
    """

    def load_image(self, path: Union[str, Path]) -> ImageBuffer:
        """
        Load an image and describe its color model.

        Any failure to open or decode is reported as a missing file,
        named exactly as given.
        """
        filename = str(path)
        path = Path(path)
        try:
            with Image.open(path) as image:
                # Depth has to be read before load() consumes the tiles
                components, depth = color_model(image)
                image.load()
                buffer = ImageBuffer(
                    pixels=to_rgba(image),
                    bit_depth=depth,
                    color_components=components,
                    num_components=len(image.getbands()),
                    transparency=classify_transparency(image)
                )
        except (OSError, ValueError) as e:
            logger.info(f"Failed to load {filename}: {e}")
            raise ImageNotFoundError(filename)

        logger.info(
            f"Loaded {path.name}: {buffer.width}x{buffer.height}, "
            f"{buffer.bit_depth}-bit, {buffer.transparency.name}"
        )
        return buffer


class ResultExporter:
    """
    Encodes pixel buffers to png or jpg files
    """

    def __init__(self, jpeg_quality: int = 75):
        self.jpeg_quality = jpeg_quality

    def encode(self, image: ImageBuffer, fmt: str) -> bytes:
        """
        Encode to the given format. Alpha is written only for 32-bit
        buffers going to png.
        """
        if fmt == 'png' and image.has_alpha:
            data = cv2.cvtColor(
                np.ascontiguousarray(image.pixels), cv2.COLOR_RGBA2BGRA
            )
        else:
            data = cv2.cvtColor(
                np.ascontiguousarray(image.pixels[:, :, :3]), cv2.COLOR_RGB2BGR
            )

        params = []
        if fmt == 'jpg':
            params = [cv2.IMWRITE_JPEG_QUALITY, self.jpeg_quality]

        ok, encoded = cv2.imencode(f'.{fmt}', data, params)
        if not ok:
            raise ValueError(f"Failed to encode image as {fmt}")
        return encoded.tobytes()

    def export(
        self,
        image: ImageBuffer,
        fmt: str,
        path: Union[str, Path]
    ) -> Path:
        path = Path(path)
        path.write_bytes(self.encode(image, fmt))
        logger.info(f"Exported: {path}")
        return path


def describe_image(image: ImageBuffer, filename: str) -> List[str]:
    """Report lines describing an image's size and color model"""
    return [
        f"Image file: {filename}",
        f"Width: {image.width}",
        f"Height: {image.height}",
        f"Number of components: {image.num_components}",
        f"Number of color components: {image.color_components}",
        f"Bits per pixel: {image.bit_depth}",
        f"Transparency: {image.transparency.name}",
    ]
