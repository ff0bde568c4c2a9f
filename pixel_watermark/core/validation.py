"""
Input gates checked before any blending happens
"""

import logging

from ..errors import (
    InvalidFormatError, InvalidInputError, OutOfRangeError,
    SizeMismatchError, UnsupportedExtensionError
)
from ..models.image import ImageBuffer
from ..utils.parsing import parse_int


logger = logging.getLogger(__name__)

SUPPORTED_DEPTHS = (24, 32)
OUTPUT_FORMATS = ('jpg', 'png')


def validate_image(image: ImageBuffer, label: str) -> None:
    """Require an RGB-family image of 24 or 32 bits per pixel"""
    if image.color_components != 3:
        logger.debug(f"{label}: {image.color_components} color components")
        raise InvalidFormatError(
            f"The number of {label} color components isn't 3."
        )
    if image.bit_depth not in SUPPORTED_DEPTHS:
        logger.debug(f"{label}: {image.bit_depth} bits per pixel")
        raise InvalidFormatError(f"The {label} isn't 24 or 32-bit.")


def validate_dimensions(base: ImageBuffer, watermark: ImageBuffer) -> None:
    if watermark.width > base.width or watermark.height > base.height:
        logger.debug(
            f"Watermark {watermark.width}x{watermark.height} "
            f"exceeds base {base.width}x{base.height}"
        )
        raise SizeMismatchError()


def parse_weight(text: str) -> int:
    """Watermark weight as a percentage in [0, 100]"""
    try:
        weight = parse_int(text)
    except ValueError:
        raise InvalidInputError(
            "The transparency percentage isn't an integer number."
        )
    if not 0 <= weight <= 100:
        raise OutOfRangeError("The transparency percentage is out of range.")
    return weight


def output_format(filename: str) -> str:
    """
    Encoding format taken from the text after the last dot
    (the whole name when there is none)
    """
    extension = filename.split('.')[-1]
    if extension not in OUTPUT_FORMATS:
        logger.debug(f"Unsupported output extension in {filename!r}")
        raise UnsupportedExtensionError()
    return extension
