"""
Pixel, region and image buffer models
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import numpy as np


class Pixel(NamedTuple):
    """RGBA color, each channel in [0, 255]"""
    red: int
    green: int
    blue: int
    alpha: int = 255

    @property
    def rgb(self) -> tuple:
        return (self.red, self.green, self.blue)


class Transparency(Enum):
    OPAQUE = 1
    BITMASK = 2
    TRANSLUCENT = 3


@dataclass(frozen=True)
class Region:
    """Inclusive rectangle of the base image that receives the watermark"""
    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def contains(self, x: int, y: int) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


@dataclass(frozen=True)
class ImageBuffer:
    """
    Decoded image: an H x W x 4 uint8 RGBA array plus the color model
    details reported by the decoder
    """
    pixels: np.ndarray
    bit_depth: int = 32
    color_components: int = 3
    num_components: int = 4
    transparency: Transparency = Transparency.TRANSLUCENT

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def size(self) -> tuple:
        """(width, height)"""
        return (self.width, self.height)

    @property
    def has_alpha(self) -> bool:
        return self.bit_depth == 32

    def pixel(self, x: int, y: int) -> Pixel:
        r, g, b, a = self.pixels[y, x]
        return Pixel(int(r), int(g), int(b), int(a))

    @classmethod
    def filled(
        cls,
        width: int,
        height: int,
        color: Pixel,
        bit_depth: int = 24
    ) -> 'ImageBuffer':
        """Solid-color buffer; 24-bit buffers are always opaque"""
        if bit_depth == 24:
            color = color._replace(alpha=255)
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:, :] = color
        return cls(
            pixels=pixels,
            bit_depth=bit_depth,
            color_components=3,
            num_components=3 if bit_depth == 24 else 4,
            transparency=Transparency.OPAQUE if bit_depth == 24 else Transparency.TRANSLUCENT
        )
