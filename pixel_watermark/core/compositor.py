"""
Compositing of a watermark over a base image
"""

import logging

import numpy as np
from tqdm import tqdm

from ..models.image import ImageBuffer, Region, Transparency
from ..models.policy import BlendPolicy
from .blender import blend


logger = logging.getLogger(__name__)


class ImageCompositor:
    """
    Walks every base pixel, blending inside the region and copying the
    base pixel outside it
    """

    def __init__(self, progress: bool = False):
        self.progress = progress

    def composite(
        self,
        base: ImageBuffer,
        watermark: ImageBuffer,
        region: Region,
        weight: int,
        policy: BlendPolicy
    ) -> ImageBuffer:
        """
        Build a new 24-bit buffer the size of the base image.

        Watermark coordinates wrap modulo its size, which tiles it over a
        grid region and is the identity for a single placement.
        """
        logger.info(
            f"Compositing {watermark.width}x{watermark.height} watermark onto "
            f"{base.width}x{base.height} image, weight {weight}"
        )
        output = np.empty_like(base.pixels)

        rows = tqdm(
            range(base.height),
            desc="Compositing",
            disable=not self.progress
        )
        for y in rows:
            for x in range(base.width):
                base_pixel = base.pixel(x, y)
                if not region.contains(x, y):
                    output[y, x] = base_pixel
                    continue
                wm_pixel = watermark.pixel(
                    (x - region.x_min) % watermark.width,
                    (y - region.y_min) % watermark.height
                )
                output[y, x] = blend(base_pixel, wm_pixel, weight, policy)

        return ImageBuffer(
            pixels=output,
            bit_depth=24,
            color_components=3,
            num_components=3,
            transparency=Transparency.OPAQUE
        )


def composite(
    base: ImageBuffer,
    watermark: ImageBuffer,
    region: Region,
    weight: int,
    policy: BlendPolicy
) -> ImageBuffer:
    return ImageCompositor().composite(base, watermark, region, weight, policy)
