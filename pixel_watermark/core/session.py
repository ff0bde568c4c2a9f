"""
Interactive session: gathers every answer up front into a WatermarkJob,
then runs the compositing pipeline on it
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from ..models.image import ImageBuffer, Region
from ..models.policy import BlendPolicy
from ..utils.io import ImageLoader, ResultExporter
from .compositor import ImageCompositor
from .placement import SINGLE, position_prompt, resolve_region
from .policy_selector import select_policy
from .validation import (
    output_format, parse_weight, validate_dimensions, validate_image
)


logger = logging.getLogger(__name__)

WEIGHT_PROMPT = "Input the watermark transparency percentage (Integer 0-100):"
MODE_PROMPT = "Choose the position method (single, grid):"
OUTPUT_PROMPT = "Input the output image filename (jpg or png extension):"


@dataclass(frozen=True)
class WatermarkJob:
    """Everything needed to produce the watermarked image"""
    base: ImageBuffer
    watermark: ImageBuffer
    policy: BlendPolicy
    weight: int
    region: Region
    output_name: str
    output_format: str


class InteractiveSession:
    """
    Asks the questions in order, validating each answer as it arrives.
    The first invalid answer raises a WatermarkError.
    """

    def __init__(
        self,
        read_line: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], None]] = None,
        loader: Optional[ImageLoader] = None
    ):
        self.read_line = read_line or input
        self.write = write or print
        self.loader = loader or ImageLoader()

    def ask(self, question: str) -> str:
        self.write(question)
        return self.read_line()

    def _load(self, name: str, label: str) -> ImageBuffer:
        filename = self.ask(f"Input the {name} filename:")
        image = self.loader.load_image(filename)
        validate_image(image, label)
        return image

    def gather(self) -> WatermarkJob:
        # Both images are checked before any question about blending
        base = self._load("image", "image")
        watermark = self._load("watermark image", "watermark")
        validate_dimensions(base, watermark)

        # Blend settings
        policy = select_policy(watermark.transparency, self.ask)
        weight = parse_weight(self.ask(WEIGHT_PROMPT))

        # Placement; only a single placement asks for an offset
        mode = self.ask(MODE_PROMPT)
        position = None
        if mode == SINGLE:
            position = self.ask(position_prompt(base.size, watermark.size))
        region = resolve_region(base.size, watermark.size, mode, position)

        output_name = self.ask(OUTPUT_PROMPT)
        fmt = output_format(output_name)

        return WatermarkJob(
            base=base,
            watermark=watermark,
            policy=policy,
            weight=weight,
            region=region,
            output_name=output_name,
            output_format=fmt
        )


def run_job(
    job: WatermarkJob,
    compositor: Optional[ImageCompositor] = None,
    exporter: Optional[ResultExporter] = None
) -> Path:
    """Composite and write the output file"""
    compositor = compositor or ImageCompositor()
    exporter = exporter or ResultExporter()

    output = compositor.composite(
        job.base, job.watermark, job.region, job.weight, job.policy
    )
    return exporter.export(output, job.output_format, job.output_name)
