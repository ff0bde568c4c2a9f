#!/usr/bin/env python3
"""
Pixel Watermark - overlay a watermark image onto a base image
Main entry point for the interactive watermarking session
"""

import argparse
import logging
import sys
from pathlib import Path

from pixel_watermark.core.compositor import ImageCompositor
from pixel_watermark.core.session import InteractiveSession, run_job
from pixel_watermark.errors import WatermarkError
from pixel_watermark.utils.io import ImageLoader, ResultExporter, describe_image
from pixel_watermark.utils.logging import setup_logging


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        description="Pixel Watermark - blend a watermark into an image, once or as a grid"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file"
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while compositing"
    )

    parser.add_argument(
        "--jpeg-quality",
        type=int,
        choices=range(1, 101),
        metavar="[1-100]",
        default=75,
        help="Quality used when writing jpg output (default: 75)"
    )

    parser.add_argument(
        "--info",
        type=Path,
        default=None,
        help="Print the size and color model of an image and exit"
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)

    log_level = logging.DEBUG if args.debug else logging.WARNING
    logger = setup_logging(log_level, args.log_file)

    loader = ImageLoader()
    try:
        if args.info is not None:
            image = loader.load_image(args.info)
            print("\n".join(describe_image(image, str(args.info))))
            return 0

        session = InteractiveSession(loader=loader)
        job = session.gather()
        run_job(
            job,
            compositor=ImageCompositor(progress=args.progress),
            exporter=ResultExporter(jpeg_quality=args.jpeg_quality)
        )
    except WatermarkError as e:
        # User-input failures still end with status 0
        logger.info(f"Stopped: {type(e).__name__}")
        print(e.message)
        return 0

    print(f"The watermarked image {job.output_name} has been created.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
