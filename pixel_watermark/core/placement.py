"""
Placement of the watermark on the base canvas
"""

import logging
from typing import Optional, Tuple

from ..errors import InvalidInputError, InvalidModeError, OutOfRangeError
from ..models.image import Region
from ..utils.parsing import parse_int_tokens


logger = logging.getLogger(__name__)

SINGLE = 'single'
GRID = 'grid'


def position_prompt(
    base_size: Tuple[int, int],
    watermark_size: Tuple[int, int]
) -> str:
    width, height = base_size
    wm_width, wm_height = watermark_size
    return (
        f"Input the watermark position "
        f"([x 0-{width - wm_width}] [y 0-{height - wm_height}]):"
    )


def parse_position(text: str) -> Tuple[int, int]:
    try:
        x, y = parse_int_tokens(text, count=2)
    except ValueError:
        raise InvalidInputError("The position input is invalid.")
    return x, y


def resolve_region(
    base_size: Tuple[int, int],
    watermark_size: Tuple[int, int],
    mode: str,
    position: Optional[str] = None
) -> Region:
    """
    Compute the region of the base image that receives the watermark.

    "grid" covers the whole canvas (the compositor tiles the watermark),
    "single" places one copy with its top-left corner at the "x y" offset
    given in `position`.
    """
    width, height = base_size
    wm_width, wm_height = watermark_size

    if mode == GRID:
        region = Region(0, width - 1, 0, height - 1)
    elif mode == SINGLE:
        x, y = parse_position(position if position is not None else '')
        region = Region(x, x + wm_width - 1, y, y + wm_height - 1)
        if (
            region.x_min < 0 or region.y_min < 0
            or region.x_max > width - 1 or region.y_max > height - 1
        ):
            logger.debug(f"Position ({x}, {y}) outside {width}x{height}")
            raise OutOfRangeError("The position input is out of range.")
    else:
        logger.debug(f"Unknown position method: {mode!r}")
        raise InvalidModeError()

    logger.debug(f"Resolved {mode} region: {region}")
    return region
