"""
Choice of blend policy from the watermark's transparency and user answers
"""

import logging
from typing import Callable

from ..errors import InvalidInputError
from ..models.image import Pixel, Transparency
from ..models.policy import AlphaAware, BlendPolicy, ChromaKey, Plain
from ..utils.parsing import parse_int_tokens


logger = logging.getLogger(__name__)

ALPHA_QUESTION = "Do you want to use the watermark's Alpha channel?"
COLOR_QUESTION = "Do you want to set a transparency color?"
COLOR_PROMPT = "Input a transparency color ([Red] [Green] [Blue]):"


def is_affirmative(answer: str) -> bool:
    """Only "yes" (any case) agrees; every other answer declines"""
    return answer.lower() == 'yes'


def parse_color(text: str) -> Pixel:
    """Parse an "R G B" triple with every channel in [0, 255]"""
    try:
        red, green, blue = parse_int_tokens(text, count=3)
    except ValueError:
        raise InvalidInputError("The transparency color input is invalid.")
    if not all(0 <= c <= 255 for c in (red, green, blue)):
        raise InvalidInputError("The transparency color input is invalid.")
    return Pixel(red, green, blue)


def select_policy(
    transparency: Transparency,
    ask: Callable[[str], str]
) -> BlendPolicy:
    """
    Pick the blend policy for a watermark.

    `ask` shows a question and returns the user's line. Translucent
    watermarks may use their own alpha channel; other watermarks may name
    a chroma-key color instead.
    """
    if transparency == Transparency.TRANSLUCENT:
        policy = AlphaAware() if is_affirmative(ask(ALPHA_QUESTION)) else Plain()
    elif is_affirmative(ask(COLOR_QUESTION)):
        policy = ChromaKey(parse_color(ask(COLOR_PROMPT)))
    else:
        policy = Plain()

    logger.info(f"Blend policy: {policy}")
    return policy
