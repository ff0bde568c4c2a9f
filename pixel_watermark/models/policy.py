"""
Blend policies: how a watermark pixel combines with a base pixel
"""

from dataclasses import dataclass
from typing import Union

from .image import Pixel


@dataclass(frozen=True)
class Plain:
    """Weighted RGB mix, result forced opaque"""


@dataclass(frozen=True)
class AlphaAware:
    """Honor the watermark's alpha: fully transparent pixels are skipped"""


@dataclass(frozen=True)
class ChromaKey:
    """Skip watermark pixels whose RGB equals the key color"""
    key: Pixel


BlendPolicy = Union[Plain, AlphaAware, ChromaKey]
