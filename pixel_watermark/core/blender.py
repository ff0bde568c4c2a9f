"""
Per-pixel blending of a watermark pixel over a base pixel
"""

from ..models.image import Pixel
from ..models.policy import AlphaAware, BlendPolicy, ChromaKey, Plain


def mix_channel(base: int, watermark: int, weight: int) -> int:
    """Weighted integer mix; weight is a percentage of the watermark"""
    return (weight * watermark + (100 - weight) * base) // 100


def _mix(base: Pixel, watermark: Pixel, weight: int, alpha: int) -> Pixel:
    return Pixel(
        mix_channel(base.red, watermark.red, weight),
        mix_channel(base.green, watermark.green, weight),
        mix_channel(base.blue, watermark.blue, weight),
        alpha
    )


def blend_plain(base: Pixel, watermark: Pixel, weight: int) -> Pixel:
    return _mix(base, watermark, weight, 255)


def blend_alpha(base: Pixel, watermark: Pixel, weight: int) -> Pixel:
    if watermark.alpha == 0:
        return base
    return _mix(
        base, watermark, weight,
        mix_channel(base.alpha, watermark.alpha, weight)
    )


def blend_chroma_key(
    base: Pixel,
    watermark: Pixel,
    weight: int,
    key: Pixel
) -> Pixel:
    # Key match ignores alpha on both sides
    if watermark.rgb == key.rgb:
        return base
    return _mix(
        base, watermark, weight,
        mix_channel(base.alpha, watermark.alpha, weight)
    )


def blend(
    base: Pixel,
    watermark: Pixel,
    weight: int,
    policy: BlendPolicy
) -> Pixel:
    """
    Compute one output pixel.

    Weight 0 leaves the base RGB as is, 100 takes the watermark RGB.
    Division truncates, so results stay within [0, 255] for in-range input.
    """
    if isinstance(policy, ChromaKey):
        return blend_chroma_key(base, watermark, weight, policy.key)
    if isinstance(policy, AlphaAware):
        return blend_alpha(base, watermark, weight)
    if isinstance(policy, Plain):
        return blend_plain(base, watermark, weight)
    raise TypeError(f"Unknown blend policy: {policy!r}")
