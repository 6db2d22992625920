"""
Pixel Matcher - tolerance-based color comparison
Colors are either packed 0xRRGGBB integers or (r, g, b) triplets
"""
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from qwop_ai.config import config

Color = Union[int, Sequence[int]]

def to_rgb(color: Color) -> Tuple[int, int, int]:
    """Unpack a color into an (r, g, b) tuple"""
    if isinstance(color, (int, np.integer)):
        value = int(color)
        return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
    r, g, b = color[:3]
    return int(r), int(g), int(b)

def pack_rgb(color: Color) -> int:
    """Pack a color into a 0xRRGGBB integer"""
    r, g, b = to_rgb(color)
    return (r << 16) | (g << 8) | b

def color_distance(c1: Color, c2: Color) -> int:
    """Sum of per-channel absolute differences (L1 distance in RGB space)"""
    r1, g1, b1 = to_rgb(c1)
    r2, g2, b2 = to_rgb(c2)
    return abs(r1 - r2) + abs(g1 - g2) + abs(b1 - b2)

def color_matches(reference: Color, candidate: Color, tolerance: Optional[int] = None) -> bool:
    """True iff the two colors are closer than the tolerance"""
    if tolerance is None:
        tolerance = config.RGB_TOLERANCE
    return color_distance(reference, candidate) < tolerance

def color_mask(image: np.ndarray, reference: Color, tolerance: Optional[int] = None) -> np.ndarray:
    """
    Vectorized color_matches over a whole image

    Args:
        image: (H, W, 3) RGB array
        reference: Color to match
        tolerance: Maximum (exclusive) L1 distance, defaults to config.RGB_TOLERANCE

    Returns:
        (H, W) boolean array, True where the pixel matches
    """
    if tolerance is None:
        tolerance = config.RGB_TOLERANCE
    ref = np.array(to_rgb(reference), dtype=np.int16)
    diff = np.abs(image[:, :, :3].astype(np.int16) - ref)
    return diff.sum(axis=2) < tolerance
