"""
Origin Locator - finds the game on screen
Scans a full-screen capture for the blue message-box border, slides to its
top-left corner and derives the game origin from a fixed offset
"""
import logging
from typing import Callable, Optional, Tuple

import numpy as np

from qwop_ai.config import Calibration, config
from qwop_ai.core.exceptions import NotFoundError
from qwop_ai.perception.pixel_matcher import color_mask
from qwop_ai.platform.base import ScreenPoint

logger = logging.getLogger(__name__)

def _shifted(mask: np.ndarray, dx: int, dy: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample mask at (x + dx, y + dy) for every (x, y)

    Returns:
        (values, in_bounds) boolean arrays shaped like mask
    """
    h, w = mask.shape
    values = np.zeros_like(mask, dtype=bool)
    in_bounds = np.zeros_like(mask, dtype=bool)
    ys = slice(max(0, -dy), min(h, h - dy))
    xs = slice(max(0, -dx), min(w, w - dx))
    src_ys = slice(ys.start + dy, ys.stop + dy)
    src_xs = slice(xs.start + dx, xs.stop + dx)
    values[ys, xs] = mask[src_ys, src_xs]
    in_bounds[ys, xs] = True
    return values, in_bounds

class OriginLocator:
    """
    Locates the game origin from the border pattern.

    A point matches the border signature when the border color is found at
    every match offset and absent at every mismatch offset; all probes must be
    on screen, the highest one below row 0. The asymmetric mismatch probes pick out the outer edge of the
    border rather than its interior.
    """

    def __init__(self, calibration: Optional[Calibration] = None,
                 tolerance: Optional[int] = None, scan_step: Optional[int] = None):
        self.calibration = calibration or config.calibration
        self.tolerance = config.RGB_TOLERANCE if tolerance is None else tolerance
        self.scan_step = scan_step or config.SCAN_STEP

    def signature_map(self, image: np.ndarray) -> np.ndarray:
        """Boolean (H, W) map of every pixel that matches the border signature"""
        mask = color_mask(image, self.calibration.BORDER_COLOR, self.tolerance)
        signature = np.ones_like(mask, dtype=bool)
        for dx, dy in self.calibration.BORDER_MATCH_OFFSETS:
            values, in_bounds = _shifted(mask, dx, dy)
            signature &= values & in_bounds
        for dx, dy in self.calibration.BORDER_MISMATCH_OFFSETS:
            values, in_bounds = _shifted(mask, dx, dy)
            signature &= ~values & in_bounds
        # The highest probe must lie strictly below the top edge
        top_margin = max(0, -min(dy for _, dy in self.calibration.BORDER_MATCH_OFFSETS
                                 + self.calibration.BORDER_MISMATCH_OFFSETS))
        signature[:top_margin + 1] = False
        return signature

    @staticmethod
    def matches_border(signature: np.ndarray, x: int, y: int) -> bool:
        h, w = signature.shape
        return 0 <= x < w and 0 <= y < h and bool(signature[y, x])

    def slide_top_left(self, signature: np.ndarray, x: int, y: int) -> ScreenPoint:
        """From a matching point, slide left then up while the signature still matches"""
        while self.matches_border(signature, x - 1, y):
            x -= 1
        while self.matches_border(signature, x, y - 1):
            y -= 1
        return ScreenPoint(x, y)

    def find_corner(self, image: np.ndarray) -> ScreenPoint:
        """
        Scan the image on a coarse grid, column by column, and return the exact
        top-left corner of the first border found

        Raises:
            NotFoundError: no point on the grid matches the border signature
        """
        signature = self.signature_map(image)
        step = self.scan_step
        # Transposed so argwhere walks x first, then y within a column
        hits = np.argwhere(signature[::step, ::step].T)
        if len(hits) == 0:
            logger.error("Border pattern not found on screen")
            raise NotFoundError("Origin not found. Make sure the game is open and fully visible.")
        gx, gy = hits[0]
        x, y = int(gx) * step, int(gy) * step
        logger.debug(f"Border signature first matched at ({x}, {y})")
        return self.slide_top_left(signature, x, y)

    def find_origin(self, capture_screen: Callable[[], np.ndarray]) -> ScreenPoint:
        """
        Find the game origin on a fresh full-screen capture

        Args:
            capture_screen: Callable returning the full screen as an RGB array

        Returns:
            Top-left reference corner of the game area
        """
        corner = self.find_corner(capture_screen())
        dx, dy = self.calibration.CORNER_TO_ORIGIN
        origin = ScreenPoint(corner.x - dx, corner.y - dy)
        logger.info(f"Border corner at {tuple(corner)}, game origin at {tuple(origin)}")
        return origin
