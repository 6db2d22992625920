"""
Game Environment - the narrow capability interface the core drives
Screen capture, pixel reads, pointer and keyboard injection, and sleeping
"""
import logging
import time
from typing import NamedTuple, Optional

import numpy as np

logger = logging.getLogger(__name__)

class ScreenPoint(NamedTuple):
    """Pixel coordinate in screen space"""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "ScreenPoint":
        return ScreenPoint(self.x + dx, self.y + dy)

class Rect(NamedTuple):
    """Screen rectangle"""
    left: int
    top: int
    width: int
    height: int

class GameEnvironment:
    """
    Capabilities the core needs from the host platform.
    Images are (H, W, 3) uint8 arrays in RGB order.
    """

    def capture_screen(self, rect: Optional[Rect] = None) -> np.ndarray:
        """Capture a screen rectangle, or the whole primary screen when rect is None"""
        raise NotImplementedError

    def read_pixel(self, point: ScreenPoint) -> int:
        """Read one pixel as a packed 0xRRGGBB color"""
        raise NotImplementedError

    def move_pointer(self, point: ScreenPoint) -> None:
        raise NotImplementedError

    def pointer_position(self) -> ScreenPoint:
        raise NotImplementedError

    def click(self) -> None:
        """Press and release the left mouse button at the current pointer position"""
        raise NotImplementedError

    def press_key(self, key: str) -> None:
        raise NotImplementedError

    def release_key(self, key: str) -> None:
        raise NotImplementedError

    def tap_key(self, key: str) -> None:
        self.press_key(key)
        self.release_key(key)

    def click_at(self, point: ScreenPoint) -> None:
        self.move_pointer(point)
        self.click()

    def sleep(self, millis: int) -> None:
        """Best-effort pause; an interrupted sleep counts as completed"""
        try:
            time.sleep(millis / 1000.0)
        except InterruptedError:
            logger.debug(f"Wait of {millis}ms interrupted")
