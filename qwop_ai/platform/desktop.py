"""
Desktop Environment - real screen capture and input injection
Captures with mss and injects pointer/keyboard events with PyAutoGUI
"""
import logging
from typing import Optional

import cv2
import mss
import numpy as np
import pyautogui

from qwop_ai.perception.pixel_matcher import pack_rgb
from qwop_ai.platform.base import GameEnvironment, Rect, ScreenPoint

logger = logging.getLogger(__name__)

class DesktopEnvironment(GameEnvironment):
    """GameEnvironment backed by the primary monitor and the system input queue"""

    def __init__(self):
        self.sct = mss.mss()
        self.monitor = self.sct.monitors[1]  # Primary monitor
        pyautogui.FAILSAFE = True
        pyautogui.PAUSE = 0.0
        logger.info(f"Desktop environment initialized - screen {self.monitor['width']}x{self.monitor['height']}")

    def capture_screen(self, rect: Optional[Rect] = None) -> np.ndarray:
        if rect is None:
            region = {
                "top": self.monitor["top"],
                "left": self.monitor["left"],
                "width": self.monitor["width"],
                "height": self.monitor["height"]
            }
        else:
            region = {"top": rect.top, "left": rect.left, "width": rect.width, "height": rect.height}
        frame = np.array(self.sct.grab(region))
        # MSS returns BGRA
        return cv2.cvtColor(frame, cv2.COLOR_BGRA2RGB)

    def read_pixel(self, point: ScreenPoint) -> int:
        frame = self.capture_screen(Rect(point.x, point.y, 1, 1))
        return pack_rgb(frame[0, 0])

    def move_pointer(self, point: ScreenPoint) -> None:
        pyautogui.moveTo(point.x, point.y, duration=0.0)

    def pointer_position(self) -> ScreenPoint:
        x, y = pyautogui.position()
        return ScreenPoint(int(x), int(y))

    def click(self) -> None:
        pyautogui.click(button='left')

    def press_key(self, key: str) -> None:
        pyautogui.keyDown(key)

    def release_key(self, key: str) -> None:
        pyautogui.keyUp(key)
