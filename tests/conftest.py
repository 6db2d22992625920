from typing import Callable, List, Optional, Tuple

import numpy as np
import pytest

from qwop_ai.config import config
from qwop_ai.perception.digit_templates import DEFAULT_FONT, rows_to_bitmap
from qwop_ai.perception.pixel_matcher import pack_rgb, to_rgb
from qwop_ai.platform.base import GameEnvironment, Rect, ScreenPoint

BACKGROUND = (255, 255, 255)
SCORE_BACKGROUND = (30, 40, 60)
INK = (255, 255, 255)

def render_text(text: str, scale: int = 3, size: Tuple[int, int] = (30, 200),
                ink=INK, background=SCORE_BACKGROUND, left: int = 4, top: int = 4) -> np.ndarray:
    """Draw text with the built-in digit font; unknown chars become solid blocks"""
    image = np.zeros(size + (3,), dtype=np.uint8)
    image[:, :] = background
    x = left
    for char in text:
        if char in DEFAULT_FONT:
            bitmap = rows_to_bitmap(DEFAULT_FONT[char])
        else:
            bitmap = np.ones((7, 5), dtype=bool)
        big = np.kron(bitmap, np.ones((scale, scale), dtype=bool))
        h, w = big.shape
        image[top:top + h, x:x + w][big] = ink
        x += w + scale
    return image

def draw_border(image: np.ndarray, x: int, y: int, width: int = 100, height: int = 60,
                thickness: int = 3, color=None) -> None:
    """Rectangle outline in the border color"""
    rgb = to_rgb(config.calibration.BORDER_COLOR if color is None else color)
    image[y:y + thickness, x:x + width] = rgb
    image[y + height - thickness:y + height, x:x + width] = rgb
    image[y:y + height, x:x + thickness] = rgb
    image[y:y + height, x + width - thickness:x + width] = rgb

def blank_screen(width: int = 640, height: int = 480, color=BACKGROUND) -> np.ndarray:
    screen = np.zeros((height, width, 3), dtype=np.uint8)
    screen[:, :] = color
    return screen

class FakeEnvironment(GameEnvironment):
    """
    Scripted GameEnvironment. The end screen appears once finish_after_ticks
    waits of config.TICK_MS have been slept.
    """

    def __init__(self, screen: Optional[np.ndarray] = None, finish_after_ticks: Optional[int] = None,
                 on_tick: Optional[Callable[[int], None]] = None):
        self.screen = blank_screen() if screen is None else screen
        self.finish_after_ticks = finish_after_ticks
        self.on_tick = on_tick
        self.events: List[tuple] = []
        self.sleeps: List[int] = []
        self.ticks = 0
        self.pointer = ScreenPoint(5, 5)

    @property
    def finished(self) -> bool:
        return self.finish_after_ticks is not None and self.ticks >= self.finish_after_ticks

    def key_events(self) -> List[tuple]:
        return [e for e in self.events if e[0] in ("press", "release")]

    def capture_screen(self, rect: Optional[Rect] = None) -> np.ndarray:
        if rect is None:
            return self.screen.copy()
        return self.screen[rect.top:rect.top + rect.height, rect.left:rect.left + rect.width].copy()

    def read_pixel(self, point: ScreenPoint) -> int:
        if self.finished:
            return config.calibration.MEDAL_COLOR
        h, w = self.screen.shape[:2]
        if 0 <= point.x < w and 0 <= point.y < h:
            return pack_rgb(self.screen[point.y, point.x])
        return 0

    def move_pointer(self, point: ScreenPoint) -> None:
        self.pointer = point
        self.events.append(("move", point))

    def pointer_position(self) -> ScreenPoint:
        return self.pointer

    def click(self) -> None:
        self.events.append(("click", self.pointer))

    def press_key(self, key: str) -> None:
        self.events.append(("press", key))

    def release_key(self, key: str) -> None:
        self.events.append(("release", key))

    def sleep(self, millis: int) -> None:
        self.sleeps.append(millis)
        if millis == config.TICK_MS:
            self.ticks += 1
            if self.on_tick:
                self.on_tick(self.ticks)

@pytest.fixture
def fake_env():
    return FakeEnvironment()
