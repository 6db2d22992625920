"""
Score Reader - minimal OCR for the distance counter
Thresholds a small capture, splits it into connected glyphs and matches each
glyph against the digit templates
"""
import logging
from typing import Callable, List, NamedTuple, Optional, Tuple

import cv2
import numpy as np

from qwop_ai.config import Calibration, config
from qwop_ai.core.session import GameSession
from qwop_ai.perception.digit_templates import DigitTemplates
from qwop_ai.platform.base import Rect, ScreenPoint

logger = logging.getLogger(__name__)

class Glyph(NamedTuple):
    """Bounding box of one connected ink region"""
    x: int
    y: int
    width: int
    height: int

class ScoreReader:
    """
    Reads the distance shown by the game.

    Pipeline: capture -> threshold -> segment -> classify. Unrecognized glyphs
    become config.OCR_UNKNOWN_CHAR; parsing the result is left to the caller.
    """

    def __init__(self, calibration: Optional[Calibration] = None,
                 templates: Optional[DigitTemplates] = None,
                 ink_threshold: Optional[int] = None,
                 min_similarity: Optional[float] = None,
                 min_area: Optional[int] = None):
        self.calibration = calibration or config.calibration
        self.templates = templates or DigitTemplates.load(config.OCR_TEMPLATE_PATH)
        self.ink_threshold = config.OCR_INK_THRESHOLD if ink_threshold is None else ink_threshold
        self.min_similarity = config.OCR_MIN_SIMILARITY if min_similarity is None else min_similarity
        self.min_area = config.OCR_MIN_GLYPH_AREA if min_area is None else min_area
        self.unknown_char = config.OCR_UNKNOWN_CHAR

    def score_rect(self, origin: ScreenPoint) -> Rect:
        dx, dy, width, height = self.calibration.SCORE_RECT
        return Rect(origin.x + dx, origin.y + dy, width, height)

    def threshold(self, image: np.ndarray) -> np.ndarray:
        """Binary uint8 image: 255 where luminance reaches the ink threshold, 0 elsewhere"""
        gray = cv2.cvtColor(image, cv2.COLOR_RGB2GRAY)
        _, binary = cv2.threshold(gray, self.ink_threshold - 1, 255, cv2.THRESH_BINARY)
        return binary

    def segment(self, binary: np.ndarray) -> List[Glyph]:
        """8-connected ink components, left to right"""
        count, _, stats, _ = cv2.connectedComponentsWithStats(
            (binary > 0).astype(np.uint8), connectivity=8)
        glyphs = []
        for label in range(1, count):  # label 0 is the background
            x, y, w, h, area = (int(v) for v in stats[label])
            if area >= self.min_area:
                glyphs.append(Glyph(x, y, w, h))
        glyphs.sort(key=lambda g: (g.x, g.y))
        return glyphs

    def _similarity(self, crop: np.ndarray, char: str, line_height: int) -> float:
        template = self.templates.bitmaps[char]
        h, w = crop.shape
        resized = cv2.resize(template.astype(np.uint8), (w, h), interpolation=cv2.INTER_NEAREST) > 0
        agreement = float(np.mean(resized == crop))

        th, tw = template.shape
        glyph_aspect = w / h
        template_aspect = tw / th
        aspect = min(glyph_aspect, template_aspect) / max(glyph_aspect, template_aspect)

        glyph_height = h / line_height
        template_height = self.templates.relative_heights[char]
        height = min(glyph_height, template_height) / max(glyph_height, template_height)

        return agreement * aspect * height

    def classify_glyph(self, binary: np.ndarray, glyph: Glyph, line_height: int) -> Tuple[str, float]:
        """Best matching character and its similarity in [0, 1]"""
        crop = binary[glyph.y:glyph.y + glyph.height, glyph.x:glyph.x + glyph.width] > 0
        best_char, best_score = self.unknown_char, 0.0
        for char in self.templates.chars():
            score = self._similarity(crop, char, line_height)
            if score > best_score:
                best_char, best_score = char, score
        if best_score < self.min_similarity:
            logger.debug(f"Unrecognized glyph at {tuple(glyph)} (best {best_char!r} {best_score:.2f})")
            return self.unknown_char, best_score
        return best_char, best_score

    def classify(self, binary: np.ndarray, glyphs: List[Glyph]) -> str:
        if not glyphs:
            return ""
        line_height = max(g.height for g in glyphs)
        return "".join(self.classify_glyph(binary, g, line_height)[0] for g in glyphs)

    @staticmethod
    def draw_parts(binary: np.ndarray, glyphs: List[Glyph]) -> np.ndarray:
        """Thresholded image with a red box around every glyph, for debugging"""
        annotated = cv2.cvtColor(binary, cv2.COLOR_GRAY2RGB)
        for g in glyphs:
            cv2.rectangle(annotated, (g.x, g.y), (g.x + g.width - 1, g.y + g.height - 1), (255, 0, 0), 1)
        return annotated

    def read_image(self, image: np.ndarray) -> Tuple[str, np.ndarray]:
        """
        Read the digits in an already captured region

        Returns:
            (text, annotated thresholded image)
        """
        binary = self.threshold(image)
        glyphs = self.segment(binary)
        return self.classify(binary, glyphs), self.draw_parts(binary, glyphs)

    def read_score(self, origin: ScreenPoint, capture_screen: Callable[[Rect], np.ndarray],
                   session: Optional[GameSession] = None) -> str:
        """
        Capture the distance counter and read it

        Args:
            origin: Game origin
            capture_screen: Captures a screen rectangle as an RGB array
            session: If given, receives the raw capture and the annotated image

        Returns:
            Recognized text, possibly containing unknown markers
        """
        capture = capture_screen(self.score_rect(origin))
        text, annotated = self.read_image(capture)
        if session is not None:
            session.last_capture = capture
            session.last_transformed = annotated
        logger.debug(f"Distance read as {text!r}")
        return text
