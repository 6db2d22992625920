"""
Digit Templates - bitmap font used to classify distance glyphs
The default asset is a 5x7 font; alternate fonts load from JSON files mapping
each character to its rows, with '#' for ink
"""
import logging
from typing import Dict, List, Optional

import numpy as np

from qwop_ai.utils.file_utils import load_json, save_json

logger = logging.getLogger(__name__)

DEFAULT_FONT: Dict[str, List[str]] = {
    "0": [".###.",
          "#...#",
          "#...#",
          "#...#",
          "#...#",
          "#...#",
          ".###."],
    "1": ["..#..",
          ".##..",
          "..#..",
          "..#..",
          "..#..",
          "..#..",
          ".###."],
    "2": [".###.",
          "#...#",
          "....#",
          "...#.",
          "..#..",
          ".#...",
          "#####"],
    "3": ["#####",
          "...#.",
          "..#..",
          "...#.",
          "....#",
          "#...#",
          ".###."],
    "4": ["...#.",
          "..##.",
          ".#.#.",
          "#..#.",
          "#####",
          "...#.",
          "...#."],
    "5": ["#####",
          "#....",
          "####.",
          "....#",
          "....#",
          "#...#",
          ".###."],
    "6": ["..##.",
          ".#...",
          "#....",
          "####.",
          "#...#",
          "#...#",
          ".###."],
    "7": ["#####",
          "....#",
          "...#.",
          "..#..",
          ".#...",
          ".#...",
          ".#..."],
    "8": [".###.",
          "#...#",
          "#...#",
          ".###.",
          "#...#",
          "#...#",
          ".###."],
    "9": [".###.",
          "#...#",
          "#...#",
          ".####",
          "....#",
          "...#.",
          ".##.."],
    ".": [".....",
          ".....",
          ".....",
          ".....",
          ".....",
          ".##..",
          ".##.."],
}

def rows_to_bitmap(rows: List[str]) -> np.ndarray:
    """Convert '#'/'.' rows into a boolean array"""
    return np.array([[c == "#" for c in row] for row in rows], dtype=bool)

def tight_crop(bitmap: np.ndarray) -> np.ndarray:
    """Crop a boolean bitmap to the bounding box of its ink"""
    ys, xs = np.nonzero(bitmap)
    if len(ys) == 0:
        return bitmap[:0, :0]
    return bitmap[ys.min():ys.max() + 1, xs.min():xs.max() + 1]

class DigitTemplates:
    """
    Set of character templates.

    Each template keeps its tight ink crop and its ink height relative to the
    font's cell height, so a small glyph such as '.' can be told apart from a
    full-height digit.
    """

    def __init__(self, font: Dict[str, List[str]]):
        self.font_height = max(len(rows) for rows in font.values())
        self.bitmaps: Dict[str, np.ndarray] = {}
        self.relative_heights: Dict[str, float] = {}
        for char, rows in font.items():
            crop = tight_crop(rows_to_bitmap(rows))
            if crop.size == 0:
                logger.warning(f"Template for {char!r} has no ink - skipped")
                continue
            self.bitmaps[char] = crop
            self.relative_heights[char] = crop.shape[0] / self.font_height

    @classmethod
    def default(cls) -> "DigitTemplates":
        return cls(DEFAULT_FONT)

    @classmethod
    def from_json(cls, path: str) -> "DigitTemplates":
        font = load_json(path)
        if not font:
            raise ValueError(f"No digit templates in {path}")
        logger.info(f"Loaded {len(font)} digit templates from {path}")
        return cls(font)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "DigitTemplates":
        """Templates from path, or the built-in font when path is empty"""
        return cls.from_json(path) if path else cls.default()

    def chars(self) -> List[str]:
        return list(self.bitmaps)

    def __len__(self) -> int:
        return len(self.bitmaps)

def export_default_font(path: str) -> bool:
    """Write the built-in font as a JSON asset, a starting point for custom fonts"""
    return save_json(DEFAULT_FONT, path)
