"""
Configuration module for QWOP AI
Centralized configuration for all system components
"""
import os
from dataclasses import dataclass, field
from typing import Tuple

@dataclass(frozen=True)
class Calibration:
    """
    Layout-dependent constants for one fixed-scale rendering of the game.
    All offsets are relative to the game origin unless stated otherwise.
    """
    # Blue border of the message box, used to locate the game on screen
    BORDER_COLOR: int = 0x9DBCD0
    BORDER_MATCH_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, 0), (4, 0), (8, 0), (12, 0), (0, 4))
    BORDER_MISMATCH_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, -4), (4, 4))
    CORNER_TO_ORIGIN: Tuple[int, int] = (124, 103)  # subtracted from the border corner
    FINISHED_ORIGIN_SHIFT: Tuple[int, int] = (-5, 4)  # end screen is drawn shifted

    # Two gold medals shown on the end screen
    MEDAL_COLOR: int = 0xFFFF00
    MEDAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((157, 126), (482, 126))

    # Distance counter: (dx, dy, width, height)
    SCORE_RECT: Tuple[int, int, int, int] = (200, 20, 200, 30)

@dataclass
class Config:
    # Pixel matching
    RGB_TOLERANCE: int = 3  # L1 distance; absorbs capture dithering
    SCAN_STEP: int = 4  # Grid step when scanning the full screen for the border

    # Playback timing
    TICK_MS: int = 100  # Duration of one '+' wait token
    SETTLE_MS: int = 500  # Pause before the first string of a game

    # Input channels: key names for the Q, W, O, P channels
    CHANNEL_KEYS: Tuple[str, ...] = ("q", "w", "o", "p")
    RESTART_KEY: str = "r"
    NEXT_GAME_KEY: str = "space"
    KILL_BUTTON: str = "f8"  # Hotkey for emergency stop

    # Outcome policy: smallest distance that still counts as a successful run
    SUCCESS_DISTANCE: float = 100.0

    # OCR
    OCR_INK_THRESHOLD: int = 200  # Luminance at or above which a pixel is ink
    OCR_MIN_SIMILARITY: float = 0.6  # Below this a glyph is reported as unrecognized
    OCR_MIN_GLYPH_AREA: int = 1  # Components smaller than this are noise
    OCR_UNKNOWN_CHAR: str = "?"
    OCR_TEMPLATE_PATH: str = ""  # Optional JSON digit font; built-in font when empty

    # Random string generation
    DEFAULT_DURATION_TICKS: int = 30

    # Logging
    LOG_PATH: str = field(default_factory=lambda: os.getenv("QWOP_LOG_PATH", "logs"))
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("QWOP_LOG_LEVEL", "INFO"))
    DETAILED_LOGGING: bool = False

    calibration: Calibration = field(default_factory=Calibration)

# Global configuration instance
config = Config()

__all__ = ['Config', 'Calibration', 'config']
