"""
Completion Detector - detects the end-of-game screen
Both gold medals must read as gold; a single probe is prone to color bleed
"""
import logging
from typing import Callable, Optional

from qwop_ai.config import Calibration, config
from qwop_ai.core.session import GameSession
from qwop_ai.perception.pixel_matcher import color_matches
from qwop_ai.platform.base import ScreenPoint

logger = logging.getLogger(__name__)

class CompletionDetector:
    """Probes the medal positions relative to the origin"""

    def __init__(self, calibration: Optional[Calibration] = None, tolerance: Optional[int] = None):
        self.calibration = calibration or config.calibration
        self.tolerance = config.RGB_TOLERANCE if tolerance is None else tolerance

    def is_finished(self, origin: ScreenPoint, read_pixel: Callable[[ScreenPoint], int],
                    session: Optional[GameSession] = None) -> bool:
        """
        Check whether the game shows its end screen

        Args:
            origin: Game origin
            read_pixel: Returns the packed color at a screen point
            session: If given, its finished flag is updated with the result

        Returns:
            True if every medal probe matches the medal color
        """
        finished = True
        for dx, dy in self.calibration.MEDAL_OFFSETS:
            color = read_pixel(origin.offset(dx, dy))
            if not color_matches(self.calibration.MEDAL_COLOR, color, self.tolerance):
                finished = False
                break

        if session is not None:
            if finished and not session.finished:
                logger.debug("End screen detected")
            session.finished = finished
        return finished

    def is_running(self, session: GameSession) -> bool:
        """A session runs until it is stopped or the end screen was last seen"""
        return session.is_running()
