"""
Qwopper - plays QWOP from screen pixels and synthetic key presses
Locates the game, replays control strings until the race ends or a stop is
requested, then reads the distance run off the screen
"""
import logging
import math
from typing import Optional

from qwop_ai.config import Calibration, config
from qwop_ai.core.exceptions import QwopError, ScoreReadError
from qwop_ai.core.run_outcome import RunOutcome
from qwop_ai.core.session import GameSession
from qwop_ai.input.control_string import count_ticks
from qwop_ai.input.playback_engine import PlaybackEngine, PlaybackStatus
from qwop_ai.perception.completion_detector import CompletionDetector
from qwop_ai.perception.origin_locator import OriginLocator
from qwop_ai.perception.score_reader import ScoreReader
from qwop_ai.platform.base import GameEnvironment, ScreenPoint
from qwop_ai.utils.time_utils import Timer

logger = logging.getLogger(__name__)

def parse_distance(text: str) -> float:
    """
    Parse the distance read by the OCR

    Raises:
        ScoreReadError: if the text is not a plain decimal number
    """
    try:
        distance = float(text)
    except ValueError:
        raise ScoreReadError(text) from None
    if not math.isfinite(distance):
        raise ScoreReadError(text)
    return distance

class Qwopper:
    """
    Session driver. All calls run on one thread; only stop() may be called
    from elsewhere.
    """

    def __init__(self, environment: GameEnvironment,
                 session: Optional[GameSession] = None,
                 calibration: Optional[Calibration] = None,
                 success_distance: Optional[float] = None):
        self.environment = environment
        self.session = session or GameSession()
        calibration = calibration or config.calibration
        self.calibration = calibration
        self.success_distance = config.SUCCESS_DISTANCE if success_distance is None else success_distance

        self.locator = OriginLocator(calibration)
        self.detector = CompletionDetector(calibration)
        self.reader = ScoreReader(calibration)
        self.engine = PlaybackEngine(environment)

    @property
    def origin(self) -> ScreenPoint:
        if self.session.origin is None:
            raise QwopError("Origin unknown - call find_real_origin() first")
        return self.session.origin

    def get_string(self) -> str:
        return self.session.string

    def get_last_capture(self):
        return self.session.last_capture

    def get_last_transformed(self):
        return self.session.last_transformed

    def find_real_origin(self) -> ScreenPoint:
        """Find the game origin, correcting for the shifted end-screen layout"""
        origin = self.locator.find_origin(self.environment.capture_screen)
        self.session.origin = origin
        if self.is_finished():
            dx, dy = self.calibration.FINISHED_ORIGIN_SHIFT
            self.session.origin = origin.offset(dx, dy)
            logger.info(f"Game already finished - origin adjusted to {tuple(self.session.origin)}")
        return self.session.origin

    def is_finished(self) -> bool:
        return self.detector.is_finished(self.origin, self.environment.read_pixel, self.session)

    def is_running(self) -> bool:
        return self.session.is_running()

    def stop(self) -> None:
        """Request the current game to stop; safe to call from any thread"""
        self.session.request_stop()

    def start_game(self) -> None:
        """
        Start a game, either by clicking on it (at first load) or pressing space
        for next games
        """
        self.session.stop_event.clear()
        self.environment.click_at(self.origin)
        if self.is_finished():
            self.environment.tap_key(config.NEXT_GAME_KEY)
        else:
            self.environment.tap_key(config.RESTART_KEY)

    def _stop_running(self) -> None:
        before = self.environment.pointer_position()
        # Restore focus to the game after any click elsewhere
        self.environment.click_at(self.origin)
        # Make sure all possible keys are released
        self.engine.release_all()
        # Return the mouse cursor to its initial position
        self.environment.move_pointer(before)

    def capture_distance(self) -> str:
        return self.reader.read_score(self.origin, self.environment.capture_screen, self.session)

    def play_one_game(self, string: str) -> RunOutcome:
        """
        Replay a control string until the game ends or a stop is requested

        Returns:
            RunOutcome; a run whose distance cannot be read is unsuccessful
        """
        logger.info(f"Playing {string}")
        self.session.string = string
        origin = self.origin
        has_waits = count_ticks(string) > 0
        if not has_waits:
            logger.warning("Control string has no waits - playing it once")

        with Timer("Game", logger) as timer:
            try:
                self.environment.sleep(config.SETTLE_MS)
                while not (self.is_finished() or self.session.stop_requested):
                    status = self.engine.play(string, self.is_finished, self.session.stop_event)
                    if status is not PlaybackStatus.COMPLETED or not has_waits:
                        break
            finally:
                # Keys must never stay held, even when the loop raises
                self._stop_running()

        aborted = self.session.stop_requested
        try:
            distance = parse_distance(self.capture_distance())
        except ScoreReadError as e:
            logger.warning(f"{e} - run counted as failed")
            distance = float('nan')

        if aborted:
            success = False
        else:
            success = not math.isnan(distance) and distance >= self.success_distance

        outcome = RunOutcome(string, success, aborted, timer.elapsed_ms(), distance)
        logger.info(f"{outcome} (origin {tuple(origin)})")
        return outcome
