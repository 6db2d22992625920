"""
Game Session - per-session context shared by the core components
"""
import threading
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from qwop_ai.platform.base import ScreenPoint

@dataclass
class GameSession:
    """
    Mutable state of one automation session.

    The origin is written once by origin detection and read-only afterwards.
    stop_event may be set from any thread; it is only cleared by start_game
    before a new run begins.
    """
    origin: Optional[ScreenPoint] = None
    finished: bool = False
    stop_event: threading.Event = field(default_factory=threading.Event)

    # Diagnostics
    string: str = ""
    last_capture: Optional[np.ndarray] = None
    last_transformed: Optional[np.ndarray] = None

    def request_stop(self) -> None:
        self.stop_event.set()

    @property
    def stop_requested(self) -> bool:
        return self.stop_event.is_set()

    def is_running(self) -> bool:
        return not (self.stop_requested or self.finished)
