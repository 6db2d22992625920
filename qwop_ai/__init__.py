"""
QWOP AI - plays the QWOP browser game from screen pixels

The game's state is only ever read from the screen and its controls are only
driven through synthetic keyboard and mouse events.

Main Components:
    - Perception: origin location, end-screen detection, distance OCR
    - Input: control strings, playback engine, random string generator, kill switch
    - Core: session context, the Qwopper driver and run outcomes
    - Platform: capability interface and the desktop implementation

Quick Start:
    >>> from qwop_ai import Qwopper, make_realistic_random_string
    >>> from qwop_ai.platform.desktop import DesktopEnvironment
    >>> qwopper = Qwopper(DesktopEnvironment())
    >>> qwopper.find_real_origin()
    >>> qwopper.start_game()
    >>> outcome = qwopper.play_one_game(make_realistic_random_string(30))
"""

__version__ = "1.0.0"

from qwop_ai.config import config
from qwop_ai.core.qwopper import Qwopper
from qwop_ai.core.run_outcome import RunOutcome
from qwop_ai.core.session import GameSession
from qwop_ai.input import PlaybackEngine, SequenceGenerator, KillSwitch, make_realistic_random_string
from qwop_ai.perception import OriginLocator, CompletionDetector, ScoreReader

__all__ = [
    # Configuration
    'config',
    # Core
    'Qwopper',
    'RunOutcome',
    'GameSession',
    # Input
    'PlaybackEngine',
    'SequenceGenerator',
    'KillSwitch',
    'make_realistic_random_string',
    # Perception
    'OriginLocator',
    'CompletionDetector',
    'ScoreReader',
]
