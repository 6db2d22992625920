"""
Playback Engine - plays a control string as timed key events
Interprets the string like a music sheet, polling for the end of the game
after every wait so playback can stop early
"""
import logging
import threading
from enum import Enum
from typing import Callable, Optional, Sequence

from qwop_ai.config import config
from qwop_ai.input.control_string import NUM_CHANNELS, TokenKind, parse_token
from qwop_ai.platform.base import GameEnvironment

logger = logging.getLogger(__name__)

class PlaybackStatus(Enum):
    """Why play() returned"""
    COMPLETED = "completed"  # Every note was played
    FINISHED = "finished"  # The game reached its end screen
    STOPPED = "stopped"  # An external stop was requested

class PlaybackEngine:
    """
    Drives four binary input channels from a control string.

    Channel state survives between play() calls so that a string can be
    replayed back to back within one game; release_all() resets it.
    """

    def __init__(self, environment: GameEnvironment,
                 channel_keys: Optional[Sequence[str]] = None,
                 tick_ms: Optional[int] = None):
        self.environment = environment
        self.channel_keys = tuple(channel_keys or config.CHANNEL_KEYS)
        if len(self.channel_keys) != NUM_CHANNELS:
            raise ValueError(f"Expected {NUM_CHANNELS} channel keys, got {len(self.channel_keys)}")
        self.tick_ms = config.TICK_MS if tick_ms is None else tick_ms
        self.pressed = [False] * NUM_CHANNELS

        # Stats
        self.waits_played = 0
        self.unknown_notes = 0

    def play(self, control_string: str, is_finished: Callable[[], bool],
             stop_event: threading.Event) -> PlaybackStatus:
        """
        Play a string note by note

        Args:
            control_string: Notes to play
            is_finished: Polled after every wait; True ends playback
            stop_event: Checked before every note and after every wait

        Returns:
            Reason playback ended
        """
        for note in control_string:
            if stop_event.is_set():
                return PlaybackStatus.STOPPED

            token = parse_token(note)
            if token is None:
                self.unknown_notes += 1
                logger.warning(f"Unknown note: {note!r}")
                continue

            if token.kind is TokenKind.PRESS:
                self.press(token.channel)
            elif token.kind is TokenKind.RELEASE:
                self.release(token.channel)
            else:
                self.environment.sleep(self.tick_ms)
                self.waits_played += 1
                # After each delay, check the screen to see if it's finished
                if is_finished():
                    return PlaybackStatus.FINISHED
                if stop_event.is_set():
                    return PlaybackStatus.STOPPED

        return PlaybackStatus.COMPLETED

    def press(self, channel: int) -> None:
        # Holding a key is idempotent, so a repeated press sends nothing
        if self.pressed[channel]:
            return
        self.environment.press_key(self.channel_keys[channel])
        self.pressed[channel] = True

    def release(self, channel: int) -> None:
        self.environment.release_key(self.channel_keys[channel])
        self.pressed[channel] = False

    def release_all(self) -> None:
        """Release every channel regardless of the tracked state"""
        for channel in range(NUM_CHANNELS):
            self.release(channel)

    def get_stats(self) -> dict:
        return {
            'pressed': [self.channel_keys[c] for c in range(NUM_CHANNELS) if self.pressed[c]],
            'waits_played': self.waits_played,
            'unknown_notes': self.unknown_notes,
        }
