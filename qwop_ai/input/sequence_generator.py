"""
Sequence Generator - physically plausible random control strings

A realistic string is one where:
- a key press is always followed by a release of the same key
- there is at least one tick between a press and the release of a key
- there is also at least one tick between a release and the next press
"""
import logging
import random
from enum import Enum
from typing import List, Optional

from qwop_ai.input.control_string import (
    NOTES, NUM_CHANNELS, parse_token, release_symbol, TokenKind
)

logger = logging.getLogger(__name__)

class ChannelPhase(Enum):
    RELEASED = "released"
    PRESSED = "pressed"
    PRESSED_THIS_TICK = "pressed_this_tick"
    RELEASED_THIS_TICK = "released_this_tick"

class ChannelState:
    """Per-channel state machine; a channel may change at most once per tick"""

    _SETTLED = {
        ChannelPhase.PRESSED_THIS_TICK: ChannelPhase.PRESSED,
        ChannelPhase.RELEASED_THIS_TICK: ChannelPhase.RELEASED,
    }

    def __init__(self):
        self.phase = ChannelPhase.RELEASED

    @property
    def is_down(self) -> bool:
        return self.phase in (ChannelPhase.PRESSED, ChannelPhase.PRESSED_THIS_TICK)

    def can_press(self) -> bool:
        return self.phase is ChannelPhase.RELEASED

    def can_release(self) -> bool:
        return self.phase is ChannelPhase.PRESSED

    def press(self) -> None:
        if not self.can_press():
            raise ValueError(f"Cannot press a channel in phase {self.phase.value}")
        self.phase = ChannelPhase.PRESSED_THIS_TICK

    def release(self) -> None:
        if not self.can_release():
            raise ValueError(f"Cannot release a channel in phase {self.phase.value}")
        self.phase = ChannelPhase.RELEASED_THIS_TICK

    def tick(self) -> None:
        self.phase = self._SETTLED.get(self.phase, self.phase)

class SequenceGenerator:
    """Draws notes at random and keeps only the legal ones"""

    def __init__(self, rng: Optional[random.Random] = None, notes: str = NOTES):
        self.rng = rng or random.Random()
        self.notes = notes

    def generate(self, duration_ticks: int) -> str:
        """
        Make a random control string

        Args:
            duration_ticks: Number of '+' waits in the string

        Returns:
            Well-formed control string with every channel released at the end
        """
        channels = [ChannelState() for _ in range(NUM_CHANNELS)]
        notes: List[str] = []
        ticks = 0
        while ticks < duration_ticks:
            note = self.rng.choice(self.notes)
            token = parse_token(note)
            if token.kind is TokenKind.WAIT:
                ticks += 1
                for channel in channels:
                    channel.tick()
            elif token.kind is TokenKind.PRESS:
                if not channels[token.channel].can_press():
                    continue
                channels[token.channel].press()
            else:
                if not channels[token.channel].can_release():
                    continue
                channels[token.channel].release()
            notes.append(note)

        # Make sure all keys are released at the end (maybe without a delay)
        for index, channel in enumerate(channels):
            if channel.is_down:
                notes.append(release_symbol(index))

        result = "".join(notes)
        logger.debug(f"Generated {len(result)} notes over {duration_ticks} ticks")
        return result

def make_realistic_random_string(duration: int, rng: Optional[random.Random] = None) -> str:
    """Convenience wrapper around SequenceGenerator.generate"""
    return SequenceGenerator(rng).generate(duration)

__all__ = ['ChannelPhase', 'ChannelState', 'SequenceGenerator', 'make_realistic_random_string']
