"""
Input components: control strings, playback engine, sequence generator and kill switch
"""
from qwop_ai.input.control_string import Token, TokenKind, parse_control_string, is_well_formed
from qwop_ai.input.playback_engine import PlaybackEngine, PlaybackStatus
from qwop_ai.input.sequence_generator import SequenceGenerator, make_realistic_random_string
from qwop_ai.input.kill_switch import KillSwitch

__all__ = [
    'Token',
    'TokenKind',
    'parse_control_string',
    'is_well_formed',
    'PlaybackEngine',
    'PlaybackStatus',
    'SequenceGenerator',
    'make_realistic_random_string',
    'KillSwitch',
]
