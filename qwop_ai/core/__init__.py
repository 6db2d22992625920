"""
Core components: session context, outcomes and errors
The Qwopper driver lives in qwop_ai.core.qwopper
"""
from qwop_ai.core.exceptions import QwopError, NotFoundError, ScoreReadError, InvalidControlStringError
from qwop_ai.core.session import GameSession
from qwop_ai.core.run_outcome import RunOutcome

__all__ = [
    'QwopError',
    'NotFoundError',
    'ScoreReadError',
    'InvalidControlStringError',
    'GameSession',
    'RunOutcome',
]
