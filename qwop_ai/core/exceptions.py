"""
Exceptions raised by the QWOP AI core
"""

class QwopError(Exception):
    """Base class for all errors raised by qwop_ai"""

class NotFoundError(QwopError):
    """The game could not be located on screen"""

class ScoreReadError(QwopError):
    """The distance counter could not be turned into a number"""

    def __init__(self, text: str):
        super().__init__(f"Unreadable distance: {text!r}")
        self.text = text

class InvalidControlStringError(QwopError):
    """A control string breaks the press/release alternation rule"""
