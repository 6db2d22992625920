"""
Control Strings - symbolic notation for timed key input
Q, W, O, P press channels 0-3, q, w, o, p release them and '+' waits one tick
"""
import logging
from enum import Enum
from typing import List, NamedTuple, Optional

from qwop_ai.core.exceptions import InvalidControlStringError

logger = logging.getLogger(__name__)

CHANNEL_SYMBOLS = "QWOP"
NUM_CHANNELS = len(CHANNEL_SYMBOLS)
WAIT_SYMBOL = "+"

# All possible notes; the wait appears twice so it is drawn twice as often
NOTES = "QWOPqwop++"

class TokenKind(Enum):
    PRESS = "press"
    RELEASE = "release"
    WAIT = "wait"

class Token(NamedTuple):
    kind: TokenKind
    channel: Optional[int] = None

    @property
    def symbol(self) -> str:
        if self.kind is TokenKind.WAIT:
            return WAIT_SYMBOL
        letter = CHANNEL_SYMBOLS[self.channel]
        return letter if self.kind is TokenKind.PRESS else letter.lower()

WAIT = Token(TokenKind.WAIT)

def parse_token(symbol: str) -> Optional[Token]:
    """Token for a single symbol, or None if the symbol is not in the notation"""
    if symbol == WAIT_SYMBOL:
        return WAIT
    if len(symbol) != 1 or symbol.upper() not in CHANNEL_SYMBOLS:
        return None
    index = CHANNEL_SYMBOLS.index(symbol.upper())
    return Token(TokenKind.PRESS if symbol.isupper() else TokenKind.RELEASE, index)

def release_symbol(channel: int) -> str:
    return CHANNEL_SYMBOLS[channel].lower()

def parse_control_string(text: str) -> List[Token]:
    """
    Strictly parse a control string

    Raises:
        InvalidControlStringError: on an unknown symbol or broken press/release alternation
    """
    tokens = []
    pressed = [False] * NUM_CHANNELS
    for position, symbol in enumerate(text):
        token = parse_token(symbol)
        if token is None:
            raise InvalidControlStringError(f"Unknown symbol {symbol!r} at position {position}")
        if token.kind is TokenKind.PRESS:
            if pressed[token.channel]:
                raise InvalidControlStringError(f"{symbol!r} pressed twice at position {position}")
            pressed[token.channel] = True
        elif token.kind is TokenKind.RELEASE:
            if not pressed[token.channel]:
                raise InvalidControlStringError(f"{symbol!r} released while up at position {position}")
            pressed[token.channel] = False
        tokens.append(token)
    return tokens

def pressed_channels(tokens: List[Token]) -> List[int]:
    """Channels left pressed at the end of a token sequence"""
    pressed = [False] * NUM_CHANNELS
    for token in tokens:
        if token.kind is not TokenKind.WAIT:
            pressed[token.channel] = token.kind is TokenKind.PRESS
    return [channel for channel in range(NUM_CHANNELS) if pressed[channel]]

def close_control_string(text: str) -> str:
    """Append the implicit release of every channel still pressed at the end"""
    return text + "".join(release_symbol(c) for c in pressed_channels(parse_control_string(text)))

def is_well_formed(text: str, require_released: bool = True) -> bool:
    """
    True if presses and releases alternate per channel; with require_released
    every channel must also be up at the end
    """
    try:
        tokens = parse_control_string(text)
    except InvalidControlStringError:
        return False
    return not (require_released and pressed_channels(tokens))

def count_ticks(text: str) -> int:
    return text.count(WAIT_SYMBOL)
