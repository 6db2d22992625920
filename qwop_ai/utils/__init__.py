"""
Utilities module for QWOP AI
"""
from qwop_ai.utils.logger import setup_logger, get_logger
from qwop_ai.utils.file_utils import ensure_dir, save_json, load_json
from qwop_ai.utils.time_utils import format_duration, Timer

__all__ = [
    # Logger
    'setup_logger', 'get_logger',
    # File utils
    'ensure_dir', 'save_json', 'load_json',
    # Time utils
    'format_duration', 'Timer',
]
