"""
Perception components: pixel matching, origin location, end-screen detection and distance OCR
"""
from qwop_ai.perception.pixel_matcher import color_distance, color_matches, color_mask
from qwop_ai.perception.origin_locator import OriginLocator
from qwop_ai.perception.completion_detector import CompletionDetector
from qwop_ai.perception.digit_templates import DigitTemplates
from qwop_ai.perception.score_reader import ScoreReader, Glyph

__all__ = [
    'color_distance',
    'color_matches',
    'color_mask',
    'OriginLocator',
    'CompletionDetector',
    'DigitTemplates',
    'ScoreReader',
    'Glyph',
]
