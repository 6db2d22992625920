import numpy as np
import pytest

from qwop_ai.core.session import GameSession
from qwop_ai.perception.digit_templates import DigitTemplates
from qwop_ai.perception.score_reader import ScoreReader
from qwop_ai.platform.base import Rect, ScreenPoint

from conftest import SCORE_BACKGROUND, render_text

@pytest.fixture
def reader():
    return ScoreReader(templates=DigitTemplates.default())

@pytest.mark.parametrize("scale", [2, 3])
def test_reads_decimal_distance(reader, scale):
    text, _ = reader.read_image(render_text("97.3", scale=scale))

    assert text == "97.3"

def test_reads_every_digit(reader):
    text, _ = reader.read_image(render_text("0123456789", scale=2))

    assert text == "0123456789"

def test_reads_leading_zero(reader):
    text, _ = reader.read_image(render_text("0.8"))

    assert text == "0.8"

def test_blank_region_reads_empty(reader):
    text, annotated = reader.read_image(render_text(""))

    assert text == ""
    assert not annotated.any()

def test_unrecognized_glyph_becomes_marker(reader):
    text, _ = reader.read_image(render_text("1#2"))

    assert text == "1?2"

def test_dark_ink_is_ignored(reader):
    text, _ = reader.read_image(render_text("42", ink=(90, 90, 90)))

    assert text == ""

def test_segment_orders_glyphs_left_to_right(reader):
    binary = reader.threshold(render_text("31"))
    glyphs = reader.segment(binary)

    assert len(glyphs) == 2
    assert glyphs[0].x < glyphs[1].x
    assert all(g.height == 21 for g in glyphs)

def test_annotated_image_boxes_glyphs_in_red(reader):
    _, annotated = reader.read_image(render_text("7"))

    assert annotated.shape == (30, 200, 3)
    assert (annotated == (255, 0, 0)).all(axis=2).any()

def test_read_score_captures_rect_relative_to_origin(reader):
    image = render_text("12.5")
    requested = []

    def capture(rect):
        requested.append(rect)
        return image

    session = GameSession()
    text = reader.read_score(ScreenPoint(10, 20), capture, session)

    assert text == "12.5"
    assert requested == [Rect(210, 40, 200, 30)]
    assert session.last_capture is image
    assert session.last_transformed.shape == (30, 200, 3)

def test_uniform_background_is_not_ink(reader):
    image = np.zeros((30, 200, 3), dtype=np.uint8)
    image[:, :] = SCORE_BACKGROUND

    assert not reader.threshold(image).any()
