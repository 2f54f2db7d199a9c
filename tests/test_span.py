import pytest

from lovely.span import Span, line_col


def test_position_from_char_index():
    text = "hi there\nI am Tom"
    assert line_col(text, 12) == (2, 3)

    text = "hi there\nI am Tom\nWho are you???"
    assert line_col(text, 25) == (3, 7)


def test_line_col_start_and_end_use_span_bounds():
    text = "hi there\nI am Tom\nWho are you???"
    span = Span(12, 25)
    assert span.line_col_start(text) == line_col(text, 12)
    assert span.line_col_end(text) == line_col(text, 25)
    assert span.line_col_start(text) == (2, 3)
    assert span.line_col_end(text) == (3, 7)


def test_line_col_at_beginning():
    assert line_col("anything", 0) == (1, 1)
    assert line_col("anything", 1) == (1, 1)


def test_line_col_past_end_stops_at_text_end():
    text = "ab\ncd"
    assert line_col(text, 100) == line_col(text, len(text) + 1)


def test_slice():
    source = "hi there\nI am Tom"
    assert Span(3, 8).slice(source) == "there"
    assert Span(0, 0).slice(source) == ""
    assert Span(0, len(source)).slice(source) == source


def test_slice_out_of_range_raises():
    with pytest.raises(IndexError):
        Span(2, 10).slice("short")
    with pytest.raises(IndexError):
        Span(3, 1).slice("short")


def test_span_equality_and_immutability():
    assert Span(1, 2) == Span(1, 2)
    with pytest.raises(AttributeError):
        Span(1, 2).start = 5  # type: ignore[misc]