import pytest

from searcher.context_annotator import ContextAnnotator, annotate, render_context, visible_offset
from searcher.errors import InvalidRadiusError
from searcher.rolling_hash import rabin_karp_search
from searcher.validation import fold_case


def test_visible_offset_skips_newlines():
    assert visible_offset(b"ab\ncd", 3) == 2
    assert visible_offset(b"a\n\nb", 3) == 1
    assert visible_offset(b"abc", 0) == 0


def test_newline_before_match_is_not_counted():
    report = annotate(b"ab\ncd", [3], b"cd", 0)
    assert len(report) == 1
    entry = report.entries[0]
    assert entry.position == 2
    assert entry.context == b"cd"
    assert entry.pattern == b"cd"


def test_newline_inside_window_is_kept():
    report = annotate(b"ab\ncd", [1], b"b", 1)
    assert report.entries[0].position == 1
    assert report.entries[0].context == b"ab\nc"


def test_consecutive_newlines_inside_window_are_kept():
    report = annotate(b"a\n\nb", [3], b"b", 1)
    assert report.entries[0].position == 1
    assert report.entries[0].context == b"a\n\nb"


def test_newline_after_window_is_dropped():
    report = annotate(b"ab\ncd", [0], b"ab", 0)
    assert report.entries[0].context == b"ab"


def test_window_is_clamped_at_start():
    report = annotate(b"fox and hound", [0], b"fox", 3)
    assert report.entries[0].position == 0
    assert report.entries[0].context == b"fox an"


def test_window_is_clamped_at_end():
    report = annotate(b"the fox", [4], b"fox", 10)
    assert report.entries[0].context == b"the fox"


def test_empty_matches_give_no_match_report():
    for radius in (0, 5):
        for pattern in (b"x", b"anything"):
            report = annotate(b"some text", [], pattern, radius)
            assert report.is_empty
            assert len(report) == 0


def test_case_preserving_report_for_case_insensitive_search():
    text = b"The Quick fox. the quick Fox."
    pattern = b"fox"
    matches = rabin_karp_search(fold_case(text), fold_case(pattern), 256, 101)
    assert matches == [10, 25]

    report = annotate(text, matches, pattern, 4)
    assert [e.position for e in report] == [10, 25]
    assert [e.context for e in report] == [b"ick fox. th", b"ick Fox."]
    assert all(e.pattern == b"fox" for e in report)


def test_pattern_is_shown_as_typed():
    text = b"a Fox here"
    pattern = b"FOX"
    matches = rabin_karp_search(fold_case(text), fold_case(pattern), 256, 101)
    report = annotate(text, matches, pattern, 1)
    assert report.entries[0].pattern == b"FOX"
    assert report.entries[0].context == b" Fox "


def test_positions_are_stable_across_line_wrapping():
    flat = b"alphabetagamma"
    wrapped = b"alpha\nbeta\ngamma"
    flat_report = annotate(flat, rabin_karp_search(flat, b"gamma", 256, 101), b"gamma", 0)
    wrapped_report = annotate(wrapped, rabin_karp_search(wrapped, b"gamma", 256, 101), b"gamma", 0)
    assert flat_report.entries[0].position == wrapped_report.entries[0].position == 9


def test_str_text_is_supported():
    report = annotate("ab\ncd", [3], "cd", 0)
    assert report.entries[0].position == 2
    assert report.entries[0].context == "cd"


def test_negative_radius_is_rejected():
    with pytest.raises(InvalidRadiusError):
        ContextAnnotator().annotate(b"abc", [0], b"a", -1)


def test_render_context_empty_window():
    assert render_context(b"abc", 5, 7) == b""


def test_leading_newline_of_file_is_not_rendered():
    report = annotate(b"\nab", [1], b"ab", 0)
    assert report.entries[0].position == 0
    assert report.entries[0].context == b"ab"
