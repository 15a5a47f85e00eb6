"""Tests for the shared matching helpers."""

import pytest

from htmlscan.rules.base import LineIndex, attr_pattern, tag_pattern


class TestLineIndex:
    @pytest.mark.parametrize(
        "index, expected",
        [(0, 1), (2, 1), (3, 2), (4, 2), (5, 3), (8, 3)],
    )
    def test_line_of(self, index, expected):
        assert LineIndex("ab\nc\ndefg").line_of(index) == expected

    def test_empty_text(self):
        assert LineIndex("").line_of(0) == 1

    def test_matches_newline_count(self):
        text = "<p>\n\n<img>\nx\n<a>"
        lines = LineIndex(text)
        for i in range(len(text)):
            assert lines.line_of(i) == text.count("\n", 0, i) + 1


class TestTagPattern:
    def test_matches_case_insensitively(self):
        assert tag_pattern("form").search("<FORM method='post'>")

    def test_name_boundary(self):
        assert not tag_pattern("a").search("<abbr title='x'>")

    def test_unterminated_tag_ends_at_next_tag(self):
        matches = tag_pattern("img").findall("<img src='a.png' <img src='b.png'>")
        assert matches == ["<img src='b.png'>"]

    def test_attribute_matching_stays_inside_tag(self):
        text = "<a href='https://e.example'>x</a><b target='_blank'>"
        tag = tag_pattern("a").search(text).group(0)
        assert not attr_pattern("target", "_blank").search(tag)
