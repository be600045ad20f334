"""
Unit tests for option labelling and answer matching.
"""

import pytest

from exam_toolkit.common.options import (
    find_correct_option,
    format_option,
    format_options,
    has_any_option_labels,
    has_option_label,
    is_correct_option,
    option_letter,
)


class TestOptionLabels:
    """Tests for positional letter labels."""

    def test_option_letter_when_indexed_then_letters_by_position(self):
        assert [option_letter(i) for i in range(6)] == ["A", "B", "C", "D", "E", "F"]

    @pytest.mark.parametrize("option,expected", [
        ("A. Paris", True),
        ("  C. Rome", True),
        ("Paris", False),
        ("a. lower case", False),
        ("A.No space", False),
        ("AB. Two letters", False),
    ])
    def test_has_option_label_when_checked_then_matches_letter_dot_space(self, option, expected):
        assert has_option_label(option) is expected

    def test_format_option_when_unlabelled_then_prefixes_letter(self):
        assert format_option("Paris", 1) == "B. Paris"

    def test_format_option_when_already_labelled_then_not_doubled(self):
        assert format_option("D. Madrid", 3) == "D. Madrid"

    def test_format_option_when_text_has_spaces_then_not_trimmed(self):
        assert format_option("  spaced  ", 0) == "A.   spaced  "

    def test_format_options_when_mixed_then_labels_only_unlabelled(self):
        assert format_options(["A. One", "Two"]) == ["A. One", "B. Two"]
        assert has_any_option_labels(["A. One", "Two"])
        assert not has_any_option_labels(["One", "Two"])


class TestAnswerMatching:
    """Tests for trim + case-insensitive exact answer matching."""

    def test_is_correct_option_when_case_and_whitespace_differ_then_true(self):
        assert is_correct_option("  Paris ", "PARIS")

    def test_is_correct_option_when_partial_then_false(self):
        assert not is_correct_option("Paris, France", "Paris")

    def test_find_correct_option_when_duplicate_matches_then_first(self):
        assert find_correct_option(["x", "Y", "y"], "y") == 1

    def test_find_correct_option_when_no_match_then_none(self):
        assert find_correct_option(["x", "y"], "z") is None
