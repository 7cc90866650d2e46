"""Tests for the character scanning primitives."""

import pytest

from id3handler.features.parsing.domain.scanner import (
    between,
    count_occurrences,
    find_first,
    find_last,
    find_numeric_run,
    iter_numeric_runs,
    left,
    right,
)


class TestCharacterLookup:
    """find_first / find_last / count_occurrences."""

    def test_find_first_and_last(self) -> None:
        assert find_first("a-b-c", "-") == 1
        assert find_last("a-b-c", "-") == 3

    def test_match_at_index_zero_is_not_a_miss(self) -> None:
        assert find_first("-abc", "-") == 0
        assert find_last("/file.mp3", "/") == 0

    def test_missing_character_returns_none(self) -> None:
        assert find_first("abc", "-") is None
        assert find_last("abc", "/") is None
        assert find_first("", "-") is None

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("", 0), ("abc", 0), ("a - b", 1), ("Pink Floyd - 1979 - The Wall", 2)],
    )
    def test_count_occurrences(self, text: str, expected: int) -> None:
        assert count_occurrences(text, "-") == expected


class TestNumericRuns:
    """Exact-length digit run search."""

    def test_finds_run_followed_by_separator(self) -> None:
        assert find_numeric_run("Pink Floyd - 1979 - The Wall", 0, 4) == 13

    def test_finds_run_at_start_and_end(self) -> None:
        assert find_numeric_run("01 - Intro", 0, 2) == 0
        assert find_numeric_run("Artist 2001", 0, 4) == 7

    def test_longer_and_shorter_runs_are_skipped(self) -> None:
        assert find_numeric_run("12345 and 123", 0, 4) is None
        assert find_numeric_run("cat 123456 / 1999", 0, 4) == 13

    def test_no_digits(self) -> None:
        assert find_numeric_run("no digits here", 0, 2) is None

    def test_start_position_skips_earlier_runs(self) -> None:
        text = "1234 then 5678"
        assert find_numeric_run(text, 0, 4) == 0
        assert find_numeric_run(text, 4, 4) == 10

    def test_start_inside_a_run_measures_from_start(self) -> None:
        # "12345" seen from index 1 is the 4-digit run "2345".
        assert find_numeric_run("12345", 1, 4) == 1

    def test_iter_numeric_runs_reports_every_run(self) -> None:
        assert list(iter_numeric_runs("a1b22c333")) == [(1, 1), (3, 2), (6, 3)]


class TestSlicing:
    """Pure substring helpers."""

    def test_left_right_between(self) -> None:
        text = "Artist - Album"
        assert left(text, 6) == "Artist"
        assert right(text, 9) == "Album"
        assert between(text, 6, 9) == " - "

    def test_between_with_crossed_bounds_is_empty(self) -> None:
        assert between("abc", 2, 1) == ""
        assert between("abc", 1, 1) == ""

    def test_input_is_not_modified(self) -> None:
        text = "keep me"
        _ = left(text, 2), right(text, 2), between(text, 1, 3)
        assert text == "keep me"
