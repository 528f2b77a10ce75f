"""Tests for segment splitting and normalization."""

from __future__ import annotations

import pytest

from resource_path._normalize import normalize, split_segments


class TestSplitSegments:
    """Both separators split; empty segments survive."""

    def test_forward_and_back_slashes(self) -> None:
        assert split_segments("a/b\\c") == ["a", "b", "c"]

    def test_leading_and_trailing_separators(self) -> None:
        assert split_segments("/a/") == ["", "a", ""]

    def test_empty_string(self) -> None:
        assert split_segments("") == [""]


class TestNormalize:
    """Dot and double-dot collapsing."""

    def test_empty_and_dot_segments_skipped(self) -> None:
        assert normalize(["", "a", ".", "", "b", "."]) == ["a", "b"]

    def test_double_dot_cancels_previous(self) -> None:
        assert normalize(["Program Files", "Game", "..", "OtherGame"]) == ["Program Files", "OtherGame"]

    def test_double_dot_cancels_to_empty(self) -> None:
        assert normalize(["a", ".."]) == []

    def test_leading_double_dot_kept(self) -> None:
        assert normalize(["..", "Game"]) == ["..", "Game"]

    def test_double_dot_does_not_cancel_double_dot(self) -> None:
        assert normalize(["..", "..", "a"]) == ["..", "..", "a"]

    def test_excess_double_dots_kept(self) -> None:
        assert normalize(["a", "..", "..", "b"]) == ["..", "b"]

    def test_accepts_any_iterable(self) -> None:
        assert normalize(iter(("a", "b"))) == ["a", "b"]

    def test_returns_new_list(self) -> None:
        segments = ["a", "..", "b"]
        normalize(segments)
        assert segments == ["a", "..", "b"]

    @pytest.mark.parametrize(
        "segments",
        [
            [],
            ["a", "b"],
            ["..", "..", "x", ".", "y", ".."],
            ["a", "..", "..", "b", "", "c"],
            [".", ".", ".."],
            ["x", "y", "..", "..", "..", "z"],
        ],
    )
    def test_idempotent(self, segments: list[str]) -> None:
        once = normalize(segments)
        assert normalize(once) == once
