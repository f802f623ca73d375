"""
Tests for sprout.paths
======================
"""

import os

import pytest

from sprout.paths import resolve_destination_path


class TestResolveDestinationPath:
    """Tests for resolve_destination_path."""

    def test_root_maps_to_destination_root(self) -> None:
        assert resolve_destination_path("tpl", "out", "tpl") == "out"

    def test_root_with_trailing_separator(self) -> None:
        assert resolve_destination_path("tpl/", "out", "tpl/") == "out"

    def test_direct_child(self) -> None:
        assert resolve_destination_path("tpl", "out", "tpl/README.md") == os.path.join(
            "out", "README.md"
        )

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("tpl/widget", "out/widget"),
            ("tpl/widget/README.md", "out/widget/README.md"),
            ("tpl/a/b/c/d.txt", "out/a/b/c/d.txt"),
        ],
    )
    def test_nested(self, source: str, expected: str) -> None:
        assert resolve_destination_path("tpl", "out", source) == expected

    def test_absolute_paths(self) -> None:
        result = resolve_destination_path("/srv/tpl", "/home/me/out", "/srv/tpl/widget/x.py")
        assert result == "/home/me/out/widget/x.py"

    def test_relative_destination(self) -> None:
        assert resolve_destination_path("tpl", ".", "tpl/widget") == "./widget"

    def test_only_first_occurrence_removed(self) -> None:
        assert resolve_destination_path("tpl", "out", "tpl/tpl/x") == "out/tpl/x"

    def test_idempotent(self) -> None:
        first = resolve_destination_path("tpl", "out", "tpl/a/b")
        second = resolve_destination_path("tpl", "out", "tpl/a/b")
        assert first == second
