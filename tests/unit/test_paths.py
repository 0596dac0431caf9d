"""Tests for destination planning."""

import pytest
from pathlib import Path

from mv_videos.exceptions import (
    DestinationCollisionError,
    DestinationMissingError,
    InvalidFileNameError,
)
from mv_videos.filesystem.paths import (
    check_destination,
    destination_for,
    ensure_no_collisions,
    find_collisions,
    plan_moves,
)
from mv_videos.models import MovePlanEntry


class TestCheckDestination:
    """Tests for check_destination function."""

    def test_existing_directory(self, tmp_path):
        """An existing directory passes."""
        check_destination(tmp_path)

    def test_missing_directory(self, tmp_path):
        """A missing directory fails."""
        with pytest.raises(DestinationMissingError) as exc_info:
            check_destination(tmp_path / "nope")
        assert exc_info.value.destination == tmp_path / "nope"

    def test_file_is_not_a_directory(self, tmp_path):
        """A regular file is not a destination."""
        target = tmp_path / "file.txt"
        target.touch()

        with pytest.raises(DestinationMissingError):
            check_destination(target)


class TestDestinationFor:
    """Tests for destination_for function."""

    def test_reference_example(self):
        """Keeps only the file name."""
        assert destination_for(Path("/temp/a_file"), Path("/tmp")) == Path("/tmp/a_file")

    @pytest.mark.parametrize("source", [
        "/a.mkv",
        "/x/a.mkv",
        "/x/y/z/w/a.mkv",
        "relative/dir/a.mkv",
    ])
    def test_independent_of_depth(self, source):
        """Parent directories never reach the destination."""
        assert destination_for(Path(source), Path("/dest")) == Path("/dest/a.mkv")

    @pytest.mark.parametrize("source", ["/", ".", "a/.."])
    def test_no_file_name_fails(self, source):
        """Paths without a file name are rejected."""
        with pytest.raises(InvalidFileNameError):
            destination_for(Path(source), Path("/dest"))


class TestPlanMoves:
    """Tests for plan_moves function."""

    def test_one_entry_per_file(self):
        """Plans every file in order."""
        plan = plan_moves([Path("/s/b/2.mkv"), Path("/s/a/1.avi")], Path("/d"))

        assert plan == [
            MovePlanEntry(Path("/s/b/2.mkv"), Path("/d/2.mkv")),
            MovePlanEntry(Path("/s/a/1.avi"), Path("/d/1.avi")),
        ]

    def test_empty(self):
        """No file, no plan."""
        assert plan_moves([], Path("/d")) == []

    def test_invalid_name_fails(self):
        """One bad path fails the whole plan."""
        with pytest.raises(InvalidFileNameError):
            plan_moves([Path("/s/a.mkv"), Path("/")], Path("/d"))


class TestCollisions:
    """Tests for collision detection."""

    def test_no_collision(self):
        """Distinct names do not collide."""
        plan = plan_moves([Path("/a/1.mkv"), Path("/b/2.mkv")], Path("/d"))

        assert find_collisions(plan) == {}
        ensure_no_collisions(plan)

    def test_same_name_in_different_dirs(self):
        """Same file name from two directories collides."""
        plan = plan_moves([Path("/a/x.mkv"), Path("/b/x.mkv")], Path("/d"))

        assert find_collisions(plan) == {
            Path("/d/x.mkv"): [Path("/a/x.mkv"), Path("/b/x.mkv")],
        }

    def test_ensure_raises(self):
        """Collisions raise with every group."""
        plan = plan_moves(
            [Path("/a/x.mkv"), Path("/b/x.mkv"), Path("/c/y.mkv"), Path("/e/y.mkv")],
            Path("/d"),
        )

        with pytest.raises(DestinationCollisionError) as exc_info:
            ensure_no_collisions(plan)

        assert set(exc_info.value.collisions) == {Path("/d/x.mkv"), Path("/d/y.mkv")}

    def test_repeated_source_is_not_a_collision(self):
        """The same source listed twice is not two files."""
        plan = plan_moves([Path("/a/x.mkv"), Path("/a/x.mkv")], Path("/d"))

        assert find_collisions(plan) == {}
