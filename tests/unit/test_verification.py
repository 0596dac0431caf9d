"""Tests for existence verification."""

import pytest

from mv_videos.exceptions import FilesVanishedError
from mv_videos.filesystem.verification import (
    require_existing,
    screen_candidates,
    verify_candidates,
)
from mv_videos.models import SizeThreshold


class TestVerifyCandidates:
    """Tests for verify_candidates function."""

    def test_all_existing(self, tmp_path):
        """Existing files all land in the first partition."""
        a = tmp_path / "a.mkv"
        b = tmp_path / "b.mkv"
        a.touch()
        b.touch()

        existing, missing = verify_candidates([a, b])

        assert existing == [a, b]
        assert missing == []

    def test_partitions_in_order(self, tmp_path):
        """Relative order is kept within each partition."""
        a = tmp_path / "a.mkv"
        c = tmp_path / "c.mkv"
        a.touch()
        c.touch()
        b = tmp_path / "b.mkv"
        d = tmp_path / "d.mkv"

        existing, missing = verify_candidates([d, a, b, c])

        assert existing == [a, c]
        assert missing == [d, b]

    def test_empty_input(self):
        """No candidate gives two empty lists."""
        assert verify_candidates([]) == ([], [])


class TestRequireExisting:
    """Tests for require_existing function."""

    def test_returns_existing(self, tmp_path):
        """Returns the candidates when all exist."""
        a = tmp_path / "a.mkv"
        a.touch()

        assert require_existing([a]) == [a]

    def test_missing_file_fails(self, tmp_path):
        """A vanished file stops the run."""
        a = tmp_path / "a.mkv"
        a.touch()
        gone = tmp_path / "gone.mkv"

        with pytest.raises(FilesVanishedError) as exc_info:
            require_existing([a, gone])

        assert exc_info.value.missing == [gone]
        assert str(gone) in str(exc_info.value)


class TestScreenCandidates:
    """Tests for screen_candidates function."""

    def test_keeps_large_regular_files(self, tmp_path):
        """Regular files over the threshold are kept in order."""
        a = tmp_path / "a.mkv"
        b = tmp_path / "b.mp4"
        a.write_bytes(b"x" * 2048)
        b.write_bytes(b"x" * 4096)

        assert screen_candidates([b, a], SizeThreshold(1, "k")) == [b, a]

    def test_drops_small_files(self, tmp_path):
        """Files not strictly larger than the threshold are dropped."""
        big = tmp_path / "big.mkv"
        exact = tmp_path / "exact.mp4"
        tiny = tmp_path / "tiny.mp4"
        big.write_bytes(b"x" * 1025)
        exact.write_bytes(b"x" * 1024)
        tiny.write_bytes(b"x" * 10)

        assert screen_candidates([big, exact, tiny], SizeThreshold(1, "k")) == [big]

    def test_drops_directories(self, tmp_path):
        """A directory matching a video name is never selected."""
        folder = tmp_path / "Bonus.mp4"
        folder.mkdir()
        (folder / "inner.txt").write_bytes(b"x" * 4096)

        assert screen_candidates([folder], SizeThreshold(0, "k")) == []

    def test_drops_symlinks(self, tmp_path):
        """A symlink to a large file is not a regular file."""
        target = tmp_path / "target.mkv"
        target.write_bytes(b"x" * 4096)
        link = tmp_path / "link.mkv"
        link.symlink_to(target)

        assert screen_candidates([link, target], SizeThreshold(1, "k")) == [target]

    def test_empty_input(self):
        """No candidate gives an empty selection."""
        assert screen_candidates([], SizeThreshold(1, "k")) == []
