"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path
from typing import List

from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by a test so they do not outlive its captured streams."""
    yield
    logger.remove()


class FakeDiscovery:
    """Discovery double returning canned output and recording commands."""

    def __init__(self, output: str = ""):
        self.output = output
        self.commands: List[str] = []

    def run(self, command: str) -> str:
        self.commands.append(command)
        return self.output


@pytest.fixture
def fake_discovery():
    """Factory for FakeDiscovery instances."""
    def _make(paths=()):
        return FakeDiscovery("".join(f"{p}\n" for p in paths))
    return _make


@pytest.fixture
def video_tree(tmp_path):
    """Create a nested source tree and an empty destination directory."""
    source = tmp_path / "source"
    (source / "Films" / "Action").mkdir(parents=True)
    (source / "Séries" / "Show" / "Saison 01").mkdir(parents=True)

    movie = source / "Films" / "Action" / "The.Matrix.1999.1080p.mkv"
    movie.write_bytes(b"fake video content " * 100)
    episode = source / "Séries" / "Show" / "Saison 01" / "Show.S01E01.mp4"
    episode.write_bytes(b"fake episode content " * 100)

    destination = tmp_path / "destination"
    destination.mkdir()

    return {
        "source": source,
        "destination": destination,
        "files": [movie, episode],
    }


@pytest.fixture
def snapshot():
    """Return a function listing every entry below a root, sorted."""
    def _snapshot(root: Path) -> List[str]:
        return sorted(str(p.relative_to(root)) for p in root.rglob("*"))
    return _snapshot
