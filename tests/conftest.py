"""Shared fixtures for castfeed tests."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

from castfeed.feeds.models import EpisodeTags
from castfeed.utils.errors import EpisodeParseError

DEFAULT_PUB_DATE = datetime(2023, 1, 1, tzinfo=timezone.utc)


class FakeTagReader:
    """Tag reader returning canned metadata keyed by file name."""

    def __init__(
        self,
        tags_by_name: dict[str, dict[str, Any]] | None = None,
        failures: set[str] | None = None,
    ) -> None:
        self.tags_by_name = tags_by_name or {}
        self.failures = failures or set()
        self.calls: list[Path] = []

    def read(self, path: Path) -> EpisodeTags:
        path = Path(path)
        self.calls.append(path)

        if path.name in self.failures:
            raise EpisodeParseError(f"Could not read metadata from {path.name}")

        data: dict[str, Any] = {
            "file_path": path,
            "file_name": path.name,
            "title": path.stem,
            "pub_date": DEFAULT_PUB_DATE,
        }
        data.update(self.tags_by_name.get(path.name, {}))
        return EpisodeTags(**data)


@pytest.fixture(autouse=True)
def reset_castfeed_logger():
    """Drop handlers installed by setup_logging between tests."""
    yield
    package_logger = logging.getLogger("castfeed")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def channel_attributes() -> dict[str, Any]:
    """Minimal valid channel attributes."""
    return {
        "title": "Test Podcast",
        "url": "http://example.com/podcast/",
        "description": "A podcast for tests",
    }


@pytest.fixture
def episode_dir(tmp_path: Path) -> Path:
    """Directory with three episode files and one unrelated file."""
    directory = tmp_path / "episodes"
    directory.mkdir()
    for name in ("a.mp3", "b.mp3", "c.mp3"):
        (directory / name).write_bytes(b"fake audio " + name.encode())
    (directory / "notes.txt").write_text("show notes")
    return directory


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Directory without episodes."""
    directory = tmp_path / "empty"
    directory.mkdir()
    return directory


@pytest.fixture
def fake_reader_cls() -> type[FakeTagReader]:
    """The FakeTagReader class, for tests that need custom canned tags."""
    return FakeTagReader


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double for asserting advisories."""
    return Mock(spec=logging.Logger)


def logged_messages(logger: Mock, level: str) -> list[str]:
    """Format all messages sent to a mock logger at one level."""
    messages = []
    for call in getattr(logger, level).call_args_list:
        message, *args = call.args
        messages.append(message % tuple(args) if args else message)
    return messages


@pytest.fixture
def messages_for():
    """Return a helper that lists formatted messages of a mock logger."""
    return logged_messages
