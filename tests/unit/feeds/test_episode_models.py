"""Tests for episode models and default resolution."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from pydantic import ValidationError

from castfeed.feeds.models import (
    Episode,
    EpisodeCollection,
    EpisodeDefaults,
    EpisodeError,
    EpisodeTags,
    resolve_episode,
)


@pytest.fixture
def tags() -> EpisodeTags:
    """Raw tags without artist or image."""
    return EpisodeTags(
        file_path=Path("/srv/podcast/ep 1.mp3"),
        file_name="ep 1.mp3",
        title="Episode 1",
        pub_date=datetime(2023, 6, 1, tzinfo=timezone.utc),
        duration_seconds=125,
        file_size=1024,
    )


@pytest.fixture
def defaults() -> EpisodeDefaults:
    """Channel-level fallbacks."""
    return EpisodeDefaults(
        author="Jane",
        image_url="http://example.com/art.png",
        enclosures_url="http://cdn.example.com/eps/",
    )


class TestEpisodeTags:
    """Tests for EpisodeTags."""

    def test_naive_pub_date_is_utc(self) -> None:
        """Test that naive publish dates are taken as UTC."""
        tags = EpisodeTags(
            file_path=Path("a.mp3"),
            file_name="a.mp3",
            title="A",
            pub_date=datetime(2023, 1, 1, 12, 0),
        )

        assert tags.pub_date.tzinfo == timezone.utc
        assert tags.pub_date.hour == 12

    def test_aware_pub_date_is_kept(self) -> None:
        """Test that aware publish dates keep their offset."""
        offset = timezone(timedelta(hours=2))
        tags = EpisodeTags(
            file_path=Path("a.mp3"),
            file_name="a.mp3",
            title="A",
            pub_date=datetime(2023, 1, 1, 12, 0, tzinfo=offset),
        )

        assert tags.pub_date.utcoffset() == timedelta(hours=2)

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(None, "00:00"), (59, "00:59"), (125, "02:05"), (3725.4, "01:02:05")],
    )
    def test_duration_formatted(self, seconds, expected: str) -> None:
        """Test duration formatting."""
        tags = EpisodeTags(
            file_path=Path("a.mp3"),
            file_name="a.mp3",
            title="A",
            pub_date=datetime(2023, 1, 1, tzinfo=timezone.utc),
            duration_seconds=seconds,
        )

        assert tags.duration_formatted == expected

    def test_mime_type(self, tags: EpisodeTags) -> None:
        """Test MIME type guessing from the file name."""
        assert tags.mime_type == "audio/mpeg"

    def test_negative_size_rejected(self) -> None:
        """Test that file sizes cannot be negative."""
        with pytest.raises(ValidationError):
            EpisodeTags(
                file_path=Path("a.mp3"),
                file_name="a.mp3",
                title="A",
                pub_date=datetime(2023, 1, 1, tzinfo=timezone.utc),
                file_size=-1,
            )

    def test_tags_are_immutable(self, tags: EpisodeTags) -> None:
        """Test that extracted tags cannot be modified."""
        with pytest.raises(ValidationError):
            tags.artist = "Someone"  # type: ignore[misc]


class TestResolveEpisode:
    """Tests for resolve_episode."""

    def test_defaults_fill_blank_fields(
        self, tags: EpisodeTags, defaults: EpisodeDefaults
    ) -> None:
        """Test that blank artist and image come from the channel."""
        episode = resolve_episode(defaults, tags)

        assert isinstance(episode, Episode)
        assert episode.artist == "Jane"
        assert episode.image_url == "http://example.com/art.png"

    def test_own_values_are_kept(self, tags: EpisodeTags, defaults: EpisodeDefaults) -> None:
        """Test that non-blank episode values win over channel defaults."""
        tags = tags.model_copy(
            update={"artist": "Guest", "image_url": "http://example.com/ep.png"}
        )

        episode = resolve_episode(defaults, tags)

        assert episode.artist == "Guest"
        assert episode.image_url == "http://example.com/ep.png"

    def test_url_is_encoded_file_name(
        self, tags: EpisodeTags, defaults: EpisodeDefaults
    ) -> None:
        """Test the enclosure URL composition."""
        episode = resolve_episode(defaults, tags)

        assert episode.url == "http://cdn.example.com/eps/ep%201.mp3"

    def test_input_is_not_modified(self, tags: EpisodeTags, defaults: EpisodeDefaults) -> None:
        """Test that resolution returns a new object."""
        resolve_episode(defaults, tags)

        assert tags.artist is None
        assert tags.image_url is None

    def test_other_fields_carried_over(
        self, tags: EpisodeTags, defaults: EpisodeDefaults
    ) -> None:
        """Test that extracted metadata is preserved."""
        episode = resolve_episode(defaults, tags)

        assert episode.title == "Episode 1"
        assert episode.file_size == 1024
        assert episode.pub_date == tags.pub_date

    def test_fallback_is_logged(
        self, tags: EpisodeTags, defaults: EpisodeDefaults, mock_logger, messages_for
    ) -> None:
        """Test that default inheritance is logged."""
        resolve_episode(defaults, tags, mock_logger)

        messages = messages_for(mock_logger, "info")
        assert any("has no artist" in m for m in messages)
        assert any("has no image URL" in m for m in messages)


class TestEpisodeCollection:
    """Tests for EpisodeCollection."""

    def test_empty_collection(self) -> None:
        """Test defaults of an empty collection."""
        collection = EpisodeCollection()

        assert collection.episodes == []
        assert collection.skipped == 0

    def test_skipped_counts_errors(self) -> None:
        """Test the skipped counter."""
        collection = EpisodeCollection(
            errors=[EpisodeError(path=Path("a.mp3"), message="broken")]
        )

        assert collection.skipped == 1
