"""Data models for podcast episodes.

This module defines Pydantic models for:
- Raw episode metadata as read from an audio file (EpisodeTags)
- Channel-level fallbacks handed to episodes (EpisodeDefaults)
- Resolved, feed-ready episodes (Episode)
- The outcome of assembling a channel's episodes (EpisodeCollection)
"""

import logging
import mimetypes
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from castfeed.config.schema import is_blank
from castfeed.utils.urls import enclosure_url

logger = logging.getLogger(__name__)


class EpisodeTags(BaseModel):
    """Metadata extracted from a single episode file.

    Example:
        >>> tags = EpisodeTags(
        ...     file_path=Path("/srv/podcast/ep1.mp3"),
        ...     file_name="ep1.mp3",
        ...     title="Episode 1",
        ...     pub_date=datetime(2023, 6, 1, tzinfo=timezone.utc),
        ... )
    """

    model_config = ConfigDict(frozen=True)

    file_path: Path = Field(..., description="Location of the audio file")
    file_name: str = Field(..., description="Base name used for the public URL")
    title: str = Field(..., description="Episode title")
    artist: str | None = None
    album: str | None = None
    subtitle: str | None = None
    summary: str | None = None
    duration_seconds: float | None = Field(None, description="Duration in seconds", ge=0)
    file_size: int = Field(0, description="File size in bytes", ge=0)
    pub_date: datetime = Field(..., description="When the episode was published")
    image_url: str | None = None
    keywords: list[str] = Field(default_factory=list)
    uuid: str = Field("", description="Stable identifier (content hash)")

    @field_validator("pub_date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Mixed naive/aware values cannot be compared when sorting
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def duration_formatted(self) -> str:
        """Get formatted duration string (HH:MM:SS or MM:SS)."""
        if self.duration_seconds is None:
            return "00:00"

        hours = int(self.duration_seconds // 3600)
        minutes = int((self.duration_seconds % 3600) // 60)
        seconds = int(self.duration_seconds % 60)

        if hours > 0:
            return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        else:
            return f"{minutes:02d}:{seconds:02d}"

    @property
    def mime_type(self) -> str:
        """Enclosure MIME type guessed from the file name."""
        return mimetypes.guess_type(self.file_name)[0] or "audio/mpeg"


class Episode(EpisodeTags):
    """An episode with channel defaults applied and its public URL set."""

    url: str = Field(..., description="Absolute enclosure URL")


class EpisodeDefaults(BaseModel):
    """Channel-level values that episodes fall back to."""

    model_config = ConfigDict(frozen=True)

    author: str | None = None
    image_url: str | None = None
    enclosures_url: str


def resolve_episode(
    defaults: EpisodeDefaults,
    tags: EpisodeTags,
    log: logging.Logger | None = None,
) -> Episode:
    """Apply channel defaults to raw episode metadata.

    Blank artist and image URL are taken from the channel, and the enclosure
    URL is built from the channel's enclosures base and the file name.

    Args:
        defaults: Channel-level fallbacks
        tags: Metadata read from the episode file
        log: Logger for fallback notices (module logger if None)

    Returns:
        New, immutable Episode
    """
    log = log or logger
    data = tags.model_dump()

    if is_blank(tags.artist):
        log.info("%s has no artist, using the channel's author", tags.file_path)
        data["artist"] = defaults.author

    if is_blank(tags.image_url):
        log.info(
            "%s has no image URL set, using the channel's image URL", tags.file_path
        )
        data["image_url"] = defaults.image_url

    data["url"] = enclosure_url(defaults.enclosures_url, tags.file_name)
    return Episode.model_validate(data)


class EpisodeError(BaseModel):
    """An episode file that was skipped because it could not be read."""

    path: Path
    message: str


class EpisodeCollection(BaseModel):
    """Episodes assembled for a channel, newest first, plus skipped files."""

    episodes: list[Episode] = Field(default_factory=list)
    errors: list[EpisodeError] = Field(default_factory=list)

    @property
    def skipped(self) -> int:
        """Number of source files that were skipped."""
        return len(self.errors)
