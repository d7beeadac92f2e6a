"""Channel assembly, episode discovery and metadata for castfeed."""

from castfeed.feeds.channel import Channel
from castfeed.feeds.discovery import AUDIO_FILE_PATTERN, discover_source_files
from castfeed.feeds.models import (
    Episode,
    EpisodeCollection,
    EpisodeDefaults,
    EpisodeError,
    EpisodeTags,
    resolve_episode,
)
from castfeed.feeds.tags import EpisodeReader, TagReader

__all__ = [
    "Channel",
    "Episode",
    "EpisodeTags",
    "EpisodeDefaults",
    "EpisodeError",
    "EpisodeCollection",
    "resolve_episode",
    "discover_source_files",
    "AUDIO_FILE_PATTERN",
    "EpisodeReader",
    "TagReader",
]
