"""castfeed - build podcast RSS feeds from local audio files."""

from castfeed.feeds import Channel, Episode, EpisodeCollection
from castfeed.utils.errors import CastfeedError, MissingAttributeError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Channel",
    "Episode",
    "EpisodeCollection",
    "CastfeedError",
    "MissingAttributeError",
]
