"""Utility functions and helpers for castfeed."""

from castfeed.utils.errors import (
    CastfeedError,
    ConfigError,
    ConfigNotFoundError,
    EpisodeParseError,
    InvalidConfigError,
    MissingAttributeError,
    SourceError,
    SourceNotFoundError,
    TemplateError,
)
from castfeed.utils.keywords import MAX_KEYWORD_COUNT, check_keyword_count
from castfeed.utils.paths import normalize_sources, source_directory
from castfeed.utils.urls import enclosure_url, is_absolute_url, is_valid_base_url, resolve_url

__all__ = [
    # Errors
    "CastfeedError",
    "ConfigError",
    "InvalidConfigError",
    "ConfigNotFoundError",
    "MissingAttributeError",
    "SourceError",
    "SourceNotFoundError",
    "EpisodeParseError",
    "TemplateError",
    # Keywords
    "MAX_KEYWORD_COUNT",
    "check_keyword_count",
    # Paths
    "normalize_sources",
    "source_directory",
    # URLs
    "is_absolute_url",
    "is_valid_base_url",
    "resolve_url",
    "enclosure_url",
]
