"""Podcast channel assembly.

A Channel validates feed-level attributes, discovers episode files and turns
them into an ordered list of feed-ready episodes. Rendering the RSS document
is delegated to the template renderer.
"""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from castfeed.config.schema import ChannelConfig
from castfeed.feeds.discovery import discover_source_files
from castfeed.feeds.models import (
    Episode,
    EpisodeCollection,
    EpisodeDefaults,
    EpisodeError,
    resolve_episode,
)
from castfeed.feeds.tags import EpisodeReader, TagReader
from castfeed.render.renderer import (
    DEFAULT_CHANNEL_TEMPLATE,
    DEFAULT_EPISODE_TEMPLATE,
    TemplateRenderer,
)
from castfeed.utils.errors import EpisodeParseError
from castfeed.utils.keywords import check_keyword_count
from castfeed.utils.paths import Sources, normalize_sources
from castfeed.utils.urls import is_absolute_url, resolve_url

module_logger = logging.getLogger(__name__)


class Channel:
    """A podcast feed in the RSS 2.0 format.

    The following attributes are mandatory:

    - ``title``: Title (name) of the podcast
    - ``url``: URL to the podcast
    - ``description``: Short description of the podcast

    Channel attributes are readable directly on the instance
    (``channel.title``, ``channel.enclosures_url``, ...).

    Example:
        >>> channel = Channel(
        ...     "episodes/",
        ...     {"title": "T", "url": "http://example.com/feed", "description": "D"},
        ... )
        >>> channel.enclosures_url
        'http://example.com/feed'
        >>> xml = channel.to_rss()
    """

    def __init__(
        self,
        sources: Sources,
        attributes: Mapping[str, Any] | ChannelConfig,
        *,
        logger: logging.Logger | None = None,
        tag_reader: EpisodeReader | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        """Create a channel.

        Args:
            sources: A directory or episode file, or a collection of them
            attributes: Channel attributes (mapping or ChannelConfig)
            logger: Logger for advisories (module logger if None)
            tag_reader: Episode metadata reader (mutagen-based if None)
            renderer: Template renderer (built-in templates if None)

        Raises:
            MissingAttributeError: If title, url or description is blank
            InvalidConfigError: If an attribute has an invalid value
            SourceNotFoundError: If a source path does not exist
            TemplateError: If the channel template cannot be loaded
        """
        self.logger = logger or module_logger
        self.tag_reader = tag_reader or TagReader()
        self.renderer = renderer or TemplateRenderer()

        if isinstance(attributes, ChannelConfig):
            attributes = attributes.model_dump()
        config = ChannelConfig.from_attributes(attributes)

        self.sources: list[Path] = normalize_sources(sources)
        self.source_files = discover_source_files(self.sources, log=self.logger)

        updates: dict[str, Any] = {}

        # A relative image URL is taken relative to the channel URL
        if config.image_url and not is_absolute_url(config.image_url):
            self.logger.info(
                "Channel image URL '%s' is relative, so we prepend it with the channel URL '%s'",
                config.image_url,
                config.url,
            )
            updates["image_url"] = resolve_url(config.url, config.image_url)

        if not config.enclosures_url:
            self.logger.info("No enclosure URL given, using the channel's URL")
            updates["enclosures_url"] = config.url
        elif not is_absolute_url(config.enclosures_url):
            self.logger.info(
                "Enclosure URL '%s' is relative, so we prepend it with the channel URL '%s'",
                config.enclosures_url,
                config.url,
            )
            updates["enclosures_url"] = resolve_url(config.url, config.enclosures_url)

        self.config = config.model_copy(update=updates)

        check_keyword_count(self.config.keywords, self.logger)

        self._channel_template = self.renderer.load(
            self.config.channel_template, DEFAULT_CHANNEL_TEMPLATE
        )

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        config = self.__dict__.get("config")
        if config is not None:
            if name in type(config).model_fields:
                return getattr(config, name)
            extra = config.model_extra or {}
            if name in extra:
                return extra[name]
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __repr__(self) -> str:
        return f"Channel(title={self.config.title!r}, sources={len(self.sources)})"

    @property
    def episode_defaults(self) -> EpisodeDefaults:
        """Channel values that episodes fall back to."""
        return EpisodeDefaults(
            author=self.config.author,
            image_url=self.config.image_url,
            enclosures_url=self.config.enclosures_url,
        )

    def collect(self) -> EpisodeCollection:
        """Assemble all episodes of this channel, newest first.

        Sources are discovered and read again on every call, so the result
        reflects the file system at call time. Files whose metadata cannot be
        read are skipped and reported in ``errors``.

        Returns:
            EpisodeCollection with ordered episodes and skipped files

        Raises:
            SourceNotFoundError: If a source path no longer exists
        """
        defaults = self.episode_defaults
        episodes: list[Episode] = []
        errors: list[EpisodeError] = []

        for src in discover_source_files(self.sources, log=self.logger):
            self.logger.debug("Adding new item from file %s", src)

            try:
                tags = self.tag_reader.read(src)
            except EpisodeParseError as e:
                self.logger.error("Skipping %s: %s", src, e)
                errors.append(EpisodeError(path=src, message=str(e)))
                continue

            episode = resolve_episode(defaults, tags, self.logger)
            check_keyword_count(episode.keywords, self.logger)
            episodes.append(episode)

        if not episodes:
            self.logger.warning("No episodes found.")

        # Stable sort, so equal dates keep discovery order
        episodes.sort(key=lambda episode: episode.pub_date, reverse=True)

        return EpisodeCollection(episodes=episodes, errors=errors)

    def items(self) -> list[Episode]:
        """Return all episodes of this channel, newest first.

        Not memoized: every call re-reads the sources.
        """
        return self.collect().episodes

    def to_rss(self, items: Sequence[Episode] | None = None) -> str:
        """Render this channel as an RSS document.

        Args:
            items: Episodes to render, e.g. from an earlier ``collect()``.
                Defaults to a fresh ``items()``.

        Returns:
            RSS 2.0 XML text

        Raises:
            TemplateError: If the episode template cannot be loaded or rendering fails
        """
        if items is None:
            items = self.items()
        episode_template = self.renderer.load(
            self.config.episode_template, DEFAULT_EPISODE_TEMPLATE
        )
        return self.renderer.render_channel(
            self._channel_template, episode_template, self, items
        )
