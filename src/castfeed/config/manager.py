"""Configuration manager for loading channel attributes."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from castfeed.config.defaults import DEFAULT_CHANNEL_FILE, get_default_channel_content
from castfeed.utils.errors import ConfigError, ConfigNotFoundError, InvalidConfigError
from castfeed.utils.paths import Sources, normalize_sources, source_directory

logger = logging.getLogger(__name__)

# Attributes holding template paths, resolved relative to the channel file
TEMPLATE_ATTRIBUTES = ("channel_template", "episode_template")


class ConfigManager:
    """Manages channel configuration files."""

    def __init__(self, channel_file: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            channel_file: Optional explicit channel file. Defaults to
                channel.yml next to the first source.
        """
        self.channel_file = channel_file

    def find_channel_file(self, sources: Sources) -> Path | None:
        """Locate the channel file for a set of sources.

        Args:
            sources: Episode sources given on the command line

        Returns:
            Explicit channel file, or channel.yml in the first source's
            directory, or None if there are no sources
        """
        if self.channel_file is not None:
            return self.channel_file

        paths = normalize_sources(sources)
        if not paths:
            return None
        return source_directory(paths[0]) / DEFAULT_CHANNEL_FILE

    def load_attributes(
        self,
        sources: Sources,
        overrides: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Load channel attributes, applying overrides on top.

        Args:
            sources: Episode sources, used to locate the default channel file
            overrides: Values that win over the file (None values are ignored)

        Returns:
            Attribute mapping ready for Channel

        Raises:
            ConfigNotFoundError: If an explicit channel file doesn't exist
            InvalidConfigError: If the channel file is invalid
        """
        channel_file = self.find_channel_file(sources)
        data: dict[str, Any] = {}

        if channel_file is not None and channel_file.is_file():
            logger.debug("Loading channel attributes from %s", channel_file)
            data = self.load_channel_file(channel_file)
        elif self.channel_file is not None:
            raise ConfigNotFoundError(f"Channel file not found: {self.channel_file}")
        else:
            logger.debug("No channel file found at %s", channel_file)

        for key, value in (overrides or {}).items():
            if value is not None:
                data[key] = value

        return data

    def load_channel_file(self, path: Path) -> dict[str, Any]:
        """Read and sanity-check a channel YAML file.

        Raises:
            InvalidConfigError: If the file is not a YAML mapping
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise InvalidConfigError(
                f"Invalid channel configuration in {path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise InvalidConfigError(
                f"Invalid channel configuration in {path}: expected a mapping"
            )

        for key in TEMPLATE_ATTRIBUTES:
            value = data.get(key)
            if isinstance(value, str) and value:
                candidate = path.parent / value
                if candidate.is_file():
                    data[key] = str(candidate)

        return data

    def write_default(self, path: Path, overwrite: bool = False) -> Path:
        """Write a starter channel file.

        Args:
            path: Target .yml file, or a directory to place channel.yml in
            overwrite: Replace an existing file

        Returns:
            Path of the written file

        Raises:
            ConfigError: If the file exists and overwrite is False
        """
        if path.is_dir() or path.suffix not in (".yml", ".yaml"):
            path = path / DEFAULT_CHANNEL_FILE

        if path.exists() and not overwrite:
            raise ConfigError(f"{path} already exists. Use --force to replace it.")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(get_default_channel_content(), encoding="utf-8")
        return path
