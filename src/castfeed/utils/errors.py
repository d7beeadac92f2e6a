"""Custom exceptions for castfeed."""


class CastfeedError(Exception):
    """Base exception for all castfeed errors."""

    pass


class ConfigError(CastfeedError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    pass


class MissingAttributeError(ConfigError):
    """A mandatory channel attribute is absent or blank."""

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"Missing mandatory channel attribute '{attribute}'")


class SourceError(CastfeedError):
    """Episode source errors."""

    pass


class SourceNotFoundError(SourceError):
    """A configured source file or directory does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Source not found: {path}")


class EpisodeParseError(CastfeedError):
    """Audio metadata could not be read from an episode file."""

    pass


class TemplateError(CastfeedError):
    """Feed template could not be loaded or rendered."""

    pass
