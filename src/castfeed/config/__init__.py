"""Channel configuration for castfeed."""

from castfeed.config.manager import ConfigManager
from castfeed.config.schema import ChannelConfig, OwnerConfig

__all__ = ["ConfigManager", "ChannelConfig", "OwnerConfig"]
