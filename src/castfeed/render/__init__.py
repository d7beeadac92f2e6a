"""Feed document rendering for castfeed."""

from castfeed.render.renderer import (
    DEFAULT_CHANNEL_TEMPLATE,
    DEFAULT_EPISODE_TEMPLATE,
    TemplateRenderer,
    format_rfc2822,
)

__all__ = [
    "TemplateRenderer",
    "DEFAULT_CHANNEL_TEMPLATE",
    "DEFAULT_EPISODE_TEMPLATE",
    "format_rfc2822",
]
