"""Feed rendering with Jinja2 templates.

Built-in templates live in the ``castfeed/templates`` package directory.
Overrides can be given as a path to a template file or as the name of a
built-in template.
"""

import logging
from collections.abc import Sequence
from datetime import datetime
from email.utils import format_datetime
from pathlib import Path
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, Template
from jinja2 import TemplateError as JinjaTemplateError
from markupsafe import Markup

from castfeed.utils.errors import TemplateError

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL_TEMPLATE = "channel.rss.j2"
DEFAULT_EPISODE_TEMPLATE = "episode.rss.j2"


def format_rfc2822(value: datetime | None) -> str:
    """Format a datetime as required by RSS pubDate elements."""
    if value is None:
        return ""
    return format_datetime(value)


class TemplateRenderer:
    """Load and render feed templates.

    Example:
        >>> renderer = TemplateRenderer()
        >>> template = renderer.load(None, DEFAULT_CHANNEL_TEMPLATE)
        >>> xml = renderer.render(template, channel=channel, items=[])
    """

    def __init__(self, template_dirs: Sequence[Path] | None = None) -> None:
        """Initialize the renderer.

        Args:
            template_dirs: Extra directories searched before the built-in templates
        """
        loaders = []
        if template_dirs:
            loaders.append(FileSystemLoader([str(d) for d in template_dirs]))
        loaders.append(PackageLoader("castfeed", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["rfc2822"] = format_rfc2822

    def load(self, override: str | None, default: str) -> Template:
        """Resolve a template from an override or a built-in default.

        Args:
            override: Path to a template file, or a template name
            default: Built-in template name used when no override is given

        Returns:
            Compiled template

        Raises:
            TemplateError: If the template cannot be found or compiled
        """
        name = override or default

        try:
            if override:
                path = Path(override).expanduser()
                if path.is_file():
                    logger.debug("Using template file %s", path)
                    return self.env.from_string(path.read_text(encoding="utf-8"))
            return self.env.get_template(name)
        except JinjaTemplateError as e:
            raise TemplateError(f"Could not load template '{name}': {e}") from e
        except OSError as e:
            raise TemplateError(f"Could not read template '{name}': {e}") from e

    def render(self, template: Template, **context: Any) -> str:
        """Render a template with the given context.

        Raises:
            TemplateError: If rendering fails
        """
        try:
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Could not render template: {e}") from e

    def render_channel(
        self,
        channel_template: Template,
        episode_template: Template,
        channel: Any,
        items: Sequence[Any],
    ) -> str:
        """Render a full feed document.

        The channel template receives ``channel``, ``items`` and a
        ``render_episode(item)`` helper that renders one item with the
        episode template.
        """

        def render_episode(item: Any) -> Markup:
            return Markup(self.render(episode_template, channel=channel, item=item))

        return self.render(
            channel_template,
            channel=channel,
            items=items,
            render_episode=render_episode,
        )
