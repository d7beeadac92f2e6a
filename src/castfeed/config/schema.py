"""Configuration schema models using Pydantic."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from castfeed.utils.errors import InvalidConfigError, MissingAttributeError
from castfeed.utils.urls import is_valid_base_url

# Checked in this order; the first blank one is reported
REQUIRED_CHANNEL_ATTRIBUTES = ("title", "url", "description")


def is_blank(value: Any) -> bool:
    """Check whether a configuration value counts as absent.

    None, whitespace-only strings and empty collections are blank.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def yes_no_or_input(flag: Any) -> str | None:
    """Normalize a tri-state explicit flag.

    YAML turns ``yes``/``no``/``true``/``false`` into booleans, so these map
    back to the iTunes "Yes"/"No" values. Blank text is unset and any other
    value is kept as text.
    """
    if is_blank(flag):
        return None
    if flag is True:
        return "Yes"
    if flag is False:
        return "No"
    return str(flag)


class OwnerConfig(BaseModel):
    """Podcast owner contact (itunes:owner)."""

    name: str | None = None
    email: str | None = None


class ChannelConfig(BaseModel):
    """Feed-level attributes of a podcast channel.

    Unknown keys are kept so that custom templates can use them.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    # Mandatory
    title: str
    url: str
    description: str

    # Descriptive
    subtitle: str | None = None
    author: str | None = None
    owner: OwnerConfig | None = None
    language: str = "en-us"
    copyright: str | None = None
    categories: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    explicit: str | None = None

    # Locations
    image_url: str | None = None
    enclosures_url: str | None = None

    # Template overrides (path or built-in template name)
    episode_template: str | None = None
    channel_template: str | None = None

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not is_valid_base_url(value):
            raise ValueError(f"'{value}' is not an absolute URL")
        return value

    @field_validator("explicit", mode="before")
    @classmethod
    def _normalize_explicit(cls, value: Any) -> str | None:
        return yes_no_or_input(value)

    @field_validator("keywords", "categories", mode="before")
    @classmethod
    def _split_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple)):
            return [str(item).strip() for item in value if str(item).strip()]
        return value

    @field_validator(
        "subtitle",
        "author",
        "copyright",
        "image_url",
        "enclosures_url",
        "episode_template",
        "channel_template",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        return None if is_blank(value) else value

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any]) -> "ChannelConfig":
        """Validate a raw attribute mapping.

        Args:
            attributes: Channel attributes, e.g. loaded from channel.yml

        Returns:
            Validated ChannelConfig

        Raises:
            MissingAttributeError: If title, url or description is blank
            InvalidConfigError: If any attribute has an invalid value
        """
        for attribute in REQUIRED_CHANNEL_ATTRIBUTES:
            if is_blank(attributes.get(attribute)):
                raise MissingAttributeError(attribute)

        try:
            return cls.model_validate(dict(attributes))
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid channel configuration: {e}") from e
