"""
Site configuration entities.

SiteConfig is the validated, immutable record consumed by site rendering.
SocialLinks is its optional sub-record of outbound profile URLs.

Field names on the wire are camelCase (primaryColor, postsPerPage, ...) and are
kept as pydantic aliases so consuming renderers see the exact same keys.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_validator,
)
from pydantic_core import PydanticCustomError

__all__ = [
    "HEX_COLOR_PATTERN",
    "SiteConfig",
    "SocialLinks",
    "is_absolute_url",
]

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


def is_absolute_url(value: str) -> bool:
    """Check for an absolute http(s) URL with a host."""
    if any(ch.isspace() for ch in value):
        return False
    try:
        result = urlparse(value)
        # port raises ValueError when it is not a number in range
        result.port
    except ValueError:
        return False
    return result.scheme in ("http", "https") and bool(result.hostname)


class SocialLinks(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    website: StrictStr | None = None
    github: StrictStr | None = None
    twitter: StrictStr | None = None

    @field_validator("website", "github", "twitter")
    @classmethod
    def _check_url(cls, value: str | None) -> str | None:
        if value is not None and not is_absolute_url(value):
            raise PydanticCustomError("invalid_url", "must be an absolute http or https URL")
        return value


class SiteConfig(BaseModel):
    """
    Validated site configuration.

    Invariants:
    - title, author, primaryColor and postsPerPage are always present
    - postsPerPage > 0
    - primaryColor matches #RRGGBB
    - immutable after construction
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    title: StrictStr
    author: StrictStr
    description: StrictStr = ""
    primary_color: StrictStr = Field(alias="primaryColor", pattern=HEX_COLOR_PATTERN)
    show_header_image: StrictBool = Field(default=False, alias="showHeaderImage")
    show_share_buttons: StrictBool = Field(default=False, alias="showShareButtons")
    posts_per_page: StrictInt = Field(alias="postsPerPage", gt=0)
    social: SocialLinks = Field(default_factory=SocialLinks)

    @field_validator("title", "author")
    @classmethod
    def _check_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("empty", "must not be empty")
        return value

    def to_raw(self) -> dict[str, Any]:
        """Dump back to the external camelCase record, defaults applied."""
        raw = self.model_dump(by_alias=True, exclude={"social"})
        raw["social"] = self.social.model_dump(exclude_none=True)
        return raw
