"""Data models for the surrounding site configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chapter_sidebar.models.chapter import DEFAULT_EXTENSION, FALLBACK_LABEL
from chapter_sidebar.models.sidebar import NavEntry


class NavLink(BaseModel):
    """Top navigation link."""

    model_config = ConfigDict(extra="forbid")

    text: str
    link: str


class SocialLink(BaseModel):
    """Icon link shown in the site header."""

    model_config = ConfigDict(extra="forbid")

    icon: str
    link: str


class SiteConfig(BaseModel):
    """Static site configuration the generated sidebar is placed into."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str
    description: str = ""
    nav: list[NavLink] = Field(default_factory=list)
    social_links: list[SocialLink] = Field(default_factory=list, alias="socialLinks")
    sidebar: list[NavEntry] = Field(default_factory=list)

    def with_sidebar(self, entries: list[NavEntry]) -> "SiteConfig":
        """Return a copy with the sidebar replaced."""
        return self.model_copy(update={"sidebar": list(entries)})


class SidebarSettings(BaseModel):
    """Options for one sidebar generation run."""

    content_root: Path
    content_extension: str = DEFAULT_EXTENSION
    fallback_label: str = FALLBACK_LABEL

    @field_validator("content_extension")
    @classmethod
    def _strip_leading_dot(cls, value: str) -> str:
        value = value.strip().lstrip(".")
        if not value:
            raise ValueError("content extension must not be empty")
        return value
