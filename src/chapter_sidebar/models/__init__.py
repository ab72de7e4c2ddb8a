"""Data models."""

from chapter_sidebar.models.chapter import (
    CHAPTER_PREFIX,
    DEFAULT_EXTENSION,
    FALLBACK_LABEL,
    ChapterDirectory,
    TitleResult,
    TitleSource,
)
from chapter_sidebar.models.sidebar import NavEntry, SidebarItem
from chapter_sidebar.models.site import (
    NavLink,
    SidebarSettings,
    SiteConfig,
    SocialLink,
)

__all__ = [
    # Chapter models
    "CHAPTER_PREFIX",
    "DEFAULT_EXTENSION",
    "FALLBACK_LABEL",
    "ChapterDirectory",
    "TitleResult",
    "TitleSource",
    # Sidebar models
    "NavEntry",
    "SidebarItem",
    # Site models
    "NavLink",
    "SocialLink",
    "SiteConfig",
    "SidebarSettings",
]
