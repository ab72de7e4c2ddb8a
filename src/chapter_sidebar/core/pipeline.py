"""Scan, extract and build: the full sidebar generation run."""

import logging
from pathlib import Path

from chapter_sidebar.core.scanner import scan_chapters
from chapter_sidebar.core.sidebar_builder import build_sidebar
from chapter_sidebar.core.title_extractor import extract_title
from chapter_sidebar.models.chapter import (
    DEFAULT_EXTENSION,
    FALLBACK_LABEL,
    ChapterDirectory,
    TitleResult,
)
from chapter_sidebar.models.sidebar import NavEntry, SidebarItem
from chapter_sidebar.models.site import SidebarSettings

log = logging.getLogger(__name__)


def extract_titles(
    chapters: list[ChapterDirectory],
    content_root: Path,
    extension: str = DEFAULT_EXTENSION,
    fallback_label: str = FALLBACK_LABEL,
) -> dict[ChapterDirectory, TitleResult]:
    """Extract a title for every chapter, keyed by chapter."""
    return {
        chapter: extract_title(chapter, content_root, extension, fallback_label)
        for chapter in chapters
    }


def collect_sidebar_items(
    content_root: Path,
    extension: str = DEFAULT_EXTENSION,
    fallback_label: str = FALLBACK_LABEL,
) -> list[SidebarItem]:
    """Run the pipeline, keeping the chapter and title behind each entry.

    Raises:
        FilesystemError: If the content root cannot be listed
    """
    chapters = scan_chapters(content_root)
    titles = extract_titles(chapters, content_root, extension, fallback_label)
    entries = build_sidebar(chapters, titles)

    fallbacks = sum(1 for title in titles.values() if title.is_fallback)
    log.info(
        "Built sidebar with %d entr%s (%d fallback title(s))",
        len(entries),
        "y" if len(entries) == 1 else "ies",
        fallbacks,
    )
    return [
        SidebarItem(chapter=chapter, title=titles[chapter], entry=entry)
        for chapter, entry in zip(chapters, entries)
    ]


def generate_sidebar(
    content_root: Path,
    extension: str = DEFAULT_EXTENSION,
    fallback_label: str = FALLBACK_LABEL,
) -> list[NavEntry]:
    """Generate the sidebar for a content root.

    Raises:
        FilesystemError: If the content root cannot be listed
    """
    items = collect_sidebar_items(content_root, extension, fallback_label)
    return [item.entry for item in items]


def collect_from_settings(settings: SidebarSettings) -> list[SidebarItem]:
    """Collect the sidebar items described by a settings object."""
    return collect_sidebar_items(
        settings.content_root,
        extension=settings.content_extension,
        fallback_label=settings.fallback_label,
    )
