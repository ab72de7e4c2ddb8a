"""Assemble sidebar entries from chapters and their titles."""

from collections.abc import Mapping, Sequence

from chapter_sidebar.models.chapter import ChapterDirectory, TitleResult
from chapter_sidebar.models.sidebar import NavEntry


def chapter_link(chapter: ChapterDirectory) -> str:
    """Link to a chapter's page, built only from its directory name."""
    return f"/{chapter.name}/{chapter.name}"


def build_entry(chapter: ChapterDirectory, title: TitleResult) -> NavEntry:
    """Build one sidebar entry."""
    return NavEntry(text=title.title, link=chapter_link(chapter))


def build_sidebar(
    chapters: Sequence[ChapterDirectory],
    titles: Mapping[ChapterDirectory, TitleResult],
) -> list[NavEntry]:
    """Build sidebar entries in the same order as the chapters.

    Every chapter must have a title in the mapping; a missing one raises
    KeyError. Entries are neither deduplicated nor re-sorted.
    """
    return [build_entry(chapter, titles[chapter]) for chapter in chapters]
