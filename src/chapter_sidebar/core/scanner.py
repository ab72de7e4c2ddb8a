"""Discover chapter directories under a content root."""

import logging
from pathlib import Path

from chapter_sidebar.models.chapter import CHAPTER_PREFIX, ChapterDirectory

log = logging.getLogger(__name__)


class FilesystemError(OSError):
    """Content root cannot be listed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read content root {path}: {reason}")
        self.path = path
        self.reason = reason


def is_chapter_name(name: str) -> bool:
    """Check whether a directory name follows the chapter convention."""
    return name.startswith(CHAPTER_PREFIX)


def scan_chapters(content_root: Path) -> list[ChapterDirectory]:
    """List chapter directories directly under the content root.

    Entries that are not directories or do not carry the chapter prefix are
    skipped. Results are ordered by plain string comparison of the names, so
    "chapter-10" sorts before "chapter-2".

    Raises:
        FilesystemError: If the content root is missing, not a directory or
            not readable
    """
    try:
        entries = list(content_root.iterdir())
    except FileNotFoundError:
        raise FilesystemError(content_root, "no such directory") from None
    except NotADirectoryError:
        raise FilesystemError(content_root, "not a directory") from None
    except OSError as e:
        raise FilesystemError(content_root, e.strerror or str(e)) from e

    chapters: list[ChapterDirectory] = []
    for entry in entries:
        if not is_chapter_name(entry.name):
            log.debug("Skipping %s: no %r prefix", entry.name, CHAPTER_PREFIX)
            continue
        if not entry.is_dir():
            log.debug("Skipping %s: not a directory", entry.name)
            continue
        chapters.append(ChapterDirectory.from_name(entry.name))

    chapters.sort(key=lambda chapter: chapter.name)
    log.debug("Found %d chapter(s) in %s", len(chapters), content_root)
    return chapters
