"""Chapter title extraction from markdown content files."""

import logging
import re
from pathlib import Path

from chapter_sidebar.models.chapter import (
    DEFAULT_EXTENSION,
    FALLBACK_LABEL,
    ChapterDirectory,
    TitleResult,
    TitleSource,
)

log = logging.getLogger(__name__)

# A single "#" at the start of a line, then blanks, then the title text.
# "##" never matches because the second character is not a blank.
TOP_LEVEL_HEADING = re.compile(r"^#[ \t]+(\S.*)$", re.MULTILINE)


def parse_first_heading(text: str) -> str | None:
    """Return the first top-level heading in the text, trimmed.

    The heading may appear on any line, not only the first one.
    Returns None when the text has no top-level heading.
    """
    match = TOP_LEVEL_HEADING.search(text)
    if match is None:
        return None
    return match.group(1).strip()


def fallback_title(chapter: ChapterDirectory, label: str = FALLBACK_LABEL) -> str:
    """Synthesize a title from the directory suffix ("chapter-07" -> "Chapter 07")."""
    return f"{label} {chapter.suffix}"


def extract_title(
    chapter: ChapterDirectory,
    content_root: Path,
    extension: str = DEFAULT_EXTENSION,
    fallback_label: str = FALLBACK_LABEL,
) -> TitleResult:
    """Extract the display title for a chapter.

    Reads <root>/<name>/<name>.<extension> and uses its first top-level
    heading. A missing or unreadable file, or one without such a heading,
    gives the fallback title instead. This never raises for content problems.
    """
    content_path = chapter.content_file(content_root, extension)

    if not content_path.exists():
        log.debug("No content file for %s at %s", chapter.name, content_path)
        return _fallback(chapter, fallback_label)

    try:
        text = content_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        log.debug("Could not read %s: %s", content_path, e)
        return _fallback(chapter, fallback_label)

    heading = parse_first_heading(text)
    if heading is None:
        log.debug("No top-level heading in %s", content_path)
        return _fallback(chapter, fallback_label)

    return TitleResult(title=heading, source=TitleSource.SOURCE_DERIVED)


def _fallback(chapter: ChapterDirectory, label: str) -> TitleResult:
    return TitleResult(title=fallback_title(chapter, label), source=TitleSource.FALLBACK)
