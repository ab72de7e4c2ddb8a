"""Data models for chapter directories and their titles."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

CHAPTER_PREFIX = "chapter-"
DEFAULT_EXTENSION = "md"
FALLBACK_LABEL = "Chapter"


class ChapterDirectory(BaseModel):
    """A content-root subdirectory following the chapter naming convention."""

    model_config = ConfigDict(frozen=True)

    name: str
    suffix: str  # Kept as text, suffixes need not be numeric
    path: Path  # Relative to the content root

    @classmethod
    def from_name(cls, name: str) -> "ChapterDirectory":
        """Build from a directory name that already carries the prefix."""
        if not name.startswith(CHAPTER_PREFIX):
            raise ValueError(f"Not a chapter directory: {name}")
        return cls(name=name, suffix=name[len(CHAPTER_PREFIX):], path=Path(name))

    def content_file(self, content_root: Path, extension: str = DEFAULT_EXTENSION) -> Path:
        """Expected primary content file, named after the directory.

        The extension may be given with or without its leading dot.
        """
        return content_root / self.path / f"{self.name}.{extension.lstrip('.')}"


class TitleSource(str, Enum):
    """Where a chapter title came from."""

    SOURCE_DERIVED = "source-derived"
    FALLBACK = "fallback"


class TitleResult(BaseModel):
    """Outcome of title extraction for one chapter."""

    model_config = ConfigDict(frozen=True)

    title: str
    source: TitleSource

    @property
    def is_fallback(self) -> bool:
        return self.source is TitleSource.FALLBACK
