"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


def _make_chapter(root: Path, name: str, content: str | None = None, extension: str = "md") -> Path:
    """Create <root>/<name>/, plus <name>.<extension> when content is given."""
    chapter_dir = root / name
    chapter_dir.mkdir(parents=True)
    if content is not None:
        (chapter_dir / f"{name}.{extension}").write_text(content, encoding="utf-8")
    return chapter_dir


@pytest.fixture
def make_chapter():
    """Factory creating chapter directories under a given root."""
    return _make_chapter


@pytest.fixture
def content_root(tmp_path):
    """A content root with titled, untitled and unrelated entries."""
    root = tmp_path / "docs"
    root.mkdir()
    _make_chapter(root, "chapter-01", "# Instance Setup\n\nSome text.\n")
    _make_chapter(root, "chapter-02", "Intro paragraph.\n\n# Swapchain Basics\n")
    _make_chapter(root, "chapter-03", "## Only a subheading\n")
    _make_chapter(root, "chapter-04")
    (root / "public").mkdir()
    (root / "index.md").write_text("# Home\n", encoding="utf-8")
    (root / "chapter-notes.md").write_text("# Not a directory\n", encoding="utf-8")
    return root
