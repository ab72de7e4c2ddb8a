import logging

import pytest

from chapter_sidebar.core.pipeline import (
    collect_sidebar_items,
    collect_from_settings,
    generate_sidebar,
)
from chapter_sidebar.core.scanner import FilesystemError
from chapter_sidebar.core.site_config import sidebar_json
from chapter_sidebar.models.site import SidebarSettings


def test_generate_sidebar(content_root):
    entries = generate_sidebar(content_root)

    assert [e.model_dump() for e in entries] == [
        {"text": "Instance Setup", "link": "/chapter-01/chapter-01"},
        {"text": "Swapchain Basics", "link": "/chapter-02/chapter-02"},
        {"text": "Chapter 03", "link": "/chapter-03/chapter-03"},
        {"text": "Chapter 04", "link": "/chapter-04/chapter-04"},
    ]


def test_one_entry_per_chapter_directory(tmp_path, make_chapter):
    names = ["chapter-2", "chapter-10", "chapter-1", "chapter-x"]
    for name in names:
        make_chapter(tmp_path, name)
    (tmp_path / "assets").mkdir()
    (tmp_path / "readme.md").write_text("# Readme\n", encoding="utf-8")

    entries = generate_sidebar(tmp_path)

    assert [e.link for e in entries] == [
        "/chapter-1/chapter-1",
        "/chapter-10/chapter-10",
        "/chapter-2/chapter-2",
        "/chapter-x/chapter-x",
    ]


def test_generate_sidebar_is_idempotent(content_root):
    first = sidebar_json(generate_sidebar(content_root))
    second = sidebar_json(generate_sidebar(content_root))

    assert first == second


def test_generate_sidebar_missing_root(tmp_path):
    with pytest.raises(FilesystemError):
        generate_sidebar(tmp_path / "missing")


def test_collect_sidebar_items_reports_title_source(content_root):
    items = collect_sidebar_items(content_root)

    assert [item.title.is_fallback for item in items] == [False, False, True, True]
    assert [item.entry for item in items] == generate_sidebar(content_root)


def test_collect_from_settings(tmp_path, make_chapter):
    make_chapter(tmp_path, "chapter-1", "# From MDX\n", extension="mdx")
    make_chapter(tmp_path, "chapter-2")
    settings = SidebarSettings(
        content_root=tmp_path,
        content_extension=".mdx",
        fallback_label="Part",
    )

    items = collect_from_settings(settings)

    assert [item.entry.text for item in items] == ["From MDX", "Part 2"]


def test_settings_reject_empty_extension(tmp_path):
    with pytest.raises(ValueError):
        SidebarSettings(content_root=tmp_path, content_extension=" . ")


def test_collect_logs_summary(content_root, caplog):
    caplog.set_level(logging.INFO, logger="chapter_sidebar")

    collect_sidebar_items(content_root)

    assert "Built sidebar with 4 entries (2 fallback title(s))" in caplog.text
