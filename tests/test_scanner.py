from pathlib import Path

import pytest

from chapter_sidebar.core.scanner import FilesystemError, is_chapter_name, scan_chapters


def test_scan_keeps_only_prefixed_directories(content_root):
    chapters = scan_chapters(content_root)

    assert [c.name for c in chapters] == [
        "chapter-01",
        "chapter-02",
        "chapter-03",
        "chapter-04",
    ]


def test_scan_sorts_lexicographically_not_numerically(tmp_path, make_chapter):
    for name in ["chapter-2", "chapter-10", "chapter-1"]:
        make_chapter(tmp_path, name)

    chapters = scan_chapters(tmp_path)

    assert [c.name for c in chapters] == ["chapter-1", "chapter-10", "chapter-2"]


def test_scan_sets_suffix_and_relative_path(tmp_path, make_chapter):
    make_chapter(tmp_path, "chapter-intro")

    (chapter,) = scan_chapters(tmp_path)

    assert chapter.suffix == "intro"
    assert chapter.path == Path("chapter-intro")


def test_scan_prefix_is_case_sensitive(tmp_path, make_chapter):
    make_chapter(tmp_path, "Chapter-01")
    make_chapter(tmp_path, "chapter01")

    assert scan_chapters(tmp_path) == []


def test_scan_empty_root(tmp_path):
    assert scan_chapters(tmp_path) == []


def test_scan_missing_root_raises(tmp_path):
    missing = tmp_path / "nope"

    with pytest.raises(FilesystemError) as exc_info:
        scan_chapters(missing)

    assert exc_info.value.path == missing


def test_scan_file_root_raises(tmp_path):
    not_a_dir = tmp_path / "file.md"
    not_a_dir.write_text("# x\n", encoding="utf-8")

    with pytest.raises(FilesystemError):
        scan_chapters(not_a_dir)


def test_filesystem_error_is_os_error(tmp_path):
    with pytest.raises(OSError):
        scan_chapters(tmp_path / "nope")


def test_is_chapter_name():
    assert is_chapter_name("chapter-1")
    assert is_chapter_name("chapter-")
    assert not is_chapter_name("chapters")
    assert not is_chapter_name("intro-chapter-1")
