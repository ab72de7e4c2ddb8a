"""Data models for the generated sidebar."""

from pydantic import BaseModel, ConfigDict

from chapter_sidebar.models.chapter import ChapterDirectory, TitleResult


class NavEntry(BaseModel):
    """Single sidebar entry consumed by the site configuration."""

    model_config = ConfigDict(frozen=True)

    text: str
    link: str


class SidebarItem(BaseModel):
    """Sidebar entry together with the chapter and title it was built from."""

    chapter: ChapterDirectory
    title: TitleResult
    entry: NavEntry
