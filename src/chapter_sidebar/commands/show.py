"""Show command implementation."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from chapter_sidebar.core.pipeline import collect_from_settings
from chapter_sidebar.models.sidebar import SidebarItem
from chapter_sidebar.models.site import SidebarSettings


def display_items(items: list[SidebarItem], console: Console) -> None:
    """Display sidebar entries with the origin of each title."""
    table = Table(title="Sidebar", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Directory", style="dim")
    table.add_column("Title", style="white", max_width=40)
    table.add_column("Source", justify="center")
    table.add_column("Link", style="cyan")

    for i, item in enumerate(items, start=1):
        source = "[yellow]fallback[/]" if item.title.is_fallback else "[green]heading[/]"
        table.add_row(
            str(i),
            escape(item.chapter.name),
            escape(item.entry.text),
            source,
            escape(item.entry.link),
        )

    console.print(table)


def execute_show(settings: SidebarSettings, console: Console) -> None:
    """Execute the show command."""
    items = collect_from_settings(settings)

    console.print()
    if not items:
        root = escape(str(settings.content_root))
        console.print(f"[yellow]No chapter directories found in {root}[/]")
        console.print("[dim]Chapter directories must be named 'chapter-<suffix>'.[/]")
        console.print()
        return

    display_items(items, console)

    fallbacks = sum(1 for item in items if item.title.is_fallback)
    console.print()
    if fallbacks:
        console.print(
            f"[yellow]{fallbacks} of {len(items)} chapter(s) use a fallback title.[/] "
            f"[dim]Add a '# Title' line to <chapter>/<chapter>.{settings.content_extension} "
            "to set one.[/]"
        )
    else:
        console.print(f"[green]All {len(items)} chapter(s) have a title.[/]")
    console.print()
