"""Build command implementation."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from chapter_sidebar.core.pipeline import collect_from_settings
from chapter_sidebar.core.site_config import (
    SiteConfigWriter,
    load_site_config,
    sidebar_json,
    site_config_json,
)
from chapter_sidebar.models.site import SidebarSettings


def execute_build(
    settings: SidebarSettings,
    site_config_path: Path | None,
    output_path: Path | None,
    quiet: bool,
    console: Console,
) -> None:
    """Execute the build command.

    Without an output path the JSON goes to the console and nothing else is
    printed, so the result can be piped.
    """
    # Load the site config first so a bad file fails before any scanning
    site = load_site_config(site_config_path) if site_config_path else None

    items = collect_from_settings(settings)
    entries = [item.entry for item in items]

    if output_path is None:
        content = site_config_json(site.with_sidebar(entries)) if site else sidebar_json(entries)
        console.print(content, markup=False, highlight=False, emoji=False, soft_wrap=True)
        return

    writer = SiteConfigWriter(output_path)
    if site:
        written = writer.write(site.with_sidebar(entries))
    else:
        written = writer.write_sidebar(entries)

    if quiet:
        return

    fallbacks = sum(1 for item in items if item.title.is_fallback)
    summary_lines = [
        f"[green]Wrote {len(entries)} sidebar entr{'y' if len(entries) == 1 else 'ies'}[/]",
        "",
        f"[dim]Content root:[/] {escape(str(settings.content_root))}",
        f"[dim]Output:[/] {escape(str(written))}",
    ]
    if site:
        summary_lines.append(f"[dim]Site:[/] {escape(site.title)}")
    if fallbacks:
        summary_lines.append("")
        summary_lines.append(
            f"[yellow]{fallbacks} chapter(s) use a fallback title "
            "(run 'chapter-sidebar show' for details)[/]"
        )

    console.print()
    console.print(Panel("\n".join(summary_lines), title="Complete", border_style="green"))
