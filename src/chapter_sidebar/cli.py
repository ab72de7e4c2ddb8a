"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from chapter_sidebar.models.chapter import DEFAULT_EXTENSION, FALLBACK_LABEL
from chapter_sidebar.models.site import SidebarSettings

app = typer.Typer(
    name="chapter-sidebar",
    help="Generate a documentation sidebar from chapter-* content directories.",
    add_completion=False,
)

console = Console()


def configure_logging(verbose: bool) -> None:
    """Route package log records to stderr through rich, at DEBUG when verbose.

    Stdout stays reserved for command output such as the sidebar JSON.
    """
    package_log = logging.getLogger("chapter_sidebar")
    package_log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(package_log.handlers):
        if isinstance(handler, RichHandler):
            package_log.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    package_log.addHandler(handler)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose", "-v",
            help="Show debug logging (skipped entries, fallback titles)",
        ),
    ] = False,
) -> None:
    """Generate a documentation sidebar from chapter-* content directories."""
    configure_logging(verbose)


ExtensionOption = Annotated[
    str,
    typer.Option(
        "--extension",
        "-e",
        help="Extension of each chapter's content file",
    ),
]

FallbackOption = Annotated[
    str,
    typer.Option(
        "--fallback-label",
        help="Word placed before the directory suffix when a chapter has no heading",
    ),
]


@app.command()
def build(
    content_root: Annotated[
        Path,
        typer.Argument(
            help="Directory containing the chapter-* directories",
            resolve_path=True,
        ),
    ],
    site_config: Annotated[
        Optional[Path],
        typer.Option(
            "--site-config",
            "-c",
            help="JSON site config to place the sidebar into (default: emit the sidebar only)",
            dir_okay=False,
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output file path (default: print to stdout)",
            dir_okay=False,
        ),
    ] = None,
    extension: ExtensionOption = DEFAULT_EXTENSION,
    fallback_label: FallbackOption = FALLBACK_LABEL,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress the summary after writing",
        ),
    ] = False,
) -> None:
    """Generate the sidebar and emit it as JSON.

    With --site-config the whole site configuration is emitted with its
    sidebar replaced by the generated one.
    """
    try:
        from chapter_sidebar.commands.build import execute_build

        settings = SidebarSettings(
            content_root=content_root,
            content_extension=extension,
            fallback_label=fallback_label,
        )
        execute_build(
            settings=settings,
            site_config_path=site_config,
            output_path=output,
            quiet=quiet,
            console=console,
        )
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


@app.command()
def show(
    content_root: Annotated[
        Path,
        typer.Argument(
            help="Directory containing the chapter-* directories",
            resolve_path=True,
        ),
    ],
    extension: ExtensionOption = DEFAULT_EXTENSION,
    fallback_label: FallbackOption = FALLBACK_LABEL,
) -> None:
    """Show the sidebar with the origin of each chapter title."""
    try:
        from chapter_sidebar.commands.show import execute_show

        settings = SidebarSettings(
            content_root=content_root,
            content_extension=extension,
            fallback_label=fallback_label,
        )
        execute_show(settings=settings, console=console)
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
