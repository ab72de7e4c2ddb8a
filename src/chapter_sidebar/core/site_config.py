"""Load the site configuration and write it out with the sidebar."""

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from chapter_sidebar.models.sidebar import NavEntry
from chapter_sidebar.models.site import SiteConfig

_SIDEBAR_ADAPTER = TypeAdapter(list[NavEntry])


class SiteConfigError(ValueError):
    """Site configuration file is missing or malformed."""


def load_site_config(path: Path) -> SiteConfig:
    """Load a JSON site configuration.

    Raises:
        SiteConfigError: If the file cannot be read or does not validate
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SiteConfigError(f"Cannot read site config {path}: {e}") from e

    try:
        return SiteConfig.model_validate_json(raw)
    except ValidationError as e:
        raise SiteConfigError(f"Invalid site config {path}:\n{e}") from e


def sidebar_json(entries: list[NavEntry]) -> str:
    """Serialize sidebar entries as an indented JSON array."""
    return _SIDEBAR_ADAPTER.dump_json(entries, indent=2).decode("utf-8")


def site_config_json(site: SiteConfig) -> str:
    """Serialize a site configuration using its JSON key names."""
    return site.model_dump_json(indent=2, by_alias=True)


class SiteConfigWriter:
    """Write generated configuration to a JSON file."""

    def __init__(self, output_path: Path):
        """Initialize writer.

        Args:
            output_path: File to write, parent directories are created
        """
        self.output_path = output_path

    def _write(self, content: str) -> Path:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(content + "\n", encoding="utf-8")
        return self.output_path

    def write_sidebar(self, entries: list[NavEntry]) -> Path:
        """Write the bare sidebar array."""
        return self._write(sidebar_json(entries))

    def write(self, site: SiteConfig) -> Path:
        """Write the full site configuration."""
        return self._write(site_config_json(site))

