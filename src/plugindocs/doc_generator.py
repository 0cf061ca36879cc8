"""Documentation generation orchestration.

This module drives the per-plugin conversion:
- Find the cobra export of each plugin (docs/cmd/<plugin>.md)
- Erase the plugin's previously generated pages
- Convert every exported page and write it as an _index.md file

Philosophy:
- Orchestration, not implementation (PageTransformer does the rewriting)
- Sequential: one plugin at a time, one file at a time
- Any filesystem error aborts the run with the failing path
"""

import logging
import shutil
from pathlib import Path

import click

from .config_manager import DocsConfig
from .errors import DocGenerationError
from .models import GenerationSummary, PluginResult
from .page_transformer import PageTransformer

logger = logging.getLogger(__name__)


def _info(value: object) -> str:
    return click.style(str(value), fg="cyan")


class DocGenerator:
    """Convert the cobra exports of all plugins into the Hugo content tree."""

    def __init__(self, config: DocsConfig, base_dir: Path):
        """Initialize generator.

        Args:
            config: Loaded configuration
            base_dir: Directory containing the plugins dir and the content tree
        """
        self.config = config
        self.base_dir = Path(base_dir)
        self.plugins_dir = config.plugins_path(self.base_dir)
        self.reference_root = config.reference_path(self.base_dir)
        self.transformer = PageTransformer(
            self.reference_root,
            organisation=config.organisation,
            repo_prefix=config.repo_prefix,
        )

    def generate(self) -> GenerationSummary:
        """Generate pages for every plugin directory.

        Returns:
            GenerationSummary with one result per plugin directory

        Raises:
            DocGenerationError: If any read, write or directory operation fails
        """
        try:
            entries = sorted(self.plugins_dir.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise DocGenerationError(f"failed to read dir {self.plugins_dir}: {e}") from e

        summary = GenerationSummary()
        for entry in entries:
            if not entry.is_dir():
                continue
            if entry.name in self.config.ignore_plugins:
                logger.info(f"ignoring plugin {_info(entry.name)}")
                summary.results.append(PluginResult(entry.name, skipped_reason="ignored"))
                continue
            summary.results.append(self.generate_plugin(entry))
        return summary

    def generate_plugin(self, plugin_dir: Path) -> PluginResult:
        """Generate the pages of a single plugin.

        Args:
            plugin_dir: Checkout of the plugin repository

        Returns:
            PluginResult listing the written pages, or why the plugin was skipped
        """
        name = plugin_dir.name
        src_dir = plugin_dir / "docs" / "cmd"
        root_page = src_dir / f"{name}.md"

        if not root_page.is_file():
            return self._skip_plugin(plugin_dir)

        logger.info(f"found docs {_info(root_page)}")

        short_name = self.transformer.plugin_dir_name(name)
        if not short_name:
            raise DocGenerationError(f"invalid plugin directory name {plugin_dir}")
        self._remove_dir(self.reference_root / short_name)

        try:
            md_files = sorted(
                (f for f in src_dir.iterdir() if f.is_file() and f.suffix == ".md"),
                key=lambda p: p.name,
            )
        except OSError as e:
            raise DocGenerationError(f"failed to read {src_dir}: {e}") from e

        result = PluginResult(name)
        for md_file in md_files:
            result.pages.append(self.generate_page(name, md_file))
        return result

    def generate_page(self, plugin: str, source_file: Path) -> Path:
        """Convert one cobra page and write it to its destination.

        Returns:
            Path of the written _index.md file
        """
        try:
            text = source_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocGenerationError(f"failed to read file {source_file}: {e}") from e

        page, rendered = self.transformer.convert(plugin, source_file, text)

        try:
            page.destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DocGenerationError(
                f"failed to create dir {page.destination.parent}: {e}"
            ) from e

        try:
            page.destination.write_text(rendered, encoding="utf-8")
        except OSError as e:
            raise DocGenerationError(f"failed to save file {page.destination}: {e}") from e

        logger.debug(f"wrote {page.destination}")
        return page.destination

    def _skip_plugin(self, plugin_dir: Path) -> PluginResult:
        has_readme = (plugin_dir / "README.md").is_file()
        has_docs = (plugin_dir / "docs").is_dir()
        logger.info(
            f"no command reference for plugin {_info(plugin_dir.name)} "
            f"(README.md: {'found' if has_readme else 'missing'}, "
            f"docs: {'found' if has_docs else 'missing'})"
        )
        return PluginResult(plugin_dir.name, skipped_reason="no command reference")

    def _remove_dir(self, path: Path) -> None:
        if not path.exists():
            return
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise DocGenerationError(f"failed to remove dir {path}: {e}") from e


__all__ = ["DocGenerator"]
