"""Data models for the plugin documentation aggregator.

Philosophy:
- Ruthlessly simple dataclasses
- Standard library only
- Pages are built once, written once and discarded
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class PluginRepository:
    """A repository returned by the organisation listing.

    Attributes:
        name: Repository name (e.g., "jx-gitops")
        clone_url: HTTPS clone URL, may be empty
        archived: Whether the repository is archived
        private: Whether the repository is private
    """

    name: str
    clone_url: str = ""
    archived: bool = False
    private: bool = False


@dataclass
class CommandPage:
    """A single cobra command reference page.

    Attributes:
        plugin: Plugin repository name (e.g., "jx-gitops")
        source_file: Markdown file inside the plugin's docs/cmd directory
        path: Command path segments (e.g., ["gitops", "annotate"])
        destination: Destination index file in the content tree
        description: One line summary for the front-matter
    """

    plugin: str
    source_file: Path
    path: list[str]
    destination: Path
    description: str = ""

    @property
    def is_root(self) -> bool:
        """Whether this is the plugin's top level page."""
        return len(self.path) <= 1

    @property
    def title(self) -> str:
        return "jx " + " ".join(self.path)

    @property
    def link_title(self) -> str:
        """Menu title: the last command word (the plugin word for the root page)."""
        return self.path[-1] if self.path else ""

    @property
    def alias(self) -> str:
        """Legacy URL of the flat cobra page."""
        return f"/commands/{self.source_file.stem}/"


@dataclass
class PluginResult:
    """Outcome of processing a single plugin directory.

    Attributes:
        plugin: Plugin directory name
        pages: Destination files written for the plugin
        skipped_reason: Why the plugin was skipped, None if processed
    """

    plugin: str
    pages: list[Path] = field(default_factory=list)
    skipped_reason: str | None = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None


@dataclass
class GenerationSummary:
    """Result of a complete generation run."""

    results: list[PluginResult] = field(default_factory=list)

    @property
    def generated(self) -> list[PluginResult]:
        return [r for r in self.results if not r.skipped]

    @property
    def skipped(self) -> list[PluginResult]:
        return [r for r in self.results if r.skipped]

    @property
    def page_count(self) -> int:
        return sum(len(r.pages) for r in self.results)


__all__ = [
    "CommandPage",
    "GenerationSummary",
    "PluginRepository",
    "PluginResult",
]
