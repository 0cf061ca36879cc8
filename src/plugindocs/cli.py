"""CLI entry point for plugin-docs.

Commands:
    plugin-docs              # Clone plugins and regenerate docs in the current dir
    plugin-docs DIR          # Use DIR as the working directory
    plugin-docs --no-clone   # Reuse an already populated jx-plugins dir
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from plugindocs import __version__
from plugindocs.config_manager import ConfigManager, DocsConfig
from plugindocs.doc_generator import DocGenerator
from plugindocs.errors import ConfigError, PluginDocsError
from plugindocs.models import GenerationSummary
from plugindocs.plugin_cloner import PluginCloner

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Configure logging levels based on verbose flag."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")
    if not verbose:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_summary_table(summary: GenerationSummary) -> Table:
    """Build Rich table listing generated and skipped plugins."""
    table = Table(title="Plugin Documentation", show_header=True, header_style="bold")
    table.add_column("Plugin", style="cyan", no_wrap=True)
    table.add_column("Pages", justify="right")
    table.add_column("Status")

    for result in summary.results:
        if result.skipped:
            table.add_row(result.plugin, "-", f"[dim]skipped: {result.skipped_reason}[/dim]")
        else:
            table.add_row(result.plugin, str(len(result.pages)), "[green]generated[/green]")
    return table


def prepare_plugins_dir(config: DocsConfig, base_dir: Path) -> Path:
    """Create the plugins directory.

    Raises:
        ConfigError: If the directory cannot be created
    """
    plugins_dir = config.plugins_path(base_dir)
    try:
        plugins_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"failed to create dir {plugins_dir}: {e}") from e
    return plugins_dir


def run(config: DocsConfig, base_dir: Path) -> GenerationSummary:
    """Run the clone and generate phases.

    Raises:
        PluginDocsError: On the first unrecoverable error
    """
    plugins_dir = prepare_plugins_dir(config, base_dir)

    if config.clone_repositories:
        PluginCloner(config).clone_plugins(plugins_dir)
    else:
        logger.info(f"cloning disabled, using plugins in {click.style(str(plugins_dir), fg='cyan')}")

    summary = DocGenerator(config, base_dir).generate()
    logger.info("completed")
    return summary


@click.command(name="plugin-docs")
@click.argument(
    "directory",
    required=False,
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option("--config", "config_path", help="Config file path", type=click.Path())
@click.option("--no-clone", is_flag=True, help="Skip cloning, use the existing plugins dir")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
@click.version_option(version=__version__)
def main(directory: Path, config_path: str | None, no_clone: bool, verbose: bool) -> None:
    """Generate the Jenkins X plugin command reference.

    Clones every jx- plugin repository of the jenkins-x-plugins organisation
    into DIR/jx-plugins and rewrites each plugin's docs/cmd Markdown into
    DIR/content/en/v3/develop/reference/jx.

    \b
    Examples:
        plugin-docs                    # Clone and generate in the current dir
        plugin-docs ../jx-docs         # Generate inside another checkout
        plugin-docs --no-clone         # Reuse already cloned plugins

    \b
    ENVIRONMENT:
        JX_DOCS_DISABLE_CLONE   Set to true to skip cloning
        GITHUB_TOKEN            Token for the GitHub API
    """
    configure_logging(verbose)

    try:
        config = ConfigManager.load_config(directory, config_path)
        if no_clone:
            config.clone_repositories = False

        summary = run(config, directory)
        Console().print(build_summary_table(summary))

    except PluginDocsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        click.echo("\nCancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
