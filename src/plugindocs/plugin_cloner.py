"""Clone phase: fetch every plugin repository of the organisation.

Repositories are cloned one at a time; the first failure aborts the phase.
"""

import logging
from pathlib import Path

import click

from .config_manager import DocsConfig
from .errors import CloneError
from .git_client import GitClient
from .github_client import GitHubClient, is_plugin_repository
from .models import PluginRepository

logger = logging.getLogger(__name__)


class PluginCloner:
    """Clone the plugin repositories listed by the GitHub organisation."""

    def __init__(
        self,
        config: DocsConfig,
        github_client: GitHubClient | None = None,
        git_client: GitClient | None = None,
    ):
        self.config = config
        self.github_client = github_client or GitHubClient(token=config.github_token)
        self.git_client = git_client or GitClient(timeout=config.git_timeout)

    def clone_plugins(self, plugins_dir: Path) -> list[Path]:
        """Clone all plugin repositories into plugins_dir.

        Args:
            plugins_dir: Directory receiving one checkout per plugin

        Returns:
            list[Path]: Checkout directories, in listing order

        Raises:
            RepositoryListError: If the organisation cannot be listed
            CloneError: If any repository fails to clone
        """
        repos = self.github_client.list_organisation_repositories(self.config.organisation)

        cloned = []
        for repo in repos:
            if not is_plugin_repository(repo, self.config.repo_prefix, self.config.ignore_plugins):
                continue
            checkout = self.clone_repository(repo, plugins_dir)
            if checkout:
                cloned.append(checkout)
        return cloned

    def clone_repository(self, repo: PluginRepository, plugins_dir: Path) -> Path | None:
        if not repo.clone_url:
            logger.warning(f"no clone URL for repository {repo.name}")
            return None

        to_dir = Path(plugins_dir).resolve() / repo.name
        logger.info(
            f"cloning plugin {click.style(repo.name, fg='cyan')} "
            f"to {click.style(str(to_dir), fg='cyan')}"
        )
        try:
            return self.git_client.clone(repo.clone_url, to_dir)
        except CloneError as e:
            raise CloneError(f"failed to clone {repo.clone_url} to {to_dir}: {e}") from e


__all__ = ["PluginCloner"]
