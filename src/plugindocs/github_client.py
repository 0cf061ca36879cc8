"""GitHub Repository Listing Module

Enumerate the repositories of the plugin organisation.

Security Requirements:
- HTTPS only for API calls
- Timeout on API calls
- Token sent only as a bearer header, never logged
"""

import logging

import click
import requests

from .errors import RepositoryListError
from .models import PluginRepository

logger = logging.getLogger(__name__)


class GitHubClient:
    """List organisation repositories through the GitHub REST API."""

    API_BASE = "https://api.github.com"
    API_TIMEOUT = 30
    PAGE_SIZE = 100

    def __init__(self, token: str | None = None, session: requests.Session | None = None):
        self.token = token
        self.session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def list_organisation_repositories(self, organisation: str) -> list[PluginRepository]:
        """List every repository of an organisation.

        Follows the "next" page links until the listing is exhausted.

        Args:
            organisation: GitHub organisation name

        Returns:
            list[PluginRepository]: Repositories in API order

        Raises:
            RepositoryListError: If any API call fails
        """
        url: str | None = f"{self.API_BASE}/orgs/{organisation}/repos"
        params: dict | None = {"per_page": self.PAGE_SIZE, "type": "all"}
        repositories = []

        while url:
            try:
                response = self.session.get(
                    url, headers=self._headers(), params=params, timeout=self.API_TIMEOUT
                )
            except requests.RequestException as e:
                raise RepositoryListError(
                    f"Failed to list repositories of {organisation}: {e}"
                ) from e

            if response.status_code != 200:
                try:
                    error_msg = response.json().get("message", "Unknown error")
                except ValueError:
                    error_msg = response.text or "Unknown error"
                raise RepositoryListError(
                    f"Failed to list repositories of {organisation}: "
                    f"{response.status_code} - {error_msg}"
                )

            repositories.extend(self._parse_repository(item) for item in response.json())

            url = response.links.get("next", {}).get("url")
            # the next link already carries the query string
            params = None

        logger.debug(f"Found {len(repositories)} repositories in {organisation}")
        return repositories

    @staticmethod
    def _parse_repository(item: dict) -> PluginRepository:
        return PluginRepository(
            name=item.get("name", ""),
            clone_url=item.get("clone_url") or "",
            archived=bool(item.get("archived", False)),
            private=bool(item.get("private", False)),
        )


def is_plugin_repository(repo: PluginRepository, prefix: str, ignore: list[str] | None = None) -> bool:
    """Whether a repository should be cloned as a plugin.

    Only public, non-archived repositories whose name starts with the plugin
    prefix qualify. The reason for rejecting a repository is logged.
    """
    name = click.style(repo.name, fg="cyan")
    if repo.archived:
        logger.info(f"ignoring archived repository {name}")
        return False
    if repo.private:
        logger.info(f"ignoring private repository {name}")
        return False
    if not repo.name.startswith(prefix) or repo.name in (ignore or []):
        logger.info(f"ignoring repository {name}")
        return False
    return True


__all__ = ["GitHubClient", "is_plugin_repository"]
