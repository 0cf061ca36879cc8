"""Git command line wrapper.

Clones plugin repositories with the git CLI. Commands are run as argument
lists (never through a shell) with a timeout.
"""

import logging
import subprocess
from pathlib import Path

from .errors import CloneError

logger = logging.getLogger(__name__)


class GitClient:
    """Run git commands for the clone phase."""

    def __init__(self, git_binary: str = "git", timeout: int = 600):
        self.git_binary = git_binary
        self.timeout = timeout

    def _run(self, args: list[str], cwd: Path | None = None) -> str:
        cmd = [self.git_binary, *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise CloneError(f"git not found: install git or check PATH ({self.git_binary})") from e
        except subprocess.TimeoutExpired as e:
            raise CloneError(f"git {args[0]} timed out after {self.timeout}s") from e

        if result.returncode != 0:
            raise CloneError(
                f"git {' '.join(args)} failed with exit code {result.returncode}: "
                f"{result.stderr.strip()}"
            )
        return result.stdout

    @staticmethod
    def is_repository(directory: Path) -> bool:
        return (Path(directory) / ".git").exists()

    def clone(self, git_url: str, target_dir: Path) -> Path:
        """Clone a repository into a directory.

        A directory that already holds a checkout is updated with a
        fast-forward pull instead, so a pre-populated plugins directory
        can be reused between runs.

        Args:
            git_url: Repository clone URL
            target_dir: Directory to clone into

        Returns:
            Path: The checkout directory

        Raises:
            CloneError: If git fails
        """
        target_dir = Path(target_dir)
        if self.is_repository(target_dir):
            logger.debug(f"Updating existing clone in {target_dir}")
            self._run(["pull", "--ff-only"], cwd=target_dir)
            return target_dir

        try:
            target_dir.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CloneError(f"Failed to create dir {target_dir.parent}: {e}") from e

        self._run(["clone", git_url, str(target_dir)])
        return target_dir


__all__ = ["GitClient"]
