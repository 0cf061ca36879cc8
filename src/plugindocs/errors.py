"""Exception hierarchy for plugin-docs.

Every error carries the path or resource that failed and is propagated to
the CLI, which logs it once and exits non-zero.
"""


class PluginDocsError(Exception):
    """Base exception for plugin-docs errors."""

    exit_code = 1


class ConfigError(PluginDocsError):
    """Raised when configuration or setup validation fails."""

    pass


class RepositoryListError(PluginDocsError):
    """Raised when the plugin repositories cannot be enumerated."""

    pass


class CloneError(PluginDocsError):
    """Raised when a plugin repository cannot be cloned."""

    pass


class DocGenerationError(PluginDocsError):
    """Raised when reading, transforming or writing a page fails."""

    pass


__all__ = [
    "CloneError",
    "ConfigError",
    "DocGenerationError",
    "PluginDocsError",
    "RepositoryListError",
]
