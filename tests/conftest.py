"""
Shared test fixtures and configuration for plugin-docs tests.

This module provides common fixtures used across all test types:
- Sample cobra command pages
- Temporary plugin checkouts with a docs/cmd export
- Default configuration
"""

from pathlib import Path

import pytest

from plugindocs.config_manager import DocsConfig

# ============================================================================
# SAMPLE PAGES
# ============================================================================

SAMPLE_PAGE = """
## jx-gitops annotate

Annotates all kubernetes resources in the given directory tree

### Usage

    jx-gitops annotate

### Synopsis

Annotates all kubernetes resources in the given directory tree

### Examples

  # updates recursively annotates all resources in the current directory
  jx-gitops annotate myannotate=cheese another=thing
  # updates recursively all resources
  jx-gitops annotate --dir myresource-dir foo=bar

### Options

```
  -d, --dir string   the directory to recursively look for the *.yaml or *.yml files (default ".")
  -h, --help         help for annotate
```

### SEE ALSO

* [jx-gitops](jx-gitops.md)	 - Commands for working with GitOps based git repositories

###### Auto generated by spf13/cobra on 8-Jul-2020
"""

ROOT_PAGE = """## jx-gitops

Commands for working with GitOps based git repositories

### Usage

```
jx-gitops <command> [flags]
```

### Synopsis

Commands for working with GitOps based git repositories

### Options

```
  -h, --help   help for jx-gitops
```

### SEE ALSO

* [jx-gitops annotate](jx-gitops_annotate.md)	 - Annotates all kubernetes resources in the given directory tree
* [jx-gitops helm](jx-gitops_helm.md)	 - Commands for working with helm charts
"""

NESTED_PAGE = """## jx-gitops helm build

Builds the helm charts

### Usage

```
jx-gitops helm build
```

### Synopsis

Builds the helm charts, see the [parent command](jx-gitops_helm.md)

### Options

```
  -h, --help   help for build
```

### SEE ALSO

* [jx-gitops helm](jx-gitops_helm.md)	 - Commands for working with helm charts
"""


@pytest.fixture
def sample_page():
    """Cobra export of 'jx-gitops annotate'."""
    return SAMPLE_PAGE


# ============================================================================
# DIRECTORY FIXTURES
# ============================================================================


def write_export(plugin_dir: Path, pages: dict[str, str]) -> Path:
    """Write a docs/cmd export into a plugin checkout."""
    cmd_dir = plugin_dir / "docs" / "cmd"
    cmd_dir.mkdir(parents=True)
    for name, text in pages.items():
        (cmd_dir / name).write_text(text)
    return cmd_dir


@pytest.fixture
def base_dir(tmp_path):
    """Working directory with a populated jx-plugins dir.

    Contains:
    - jx-gitops: full cobra export (root, child and nested pages)
    - jx-readme-only: README.md and docs/ but no command reference
    - notes.txt: a stray file that is not a plugin
    """
    plugins_dir = tmp_path / "jx-plugins"
    plugins_dir.mkdir()

    write_export(
        plugins_dir / "jx-gitops",
        {
            "jx-gitops.md": ROOT_PAGE,
            "jx-gitops_annotate.md": SAMPLE_PAGE,
            "jx-gitops_helm_build.md": NESTED_PAGE,
        },
    )

    readme_only = plugins_dir / "jx-readme-only"
    (readme_only / "docs").mkdir(parents=True)
    (readme_only / "README.md").write_text("# jx-readme-only\n")

    (plugins_dir / "notes.txt").write_text("not a plugin\n")
    return tmp_path


@pytest.fixture
def docs_config():
    """Default configuration with cloning disabled."""
    return DocsConfig(clone_repositories=False)
