"""Rewrite a cobra command page into a Hugo content page.

This module maps a cobra Markdown file (e.g. "jx-gitops_helm_build.md") to
its place in the Hugo content tree ("gitops/helm/build/_index.md") and
rewrites the body: links, plugin naming, example fencing, trimming of the
sections Hugo already renders from the front-matter, and a source footer.

Philosophy:
- Pure string transforms, no I/O
- Fixed substitution order
- Same input always renders the same bytes
"""

import re
from pathlib import Path

import yaml

from .markdown_transform import read_cobra_description, wrap_examples_in_code_block
from .models import CommandPage

INDEX_FILE = "_index.md"
PAGE_TYPE = "docs"
SEE_ALSO_MARKER = "### SEE ALSO"

# cobra links point at sibling files: [jx-gitops annotate](jx-gitops_annotate.md)
MD_LINK_TARGET = re.compile(r"\]\(([^()\s]+)\.md\)")
SELF_LINK = re.compile(r"\[([^\[\]]+)\]\(\1\)")
FIRST_SECTION = re.compile(r"^### ", re.MULTILINE)


class PageTransformer:
    """Builds and renders command pages for one content tree.

    Example:
        >>> transformer = PageTransformer(Path("content/en/v3/develop/reference/jx"))
        >>> page, text = transformer.convert("jx-gitops", source_file, markdown)
        >>> page.destination
        PosixPath('content/en/v3/develop/reference/jx/gitops/annotate/_index.md')
    """

    def __init__(
        self,
        reference_root: Path,
        organisation: str = "jenkins-x-plugins",
        repo_prefix: str = "jx-",
    ):
        self.reference_root = Path(reference_root)
        self.organisation = organisation
        self.repo_prefix = repo_prefix

    def command_path(self, file_name: str) -> list[str]:
        """Split a cobra file name into command path segments.

        Args:
            file_name: File name such as "jx-gitops_helm_build.md"

        Returns:
            Path segments, e.g. ["gitops", "helm", "build"]
        """
        stem = file_name.removesuffix(".md")
        stem = stem.removeprefix(self.repo_prefix)
        return [segment for segment in stem.split("_") if segment]

    def plugin_dir_name(self, plugin: str) -> str:
        """Directory of a plugin below the reference root (e.g. "gitops")."""
        return plugin.removeprefix(self.repo_prefix)

    def build_page(self, plugin: str, source_file: Path, text: str) -> CommandPage:
        """Create the page record for a source file.

        The description is taken from the untransformed text.
        """
        path = self.command_path(source_file.name)
        destination = self.reference_root.joinpath(*path) / INDEX_FILE
        return CommandPage(
            plugin=plugin,
            source_file=source_file,
            path=path,
            destination=destination,
            description=read_cobra_description(text),
        )

    def transform(self, page: CommandPage, text: str) -> str:
        """Apply the body substitutions in order.

        Args:
            page: Page being converted
            text: Original Markdown of the page

        Returns:
            The rewritten body, without front-matter
        """
        md = MD_LINK_TARGET.sub(r"](\1)", text)
        md = SELF_LINK.sub(r"[\1](..)", md)
        md = self._space_plugin_name(page.plugin, md)

        if len(page.path) > 2:
            parent = page.source_file.stem.rsplit("_", 1)[0]
            md = md.replace(f"]({parent})", "](..)")

        md = wrap_examples_in_code_block(md)

        idx = md.find(SEE_ALSO_MARKER)
        if idx >= 0:
            md = md[:idx]

        match = FIRST_SECTION.search(md)
        if match:
            md = md[match.start() :]

        return md.rstrip() + "\n\n" + self.source_footer(page.plugin)

    def source_footer(self, plugin: str) -> str:
        repo = f"{self.organisation}/{plugin}"
        return f"### Source\n\n[{repo}](https://github.com/{repo})\n"

    def front_matter(self, page: CommandPage) -> str:
        header = {
            "title": page.title,
            "linktitle": page.link_title,
            "type": PAGE_TYPE,
            "description": page.description,
            "aliases": [page.alias],
        }
        dumped = yaml.safe_dump(
            header,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
            width=4096,
        )
        return f"---\n{dumped}---\n\n"

    def render(self, page: CommandPage, body: str) -> str:
        return self.front_matter(page) + body

    def convert(self, plugin: str, source_file: Path, text: str) -> tuple[CommandPage, str]:
        """Build, transform and render a page in one go.

        Args:
            plugin: Plugin repository name (e.g. "jx-gitops")
            source_file: Path of the cobra Markdown file
            text: Contents of the file

        Returns:
            Tuple of (page, rendered page text)
        """
        page = self.build_page(plugin, source_file, text)
        return page, self.render(page, self.transform(page, text))

    def _space_plugin_name(self, plugin: str, text: str) -> str:
        """Write "jx-gitops" as the "jx gitops" command in headings, link texts and code lines."""
        if not plugin.startswith(self.repo_prefix):
            return text
        spaced = self.repo_prefix.rstrip("-") + " " + self.plugin_dir_name(plugin)
        name = re.escape(plugin)
        text = re.sub(rf"^(#+\s+){name}(?![\w-])", rf"\g<1>{spaced}", text, flags=re.MULTILINE)
        text = re.sub(rf"\[{name}(?![\w-])", f"[{spaced}", text)
        return re.sub(rf"^([ \t]*){name}(?![\w-])", rf"\g<1>{spaced}", text, flags=re.MULTILINE)


__all__ = ["INDEX_FILE", "PageTransformer"]
