"""Unit tests for page_transformer module."""

from pathlib import Path

import pytest
import yaml

from plugindocs.page_transformer import PageTransformer

REFERENCE_ROOT = Path("content/en/v3/develop/reference/jx")


@pytest.fixture
def transformer():
    return PageTransformer(REFERENCE_ROOT)


def split_front_matter(text: str) -> tuple[dict, str]:
    assert text.startswith("---\n")
    header, body = text[4:].split("\n---\n\n", 1)
    return yaml.safe_load(header), body


class TestCommandPath:
    """Tests for file name to command path mapping."""

    @pytest.mark.parametrize(
        "file_name,expected",
        [
            ("jx-gitops.md", ["gitops"]),
            ("jx-gitops_annotate.md", ["gitops", "annotate"]),
            ("jx-gitops_helm_build.md", ["gitops", "helm", "build"]),
            ("jx-gitops_helm_stream-release.md", ["gitops", "helm", "stream-release"]),
        ],
    )
    def test_command_path(self, transformer, file_name, expected):
        assert transformer.command_path(file_name) == expected

    def test_plugin_dir_name(self, transformer):
        assert transformer.plugin_dir_name("jx-gitops") == "gitops"


class TestBuildPage:
    """Tests for page records."""

    def test_root_page(self, transformer):
        """Test the plugin's top level page maps to the plugin directory."""
        page = transformer.build_page("jx-gitops", Path("docs/cmd/jx-gitops.md"), "## jx-gitops\n\nGitOps\n")
        assert page.is_root
        assert page.title == "jx gitops"
        assert page.link_title == "gitops"
        assert page.destination == REFERENCE_ROOT / "gitops" / "_index.md"
        assert page.description == "GitOps"

    def test_child_page(self, transformer, sample_page):
        """Test a sub command page."""
        page = transformer.build_page("jx-gitops", Path("docs/cmd/jx-gitops_annotate.md"), sample_page)
        assert not page.is_root
        assert page.title == "jx gitops annotate"
        assert page.link_title == "annotate"
        assert page.destination == REFERENCE_ROOT / "gitops" / "annotate" / "_index.md"
        assert page.alias == "/commands/jx-gitops_annotate/"
        assert page.description == "Annotates all kubernetes resources in the given directory tree"

    def test_nested_page_destination(self, transformer):
        """Test nested commands produce nested directories."""
        page = transformer.build_page("jx-gitops", Path("jx-gitops_helm_build.md"), "")
        assert page.destination == REFERENCE_ROOT / "gitops" / "helm" / "build" / "_index.md"
        assert page.link_title == "build"


class TestTransform:
    """Tests for body substitutions."""

    def convert(self, transformer, file_name, text, plugin="jx-gitops"):
        page, rendered = transformer.convert(plugin, Path(file_name), text)
        return page, split_front_matter(rendered)

    def test_full_page(self, transformer, sample_page):
        """Test the complete transform of a cobra page."""
        _, (header, body) = self.convert(transformer, "jx-gitops_annotate.md", sample_page)

        assert header == {
            "title": "jx gitops annotate",
            "linktitle": "annotate",
            "type": "docs",
            "description": "Annotates all kubernetes resources in the given directory tree",
            "aliases": ["/commands/jx-gitops_annotate/"],
        }
        assert body.startswith("### Usage\n\n    jx gitops annotate\n")
        assert (
            "### Examples\n\n  ```bash\n"
            "  # updates recursively annotates all resources in the current directory\n"
            "  jx gitops annotate myannotate=cheese another=thing\n"
            "  # updates recursively all resources\n"
            "  jx gitops annotate --dir myresource-dir foo=bar\n\n  ```\n### Options\n"
        ) in body
        assert "SEE ALSO" not in body
        assert "Auto generated" not in body
        assert body.endswith(
            "```\n\n### Source\n\n"
            "[jenkins-x-plugins/jx-gitops](https://github.com/jenkins-x-plugins/jx-gitops)\n"
        )

    def test_exact_front_matter(self, transformer):
        """Test the front-matter layout."""
        _, rendered = transformer.convert("jx-gitops", Path("jx-gitops_annotate.md"), "## x\n\nDoes x\n")
        assert rendered.startswith(
            "---\n"
            "title: jx gitops annotate\n"
            "linktitle: annotate\n"
            "type: docs\n"
            "description: Does x\n"
            "aliases:\n"
            "- /commands/jx-gitops_annotate/\n"
            "---\n\n"
        )

    def test_description_with_colon_is_valid_yaml(self, transformer):
        """Test descriptions needing quotes still parse."""
        text = "## jx-gitops foo\n\nSets key: value pairs\n### Usage\n"
        _, (header, _) = self.convert(transformer, "jx-gitops_foo.md", text)
        assert header["description"] == "Sets key: value pairs"

    def test_md_suffix_removed_from_links(self, transformer):
        text = "### Synopsis\n\nsee [other](jx-gitops_other.md)\n"
        _, (_, body) = self.convert(transformer, "jx-gitops_annotate.md", text)
        assert "[other](jx-gitops_other)" in body

    def test_self_links_point_to_parent(self, transformer):
        text = "### Synopsis\n\nsee [foo](foo.md) and [bar](bar)\n"
        _, (_, body) = self.convert(transformer, "jx-gitops_annotate.md", text)
        assert "[foo](..)" in body
        assert "[bar](..)" in body

    def test_plugin_name_spaced(self, transformer):
        """Test headings, link texts and code lines use the 'jx gitops' command."""
        text = (
            "### Usage\n\n```\njx-gitops annotate [flags]\n```\n\n"
            "#### jx-gitops notes\n\nsee [jx-gitops annotate](jx-gitops_annotate.md), "
            "the jx-gitops binary and jx-gitopsy\n"
        )
        _, (_, body) = self.convert(transformer, "jx-gitops_annotate.md", text)
        assert "```\njx gitops annotate [flags]\n```" in body
        assert "#### jx gitops notes" in body
        assert "[jx gitops annotate](jx-gitops_annotate)" in body
        assert "the jx-gitops binary and jx-gitopsy" in body

    def test_nested_page_parent_link(self, transformer):
        """Test pages deeper than two segments link to the parent as '..'."""
        text = "### Synopsis\n\nsee the [parent command](jx-gitops_helm.md)\n"
        _, (_, body) = self.convert(transformer, "jx-gitops_helm_build.md", text)
        assert "[parent command](..)" in body

    def test_two_segment_page_keeps_parent_link(self, transformer):
        text = "### Synopsis\n\nsee [root](jx-gitops.md)\n"
        _, (_, body) = self.convert(transformer, "jx-gitops_annotate.md", text)
        assert "[root](jx-gitops)" in body

    def test_page_without_sections_kept(self, transformer):
        """Test a page without '### ' headings keeps its content."""
        _, (_, body) = self.convert(transformer, "jx-gitops_annotate.md", "just text\n")
        assert body.startswith("just text\n\n### Source\n")

    def test_custom_organisation_footer(self):
        transformer = PageTransformer(REFERENCE_ROOT, organisation="my-org")
        _, rendered = transformer.convert("jx-gitops", Path("jx-gitops.md"), "### Usage\n")
        assert rendered.endswith("[my-org/jx-gitops](https://github.com/my-org/jx-gitops)\n")

    def test_transform_is_deterministic(self, transformer, sample_page):
        first = transformer.convert("jx-gitops", Path("jx-gitops_annotate.md"), sample_page)[1]
        second = transformer.convert("jx-gitops", Path("jx-gitops_annotate.md"), sample_page)[1]
        assert first == second
