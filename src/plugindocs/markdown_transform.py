"""Text transformations for cobra generated Markdown.

Cobra's Markdown export puts the command synopsis between the "## <command>"
heading and the first "###" section, and writes the "### Examples" section
as plain two-space indented text. Hugo renders that indented text as a
paragraph, so example commands are wrapped in bash code fences here.

Public API:
    read_cobra_description: One line summary of a command page
    wrap_examples_in_code_block: Fence indented example lines
"""

EXAMPLES_HEADING = "### Examples"
SECTION_PREFIX = "### "
INDENT = "  "
OPEN_FENCE = INDENT + "```bash"
CLOSE_FENCE = INDENT + "```"


def read_cobra_description(text: str) -> str:
    """Extract the synopsis paragraph of a cobra command page.

    Collects the non-blank lines between the first second-level heading and
    the next third-level heading and joins them into a single line.

    Args:
        text: Raw Markdown of a command page

    Returns:
        The description, or an empty string if the page has no "## " heading

    Example:
        >>> read_cobra_description("## jx-gitops annotate\\n\\nAnnotates resources\\n\\n### Usage\\n")
        'Annotates resources'
    """
    found_heading = False
    lines = []
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue
        if not found_heading:
            found_heading = line.startswith("## ")
            continue
        if line.startswith("###"):
            break
        if line.startswith("#"):
            continue
        lines.append(line)
    return " ".join(lines)


def wrap_examples_in_code_block(text: str) -> str:
    """Wrap indented example commands in a "### Examples" section in code fences.

    Walks the lines once. Inside the examples section each run of indented,
    non-bullet lines is preceded by an opening bash fence and followed by a
    closing fence once a non-blank, non-indented line is reached. A run that
    starts with a backtick already carries its own fence and is left alone.
    Lines are never removed or reordered, so running this on its own output
    changes nothing.

    Args:
        text: Markdown body of a command page

    Returns:
        The body with fence lines inserted

    Example:
        >>> wrap_examples_in_code_block("### Examples\\n\\n  jx upgrade\\n\\n### Options\\n")
        '### Examples\\n\\n  ```bash\\n  jx upgrade\\n\\n  ```\\n### Options\\n'
    """
    lines = text.split("\n")
    output: list[str] = []
    in_examples = False
    fence_open = False
    skip_fence = False

    for line in lines:
        if line.startswith(EXAMPLES_HEADING):
            in_examples = True
        elif in_examples:
            if line.startswith(SECTION_PREFIX):
                in_examples = False

            if line.startswith(INDENT):
                if not fence_open:
                    if line.startswith(INDENT + "`"):
                        fence_open = True
                        skip_fence = True
                    elif not line.startswith(INDENT + "*") and line.strip():
                        output.append(OPEN_FENCE)
                        fence_open = True
            elif line.strip():
                if fence_open and not skip_fence:
                    output.append(CLOSE_FENCE)
                fence_open = False
                skip_fence = False

        output.append(line)

    if fence_open and not skip_fence:
        # unterminated run at end of input
        if output and output[-1] == "":
            output.insert(len(output) - 1, CLOSE_FENCE)
        else:
            output.append(CLOSE_FENCE)

    return "\n".join(output)


__all__ = ["read_cobra_description", "wrap_examples_in_code_block"]
