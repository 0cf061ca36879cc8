"""plugin-docs - Jenkins X plugin command reference aggregator

Philosophy:
- Relocate and reformat, never author documentation
- Sequential and deterministic (re-running produces identical pages)
- Fail fast with the failing path in the message

Clones the jenkins-x-plugins repositories, reads the cobra generated
Markdown under each plugin's docs/cmd directory and rewrites it into the
Hugo content tree of the Jenkins X website.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
