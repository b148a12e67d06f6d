"""Frontmatter extraction.

Splits a document into its leading ``---`` metadata block and the remaining
body. Parsing is line based (``key: value``), not YAML.
"""

import re
from dataclasses import dataclass, field

from plaza_cms.core.types import FrontmatterValue

_FRONTMATTER_RE = re.compile(r"\A---\n(.*?)\n---\n(.*)\Z", re.DOTALL)
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

Frontmatter = dict[str, FrontmatterValue]


@dataclass
class ParsedDocument:
    """Document split into metadata and body."""

    metadata: Frontmatter = field(default_factory=dict)
    content: str = ""

    @property
    def title(self) -> str | None:
        """Explicit title, if the metadata declares a non-empty one."""
        title = self.metadata.get("title")
        if title is None or title == "":
            return None
        return str(title)

    @property
    def order(self) -> int | float | None:
        """Explicit order, if the metadata declares a numeric one."""
        order = self.metadata.get("order")
        if isinstance(order, (int, float)):
            return order
        return None

    @property
    def description(self) -> str | None:
        description = self.metadata.get("description")
        if description is None or description == "":
            return None
        return str(description)


def parse_frontmatter(markdown: str) -> ParsedDocument:
    """Extract frontmatter metadata from a document.

    The metadata block must open at the very first character. Documents
    without a well-formed block come back unchanged with empty metadata.

    Args:
        markdown: Raw document text

    Returns:
        ParsedDocument with metadata and the body after the closing delimiter
    """
    match = _FRONTMATTER_RE.match(markdown)
    if match is None:
        return ParsedDocument(metadata={}, content=markdown)

    metadata: Frontmatter = {}
    for line in match.group(1).split("\n"):
        colon_index = line.find(":")
        if colon_index <= 0:
            continue
        key = line[:colon_index].strip()
        metadata[key] = _coerce_value(line[colon_index + 1 :].strip())

    return ParsedDocument(metadata=metadata, content=match.group(2))


def _coerce_value(value: str) -> FrontmatterValue:
    """Convert numeric-looking values to numbers."""
    if not _NUMBER_RE.fullmatch(value):
        return value
    if any(c in value for c in ".eE"):
        return float(value)
    return int(value)
