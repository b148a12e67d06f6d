"""Ordering prefixes and display labels derived from document identifiers."""

import re
from typing import NamedTuple

_ORDER_PREFIX_RE = re.compile(r"^(\d+)_(.+)$", re.DOTALL)


class OrderPrefix(NamedTuple):
    """Result of splitting a leading ``NN_`` token off a name."""

    order: int | None
    name: str


def parse_order_prefix(name: str) -> OrderPrefix:
    """Split a numeric ordering prefix from a name.

    Args:
        name: Identifier such as "01_philosophy"

    Returns:
        OrderPrefix(1, "philosophy"), or OrderPrefix(None, name) when the
        name does not start with digits followed by an underscore
    """
    match = _ORDER_PREFIX_RE.match(name)
    if match:
        return OrderPrefix(int(match.group(1)), match.group(2))
    return OrderPrefix(None, name)


def to_title_case(name: str) -> str:
    """Convert kebab-case to Title Case.

    Underscores become spaces but only hyphen-separated words are
    capitalized: "getting-started" -> "Getting Started",
    "snake_case" -> "Snake case".
    """
    words = name.replace("_", " ").split("-")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def file_to_label(filename: str) -> str:
    """Generate a menu label from a file name or document id."""
    name = filename.removesuffix(".md")
    name = parse_order_prefix(name).name
    return to_title_case(name)
