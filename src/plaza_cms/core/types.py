"""Core type definitions."""

from typing import NewType

# Key into the document map (e.g., "index", "examples/basic-setup")
# Distinct from host paths to catch type mismatches
ContentKey = NewType("ContentKey", str)

# Value passed to the host's navigation callback: a content key or a route
NavigationTarget = NewType("NavigationTarget", str)

# Frontmatter values after numeric coercion
FrontmatterValue = str | int | float
