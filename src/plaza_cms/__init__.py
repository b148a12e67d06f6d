"""Content and navigation engine for Plaza documentation sites.

Builds an ordered menu from frontmatter-annotated Markdown documents,
resolves hrefs and active state for the host's current path, persists
collapsed folders and renders the selected document.
"""

from .core.builder import (
    ComponentDeclaration,
    FileDeclaration,
    FolderDeclaration,
    MenuBuilder,
    build_menu,
)
from .core.collapse import CollapsedSections, FileStore, KeyValueStore, MemoryStore
from .core.content import ContentEntry, ContentStore
from .core.frontmatter import Frontmatter, ParsedDocument, parse_frontmatter
from .core.labels import file_to_label, parse_order_prefix, to_title_case
from .core.links import rewrite_markdown_links
from .core.menu import (
    DEFAULT_ORDER,
    ComponentMenuItem,
    FileMenuItem,
    Menu,
    MenuFolder,
    MenuItem,
    MenuNode,
    count_items,
    sort_nodes,
)
from .core.navigation import ContentNav, NavigationResolver, NavVariant
from .core.renderer import PageRenderer, RenderResult

__all__ = [
    "DEFAULT_ORDER",
    "CollapsedSections",
    "ComponentDeclaration",
    "ComponentMenuItem",
    "ContentEntry",
    "ContentNav",
    "ContentStore",
    "FileDeclaration",
    "FileMenuItem",
    "FileStore",
    "FolderDeclaration",
    "Frontmatter",
    "KeyValueStore",
    "MemoryStore",
    "Menu",
    "MenuBuilder",
    "MenuFolder",
    "MenuItem",
    "MenuNode",
    "NavVariant",
    "NavigationResolver",
    "PageRenderer",
    "ParsedDocument",
    "RenderResult",
    "build_menu",
    "count_items",
    "file_to_label",
    "parse_frontmatter",
    "parse_order_prefix",
    "rewrite_markdown_links",
    "sort_nodes",
    "to_title_case",
]
