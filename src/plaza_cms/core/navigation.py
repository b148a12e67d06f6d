"""Navigation resolution and the navigation view model.

NavigationResolver decides, for a menu item and the host's current path,
where the item links to and whether it is active. ContentNav builds the
per-node view state for a whole menu: hrefs, active flags, folder counts and
collapsed state. Neither performs navigation; selecting a leaf hands its
target to a callback supplied by the host.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal, TypedDict

from plaza_cms.core.collapse import CollapsedSections
from plaza_cms.core.menu import (
    ComponentMenuItem,
    FileMenuItem,
    Menu,
    MenuFolder,
    MenuItem,
    MenuNode,
    count_items,
    find_node,
    walk,
)
from plaza_cms.core.types import ContentKey, NavigationTarget

INDEX_PATH = "index"

NavVariant = Literal["windowed", "borderless"]


class NavigationResolver:
    """Computes hrefs, active state and navigation targets for menu items."""

    def __init__(self, base_path: str = "", *, use_hash_urls: bool = True) -> None:
        """Initialize resolver.

        Args:
            base_path: Prefix for path-based URLs (e.g., "/guide"), empty for none
            use_hash_urls: Link file items as "#path" instead of "/base/path"
        """
        self._base_path = base_path
        self._use_hash_urls = use_hash_urls

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def use_hash_urls(self) -> bool:
        return self._use_hash_urls

    def href(self, item: MenuItem) -> str:
        """Link target for an item.

        Component items link to their route. File items link to "#path" with
        hash URLs; otherwise to the base path for the index document and to
        "<base>/<path>" for everything else.
        """
        match item:
            case ComponentMenuItem():
                return item.route
            case FileMenuItem():
                return self.file_href(item.path)

    def file_href(self, path: str) -> str:
        """Link target for a document path."""
        if self._use_hash_urls:
            return f"#{path}"
        if path == INDEX_PATH:
            return self._base_path or "/"
        return f"{self._base_path}/{path}"

    def is_active(self, node: MenuNode, current_path: str) -> bool:
        """Whether a node should render as the current page.

        Components are active on their route and on any sub-route. The index
        document is active on the base path, the base path with a trailing
        slash, and the literal "index". Other documents are active on their
        bare path and, with a base path, on "<base>/<path>". Folders are
        never active.
        """
        match node:
            case ComponentMenuItem():
                return current_path == node.route or current_path.startswith(f"{node.route}/")
            case FileMenuItem():
                if node.path == INDEX_PATH:
                    return current_path in (
                        self._base_path,
                        f"{self._base_path}/",
                        INDEX_PATH,
                    )
                if not self._base_path:
                    return current_path == node.path
                return current_path in (node.path, f"{self._base_path}/{node.path}")
            case MenuFolder():
                return False

    def navigation_target(self, item: MenuItem) -> NavigationTarget:
        """Identifier handed to the host when an item is activated."""
        match item:
            case ComponentMenuItem():
                return NavigationTarget(item.route)
            case FileMenuItem():
                return NavigationTarget(item.path)

    def activate(
        self,
        item: MenuItem,
        on_navigate: Callable[[NavigationTarget], object],
    ) -> NavigationTarget:
        """Pass an item's navigation target to the host callback."""
        target = self.navigation_target(item)
        on_navigate(target)
        return target

    def content_key(self, current_path: str) -> ContentKey:
        """Map a host path back to a document key.

        Strips a leading "#", the base path and surrounding slashes.
        An empty remainder is the index document.

        Args:
            current_path: Host path (e.g., "/guide/color", "#color", "/")

        Returns:
            Content key (e.g., "color", "index")
        """
        path = current_path.removeprefix("#")
        if self._base_path and (
            path == self._base_path or path.startswith(f"{self._base_path}/")
        ):
            path = path[len(self._base_path) :]
        path = path.strip("/")
        return ContentKey(path or INDEX_PATH)


class NavNodeDict(TypedDict, total=False):
    """Dictionary representation of a navigation view node."""

    type: str
    id: str
    label: str
    href: str
    active: bool
    description: str
    collapsed: bool
    count: int
    children: list["NavNodeDict"]


@dataclass
class NavNode:
    """View state of one menu node for rendering."""

    type: str
    id: str
    label: str
    href: str | None = None
    active: bool = False
    description: str | None = None
    collapsible: bool = False
    collapsed: bool = False
    count: int | None = None
    children: list["NavNode"] = field(default_factory=list)

    def to_dict(self) -> NavNodeDict:
        """Convert to dictionary for JSON serialization."""
        result: NavNodeDict = {"type": self.type, "id": self.id, "label": self.label}
        if self.type == "folder":
            if self.collapsible:
                result["collapsed"] = self.collapsed
            if self.count is not None:
                result["count"] = self.count
            result["children"] = [child.to_dict() for child in self.children]
            return result

        if self.href is not None:
            result["href"] = self.href
        result["active"] = self.active
        if self.description is not None:
            result["description"] = self.description
        return result


class ContentNav:
    """Navigation view over a menu for one current path.

    Windowed navigation has collapsible folders with item counts by default;
    borderless navigation shows static folder headers and item descriptions.
    Collapse state is only read and written when folders are collapsible.
    """

    def __init__(
        self,
        menu: Menu,
        resolver: NavigationResolver,
        current_path: str,
        *,
        collapse: CollapsedSections | None = None,
        variant: NavVariant = "windowed",
        collapsible: bool | None = None,
    ) -> None:
        """Initialize navigation view.

        Args:
            menu: Menu to present
            resolver: Resolver for hrefs and active state
            current_path: Host's current path
            collapse: Persisted collapse state, None to keep every folder expanded
            variant: "windowed" or "borderless"
            collapsible: Override whether folders collapse (default: windowed only)
        """
        self._menu = menu
        self._resolver = resolver
        self._current_path = current_path
        self._collapse = collapse
        self._variant = variant
        self._collapsible = collapsible if collapsible is not None else variant != "borderless"

    @property
    def menu(self) -> Menu:
        return self._menu

    @property
    def collapsible(self) -> bool:
        return self._collapsible

    def nodes(self) -> list[NavNode]:
        """Build the view state for every top-level section."""
        return [self._nav_node(node) for node in self._menu.sections]

    def active_items(self) -> list[MenuItem]:
        """Leaves that are active for the current path, in menu order."""
        return [
            node
            for node in walk(self._menu.sections)
            if not isinstance(node, MenuFolder)
            and self._resolver.is_active(node, self._current_path)
        ]

    def select(
        self,
        node_id: str,
        on_navigate: Callable[[NavigationTarget], object],
    ) -> NavigationTarget | None:
        """Handle a click on a node.

        Leaves pass their navigation target to on_navigate. Folders toggle
        their collapsed state when folders are collapsible.

        Returns:
            The navigation target for leaves, None for folders and unknown ids
        """
        node = find_node(self._menu, node_id)
        match node:
            case FileMenuItem() | ComponentMenuItem():
                return self._resolver.activate(node, on_navigate)
            case MenuFolder():
                if self._collapsible and self._collapse is not None:
                    self._collapse.toggle(node.id)
                return None
            case None:
                return None

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, object] = {"variant": self._variant}
        if self._menu.title:
            result["title"] = self._menu.title
        if self._menu.subtitle:
            result["subtitle"] = self._menu.subtitle
        result["sections"] = [node.to_dict() for node in self.nodes()]
        return result

    def _is_collapsed(self, folder: MenuFolder) -> bool:
        if not self._collapsible or self._collapse is None:
            return False
        return self._collapse.is_collapsed(folder.id)

    def _nav_node(self, node: MenuNode) -> NavNode:
        match node:
            case MenuFolder():
                collapsed = self._is_collapsed(node)
                children = [] if collapsed else [self._nav_node(child) for child in node.children]
                # Counts only appear on collapsible windowed headers
                show_count = self._collapsible and self._variant != "borderless"
                return NavNode(
                    type=node.type,
                    id=node.id,
                    label=node.title,
                    collapsible=self._collapsible,
                    collapsed=collapsed,
                    count=count_items(node) if show_count else None,
                    children=children,
                )
            case FileMenuItem() | ComponentMenuItem():
                return NavNode(
                    type=node.type,
                    id=node.id,
                    label=node.label,
                    href=self._resolver.href(node),
                    active=self._resolver.is_active(node, self._current_path),
                    description=node.description if self._variant == "borderless" else None,
                )
