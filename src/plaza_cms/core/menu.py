"""Menu tree model.

A menu is a tree of folders and leaves. Leaves are either document backed
(``file``) or rendered by the host application (``component``). Every node
carries a ``type`` tag so the tree serializes as a discriminated union.
"""

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Literal, TypedDict

# Sort position for nodes that declare no order. Nodes with an explicit order
# above this value sort after unordered ones.
DEFAULT_ORDER = 999


class MenuNodeDict(TypedDict, total=False):
    """Dictionary representation of any menu node."""

    type: str
    id: str
    label: str
    title: str
    description: str
    order: int | float
    path: str
    route: str
    children: list["MenuNodeDict"]


class MenuDict(TypedDict, total=False):
    """Dictionary representation of a menu."""

    title: str
    subtitle: str
    sections: list[MenuNodeDict]


@dataclass(frozen=True)
class FileMenuItem:
    """Leaf rendered from a document in the content store."""

    id: str
    label: str
    path: str
    description: str | None = None
    order: int | float | None = None
    type: Literal["file"] = field(default="file", init=False)

    def to_dict(self) -> MenuNodeDict:
        """Convert to dictionary for JSON serialization."""
        result: MenuNodeDict = {"type": self.type, "id": self.id, "label": self.label}
        _add_optional(result, self.description, self.order)
        result["path"] = self.path
        return result


@dataclass(frozen=True)
class ComponentMenuItem:
    """Leaf rendered by the host application under its own route."""

    id: str
    label: str
    route: str
    description: str | None = None
    order: int | float | None = None
    type: Literal["component"] = field(default="component", init=False)

    def to_dict(self) -> MenuNodeDict:
        """Convert to dictionary for JSON serialization."""
        result: MenuNodeDict = {"type": self.type, "id": self.id, "label": self.label}
        _add_optional(result, self.description, self.order)
        result["route"] = self.route
        return result


MenuItem = FileMenuItem | ComponentMenuItem


@dataclass(frozen=True)
class MenuFolder:
    """Group of menu nodes. Never renders content itself."""

    id: str
    title: str
    children: "tuple[MenuNode, ...]" = ()
    order: int | float | None = None
    type: Literal["folder"] = field(default="folder", init=False)

    def to_dict(self) -> MenuNodeDict:
        """Convert to dictionary for JSON serialization."""
        result: MenuNodeDict = {"type": self.type, "id": self.id, "title": self.title}
        if self.order is not None:
            result["order"] = self.order
        result["children"] = [child.to_dict() for child in self.children]
        return result


MenuNode = MenuItem | MenuFolder


@dataclass(frozen=True)
class Menu:
    """Root of the navigation tree."""

    title: str
    sections: tuple[MenuNode, ...] = ()
    subtitle: str | None = None

    def to_dict(self) -> MenuDict:
        """Convert to dictionary for JSON serialization."""
        result: MenuDict = {"title": self.title}
        if self.subtitle is not None:
            result["subtitle"] = self.subtitle
        result["sections"] = [node.to_dict() for node in self.sections]
        return result


def _add_optional(
    result: MenuNodeDict,
    description: str | None,
    order: int | float | None,
) -> None:
    if description is not None:
        result["description"] = description
    if order is not None:
        result["order"] = order


def sort_key(node: MenuNode) -> int | float:
    """Order used for display sorting, with the default for unordered nodes."""
    return DEFAULT_ORDER if node.order is None else node.order


def sort_nodes(nodes: Iterable[MenuNode]) -> list[MenuNode]:
    """Sort sibling nodes by order.

    The sort is stable: nodes with equal order keep their input order.
    """
    return sorted(nodes, key=sort_key)


def count_items(node: MenuNode) -> int:
    """Count the leaves under a node. Folders themselves count as zero."""
    match node:
        case MenuFolder():
            return sum(count_items(child) for child in node.children)
        case FileMenuItem() | ComponentMenuItem():
            return 1


def walk(nodes: Iterable[MenuNode]) -> Iterator[MenuNode]:
    """Iterate over nodes depth-first, parents before their children."""
    for node in nodes:
        yield node
        if isinstance(node, MenuFolder):
            yield from walk(node.children)


def find_node(menu: Menu, node_id: str) -> MenuNode | None:
    """Find a node anywhere in the menu by id."""
    for node in walk(menu.sections):
        if node.id == node_id:
            return node
    return None


def duplicate_ids(menu: Menu) -> list[str]:
    """Return ids used by more than one node, in first-seen order.

    Unique ids are a requirement on the menu definition; this is a check
    for tests and tooling, the builder does not enforce it.
    """
    counts = Counter(node.id for node in walk(menu.sections))
    return [node_id for node_id, count in counts.items() if count > 1]
