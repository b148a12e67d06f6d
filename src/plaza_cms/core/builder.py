"""Menu builder.

Composes document metadata and static folder declarations into a sorted
Menu. Top-level documents become file items directly; folders and their
children are configuration, with missing labels and orders derived from the
referenced documents using the same rules as top-level items.
"""

import logging
import posixpath
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from plaza_cms.core.frontmatter import ParsedDocument, parse_frontmatter
from plaza_cms.core.labels import file_to_label, parse_order_prefix
from plaza_cms.core.menu import (
    DEFAULT_ORDER,
    ComponentMenuItem,
    FileMenuItem,
    Menu,
    MenuFolder,
    MenuNode,
    sort_nodes,
)

logger = logging.getLogger(__name__)


@dataclass
class FileDeclaration:
    """Declared document leaf. Unset fields are derived from the document."""

    path: str
    id: str | None = None
    label: str | None = None
    order: int | float | None = None
    description: str | None = None


@dataclass
class ComponentDeclaration:
    """Declared leaf rendered by the host application."""

    id: str
    label: str
    route: str
    order: int | float | None = None
    description: str | None = None


@dataclass
class FolderDeclaration:
    """Declared folder with its children."""

    id: str
    title: str
    order: int | float | None = None
    items: list["Declaration"] = field(default_factory=list)


Declaration = FileDeclaration | ComponentDeclaration | FolderDeclaration


class MenuBuilder:
    """Builder for constructing Menu instances."""

    def __init__(
        self,
        documents: Mapping[str, str],
        *,
        title: str = "",
        subtitle: str | None = None,
    ) -> None:
        """Initialize builder.

        Args:
            documents: Document map from content key to raw document text
            title: Menu title
            subtitle: Optional menu subtitle
        """
        self._documents = documents
        self._title = title
        self._subtitle = subtitle
        self._sections: list[MenuNode] = []

    def file_item(
        self,
        doc_id: str,
        *,
        item_id: str | None = None,
        label: str | None = None,
        order: int | float | None = None,
        description: str | None = None,
    ) -> FileMenuItem:
        """Create a file item for a document.

        Label resolves to the explicit value, then the frontmatter title, then
        a label derived from the file name. Order resolves to the explicit
        value, then the frontmatter order, then the name's numeric prefix,
        then DEFAULT_ORDER.

        Args:
            doc_id: Content key of the document
            item_id: Menu id (defaults to the content key)
            label: Explicit label
            order: Explicit order
            description: Explicit description

        Returns:
            FileMenuItem pointing at the document
        """
        text = self._documents.get(doc_id)
        if text is None:
            logger.debug(f"No document for menu path {doc_id!r}, deriving label from name")
            parsed = ParsedDocument()
        else:
            parsed = parse_frontmatter(text)

        name = posixpath.basename(doc_id)
        prefix_order = parse_order_prefix(name).order

        if order is None:
            order = parsed.order
        if order is None:
            order = prefix_order if prefix_order is not None else DEFAULT_ORDER

        return FileMenuItem(
            id=item_id or doc_id,
            label=label or parsed.title or file_to_label(name),
            path=doc_id,
            description=description if description is not None else parsed.description,
            order=order,
        )

    def add_document(self, doc_id: str) -> FileMenuItem:
        """Add a top-level file item for a document."""
        item = self.file_item(doc_id)
        self._sections.append(item)
        return item

    def add_documents(self, doc_ids: Iterable[str] | None = None) -> list[FileMenuItem]:
        """Add top-level file items.

        Args:
            doc_ids: Content keys to add. Defaults to every top-level key
                     (keys without a "/") in document map order.

        Returns:
            The added items, in the order they were added
        """
        if doc_ids is None:
            doc_ids = [doc_id for doc_id in self._documents if "/" not in doc_id]
        return [self.add_document(doc_id) for doc_id in doc_ids]

    def add_component(self, declaration: ComponentDeclaration) -> ComponentMenuItem:
        """Add a top-level component item."""
        item = self._component_item(declaration)
        self._sections.append(item)
        return item

    def add_folder(self, declaration: FolderDeclaration) -> MenuFolder:
        """Add a top-level folder built from its declaration."""
        folder = self._folder(declaration)
        self._sections.append(folder)
        return folder

    def add(self, declaration: Declaration) -> MenuNode:
        """Add any declared node at the top level."""
        node = self._node(declaration)
        self._sections.append(node)
        return node

    def build(self) -> Menu:
        """Build the Menu with every sibling list sorted by order."""
        return Menu(
            title=self._title,
            subtitle=self._subtitle,
            sections=tuple(sort_nodes(self._sections)),
        )

    def _node(self, declaration: Declaration) -> MenuNode:
        match declaration:
            case FileDeclaration():
                return self.file_item(
                    declaration.path,
                    item_id=declaration.id,
                    label=declaration.label,
                    order=declaration.order,
                    description=declaration.description,
                )
            case ComponentDeclaration():
                return self._component_item(declaration)
            case FolderDeclaration():
                return self._folder(declaration)

    def _folder(self, declaration: FolderDeclaration) -> MenuFolder:
        children = [self._node(item) for item in declaration.items]
        return MenuFolder(
            id=declaration.id,
            title=declaration.title,
            order=declaration.order,
            children=tuple(sort_nodes(children)),
        )

    def _component_item(self, declaration: ComponentDeclaration) -> ComponentMenuItem:
        return ComponentMenuItem(
            id=declaration.id,
            label=declaration.label,
            route=declaration.route,
            description=declaration.description,
            order=declaration.order,
        )


def build_menu(
    documents: Mapping[str, str],
    *,
    title: str = "",
    subtitle: str | None = None,
    declarations: Iterable[Declaration] = (),
) -> Menu:
    """Build a menu from top-level documents plus declared nodes.

    Args:
        documents: Document map from content key to raw document text
        title: Menu title
        subtitle: Optional menu subtitle
        declarations: Static folders and component items

    Returns:
        Sorted Menu
    """
    builder = MenuBuilder(documents, title=title, subtitle=subtitle)
    builder.add_documents()
    for declaration in declarations:
        builder.add(declaration)
    return builder.build()
