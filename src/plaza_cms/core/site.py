"""Loaded documentation site.

Bundles the document map with the menu, content store and navigation
resolver derived from it. A Site is rebuilt from sources rather than
mutated.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from plaza_cms.core.builder import Declaration, build_menu
from plaza_cms.core.content import ContentStore
from plaza_cms.core.loader import load_documents
from plaza_cms.core.menu import Menu
from plaza_cms.core.navigation import NavigationResolver
from plaza_cms.core.renderer import PageRenderer


@dataclass(frozen=True)
class Site:
    """Menu, documents and navigation for one documentation set."""

    menu: Menu
    store: ContentStore
    resolver: NavigationResolver

    def renderer(self, *, show_title: bool = False) -> PageRenderer:
        """Create a page renderer over this site's documents."""
        return PageRenderer(self.store, self.resolver, show_title=show_title)


class SiteLoader:
    """Loads a Site from a source directory and static menu declarations."""

    def __init__(
        self,
        source_dir: Path,
        *,
        title: str = "",
        subtitle: str | None = None,
        declarations: Iterable[Declaration] = (),
        base_path: str = "",
        use_hash_urls: bool = True,
    ) -> None:
        """Initialize loader.

        Args:
            source_dir: Root directory containing markdown sources
            title: Menu title
            subtitle: Optional menu subtitle
            declarations: Static folders and component items
            base_path: Prefix for path-based URLs
            use_hash_urls: Link documents with "#path" hrefs
        """
        self._source_dir = source_dir
        self._title = title
        self._subtitle = subtitle
        self._declarations = list(declarations)
        self._base_path = base_path
        self._use_hash_urls = use_hash_urls

    @property
    def source_dir(self) -> Path:
        """Root directory containing markdown sources."""
        return self._source_dir

    def load(self) -> Site:
        """Read the documents and build the site."""
        documents = load_documents(self._source_dir)
        return build_site(
            documents,
            title=self._title,
            subtitle=self._subtitle,
            declarations=self._declarations,
            base_path=self._base_path,
            use_hash_urls=self._use_hash_urls,
        )


def build_site(
    documents: dict[str, str],
    *,
    title: str = "",
    subtitle: str | None = None,
    declarations: Iterable[Declaration] = (),
    base_path: str = "",
    use_hash_urls: bool = True,
) -> Site:
    """Build a Site from an already loaded document map."""
    return Site(
        menu=build_menu(documents, title=title, subtitle=subtitle, declarations=declarations),
        store=ContentStore(documents),
        resolver=NavigationResolver(base_path, use_hash_urls=use_hash_urls),
    )
