"""Page rendering for the current path.

Resolves the document for a host path, strips its frontmatter, rewrites
relative links to navigable hrefs and hands the body to mistune.
"""

import logging
from dataclasses import dataclass
from html import escape

import mistune

from plaza_cms.core.content import ContentStore
from plaza_cms.core.links import PathResolver, rewrite_markdown_links
from plaza_cms.core.navigation import NavigationResolver
from plaza_cms.core.types import ContentKey

logger = logging.getLogger(__name__)

MARKDOWN_PLUGINS = ["table", "strikethrough", "task_lists", "url"]


@dataclass
class RenderResult:
    """Result of rendering the document for a path."""

    key: ContentKey
    path: ContentKey
    title: str | None
    markdown: str
    html: str

    @property
    def fallback(self) -> bool:
        """Whether the index document was served in place of a missing one."""
        return self.key != self.path


class PageRenderer:
    """Renders documents from a content store.

    Raw HTML in documents is passed through, matching GitHub-flavoured
    rendering of the source files.
    """

    def __init__(
        self,
        store: ContentStore,
        resolver: NavigationResolver,
        *,
        show_title: bool = False,
    ) -> None:
        """Initialize renderer.

        Args:
            store: Content store holding the documents
            resolver: Navigation resolver used for link hrefs and path mapping
            show_title: Prepend the frontmatter title as a heading
        """
        self._store = store
        self._resolver = resolver
        self._show_title = show_title
        self._markdown = mistune.create_markdown(escape=False, plugins=MARKDOWN_PLUGINS)

    def render(self, current_path: str) -> RenderResult:
        """Render the document for a host path.

        Args:
            current_path: Host path (e.g., "/guide/color", "#color", "color")

        Returns:
            RenderResult with the rewritten markdown body and HTML
        """
        key = self._resolver.content_key(current_path)
        entry = self._store.get(key)
        if entry.path != key:
            logger.info(f"Page {key!r} not found, rendering {entry.path!r}")

        body = rewrite_markdown_links(entry.body, entry.path, self.link_resolver())
        html = self._markdown(body)

        title = entry.frontmatter.get("title")
        title = str(title) if title not in (None, "") else None
        if self._show_title and title:
            html = f'<h1 class="plaza-title">{escape(title)}</h1>\n{html}'

        return RenderResult(
            key=key,
            path=entry.path,
            title=title,
            markdown=body,
            html=html,
        )

    def link_resolver(self) -> PathResolver:
        """Path resolver mapping relative document links to hrefs."""

        def _resolve(from_key: str, target: str) -> str | None:
            key = self._store.resolve_link(from_key, target)
            if key is None:
                return None
            return self._resolver.file_href(key)

        return _resolve
