"""Document lookup with index fallback.

The content store owns the loaded document map. Paths without a document
resolve to the index document so the host always has something to render.
"""

import logging
import posixpath
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from plaza_cms.core.frontmatter import Frontmatter, parse_frontmatter
from plaza_cms.core.types import ContentKey

logger = logging.getLogger(__name__)

INDEX_KEY = "index"
_INDEX_NAMES = ("index", "README")


@dataclass(frozen=True)
class ContentEntry:
    """Loaded document with its parsed frontmatter."""

    id: str
    path: ContentKey
    content: str
    frontmatter: Frontmatter = field(default_factory=dict)
    body: str = ""


class ContentStore:
    """Read-only document map with index fallback."""

    def __init__(self, documents: Mapping[str, str], *, index_key: str = INDEX_KEY) -> None:
        """Initialize store.

        Args:
            documents: Document map from content key to raw document text
            index_key: Key of the document served for unknown paths
        """
        self._documents = dict(documents)
        self._index_key = index_key

    @property
    def documents(self) -> Mapping[str, str]:
        return self._documents

    def __contains__(self, path: object) -> bool:
        return path in self._documents

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def has(self, path: str) -> bool:
        return path in self._documents

    def keys(self) -> list[ContentKey]:
        """Content keys in load order."""
        return [ContentKey(key) for key in self._documents]

    def get(self, path: str) -> ContentEntry:
        """Get the document for a path, falling back to the index document.

        Args:
            path: Content key (e.g., "getting-started")

        Returns:
            ContentEntry for the path. The entry's path is the index key when
            the fallback was used, and its content is empty when there is no
            index document either.
        """
        key = path
        if key not in self._documents:
            logger.debug(f"No document for {path!r}, falling back to {self._index_key!r}")
            key = self._index_key

        text = self._documents.get(key, "")
        parsed = parse_frontmatter(text)
        return ContentEntry(
            id=key,
            path=ContentKey(key),
            content=text,
            frontmatter=parsed.metadata,
            body=parsed.content,
        )

    def resolve_link(self, from_key: str, target: str) -> ContentKey | None:
        """Resolve a relative Markdown link to a content key.

        The target is joined to the directory of from_key with posix
        semantics. A trailing ".md" is dropped and README/index files map to
        their directory's index document.

        Args:
            from_key: Content key of the linking document
            target: Relative link target without anchor (e.g., "../color.md")

        Returns:
            Content key if a document exists for the target, None otherwise
        """
        joined = posixpath.normpath(posixpath.join(posixpath.dirname(from_key), target))
        if joined == ".." or joined.startswith("../"):
            return None

        key = joined.removesuffix(".md")
        directory, name = posixpath.split(key)
        if name in _INDEX_NAMES:
            key = self._index_for(directory)

        for candidate in (key, self._index_for(key)):
            if candidate in self._documents:
                return ContentKey(candidate)
        return None

    def _index_for(self, directory: str) -> str:
        if directory in ("", "."):
            return self._index_key
        return f"{directory}/{self._index_key}"
