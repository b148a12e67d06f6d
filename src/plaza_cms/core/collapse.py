"""Persisted collapsed/expanded state for menu folders.

State is a JSON object mapping folder id to a boolean, stored under one key
per namespace in an injected key-value store:

    .plaza-cms/
    ├── .gitignore
    └── plaza-cms-collapsed.json     # {"examples": true}

Storage problems never surface to callers: unreadable or malformed state
loads as "nothing collapsed" and failed writes are logged and dropped.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "plaza-cms-collapsed"


class KeyValueStore(Protocol):
    """String store addressed by key."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process key-value store."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class FileStore:
    """Key-value store keeping one JSON file per key in a state directory."""

    _GITIGNORE_CONTENT = "# Ignore everything in this directory\n*\n"

    def __init__(self, state_dir: Path) -> None:
        """Initialize store with directory path.

        Args:
            state_dir: Directory for state files (e.g., .plaza-cms/)
        """
        self._state_dir = state_dir

    @property
    def state_dir(self) -> Path:
        """Directory holding the state files."""
        return self._state_dir

    def _ensure_state_dir(self) -> None:
        """Create state directory with .gitignore if it doesn't exist."""
        if not self._state_dir.exists():
            self._state_dir.mkdir(parents=True, exist_ok=True)
            gitignore_path = self._state_dir / ".gitignore"
            gitignore_path.write_text(self._GITIGNORE_CONTENT, encoding="utf-8")

    def _path(self, key: str) -> Path:
        return self._state_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        """Read the stored value.

        Args:
            key: Storage key

        Returns:
            Stored text, or None if missing or unreadable
        """
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read state file {path}: {e}")
            return None

    def set(self, key: str, value: str) -> None:
        """Write a value, creating the state directory on first use."""
        self._ensure_state_dir()
        self._path(key).write_text(value, encoding="utf-8")


class CollapsedSections:
    """Collapsed flags for folders, persisted under one storage key.

    State is read once on construction and written back after every toggle.
    Folders without an entry are expanded.
    """

    def __init__(self, store: KeyValueStore, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        """Initialize and load persisted state.

        Args:
            store: Backing key-value store
            storage_key: Namespace for this navigation's state
        """
        self._store = store
        self._storage_key = storage_key
        self._collapsed = self._load()

    @property
    def storage_key(self) -> str:
        return self._storage_key

    @property
    def collapsed(self) -> dict[str, bool]:
        """Copy of the current folder id to collapsed mapping."""
        return dict(self._collapsed)

    def is_collapsed(self, section_id: str) -> bool:
        """Whether a folder is collapsed. Unknown folders are expanded."""
        return self._collapsed.get(section_id, False)

    def toggle(self, section_id: str) -> bool:
        """Flip a folder's collapsed state and persist it.

        Returns:
            The new collapsed state
        """
        collapsed = not self._collapsed.get(section_id, False)
        self._collapsed[section_id] = collapsed
        self._save()
        return collapsed

    def _load(self) -> dict[str, bool]:
        try:
            stored = self._store.get(self._storage_key)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load collapsed sections {self._storage_key!r}: {e}")
            return {}
        if not stored:
            return {}

        try:
            data = json.loads(stored)
        except json.JSONDecodeError:
            logger.warning(f"Ignoring malformed collapsed sections state {self._storage_key!r}")
            return {}

        if not isinstance(data, dict):
            logger.warning(
                f"Ignoring collapsed sections state {self._storage_key!r}: not an object",
            )
            return {}

        return {key: value for key, value in data.items() if isinstance(value, bool)}

    def _save(self) -> None:
        try:
            self._store.set(self._storage_key, json.dumps(self._collapsed))
        except OSError as e:
            logger.warning(f"Could not save collapsed sections {self._storage_key!r}: {e}")
