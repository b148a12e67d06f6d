"""Tests for persisted collapsed sections."""

import json
from pathlib import Path

import pytest

from plaza_cms.core.collapse import (
    DEFAULT_STORAGE_KEY,
    CollapsedSections,
    FileStore,
    MemoryStore,
)


class _FailingStore:
    """Store whose reads and writes always fail."""

    def get(self, key: str) -> str | None:
        raise OSError("storage unavailable")

    def set(self, key: str, value: str) -> None:
        raise OSError("storage unavailable")


class TestCollapsedSections:
    """Tests for CollapsedSections."""

    def test_fresh_namespace_is_expanded(self) -> None:
        """Report folders as expanded when nothing is stored."""
        sections = CollapsedSections(MemoryStore())

        assert sections.is_collapsed("design-guide") is False
        assert sections.collapsed == {}

    def test_toggle_flips_and_persists(self) -> None:
        """Flip state and write it after every toggle."""
        store = MemoryStore()
        sections = CollapsedSections(store)

        assert sections.toggle("design-guide") is True
        assert sections.is_collapsed("design-guide")
        assert json.loads(store.get(DEFAULT_STORAGE_KEY) or "") == {"design-guide": True}

        assert sections.toggle("design-guide") is False
        assert json.loads(store.get(DEFAULT_STORAGE_KEY) or "") == {"design-guide": False}

    def test_state_survives_reload(self) -> None:
        """Load persisted state in a new instance."""
        store = MemoryStore()
        CollapsedSections(store).toggle("design-guide")

        reloaded = CollapsedSections(store)

        assert reloaded.is_collapsed("design-guide")

    def test_namespaces_are_independent(self) -> None:
        """Keep state separate per storage key."""
        store = MemoryStore()
        CollapsedSections(store, "guide-nav").toggle("examples")

        other = CollapsedSections(store, "cms-nav")

        assert not other.is_collapsed("examples")
        assert other.storage_key == "cms-nav"

    @pytest.mark.parametrize(
        "stored",
        ["{not json", "[1, 2]", '"collapsed"', "null", ""],
    )
    def test_corrupt_state_loads_empty(self, stored: str) -> None:
        """Treat unreadable state as nothing collapsed."""
        store = MemoryStore({DEFAULT_STORAGE_KEY: stored})

        sections = CollapsedSections(store)

        assert sections.collapsed == {}

    def test_ignores_non_boolean_values(self) -> None:
        """Drop entries that aren't booleans."""
        store = MemoryStore({DEFAULT_STORAGE_KEY: '{"a": true, "b": "yes", "c": 1, "d": false}'})

        sections = CollapsedSections(store)

        assert sections.collapsed == {"a": True, "d": False}

    def test_decode_errors_are_not_raised(self) -> None:
        """Treat a store that fails to decode as nothing collapsed."""

        class _UndecodableStore(MemoryStore):
            def get(self, key: str) -> str | None:
                return b"\xff".decode("utf-8")

        sections = CollapsedSections(_UndecodableStore())

        assert sections.collapsed == {}

    def test_storage_errors_are_not_raised(self) -> None:
        """Keep working in memory when the store fails."""
        sections = CollapsedSections(_FailingStore())

        assert sections.toggle("examples") is True
        assert sections.is_collapsed("examples")

    def test_collapsed_returns_copy(self) -> None:
        """Return a copy that doesn't alias internal state."""
        sections = CollapsedSections(MemoryStore())
        sections.toggle("examples")

        snapshot = sections.collapsed
        snapshot["examples"] = False

        assert sections.is_collapsed("examples")


class TestFileStore:
    """Tests for FileStore."""

    def test_get_missing_returns_none(self, tmp_path: Path) -> None:
        """Return None for keys never written."""
        store = FileStore(tmp_path / ".plaza-cms")

        assert store.get("nav") is None

    def test_set_creates_directory_with_gitignore(self, tmp_path: Path) -> None:
        """Create the state directory and a .gitignore on first write."""
        state_dir = tmp_path / ".plaza-cms"
        store = FileStore(state_dir)

        store.set("nav", '{"a": true}')

        assert (state_dir / "nav.json").read_text() == '{"a": true}'
        assert (state_dir / ".gitignore").exists()
        assert store.get("nav") == '{"a": true}'

    def test_collapsed_sections_survive_new_store(self, tmp_path: Path) -> None:
        """Persist across store instances pointing at the same directory."""
        state_dir = tmp_path / ".plaza-cms"
        CollapsedSections(FileStore(state_dir), "guide").toggle("design-guide")

        reloaded = CollapsedSections(FileStore(state_dir), "guide")

        assert reloaded.is_collapsed("design-guide")

    def test_corrupt_file_loads_empty(self, tmp_path: Path) -> None:
        """Ignore a damaged state file."""
        state_dir = tmp_path / ".plaza-cms"
        state_dir.mkdir()
        (state_dir / "guide.json").write_text("{\"design-guide\": tr")

        sections = CollapsedSections(FileStore(state_dir), "guide")

        assert sections.collapsed == {}

    @pytest.mark.parametrize("content", [b"\xff\xfe", b'{"a": \xff\xfe true}'])
    def test_undecodable_file_loads_empty(self, tmp_path: Path, content: bytes) -> None:
        """Ignore a state file that isn't valid UTF-8."""
        state_dir = tmp_path / ".plaza-cms"
        state_dir.mkdir()
        (state_dir / "guide.json").write_bytes(content)

        store = FileStore(state_dir)
        sections = CollapsedSections(store, "guide")

        assert store.get("guide") is None
        assert sections.collapsed == {}

    def test_unwritable_directory_is_ignored(self, tmp_path: Path) -> None:
        """Drop writes when the state path is unusable."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        sections = CollapsedSections(FileStore(blocker / "state"), "guide")

        assert sections.toggle("examples") is True
        assert sections.is_collapsed("examples")
