"""Configuration management for plaza-cms.

Supports TOML configuration format with auto-discovery.
"""

import logging
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from plaza_cms.core.builder import (
    ComponentDeclaration,
    Declaration,
    FileDeclaration,
    FolderDeclaration,
)
from plaza_cms.core.collapse import DEFAULT_STORAGE_KEY

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "plaza-cms.toml"

_VARIANTS = ("windowed", "borderless")


@dataclass
class SiteConfig:
    """Menu title configuration."""

    title: str = "Documentation"
    subtitle: str | None = None


@dataclass
class DocsConfig:
    """Documentation source configuration."""

    source_dir: Path = field(default_factory=lambda: Path("docs"))


@dataclass
class NavigationConfig:
    """Navigation URL and presentation configuration."""

    base_path: str = ""
    use_hash_urls: bool = True
    variant: str = "windowed"
    collapsible: bool | None = None


@dataclass
class StateConfig:
    """Persisted UI state configuration."""

    dir: Path = field(default_factory=lambda: Path(".plaza-cms"))
    storage_key: str = DEFAULT_STORAGE_KEY


@dataclass
class Config:
    """Application configuration."""

    site: SiteConfig
    docs: DocsConfig
    navigation: NavigationConfig
    state: StateConfig
    declarations: list[Declaration] = field(default_factory=list)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for plaza-cms.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            logger.debug(f"No {CONFIG_FILENAME} found, using defaults")
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        """Create config with all defaults."""
        return cls(
            site=SiteConfig(),
            docs=DocsConfig(),
            navigation=NavigationConfig(),
            state=StateConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        logger.info(f"Loading configuration from {path}")
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        declarations: list[Declaration] = []
        declarations.extend(cls._parse_components(data.get("components")))
        declarations.extend(cls._parse_folders(data.get("folders"), "folders"))

        return cls(
            site=cls._parse_site(data.get("site")),
            docs=cls._parse_docs(data.get("docs"), config_dir),
            navigation=cls._parse_navigation(data.get("navigation")),
            state=cls._parse_state(data.get("state"), config_dir),
            declarations=declarations,
            config_path=path,
        )

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        title = data.get("title", "Documentation")
        if not isinstance(title, str):
            raise ValueError("site.title must be a string")

        subtitle = data.get("subtitle")
        if subtitle is not None and not isinstance(subtitle, str):
            raise ValueError("site.subtitle must be a string")

        return SiteConfig(title=title, subtitle=subtitle)

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(source_dir=config_dir / "docs")

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        source_dir = data.get("source_dir", "docs")
        if not isinstance(source_dir, str):
            raise ValueError("docs.source_dir must be a string")

        return DocsConfig(source_dir=config_dir / source_dir)

    @classmethod
    def _parse_navigation(cls, data: object) -> NavigationConfig:
        """Parse navigation configuration section.

        Args:
            data: Raw navigation section data

        Returns:
            NavigationConfig instance
        """
        if data is None:
            return NavigationConfig()

        if not isinstance(data, dict):
            raise ValueError("navigation section must be a dictionary")

        base_path = data.get("base_path", "")
        if not isinstance(base_path, str):
            raise ValueError("navigation.base_path must be a string")

        use_hash_urls = data.get("use_hash_urls", True)
        if not isinstance(use_hash_urls, bool):
            raise ValueError("navigation.use_hash_urls must be a boolean")

        variant = data.get("variant", "windowed")
        if variant not in _VARIANTS:
            raise ValueError("navigation.variant must be 'windowed' or 'borderless'")

        collapsible = data.get("collapsible")
        if collapsible is not None and not isinstance(collapsible, bool):
            raise ValueError("navigation.collapsible must be a boolean")

        return NavigationConfig(
            base_path=base_path.rstrip("/"),
            use_hash_urls=use_hash_urls,
            variant=variant,
            collapsible=collapsible,
        )

    @classmethod
    def _parse_state(cls, data: object, config_dir: Path) -> StateConfig:
        if data is None:
            return StateConfig(dir=config_dir / ".plaza-cms")

        if not isinstance(data, dict):
            raise ValueError("state section must be a dictionary")

        state_dir = data.get("dir", ".plaza-cms")
        if not isinstance(state_dir, str):
            raise ValueError("state.dir must be a string")

        storage_key = data.get("storage_key", DEFAULT_STORAGE_KEY)
        if not isinstance(storage_key, str) or not storage_key:
            raise ValueError("state.storage_key must be a non-empty string")

        return StateConfig(dir=config_dir / state_dir, storage_key=storage_key)

    @classmethod
    def _parse_components(cls, data: object) -> list[ComponentDeclaration]:
        """Parse top-level [[components]] entries."""
        if data is None:
            return []

        if not isinstance(data, list):
            raise ValueError("components must be an array of tables")

        return [cls._parse_component(item, "components") for item in data]

    @classmethod
    def _parse_folders(cls, data: object, where: str) -> list[FolderDeclaration]:
        """Parse [[folders]] entries.

        Args:
            data: Raw array of folder tables
            where: Dotted location used in error messages

        Returns:
            FolderDeclaration list in file order
        """
        if data is None:
            return []

        if not isinstance(data, list):
            raise ValueError(f"{where} must be an array of tables")

        folders: list[FolderDeclaration] = []
        for item in data:
            if not isinstance(item, dict):
                raise ValueError(f"{where} items must be tables")

            folder_id = _require_str(item, "id", where)
            title = _require_str(item, "title", where)
            order = _optional_number(item, "order", where)

            items_raw = item.get("items", [])
            if not isinstance(items_raw, list):
                raise ValueError(f"{where}.items must be an array of tables")
            items = [cls._parse_folder_item(child, f"{where}.items") for child in items_raw]

            folders.append(
                FolderDeclaration(id=folder_id, title=title, order=order, items=items),
            )
        return folders

    @classmethod
    def _parse_folder_item(cls, data: object, where: str) -> Declaration:
        """Parse one folder child: file (default), component or nested folder."""
        if not isinstance(data, dict):
            raise ValueError(f"{where} items must be tables")

        item_type = data.get("type", "file")
        if item_type == "file":
            return FileDeclaration(
                path=_require_str(data, "path", where),
                id=_optional_str(data, "id", where),
                label=_optional_str(data, "label", where),
                order=_optional_number(data, "order", where),
                description=_optional_str(data, "description", where),
            )
        if item_type == "component":
            return cls._parse_component(data, where)
        if item_type == "folder":
            return cls._parse_folders([data], where)[0]

        raise ValueError(f"{where}.type must be 'file', 'component' or 'folder'")

    @classmethod
    def _parse_component(cls, data: object, where: str) -> ComponentDeclaration:
        if not isinstance(data, dict):
            raise ValueError(f"{where} items must be tables")

        return ComponentDeclaration(
            id=_require_str(data, "id", where),
            label=_require_str(data, "label", where),
            route=_require_str(data, "route", where),
            order=_optional_number(data, "order", where),
            description=_optional_str(data, "description", where),
        )

    def with_overrides(
        self,
        *,
        source_dir: Path | None = None,
        base_path: str | None = None,
        use_hash_urls: bool | None = None,
        state_dir: Path | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            source_dir: Override docs.source_dir
            base_path: Override navigation.base_path
            use_hash_urls: Override navigation.use_hash_urls
            state_dir: Override state.dir

        Returns:
            New Config instance with overrides applied
        """
        docs = self.docs
        if source_dir is not None:
            docs = replace(self.docs, source_dir=source_dir)

        navigation = self.navigation
        if base_path is not None or use_hash_urls is not None:
            navigation = replace(
                self.navigation,
                base_path=(
                    base_path.rstrip("/") if base_path is not None else self.navigation.base_path
                ),
                use_hash_urls=(
                    use_hash_urls if use_hash_urls is not None else self.navigation.use_hash_urls
                ),
            )

        state = self.state
        if state_dir is not None:
            state = replace(self.state, dir=state_dir)

        return replace(self, docs=docs, navigation=navigation, state=state)


def _require_str(data: dict, key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"{where}.{key} must be a non-empty string")
    return value


def _optional_str(data: dict, key: str, where: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{where}.{key} must be a string")
    return value


def _optional_number(data: dict, key: str, where: str) -> int | float | None:
    value = data.get(key)
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{where}.{key} must be a number")
    return value
