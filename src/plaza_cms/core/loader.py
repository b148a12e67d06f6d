"""Document loading from a source directory.

Builds the document map consumed by the menu builder and content store:

    docs/
    ├── README.md                  -> "index"
    ├── 01_getting-started.md      -> "01_getting-started"
    ├── _partial.md                   (skipped)
    └── examples/
        └── 01_basic-setup.md      -> "examples/01_basic-setup"
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_INDEX_STEMS = ("readme", "index")


def document_key(relative_path: Path) -> str:
    """Content key for a markdown file path relative to the source directory."""
    stem = relative_path.with_suffix("")
    if stem.name.lower() in _INDEX_STEMS:
        stem = stem.with_name("index")
    return stem.as_posix()


def load_documents(source_dir: Path) -> dict[str, str]:
    """Load every markdown document below a directory.

    Files and directories starting with "." or "_" are skipped. Unreadable
    files are skipped with a warning.

    Args:
        source_dir: Root directory containing markdown sources

    Returns:
        Document map from content key to raw text, sorted by file path.
        Empty when the directory doesn't exist.
    """
    if not source_dir.is_dir():
        logger.warning(f"Source directory not found: {source_dir}")
        return {}

    documents: dict[str, str] = {}
    for file_path in sorted(source_dir.rglob("*.md")):
        relative = file_path.relative_to(source_dir)
        if any(part.startswith((".", "_")) for part in relative.parts):
            continue

        key = document_key(relative)
        if key in documents:
            logger.warning(f"Skipping {relative}: content key {key!r} already loaded")
            continue

        try:
            documents[key] = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {file_path}: {e}")
            continue

        logger.debug(f"Loaded {relative} as {key!r}")

    logger.info(f"Loaded {len(documents)} documents from {source_dir}")
    return documents
