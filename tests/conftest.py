"""Shared test fixtures."""

from pathlib import Path

import pytest

from plaza_cms.core.builder import FileDeclaration, FolderDeclaration


@pytest.fixture
def documents() -> dict[str, str]:
    """Document map shaped like the Plaza CMS guide."""
    return {
        "index": "---\ntitle: Plaza CMS\n---\n# Plaza CMS\n\nSee [setup](getting-started.md).\n",
        "getting-started": "---\ntitle: Getting Started\norder: 1\n---\n# Getting Started\n",
        "frontmatter": "---\norder: 2\n---\n# Frontmatter\n",
        "03_menu-structure": "# Menu Structure\n",
        "theming": "# Theming\n",
        "examples/basic-setup": "---\ntitle: Basic Setup\norder: 1\n---\n# Basic\n",
        "examples/custom-themes": "---\ntitle: Custom Themes\norder: 2\n---\n# Themes\n",
    }


@pytest.fixture
def examples_folder() -> FolderDeclaration:
    """Static examples folder declaration."""
    return FolderDeclaration(
        id="examples",
        title="Examples",
        order=100,
        items=[
            FileDeclaration(path="examples/custom-themes"),
            FileDeclaration(path="examples/basic-setup"),
        ],
    )


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create a documentation source directory.

    Creates README, two ordered top-level documents, a partial that must be
    skipped and an examples subdirectory.
    """
    source_dir = tmp_path / "docs"
    examples_dir = source_dir / "examples"
    examples_dir.mkdir(parents=True)
    (source_dir / "README.md").write_text("---\ntitle: Welcome\n---\n# Welcome\n")
    (source_dir / "01_getting-started.md").write_text(
        "# Getting Started\n\nRead [the theming guide](02_theming.md#colors).\n",
    )
    (source_dir / "02_theming.md").write_text("---\ntitle: Theming Guide\n---\n# Theming\n")
    (source_dir / "_partial.md").write_text("# Partial\n")
    (examples_dir / "01_basic-setup.md").write_text("---\ntitle: Basic Setup\n---\n# Basic\n")
    return source_dir
