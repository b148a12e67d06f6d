"""CLI interface for plaza-cms.

Command-line tool for inspecting the menu, navigation state and rendered
pages of a documentation directory.
"""

import json
import logging
import sys
from pathlib import Path

import click

from plaza_cms.config import Config
from plaza_cms.core.collapse import CollapsedSections, FileStore
from plaza_cms.core.menu import MenuFolder, find_node
from plaza_cms.core.navigation import ContentNav
from plaza_cms.core.site import Site, SiteLoader


@click.group()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover plaza-cms.toml)",
)
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)
@click.option(
    "--base-path",
    default=None,
    help="Base path for document URLs, e.g. /guide (overrides config)",
)
@click.option(
    "--hash-urls/--path-urls",
    "use_hash_urls",
    default=None,
    help="Link documents as #path or as /base/path (overrides config)",
)
@click.option(
    "--state-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory for persisted navigation state (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    source_dir: Path | None,
    base_path: str | None,
    use_hash_urls: bool | None,
    state_dir: Path | None,
    verbose: bool,
) -> None:
    """plaza-cms - menus and pages for Plaza documentation sites."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = Config.load(config_path)
    except (OSError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    ctx.obj = config.with_overrides(
        source_dir=source_dir,
        base_path=base_path,
        use_hash_urls=use_hash_urls,
        state_dir=state_dir,
    )


@cli.command()
@click.pass_obj
def menu(config: Config) -> None:
    """Print the menu tree as JSON."""
    site = _load_site(config)
    click.echo(json.dumps(site.menu.to_dict(), indent=2))


@cli.command()
@click.argument("current_path", default="index")
@click.option(
    "--select",
    "select_id",
    default=None,
    help="Activate a menu item or toggle a folder by id",
)
@click.pass_obj
def nav(config: Config, current_path: str, select_id: str | None) -> None:
    """Print the navigation state for CURRENT_PATH as JSON."""
    site = _load_site(config)
    collapsible = config.navigation.collapsible
    if collapsible is None:
        collapsible = config.navigation.variant != "borderless"
    content_nav = ContentNav(
        site.menu,
        site.resolver,
        current_path,
        collapse=_collapsed_sections(config) if collapsible else None,
        variant=config.navigation.variant,
        collapsible=collapsible,
    )

    if select_id is not None:
        if find_node(site.menu, select_id) is None:
            click.echo(
                click.style(f"Error: no menu node with id {select_id!r}", fg="red"),
                err=True,
            )
            sys.exit(1)
        target = content_nav.select(select_id, lambda t: None)
        if target is not None:
            click.echo(f"Navigate: {target}")

    click.echo(json.dumps(content_nav.to_dict(), indent=2))


@cli.command()
@click.argument("current_path", default="")
@click.option(
    "--html/--markdown",
    "as_html",
    default=True,
    help="Print rendered HTML or the link-rewritten markdown (default: HTML)",
)
@click.option(
    "--show-title",
    is_flag=True,
    help="Prepend the frontmatter title as a heading",
)
@click.pass_obj
def show(config: Config, current_path: str, as_html: bool, show_title: bool) -> None:
    """Print the document for CURRENT_PATH."""
    site = _load_site(config)
    result = site.renderer(show_title=show_title).render(current_path)

    if result.fallback:
        click.echo(
            click.style(f"Page '{result.key}' not found, showing '{result.path}'", fg="yellow"),
            err=True,
        )
    click.echo(result.html if as_html else result.markdown)


@cli.command()
@click.argument("folder_id")
@click.pass_obj
def toggle(config: Config, folder_id: str) -> None:
    """Collapse or expand FOLDER_ID in the persisted navigation state."""
    site = _load_site(config)
    node = find_node(site.menu, folder_id)
    if not isinstance(node, MenuFolder):
        click.echo(click.style(f"Error: no folder with id {folder_id!r}", fg="red"), err=True)
        sys.exit(1)

    collapsed = _collapsed_sections(config).toggle(folder_id)
    state = "collapsed" if collapsed else "expanded"
    click.echo(f"{node.title}: {state}")


def _load_site(config: Config) -> Site:
    """Load the site described by the configuration."""
    loader = SiteLoader(
        config.docs.source_dir,
        title=config.site.title,
        subtitle=config.site.subtitle,
        declarations=config.declarations,
        base_path=config.navigation.base_path,
        use_hash_urls=config.navigation.use_hash_urls,
    )
    return loader.load()


def _collapsed_sections(config: Config) -> CollapsedSections:
    """Open the persisted collapse state for the configured namespace."""
    return CollapsedSections(FileStore(config.state.dir), config.state.storage_key)
