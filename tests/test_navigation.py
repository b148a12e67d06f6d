"""Tests for navigation resolution and the navigation view."""

import pytest

from plaza_cms.core.collapse import CollapsedSections, MemoryStore
from plaza_cms.core.menu import ComponentMenuItem, FileMenuItem, Menu, MenuFolder
from plaza_cms.core.navigation import ContentNav, NavigationResolver

INDEX = FileMenuItem(id="index", label="Home", path="index")
COLOR = FileMenuItem(id="color", label="Color", path="color")
CHAT = ComponentMenuItem(id="chat", label="Chat", route="/demos/chat", description="Chat demo")


class TestNavigationResolverHref:
    """Tests for NavigationResolver.href()."""

    def test_component_uses_route(self) -> None:
        """Link components to their route in every mode."""
        assert NavigationResolver("/guide", use_hash_urls=False).href(CHAT) == "/demos/chat"
        assert NavigationResolver("/guide", use_hash_urls=True).href(CHAT) == "/demos/chat"

    def test_hash_urls(self) -> None:
        """Link files as hash fragments."""
        resolver = NavigationResolver("/guide", use_hash_urls=True)

        assert resolver.href(COLOR) == "#color"
        assert resolver.href(INDEX) == "#index"

    @pytest.mark.parametrize(
        ("base_path", "item", "expected"),
        [
            ("/guide", INDEX, "/guide"),
            ("", INDEX, "/"),
            ("/guide", COLOR, "/guide/color"),
            ("", COLOR, "/color"),
        ],
    )
    def test_path_urls(self, base_path: str, item: FileMenuItem, expected: str) -> None:
        """Link files under the base path, with the index at the base itself."""
        resolver = NavigationResolver(base_path, use_hash_urls=False)

        assert resolver.href(item) == expected


class TestNavigationResolverIsActive:
    """Tests for NavigationResolver.is_active()."""

    @pytest.mark.parametrize(
        ("current_path", "expected"),
        [
            ("/guide", True),
            ("/guide/", True),
            ("index", True),
            ("/guide/other", False),
            ("/", False),
        ],
    )
    def test_index_with_base_path(self, current_path: str, expected: bool) -> None:
        """Recognize every encoding of the home page."""
        resolver = NavigationResolver("/guide", use_hash_urls=False)

        assert resolver.is_active(INDEX, current_path) is expected

    def test_index_without_base_path(self) -> None:
        """Treat "/" and "" as home without a base path."""
        resolver = NavigationResolver("", use_hash_urls=False)

        assert resolver.is_active(INDEX, "/")
        assert resolver.is_active(INDEX, "")
        assert not resolver.is_active(INDEX, "/color")

    @pytest.mark.parametrize(
        ("current_path", "expected"),
        [
            ("color", True),
            ("/color", False),
            ("colors", False),
        ],
    )
    def test_file_item_without_base_path(self, current_path: str, expected: bool) -> None:
        """Match documents only by bare path without a base path."""
        resolver = NavigationResolver("", use_hash_urls=False)

        assert resolver.is_active(COLOR, current_path) is expected

    @pytest.mark.parametrize(
        ("current_path", "expected"),
        [
            ("color", True),
            ("/guide/color", True),
            ("/guide/color/extra", False),
            ("/color", False),
            ("colors", False),
        ],
    )
    def test_file_item(self, current_path: str, expected: bool) -> None:
        """Match documents by bare path or base-prefixed path."""
        resolver = NavigationResolver("/guide", use_hash_urls=False)

        assert resolver.is_active(COLOR, current_path) is expected

    @pytest.mark.parametrize(
        ("current_path", "expected"),
        [
            ("/demos/chat", True),
            ("/demos/chat/room-1", True),
            ("/demos/chatter", False),
            ("/demos", False),
        ],
    )
    def test_component_matches_sub_routes(self, current_path: str, expected: bool) -> None:
        """Match components on their route and nested routes."""
        resolver = NavigationResolver("/guide")

        assert resolver.is_active(CHAT, current_path) is expected

    def test_folder_is_never_active(self) -> None:
        """Never mark folders active."""
        folder = MenuFolder(id="color", title="Color", children=(COLOR,))

        assert not NavigationResolver().is_active(folder, "color")


class TestNavigationResolverActivate:
    """Tests for navigation targets."""

    def test_targets(self) -> None:
        """Use route for components and path for files."""
        resolver = NavigationResolver("/guide", use_hash_urls=False)

        assert resolver.navigation_target(CHAT) == "/demos/chat"
        assert resolver.navigation_target(COLOR) == "color"

    def test_activate_calls_back(self) -> None:
        """Hand the target to the callback without navigating."""
        visited: list[str] = []
        resolver = NavigationResolver()

        target = resolver.activate(COLOR, visited.append)

        assert target == "color"
        assert visited == ["color"]


class TestNavigationResolverContentKey:
    """Tests for NavigationResolver.content_key()."""

    @pytest.mark.parametrize(
        ("current_path", "expected"),
        [
            ("/guide", "index"),
            ("/guide/", "index"),
            ("/guide/color", "color"),
            ("/guide/examples/basic-setup", "examples/basic-setup"),
            ("#color", "color"),
            ("color", "color"),
            ("", "index"),
            ("/guidebook", "guidebook"),
        ],
    )
    def test_maps_host_paths(self, current_path: str, expected: str) -> None:
        """Strip base path, hash and slashes."""
        resolver = NavigationResolver("/guide", use_hash_urls=False)

        assert resolver.content_key(current_path) == expected


@pytest.fixture
def menu() -> Menu:
    examples = MenuFolder(
        id="examples",
        title="Examples",
        order=100,
        children=(
            FileMenuItem(id="examples/basic", label="Basic", path="examples/basic", order=1),
            CHAT,
        ),
    )
    return Menu(title="Plaza CMS", subtitle="Documentation", sections=(INDEX, COLOR, examples))


class TestContentNav:
    """Tests for the ContentNav view model."""

    def test_marks_active_leaf(self, menu: Menu) -> None:
        """Mark only the current leaf active."""
        nav = ContentNav(menu, NavigationResolver("/guide", use_hash_urls=False), "/guide/color")

        nodes = nav.nodes()

        assert [(node.id, node.active) for node in nodes[:2]] == [("index", False), ("color", True)]
        assert nodes[1].href == "/guide/color"
        assert nav.active_items() == [COLOR]

    def test_windowed_folders_show_counts(self, menu: Menu) -> None:
        """Show item counts on collapsible windowed folders."""
        nav = ContentNav(menu, NavigationResolver(), "index")

        folder = nav.nodes()[2]

        assert folder.type == "folder"
        assert folder.label == "Examples"
        assert folder.count == 2
        assert [child.id for child in folder.children] == ["examples/basic", "chat"]

    def test_borderless_shows_descriptions_not_counts(self, menu: Menu) -> None:
        """Show descriptions and static folders in the borderless variant."""
        nav = ContentNav(menu, NavigationResolver(), "index", variant="borderless")

        folder = nav.nodes()[2]

        assert not nav.collapsible
        assert folder.count is None
        assert folder.children[1].description == "Chat demo"

    def test_collapsed_folder_hides_children(self, menu: Menu) -> None:
        """Hide the children of collapsed folders."""
        collapse = CollapsedSections(MemoryStore())
        collapse.toggle("examples")
        nav = ContentNav(menu, NavigationResolver(), "index", collapse=collapse)

        folder = nav.nodes()[2]

        assert folder.collapsed
        assert folder.children == []
        assert folder.count == 2

    def test_non_collapsible_ignores_store(self, menu: Menu) -> None:
        """Render folders expanded when collapsing is disabled."""
        store = MemoryStore({"plaza-cms-collapsed": '{"examples": true}'})
        nav = ContentNav(
            menu,
            NavigationResolver(),
            "index",
            collapse=CollapsedSections(store),
            collapsible=False,
        )

        folder = nav.nodes()[2]

        assert not folder.collapsed
        assert len(folder.children) == 2
        assert folder.count is None

    def test_select_leaf_navigates(self, menu: Menu) -> None:
        """Pass leaf targets to the callback."""
        visited: list[str] = []
        nav = ContentNav(menu, NavigationResolver(), "index")

        assert nav.select("chat", visited.append) == "/demos/chat"
        assert nav.select("color", visited.append) == "color"
        assert visited == ["/demos/chat", "color"]

    def test_select_folder_toggles(self, menu: Menu) -> None:
        """Toggle collapsible folders instead of navigating."""
        visited: list[str] = []
        collapse = CollapsedSections(MemoryStore())
        nav = ContentNav(menu, NavigationResolver(), "index", collapse=collapse)

        assert nav.select("examples", visited.append) is None
        assert collapse.is_collapsed("examples")
        assert visited == []

    def test_select_folder_when_not_collapsible(self, menu: Menu) -> None:
        """Leave state alone when folders don't collapse."""
        collapse = CollapsedSections(MemoryStore())
        nav = ContentNav(menu, NavigationResolver(), "index", collapse=collapse, collapsible=False)

        nav.select("examples", lambda target: None)

        assert not collapse.is_collapsed("examples")

    def test_select_unknown_id(self, menu: Menu) -> None:
        """Ignore unknown ids."""
        nav = ContentNav(menu, NavigationResolver(), "index")

        assert nav.select("nope", lambda target: None) is None

    def test_to_dict(self, menu: Menu) -> None:
        """Convert the view to a dictionary."""
        nav = ContentNav(menu, NavigationResolver(), "color")

        result = nav.to_dict()

        assert result["variant"] == "windowed"
        assert result["title"] == "Plaza CMS"
        assert result["subtitle"] == "Documentation"
        assert result["sections"][1] == {
            "type": "file",
            "id": "color",
            "label": "Color",
            "href": "#color",
            "active": True,
        }
        assert result["sections"][2]["collapsed"] is False
        assert result["sections"][2]["count"] == 2
