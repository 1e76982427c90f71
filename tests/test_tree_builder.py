"""Tests for assembling the typed contents tree."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

import pytest

from sab_contents.parser.models import ContentItem, ItemKind, LinkType
from sab_contents.tree_builder import (
    ContentsParseError,
    ContentsTreeBuilder,
    parse_contents_xml,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from lxml.etree import _Element as Element

    from conftest import MemoryAssets

    from sab_contents.parser.models import ContentsData


@pytest.fixture
def built(data_dir: Path) -> ContentsData:
    """Return the tree built from the on-disk sample export."""
    return ContentsTreeBuilder(data_dir, "static/contents").run()


def _by_title(items: typ.Iterable[ContentItem], title: str) -> ContentItem:
    return next(item for item in items if item.title.get("default") == title)


def test_top_level_items_and_document_fields(built: ContentsData) -> None:
    """Only the root's direct items are top level; document fields are read."""
    assert [item.id for item in built.items] == [1, 2, 3, 5]
    assert built.title == {"default": "Contents"}
    assert built.features == {"show-titles": "true"}


def test_every_item_has_an_id(built: ContentsData) -> None:
    for item in built.walk():
        assert item.id != 0, f"item titled {item.title} has no id"


def test_only_containers_have_children(built: ContentsData) -> None:
    """Children appear exactly under grids and carousels."""
    for item in built.walk():
        has_children = bool(item.children)
        assert has_children is (item.kind in (ItemKind.GRID, ItemKind.CAROUSEL)), (
            f"item {item.id} ({item.kind}) children mismatch"
        )


def test_language_values_are_never_empty(built: ContentsData) -> None:
    for item in built.walk():
        for container in (item.title, item.subtitle, item.audio):
            assert all(key and value for key, value in container.items())


def test_grid_keeps_its_own_fields(built: ContentsData) -> None:
    """The grid and its nested item share an id but not their fields."""
    grid = _by_title(built.items, "Gospel Grid")
    mark = _by_title(grid.children, "Mark")
    assert grid.id == mark.id == 3
    assert grid.kind is ItemKind.GRID
    assert grid.title == {"default": "Gospel Grid"}
    assert not grid.link
    assert grid.features == {}
    assert grid.layout_mode == "full"
    assert grid.layout_collection == ("C01", "C02")
    assert mark.link.link_type is LinkType.REFERENCE
    assert mark.link.link_target == "MRK.1.1"
    assert mark.features == {"layout": "image-top"}
    assert [child.id for child in grid.children] == [3, 4]


def test_single_item_assets(built: ContentsData, data_dir: Path) -> None:
    """Images resolve inside the contents folder; audio under the destination."""
    single = _by_title(built.items, "Single Item")
    assert single.kind is ItemKind.SINGLE
    assert single.title == {"default": "Single Item", "tpi": "Wanpela samting"}
    assert single.image == str(data_dir / "contents" / "alphabet.jpg")
    assert single.audio == {
        "default": "static/contents/intro.mp3",
        "tpi": "static/contents/intro-tpi.mp3",
    }


def test_missing_image_is_omitted(built: ContentsData) -> None:
    grid = _by_title(built.items, "Gospel Grid")
    assert _by_title(grid.children, "Mark").image is None


def test_screens(built: ContentsData) -> None:
    """Screens list the top-level item ids they show."""
    assert [(s.id, s.title["default"], s.item_ids) for s in built.screens] == [
        (1, "Home", (1, 3, 5)),
        (2, "Details", (2,)),
    ]


def test_building_twice_is_idempotent(data_dir: Path) -> None:
    builder = ContentsTreeBuilder(data_dir, "static/contents")
    assert builder.run() == builder.run()


def test_without_destination_audio_is_empty(data_dir: Path) -> None:
    contents = ContentsTreeBuilder(data_dir).run()
    assert all(item.audio == {} for item in contents.walk())


def test_without_contents_dir_no_assets_resolve(
    sample_root: Element, memory_assets: type[MemoryAssets], tmp_path: Path
) -> None:
    """A missing ``contents/`` folder disables image and audio resolution."""
    builder = ContentsTreeBuilder(tmp_path, "dest", assets=memory_assets())
    assert builder.has_contents_dir is False
    contents = builder.build(sample_root)
    assert all(item.image is None for item in contents.walk())
    assert all(item.audio == {} for item in contents.walk())


def test_missing_contents_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="contents.xml"):
        ContentsTreeBuilder(tmp_path).run()


def test_malformed_xml_raises_parse_error() -> None:
    with pytest.raises(ContentsParseError, match="not well-formed"):
        parse_contents_xml("<contents><contents-items></contents>")


def test_wrong_root_raises_parse_error(tmp_path: Path) -> None:
    builder = ContentsTreeBuilder(tmp_path)
    with pytest.raises(ContentsParseError, match="<menu>"):
        builder.build(parse_contents_xml("<menu/>"))


def test_parse_error_is_a_value_error() -> None:
    assert issubclass(ContentsParseError, ValueError)


def test_mismatched_container_is_flattened(tmp_path: Path) -> None:
    """Nested items under a heading are not attached to it."""
    root = parse_contents_xml(
        "<contents><contents-items><contents-item id='1' type='heading'>"
        "<title>Head</title><contents-items><contents-item id='2'/>"
        "</contents-items></contents-item></contents-items></contents>"
    )
    contents = ContentsTreeBuilder(tmp_path).build(root)
    (heading,) = contents.items
    assert heading.kind is ItemKind.HEADING
    assert heading.children == ()


def test_empty_document(tmp_path: Path) -> None:
    contents = ContentsTreeBuilder(tmp_path).build(parse_contents_xml("<contents/>"))
    assert contents.items == ()
    assert contents.screens == ()
    assert contents.to_payload() == {"features": {}, "items": [], "screens": []}


def test_built_tree_is_read_only(built: ContentsData) -> None:
    """Items, screens and the document reject mutation and hashing."""
    single = _by_title(built.items, "Single Item")
    with pytest.raises(TypeError):
        single.title["default"] = "Changed"  # type: ignore[index]
    with pytest.raises(dc.FrozenInstanceError):
        single.id = 9  # type: ignore[misc]
    with pytest.raises(TypeError, match="unhashable"):
        hash(single)
    assert not isinstance(built, cabc.Hashable)
    assert not isinstance(built.screens[0], cabc.Hashable)
    with pytest.raises(TypeError):
        built.features["new"] = "x"  # type: ignore[index]


def test_item_copies_the_mappings_it_is_given() -> None:
    """Changing the caller's dict afterwards leaves the item untouched."""
    titles = {"default": "Before"}
    item = ContentItem(id=1, kind=ItemKind.SINGLE, title=titles)
    titles["default"] = "After"
    assert item.title == {"default": "Before"}
    assert item == ContentItem(id=1, kind=ItemKind.SINGLE, title={"default": "Before"})
