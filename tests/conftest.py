"""Shared fixtures for the contents conversion tests.

The sample export mirrors a real ``contents.xml``: a single item with two
languages, a heading, a grid whose nested item reuses the grid's ``id``, a
carousel, and two screens. Fixtures parse it in memory or lay it out on disk
together with the ``contents/`` asset folder.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import pytest

from sab_contents.assets import FileSystemAssets
from sab_contents.tree_builder import parse_contents_xml

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from lxml.etree import _Element as Element

SAMPLE_CONTENTS_XML = """<?xml version="1.0" encoding="utf-8"?>
<contents>
  <title lang="default">Contents</title>
  <features>
    <feature name="show-titles" value="true"/>
  </features>
  <contents-items>
    <contents-item id="1">
      <title lang="default">Single Item</title>
      <title lang="TPI">Wanpela samting</title>
      <subtitle lang="default">Image should be on the right</subtitle>
      <subtitle lang="tpi">Wanpela samting</subtitle>
      <image-filename>alphabet.jpg</image-filename>
      <audio>
        <filename lang="default">intro.mp3</filename>
        <filename lang="tpi">intro-tpi.mp3</filename>
      </audio>
      <link type="screen" target="2"/>
      <features>
        <feature name="layout" value="image-right-text-left"/>
        <feature name="show-reference" value="false"/>
        <feature name="background" value="default"/>
        <feature name="padding" value="default"/>
      </features>
    </contents-item>
    <contents-item id="2" type="heading">
      <title lang="default">Gospels</title>
    </contents-item>
    <contents-item id="3" type="grid">
      <title lang="default">Gospel Grid</title>
      <layout mode="full">
        <layout-collection>C01</layout-collection>
        <layout-collection>C02</layout-collection>
      </layout>
      <contents-items>
        <contents-item id="3">
          <title lang="default">Mark</title>
          <image-filename>mark.jpg</image-filename>
          <link type="reference" target="MRK.1.1"/>
          <features>
            <feature name="layout" value="image-top"/>
          </features>
        </contents-item>
        <contents-item id="4">
          <title lang="default">Luke</title>
          <link type="reference" target="LUK.2.1"/>
        </contents-item>
      </contents-items>
    </contents-item>
    <contents-item id="5" type="carousel">
      <title lang="default">Carousel</title>
      <contents-items>
        <contents-item id="6">
          <title lang="default">Website</title>
          <link type="url" target="https://example.org/"/>
        </contents-item>
      </contents-items>
    </contents-item>
  </contents-items>
  <contents-screens>
    <contents-screen id="1">
      <title lang="default">Home</title>
      <items>
        <item id="1"/>
        <item id="3"/>
        <item id="5"/>
      </items>
    </contents-screen>
    <contents-screen id="2">
      <title lang="default">Details</title>
      <items>
        <item id="2"/>
      </items>
    </contents-screen>
  </contents-screens>
</contents>
"""

SAMPLE_ASSETS = ("alphabet.jpg", "intro.mp3", "intro-tpi.mp3")


class MemoryAssets(FileSystemAssets):
    """Asset locator that answers existence checks from an in-memory set."""

    def __init__(self, existing: cabc.Iterable[str | Path] = ()) -> None:
        self.existing = {str(path) for path in existing}

    def exists(self, path: str | Path) -> bool:
        return str(path) in self.existing


@pytest.fixture(autouse=True)
def _restore_package_logger() -> cabc.Iterator[None]:
    """Undo handlers and levels installed by CLI runs during a test."""
    logger = logging.getLogger("sab_contents")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def sample_xml() -> str:
    """Return the sample ``contents.xml`` source text."""
    return SAMPLE_CONTENTS_XML


@pytest.fixture
def sample_root() -> Element:
    """Return the parsed root ``contents`` element of the sample export."""
    return parse_contents_xml(SAMPLE_CONTENTS_XML)


@pytest.fixture
def item_titled(sample_root: Element) -> cabc.Callable[[str], Element]:
    """Return a lookup of sample items by their default-language title."""

    def _lookup(title: str) -> Element:
        matches = sample_root.xpath(
            "//contents-item[title[@lang='default']=$title]", title=title
        )
        assert matches, f"sample has no item titled {title!r}"
        return matches[0]

    return _lookup


@pytest.fixture
def all_items(sample_root: Element) -> list[Element]:
    """Return every ``contents-item`` in the sample, at any depth."""
    return list(sample_root.iter("contents-item"))


@pytest.fixture
def memory_assets() -> type[MemoryAssets]:
    """Expose the in-memory asset locator class to tests."""
    return MemoryAssets


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Lay out the sample export and its assets under a data directory."""
    root = tmp_path / "data"
    contents_dir = root / "contents"
    contents_dir.mkdir(parents=True)
    (root / "contents.xml").write_text(SAMPLE_CONTENTS_XML, encoding="utf-8")
    for name in SAMPLE_ASSETS:
        (contents_dir / name).write_bytes(b"\x00")
    return root
