"""Assemble the typed contents tree from a ``contents.xml`` export.

``ContentsTreeBuilder`` drives the traversal: it parses the export with
``lxml``, hands each ``contents-item`` to the field extractors and the item
classifier, and recurses into the nested item list of grids and carousels.
Children are fully built before their parent ``ContentItem`` is constructed,
so the resulting tree is immutable from the moment it exists.

Typical usage pairs the builder with a loaded configuration:

>>> from pathlib import Path
>>> from sab_contents.config import load_convert_config
>>> from sab_contents.tree_builder import ContentsTreeBuilder
>>> config = load_convert_config(Path("contents.yaml"))  # doctest: +SKIP
>>> builder = ContentsTreeBuilder(
...     config.data_dir, config.dest_dir, scripture_config=config.scripture
... )  # doctest: +SKIP
>>> contents = builder.run()  # doctest: +SKIP
>>> [item.id for item in contents.items]  # doctest: +SKIP
[1, 2, 3]

Side effects are limited to reading ``contents.xml`` and checking whether the
referenced image and audio files exist.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from lxml import etree

from ._constants import (
    CONTENTS_ASSET_DIR,
    CONTENTS_FILENAME,
    FEATURES_TAG,
    ROOT_TAG,
    SCREEN_ITEM_REF_TAG,
    SCREEN_ITEMS_TAG,
    SCREEN_TAG,
    SCREENS_TAG,
    TITLE_TAG,
)
from .assets import FileSystemAssets
from .parser.classifier import classify_item
from .parser.fields import (
    features_from,
    parse_item_audio,
    parse_item_features,
    parse_item_id,
    parse_item_image,
    parse_item_layout_collection,
    parse_item_layout_mode,
    parse_item_subtitle,
    parse_item_title,
)
from .parser.lang import build_lang_container
from .parser.links import parse_item_link
from .parser.models import ContentItem, ContentScreen, ContentsData
from .parser.scope import is_element, nested_items

if typ.TYPE_CHECKING:
    from lxml.etree import _Element as Element

    from .assets import AssetLocator
    from .config import ScriptureConfig

logger = logging.getLogger(__name__)


class ContentsParseError(ValueError):
    """Raised when ``contents.xml`` cannot be parsed into a contents tree."""


def parse_contents_xml(text: str | bytes) -> Element:
    """Parse ``contents.xml`` source text and return its root element.

    Raises
    ------
    ContentsParseError
        If the text is not well-formed XML.
    """
    source = text.encode("utf-8") if isinstance(text, str) else text
    parser = etree.XMLParser(
        remove_blank_text=True, resolve_entities=False, no_network=True
    )
    try:
        return etree.fromstring(source, parser)
    except etree.XMLSyntaxError as exc:
        msg = f"contents.xml is not well-formed: {exc}"
        raise ContentsParseError(msg) from exc


class ContentsTreeBuilder:
    """Build a :class:`ContentsData` tree from a data directory."""

    def __init__(
        self,
        data_dir: Path,
        dest_dir: str | Path = "",
        *,
        scripture_config: ScriptureConfig | None = None,
        assets: AssetLocator | None = None,
    ) -> None:
        """Initialize the builder with its source and destination context.

        Parameters
        ----------
        data_dir : Path
            Directory holding ``contents.xml`` and the ``contents/`` asset
            folder it references.
        dest_dir : str or Path, optional
            Destination prefix written into audio paths; audio is omitted
            when empty.
        scripture_config : ScriptureConfig, optional
            Configuration of the enclosing app, passed to the link extractor.
        assets : AssetLocator, optional
            File-system collaborator; defaults to :class:`FileSystemAssets`.
        """
        self.data_dir = Path(data_dir)
        self.dest_dir = dest_dir
        self.scripture_config = scripture_config
        self.assets = assets or FileSystemAssets()
        self.contents_path = self.data_dir / CONTENTS_FILENAME
        self.contents_dir = self.data_dir / CONTENTS_ASSET_DIR
        self.has_contents_dir = self.assets.exists(self.contents_dir)

    def run(self) -> ContentsData:
        """Load ``contents.xml`` and return the built tree."""
        contents = self.build(self.load())
        logger.info(
            "Built %d items and %d screens from %s",
            sum(1 for _ in contents.walk()),
            len(contents.screens),
            self.contents_path,
        )
        return contents

    def load(self) -> Element:
        """Read and parse ``contents.xml`` from the data directory.

        Raises
        ------
        FileNotFoundError
            If ``contents.xml`` does not exist.
        ContentsParseError
            If the file is not well-formed XML.
        """
        if not self.contents_path.exists():
            msg = f"Contents file '{self.contents_path}' not found."
            raise FileNotFoundError(msg)
        return parse_contents_xml(self.contents_path.read_bytes())

    def build(self, root: Element) -> ContentsData:
        """Build the document-level fields, the item tree, and the screens."""
        if not is_element(root) or root.tag != ROOT_TAG:
            tag = root.tag if is_element(root) else type(root).__name__
            msg = f"Expected a <{ROOT_TAG}> root element, got <{tag}>."
            raise ContentsParseError(msg)
        return ContentsData(
            title=build_lang_container(root.iterchildren(TITLE_TAG)),
            features=features_from(root.iterchildren(FEATURES_TAG)),
            items=tuple(self.build_item(element) for element in nested_items(root)),
            screens=tuple(
                self._build_screen(screen)
                for wrapper in root.iterchildren(SCREENS_TAG)
                for screen in wrapper.iterchildren(SCREEN_TAG)
            ),
        )

    def build_item(self, element: Element) -> ContentItem:
        """Build one item, recursing into nested items for containers."""
        classification = classify_item(element)
        if classification is None:
            msg = "Cannot build a content item from a non-element node."
            raise ContentsParseError(msg)
        children: tuple[ContentItem, ...] = ()
        if classification.owns_children:
            children = tuple(self.build_item(child) for child in nested_items(element))
        return ContentItem(
            id=parse_item_id(element),
            kind=classification.kind,
            title=parse_item_title(element),
            subtitle=parse_item_subtitle(element),
            features=parse_item_features(element),
            image=parse_item_image(
                element,
                self.contents_dir,
                has_contents_dir=self.has_contents_dir,
                assets=self.assets,
            ),
            audio=parse_item_audio(
                element,
                self.contents_dir,
                self.dest_dir,
                has_contents_dir=self.has_contents_dir,
                assets=self.assets,
            ),
            link=parse_item_link(element, self.scripture_config),
            layout_mode=parse_item_layout_mode(element),
            layout_collection=parse_item_layout_collection(element),
            children=children,
        )

    @staticmethod
    def _build_screen(element: Element) -> ContentScreen:
        item_ids = tuple(
            item_id
            for wrapper in element.iterchildren(SCREEN_ITEMS_TAG)
            for ref in wrapper.iterchildren(SCREEN_ITEM_REF_TAG)
            if (item_id := parse_item_id(ref))
        )
        return ContentScreen(
            id=parse_item_id(element),
            title=build_lang_container(element.iterchildren(TITLE_TAG)),
            features=features_from(element.iterchildren(FEATURES_TAG)),
            item_ids=item_ids,
        )


__all__ = ["ContentsParseError", "ContentsTreeBuilder", "parse_contents_xml"]
