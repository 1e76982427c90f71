"""Per-field extractors for a single ``contents-item`` element.

Every extractor is a pure function of an element (plus contextual paths) and
is wrapped by :func:`tolerant`, so absent input (``None`` or anything that is
not an XML element) degrades to the field's empty value instead of raising.
Lookups go through :mod:`sab_contents.parser.scope` so a container never picks
up fields declared by the items nested inside it.

Example
-------
>>> from lxml import etree
>>> item = etree.fromstring(
...     "<contents-item id='7'><title lang='default'>Intro</title>"
...     "<title lang='TPI'>Wanpela samting</title></contents-item>"
... )
>>> parse_item_id(item)
7
>>> parse_item_title(item)
{'default': 'Intro', 'tpi': 'Wanpela samting'}
>>> parse_item_title(None)
{}
"""

from __future__ import annotations

import functools
import logging
import typing as typ
from pathlib import Path

from sab_contents._constants import (
    AUDIO_FILENAME_TAG,
    AUDIO_TAG,
    FEATURE_TAG,
    FEATURES_TAG,
    IMAGE_TAG,
    LAYOUT_COLLECTION_TAG,
    LAYOUT_MODE_TAG,
    LAYOUT_TAG,
    SUBTITLE_TAG,
    TITLE_TAG,
)
from sab_contents.assets import FileSystemAssets

from .lang import build_lang_container, element_lang, element_text
from .models import ItemKind, coerce_kind
from .scope import (
    first_scoped_child,
    is_element,
    scoped_children,
    tag_has_inner_nested_items,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from lxml.etree import _Element as Element

    from sab_contents.assets import AssetLocator

    from .models import Kind, LangContainer

logger = logging.getLogger(__name__)

R = typ.TypeVar("R")


def tolerant(
    default_factory: cabc.Callable[[], R],
) -> cabc.Callable[[cabc.Callable[..., R]], cabc.Callable[..., R]]:
    """Return ``default_factory()`` whenever the wrapped extractor gets no element.

    The first positional argument of the decorated function is the item
    element. Extractors never repeat the guard themselves.
    """

    def decorate(func: cabc.Callable[..., R]) -> cabc.Callable[..., R]:
        @functools.wraps(func)
        def wrapper(item: object, *args: typ.Any, **kwargs: typ.Any) -> R:
            if not is_element(item):
                return default_factory()
            return func(item, *args, **kwargs)

        return wrapper

    return decorate


def _none() -> None:
    return None


def _zero() -> int:
    return 0


def features_from(blocks: cabc.Iterable[Element]) -> dict[str, str]:
    """Collect ``feature`` name/value pairs from ``features`` blocks.

    Pairs with a blank name or value are dropped; the first value declared
    for a name wins.
    """
    features: dict[str, str] = {}
    for block in blocks:
        for feature in block.iterchildren(FEATURE_TAG):
            name = (feature.get("name") or "").strip()
            value = (feature.get("value") or "").strip()
            if name and value:
                features.setdefault(name, value)
    return features


@tolerant(_zero)
def parse_item_id(item: Element) -> int:
    """Return the integer ``id`` attribute, or ``0`` when absent or invalid.

    Only plain ASCII digits count as an id; signs, separators such as
    ``1_000`` and non-ASCII digits are rejected.
    """
    raw = (item.get("id") or "").strip()
    if not (raw.isascii() and raw.isdigit()):
        logger.debug("Item has no usable id attribute: %r", raw)
        return 0
    return int(raw)


@tolerant(dict)
def parse_item_title(item: Element) -> LangContainer:
    """Return the item's own localized titles, ignoring nested items' titles."""
    return build_lang_container(scoped_children(item, TITLE_TAG))


@tolerant(dict)
def parse_item_subtitle(item: Element) -> LangContainer:
    """Return the item's own localized subtitles."""
    return build_lang_container(scoped_children(item, SUBTITLE_TAG))


@tolerant(_none)
def parse_item_type(item: Element, has_inner_items: bool | None = None) -> Kind:
    """Return the item's kind.

    Parameters
    ----------
    item : Element
        The ``contents-item`` element.
    has_inner_items : bool, optional
        Precomputed result of ``tag_has_inner_nested_items(item)``; computed
        when omitted.

    Returns
    -------
    ItemKind or Unrecognized or None
        The explicit ``type`` attribute when present (unknown values are
        carried as ``Unrecognized``). Without one, ``grid`` for an item that
        wraps nested items and ``single`` otherwise. ``None`` for absent
        input.
    """
    declared = (item.get("type") or "").strip()
    if declared:
        return coerce_kind(declared)
    if has_inner_items is None:
        has_inner_items = tag_has_inner_nested_items(item)
    return ItemKind.GRID if has_inner_items else ItemKind.SINGLE


@tolerant(dict)
def parse_item_features(item: Element) -> dict[str, str]:
    """Return the item's own ``feature`` name/value pairs."""
    return features_from(scoped_children(item, FEATURES_TAG))


@tolerant(_none)
def parse_item_image(
    item: Element,
    contents_dir: str | Path,
    *,
    has_contents_dir: bool | None = None,
    assets: AssetLocator | None = None,
) -> str | None:
    """Return the path of the item's image inside ``contents_dir``.

    ``None`` when the item names no image, the contents directory is not
    available, or the referenced file is missing or resolves outside
    ``contents_dir`` (both of the latter are logged).
    """
    element = first_scoped_child(item, IMAGE_TAG)
    filename = element_text(element) if element is not None else ""
    if not filename:
        return None
    locator = assets or FileSystemAssets()
    if not _contents_available(contents_dir, has_contents_dir, locator):
        logger.debug("Contents directory unavailable; skipping image %s", filename)
        return None
    path = locator.join(contents_dir, "", filename)
    if not _inside_contents_dir(path, contents_dir):
        logger.warning(
            "Image '%s' for item %s points outside %s; ignoring it",
            filename,
            item.get("id"),
            contents_dir,
        )
        return None
    if not locator.exists(path):
        logger.warning(
            "Image '%s' for item %s not found in %s",
            filename,
            item.get("id"),
            contents_dir,
        )
        return None
    return path


@tolerant(dict)
def parse_item_audio(
    item: Element,
    contents_dir: str | Path,
    dest_dir: str | Path,
    *,
    has_contents_dir: bool | None = None,
    assets: AssetLocator | None = None,
) -> LangContainer:
    """Return localized audio paths relative to ``dest_dir``.

    Each ``audio`` element contributes its ``filename`` children (or its own
    text when it has none); a ``lang`` on the ``audio`` element applies to
    children that declare none. Missing files and files that resolve outside
    ``contents_dir`` are logged and omitted. The result is empty when either
    directory is unavailable.
    """
    if not contents_dir or not dest_dir:
        return {}
    locator = assets or FileSystemAssets()
    if not _contents_available(contents_dir, has_contents_dir, locator):
        return {}

    audio: LangContainer = {}
    for lang, filename in _audio_sources(item):
        if lang in audio:
            continue
        source = locator.join(contents_dir, "", filename)
        if not _inside_contents_dir(source, contents_dir):
            logger.warning(
                "Audio '%s' (%s) for item %s points outside %s; ignoring it",
                filename,
                lang,
                item.get("id"),
                contents_dir,
            )
            continue
        if not locator.exists(source):
            logger.warning(
                "Audio '%s' (%s) for item %s not found in %s",
                filename,
                lang,
                item.get("id"),
                contents_dir,
            )
            continue
        audio[lang] = locator.join(contents_dir, dest_dir, filename)
    return audio


def _audio_sources(item: Element) -> cabc.Iterator[tuple[str, str]]:
    """Yield ``(lang, filename)`` pairs declared by the item's own audio tags."""
    for audio in scoped_children(item, AUDIO_TAG):
        inherited = element_lang(audio)
        sources = list(audio.iterchildren(AUDIO_FILENAME_TAG)) or [audio]
        for source in sources:
            filename = element_text(source)
            if filename:
                yield element_lang(source, default=inherited), filename


def _inside_contents_dir(path: str | Path, contents_dir: str | Path) -> bool:
    """Return whether ``path`` resolves to an entry strictly below ``contents_dir``."""
    root = Path(contents_dir).resolve()
    resolved = Path(path).resolve()
    return resolved != root and resolved.is_relative_to(root)


def _contents_available(
    contents_dir: str | Path, has_contents_dir: bool | None, locator: AssetLocator
) -> bool:
    if has_contents_dir is not None:
        return has_contents_dir
    return bool(contents_dir) and locator.exists(contents_dir)


@tolerant(_none)
def parse_item_layout_mode(item: Element) -> str | None:
    """Return the ``mode`` of the item's ``layout`` (or its ``layout-mode`` text)."""
    layout = first_scoped_child(item, LAYOUT_TAG)
    if layout is not None:
        mode = (layout.get("mode") or "").strip()
        if mode:
            return mode
    element = first_scoped_child(item, LAYOUT_MODE_TAG)
    if element is not None:
        return element_text(element) or None
    return None


@tolerant(_none)
def parse_item_layout_collection(item: Element) -> tuple[str, ...] | None:
    """Return the item's layout collection ids in order, or ``None`` if none."""
    entries = tuple(
        text
        for text in map(element_text, scoped_children(item, LAYOUT_COLLECTION_TAG))
        if text
    )
    return entries or None


__all__ = [
    "features_from",
    "parse_item_audio",
    "parse_item_features",
    "parse_item_id",
    "parse_item_image",
    "parse_item_layout_collection",
    "parse_item_layout_mode",
    "parse_item_subtitle",
    "parse_item_title",
    "parse_item_type",
    "tolerant",
]
