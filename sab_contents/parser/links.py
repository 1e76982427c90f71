"""Extract and check the navigation link attached to a contents item.

Links arrive as ``<link type="reference" target="MRK.1.1"/>``. The extractor
only normalises what the export declares; checking that a target has the
shape its type implies is left to :func:`link_target_is_valid`, which the CLI
``check`` command and the test-suite use.
"""

from __future__ import annotations

import logging
import re
import typing as typ
from urllib.parse import urlsplit

from sab_contents._constants import LINK_TAG

from .fields import tolerant
from .models import LinkMeta, LinkType, coerce_link_type
from .scope import first_scoped_child

if typ.TYPE_CHECKING:
    from lxml.etree import _Element as Element

    from sab_contents.config import ScriptureConfig

logger = logging.getLogger(__name__)

REFERENCE_TARGET_PATTERN = re.compile(r"^([A-Z]{3})\.(\d+)\.(\d+)$", re.IGNORECASE)
SCREEN_TARGET_PATTERN = re.compile(r"^\d+$")


@tolerant(LinkMeta)
def parse_item_link(
    item: Element, scripture_config: ScriptureConfig | None = None
) -> LinkMeta:
    """Return the item's own link as a ``LinkMeta``.

    Parameters
    ----------
    item : Element
        The ``contents-item`` element.
    scripture_config : ScriptureConfig, optional
        Configuration of the enclosing app, reserved for resolving link
        targets; extraction does not depend on it.

    Returns
    -------
    LinkMeta
        Empty when the item has no ``link`` tag, the tag has no ``type``, or a
        non-``none`` link lacks a target. Unknown types are preserved as
        ``Unrecognized``.
    """
    element = first_scoped_child(item, LINK_TAG)
    if element is None:
        logger.debug("Item %s has no link", item.get("id"))
        return LinkMeta()

    declared = (element.get("type") or "").strip()
    if not declared:
        return LinkMeta()
    link_type = coerce_link_type(declared)
    target = (element.get("target") or "").strip() or None
    location = (element.get("location") or "").strip() or None

    if link_type is not LinkType.NONE and target is None:
        logger.warning(
            "Item %s has a '%s' link without a target; ignoring it",
            item.get("id"),
            declared,
        )
        return LinkMeta()
    if scripture_config is None:
        logger.debug("No scripture config supplied for item %s link", item.get("id"))
    return LinkMeta(link_type=link_type, link_target=target, link_location=location)


def link_target_is_valid(
    link: LinkMeta, scripture_config: ScriptureConfig | None = None
) -> bool:
    """Return whether ``link.link_target`` has the shape its type implies.

    Reference targets look like ``BOOK.chapter.verse`` (and, when the config
    lists book ids, name one of them); screen targets are numeric ids; URL
    targets need an ``http``/``https`` scheme and a host. Empty links, ``none``
    links, and unrecognized types are accepted.
    """
    target = link.link_target or ""
    match link.link_type:
        case LinkType.REFERENCE:
            found = REFERENCE_TARGET_PATTERN.match(target)
            if found is None:
                return False
            books = scripture_config.book_ids if scripture_config else []
            return not books or found.group(1).upper() in books
        case LinkType.SCREEN:
            return SCREEN_TARGET_PATTERN.match(target) is not None
        case LinkType.URL:
            parts = urlsplit(target)
            return parts.scheme in ("http", "https") and bool(parts.netloc)
        case _:
            return True


__all__ = [
    "REFERENCE_TARGET_PATTERN",
    "SCREEN_TARGET_PATTERN",
    "link_target_is_valid",
    "parse_item_link",
]
