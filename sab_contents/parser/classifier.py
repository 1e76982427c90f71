"""Decide an item's final kind and whether it owns nested items."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from .fields import parse_item_id, parse_item_type
from .models import ItemKind
from .scope import tag_has_inner_nested_items

if typ.TYPE_CHECKING:
    from lxml.etree import _Element as Element

    from .models import Kind

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class Classification:
    """Outcome of classifying one item.

    Attributes
    ----------
    kind : ItemKind | Unrecognized
        Final kind of the item.
    owns_children : bool
        ``True`` only for grids and carousels that wrap nested items.
    """

    kind: Kind
    owns_children: bool


def classify_item(item: Element | None) -> Classification | None:
    """Classify ``item`` so that only containers ever own children.

    An item without a ``type`` attribute is a ``single`` unless it wraps
    nested items, in which case it is a ``grid``. A declared ``grid`` or
    ``carousel`` with nothing nested is demoted to ``single``; nested items
    under any other declared kind are not attached. Both mismatches are
    logged. Returns ``None`` for absent input.
    """
    has_inner_items = tag_has_inner_nested_items(item)
    kind = parse_item_type(item, has_inner_items)
    if kind is None:
        return None

    if kind.is_container and not has_inner_items:
        logger.warning(
            "Item %s is declared '%s' but has no nested items; treating it as single",
            parse_item_id(item),
            kind,
        )
        return Classification(kind=ItemKind.SINGLE, owns_children=False)
    if has_inner_items and not kind.is_container:
        logger.warning(
            "Item %s of kind '%s' wraps nested items; they are ignored",
            parse_item_id(item),
            kind,
        )
        return Classification(kind=kind, owns_children=False)
    return Classification(kind=kind, owns_children=has_inner_items)


__all__ = ["Classification", "classify_item"]
