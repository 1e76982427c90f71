"""Resolve which elements of ``contents.xml`` belong to which item.

The export reuses the same tag names (``title``, ``link``, ``features`` ...)
and even the same ``id`` values at every nesting depth, so a plain descendant
search on a grid would also return the titles of the items inside it. Every
lookup here decides ownership by walking parent links to the nearest enclosing
``contents-item`` and comparing that node by identity with the item being
extracted. Attribute values are never used to decide ownership.

Example
-------
>>> from lxml import etree
>>> root = etree.fromstring(
...     "<contents-item id='1' type='grid'><title>Grid</title>"
...     "<contents-items><contents-item id='1'><title>Leaf</title>"
...     "</contents-item></contents-items></contents-item>"
... )
>>> [el.text for el in scoped_children(root, "title")]
['Grid']
"""

from __future__ import annotations

import typing as typ

from lxml import etree

from sab_contents._constants import ITEM_TAG, ITEMS_TAG

if typ.TYPE_CHECKING:
    from lxml.etree import _Element as Element


def is_element(candidate: object) -> typ.TypeGuard[Element]:
    """Return ``True`` when ``candidate`` is a real XML element node."""
    return isinstance(candidate, etree._Element) and isinstance(candidate.tag, str)  # noqa: SLF001


def owning_item(element: Element) -> Element | None:
    """Return the nearest ``contents-item`` ancestor of ``element``, if any."""
    return next(element.iterancestors(ITEM_TAG), None)


def scoped_children(item: Element | None, tag_name: str) -> list[Element]:
    """Return descendants named ``tag_name`` that belong to ``item`` itself.

    Parameters
    ----------
    item : Element or None
        The ``contents-item`` whose own fields are wanted.
    tag_name : str
        Tag to look for, e.g. ``"title"``.

    Returns
    -------
    list[Element]
        Matches in document order whose owning item is ``item``; elements
        inside a nested item's subtree are excluded. Empty for absent input.
    """
    if not is_element(item):
        return []
    return [
        element
        for element in item.iter(tag_name)
        if element is not item and owning_item(element) is item
    ]


def first_scoped_child(item: Element | None, tag_name: str) -> Element | None:
    """Return the first element ``scoped_children`` would yield, or ``None``."""
    matches = scoped_children(item, tag_name)
    return matches[0] if matches else None


def is_tag_inner_nested_item(
    candidate: Element | None, item: Element | None = None
) -> bool:
    """Return whether ``candidate`` lives inside a nested item.

    With ``item`` supplied, the answer is ``True`` when another
    ``contents-item`` sits between ``candidate`` and ``item``. Without it,
    ``candidate`` counts as nested when its owning item is itself enclosed by
    another item. Absent or non-element input yields ``False``.
    """
    if not is_element(candidate):
        return False
    owner = owning_item(candidate)
    if owner is None:
        return False
    if item is None:
        return owning_item(owner) is not None
    if owner is item:
        return False
    return any(ancestor is item for ancestor in owner.iterancestors(ITEM_TAG))


def nested_items(item: Element | None) -> list[Element]:
    """Return the ``contents-item`` children of ``item``'s own wrapper(s)."""
    if not is_element(item):
        return []
    return [
        child
        for wrapper in item.iterchildren(ITEMS_TAG)
        for child in wrapper.iterchildren(ITEM_TAG)
    ]


def tag_has_inner_nested_items(item: Element | None) -> bool:
    """Return ``True`` when ``item`` directly wraps at least one nested item."""
    return bool(nested_items(item))


__all__ = [
    "first_scoped_child",
    "is_element",
    "is_tag_inner_nested_item",
    "nested_items",
    "owning_item",
    "scoped_children",
    "tag_has_inner_nested_items",
]
