"""Fold repeated, ``lang``-tagged elements into a language container."""

from __future__ import annotations

import typing as typ

from sab_contents._constants import DEFAULT_LANG_KEY, LANG_ATTRIBUTE

from .scope import is_element

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from lxml.etree import _Element as Element

    from .models import LangContainer


def element_text(element: Element) -> str:
    """Return all text beneath ``element`` with surrounding whitespace removed."""
    return "".join(element.itertext()).strip()


def element_lang(element: Element, default: str = DEFAULT_LANG_KEY) -> str:
    """Return the lower-cased ``lang`` attribute or ``default`` when unset."""
    for name, value in element.attrib.items():
        if name.lower() == LANG_ATTRIBUTE:
            lang = value.strip().lower()
            return lang or default
    return default


def build_lang_container(
    elements: cabc.Iterable[Element] | None,
    *,
    value_for: cabc.Callable[[Element], str] = element_text,
) -> LangContainer:
    """Map each element's language to its value.

    Parameters
    ----------
    elements : Iterable[Element] or None
        Already-scoped elements such as an item's own ``title`` tags.
    value_for : Callable[[Element], str], optional
        Extracts the value stored for an element; defaults to its stripped
        text.

    Returns
    -------
    LangContainer
        Language code to value. Blank values are skipped and the first value
        seen for a language wins. Empty for absent or empty input.
    """
    container: LangContainer = {}
    for element in elements or ():
        if not is_element(element):
            continue
        value = value_for(element).strip()
        if not value:
            continue
        container.setdefault(element_lang(element), value)
    return container


__all__ = ["build_lang_container", "element_lang", "element_text"]
