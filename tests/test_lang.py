"""Unit tests for folding ``lang``-tagged elements into language containers."""

from __future__ import annotations

from lxml import etree

from sab_contents.parser.lang import build_lang_container, element_lang


def _titles(xml: str) -> list[etree._Element]:
    return list(etree.fromstring(xml).iter("title"))


def test_missing_lang_uses_default_key() -> None:
    """Tags without a ``lang`` attribute land under ``default``."""
    titles = _titles("<item><title>Hello</title></item>")
    assert build_lang_container(titles) == {"default": "Hello"}


def test_lang_codes_are_lower_cased() -> None:
    """Language codes are normalised to lower case."""
    titles = _titles("<item><title lang='TPI'>Wanpela samting</title></item>")
    assert build_lang_container(titles) == {"tpi": "Wanpela samting"}


def test_lang_attribute_name_is_case_insensitive() -> None:
    """``LANG`` and ``lang`` are the same attribute."""
    element = etree.fromstring("<title LANG='En'>Hi</title>")
    assert element_lang(element) == "en"


def test_blank_values_are_skipped() -> None:
    """Whitespace-only text never produces an entry."""
    titles = _titles(
        "<item><title lang='default'>   </title><title lang='en'>Hi</title></item>"
    )
    container = build_lang_container(titles)
    assert container == {"en": "Hi"}
    assert all(value for value in container.values())


def test_first_value_for_a_language_wins() -> None:
    """Repeated languages keep the first non-empty value."""
    titles = _titles(
        "<item><title lang='en'>First</title><title lang='EN'>Second</title></item>"
    )
    assert build_lang_container(titles) == {"en": "First"}


def test_text_includes_descendant_text() -> None:
    """Inline markup inside a title contributes to its text."""
    titles = _titles("<item><title> Big <b>News</b> </title></item>")
    assert build_lang_container(titles) == {"default": "Big News"}


def test_absent_or_empty_input_gives_empty_container() -> None:
    """No elements means no languages."""
    assert build_lang_container(None) == {}
    assert build_lang_container([]) == {}
