"""Extraction engine turning ``contents.xml`` elements into typed content items."""

from .classifier import Classification, classify_item
from .fields import (
    parse_item_audio,
    parse_item_features,
    parse_item_id,
    parse_item_image,
    parse_item_layout_collection,
    parse_item_layout_mode,
    parse_item_subtitle,
    parse_item_title,
    parse_item_type,
)
from .lang import build_lang_container
from .links import link_target_is_valid, parse_item_link
from .models import (
    ContentItem,
    ContentScreen,
    ContentsData,
    ItemKind,
    LangContainer,
    LinkMeta,
    LinkType,
    Unrecognized,
)
from .scope import is_tag_inner_nested_item, scoped_children, tag_has_inner_nested_items

__all__ = [
    "Classification",
    "ContentItem",
    "ContentScreen",
    "ContentsData",
    "ItemKind",
    "LangContainer",
    "LinkMeta",
    "LinkType",
    "Unrecognized",
    "build_lang_container",
    "classify_item",
    "is_tag_inner_nested_item",
    "link_target_is_valid",
    "parse_item_audio",
    "parse_item_features",
    "parse_item_id",
    "parse_item_image",
    "parse_item_layout_collection",
    "parse_item_layout_mode",
    "parse_item_link",
    "parse_item_subtitle",
    "parse_item_title",
    "parse_item_type",
    "scoped_children",
    "tag_has_inner_nested_items",
]
