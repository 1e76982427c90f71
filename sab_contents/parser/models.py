"""Typed value objects produced by the contents extraction pipeline."""

from __future__ import annotations

import dataclasses as dc
import enum
import types
import typing as typ

LangContainer: typ.TypeAlias = dict[str, str]
"""Mapping of lower-cased language code to a non-empty text or asset path."""

TextMap: typ.TypeAlias = typ.Mapping[str, str]
"""Read-only mapping held by the tree models in place of a ``dict``."""


class ItemKind(enum.StrEnum):
    """Known menu item kinds emitted by the authoring tool."""

    SINGLE = "single"
    HEADING = "heading"
    CAROUSEL = "carousel"
    GRID = "grid"

    @property
    def is_container(self) -> bool:
        """Return ``True`` for kinds that own nested items."""
        return self in (ItemKind.CAROUSEL, ItemKind.GRID)


class LinkType(enum.StrEnum):
    """Known navigation link types."""

    NONE = "none"
    REFERENCE = "reference"
    SCREEN = "screen"
    URL = "url"


@dc.dataclass(frozen=True, slots=True)
class Unrecognized:
    """Carrier for a ``type`` value outside the known enumerations.

    New authoring-tool releases may introduce item kinds or link types this
    package does not know about yet; they travel through extraction verbatim.
    """

    value: str

    @property
    def is_container(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.value


Kind: typ.TypeAlias = ItemKind | Unrecognized
LinkKind: typ.TypeAlias = LinkType | Unrecognized


def coerce_kind(value: str) -> Kind:
    """Return the ``ItemKind`` matching ``value`` or an ``Unrecognized`` carrier."""
    try:
        return ItemKind(value.strip().lower())
    except ValueError:
        return Unrecognized(value.strip())


def coerce_link_type(value: str) -> LinkKind:
    """Return the ``LinkType`` matching ``value`` or an ``Unrecognized`` carrier."""
    try:
        return LinkType(value.strip().lower())
    except ValueError:
        return Unrecognized(value.strip())


@dc.dataclass(frozen=True, slots=True)
class LinkMeta:
    """Navigation descriptor attached to an item.

    Attributes
    ----------
    link_type : LinkType | Unrecognized | None
        Kind of navigation; ``None`` means the item has no link at all.
    link_target : str | None
        Target of the link; always set when ``link_type`` is not ``none``.
    link_location : str | None
        Legacy location hint carried through untouched.
    """

    link_type: LinkKind | None = None
    link_target: str | None = None
    link_location: str | None = None

    def __bool__(self) -> bool:
        return self.link_type is not None

    def to_payload(self) -> dict[str, str]:
        """Return the camelCase mapping consumed by the rendering layer."""
        payload: dict[str, str] = {}
        if self.link_type is not None:
            payload["linkType"] = str(self.link_type)
        if self.link_target:
            payload["linkTarget"] = self.link_target
        if self.link_location:
            payload["linkLocation"] = self.link_location
        return payload


def _freeze_mappings(instance: object, *names: str) -> None:
    """Swap the named mapping fields of a frozen model for read-only copies."""
    for name in names:
        frozen = types.MappingProxyType(dict(getattr(instance, name)))
        object.__setattr__(instance, name, frozen)


@dc.dataclass(frozen=True, slots=True)
class ContentItem:
    """One ``contents-item`` resolved into typed fields.

    Attributes
    ----------
    id : int
        Item identifier; ``0`` marks a missing or invalid id.
    kind : ItemKind | Unrecognized
        Semantic category of the item.
    title, subtitle : Mapping[str, str]
        Localized text; empty when the item declares none.
    features : Mapping[str, str]
        Feature name to value pairs.
    image : str | None
        Resolved image path.
    audio : Mapping[str, str]
        Localized, destination-relative audio paths.
    link : LinkMeta
        Navigation descriptor; falsy when the item has no link.
    layout_mode : str | None
        Layout mode hint.
    layout_collection : tuple[str, ...] | None
        Ordered layout identifiers, never empty when present.
    children : tuple[ContentItem, ...]
        Nested items; only grids and carousels own any.

    Mapping fields are stored as read-only views, so an item compares by
    value but cannot be hashed.
    """

    id: int
    kind: Kind
    title: TextMap = dc.field(default_factory=dict)
    subtitle: TextMap = dc.field(default_factory=dict)
    features: TextMap = dc.field(default_factory=dict)
    image: str | None = None
    audio: TextMap = dc.field(default_factory=dict)
    link: LinkMeta = dc.field(default_factory=LinkMeta)
    layout_mode: str | None = None
    layout_collection: tuple[str, ...] | None = None
    children: tuple[ContentItem, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        _freeze_mappings(self, "title", "subtitle", "features", "audio")

    def to_payload(self) -> dict[str, typ.Any]:
        """Return a JSON-ready mapping, omitting empty optional fields."""
        payload: dict[str, typ.Any] = {"id": self.id, "type": str(self.kind)}
        if self.title:
            payload["title"] = dict(self.title)
        if self.subtitle:
            payload["subtitle"] = dict(self.subtitle)
        if self.features:
            payload["features"] = dict(self.features)
        if self.image:
            payload["imageFilename"] = self.image
        if self.audio:
            payload["audioFilename"] = dict(self.audio)
        payload.update(self.link.to_payload())
        if self.layout_mode:
            payload["layoutMode"] = self.layout_mode
        if self.layout_collection:
            payload["layoutCollection"] = list(self.layout_collection)
        if self.children:
            payload["items"] = [child.to_payload() for child in self.children]
        return payload

    def walk(self) -> typ.Iterator[ContentItem]:
        """Yield this item followed by every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dc.dataclass(frozen=True, slots=True)
class ContentScreen:
    """A screen grouping top-level items by id. Unhashable, like ``ContentItem``."""

    id: int
    title: TextMap = dc.field(default_factory=dict)
    features: TextMap = dc.field(default_factory=dict)
    item_ids: tuple[int, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        _freeze_mappings(self, "title", "features")

    def to_payload(self) -> dict[str, typ.Any]:
        payload: dict[str, typ.Any] = {"id": self.id, "items": list(self.item_ids)}
        if self.title:
            payload["title"] = dict(self.title)
        if self.features:
            payload["features"] = dict(self.features)
        return payload


@dc.dataclass(frozen=True, slots=True)
class ContentsData:
    """The whole ``contents.xml`` document as consumed by the renderer."""

    title: TextMap = dc.field(default_factory=dict)
    features: TextMap = dc.field(default_factory=dict)
    items: tuple[ContentItem, ...] = ()
    screens: tuple[ContentScreen, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        _freeze_mappings(self, "title", "features")

    def to_payload(self) -> dict[str, typ.Any]:
        payload: dict[str, typ.Any] = {}
        if self.title:
            payload["title"] = dict(self.title)
        payload["features"] = dict(self.features)
        payload["items"] = [item.to_payload() for item in self.items]
        payload["screens"] = [screen.to_payload() for screen in self.screens]
        return payload

    def walk(self) -> typ.Iterator[ContentItem]:
        """Yield every item in the tree, depth first."""
        for item in self.items:
            yield from item.walk()


__all__ = [
    "ContentItem",
    "ContentScreen",
    "ContentsData",
    "ItemKind",
    "Kind",
    "LangContainer",
    "LinkKind",
    "LinkMeta",
    "LinkType",
    "TextMap",
    "Unrecognized",
    "coerce_kind",
    "coerce_link_type",
]
