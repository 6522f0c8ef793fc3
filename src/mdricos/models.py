"""Public data models for mdricos.

This module contains the block token type consumed by the walker, the
inline decoration and segment types produced by the resolver, and the
node / document tree returned by a conversion.  All types are frozen
dataclasses with no behaviour beyond construction helpers; serialisation to
RICOS JSON lives in :mod:`mdricos.converter.serialize`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class DecorationType(str, Enum):
    """Style attributes that can be attached to a text segment."""

    COLOR = "COLOR"
    BOLD = "BOLD"
    ITALIC = "ITALIC"
    UNDERLINE = "UNDERLINE"
    LINK = "LINK"


class NodeType(str, Enum):
    """Type tag of a document node."""

    HEADING = "HEADING"
    PARAGRAPH = "PARAGRAPH"
    BULLETED_LIST = "BULLETED_LIST"
    ORDERED_LIST = "ORDERED_LIST"
    LIST_ITEM = "LIST_ITEM"
    CODE_BLOCK = "CODE_BLOCK"
    BLOCKQUOTE = "BLOCKQUOTE"
    DIVIDER = "DIVIDER"
    IMAGE = "IMAGE"
    TEXT = "TEXT"
    """Leaf node carrying a :class:`Segment` instead of children."""


# ---------------------------------------------------------------------------
# Block tokens (walker input)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Token:
    """One block-level markdown token.

    Attributes
    ----------
    kind:
        Block kind: ``"heading"``, ``"paragraph"``, ``"list"``, ``"code"``,
        ``"blockquote"``, ``"hr"``, ``"space"``, ``"html"``, ``"image"``.
        Any other value is accepted and ignored by the walker.
    text:
        Raw inline markdown (headings, paragraphs, quotes), verbatim code
        (``code``), raw HTML (``html``) or alt text (``image``).
    depth:
        Heading level for ``heading`` tokens.
    items:
        Raw inline markdown of each item for ``list`` tokens.
    ordered:
        Whether a ``list`` token is numbered.
    lang:
        Fence info language for ``code`` tokens.
    href:
        Image source for ``image`` tokens.
    """

    kind: str
    text: str = ""
    depth: int | None = None
    items: tuple[str, ...] = ()
    ordered: bool = False
    lang: str | None = None
    href: str | None = None


# ---------------------------------------------------------------------------
# Inline decorations
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Decoration:
    """A tagged style attribute.

    ``color`` is set only for :attr:`DecorationType.COLOR` and ``url`` only
    for :attr:`DecorationType.LINK`.
    """

    type: DecorationType
    color: str | None = None
    url: str | None = None

    @classmethod
    def color_of(cls, foreground: str) -> Decoration:
        return cls(DecorationType.COLOR, color=foreground)

    @classmethod
    def link_to(cls, url: str) -> Decoration:
        return cls(DecorationType.LINK, url=url)


BOLD = Decoration(DecorationType.BOLD)
ITALIC = Decoration(DecorationType.ITALIC)
UNDERLINE = Decoration(DecorationType.UNDERLINE)


@dataclass(frozen=True)
class Segment:
    """A contiguous run of text sharing one ordered decoration list."""

    text: str
    decorations: tuple[Decoration, ...] = ()


# ---------------------------------------------------------------------------
# Image references
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ImageReference:
    """Where an image lives: a hosted media id or an external URL.

    Exactly one of the two attributes is set.  Use :meth:`hosted` and
    :meth:`external` rather than the constructor.
    """

    hosted_id: str | None = None
    external_url: str | None = None

    @classmethod
    def hosted(cls, media_id: str) -> ImageReference:
        return cls(hosted_id=media_id)

    @classmethod
    def external(cls, url: str) -> ImageReference:
        return cls(external_url=url)

    @property
    def is_hosted(self) -> bool:
        return self.hosted_id is not None


# ---------------------------------------------------------------------------
# Node payloads
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextData:
    segment: Segment


@dataclass(frozen=True)
class ParagraphData:
    text_alignment: str = "AUTO"


@dataclass(frozen=True)
class HeadingData:
    level: int
    text_alignment: str = "AUTO"


@dataclass(frozen=True)
class ListData:
    indentation: int = 0


@dataclass(frozen=True)
class CodeBlockData:
    language: str
    text_alignment: str = "AUTO"


@dataclass(frozen=True)
class BlockquoteData:
    indentation: int = 0


@dataclass(frozen=True)
class DividerData:
    line_style: str = "SINGLE"
    width: str = "LARGE"
    alignment: str = "CENTER"


@dataclass(frozen=True)
class ImageData:
    """Payload of an IMAGE node.

    Attributes
    ----------
    reference:
        Hosted media id or external URL of the asset.
    alt:
        Alternative text (may be empty).
    width, height:
        Pixel dimensions; a square fallback when the source gave none.
    container_width:
        Container width mode (``"CONTENT"`` by default).
    alignment:
        Container alignment.
    """

    reference: ImageReference
    alt: str
    width: int
    height: int
    container_width: str = "CONTENT"
    alignment: str = "CENTER"


NodeData = Union[
    TextData,
    ParagraphData,
    HeadingData,
    ListData,
    CodeBlockData,
    BlockquoteData,
    DividerData,
    ImageData,
    None,
]


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Node:
    """A typed unit of the document tree.

    Attributes
    ----------
    type:
        The node type tag.
    id:
        Opaque identifier.  Empty for TEXT leaves inside code blocks.
    nodes:
        Ordered children.  Always empty for TEXT, DIVIDER and IMAGE.
    data:
        Type-specific payload (``None`` for LIST_ITEM).
    """

    type: NodeType
    id: str
    nodes: tuple[Node, ...] = ()
    data: NodeData = None

    @property
    def is_spacer(self) -> bool:
        """True for a blank paragraph."""
        return self.type is NodeType.PARAGRAPH and not self.nodes


@dataclass(frozen=True)
class DocumentMetadata:
    """Version and timestamps written alongside the node list.

    Timestamps are ISO-8601 UTC strings.
    """

    version: int = 1
    created_timestamp: str = ""
    updated_timestamp: str = ""


@dataclass(frozen=True)
class Document:
    """Root container; node order is the document's read order."""

    nodes: tuple[Node, ...] = ()
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
