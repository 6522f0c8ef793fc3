"""Pure constructors for RICOS document nodes.

One builder per node type.  Every builder takes the active
:class:`~mdricos.config.RicosConfig` and an id generator, draws a fresh id
for the node it returns, and never looks at sibling nodes.  Inline text is
resolved through :func:`~mdricos.converter.decorations.resolve_inline`;
image sources through
:func:`~mdricos.image.detect.classify_image_source`.
"""

from __future__ import annotations

from mdricos.config import RicosConfig
from mdricos.converter.decorations import resolve_inline
from mdricos.image.detect import classify_image_source
from mdricos.models import (
    BlockquoteData,
    CodeBlockData,
    Decoration,
    DividerData,
    HeadingData,
    ImageData,
    ListData,
    Node,
    NodeType,
    ParagraphData,
    Segment,
    TextData,
)
from mdricos.utils.ids import IdGenerator

_MIN_HEADING_LEVEL = 1
_MAX_HEADING_LEVEL = 6


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def build_text(segment: Segment, new_id: IdGenerator) -> Node:
    """Build a TEXT leaf carrying *segment*."""
    return Node(NodeType.TEXT, new_id(), data=TextData(segment))


def _text_nodes(text: str, color: str, new_id: IdGenerator) -> tuple[Node, ...]:
    # Empty segments carry nothing to render.
    return tuple(
        build_text(seg, new_id)
        for seg in resolve_inline(text, color)
        if seg.text
    )


# ---------------------------------------------------------------------------
# Paragraph-like nodes
# ---------------------------------------------------------------------------

def build_paragraph(text: str, config: RicosConfig, new_id: IdGenerator) -> Node:
    """Build a PARAGRAPH from raw inline markdown."""
    return Node(
        NodeType.PARAGRAPH,
        new_id(),
        nodes=_text_nodes(text, config.text_color, new_id),
        data=ParagraphData(text_alignment=config.text_alignment),
    )


def build_spacer(config: RicosConfig, new_id: IdGenerator) -> Node:
    """Build a blank PARAGRAPH used for vertical spacing."""
    return Node(
        NodeType.PARAGRAPH,
        new_id(),
        data=ParagraphData(text_alignment=config.text_alignment),
    )


def build_heading(
    text: str, level: int, config: RicosConfig, new_id: IdGenerator,
) -> Node:
    """Build a HEADING.  *level* is clamped to 1-6; text uses the heading color."""
    level = max(_MIN_HEADING_LEVEL, min(_MAX_HEADING_LEVEL, level))
    return Node(
        NodeType.HEADING,
        new_id(),
        nodes=_text_nodes(text, config.heading_color, new_id),
        data=HeadingData(level=level, text_alignment=config.text_alignment),
    )


def build_blockquote(text: str, config: RicosConfig, new_id: IdGenerator) -> Node:
    """Build a BLOCKQUOTE wrapping a single paragraph."""
    node_id = new_id()
    return Node(
        NodeType.BLOCKQUOTE,
        node_id,
        nodes=(build_paragraph(text, config, new_id),),
        data=BlockquoteData(),
    )


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------

def build_list_item(text: str, config: RicosConfig, new_id: IdGenerator) -> Node:
    """Build a LIST_ITEM wrapping a single paragraph."""
    node_id = new_id()
    return Node(
        NodeType.LIST_ITEM,
        node_id,
        nodes=(build_paragraph(text, config, new_id),),
    )


def build_list(
    items: tuple[str, ...] | list[str],
    ordered: bool,
    config: RicosConfig,
    new_id: IdGenerator,
) -> Node:
    """Build a BULLETED_LIST or ORDERED_LIST with one item per entry of *items*."""
    node_type = NodeType.ORDERED_LIST if ordered else NodeType.BULLETED_LIST
    node_id = new_id()
    return Node(
        node_type,
        node_id,
        nodes=tuple(build_list_item(item, config, new_id) for item in items),
        data=ListData(),
    )


# ---------------------------------------------------------------------------
# Code, divider, image
# ---------------------------------------------------------------------------

def build_code_block(
    code: str, language: str | None, config: RicosConfig, new_id: IdGenerator,
) -> Node:
    """Build a CODE_BLOCK holding *code* verbatim.

    No inline markdown is resolved.  The single TEXT child has an empty id
    and only the base text color.
    """
    segment = Segment(code, (Decoration.color_of(config.text_color),))
    return Node(
        NodeType.CODE_BLOCK,
        new_id(),
        nodes=(Node(NodeType.TEXT, "", data=TextData(segment)),),
        data=CodeBlockData(
            language=language or config.code_language_default,
            text_alignment=config.text_alignment,
        ),
    )


def build_divider(config: RicosConfig, new_id: IdGenerator) -> Node:
    """Build a DIVIDER with the configured presentation defaults."""
    return Node(
        NodeType.DIVIDER,
        new_id(),
        data=DividerData(
            line_style=config.divider_line_style,
            width=config.divider_width,
            alignment=config.divider_alignment,
        ),
    )


def build_image(
    src: str,
    alt: str,
    config: RicosConfig,
    new_id: IdGenerator,
    *,
    width: int | None = None,
    height: int | None = None,
) -> Node:
    """Build an IMAGE node.

    Missing dimensions fall back to ``config.image_default_size``; when only
    one is given it is used for both.
    """
    width = width or height or config.image_default_size
    height = height or width
    return Node(
        NodeType.IMAGE,
        new_id(),
        data=ImageData(
            reference=classify_image_source(src, config),
            alt=alt,
            width=width,
            height=height,
            container_width=config.image_container_width,
            alignment=config.image_alignment,
        ),
    )
