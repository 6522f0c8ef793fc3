"""Serialise documents to RICOS JSON dicts.

Output shape::

    {
        "nodes": [
            {"type": "PARAGRAPH", "id": "k3v9x0qa", "nodes": [...],
             "paragraphData": {"textStyle": {"textAlignment": "AUTO"}}},
            ...
        ],
        "metadata": {"version": 1, "createdTimestamp": "...",
                     "updatedTimestamp": "..."},
        "documentStyle": {}
    }

TEXT leaves carry ``textData`` with the segment text and its decorations
in order.  Image sources are written as ``{"id": ...}`` for hosted media
and ``{"url": ...}`` for external URLs.
"""

from __future__ import annotations

from typing import Any

from mdricos.models import (
    BlockquoteData,
    CodeBlockData,
    Decoration,
    DecorationType,
    DividerData,
    Document,
    HeadingData,
    ImageData,
    ImageReference,
    ListData,
    Node,
    NodeType,
    ParagraphData,
    TextData,
)

_DATA_KEYS: dict[NodeType, str] = {
    NodeType.HEADING: "headingData",
    NodeType.PARAGRAPH: "paragraphData",
    NodeType.BULLETED_LIST: "bulletedListData",
    NodeType.ORDERED_LIST: "orderedListData",
    NodeType.CODE_BLOCK: "codeBlockData",
    NodeType.BLOCKQUOTE: "blockquoteData",
    NodeType.DIVIDER: "dividerData",
    NodeType.IMAGE: "imageData",
    NodeType.TEXT: "textData",
}

_BOLD_FONT_WEIGHT = 700


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def document_to_dict(document: Document) -> dict[str, Any]:
    """Return the RICOS JSON representation of *document*."""
    meta = document.metadata
    return {
        "nodes": [node_to_dict(node) for node in document.nodes],
        "metadata": {
            "version": meta.version,
            "createdTimestamp": meta.created_timestamp,
            "updatedTimestamp": meta.updated_timestamp,
        },
        "documentStyle": {},
    }


def node_to_dict(node: Node) -> dict[str, Any]:
    """Return the RICOS JSON representation of *node* and its children."""
    result: dict[str, Any] = {
        "type": node.type.value,
        "id": node.id,
        "nodes": [node_to_dict(child) for child in node.nodes],
    }
    key = _DATA_KEYS.get(node.type)
    if key is not None and node.data is not None:
        result[key] = _data_to_dict(node.data)
    return result


def decoration_to_dict(decoration: Decoration) -> dict[str, Any]:
    """Return the RICOS JSON representation of one decoration."""
    kind = decoration.type
    if kind is DecorationType.COLOR:
        return {"type": "COLOR", "colorData": {"foreground": decoration.color}}
    if kind is DecorationType.BOLD:
        return {"type": "BOLD", "fontWeightValue": _BOLD_FONT_WEIGHT}
    if kind is DecorationType.ITALIC:
        return {"type": "ITALIC", "italicData": True}
    if kind is DecorationType.UNDERLINE:
        return {"type": "UNDERLINE", "underlineData": True}
    return {
        "type": "LINK",
        "linkData": {"link": {"url": decoration.url, "target": "BLANK"}},
    }


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------

def _data_to_dict(data: Any) -> dict[str, Any]:
    if isinstance(data, TextData):
        return {
            "text": data.segment.text,
            "decorations": [decoration_to_dict(d) for d in data.segment.decorations],
        }
    if isinstance(data, ParagraphData):
        return {"textStyle": {"textAlignment": data.text_alignment}}
    if isinstance(data, HeadingData):
        return {
            "level": data.level,
            "textStyle": {"textAlignment": data.text_alignment},
        }
    if isinstance(data, CodeBlockData):
        return {
            "language": data.language,
            "textStyle": {"textAlignment": data.text_alignment},
        }
    if isinstance(data, (ListData, BlockquoteData)):
        return {"indentation": data.indentation}
    if isinstance(data, DividerData):
        return {
            "lineStyle": data.line_style,
            "width": data.width,
            "alignment": data.alignment,
        }
    if isinstance(data, ImageData):
        return {
            "containerData": {
                "width": {"size": data.container_width},
                "alignment": data.alignment,
                "textWrap": True,
            },
            "image": {
                "src": _image_src(data.reference),
                "width": data.width,
                "height": data.height,
            },
            "altText": data.alt,
        }
    raise TypeError(f"Unsupported node payload: {type(data).__name__}")


def _image_src(reference: ImageReference) -> dict[str, str]:
    if reference.is_hosted:
        return {"id": reference.hosted_id or ""}
    return {"url": reference.external_url or ""}
