"""mdricos -- convert Markdown into RICOS rich-content documents.

Public re-exports
-----------------

* **Conversion:** :class:`MarkdownToRicosConverter`, :func:`markdown_to_ricos`,
  :func:`document_to_dict`
* **Configuration:** :class:`RicosConfig`
* **Errors:** :class:`RicosError`, :class:`MissingInputError`,
  :class:`ConversionError` and :class:`ErrorCode`
* **Models:** tokens, decorations, segments, nodes and documents

Usage::

    from mdricos import MarkdownToRicosConverter, document_to_dict

    converter = MarkdownToRicosConverter()
    document = converter.convert("# Hello\\n\\nSome **bold** text")
    payload = document_to_dict(document)
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from mdricos.config import RicosConfig

# ── Conversion ──────────────────────────────────────────────────────────
from mdricos.converter import (
    MarkdownToRicosConverter,
    MarkdownTokenizer,
    build_document,
    document_to_dict,
    markdown_to_ricos,
    resolve_inline,
)

# ── Errors ──────────────────────────────────────────────────────────────
from mdricos.errors import (
    ConversionError,
    ErrorCode,
    MissingInputError,
    RicosError,
)

# ── Images ──────────────────────────────────────────────────────────────
from mdricos.image import classify_image_source

# ── Models ──────────────────────────────────────────────────────────────
from mdricos.models import (
    Decoration,
    DecorationType,
    Document,
    DocumentMetadata,
    ImageReference,
    Node,
    NodeType,
    Segment,
    Token,
)

__all__ = [
    # Conversion
    "MarkdownToRicosConverter",
    "MarkdownTokenizer",
    "build_document",
    "classify_image_source",
    "document_to_dict",
    "markdown_to_ricos",
    "resolve_inline",
    # Configuration
    "RicosConfig",
    # Errors
    "ConversionError",
    "ErrorCode",
    "MissingInputError",
    "RicosError",
    # Models
    "Decoration",
    "DecorationType",
    "Document",
    "DocumentMetadata",
    "ImageReference",
    "Node",
    "NodeType",
    "Segment",
    "Token",
]

__version__ = "0.1.0"
