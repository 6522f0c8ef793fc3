"""Markdown -> RICOS conversion pipeline.

Public API:

- :class:`MarkdownToRicosConverter` -- markdown -> :class:`Document`.
- :class:`MarkdownTokenizer` -- markdown -> block tokens.
- :func:`build_document` -- block tokens -> :class:`Document`.
- :func:`resolve_inline` -- inline markdown -> decorated segments.
- :func:`document_to_dict` -- :class:`Document` -> RICOS JSON dict.
"""

from mdricos.converter.decorations import resolve_inline
from mdricos.converter.md_to_ricos import MarkdownToRicosConverter, markdown_to_ricos
from mdricos.converter.serialize import document_to_dict, node_to_dict
from mdricos.converter.tokenizer import MarkdownTokenizer
from mdricos.converter.walker import build_document

__all__ = [
    "MarkdownToRicosConverter",
    "MarkdownTokenizer",
    "build_document",
    "document_to_dict",
    "markdown_to_ricos",
    "node_to_dict",
    "resolve_inline",
]
