"""Full Markdown-to-RICOS conversion pipeline.

:class:`MarkdownToRicosConverter` orchestrates two stages:

1. **Tokenize** -- :class:`MarkdownTokenizer` splits raw markdown into block
   tokens with raw inline text.
2. **Walk** -- :func:`build_document` turns the tokens into a node tree,
   resolving inline decorations and image references on the way.

The result is an immutable :class:`~mdricos.models.Document`.  Use
:func:`~mdricos.converter.serialize.document_to_dict` for the JSON form.
"""

from __future__ import annotations

import json
import sys
import time
from dataclasses import asdict

from mdricos.config import RicosConfig
from mdricos.converter.serialize import document_to_dict
from mdricos.converter.tokenizer import MarkdownTokenizer
from mdricos.converter.walker import SUPPORTED_KINDS, build_document
from mdricos.models import Document, Token
from mdricos.observability import get_logger, resolve_metrics
from mdricos.utils.ids import IdGenerator

log = get_logger("mdricos.converter")


class MarkdownToRicosConverter:
    """Convert markdown text to RICOS documents.

    Parameters
    ----------
    config:
        Colors, presentation defaults, metrics backend and debug switches.
    id_generator:
        Optional id source shared by every conversion of this converter.
        By default each conversion gets a fresh random generator.

    Examples
    --------
    >>> converter = MarkdownToRicosConverter(RicosConfig())
    >>> doc = converter.convert("# Hello\\n\\nWorld")
    >>> [n.type.value for n in doc.nodes]
    ['HEADING', 'PARAGRAPH', 'PARAGRAPH']
    """

    def __init__(
        self,
        config: RicosConfig | None = None,
        *,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._config = config or RicosConfig()
        self._tokenizer = MarkdownTokenizer(self._config)
        self._id_generator = id_generator
        self._metrics = resolve_metrics(self._config.metrics)

    @property
    def config(self) -> RicosConfig:
        return self._config

    def tokenize(self, markdown: str) -> list[Token]:
        """Return the block tokens of *markdown*."""
        return self._tokenizer.tokenize(markdown)

    def convert(self, markdown: str) -> Document:
        """Full pipeline: tokenize -> walk.

        Raises whatever the tokenizer or a node builder raises; no partial
        document is ever returned.
        """
        return self.convert_tokens(self.tokenize(markdown))

    def convert_tokens(self, tokens: list[Token]) -> Document:
        """Walk pre-tokenized block tokens into a document."""
        if self._config.debug_dump_tokens:
            print(
                "[mdricos] Block tokens:",
                json.dumps([asdict(t) for t in tokens], indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        start = time.monotonic()
        try:
            document = build_document(
                tokens, self._config, id_generator=self._id_generator,
            )
        except Exception:
            self._metrics.increment("mdricos.conversions_total", tags={"status": "error"})
            raise
        elapsed_ms = (time.monotonic() - start) * 1000

        skipped = sum(1 for t in tokens if t.kind not in SUPPORTED_KINDS)
        self._metrics.increment("mdricos.conversions_total", tags={"status": "ok"})
        self._metrics.increment("mdricos.nodes_created_total", len(document.nodes))
        if skipped:
            self._metrics.increment("mdricos.tokens_skipped_total", skipped)
        self._metrics.timing("mdricos.conversion_duration_ms", elapsed_ms)

        log.debug(
            "conversion complete",
            extra={"extra_fields": {
                "tokens": len(tokens),
                "nodes": len(document.nodes),
                "skipped": skipped,
                "duration_ms": round(elapsed_ms, 3),
            }},
        )

        if self._config.debug_dump_payload:
            print(
                "[mdricos] RICOS document:",
                json.dumps(document_to_dict(document), indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        return document


def markdown_to_ricos(markdown: str, config: RicosConfig | None = None) -> Document:
    """Convert *markdown* with a one-off :class:`MarkdownToRicosConverter`."""
    return MarkdownToRicosConverter(config).convert(markdown)
