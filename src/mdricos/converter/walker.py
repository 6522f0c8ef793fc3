"""Walk block tokens and assemble the document node list.

Handles every block kind the tokenizer produces:

- heading -> spacer (unless first) + HEADING + spacer
- paragraph -> PARAGRAPH, or IMAGE / PARAGRAPH runs when it holds images
- list -> BULLETED_LIST / ORDERED_LIST of LIST_ITEMs
- code -> CODE_BLOCK with verbatim text
- blockquote -> BLOCKQUOTE
- hr -> DIVIDER
- space -> spacer
- html -> IMAGE for a lone ``<img>`` tag, otherwise dropped
- image -> IMAGE

Any other kind produces no node.  Exceptions raised by a builder are not
caught: the whole walk fails and no partial document is returned.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime, timezone

from mdricos.config import RicosConfig
from mdricos.converter.nodes import (
    build_blockquote,
    build_code_block,
    build_divider,
    build_heading,
    build_image,
    build_list,
    build_paragraph,
    build_spacer,
)
from mdricos.image.detect import parse_img_tag
from mdricos.models import Document, DocumentMetadata, Node, Token
from mdricos.observability import get_logger
from mdricos.utils.ids import IdGenerator, RandomIdGenerator

log = get_logger("mdricos.walker")

# ``![alt](src)`` or ``![alt](src "title")``.
_IMAGE_PATTERN = r"""!\[([^\[\]]*)\]\(\s*([^()\s]+)(?:\s+"[^"\n]*")?\s*\)"""
_SINGLE_IMAGE_RE = re.compile(rf"^\s*{_IMAGE_PATTERN}\s*$")
_INLINE_IMAGE_RE = re.compile(_IMAGE_PATTERN)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_document(
    tokens: list[Token],
    config: RicosConfig,
    *,
    id_generator: IdGenerator | None = None,
) -> Document:
    """Convert block tokens to a :class:`Document`.

    Parameters
    ----------
    tokens:
        Block tokens in document order.
    config:
        Presentation defaults and colors.
    id_generator:
        Source of node ids.  Defaults to a :class:`RandomIdGenerator` of
        ``config.id_length`` characters.

    Returns
    -------
    Document
        The nodes in read order plus version/timestamp metadata.
    """
    ctx = _WalkContext(config, id_generator or RandomIdGenerator(config.id_length))
    for token in tokens:
        _process_token(token, ctx)

    now = datetime.now(timezone.utc).isoformat()
    return Document(
        nodes=tuple(ctx.nodes),
        metadata=DocumentMetadata(created_timestamp=now, updated_timestamp=now),
    )


class _WalkContext:
    """Mutable accumulator for one walk."""

    __slots__ = ("config", "new_id", "nodes")

    def __init__(self, config: RicosConfig, new_id: IdGenerator) -> None:
        self.config = config
        self.new_id = new_id
        self.nodes: list[Node] = []

    def add(self, node: Node) -> None:
        self.nodes.append(node)

    def add_spacer(self) -> None:
        self.nodes.append(build_spacer(self.config, self.new_id))


# ---------------------------------------------------------------------------
# Token dispatch
# ---------------------------------------------------------------------------

def _process_token(token: Token, ctx: _WalkContext) -> None:
    handler = _TOKEN_HANDLERS.get(token.kind)
    if handler is not None:
        handler(token, ctx)
        return
    log.debug(
        "skipped token",
        extra={"extra_fields": {"kind": token.kind}},
    )


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _handle_heading(token: Token, ctx: _WalkContext) -> None:
    if ctx.nodes:
        ctx.add_spacer()
    ctx.add(build_heading(token.text, token.depth or 1, ctx.config, ctx.new_id))
    ctx.add_spacer()


def _handle_paragraph(token: Token, ctx: _WalkContext) -> None:
    text = token.text

    single = _SINGLE_IMAGE_RE.match(text)
    if single is not None:
        alt, src = single.group(1), single.group(2)
        ctx.add(build_image(src, alt, ctx.config, ctx.new_id))
        return

    if _INLINE_IMAGE_RE.search(text) is None:
        ctx.add(build_paragraph(text, ctx.config, ctx.new_id))
        return

    # Mixed text and images: split at each image, keep non-empty runs.
    cursor = 0
    for m in _INLINE_IMAGE_RE.finditer(text):
        _add_text_run(text[cursor:m.start()], ctx)
        ctx.add(build_image(m.group(2), m.group(1), ctx.config, ctx.new_id))
        cursor = m.end()
    _add_text_run(text[cursor:], ctx)


def _add_text_run(run: str, ctx: _WalkContext) -> None:
    run = run.strip()
    if run:
        ctx.add(build_paragraph(run, ctx.config, ctx.new_id))


def _handle_list(token: Token, ctx: _WalkContext) -> None:
    ctx.add(build_list(token.items, token.ordered, ctx.config, ctx.new_id))


def _handle_code(token: Token, ctx: _WalkContext) -> None:
    ctx.add(build_code_block(token.text, token.lang, ctx.config, ctx.new_id))


def _handle_blockquote(token: Token, ctx: _WalkContext) -> None:
    ctx.add(build_blockquote(token.text, ctx.config, ctx.new_id))


def _handle_hr(token: Token, ctx: _WalkContext) -> None:
    ctx.add(build_divider(ctx.config, ctx.new_id))


def _handle_space(token: Token, ctx: _WalkContext) -> None:
    ctx.add_spacer()


def _handle_html(token: Token, ctx: _WalkContext) -> None:
    parsed = parse_img_tag(token.text, ctx.config)
    if parsed is None:
        log.debug(
            "dropped html block",
            extra={"extra_fields": {"raw": token.text[:200]}},
        )
        return
    src, alt, width, height = parsed
    ctx.add(build_image(src, alt, ctx.config, ctx.new_id, width=width, height=height))


def _handle_image(token: Token, ctx: _WalkContext) -> None:
    if not token.href:
        return
    ctx.add(build_image(token.href, token.text, ctx.config, ctx.new_id))


# ---------------------------------------------------------------------------
# Handler dispatch table
# ---------------------------------------------------------------------------

_TokenHandler = Callable[[Token, _WalkContext], None]

_TOKEN_HANDLERS: dict[str, _TokenHandler] = {
    "heading": _handle_heading,
    "paragraph": _handle_paragraph,
    "list": _handle_list,
    "code": _handle_code,
    "blockquote": _handle_blockquote,
    "hr": _handle_hr,
    "space": _handle_space,
    "html": _handle_html,
    "image": _handle_image,
}

SUPPORTED_KINDS: frozenset[str] = frozenset(_TOKEN_HANDLERS)
"""Token kinds that can produce nodes; every other kind is skipped."""
