"""Split markdown into block tokens.

This module wraps mistune v3's *block* parser and maps its raw block tokens
onto :class:`~mdricos.models.Token` values.  Inline parsing is
not run: paragraph, heading, list-item and quote tokens keep their raw
inline markdown in ``text`` for the decoration resolver.

Token kinds produced:
    heading, paragraph, list, code, blockquote, hr, html, space

Any other mistune block type is passed through under its own name and is
ignored by the walker.
"""

from __future__ import annotations

import mistune

from mdricos.config import RicosConfig
from mdricos.models import Token

# ---------------------------------------------------------------------------
# Mistune-to-token kind mapping
# ---------------------------------------------------------------------------

_KIND_MAP: dict[str, str] = {
    "heading": "heading",
    "paragraph": "paragraph",
    "block_text": "paragraph",
    "list": "list",
    "block_code": "code",
    "block_quote": "blockquote",
    "thematic_break": "hr",
    "block_html": "html",
    "blank_line": "space",
}

# Mistune types whose inline text lives in ``text``.
_TEXT_TYPES: frozenset[str] = frozenset({"paragraph", "block_text", "heading"})


class MarkdownTokenizer:
    """Parse markdown into a flat list of block tokens.

    Parameters
    ----------
    config:
        Controls whether blank lines become ``space`` tokens.
    """

    def __init__(self, config: RicosConfig | None = None) -> None:
        self._config = config or RicosConfig()
        self._parser = mistune.create_markdown(renderer="ast")

    def tokenize(self, markdown: str) -> list[Token]:
        """Return the block tokens of *markdown* in document order."""
        raw_tokens = self._parse_blocks(markdown)
        tokens: list[Token] = []
        for raw in raw_tokens:
            token = self._convert_token(raw)
            if token is not None:
                tokens.append(token)
        return tokens

    def _parse_blocks(self, markdown: str) -> list[dict]:
        """Run only the block pass of mistune and return its raw tokens."""
        text = markdown.replace("\r\n", "\n").replace("\r", "\n")
        if not text.endswith("\n"):
            text += "\n"
        state = self._parser.block.state_cls()
        state.process(text)
        self._parser.block.parse(state)
        return state.tokens

    def _convert_token(self, raw: dict) -> Token | None:
        """Map one raw mistune token, returning None if it should be dropped."""
        raw_type = raw.get("type", "")
        kind = _KIND_MAP.get(raw_type, raw_type)

        if kind == "space":
            if not self._config.preserve_blank_lines:
                return None
            return Token(kind="space")

        if kind == "heading":
            level = raw.get("attrs", {}).get("level", 1)
            return Token(kind="heading", text=_inline_text(raw), depth=level)

        if kind == "paragraph":
            return Token(kind="paragraph", text=_inline_text(raw))

        if kind == "list":
            ordered = bool(raw.get("attrs", {}).get("ordered", False))
            items = tuple(
                _item_text(item)
                for item in raw.get("children", [])
                if item.get("type") in ("list_item", "task_list_item")
            )
            return Token(kind="list", items=items, ordered=ordered)

        if kind == "code":
            code = raw.get("raw", "")
            # Strip the trailing newline mistune keeps on fenced code.
            if code.endswith("\n"):
                code = code[:-1]
            return Token(kind="code", text=code, lang=_code_language(raw))

        if kind == "blockquote":
            return Token(kind="blockquote", text=_collect_text(raw.get("children", [])))

        if kind == "hr":
            return Token(kind="hr")

        if kind == "html":
            return Token(kind="html", text=raw.get("raw", "").strip())

        return Token(kind=kind, text=raw.get("raw", "") or raw.get("text", ""))


# ---------------------------------------------------------------------------
# Text extraction helpers
# ---------------------------------------------------------------------------

def _inline_text(raw: dict) -> str:
    return raw.get("text", "").strip()


def _item_text(item: dict) -> str:
    """Join the direct text children of a list item; nested lists are skipped."""
    parts = [
        _inline_text(child)
        for child in item.get("children", [])
        if child.get("type") in _TEXT_TYPES
    ]
    return "\n".join(p for p in parts if p)


def _collect_text(children: list[dict]) -> str:
    """Join the inline text of every text-bearing token, depth first."""
    parts: list[str] = []
    for child in children:
        if child.get("type") in _TEXT_TYPES:
            parts.append(_inline_text(child))
        elif "children" in child:
            parts.append(_collect_text(child["children"]))
    return "\n".join(p for p in parts if p)


def _code_language(raw: dict) -> str | None:
    # "python title=x.py" -> "python"
    words = (raw.get("attrs", {}).get("info") or "").split()
    return words[0] if words else None
