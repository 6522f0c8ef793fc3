"""Resolve inline markdown into decorated text segments.

A paragraph's raw inline text is split into an ordered list of
:class:`~mdricos.models.Segment` values.  Four span kinds are recognised,
in strict precedence order:

===============  ==========================  ==================================
Kind             Delimiters                  Decorations on the inner text
===============  ==========================  ==================================
``BOLD_ITALIC``  ``***x***``                 ``BOLD, ITALIC, COLOR``
``BOLD``         ``**x**`` / ``__x__``       ``BOLD, COLOR``
``ITALIC``       ``*x*`` / ``_x_``           ``ITALIC, COLOR``
``LINK``         ``[x](url)``                ``COLOR, LINK(url), UNDERLINE``
===============  ==========================  ==================================

Each kind is scanned left to right, but only inside the parts of the text
that no higher-precedence span has claimed, so accepted spans never
overlap.  Emphasis openers are paired with the nearest valid closer from a
per-window index of delimiter positions, so an unclosed opener costs one
lookup and the scan stays close to linear in the input length.  Text outside every span is emitted
with ``COLOR`` only.

Link text is taken verbatim.  Markers inside link text are *not* nested
into the link: a ``**bold**`` inside ``[...]`` claims its range first and
the link is then not formed.
"""

from __future__ import annotations

import re
from bisect import bisect_left
from dataclasses import dataclass
from enum import Enum

from mdricos.models import BOLD, ITALIC, UNDERLINE, Decoration, Segment


class SpanKind(str, Enum):
    """Inline span kinds, declared in precedence order."""

    BOLD_ITALIC = "bold_italic"
    BOLD = "bold"
    ITALIC = "italic"
    LINK = "link"


@dataclass(frozen=True)
class _Delimiter:
    """An emphasis marker.  Word-bounded markers only open after, and close
    before, a non-word character."""

    marker: str
    word_bounded: bool = False


# Underscores are word-bounded so identifiers such as ``snake_case_name``
# stay plain.
_EMPHASIS_DELIMITERS: tuple[tuple[SpanKind, tuple[_Delimiter, ...]], ...] = (
    (SpanKind.BOLD_ITALIC, (_Delimiter("***"),)),
    (SpanKind.BOLD, (_Delimiter("**"), _Delimiter("__", word_bounded=True))),
    (SpanKind.ITALIC, (_Delimiter("*"), _Delimiter("_", word_bounded=True))),
)

# Link text and url stop at the next bracket or paren.
_LINK_RE = re.compile(r"""\[([^\[\]]+)\]\(\s*([^()\s]+)(?:\s+"[^"\n]*")?\s*\)""")

_WORD_RE = re.compile(r"\w")


@dataclass(frozen=True)
class InlineSpan:
    """An accepted span: its range in the source and its inner content."""

    kind: SpanKind
    start: int
    end: int
    content: str
    url: str | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def resolve_inline(text: str, base_color: str) -> list[Segment]:
    """Split *text* into decorated segments.

    Parameters
    ----------
    text:
        Raw inline markdown.
    base_color:
        Foreground color attached to every segment.

    Returns
    -------
    list[Segment]
        At least one segment.  When no span is found this is a single
        segment equal to *text* (even for the empty string).

    Examples
    --------
    >>> [s.text for s in resolve_inline("**bold** and *italic*", "#000000")]
    ['bold', ' and ', 'italic']
    """
    color = Decoration.color_of(base_color)
    spans = find_inline_spans(text)
    if not spans:
        return [Segment(text, (color,))]

    segments: list[Segment] = []
    cursor = 0
    for span in spans:
        if span.start > cursor:
            segments.append(Segment(text[cursor:span.start], (color,)))
        segments.append(Segment(span.content, _span_decorations(span, color)))
        cursor = span.end
    if cursor < len(text):
        segments.append(Segment(text[cursor:], (color,)))
    return segments


def find_inline_spans(text: str) -> list[InlineSpan]:
    """Return the accepted, non-overlapping spans of *text* sorted by start."""
    claimed: list[tuple[int, int]] = []
    accepted: list[InlineSpan] = []

    for kind, delimiters in (*_EMPHASIS_DELIMITERS, (SpanKind.LINK, ())):
        found: list[InlineSpan] = []
        for win_start, win_end in _free_windows(claimed, len(text)):
            if kind is SpanKind.LINK:
                found.extend(_scan_links(text, win_start, win_end))
            else:
                found.extend(_scan_emphasis(text, kind, delimiters, win_start, win_end))
        accepted.extend(found)
        claimed.extend((s.start, s.end) for s in found)
        claimed.sort()

    accepted.sort(key=lambda s: s.start)
    return accepted


def plain_text(segments: list[Segment]) -> str:
    """Concatenate the text of *segments*."""
    return "".join(seg.text for seg in segments)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _free_windows(claimed: list[tuple[int, int]], length: int) -> list[tuple[int, int]]:
    """Return the unclaimed ``[start, end)`` gaps of a text of *length*."""
    windows: list[tuple[int, int]] = []
    cursor = 0
    for start, end in claimed:
        if start > cursor:
            windows.append((cursor, start))
        cursor = max(cursor, end)
    if cursor < length:
        windows.append((cursor, length))
    return windows


def _scan_emphasis(
    text: str,
    kind: SpanKind,
    delimiters: tuple[_Delimiter, ...],
    start: int,
    end: int,
) -> list[InlineSpan]:
    """Find *kind* spans in ``text[start:end]``.

    Same result as a leftmost, lazy ``D(.+?)D`` search repeated from the end
    of each match: the leftmost opener wins and takes the nearest closer that
    leaves non-empty content.  Delimiter positions are indexed once per
    window, so each opener costs one bisect.
    """
    indexed: list[tuple[int, list[int], list[int]]] = []
    for delim in delimiters:
        positions = _marker_positions(text, delim.marker, start, end)
        openers = [p for p in positions if _opens(text, p, delim)]
        closers = [p for p in positions if _closes(text, p, delim, end)]
        indexed.append((len(delim.marker), openers, closers))

    spans: list[InlineSpan] = []
    cursors = [0] * len(indexed)
    pos = start
    while True:
        best: tuple[int, int, int] | None = None
        for i, (size, openers, closers) in enumerate(indexed):
            k = bisect_left(openers, pos, cursors[i])
            cursors[i] = k
            if k == len(openers):
                continue
            opener = openers[k]
            j = bisect_left(closers, opener + size + 1)
            if j == len(closers):
                # Later openers need later closers: this marker is done.
                cursors[i] = len(openers)
                continue
            if best is None or opener < best[0]:
                best = (opener, closers[j], size)
        if best is None:
            return spans
        opener, closer, size = best
        spans.append(InlineSpan(kind, opener, closer + size, text[opener + size:closer]))
        pos = closer + size


def _scan_links(text: str, start: int, end: int) -> list[InlineSpan]:
    spans: list[InlineSpan] = []
    pos = start
    while pos < end:
        m = _LINK_RE.search(text, pos, end)
        if m is None:
            break
        spans.append(InlineSpan(SpanKind.LINK, m.start(), m.end(), m.group(1), url=m.group(2)))
        pos = m.end()
    return spans


def _marker_positions(text: str, marker: str, start: int, end: int) -> list[int]:
    """Every (possibly overlapping) position of *marker* inside the window."""
    positions: list[int] = []
    idx = text.find(marker, start, end)
    while idx >= 0:
        positions.append(idx)
        idx = text.find(marker, idx + 1, end)
    return positions


def _opens(text: str, pos: int, delim: _Delimiter) -> bool:
    if not delim.word_bounded or pos == 0:
        return True
    return _WORD_RE.match(text[pos - 1]) is None


def _closes(text: str, pos: int, delim: _Delimiter, end: int) -> bool:
    after = pos + len(delim.marker)
    if not delim.word_bounded or after >= end:
        return True
    return _WORD_RE.match(text[after]) is None


def _span_decorations(span: InlineSpan, color: Decoration) -> tuple[Decoration, ...]:
    if span.kind is SpanKind.BOLD:
        return (BOLD, color)
    if span.kind is SpanKind.ITALIC:
        return (ITALIC, color)
    if span.kind is SpanKind.BOLD_ITALIC:
        return (BOLD, ITALIC, color)
    return (color, Decoration.link_to(span.url or ""), UNDERLINE)
