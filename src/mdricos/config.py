"""Conversion configuration for mdricos.

:class:`RicosConfig` is a frozen dataclass that captures every presentation
default and tuneable knob used while building a document.  A single instance
is threaded through the walker and node builders; nothing in the converter
reads module-level style state.

The module-level constants below are the default values and are exported so
callers can build derived configurations::

    from dataclasses import replace
    from mdricos.config import RicosConfig

    dark = replace(RicosConfig(), text_color="#FFFFFF", heading_color="#FAFAFA")
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Literal

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_TEXT_COLOR = "#000000"
"""Foreground color applied to every resolved text segment."""

DEFAULT_HEADING_COLOR = "#000000"
"""Foreground color applied to heading text."""

DEFAULT_CODE_LANGUAGE = "plaintext"
"""Language tag used when a fenced code block has no info string."""

DEFAULT_IMAGE_SIZE = 800
"""Width and height (pixels) used when an image carries no dimensions."""

DEFAULT_HOSTED_MEDIA_MARKERS: tuple[str, ...] = (
    "static.wixstatic.com/media/",
)
"""URL fragments that identify hosted-media assets.  The path segment that
follows a marker is used as the hosted media id."""

_HEX_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")

TextAlignment = Literal["AUTO", "LEFT", "RIGHT", "CENTER", "JUSTIFY"]
Alignment = Literal["LEFT", "RIGHT", "CENTER"]


# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RicosConfig:
    """Complete configuration for a markdown-to-RICOS conversion.

    Every parameter has a default, so ``RicosConfig()`` is a usable value.

    Parameters
    ----------
    text_color:
        ``#rrggbb`` foreground for paragraph, list, quote and code text.
    heading_color:
        ``#rrggbb`` foreground for heading text.
    text_alignment:
        ``textAlignment`` written into paragraph, heading and code payloads.
    code_language_default:
        Language tag for code blocks whose fence has no info string.
    image_default_size:
        Square fallback size for images without explicit dimensions.
    image_alignment:
        Container alignment of image nodes.
    image_container_width:
        Container width mode of image nodes (``"CONTENT"``, ``"SMALL"``,
        ``"FULL_WIDTH"``...).
    hosted_media_markers:
        URL fragments that mark a hosted-media URL.
    divider_line_style, divider_width, divider_alignment:
        Presentation of DIVIDER nodes.
    id_length:
        Length of generated node ids.
    preserve_blank_lines:
        Emit a spacer for every blank-line token produced by the tokenizer.
        Off by default; headings already get their own spacers.
    metrics:
        Optional :class:`~mdricos.observability.MetricsHook` backend.
    debug_dump_tokens:
        Write the block tokens to *stderr* on each conversion.
    debug_dump_payload:
        Write the serialized document to *stderr* on each conversion.
    """

    # ── Colors & text ───────────────────────────────────────────────────
    text_color: str = DEFAULT_TEXT_COLOR

    heading_color: str = DEFAULT_HEADING_COLOR

    text_alignment: TextAlignment = "AUTO"

    # ── Code ────────────────────────────────────────────────────────────
    code_language_default: str = DEFAULT_CODE_LANGUAGE

    # ── Images ──────────────────────────────────────────────────────────
    image_default_size: int = DEFAULT_IMAGE_SIZE

    image_alignment: Alignment = "CENTER"

    image_container_width: str = "CONTENT"

    hosted_media_markers: tuple[str, ...] = DEFAULT_HOSTED_MEDIA_MARKERS

    # ── Divider ─────────────────────────────────────────────────────────
    divider_line_style: Literal["SINGLE", "DOUBLE", "DASHED", "DOTTED"] = "SINGLE"

    divider_width: Literal["LARGE", "MEDIUM", "SMALL"] = "LARGE"

    divider_alignment: Alignment = "CENTER"

    # ── Ids ─────────────────────────────────────────────────────────────
    id_length: int = 8

    # ── Tokenizer ───────────────────────────────────────────────────────
    preserve_blank_lines: bool = False

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_tokens: bool = False

    debug_dump_payload: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("text_color", "heading_color"):
            value = getattr(self, name)
            if not isinstance(value, str) or not _HEX_COLOR_RE.match(value):
                raise ValueError(f"{name} must be a #rrggbb color, got {value!r}")
        if self.image_default_size <= 0:
            raise ValueError(f"image_default_size must be > 0, got {self.image_default_size}")
        if self.id_length < 1:
            raise ValueError(f"id_length must be >= 1, got {self.id_length}")
        if not self.code_language_default:
            raise ValueError("code_language_default must be a non-empty string")
        # Lists are accepted; the field is always stored as a tuple.
        if not isinstance(self.hosted_media_markers, tuple):
            object.__setattr__(
                self, "hosted_media_markers", tuple(self.hosted_media_markers),
            )
        if any(not marker for marker in self.hosted_media_markers):
            raise ValueError("hosted_media_markers must not contain empty strings")

