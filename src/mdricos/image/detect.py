"""Image source classification.

Classifies a raw image ``src`` string (from ``![alt](src)`` or an
``<img>`` tag) into an :class:`ImageReference` so the node builders know
whether to reference a hosted media asset or an external URL.
"""

from __future__ import annotations

import re

from mdricos.config import RicosConfig
from mdricos.models import ImageReference

# Prefixes that make a source an absolute or protocol-relative URL.
_URL_PREFIXES = ("http://", "https://", "//")

# Bare hosted media ids look like ``853f36_0a1b2c3d~mv2.png``.
_HOSTED_ID_RE = re.compile(r"^[0-9A-Za-z]+_[0-9A-Za-z]+~mv2(?:\.[0-9A-Za-z]+)?$")

# A single, self-contained <img> tag, optionally self-closing.
_IMG_TAG_RE = re.compile(r"^\s*<img\b([^<>]*?)/?>\s*$", re.IGNORECASE)

_ATTR_RE = re.compile(
    r"""([A-Za-z_:][-A-Za-z0-9_:.]*)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+))""",
)


def classify_image_source(src: str, config: RicosConfig) -> ImageReference:
    """Classify an image source as a hosted media id or an external URL.

    Checked in order:

    1. *src* contains one of ``config.hosted_media_markers`` followed by a
       path segment -- that segment is the hosted id.
    2. *src* has no ``http://``, ``https://`` or ``//`` prefix -- the whole
       string is taken as a hosted id.
    3. Otherwise *src* is an external URL.

    Parameters
    ----------
    src:
        The raw source string.
    config:
        Supplies the hosted-media markers.

    Returns
    -------
    ImageReference
        Never raises; an empty *src* yields an empty hosted id.
    """
    src = src.strip()

    media_id = _hosted_segment(src, config.hosted_media_markers)
    if media_id:
        return ImageReference.hosted(media_id)

    if not src.lower().startswith(_URL_PREFIXES):
        return ImageReference.hosted(src)

    return ImageReference.external(src)


def looks_like_image_source(value: str, config: RicosConfig) -> bool:
    """Return True if *value* reads as an image location rather than prose.

    URLs, hosted-media URLs and bare hosted ids qualify.  Used to tell the
    ``src`` and ``alt`` values of an ``<img>`` tag apart when the tag's
    attributes are mislabelled.
    """
    value = value.strip()
    if not value or " " in value:
        return False
    if value.lower().startswith(_URL_PREFIXES):
        return True
    if _hosted_segment(value, config.hosted_media_markers):
        return True
    return bool(_HOSTED_ID_RE.match(value))


def parse_img_tag(
    html: str, config: RicosConfig,
) -> tuple[str, str, int | None, int | None] | None:
    """Extract ``(src, alt, width, height)`` from a lone ``<img>`` tag.

    Returns ``None`` when *html* is anything other than a single
    self-contained ``<img>`` tag, or when the tag has no usable source.
    Attribute order does not matter.  If the ``alt`` value is the one that
    looks like an image location and ``src`` does not, the two are swapped.
    """
    m = _IMG_TAG_RE.match(html)
    if m is None:
        return None

    attrs: dict[str, str] = {}
    for am in _ATTR_RE.finditer(m.group(1)):
        name = am.group(1).lower()
        value = next(v for v in am.groups()[1:] if v is not None)
        attrs.setdefault(name, value)

    src = attrs.get("src", "").strip()
    alt = attrs.get("alt", "").strip()
    if looks_like_image_source(alt, config) and not looks_like_image_source(src, config):
        src, alt = alt, src
    if not src:
        return None

    return src, alt, _dimension(attrs.get("width")), _dimension(attrs.get("height"))


def _hosted_segment(src: str, markers: tuple[str, ...]) -> str:
    """Return the path segment following a hosted-media marker, or ``""``."""
    for marker in markers:
        idx = src.find(marker)
        if idx < 0:
            continue
        rest = src[idx + len(marker):]
        segment = re.split(r"[/?#]", rest, maxsplit=1)[0]
        if segment:
            return segment
    return ""


def _dimension(value: str | None) -> int | None:
    """Parse an HTML width/height attribute such as ``"640"`` or ``"640px"``."""
    if not value:
        return None
    m = re.match(r"^\s*(\d+)(?:px)?\s*$", value)
    if m is None:
        return None
    size = int(m.group(1))
    return size or None
