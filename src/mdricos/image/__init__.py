"""Image source handling: classify ``src`` strings and parse ``<img>`` tags."""

from mdricos.image.detect import (
    classify_image_source,
    looks_like_image_source,
    parse_img_tag,
)

__all__ = [
    "classify_image_source",
    "looks_like_image_source",
    "parse_img_tag",
]
