"""Tests for image source classification and <img> tag parsing."""

import pytest

from mdricos.config import RicosConfig
from mdricos.image.detect import (
    classify_image_source,
    looks_like_image_source,
    parse_img_tag,
)
from mdricos.models import ImageReference

CFG = RicosConfig()


class TestClassifyImageSource:

    @pytest.mark.parametrize(("src", "expected"), [
        ("https://static.wixstatic.com/media/853f36_abc~mv2.png",
         ImageReference.hosted("853f36_abc~mv2.png")),
        ("https://static.wixstatic.com/media/853f36_abc~mv2.png/v1/fill/w_80",
         ImageReference.hosted("853f36_abc~mv2.png")),
        ("https://static.wixstatic.com/media/853f36_abc~mv2.jpg?raw=1",
         ImageReference.hosted("853f36_abc~mv2.jpg")),
        ("853f36_abc~mv2.png", ImageReference.hosted("853f36_abc~mv2.png")),
        ("images/local.png", ImageReference.hosted("images/local.png")),
        ("https://example.com/a.png", ImageReference.external("https://example.com/a.png")),
        ("http://example.com/a.png", ImageReference.external("http://example.com/a.png")),
        ("//cdn.example.com/a.png", ImageReference.external("//cdn.example.com/a.png")),
        ("HTTPS://EXAMPLE.COM/A.PNG", ImageReference.external("HTTPS://EXAMPLE.COM/A.PNG")),
    ])
    def test_examples(self, src, expected):
        assert classify_image_source(src, CFG) == expected

    def test_marker_without_segment_is_external(self):
        ref = classify_image_source("https://static.wixstatic.com/media/", CFG)
        assert ref == ImageReference.external("https://static.wixstatic.com/media/")

    def test_surrounding_whitespace_stripped(self):
        assert classify_image_source("  abc.png  ", CFG).hosted_id == "abc.png"

    def test_empty_source_is_empty_hosted_id(self):
        ref = classify_image_source("", CFG)
        assert ref.is_hosted
        assert ref.hosted_id == ""

    def test_custom_markers(self):
        cfg = RicosConfig(hosted_media_markers=("media.example.org/assets/",))
        ref = classify_image_source("https://media.example.org/assets/logo.svg", cfg)
        assert ref == ImageReference.hosted("logo.svg")
        wix = "https://static.wixstatic.com/media/853f36_abc~mv2.png"
        assert classify_image_source(wix, cfg) == ImageReference.external(wix)


class TestLooksLikeImageSource:

    @pytest.mark.parametrize("value", [
        "https://x.io/a.png",
        "//cdn.x.io/a.png",
        "https://static.wixstatic.com/media/853f36_abc~mv2.png",
        "853f36_abc~mv2.png",
        "853f36_abc~mv2",
    ])
    def test_sources(self, value):
        assert looks_like_image_source(value, CFG)

    @pytest.mark.parametrize("value", ["", "   ", "A picture", "logo", "my photo.png"])
    def test_prose(self, value):
        assert not looks_like_image_source(value, CFG)


class TestParseImgTag:

    def test_basic(self):
        assert parse_img_tag('<img src="http://x/y.png" alt="pic">', CFG) == (
            "http://x/y.png", "pic", None, None,
        )

    def test_self_closing_single_quotes(self):
        assert parse_img_tag("<img src='a~mv2.png' />", CFG) == ("a~mv2.png", "", None, None)

    def test_attribute_order_and_case(self):
        result = parse_img_tag('<IMG ALT="pic" HEIGHT="120px" SRC="http://x/y.png">', CFG)
        assert result == ("http://x/y.png", "pic", None, 120)

    def test_dimensions(self):
        result = parse_img_tag('<img width="640" height="480" src="http://x/y.png">', CFG)
        assert result[2:] == (640, 480)

    @pytest.mark.parametrize("width", ["auto", "50%", "0", ""])
    def test_unusable_dimension_ignored(self, width):
        result = parse_img_tag(f'<img src="http://x/y.png" width="{width}">', CFG)
        assert result[2] is None

    def test_unquoted_attribute(self):
        assert parse_img_tag("<img src=http://x/y.png>", CFG)[0] == "http://x/y.png"

    def test_swapped_src_and_alt(self):
        result = parse_img_tag('<img src="Team photo" alt="https://x.io/team.jpg">', CFG)
        assert result[:2] == ("https://x.io/team.jpg", "Team photo")

    def test_no_swap_when_both_are_sources(self):
        result = parse_img_tag('<img src="http://a/1.png" alt="http://a/2.png">', CFG)
        assert result[:2] == ("http://a/1.png", "http://a/2.png")

    @pytest.mark.parametrize("html", [
        '<img alt="no source">',
        '<img src="">',
        "<div>text</div>",
        '<p><img src="http://x/y.png"></p>',
        '<img src="http://a/1.png"><img src="http://a/2.png">',
        "<!-- comment -->",
    ])
    def test_rejected(self, html):
        assert parse_img_tag(html, CFG) is None
