"""Property-based tests for mdricos using Hypothesis.

These tests verify invariant properties of the inline resolver, image
classification and the full conversion pipeline.  They complement the
example-based unit tests by exercising the code with a wide range of
randomly generated inputs.
"""

from __future__ import annotations

import re
import string

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from mdricos.config import RicosConfig
from mdricos.converter.decorations import find_inline_spans, plain_text, resolve_inline
from mdricos.converter.md_to_ricos import MarkdownToRicosConverter
from mdricos.converter.serialize import document_to_dict
from mdricos.image.detect import classify_image_source
from mdricos.models import DecorationType, NodeType

# ---------------------------------------------------------------------------
# Reusable strategies
# ---------------------------------------------------------------------------

_COLOR = "#336699"

# Text that contains none of the inline markers.
_marker_free_st = st.text(
    alphabet=st.characters(blacklist_characters="*_[]()", blacklist_categories=("Cs",)),
    max_size=200,
)

# Text dense in markers, to stress overlap handling.  Pieces may be longer
# than one character, so they are joined from a list.
_markup_st = st.lists(
    st.sampled_from(list("*_[]() ab\n") + ["http://x.io", "***", "__"]),
    max_size=60,
).map("".join)

_color_st = st.from_regex(r"\A#[0-9a-f]{6}\Z")


def _all_nodes(nodes):
    for node in nodes:
        yield node
        yield from _all_nodes(node.nodes)


# ---------------------------------------------------------------------------
# Inline resolver
# ---------------------------------------------------------------------------

class TestResolverProperties:

    @given(text=_marker_free_st)
    def test_marker_free_text_is_one_segment(self, text):
        result = resolve_inline(text, _COLOR)
        assert len(result) == 1
        assert plain_text(result) == text

    @given(text=_markup_st)
    def test_spans_are_sorted_and_disjoint(self, text):
        spans = find_inline_spans(text)
        for left, right in zip(spans, spans[1:]):
            assert left.end <= right.start
        for span in spans:
            assert 0 <= span.start < span.end <= len(text)
            assert span.content

    @given(text=_markup_st, color=_color_st)
    def test_every_segment_has_one_color(self, text, color):
        for seg in resolve_inline(text, color):
            colors = [d for d in seg.decorations if d.type is DecorationType.COLOR]
            assert len(colors) == 1
            assert colors[0].color == color

    @given(text=_markup_st)
    def test_no_empty_segments(self, text):
        result = resolve_inline(text, _COLOR)
        assert result
        if text:
            assert all(seg.text for seg in result)

    @given(text=_markup_st)
    def test_rendered_text_is_never_longer(self, text):
        assert len(plain_text(resolve_inline(text, _COLOR))) <= len(text)

    @given(text=_markup_st)
    def test_link_segments_are_underlined(self, text):
        for seg in resolve_inline(text, _COLOR):
            kinds = [d.type for d in seg.decorations]
            if DecorationType.LINK in kinds:
                assert kinds == [
                    DecorationType.COLOR, DecorationType.LINK, DecorationType.UNDERLINE,
                ]


# ---------------------------------------------------------------------------
# Image classification
# ---------------------------------------------------------------------------

class TestImageProperties:

    @given(src=st.text(max_size=100))
    def test_exactly_one_reference_kind(self, src):
        ref = classify_image_source(src, RicosConfig())
        assert (ref.hosted_id is None) != (ref.external_url is None)

    @given(path=st.text(alphabet=string.ascii_letters + string.digits + ".-", max_size=40))
    def test_http_urls_without_marker_are_external(self, path):
        src = f"https://example.com/{path}"
        assert classify_image_source(src, RicosConfig()).external_url == src

    @given(media_id=st.from_regex(r"\A[0-9a-f]{6}_[0-9a-z]{8}~mv2\.(png|jpg)\Z"))
    def test_hosted_urls_yield_media_id(self, media_id):
        src = f"https://static.wixstatic.com/media/{media_id}/v1/fill/w_100"
        assert classify_image_source(src, RicosConfig()).hosted_id == media_id


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------

class TestPipelineProperties:

    @settings(max_examples=60, suppress_health_check=[HealthCheck.too_slow])
    @given(markdown=st.text(max_size=300))
    def test_convert_is_total(self, markdown):
        doc = MarkdownToRicosConverter().convert(markdown)
        document_to_dict(doc)

    @settings(max_examples=60, suppress_health_check=[HealthCheck.too_slow])
    @given(markdown=st.text(alphabet=st.sampled_from(list("#-*>`_[]() ab1.\n")), max_size=200))
    def test_ids_have_configured_format(self, markdown):
        doc = MarkdownToRicosConverter(RicosConfig(id_length=6)).convert(markdown)
        for node in _all_nodes(doc.nodes):
            if node.id == "":
                continue
            assert re.fullmatch(r"[a-z0-9]{6}", node.id)

    @settings(max_examples=60, suppress_health_check=[HealthCheck.too_slow])
    @given(markdown=st.text(alphabet=st.sampled_from(list("#-*>`_[]() ab1.\n")), max_size=200))
    def test_only_code_text_leaves_have_empty_ids(self, markdown):
        doc = MarkdownToRicosConverter().convert(markdown)
        for node in _all_nodes(doc.nodes):
            if node.type is NodeType.CODE_BLOCK:
                assert [child.id for child in node.nodes] == [""]
            elif node.type is not NodeType.TEXT:
                assert node.id
