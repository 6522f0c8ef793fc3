"""Tests for the mistune-backed block tokenizer."""

import pytest

from mdricos.config import RicosConfig
from mdricos.converter.tokenizer import MarkdownTokenizer
from mdricos.models import Token


@pytest.fixture
def tokenizer():
    return MarkdownTokenizer(RicosConfig())


def _kinds(tokens):
    return [t.kind for t in tokens]


class TestBlockKinds:

    def test_heading(self, tokenizer):
        assert tokenizer.tokenize("## Sub *title*") == [
            Token("heading", "Sub *title*", depth=2),
        ]

    def test_paragraph_keeps_raw_inline_markup(self, tokenizer):
        [tok] = tokenizer.tokenize("Some **bold** and [a link](http://x.io).")
        assert tok == Token("paragraph", "Some **bold** and [a link](http://x.io).")

    def test_multiline_paragraph(self, tokenizer):
        [tok] = tokenizer.tokenize("line one\nline two\n")
        assert tok.text == "line one\nline two"

    def test_bullet_list(self, tokenizer):
        [tok] = tokenizer.tokenize("- one\n- **two**\n- three\n")
        assert tok.kind == "list"
        assert tok.ordered is False
        assert tok.items == ("one", "**two**", "three")

    def test_ordered_list(self, tokenizer):
        [tok] = tokenizer.tokenize("1. first\n2. second\n")
        assert tok.ordered is True
        assert tok.items == ("first", "second")

    def test_loose_list(self, tokenizer):
        [tok] = tokenizer.tokenize("- a\n\n- b\n")
        assert tok.items == ("a", "b")

    def test_nested_list_items_not_descended(self, tokenizer):
        [tok] = tokenizer.tokenize("- parent\n  - child\n- sibling\n")
        assert tok.items == ("parent", "sibling")

    def test_fenced_code(self, tokenizer):
        [tok] = tokenizer.tokenize("```python\nprint('hi')\n```\n")
        assert tok == Token("code", "print('hi')", lang="python")

    def test_fenced_code_without_language(self, tokenizer):
        [tok] = tokenizer.tokenize("```\nraw **text**\n```\n")
        assert tok.kind == "code"
        assert tok.text == "raw **text**"
        assert tok.lang is None

    def test_code_info_extra_words_ignored(self, tokenizer):
        [tok] = tokenizer.tokenize("```js title=app.js\nx()\n```\n")
        assert tok.lang == "js"

    def test_blockquote(self, tokenizer):
        [tok] = tokenizer.tokenize("> quoted *text*\n")
        assert tok == Token("blockquote", "quoted *text*")

    def test_multi_paragraph_blockquote(self, tokenizer):
        [tok] = tokenizer.tokenize("> one\n>\n> two\n")
        assert tok.text == "one\ntwo"

    def test_thematic_break(self, tokenizer):
        assert _kinds(tokenizer.tokenize("---\n")) == ["hr"]

    def test_html_block(self, tokenizer):
        [tok] = tokenizer.tokenize('<img src="http://x/y.png" alt="pic">\n')
        assert tok.kind == "html"
        assert tok.text == '<img src="http://x/y.png" alt="pic">'


class TestDocument:

    def test_full_document_order(self, tokenizer):
        md = (
            "# Title\n\n"
            "Intro paragraph.\n\n"
            "- a\n- b\n\n"
            "> quote\n\n"
            "---\n\n"
            "```\ncode\n```\n"
        )
        assert _kinds(tokenizer.tokenize(md)) == [
            "heading", "paragraph", "list", "blockquote", "hr", "code",
        ]

    def test_blank_lines_dropped_by_default(self, tokenizer):
        assert _kinds(tokenizer.tokenize("a\n\n\n\nb\n")) == ["paragraph", "paragraph"]

    def test_blank_lines_preserved_when_configured(self):
        tokenizer = MarkdownTokenizer(RicosConfig(preserve_blank_lines=True))
        assert _kinds(tokenizer.tokenize("a\n\nb\n")) == ["paragraph", "space", "paragraph"]

    def test_crlf_line_endings(self, tokenizer):
        tokens = tokenizer.tokenize("# T\r\n\r\nbody\r\n")
        assert [(t.kind, t.text) for t in tokens] == [("heading", "T"), ("paragraph", "body")]

    def test_empty_input(self, tokenizer):
        assert tokenizer.tokenize("") == []

    def test_default_config(self):
        assert _kinds(MarkdownTokenizer().tokenize("x")) == ["paragraph"]
