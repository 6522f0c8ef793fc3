"""Shared test fixtures for the mdricos test suite."""

from __future__ import annotations

import itertools

import pytest

from mdricos.config import RicosConfig
from mdricos.converter.md_to_ricos import MarkdownToRicosConverter


class CountingIdGenerator:
    """Deterministic id source: ``id1``, ``id2``, ..."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"id{next(self._counter)}"


@pytest.fixture
def config() -> RicosConfig:
    """Default configuration with distinct text and heading colors."""
    return RicosConfig(text_color="#222222", heading_color="#111111")


@pytest.fixture
def new_id() -> CountingIdGenerator:
    return CountingIdGenerator()


@pytest.fixture
def converter(config: RicosConfig) -> MarkdownToRicosConverter:
    """Markdown-to-RICOS converter using the default test config."""
    return MarkdownToRicosConverter(config)
