"""Pytest fixtures for Markup Export tests."""

from datetime import datetime

import pytest

from markup_export.formatting.ir import StyleAttributes, read_style_table
from markup_export.sources.memory import StyledText

# Packed 0xBBGGRR colors
RED = 0x0000FF
BLUE = 0xFF0000


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed generation time so rendered documents are comparable."""
    return datetime(2024, 5, 6, 7, 8, 9)


@pytest.fixture
def two_styles() -> dict[int, StyleAttributes]:
    """Style 0 black on white, style 1 red on white."""
    return {
        0: StyleAttributes(),
        1: StyleAttributes(foreground=RED),
    }


@pytest.fixture
def make_text():
    """Build a StyledText where every character has the same style."""

    def _make(text: str, style: int = 0, **kwargs) -> StyledText:
        return StyledText.from_segments([(text, style)], **kwargs)

    return _make


@pytest.fixture
def render_body():
    """Render only the body of a source, returning (body, style table)."""

    def _render(renderer, source):
        table = read_style_table(source)
        return renderer.render_body(source, table), table

    return _render
