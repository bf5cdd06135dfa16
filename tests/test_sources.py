"""Tests for Pygments-based sources."""

from pathlib import Path

import pytest
from pygments.lexers import PythonLexer

from markup_export.config import Settings
from markup_export.formats.html_handler import HTMLRenderer
from markup_export.formatting.ir import BLACK, read_style_table
from markup_export.sources.pygments_source import (
    LEXER_OPTIONS,
    find_lexer,
    lex_file,
    lex_text,
    pack_hex_color,
)

PYTHON_CODE = "def f():\n\tpass\n\n"


class TestPackHexColor:
    """Tests for hex color parsing."""

    def test_red(self):
        """Test that red lands in the low byte."""
        assert pack_hex_color("#ff0000", BLACK) == 0x0000FF

    def test_without_hash(self):
        """Test the bare hex form Pygments uses for token colors."""
        assert pack_hex_color("008000", BLACK) == 0x008000

    def test_short_form(self):
        """Test three digit colors."""
        assert pack_hex_color("#fff", BLACK) == 0xFFFFFF

    def test_missing_or_invalid(self):
        """Test that unusable values fall back to the default."""
        assert pack_hex_color(None, 0x123456) == 0x123456
        assert pack_hex_color("", 0x123456) == 0x123456
        assert pack_hex_color("ansired", 0x123456) == 0x123456
        assert pack_hex_color("#zzzzzz", 0x123456) == 0x123456


class TestLexText:
    """Tests for turning highlighted tokens into a styled document."""

    @pytest.fixture
    def lexer(self):
        return PythonLexer(**LEXER_OPTIONS)

    def test_text_is_preserved(self, lexer):
        """Test that the lexer does not strip or add newlines."""
        source = lex_text(PYTHON_CODE, lexer)

        assert source.text == PYTHON_CODE
        assert source.content_length() == len(PYTHON_CODE)

    def test_style_indices_fit_table(self, lexer):
        """Test that every style index fits the reported style space."""
        source = lex_text(PYTHON_CODE, lexer)
        table = read_style_table(source)

        assert all(0 <= source.style_at(i) < len(table) for i in range(len(PYTHON_CODE)))

    def test_keyword_style(self, lexer):
        """Test that keywords get the style's color and weight."""
        source = lex_text(PYTHON_CODE, lexer, style_name="default")
        attrs = source.style_attributes(source.style_at(0))

        assert attrs.bold is True
        assert attrs.foreground == 0x008000
        assert attrs.background == 0xF8F8F8

    def test_token_types_keep_their_own_colors(self, lexer):
        """Test that token types get distinct colors from a dark style."""
        source = lex_text(PYTHON_CODE, lexer, style_name="monokai")
        foregrounds = {
            source.style_attributes(source.style_at(i)).foreground
            for i in range(len(PYTHON_CODE))
        }

        assert len(foregrounds) > 1
        # "def" is a keyword: #66d9ef in monokai
        assert source.style_attributes(source.style_at(0)).foreground == 0xEFD966

    def test_settings_passed_through(self, lexer):
        """Test that extra keyword arguments reach the document."""
        source = lex_text("x", lexer, document_name="x.py", tabs=2)

        assert source.file_name() == "x.py"
        assert source.tab_width() == 2

    def test_unknown_style(self, lexer):
        """Test that an unknown style name is rejected."""
        with pytest.raises(ValueError):
            lex_text("x", lexer, style_name="no-such-style")

    def test_renders_as_html(self, lexer):
        """Test a highlighted document through the HTML renderer."""
        html = HTMLRenderer().render(lex_text(PYTHON_CODE, lexer))

        assert "color: #008000;" in html
        assert "font-weight: bold;" in html
        assert ">def" in html


class TestFindLexer:
    """Tests for lexer selection."""

    def test_by_file_name(self):
        """Test that the file extension selects the lexer."""
        assert find_lexer("script.py", "x = 1").name == "Python"

    def test_fallback(self):
        """Test that an unknown extension still yields a lexer."""
        lexer = find_lexer("notes.unknown-extension", "just some words")

        assert lexer is not None


class TestLexFile:
    """Tests for reading source files."""

    def test_editor_settings(self, tmp_path: Path, monkeypatch):
        """Test that tab width, font and zoom come from the settings."""
        monkeypatch.setenv("MARKUP_EXPORT_TAB_WIDTH", "4")
        monkeypatch.setenv("MARKUP_EXPORT_FONT", "DejaVu Sans Mono 12")
        monkeypatch.setenv("MARKUP_EXPORT_ZOOM", "2")
        path = tmp_path / "hello.py"
        path.write_text("print('hi')\n", encoding="utf-8")

        source = lex_file(path, settings=Settings())

        assert source.text == "print('hi')\n"
        assert source.file_name() == str(path)
        assert source.tab_width() == 4
        assert source.font_family() == "DejaVu Sans Mono"
        assert source.base_font_size() == 12
        assert source.zoom_delta() == 2
