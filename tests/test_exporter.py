"""Tests for the export orchestrator."""

from pathlib import Path
from unittest.mock import patch

import pytest

from markup_export.core.exporter import (
    DocumentExporter,
    ExportError,
    ExportWriteError,
    suggest_export_name,
    write_export,
)


class TestSuggestExportName:
    """Tests for default export file names."""

    def test_untitled(self):
        """Test the name for an unsaved document."""
        assert suggest_export_name(None, ".html") == "untitled.html"

    def test_replaces_extension(self):
        """Test that the source extension is replaced."""
        assert suggest_export_name("/src/main.py", ".html") == "main.html"
        assert suggest_export_name("/src/main.py", ".tex") == "main.tex"

    def test_same_extension_gets_suffix(self):
        """Test that exporting x.html to HTML does not overwrite it."""
        assert suggest_export_name("/www/page.html", ".html") == "page_export.html"

    def test_no_extension(self):
        """Test a file name without an extension."""
        assert suggest_export_name("Makefile", ".tex") == "Makefile.tex"


class TestDocumentExporter:
    """Tests for DocumentExporter."""

    def test_html_by_default(self, make_text, fixed_now):
        """Test that HTML is the default format."""
        result = DocumentExporter().export(make_text("a"), now=fixed_now)

        assert result.format_name == "html"
        assert result.extension == ".html"
        assert result.text.startswith("<!DOCTYPE html")

    @pytest.mark.parametrize("fmt", ["latex", "tex", ".tex", "LaTeX"])
    def test_latex_aliases(self, fmt, make_text, fixed_now):
        """Test the names that select LaTeX."""
        result = DocumentExporter(fmt).export(make_text("a"), now=fixed_now)

        assert result.format_name == "latex"
        assert result.extension == ".tex"

    def test_unsupported_format(self):
        """Test that unknown formats are rejected."""
        with pytest.raises(ValueError, match="Supported formats"):
            DocumentExporter("rtf")

    def test_use_zoom(self, make_text, fixed_now):
        """Test that use_zoom reaches the renderer."""
        source = make_text("a", font_size=10, zoom=3)
        result = DocumentExporter("html", use_zoom=True).export(source, now=fixed_now)

        assert "font-size: 13pt;" in result.text

    def test_export_to_file(self, tmp_path: Path, make_text, fixed_now):
        """Test that the rendered document is written."""
        output = tmp_path / "out.tex"
        result = DocumentExporter("latex").export_to_file(
            make_text("a"), output, now=fixed_now
        )

        assert output.read_text(encoding="utf-8") == result.text

    def test_write_failure_keeps_rendered_text(self, tmp_path: Path, make_text):
        """Test that a failed write still carries the rendered document."""
        with pytest.raises(ExportWriteError) as exc_info:
            DocumentExporter("html").export_to_file(make_text("a"), tmp_path)

        error = exc_info.value
        assert isinstance(error, ExportError)
        assert error.path == tmp_path
        assert error.text.startswith("<!DOCTYPE html")
        assert "could not be written" in str(error)


class TestWriteExport:
    """Tests for writing exported documents."""

    def test_writes_utf8(self, tmp_path: Path):
        """Test that non-ASCII text is written as UTF-8."""
        output = tmp_path / "out.html"
        write_export(output, "café")

        assert output.read_bytes() == "café".encode("utf-8")

    def test_reports_platform_error(self, tmp_path: Path):
        """Test that the OS error number and message are kept."""
        output = tmp_path / "out.html"
        with patch.object(
            Path, "write_text", side_effect=PermissionError(13, "Permission denied")
        ):
            with pytest.raises(ExportWriteError) as exc_info:
                write_export(output, "text")

        assert exc_info.value.errno == 13
        assert exc_info.value.strerror == "Permission denied"
        assert str(exc_info.value) == (
            f"File '{output}' could not be written (Permission denied)."
        )
