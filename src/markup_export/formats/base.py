"""Abstract base class for export format renderers."""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from markup_export.formatting.escaper import CharacterEscaper
from markup_export.formatting.ir import StyledSource, StyleTable, read_style_table
from markup_export.formatting.template import (
    DATE_FORMAT_DEFAULT,
    compose_template,
    generation_date,
)

logger = logging.getLogger(__name__)

# Whitespace that never opens a run (ASCII only, like C isspace)
WHITESPACE = " \t\n\v\f\r"


class FormatRenderer(ABC):
    """Abstract base class for export format renderers.

    The base class walks the source, groups consecutive characters of
    the same style into runs and records which styles were used. Each
    target supplies its markers, escaping rules, stylesheet and
    document skeleton.
    """

    # Whitespace never starts a run; it stays in whatever run is open
    absorbs_whitespace: bool = False
    # Whether the zoom delta may be added to the font size
    supports_zoom: bool = False
    date_format: str = DATE_FORMAT_DEFAULT

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the format name (e.g., 'html')."""
        ...

    @property
    @abstractmethod
    def extension(self) -> str:
        """Return the output file extension (e.g., '.html')."""
        ...

    @property
    @abstractmethod
    def template(self) -> str:
        """Return the document skeleton with export placeholders."""
        ...

    @abstractmethod
    def create_escaper(self, tab_width: int) -> CharacterEscaper:
        ...

    @abstractmethod
    def style_token(self, index: int) -> str:
        """Return the format-safe name of a style index."""
        ...

    @abstractmethod
    def open_run(self, index: int) -> str:
        ...

    @abstractmethod
    def close_run(self, at_line_break: bool = False) -> str:
        """Return the marker closing a run.

        Args:
            at_line_break: True when the run is closed by a line break
                rather than a style change or the end of input
        """
        ...

    @abstractmethod
    def render_styles(self, table: StyleTable, font_family: str, font_size: int) -> str:
        """Render definitions for every used style in ascending index order."""
        ...

    def finalize_used(self, table: StyleTable) -> None:
        """Adjust the used-style set after the body has been rendered."""

    def font_size(self, source: StyledSource, use_zoom: bool = False) -> int:
        """Return the base font size, plus the zoom delta if requested."""
        size = source.base_font_size()
        if use_zoom and self.supports_zoom:
            size += source.zoom_delta()
        return size

    def _starts_run(
        self, char: str, style: int, current_style: Optional[int], run_open: bool
    ) -> bool:
        if style == current_style and run_open:
            return False
        return not (self.absorbs_whitespace and char in WHITESPACE)

    def render_body(self, source: StyledSource, table: StyleTable) -> str:
        """Render the styled characters of source as run-tagged markup.

        Marks every style that opens a run as used in table.
        """
        escaper = self.create_escaper(source.tab_width())
        parts: list[str] = []
        current_style: Optional[int] = None
        run_open = False
        column = 0
        offset = 0
        length = source.content_length()

        while offset < length:
            char = source.char_at(offset)
            next_char = source.char_at(offset + 1)
            style = source.style_at(offset)

            if self._starts_run(char, style, current_style, run_open):
                if run_open:
                    parts.append(self.close_run())
                table.mark_used(style)
                parts.append(self.open_run(style))
                run_open = True
                current_style = style

            escaped = escaper.escape(char, next_char, column)
            if escaped.skip:
                offset += 1
                continue

            if escaped.line_break:
                if run_open:
                    parts.append(self.close_run(at_line_break=True))
                    run_open = False
                parts.append(escaped.text)
                column = 0
            else:
                parts.append(escaped.text)
                column += escaped.columns

            offset += 2 if escaped.consumed_next else 1

        if run_open:
            parts.append(self.close_run())

        self.finalize_used(table)
        return "".join(parts)

    def render(
        self,
        source: StyledSource,
        use_zoom: bool = False,
        now: Optional[datetime] = None,
    ) -> str:
        """Render source into a complete document.

        Args:
            source: The styled document to export
            use_zoom: Add the source's zoom delta to the font size
                (only honoured by targets that support it)
            now: Generation time; defaults to the current local time

        Returns:
            The finished document text
        """
        table = read_style_table(source)
        body = self.render_body(source, table)
        styles = self.render_styles(
            table, source.font_family(), self.font_size(source, use_zoom)
        )
        logger.debug(
            "Rendered %s body: %d characters, styles used: %s",
            self.name,
            len(body),
            table.used_indices(),
        )
        return compose_template(
            self.template,
            source.file_name(),
            generation_date(self.date_format, now),
            styles,
            body,
        )
