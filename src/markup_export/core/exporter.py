"""Export orchestration: render a styled source and persist the result."""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from markup_export.formats import get_handler
from markup_export.formatting.ir import StyledSource
from markup_export.formatting.template import UNTITLED

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Error during document export."""

    pass


class ExportWriteError(ExportError):
    """The document was rendered but could not be written.

    Attributes:
        path: Destination that could not be written
        text: The rendered document
        errno: Platform error number, if known
        strerror: Platform error message
    """

    def __init__(self, path: Path, text: str, error: OSError) -> None:
        self.path = path
        self.text = text
        self.errno = error.errno
        self.strerror = error.strerror or str(error)
        super().__init__(f"File '{path}' could not be written ({self.strerror}).")


@dataclass
class ExportResult:
    """A finished export.

    Attributes:
        text: The complete document
        format_name: Target format ('html' or 'latex')
        extension: File extension of the target format
    """

    text: str
    format_name: str
    extension: str


def suggest_export_name(file_name: Optional[str], extension: str) -> str:
    """Suggest the file name for an exported document.

    Unsaved documents become "untitled<ext>". Otherwise the base name
    loses its extension and gains the target one, with "_export"
    inserted when the source already has the target extension so the
    export does not overwrite it.
    """
    if file_name is None:
        return f"{UNTITLED}{extension}"
    base_name = os.path.basename(file_name)
    short_name = os.path.splitext(base_name)[0]
    suffix = "_export" if file_name.endswith(extension) else ""
    return f"{short_name}{suffix}{extension}"


def write_export(path: Path, text: str) -> None:
    """Write an exported document to path.

    Raises:
        ExportWriteError: If the file cannot be written
    """
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ExportWriteError(path, text, e) from e
    logger.debug("Wrote %d characters to %s", len(text), path)


class DocumentExporter:
    """Export styled documents to one target format.

    Pipeline:
    1. Read the style table from the source
    2. Render the body, recording used styles
    3. Render definitions for the used styles
    4. Fill the format's document skeleton
    """

    def __init__(self, fmt: str = "html", use_zoom: bool = False) -> None:
        """Initialize the exporter.

        Args:
            fmt: Format name or extension ('html', 'latex', '.tex', ...)
            use_zoom: Add the source's zoom delta to the font size

        Raises:
            ValueError: If the format is not supported
        """
        self.renderer = get_handler(fmt)()
        self.use_zoom = use_zoom

    @property
    def extension(self) -> str:
        return self.renderer.extension

    def export(
        self, source: StyledSource, now: Optional[datetime] = None
    ) -> ExportResult:
        """Render source into a complete document."""
        text = self.renderer.render(source, use_zoom=self.use_zoom, now=now)
        return ExportResult(
            text=text,
            format_name=self.renderer.name,
            extension=self.renderer.extension,
        )

    def export_to_file(
        self,
        source: StyledSource,
        output_path: Path,
        now: Optional[datetime] = None,
    ) -> ExportResult:
        """Render source and write it to output_path.

        Raises:
            ExportWriteError: If the rendered document cannot be written
        """
        result = self.export(source, now=now)
        write_export(output_path, result.text)
        return result
