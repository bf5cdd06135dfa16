"""Core export logic for Markup Export."""

from markup_export.core.exporter import (
    DocumentExporter,
    ExportError,
    ExportResult,
    ExportWriteError,
    suggest_export_name,
    write_export,
)

__all__ = [
    "DocumentExporter",
    "ExportError",
    "ExportResult",
    "ExportWriteError",
    "suggest_export_name",
    "write_export",
]
