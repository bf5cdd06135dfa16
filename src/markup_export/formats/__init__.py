"""Export format renderers for Markup Export."""

from markup_export.formats.base import FormatRenderer
from markup_export.formats.html_handler import HTMLRenderer
from markup_export.formats.latex_handler import LaTeXRenderer

__all__ = [
    "FormatRenderer",
    "HTMLRenderer",
    "LaTeXRenderer",
]

# Map format names and file extensions to renderers
HANDLER_MAP: dict[str, type[FormatRenderer]] = {
    "html": HTMLRenderer,
    ".html": HTMLRenderer,
    "latex": LaTeXRenderer,
    "tex": LaTeXRenderer,
    ".tex": LaTeXRenderer,
}

SUPPORTED_FORMATS = ("html", "latex")


def get_handler(fmt: str) -> type[FormatRenderer]:
    """Get the renderer class for a format name or file extension."""
    key = fmt.lower()
    if key not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported export format: {fmt}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
    return HANDLER_MAP[key]
