"""Intermediate representation for styled text export.

This module defines the data structures shared by every export target:
the per-style visual attributes, the style table owned by one export,
and the read-only host interface the exporter pulls characters and
styles from.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol

logger = logging.getLogger(__name__)

# Returned by StyledSource.char_at() for offsets at or past the end
NO_CHAR = ""

# Packed 0xBBGGRR colors
BLACK = 0x000000
WHITE = 0xFFFFFF


class StyledSource(Protocol):
    """Read-only view of a styled document, as provided by the host.

    Colors are packed integers in 0xBBGGRR order (red in the low byte).
    """

    def content_length(self) -> int:
        ...

    def char_at(self, offset: int) -> str:
        """Return the character at offset, or NO_CHAR past the end."""
        ...

    def style_at(self, offset: int) -> int:
        ...

    def style_bits(self) -> int:
        """Return the width of the style index space (count = 2 ** bits)."""
        ...

    def style_attributes(self, index: int) -> "StyleAttributes":
        ...

    def file_name(self) -> Optional[str]:
        ...

    def font_family(self) -> str:
        ...

    def base_font_size(self) -> int:
        ...

    def zoom_delta(self) -> int:
        ...

    def tab_width(self) -> int:
        ...


@dataclass
class StyleAttributes:
    """Visual attributes of one style index.

    Attributes:
        foreground: Text color, packed 0xBBGGRR
        background: Background color, packed 0xBBGGRR
        bold: Whether the style is bold
        italic: Whether the style is italic
        used: Set once a run of this style has been emitted
    """

    foreground: int = BLACK
    background: int = WHITE
    bold: bool = False
    italic: bool = False
    used: bool = False


class StyleTable:
    """Mapping from style index to attributes, sized from the host.

    The table is a plain list, so an index outside [0, len) raises
    IndexError instead of reading or writing past a fixed bound.
    """

    def __init__(self, styles: list[StyleAttributes]) -> None:
        self._styles = styles

    def __len__(self) -> int:
        return len(self._styles)

    def __getitem__(self, index: int) -> StyleAttributes:
        if index < 0:
            raise IndexError(f"style index out of range: {index}")
        return self._styles[index]

    def __iter__(self) -> Iterator[StyleAttributes]:
        return iter(self._styles)

    def mark_used(self, index: int) -> None:
        """Record that a run of the given style was emitted."""
        self[index].used = True

    def used_indices(self) -> list[int]:
        """Return the used style indices in ascending order."""
        return [i for i, style in enumerate(self._styles) if style.used]


def read_style_table(source: StyledSource) -> StyleTable:
    """Read the attributes of every style index the host can report.

    Every entry starts with used=False. The table size is
    2 ** source.style_bits(), whatever width the host reports.
    """
    count = 2 ** source.style_bits()
    styles: list[StyleAttributes] = []
    for index in range(count):
        attrs = source.style_attributes(index)
        styles.append(
            StyleAttributes(
                foreground=attrs.foreground,
                background=attrs.background,
                bold=attrs.bold,
                italic=attrs.italic,
            )
        )
    logger.debug("Read %d styles from source", count)
    return StyleTable(styles)
