"""In-memory styled document."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from markup_export.formatting.ir import NO_CHAR, StyleAttributes


@dataclass
class StyledText:
    """A styled document held in memory.

    Attributes:
        text: The document content
        styles: Style index of every character in text
        attributes: Attributes per style index; missing indices are
            black on white, not bold, not italic
        document_name: File name of the document, None if unsaved
        font: Editor font family
        font_size: Base font size in points
        zoom: Zoom delta in points
        tabs: Tab width in columns
        bits: Style index width; derived from the highest index if None
    """

    text: str = ""
    styles: list[int] = field(default_factory=list)
    attributes: dict[int, StyleAttributes] = field(default_factory=dict)
    document_name: Optional[str] = None
    font: str = "Monospace"
    font_size: int = 10
    zoom: int = 0
    tabs: int = 8
    bits: Optional[int] = None

    def __post_init__(self) -> None:
        if len(self.styles) != len(self.text):
            raise ValueError(
                f"Expected {len(self.text)} style indices, got {len(self.styles)}"
            )
        if any(index < 0 for index in self.styles):
            raise ValueError("Style indices must not be negative")

    @classmethod
    def from_segments(
        cls, segments: Iterable[tuple[str, int]], **kwargs
    ) -> "StyledText":
        """Build a document from (text, style_index) pairs."""
        text_parts: list[str] = []
        styles: list[int] = []
        for text, index in segments:
            text_parts.append(text)
            styles.extend([index] * len(text))
        return cls(text="".join(text_parts), styles=styles, **kwargs)

    def content_length(self) -> int:
        return len(self.text)

    def char_at(self, offset: int) -> str:
        if 0 <= offset < len(self.text):
            return self.text[offset]
        return NO_CHAR

    def style_at(self, offset: int) -> int:
        if 0 <= offset < len(self.styles):
            return self.styles[offset]
        return 0

    def style_bits(self) -> int:
        if self.bits is not None:
            return self.bits
        highest = max([*self.styles, *self.attributes.keys()], default=0)
        return max(1, highest.bit_length())

    def style_attributes(self, index: int) -> StyleAttributes:
        return self.attributes.get(index, StyleAttributes())

    def file_name(self) -> Optional[str]:
        return self.document_name

    def font_family(self) -> str:
        return self.font

    def base_font_size(self) -> int:
        return self.font_size

    def zoom_delta(self) -> int:
        return self.zoom

    def tab_width(self) -> int:
        return self.tabs
