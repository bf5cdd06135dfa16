"""Formatting utilities shared by the export targets."""

from markup_export.formatting.ir import (
    NO_CHAR,
    StyleAttributes,
    StyleTable,
    StyledSource,
    read_style_table,
)
from markup_export.formatting.colors import html_color, rotate_rgb, tex_rgb
from markup_export.formatting.escaper import (
    CharacterEscaper,
    Escaped,
    HTMLEscaper,
    LaTeXEscaper,
)
from markup_export.formatting.template import compose_template, generation_date

__all__ = [
    "NO_CHAR",
    "StyleAttributes",
    "StyleTable",
    "StyledSource",
    "read_style_table",
    "html_color",
    "rotate_rgb",
    "tex_rgb",
    "CharacterEscaper",
    "Escaped",
    "HTMLEscaper",
    "LaTeXEscaper",
    "compose_template",
    "generation_date",
]
