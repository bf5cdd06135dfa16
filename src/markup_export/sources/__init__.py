"""Styled document sources for Markup Export."""

from markup_export.sources.memory import StyledText
from markup_export.sources.pygments_source import find_lexer, lex_file, lex_text

__all__ = [
    "StyledText",
    "find_lexer",
    "lex_file",
    "lex_text",
]
