"""Syntax-highlighted documents built with Pygments."""

import logging
from pathlib import Path
from typing import Optional

from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_for_filename, guess_lexer
from pygments.styles import get_style_by_name
from pygments.token import Token
from pygments.util import ClassNotFound

from markup_export.config import Settings, get_settings, parse_font_description
from markup_export.formatting.ir import BLACK, WHITE, StyleAttributes
from markup_export.sources.memory import StyledText

logger = logging.getLogger(__name__)

# Keep the text exactly as read
LEXER_OPTIONS = {"stripnl": False, "ensurenl": False}


def pack_hex_color(value: Optional[str], default: int) -> int:
    """Convert "#rrggbb" (or "rrggbb", "#rgb") into a packed 0xBBGGRR color."""
    if not value:
        return default
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    if len(digits) != 6:
        return default
    try:
        red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return default
    return red | (green << 8) | (blue << 16)


def find_lexer(file_name: Optional[str], code: str) -> Lexer:
    """Pick a lexer from the file name, then by guessing, then plain text."""
    if file_name:
        try:
            return get_lexer_for_filename(file_name, code, **LEXER_OPTIONS)
        except ClassNotFound:
            pass
    try:
        return guess_lexer(code, **LEXER_OPTIONS)
    except ClassNotFound:
        return TextLexer(**LEXER_OPTIONS)


def lex_text(
    code: str,
    lexer: Lexer,
    style_name: str = "default",
    **kwargs,
) -> StyledText:
    """Tokenize code and assign one style index per token type.

    Index 0 is the root token type; the others are numbered in order of
    first appearance. Colors, bold and italic come from the named
    Pygments style.

    Args:
        code: Source code to highlight
        lexer: Pygments lexer to tokenize with
        style_name: Name of a Pygments style
        **kwargs: Passed on to StyledText (document_name, font, ...)

    Returns:
        StyledText carrying the code and its style indices

    Raises:
        pygments.util.ClassNotFound: If the style does not exist
    """
    style = get_style_by_name(style_name)
    background = pack_hex_color(style.background_color, WHITE)

    indices: dict = {Token: 0}
    segments: list[tuple[str, int]] = []
    for ttype, value in lexer.get_tokens(code):
        index = indices.setdefault(ttype, len(indices))
        segments.append((value, index))

    attributes: dict[int, StyleAttributes] = {}
    for ttype, index in indices.items():
        # lexers may emit token types the style has no entry for
        while not style.styles_token(ttype) and ttype.parent is not None:
            ttype = ttype.parent
        token_style = style.style_for_token(ttype)
        attributes[index] = StyleAttributes(
            foreground=pack_hex_color(token_style["color"], BLACK),
            background=pack_hex_color(token_style["bgcolor"], background),
            bold=bool(token_style["bold"]),
            italic=bool(token_style["italic"]),
        )

    logger.debug(
        "Lexed %d characters with %s into %d token styles",
        len(code),
        lexer.name,
        len(indices),
    )
    return StyledText.from_segments(segments, attributes=attributes, **kwargs)


def lex_file(
    path: Path,
    style_name: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> StyledText:
    """Read a source file and highlight it for export.

    Editor settings (tab width, font, zoom) come from settings, or the
    global settings if not given.
    """
    settings = settings or get_settings()
    code = path.read_text(encoding="utf-8", errors="replace")
    family, size = parse_font_description(settings.editor_font)
    return lex_text(
        code,
        find_lexer(path.name, code),
        style_name or settings.style_name,
        document_name=str(path),
        font=family,
        font_size=size,
        zoom=settings.zoom,
        tabs=settings.tab_width,
    )
