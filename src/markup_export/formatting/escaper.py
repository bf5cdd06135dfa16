"""Per-format character escaping with one character of look-ahead.

An escaper looks at the current character, the character after it and
the current column, and answers with an Escaped value telling the body
renderer what to emit and how to move on.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Escaped:
    """Result of escaping one character.

    Attributes:
        text: Output text for the character
        columns: Columns the output occupies (tab stops span several)
        consumed_next: The look-ahead character was emitted too and must
            be skipped by the caller
        line_break: The character ends a line; the open run must be
            closed before text is emitted and the column reset to 0
        skip: Nothing is emitted and the column does not move
    """

    text: str = ""
    columns: int = 1
    consumed_next: bool = False
    line_break: bool = False
    skip: bool = False


SKIP = Escaped(columns=0, skip=True)


class CharacterEscaper(ABC):
    """Base class holding the rules common to every target.

    CR immediately followed by LF is skipped so that the pair yields a
    single line break. Tabs expand to the next multiple of tab_width.
    """

    line_break_text: str = "\n"

    def __init__(self, tab_width: int = 8) -> None:
        if tab_width < 1:
            raise ValueError(f"tab width must be positive, got {tab_width}")
        self.tab_width = tab_width

    def escape(self, char: str, next_char: str, column: int) -> Escaped:
        """Escape char given the following character and the current column."""
        if char == "\r" and next_char == "\n":
            return SKIP
        if char in ("\r", "\n"):
            return Escaped(self.line_break_text, line_break=True)
        if char == "\t":
            tab_stop = self.tab_width - (column % self.tab_width)
            return Escaped(self.tab(tab_stop), columns=tab_stop)
        return self.escape_char(char, next_char)

    @abstractmethod
    def tab(self, width: int) -> str:
        """Return the output for a tab spanning width columns."""
        ...

    @abstractmethod
    def escape_char(self, char: str, next_char: str) -> Escaped:
        """Escape any character that is not a tab or line break."""
        ...


class HTMLEscaper(CharacterEscaper):
    """Entity escaping for HTML bodies."""

    line_break_text = "<br />\n"
    NBSP = "&nbsp;"

    ENTITIES = {
        "<": "&lt;",
        ">": "&gt;",
        "&": "&amp;",
        " ": NBSP,
    }

    def tab(self, width: int) -> str:
        return self.NBSP * width

    def escape_char(self, char: str, next_char: str) -> Escaped:
        return Escaped(self.ENTITIES.get(char, char))


class LaTeXEscaper(CharacterEscaper):
    """Escaping for LaTeX bodies.

    Pairs of "-", "<" or ">" get a ligature break between them. Only
    exact pairs are handled: in "---" the first two characters form a
    pair and the third is emitted as-is, so longer runs can still be
    typeset as a ligature.

    The second character of a pair (or of a double space) is emitted
    inside the run of the first character, so its own style neither
    opens a run nor counts as used.
    """

    line_break_text = " \\\\\n"

    SPECIAL_CHARS = "{}_&$#%"
    SYMBOLS = {
        "\\": "\\symbol{92}",
        "~": "\\symbol{126}",
        "^": "\\symbol{94}",
    }
    LIGATURE_CHARS = "-<>"
    DOUBLE_SPACE = "{\\hspace*{1em}}"

    def tab(self, width: int) -> str:
        return f"\\hspace*{{{width}em}}"

    def escape_char(self, char: str, next_char: str) -> Escaped:
        if char in self.SPECIAL_CHARS:
            return Escaped("\\" + char)
        if char in self.SYMBOLS:
            return Escaped(self.SYMBOLS[char])
        if char == " " and next_char == " ":
            return Escaped(self.DOUBLE_SPACE, consumed_next=True)
        if char in self.LIGATURE_CHARS and next_char == char:
            return Escaped(f"{char}\\/{char}", consumed_next=True)
        return Escaped(char)
