"""LaTeX export renderer."""

from markup_export import __version__
from markup_export.formats.base import FormatRenderer
from markup_export.formatting.colors import tex_rgb
from markup_export.formatting.escaper import CharacterEscaper, LaTeXEscaper
from markup_export.formatting.ir import StyleTable

TEMPLATE_LATEX = (
    f"% {{export_filename}} (LaTeX code generated by markup-export {__version__} "
    "on {export_date})\n"
    "\\documentclass[a4paper]{article}\n"
    "\\usepackage[a4paper,margin=2cm]{geometry}\n"
    "\\usepackage[utf8x]{inputenc}\n"
    "\\usepackage[T1]{fontenc}\n"
    "\\usepackage{color}\n"
    "\\setlength{\\parindent}{0em}\n"
    "\\setlength{\\parskip}{2ex plus1ex minus0.5ex}\n"
    "{export_styles}\n"
    "\\begin{document}\n"
    "\\ttfamily\n"
    "\\setlength{\\fboxrule}{0pt}\n"
    "\\setlength{\\fboxsep}{0pt}\n"
    "{export_content}"
    "\\end{document}\n"
)


def tex_style_name(index: int) -> str:
    """Encode a style index as letters, since macro names can't hold digits.

    Letters are base 26 digits (a = 0), computed least significant first
    and written most significant first: 0 -> "a", 25 -> "z", 26 -> "ba",
    27 -> "bb".
    """
    letters = []
    while True:
        letters.append(chr(ord("a") + index % 26))
        index //= 26
        if index == 0:
            break
    return "".join(reversed(letters))


class LaTeXRenderer(FormatRenderer):
    """Renderer for LaTeX documents with one \\style<name> macro per style."""

    @property
    def name(self) -> str:
        return "latex"

    @property
    def extension(self) -> str:
        return ".tex"

    @property
    def template(self) -> str:
        return TEMPLATE_LATEX

    def create_escaper(self, tab_width: int) -> CharacterEscaper:
        return LaTeXEscaper(tab_width)

    def style_token(self, index: int) -> str:
        return tex_style_name(index)

    def open_run(self, index: int) -> str:
        return f"\\style{self.style_token(index)}{{"

    def close_run(self, at_line_break: bool = False) -> str:
        return "}" if at_line_break else "}\n"

    def finalize_used(self, table: StyleTable) -> None:
        # line breaks sit outside any run but still need style 0 defined
        table.mark_used(0)

    def render_styles(self, table: StyleTable, font_family: str, font_size: int) -> str:
        """Render one \\newcommand per used style.

        The font is left to \\ttfamily, so font_family and font_size are
        not used.
        """
        commands = []
        for index in table.used_indices():
            style = table[index]
            parts = [f"\\newcommand{{\\style{self.style_token(index)}}}[1]{{\\noindent{{"]
            if style.bold:
                parts.append("\\textbf{")
            if style.italic:
                parts.append("\\textit{")
            parts.append(f"\\textcolor[rgb]{{{tex_rgb(style.foreground)}}}{{")
            parts.append(f"\\fcolorbox[rgb]{{0, 0, 0}}{{{tex_rgb(style.background)}}}{{")
            parts.append("#1}}")
            if style.bold:
                parts.append("}")
            if style.italic:
                parts.append("}")
            parts.append("}}\n")
            commands.append("".join(parts))
        return "".join(commands)
