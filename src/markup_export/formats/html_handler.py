"""HTML export renderer."""

from markup_export import __version__
from markup_export.formats.base import FormatRenderer
from markup_export.formatting.colors import html_color
from markup_export.formatting.escaper import CharacterEscaper, HTMLEscaper
from markup_export.formatting.ir import StyleTable
from markup_export.formatting.template import DATE_FORMAT_HTML

TEMPLATE_HTML = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN"\n'
    '  "http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">\n'
    '<html xmlns="http://www.w3.org/1999/xhtml" xml:lang="en" lang="en">\n'
    "\n"
    "<head>\n"
    "\t<title>{export_filename}</title>\n"
    '\t<meta http-equiv="content-type" content="text/html;charset=utf-8" />\n'
    f'\t<meta name="generator" content="markup-export {__version__}" />\n'
    '\t<meta name="date" content="{export_date}">\n'
    '\t<style type="text/css">\n'
    "{export_styles}\n"
    "\t</style>\n"
    "</head>\n"
    "\n"
    "<body>\n"
    "<p>\n"
    "{export_content}\n"
    "</p>\n"
    "</body>\n"
    "</html>\n"
)


class HTMLRenderer(FormatRenderer):
    """Renderer for XHTML documents styled with a CSS class per style.

    Whitespace never opens a span, which keeps runs of spaces from being
    wrapped in their own span every time the style changes.
    """

    absorbs_whitespace = True
    supports_zoom = True
    date_format = DATE_FORMAT_HTML

    @property
    def name(self) -> str:
        return "html"

    @property
    def extension(self) -> str:
        return ".html"

    @property
    def template(self) -> str:
        return TEMPLATE_HTML

    def create_escaper(self, tab_width: int) -> CharacterEscaper:
        return HTMLEscaper(tab_width)

    def style_token(self, index: int) -> str:
        return f"style_{index}"

    def open_run(self, index: int) -> str:
        return f'<span class="{self.style_token(index)}">'

    def close_run(self, at_line_break: bool = False) -> str:
        return "</span>"

    def render_styles(self, table: StyleTable, font_family: str, font_size: int) -> str:
        """Render the body font rule and one CSS rule per used style."""
        rules = [
            "\tbody\n\t{\n"
            f"\t\tfont-family: {font_family}, monospace;\n"
            f"\t\tfont-size: {font_size}pt;\n"
            "\t}\n"
        ]
        for index in table.used_indices():
            style = table[index]
            rule = (
                f"\t.{self.style_token(index)}\n\t{{\n"
                f"\t\tcolor: #{html_color(style.foreground)};\n"
                f"\t\tbackground-color: #{html_color(style.background)};\n"
            )
            if style.bold:
                rule += "\t\tfont-weight: bold;\n"
            if style.italic:
                rule += "\t\tfont-style: italic;\n"
            rules.append(rule + "\t}\n")
        return "".join(rules)
