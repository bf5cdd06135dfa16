"""Color conversion for export targets.

Source colors are packed 0xBBGGRR integers (red in the low byte).
"""


def rotate_rgb(color: int) -> int:
    """Swap the low and high bytes of a packed color.

    Turns 0xBBGGRR into 0xRRGGBB and back; the green byte stays put.
    """
    return ((color & 0xFF0000) >> 16) + (color & 0x00FF00) + ((color & 0x0000FF) << 16)


def split_channels(color: int) -> tuple[int, int, int]:
    """Return the (red, green, blue) channels of a packed 0xBBGGRR color."""
    return color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF


def html_color(color: int) -> str:
    """Format a packed 0xBBGGRR color as six lowercase hex digits (rrggbb)."""
    return f"{rotate_rgb(color):06x}"


def _tex_channel(channel: int) -> str:
    # round(channel / 256 * 10) half up, in integers so the separator is
    # always "." whatever the locale
    scaled = (channel * 10 + 128) // 256
    return f"{scaled // 10}.{scaled % 10}"


def tex_rgb(color: int) -> str:
    """Format a packed 0xBBGGRR color for \\textcolor[rgb]{...}.

    Each channel is scaled to 0.0-1.0 with one decimal digit, e.g.
    pure red becomes "1.0, 0.0, 0.0".
    """
    return ", ".join(_tex_channel(channel) for channel in split_channels(color))
