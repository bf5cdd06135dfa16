"""Markup Export - styled text to HTML and LaTeX documents."""

__version__ = "0.1.0"
