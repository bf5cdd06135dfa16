#!/usr/bin/env python3
"""
Markup Export - styled HTML and LaTeX exports of source files

Simple usage:
    python export.py script.py                  # Outputs script.html
    python export.py script.py --format latex   # Outputs script.tex
    python export.py /folder/path               # Exports all files in folder
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from markup_export.cli import app

if __name__ == "__main__":
    app()
