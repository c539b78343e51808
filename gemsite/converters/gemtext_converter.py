"""
Gemtext-to-HTML File Converter

Reads a .gmi document from disk, runs it through the line engine and
writes the resulting HTML next to it.
"""

import os
from pathlib import Path

from ..gemtext import transform


class GemtextConverter:
    """Converts gemtext files to HTML pages."""

    SUPPORTED_EXTENSIONS = {".gmi"}
    OUTPUT_EXTENSION = ".html"

    @staticmethod
    def can_handle(file_path: str | Path) -> bool:
        _, ext = os.path.splitext(str(file_path))
        return ext in GemtextConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def output_path(file_path: str | Path) -> Path:
        return Path(file_path).with_suffix(GemtextConverter.OUTPUT_EXTENSION)

    @staticmethod
    def convert(file_path: str | Path) -> str:
        """
        Read a gemtext file and return its HTML rendering.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: If the file exists but cannot be read.
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"Gemtext file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8", errors="replace", newline="") as f:
            text = f.read()

        # Only CRLF endings are folded; a lone CR stays inside its line.
        return transform(text.replace("\r\n", "\n"))

    @staticmethod
    def write(file_path: str | Path, html_text: str) -> Path:
        """
        Write ``html_text`` beside ``file_path`` and delete the source.

        The source is only removed once the HTML has been written.

        Returns:
            Path of the written HTML file.
        """
        out_path = GemtextConverter.output_path(file_path)
        with open(out_path, "w", encoding="utf-8", newline="") as f:
            f.write(html_text)
        os.remove(file_path)
        return out_path
