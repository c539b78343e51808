"""
gemsite - Gemtext Static Site Generator

Copies a directory tree and turns every gemtext (.gmi) document in it
into an HTML page, leaving all other files exactly as they were.
"""

__version__ = "1.0.0"
