"""
Gemtext-to-HTML line engine.

Classifies each gemtext line by its leading prefix and emits the matching
HTML fragment. Literal (preformatted) blocks are tracked with a two-state
mode so their contents pass through untouched.
"""

from enum import Enum


class LineCategory(Enum):
    """Syntactic category of a single gemtext line."""
    PLAIN_TEXT = "plain_text"
    FIRST_HEADER = "first_header"
    SECOND_HEADER = "second_header"
    THIRD_HEADER = "third_header"
    LIST_ITEM = "list_item"
    QUOTE = "quote"
    LINK = "link"
    LITERAL_BLOCK_DELIMITER = "literal_block_delimiter"


class Mode(Enum):
    """Transformation state carried from one line to the next."""
    NORMAL = "normal"
    INSIDE_LITERAL_BLOCK = "inside_literal_block"


# Tested top to bottom, first match wins.
PREFIX_PATTERNS = (
    ("# ", LineCategory.FIRST_HEADER),
    ("## ", LineCategory.SECOND_HEADER),
    ("### ", LineCategory.THIRD_HEADER),
    ("* ", LineCategory.LIST_ITEM),
    (">", LineCategory.QUOTE),
    ("=> ", LineCategory.LINK),
    ("```", LineCategory.LITERAL_BLOCK_DELIMITER),
)

_PREFIXES = {category: prefix for prefix, category in PREFIX_PATTERNS}

_WRAPPING_TAGS = {
    LineCategory.FIRST_HEADER: "h1",
    LineCategory.SECOND_HEADER: "h2",
    LineCategory.THIRD_HEADER: "h3",
    LineCategory.LIST_ITEM: "li",
    LineCategory.QUOTE: "blockquote",
}


def classify(line: str) -> LineCategory:
    """Return the category of the first prefix pattern matching ``line``."""
    for prefix, category in PREFIX_PATTERNS:
        if line.startswith(prefix):
            return category
    return LineCategory.PLAIN_TEXT


def strip_prefix(line: str, category: LineCategory) -> str:
    """Remove the category's prefix from ``line``."""
    prefix = _PREFIXES.get(category, "")
    return line[len(prefix):]


def render_link(line: str) -> str:
    """Render a "=> " line as an anchor, or as plain text if it has no name."""
    target = strip_prefix(line, LineCategory.LINK)
    href, sep, name = target.partition(" ")
    if not sep:
        return line + "\n"
    return f'<a href="{href}">{name}</a>\n'


def transform_line(mode: Mode, line: str) -> tuple[Mode, str]:
    """
    Transform one line under the given mode.

    Returns:
        The mode for the next line and the HTML fragment for this one.
    """
    category = classify(line)

    if mode == Mode.INSIDE_LITERAL_BLOCK:
        if category == LineCategory.LITERAL_BLOCK_DELIMITER:
            return Mode.NORMAL, "</pre>"
        return mode, line + "\n"

    if category == LineCategory.LITERAL_BLOCK_DELIMITER:
        return Mode.INSIDE_LITERAL_BLOCK, "<pre>" + strip_prefix(line, category) + "\n"
    if category == LineCategory.LINK:
        return mode, render_link(line)
    if category == LineCategory.PLAIN_TEXT:
        return mode, line + "\n"

    tag = _WRAPPING_TAGS[category]
    return mode, f"<{tag}>{strip_prefix(line, category)}</{tag}>\n"


def split_lines(document: str) -> list[str]:
    """Split on line feeds; a final terminator does not add an empty line."""
    lines = document.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def transform(document: str) -> str:
    """Convert a whole gemtext document to HTML."""
    mode = Mode.NORMAL
    fragments = []
    for line in split_lines(document):
        mode, fragment = transform_line(mode, line)
        fragments.append(fragment)
    # An unterminated literal block is left open.
    return "".join(fragments)
