"""
Table Cell Renderer for Markdown Preview Parser

Turns the raw text of a single table cell into an HTML fragment. The only
inline construct recognized here is the backtick code span; everything else
is escaped and emitted as plain text.
"""

from typing import List

# `&` must come first so the other replacements are not escaped twice
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

BACKTICK_ENTITY = "&#96;"


def escape_html(text: str) -> str:
    """Escape &, <, >, double and single quotes."""
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def render_cell_html(text: str) -> str:
    """
    Render table cell text to HTML.

    A backtick opens a code span and the next backtick closes it; the span
    content is wrapped in <code>. A span left open at the end of the text is
    not a code span: it is emitted as a literal backtick followed by the
    escaped remainder.

    Args:
        text: Raw cell text

    Returns:
        Escaped HTML fragment
    """
    parts: List[str] = []
    plain: List[str] = []
    code: List[str] = []
    in_code = False

    for char in text:
        if char == "`":
            if in_code:
                parts.append(f"<code>{escape_html(''.join(code))}</code>")
                code.clear()
            else:
                parts.append(escape_html("".join(plain)))
                plain.clear()
            in_code = not in_code
        elif in_code:
            code.append(char)
        else:
            plain.append(char)

    if in_code:
        parts.append(BACKTICK_ENTITY + escape_html("".join(code)))
    else:
        parts.append(escape_html("".join(plain)))

    return "".join(parts)
