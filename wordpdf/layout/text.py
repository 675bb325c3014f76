"""Text flow: font selection and character-count word wrapping.

Wrapping is by character count against a fixed budget ``W`` rather than by
measured glyph width. Swapping in font metrics would only change
``_fits`` and leave the line/cursor bookkeeping untouched.
"""

from __future__ import annotations

from typing import List, Tuple

from wordpdf.docs.model import (
    Cursor,
    FontSet,
    FontVariant,
    PageGeometry,
    Paragraph,
    Style,
    StyledRun,
    TextLine,
)
from wordpdf.layout.flow import advance, ensure_room


def select_font(style: Style, fonts: FontSet) -> FontVariant:
    """Pick the font variant for a run style.

    Exact match first; a bold+italic run whose combined variant is missing
    falls back to bold, then italic. Anything missing ends at regular.
    """
    if style.bold and style.italic:
        candidates = [FontVariant.BOLD_ITALIC, FontVariant.BOLD, FontVariant.ITALIC]
    elif style.bold:
        candidates = [FontVariant.BOLD]
    elif style.italic:
        candidates = [FontVariant.ITALIC]
    else:
        candidates = []
    for variant in candidates:
        if fonts.has(variant):
            return variant
    return FontVariant.REGULAR


def _fits(line: str, word: str, wrap_width: int) -> bool:
    return len(line) + len(word) < wrap_width


def wrap_words(text: str, wrap_width: int) -> List[str]:
    """Split ``text`` on whitespace and pack words into lines.

    Each line keeps a trailing space after its last word. A word that is
    longer than the budget gets a line of its own and is never split.
    """
    lines: List[str] = []
    cur = ""
    for word in text.split():
        if cur and not _fits(cur, word, wrap_width):
            lines.append(cur)
            cur = ""
        cur += word + " "
    if cur:
        lines.append(cur)
    return lines


def layout_run(
    run: StyledRun,
    cursor: Cursor,
    geometry: PageGeometry,
    fonts: FontSet,
    wrap_width: int,
    line_height: float,
) -> Tuple[Cursor, List[TextLine]]:
    """Emit the lines of one run starting at ``cursor``.

    Every line but the last advances the cursor by ``line_height``. The last
    line is emitted in place and the cursor is returned pointing at it; the
    caller moves past it.
    """
    font = select_font(run.style, fonts)
    lines = wrap_words(run.text, wrap_width)
    out: List[TextLine] = []
    for idx, text in enumerate(lines):
        cursor = ensure_room(cursor, line_height, geometry)
        out.append(TextLine(cursor.page_index, geometry.margin_mm, cursor.y_mm, font, text))
        if idx < len(lines) - 1:
            cursor = advance(cursor, line_height)
    return cursor, out


def layout_paragraph(
    paragraph: Paragraph,
    cursor: Cursor,
    geometry: PageGeometry,
    fonts: FontSet,
    wrap_width: int,
    line_height: float,
) -> Tuple[Cursor, List[TextLine]]:
    """Lay out all runs of a paragraph, then leave one blank line after it."""
    out: List[TextLine] = []
    for run in paragraph.runs:
        cursor, lines = layout_run(run, cursor, geometry, fonts, wrap_width, line_height)
        if lines:
            cursor = advance(cursor, line_height)
        out.extend(lines)
    return advance(cursor, line_height), out
