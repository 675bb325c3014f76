"""Vertical flow and page breaks.

The cursor runs bottom-up in PDF coordinates: a fresh page starts at
``height - margin`` and content moves towards ``margin``.
"""

from __future__ import annotations

import logging

from wordpdf.docs.model import Cursor, PageGeometry

logger = logging.getLogger(__name__)


def start_cursor(geometry: PageGeometry) -> Cursor:
    return Cursor(page_index=0, y_mm=geometry.top_mm)


def is_fresh_page(cursor: Cursor, geometry: PageGeometry) -> bool:
    return cursor.y_mm >= geometry.top_mm


def needs_page_break(cursor: Cursor, height: float, geometry: PageGeometry) -> bool:
    """True if an item of ``height`` at the cursor would cross the bottom margin.

    A page that has not received anything yet never breaks, so an item
    taller than the printable area lands on the current page instead of
    producing blank pages. For such an item the page index does not step
    by one when it crosses the margin; every other item breaks exactly once.
    """
    if is_fresh_page(cursor, geometry):
        return False
    return cursor.y_mm - height < geometry.margin_mm


def ensure_room(cursor: Cursor, height: float, geometry: PageGeometry) -> Cursor:
    """Return a cursor where an item of ``height`` fits, breaking the page if needed.

    Must be called before emitting the item.
    """
    if not needs_page_break(cursor, height, geometry):
        return cursor
    logger.debug("Page break after page %d at y=%.2fmm", cursor.page_index, cursor.y_mm)
    return Cursor(page_index=cursor.page_index + 1, y_mm=geometry.top_mm)


def advance(cursor: Cursor, distance: float) -> Cursor:
    return Cursor(page_index=cursor.page_index, y_mm=cursor.y_mm - distance)
