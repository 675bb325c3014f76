"""Layout engine: text wrapping, pagination and image placement."""

from .engine import LayoutEngine, LayoutResult, LayoutState, layout_document
from .flow import advance, ensure_room, needs_page_break, start_cursor
from .images import image_scale, layout_image
from .text import layout_paragraph, layout_run, select_font, wrap_words

__all__ = [
    "LayoutEngine",
    "LayoutResult",
    "LayoutState",
    "layout_document",
    "advance",
    "ensure_room",
    "needs_page_break",
    "start_cursor",
    "image_scale",
    "layout_image",
    "layout_paragraph",
    "layout_run",
    "select_font",
    "wrap_words",
]
