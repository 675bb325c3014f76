"""Document layer: content model, DOCX reading and PDF emission.

Exposes:
- Data model: Style, StyledRun, Paragraph, ImageAsset, PageGeometry, Cursor,
  FontVariant, FontSet, TextLine, ImagePlacement
- Reader: docx_io (paragraphs via python-docx, images from word/media/)
- Writer: pdf_io (reportlab canvas, atomic file write)
- Orchestration: pipeline.convert_document
"""

from .model import (
    Cursor,
    FontSet,
    FontVariant,
    ImageAsset,
    ImagePlacement,
    PageGeometry,
    Paragraph,
    PlacementCommand,
    Style,
    StyledRun,
    TextLine,
)

__all__ = [
    "Cursor",
    "FontSet",
    "FontVariant",
    "ImageAsset",
    "ImagePlacement",
    "PageGeometry",
    "Paragraph",
    "PlacementCommand",
    "Style",
    "StyledRun",
    "TextLine",
]
