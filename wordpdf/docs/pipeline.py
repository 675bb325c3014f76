from __future__ import annotations

import logging
from typing import Dict, Optional

from wordpdf.config import ConverterSettings
from wordpdf.image import placeable_images
from wordpdf.layout import layout_document

from .docx_io import read_docx
from .pdf_io import emit, write_pdf

logger = logging.getLogger(__name__)


def convert_document(
    input_path: str,
    output_path: str,
    settings: Optional[ConverterSettings] = None,
) -> Dict[str, object]:
    """High-level pipeline: read DOCX → lay out → emit PDF → write.

    Any failure raises a ``ConversionError`` subclass naming the stage; the
    output file is only replaced once the whole PDF has been serialized.
    """
    settings = settings or ConverterSettings()
    geometry = settings.geometry()
    fonts = settings.fonts()

    logger.info("Starting conversion from %s to %s", input_path, output_path)

    # 1) Read into the content model
    paragraphs, images = read_docx(input_path)
    images = placeable_images(images)

    # 2) Lay out
    result = layout_document(
        paragraphs,
        images,
        geometry,
        fonts=fonts,
        wrap_width=settings.wrap_width,
        line_height=settings.line_height_mm,
        image_gap=settings.image_gap_mm,
        fit_image_height=settings.fit_image_height,
    )

    # 3) Serialize and write
    data = emit(
        result.commands,
        geometry,
        fonts,
        {img.name: img for img in images},
        font_size=settings.font_size_pt,
        title=settings.title,
    )
    write_pdf(data, output_path)

    logger.info("Conversion completed successfully: %s (%d pages)", output_path, result.page_count)
    return {
        "output_path": output_path,
        "pages": result.page_count,
        "paragraphs": len(paragraphs),
        "images": len(images),
    }
