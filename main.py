"""
Entry point and compatibility facade for the DOCX → layout → PDF pipeline.

This module exposes a stable API and a CLI suitable for PyInstaller builds.

Packages:
- wordpdf.docs: Content model, DOCX reader, PDF emitter and `convert_document`
- wordpdf.image: Image decoding into RGB pixel buffers
- wordpdf.layout: Layout engine (wrapping, pagination, image placement)
"""

from __future__ import annotations

import logging
import sys

from wordpdf.config import ConverterSettings, configure_logging, load_settings
from wordpdf.errors import (
    ConversionError,
    EmitError,
    ExtractionError,
    InvalidInputError,
    ParseError,
)

# Content model and document IO
from wordpdf.docs.docx_io import extract_images, parse, read_docx, validate_input
from wordpdf.docs.pdf_io import emit, write_pdf

# Layout engine
from wordpdf.layout import LayoutEngine, layout_document

# High-level pipeline
from wordpdf.docs.pipeline import convert_document

__all__ = [
    # config
    "ConverterSettings",
    "configure_logging",
    "load_settings",
    # errors
    "ConversionError",
    "EmitError",
    "ExtractionError",
    "InvalidInputError",
    "ParseError",
    # document io
    "extract_images",
    "parse",
    "read_docx",
    "validate_input",
    "emit",
    "write_pdf",
    # layout
    "LayoutEngine",
    "layout_document",
    # pipeline
    "convert_document",
]

logger = logging.getLogger("wordpdf")


def _cli(argv=None) -> None:
    """CLI for DOCX to PDF conversion.

    input: Path to the input .docx document
    output: Path of the PDF to write (overwritten if present)
    --config / -c: JSON settings file (default: config/wordpdf.json if present)
    --log-level: Logging level (default: WORDPDF_LOG_LEVEL or info)
    """
    import argparse

    parser = argparse.ArgumentParser(description="Convert a DOCX document into a fixed-page PDF.")
    parser.add_argument("input", type=str, help="Path to input document (.docx)")
    parser.add_argument("output", type=str, help="Path to output PDF")
    parser.add_argument("--config", "-c", type=str, default=None, help="Path to JSON settings file")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (debug|info|warning|error)")

    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        settings = load_settings(args.config)
        result = convert_document(args.input, args.output, settings)
    except ConversionError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"{e.stage} failed: {e.message}", file=sys.stderr)
        raise SystemExit(1)

    print(f"Saved PDF to: {result['output_path']} ({result['pages']} pages)")


if __name__ == "__main__":
    _cli()
