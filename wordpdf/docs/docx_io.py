from __future__ import annotations

import io
import logging
import os
import zipfile
from typing import List, Tuple

from docx import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError

from wordpdf.errors import ExtractionError, InvalidInputError, ParseError
from wordpdf.image import normalize_image

from .model import ImageAsset, Paragraph, Style, StyledRun

logger = logging.getLogger(__name__)

DOCX_EXTENSION = ".docx"
MEDIA_PREFIX = "word/media/"


def validate_input(path: str) -> None:
    """Reject a missing file or one without the .docx extension."""
    if not os.path.isfile(path):
        raise InvalidInputError(f"File not found: {path}")
    if not path.lower().endswith(DOCX_EXTENSION):
        raise InvalidInputError(f"Not a {DOCX_EXTENSION} file: {path}")


def _run_style(run) -> Style:
    # python-docx reports None for inherited formatting; only explicit True counts
    return Style(bold=run.bold is True, italic=run.italic is True)


def parse(data: bytes) -> List[Paragraph]:
    """Parse DOCX bytes into body paragraphs of styled runs.

    Tables, headers and footers are not read.
    """
    try:
        docx = DocxDocument(io.BytesIO(data))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError, SyntaxError) as exc:
        raise ParseError(f"Could not parse document: {exc}") from exc

    paragraphs: List[Paragraph] = []
    for para in docx.paragraphs:
        runs = [StyledRun(text=run.text, style=_run_style(run)) for run in para.runs if run.text]
        paragraphs.append(Paragraph(runs=runs))
    return paragraphs


def extract_images(path: str) -> List[ImageAsset]:
    """Decode every image stored under word/media/ in archive order.

    Entries Pillow cannot decode (e.g. EMF/WMF) are skipped.
    """
    images: List[ImageAsset] = []
    try:
        with zipfile.ZipFile(path) as archive:
            for info in archive.infolist():
                if info.is_dir() or not info.filename.startswith(MEDIA_PREFIX):
                    continue
                asset = normalize_image(info.filename, archive.read(info))
                if asset is None:
                    continue
                logger.debug("Extracted image %s (%dx%d)", asset.name, asset.pixel_width, asset.pixel_height)
                images.append(asset)
    except (zipfile.BadZipFile, OSError) as exc:
        raise ExtractionError(f"Could not read images from {path}: {exc}") from exc
    return images


def read_docx(path: str) -> Tuple[List[Paragraph], List[ImageAsset]]:
    validate_input(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise ExtractionError(f"Could not read {path}: {exc}") from exc
    paragraphs = parse(data)
    images = extract_images(path)
    logger.info("Read %d paragraphs and %d images from %s", len(paragraphs), len(images), path)
    return paragraphs, images
