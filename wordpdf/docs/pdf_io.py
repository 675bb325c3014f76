from __future__ import annotations

import io
import logging
import os
import tempfile
from typing import Mapping, Sequence

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from wordpdf.errors import EmitError
from wordpdf.image import to_pil

from .model import FontSet, ImageAsset, ImagePlacement, PageGeometry, PlacementCommand, TextLine

logger = logging.getLogger(__name__)


def emit(
    commands: Sequence[PlacementCommand],
    geometry: PageGeometry,
    fonts: FontSet,
    images: Mapping[str, ImageAsset],
    font_size: float = 12.0,
    title: str = "Word to PDF",
) -> bytes:
    """Serialize placement commands into PDF bytes.

    Coordinates are taken as millimetres from the page's lower-left corner.
    The canvas is built with ``invariant=1`` so identical commands give
    identical bytes. Always produces at least one page.

    Doxygen:
    - @param commands: Placement commands ordered by non-decreasing page index.
    - @param geometry: Page size used for every page.
    - @param fonts: Font names for each font variant.
    - @param images: Decoded images keyed by ``ImagePlacement.asset_ref``.
    - @return: The PDF document as bytes.
    - @throws EmitError: On an unknown image reference or a reportlab failure.
    """
    buf = io.BytesIO()
    pdf = canvas.Canvas(buf, pagesize=(geometry.width_mm * mm, geometry.height_mm * mm), invariant=1)
    pdf.setTitle(title)
    page = 0
    try:
        for cmd in commands:
            while page < cmd.page_index:
                pdf.showPage()
                page += 1
            if isinstance(cmd, TextLine):
                pdf.setFont(fonts.name_for(cmd.font_style), font_size)
                pdf.drawString(cmd.x_mm * mm, cmd.y_mm * mm, cmd.text)
            elif isinstance(cmd, ImagePlacement):
                asset = images.get(cmd.asset_ref)
                if asset is None:
                    raise EmitError(f"Unknown image reference: {cmd.asset_ref}")
                pdf.drawImage(
                    ImageReader(to_pil(asset)),
                    cmd.x_mm * mm,
                    cmd.y_mm * mm,
                    width=asset.pixel_width * cmd.scale * mm,
                    height=asset.pixel_height * cmd.scale * mm,
                )
        pdf.showPage()
        pdf.save()
    except EmitError:
        raise
    except Exception as exc:
        raise EmitError(f"PDF serialization failed: {exc}") from exc
    logger.debug("Serialized %d commands on %d pages", len(commands), page + 1)
    return buf.getvalue()


def _default_mode() -> int:
    # mkstemp creates 0600 files; give the output the mode open() would
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_pdf(data: bytes, out_path: str) -> str:
    """Write ``data`` to ``out_path`` completely or not at all."""
    out_dir = os.path.dirname(os.path.abspath(out_path))
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".wordpdf-", suffix=".pdf", dir=out_dir)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_path, _default_mode())
        os.replace(tmp_path, out_path)
    except OSError as exc:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise EmitError(f"Could not write {out_path}: {exc}") from exc
    return out_path
