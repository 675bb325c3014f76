import io

import numpy as np
import pytest
from docx import Document as DocxDocument
from PIL import Image

from wordpdf.docs.model import ImageAsset, PageGeometry


def png_bytes(width: int, height: int, mode: str = "RGB") -> bytes:
    img = Image.new(mode, (width, height))
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def make_asset(width: int, height: int, name: str = "word/media/image1.png") -> ImageAsset:
    pixels = np.full((height, width, 3), 200, dtype=np.uint8)
    return ImageAsset(name=name, pixel_width=width, pixel_height=height, pixels=pixels)


@pytest.fixture
def a4():
    return PageGeometry(210.0, 297.0, 20.0)


@pytest.fixture
def sample_docx(tmp_path):
    """A small document: two paragraphs (one with mixed styles) and one picture."""
    d = DocxDocument()
    d.add_paragraph("Hello world")
    p = d.add_paragraph()
    p.add_run("plain ")
    p.add_run("bold").bold = True
    r = p.add_run(" both")
    r.bold = True
    r.italic = True
    d.add_picture(io.BytesIO(png_bytes(40, 30)))
    path = tmp_path / "sample.docx"
    d.save(str(path))
    return path
