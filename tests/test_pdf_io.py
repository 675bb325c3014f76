import os
import re
import stat

import pytest

from wordpdf.docs.model import FontSet, FontVariant, ImagePlacement, TextLine
from wordpdf.docs.pdf_io import emit, write_pdf
from wordpdf.errors import EmitError

from conftest import make_asset


def _page_count(data: bytes) -> int:
    return len(re.findall(rb"/Type /Page\b", data))


def _commands():
    return [
        TextLine(0, 20.0, 277.0, FontVariant.REGULAR, "Hello world "),
        TextLine(0, 20.0, 265.0, FontVariant.BOLD_ITALIC, "styled "),
        TextLine(1, 20.0, 277.0, FontVariant.ITALIC, "next page "),
        ImagePlacement(1, 20.0, 137.5, 0.425, "word/media/image1.png"),
    ]


def test_emit_produces_pdf_pages(a4):
    images = {"word/media/image1.png": make_asset(400, 300)}
    data = emit(_commands(), a4, FontSet(), images)
    assert data.startswith(b"%PDF")
    assert _page_count(data) == 2


def test_emit_empty_document_has_one_page(a4):
    data = emit([], a4, FontSet(), {})
    assert _page_count(data) == 1


def test_emit_is_byte_identical(a4):
    images = {"word/media/image1.png": make_asset(400, 300)}
    assert emit(_commands(), a4, FontSet(), images) == emit(_commands(), a4, FontSet(), images)


def test_emit_unknown_image(a4):
    with pytest.raises(EmitError):
        emit(_commands(), a4, FontSet(), {})


def test_emit_unknown_font(a4):
    with pytest.raises(EmitError):
        emit(_commands()[:1], a4, FontSet(regular="NoSuchFont"), {})


def test_write_pdf_overwrites(tmp_path):
    out = tmp_path / "out.pdf"
    out.write_bytes(b"old")
    write_pdf(b"%PDF-new", str(out))
    assert out.read_bytes() == b"%PDF-new"
    assert [p.name for p in tmp_path.iterdir()] == ["out.pdf"]


def test_write_pdf_missing_directory(tmp_path):
    out = tmp_path / "nope" / "out.pdf"
    with pytest.raises(EmitError):
        write_pdf(b"%PDF", str(out))
    assert not out.exists()


@pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
def test_write_pdf_honours_umask(tmp_path):
    umask = os.umask(0o022)
    try:
        out = tmp_path / "mode.pdf"
        write_pdf(b"%PDF", str(out))
    finally:
        os.umask(umask)
    assert stat.S_IMODE(out.stat().st_mode) == 0o644
