"""Layout engine: paragraphs and images in, page-relative placement commands out.

All paragraphs are laid out first, then all images in extraction order,
continuing on the last page used by text. The engine never fails on
well-formed input and never touches output bytes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from wordpdf.docs.model import (
    Cursor,
    FontSet,
    ImageAsset,
    PageGeometry,
    Paragraph,
    PlacementCommand,
)
from wordpdf.layout.flow import start_cursor
from wordpdf.layout.images import layout_image
from wordpdf.layout.text import layout_paragraph

logger = logging.getLogger(__name__)


class LayoutState(str, Enum):
    IDLE = "idle"
    PARAGRAPHS = "laying_out_paragraphs"
    IMAGES = "laying_out_images"
    DONE = "done"


@dataclass
class LayoutResult:
    commands: List[PlacementCommand] = field(default_factory=list)
    page_count: int = 1

    def pages(self) -> Dict[int, List[PlacementCommand]]:
        """Commands grouped by page index, in emission order."""
        out: Dict[int, List[PlacementCommand]] = {i: [] for i in range(self.page_count)}
        for cmd in self.commands:
            out[cmd.page_index].append(cmd)
        return out


class LayoutEngine:
    """Single-use layout run over one document.

    The cursor is threaded explicitly through the text and image layout
    functions; the engine only keeps the latest value.
    """

    def __init__(
        self,
        geometry: PageGeometry,
        fonts: Optional[FontSet] = None,
        wrap_width: int = 80,
        line_height: float = 12.0,
        image_gap: float = 10.0,
        fit_image_height: bool = False,
    ) -> None:
        self.geometry = geometry
        self.fonts = fonts or FontSet()
        self.wrap_width = wrap_width
        self.line_height = line_height
        self.image_gap = image_gap
        self.fit_image_height = fit_image_height
        self.state = LayoutState.IDLE
        self.cursor: Cursor = start_cursor(geometry)

    def run(self, paragraphs: Sequence[Paragraph], images: Sequence[ImageAsset]) -> LayoutResult:
        if self.state is not LayoutState.IDLE:
            raise RuntimeError(f"LayoutEngine already used (state={self.state.value})")
        commands: List[PlacementCommand] = []

        self.state = LayoutState.PARAGRAPHS
        for para in paragraphs:
            self.cursor, lines = layout_paragraph(
                para, self.cursor, self.geometry, self.fonts, self.wrap_width, self.line_height
            )
            commands.extend(lines)

        self.state = LayoutState.IMAGES
        for asset in images:
            self.cursor, placement = layout_image(
                asset, self.cursor, self.geometry, self.image_gap, self.fit_image_height
            )
            commands.append(placement)

        self.state = LayoutState.DONE
        page_count = commands[-1].page_index + 1 if commands else 1
        logger.info(
            "Laid out %d paragraphs and %d images into %d commands on %d pages",
            len(paragraphs), len(images), len(commands), page_count,
        )
        return LayoutResult(commands=commands, page_count=page_count)


def layout_document(
    paragraphs: Sequence[Paragraph],
    images: Sequence[ImageAsset],
    geometry: PageGeometry,
    fonts: Optional[FontSet] = None,
    wrap_width: int = 80,
    line_height: float = 12.0,
    image_gap: float = 10.0,
    fit_image_height: bool = False,
) -> LayoutResult:
    engine = LayoutEngine(geometry, fonts, wrap_width, line_height, image_gap, fit_image_height)
    return engine.run(paragraphs, images)
