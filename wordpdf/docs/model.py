from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

import numpy as np


@dataclass(frozen=True)
class Style:
    """Character attributes of a run; bold and italic combine freely."""

    bold: bool = False
    italic: bool = False


Style.REGULAR = Style()
Style.BOLD = Style(bold=True)
Style.ITALIC = Style(italic=True)
Style.BOLD_ITALIC = Style(bold=True, italic=True)


@dataclass(frozen=True)
class StyledRun:
    text: str
    style: Style = Style.REGULAR


@dataclass
class Paragraph:
    runs: List[StyledRun] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(r.text for r in self.runs)


@dataclass
class ImageAsset:
    """A decoded embedded image. ``pixels`` is an (height, width, 3) uint8 RGB array."""

    name: str
    pixel_width: int
    pixel_height: int
    pixels: np.ndarray = field(repr=False, compare=False)

    @property
    def pixel_bytes(self) -> bytes:
        return self.pixels.tobytes()


@dataclass(frozen=True)
class PageGeometry:
    width_mm: float
    height_mm: float
    margin_mm: float

    def __post_init__(self) -> None:
        if self.width_mm <= 2 * self.margin_mm or self.height_mm <= 2 * self.margin_mm:
            raise ValueError(
                f"Page {self.width_mm}x{self.height_mm}mm leaves no printable area "
                f"with a {self.margin_mm}mm margin."
            )

    @property
    def printable_width_mm(self) -> float:
        return self.width_mm - 2 * self.margin_mm

    @property
    def printable_height_mm(self) -> float:
        return self.height_mm - 2 * self.margin_mm

    @property
    def top_mm(self) -> float:
        """Baseline of the first line on a fresh page (PDF coordinates, bottom-up)."""
        return self.height_mm - self.margin_mm


@dataclass(frozen=True)
class Cursor:
    page_index: int
    y_mm: float


class FontVariant(str, Enum):
    REGULAR = "regular"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"


@dataclass(frozen=True)
class FontSet:
    """Font names per variant. Only ``regular`` is mandatory."""

    regular: str = "Helvetica"
    bold: Optional[str] = "Helvetica-Bold"
    italic: Optional[str] = "Helvetica-Oblique"
    bold_italic: Optional[str] = "Helvetica-BoldOblique"

    def has(self, variant: FontVariant) -> bool:
        return getattr(self, variant.value) is not None

    def name_for(self, variant: FontVariant) -> str:
        return getattr(self, variant.value) or self.regular


@dataclass(frozen=True)
class TextLine:
    page_index: int
    x_mm: float
    y_mm: float
    font_style: FontVariant
    text: str


@dataclass(frozen=True)
class ImagePlacement:
    page_index: int
    x_mm: float
    y_mm: float
    scale: float
    asset_ref: str


PlacementCommand = Union[TextLine, ImagePlacement]
