from __future__ import annotations

from typing import Tuple

from wordpdf.docs.model import Cursor, ImageAsset, ImagePlacement, PageGeometry
from wordpdf.layout.flow import advance, ensure_room


def image_scale(asset: ImageAsset, geometry: PageGeometry, fit_height: bool = False) -> float:
    """Millimetres per pixel so the image spans the printable width.

    Scale never depends on where the image lands. With ``fit_height`` an
    image taller than the printable area is shrunk further to fit it.
    """
    scale = geometry.printable_width_mm / asset.pixel_width
    if fit_height:
        scale = min(scale, geometry.printable_height_mm / asset.pixel_height)
    return scale


def layout_image(
    asset: ImageAsset,
    cursor: Cursor,
    geometry: PageGeometry,
    image_gap: float,
    fit_height: bool = False,
) -> Tuple[Cursor, ImagePlacement]:
    """Place one image below the cursor and return the advanced cursor.

    The placement's ``y_mm`` is the image's lower edge, its top edge sits
    at the cursor.
    """
    scale = image_scale(asset, geometry, fit_height)
    scaled_height = asset.pixel_height * scale
    cursor = ensure_room(cursor, scaled_height, geometry)
    placement = ImagePlacement(
        page_index=cursor.page_index,
        x_mm=geometry.margin_mm,
        y_mm=cursor.y_mm - scaled_height,
        scale=scale,
        asset_ref=asset.name,
    )
    return advance(cursor, scaled_height + image_gap), placement
