"""Image decoding helpers: raw container bytes to RGB pixel buffers.

These utilities decode with Pillow and hand the pixels on as numpy arrays.
"""

from __future__ import annotations

import io
import logging
from typing import List, Optional, Sequence

import numpy as np
from PIL import Image, UnidentifiedImageError

from wordpdf.docs.model import ImageAsset

logger = logging.getLogger(__name__)


def normalize_image(name: str, data: bytes) -> Optional[ImageAsset]:
    """Decode image bytes into an RGB ImageAsset.

    Doxygen:
    - @param name: Entry name inside the container (e.g. ``word/media/image1.png``).
    - @param data: Raw encoded image bytes.
    - @return: ImageAsset, or None if Pillow cannot decode the bytes.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            rgb = img.convert("RGB")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        logger.warning("Skipping undecodable image %s: %s", name, exc)
        return None
    pixels = np.asarray(rgb, dtype=np.uint8)
    height, width = pixels.shape[:2]
    return ImageAsset(name=name, pixel_width=int(width), pixel_height=int(height), pixels=pixels)


def is_placeable(asset: ImageAsset) -> bool:
    return asset.pixel_width > 0 and asset.pixel_height > 0


def placeable_images(assets: Sequence[ImageAsset]) -> List[ImageAsset]:
    """Drop images with a zero dimension before they reach the layout engine."""
    out: List[ImageAsset] = []
    for asset in assets:
        if is_placeable(asset):
            out.append(asset)
        else:
            logger.warning(
                "Skipping image %s with size %dx%d", asset.name, asset.pixel_width, asset.pixel_height
            )
    return out


def to_pil(asset: ImageAsset) -> Image.Image:
    return Image.fromarray(asset.pixels)
