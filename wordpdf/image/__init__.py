"""Image decoding into RGB pixel buffers."""

from .processing import (
    is_placeable,
    normalize_image,
    placeable_images,
    to_pil,
)

__all__ = [
    "is_placeable",
    "normalize_image",
    "placeable_images",
    "to_pil",
]
