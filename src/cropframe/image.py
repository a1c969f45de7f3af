"""Image load adapter.

The core only needs an image's native pixel dimensions. Pillow reads them
from the file header without decoding pixel data.
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image, UnidentifiedImageError

from cropframe.exceptions import ImageSourceError
from cropframe.geometry import Size


def read_native_size(path: Path | str) -> Size:
    """Return the native (width, height) of an image file.

    Args:
        path: Path to any image format Pillow can identify.

    Returns:
        The image's native size.

    Raises:
        ImageSourceError: If the file is missing or not a readable image.
    """
    path = Path(path)
    try:
        with Image.open(path) as image:
            width, height = image.size
    except FileNotFoundError as e:
        raise ImageSourceError("Image file not found", path) from e
    except (UnidentifiedImageError, OSError) as e:
        raise ImageSourceError(f"Cannot read image: {e}", path) from e

    if width <= 0 or height <= 0:
        raise ImageSourceError(f"Image has empty dimensions {width}x{height}", path)
    return Size(width=width, height=height)
