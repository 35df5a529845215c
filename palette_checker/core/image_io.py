"""Image I/O adapter over Pillow.

Decodes any Pillow-readable file to an (H, W, 4) uint8 RGBA array (missing
channels are synthesised by Pillow, alpha = 255) and encodes such an array
back to PNG. Pillow's origin is top-left, matching the row-major layout the
filter assumes, so rows are only flipped when asked to. The flip is applied
on both load and save, so it never changes the written result.
"""

import numpy as np
from PIL import Image, UnidentifiedImageError

from palette_checker.core.errors import (
    ImageDecodeError,
    OutputEncodeError,
    PaletteDecodeError,
    PictureDecodeError,
)


def _load_rgba(path: str, error: type[ImageDecodeError], flip: bool) -> np.ndarray:
    try:
        with Image.open(path) as img:
            rgba = img.convert('RGBA')
    except FileNotFoundError as e:
        raise error(path, 'file not found') from e
    except UnidentifiedImageError as e:
        raise error(path, 'unrecognised format') from e
    except Image.DecompressionBombError as e:
        raise error(path, str(e)) from e
    except OSError as e:
        raise error(path, str(e)) from e

    arr = np.array(rgba, dtype=np.uint8)
    if flip:
        arr = np.ascontiguousarray(arr[::-1])
    return arr


def load_palette(path: str, flip: bool = False) -> np.ndarray:
    """Decode the palette image. Raises PaletteDecodeError."""
    return _load_rgba(path, PaletteDecodeError, flip)


def load_picture(path: str, flip: bool = False) -> np.ndarray:
    """Decode the picture image. Raises PictureDecodeError."""
    return _load_rgba(path, PictureDecodeError, flip)


def save_png(path: str, picture: np.ndarray, flip: bool = False) -> None:
    """Encode an (H, W, 4) uint8 array as an RGBA PNG. Raises OutputEncodeError."""
    if flip:
        picture = picture[::-1]
    try:
        Image.fromarray(np.ascontiguousarray(picture, dtype=np.uint8)).save(path, format='PNG')
    except (OSError, ValueError) as e:
        raise OutputEncodeError(path, str(e)) from e
