"""Replace every picture pixel whose colour is not in the palette.

Membership is exact on all four components, alpha included. The picture
array is modified in place; only a temporary packed view and a boolean
mask are allocated.
"""

import numpy as np

from palette_checker.core.colour import Colour, pack_pixels
from palette_checker.core.colour_set import ColourSet


def _check_picture(picture: np.ndarray) -> None:
    if picture.ndim != 3 or picture.shape[2] != 4 or picture.dtype != np.uint8:
        raise ValueError(f'Expected an (H, W, 4) uint8 picture, got shape {picture.shape} dtype {picture.dtype}')


def apply(picture: np.ndarray, colour_set: ColourSet, marking: Colour) -> int:
    """Overwrite foreign pixels with the marking colour. Returns how many were replaced."""
    _check_picture(picture)
    if picture.size == 0:
        return 0
    foreign = ~colour_set.contains_packed(pack_pixels(picture))
    picture[foreign] = marking.rgba
    return int(np.count_nonzero(foreign))


def foreign_colours(picture: np.ndarray, colour_set: ColourSet) -> list[Colour]:
    """Distinct picture colours that are absent from the colour set."""
    _check_picture(picture)
    distinct = np.unique(pack_pixels(picture))
    missing = distinct[~colour_set.contains_packed(distinct)]
    return [Colour.from_packed(v) for v in missing]
