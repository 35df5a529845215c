"""Set of distinct colours taken from a palette image.

Built once from the palette's pixels, then queried for every picture pixel.
Backed by a sorted numpy array of packed colours: single lookups are a
binary search, whole-picture lookups go through np.isin.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from palette_checker.core.colour import Colour, pack_pixels


class ColourSet:
    """Read-only set of RGBA colours."""

    def __init__(self, packed: np.ndarray):
        # Sorted, distinct uint32 values
        self._packed = packed

    @classmethod
    def build(cls, palette: np.ndarray | Iterable[Colour]) -> ColourSet:
        """Collect the distinct colours of a palette.

        Accepts an (..., 4) uint8 pixel array of any leading shape, or an
        iterable of Colour. An empty palette gives an empty set.
        """
        if isinstance(palette, np.ndarray):
            packed = pack_pixels(palette).ravel()
        else:
            packed = np.array([c.packed for c in palette], dtype=np.uint32)
        return cls(np.unique(packed))

    def contains(self, colour: Colour) -> bool:
        value = colour.packed
        idx = int(np.searchsorted(self._packed, value))
        return idx < len(self._packed) and int(self._packed[idx]) == value

    def contains_packed(self, packed: np.ndarray) -> np.ndarray:
        """Vectorised membership: bool array shaped like `packed`."""
        return np.isin(packed, self._packed, assume_unique=False)

    def __contains__(self, colour: object) -> bool:
        return isinstance(colour, Colour) and self.contains(colour)

    def __len__(self) -> int:
        return len(self._packed)

    def __iter__(self) -> Iterator[Colour]:
        for value in self._packed:
            yield Colour.from_packed(value)

    def __repr__(self) -> str:
        return f'ColourSet({len(self)} colours)'
