"""RGBA colour value, uint32 packing, and marking colour parsing.

A colour packs into a single uint32 as R<<24 | G<<16 | B<<8 | A. Packing is
done arithmetically per channel, so it does not depend on the platform byte
order. Pillow stores RGBA pixels in R, G, B, A byte order, so a parsed
colour is written into a picture buffer component for component.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import numpy as np

from palette_checker.core.errors import ColourParseError

_HEX_RE = re.compile(r'^(?:#|0[xX])?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')


@dataclass(frozen=True)
class Colour:
    """A single RGBA colour, each component 0-255."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b', 'a'):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f'Colour component {name}={value} out of range 0-255')

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    @property
    def packed(self) -> int:
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}'

    @classmethod
    def from_packed(cls, value: int) -> Colour:
        value = int(value)
        return cls((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def parse_colour(text: str) -> Colour:
    """Parse a marking colour given as RRGGBB or RRGGBBAA hex.

    Case-insensitive, optional '#' or '0x' prefix. Six digits mean fully
    opaque. Raises ColourParseError for anything else.
    """
    m = _HEX_RE.match(text.strip())
    if not m:
        raise ColourParseError(
            f'Invalid marking colour {text!r}: expected RRGGBB or RRGGBBAA hex, e.g. FF0000 or FF0000FF'
        )
    digits = m.group(1)
    if len(digits) == 6:
        digits += 'ff'
    r, g, b, a = (int(digits[i : i + 2], 16) for i in (0, 2, 4, 6))
    return Colour(r, g, b, a)


def pack_pixels(pixels: np.ndarray) -> np.ndarray:
    """Pack an (..., 4) uint8 RGBA array into an (...) uint32 array."""
    if pixels.shape[-1:] != (4,):
        raise ValueError(f'Expected RGBA pixels with a trailing dimension of 4, got shape {pixels.shape}')
    px = pixels.astype(np.uint32)
    return (px[..., 0] << 24) | (px[..., 1] << 16) | (px[..., 2] << 8) | px[..., 3]
