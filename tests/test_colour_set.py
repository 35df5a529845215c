"""Tests for palette_checker.core.colour_set: building and querying the palette colour set."""

import numpy as np
import pytest
from palette_checker.core.colour import Colour
from palette_checker.core.colour_set import ColourSet

RED = Colour(255, 0, 0)
GREEN = Colour(0, 255, 0)
BLUE = Colour(0, 0, 255)


def _pixels(colours: list[Colour], width: int) -> np.ndarray:
    arr = np.array([c.rgba for c in colours], dtype=np.uint8)
    return arr.reshape(-1, width, 4)


class TestBuild:
    def test_from_array(self):
        cs = ColourSet.build(_pixels([RED, GREEN, BLUE, RED], width=2))
        assert len(cs) == 3

    def test_duplicates_collapse(self):
        cs = ColourSet.build(_pixels([RED] * 9, width=3))
        assert len(cs) == 1

    def test_from_colours(self):
        cs = ColourSet.build([RED, GREEN, GREEN])
        assert len(cs) == 2
        assert GREEN in cs

    def test_empty_array(self):
        cs = ColourSet.build(np.zeros((0, 0, 4), dtype=np.uint8))
        assert len(cs) == 0
        assert not cs.contains(RED)

    def test_empty_iterable(self):
        assert len(ColourSet.build([])) == 0

    def test_flat_pixel_list(self):
        cs = ColourSet.build(np.array([RED.rgba, BLUE.rgba], dtype=np.uint8))
        assert cs.contains(BLUE)

    def test_rejects_non_rgba(self):
        with pytest.raises(ValueError):
            ColourSet.build(np.zeros((2, 2, 3), dtype=np.uint8))


class TestContains:
    def test_inserted_colours_found(self):
        colours = [Colour(r, g, 0, a) for r in (0, 128, 255) for g in (1, 2) for a in (0, 255)]
        cs = ColourSet.build(colours)
        for c in colours:
            assert cs.contains(c)

    def test_absent_colour(self):
        cs = ColourSet.build([RED, GREEN])
        assert not cs.contains(BLUE)

    def test_alpha_is_significant(self):
        cs = ColourSet.build([RED])
        assert not cs.contains(Colour(255, 0, 0, 254))

    def test_larger_than_every_member(self):
        cs = ColourSet.build([Colour(0, 0, 0, 0)])
        assert not cs.contains(Colour(255, 255, 255, 255))

    def test_in_operator_other_types(self):
        cs = ColourSet.build([RED])
        assert (255, 0, 0, 255) not in cs

    def test_contains_packed(self):
        cs = ColourSet.build([RED, BLUE])
        packed = np.array([[RED.packed, GREEN.packed], [BLUE.packed, 0]], dtype=np.uint32)
        result = cs.contains_packed(packed)
        assert result.shape == (2, 2)
        assert result.tolist() == [[True, False], [True, False]]


class TestIteration:
    def test_sorted_by_packed_value(self):
        cs = ColourSet.build([RED, BLUE, GREEN])
        assert list(cs) == [BLUE, GREEN, RED]

    def test_repr(self):
        assert repr(ColourSet.build([RED, GREEN])) == 'ColourSet(2 colours)'
