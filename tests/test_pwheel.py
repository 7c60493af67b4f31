"""Tests for locating paints on the hue wheel."""

import math

import pytest

from epaint.bab import options
from epaint import perrors
from epaint import pmix
from epaint import pwheel


@pytest.fixture()
def red(ideal_series):
    return ideal_series.get_paint("Red")


class TestPaintXY:
    def test_chromatic(self, ideal_series):
        xy = pwheel.paint_xy(ideal_series.get_paint("Yellow"), "chroma")
        assert xy.x == pytest.approx(0.5)
        assert xy.y == pytest.approx(math.sqrt(3) / 2)

    def test_greys_are_outside_the_wheel(self, ideal_series):
        white = pwheel.paint_xy(ideal_series.get_paint("White"), "chroma")
        black = pwheel.paint_xy(ideal_series.get_paint("Black"), "value")
        assert white.x == pytest.approx(0.0)
        assert white.y == pytest.approx(2.1)
        assert black.y == pytest.approx(1.1)
        assert math.hypot(*black) > 1.0

    def test_red_to_yellow_clockwise(self, red):
        assert pwheel.paint_xy(red, "chroma") == (1.0, 0.0)
        options.set("colour_wheel", "red_to_yellow_clockwise", True)
        assert pwheel.paint_xy(red, "chroma") == (-1.0, 0.0)


class TestSpatialPaintIndex:
    def test_unknown_attribute(self):
        with pytest.raises(ValueError):
            pwheel.SpatialPaintIndex("hue")

    def test_add_and_remove(self, red):
        index = pwheel.SpatialPaintIndex()
        assert index.add(red) is True
        assert index.add(red) is False
        assert len(index) == 1
        assert red in index
        assert index.get_xy(red) == (1.0, 0.0)
        index.remove(red)
        assert red not in index
        with pytest.raises(perrors.NotFound):
            index.remove(red)
        with pytest.raises(perrors.NotFound):
            index.get_xy(red)

    def test_nearest_of_overlapping_paints(self, make_series_paint):
        bright = make_series_paint("Bright Red", (1.0, 0.0, 0.0))
        dull = make_series_paint("Dull Red", (0.98, 0.0, 0.0))
        index = pwheel.SpatialPaintIndex("chroma")
        index.add(bright)
        index.add(dull)
        paint, distance = index.query_near((0.995, 0.0))
        assert paint == bright
        assert distance == pytest.approx(0.005)
        paint, distance = index.query_near((0.985, 0.01))
        assert paint == dull
        assert distance == pytest.approx(math.hypot(0.005, 0.01))

    def test_miss(self, red):
        index = pwheel.SpatialPaintIndex()
        assert index.query_near((0.0, 0.0)) is None
        index.add(red)
        assert index.query_near((0.5, 0.5)) is None

    def test_tie_goes_to_first_added(self, make_series_paint):
        later_name = make_series_paint("Zed", (1.0, 0.0, 0.0))
        earlier_name = make_series_paint("Aye", (1.0, 0.0, 0.0))
        index = pwheel.SpatialPaintIndex()
        index.add(later_name)
        index.add(earlier_name)
        assert index.query_near((1.0, 0.01))[0] == later_name

    def test_mixed_paints_are_circles(self, red):
        mixed = pmix.MixedPaintCollection().add_paint("", [(red, 1)])
        corner = (1.025, 0.025)
        index = pwheel.SpatialPaintIndex()
        index.add(mixed)
        assert index.query_near(corner) is None
        assert index.query_near((1.02, 0.0))[0] == mixed
        index.add(red)
        assert index.query_near(corner)[0] == red

    def test_series_paints_before_mixed_paints(self, ideal_series, red):
        mixed = pmix.MixedPaintCollection().add_paint("", [(red, 1)])
        index = pwheel.SpatialPaintIndex()
        index.add(mixed)
        for paint in ideal_series:
            index.add(paint)
        paints = list(index)
        assert paints[-1] == mixed
        assert paints[:-1] == list(ideal_series)

    def test_set_attribute(self, red):
        index = pwheel.SpatialPaintIndex()
        index.add(red)
        index.set_attribute("value")
        assert index.attribute == "value"
        xy = index.get_xy(red)
        assert xy.x == pytest.approx(1.0 / 3.0)
        assert xy.y == pytest.approx(0.0)
        assert index.query_near((1.0, 0.0)) is None
        assert index.query_near((0.34, 0.0))[0] == red
        with pytest.raises(ValueError):
            index.set_attribute("hue")
