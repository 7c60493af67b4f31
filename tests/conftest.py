"""Shared fixtures for the paint model tests.

- sample paint collection texts
- factories for series and mixed paints
- user options reset around every test
"""

import pytest

from epaint.bab import options
from epaint import pchar
from epaint import pseries
from epaint import vpaint

MODEL_PAINT_LINE = 'ModelPaint(name="71.001 White", rgb=RGB16(red=0xF800, green=0xFA00, blue=0xF600), transparency="O", finish="F", metallic="NM", fluorescence="NF", notes="FS37925 RAL9016 RLM21")'

OBSOLETE_SERIES_TEXT = """Manufacturer: Tamiya
Series: Flat Acrylic (Peter Williams Digital Samples #3)
NamedColour(name="XF 1: Flat Black *", rgb=RGB(0x2D00, 0x2B00, 0x3000), transparency="O", finish="F")
NamedColour(name="XF 2: Flat White *", rgb=RGB(0xFE00, 0xFE00, 0xFE00), transparency="O", finish="F")
NamedColour(name="XF 3: Flat Yellow *", rgb=RGB(0xF800, 0xCD00, 0x2900), transparency="O", finish="F")
NamedColour(name="XF 4: Yellow Green *", rgb=RGB(0xAA00, 0xAE00, 0x4000), transparency="O", finish="F")
"""

STANDARD_TEXT = """Sponsor: Federal Government
Standard: FS 595C
ModelPaint(name="FS 37925", rgb=RGB16(red=0xF800, green=0xFA00, blue=0xF600), transparency="O", finish="F", metallic="NM", fluorescence="NF", notes="Insignia White")
ModelPaint(name="FS 37038", rgb=RGB16(red=0x2D00, green=0x2B00, blue=0x3000), transparency="O", finish="F", metallic="NM", fluorescence="NF", notes="Black")
"""

TEST_SERIES_ID = pseries.PaintSeriesId("Acme", "Test Colours")


@pytest.fixture(autouse=True)
def fresh_options():
    options.reset()
    yield
    options.reset()


@pytest.fixture()
def ideal_series():
    return pseries.ideal_model_paint_series()


@pytest.fixture()
def make_series_paint():
    """Factory for series paints with chosen colour and characteristics."""
    def _make(name, rgb, colln_id=TEST_SERIES_ID, transparency="O", finish="G", metallic="NM", fluorescence="NF", notes=""):
        characteristics = pchar.ModelPaintCharacteristics(
            transparency=transparency,
            finish=finish,
            metallic=metallic,
            fluorescence=fluorescence,
        )
        paint = vpaint.BasicPaint(name, vpaint.Colour(rgb), notes, characteristics)
        return vpaint.SeriesPaint(colln_id, paint)
    return _make
