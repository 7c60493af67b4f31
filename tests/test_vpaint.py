"""Tests for colours, paint specifications and paint objects."""

import pytest

from epaint import pchar
from epaint import perrors
from epaint import rgbh
from epaint import vpaint

from conftest import MODEL_PAINT_LINE, TEST_SERIES_ID


class TestColour:
    def test_grey_has_no_hue(self):
        grey = vpaint.Colour.from_rgb(0.5, 0.5, 0.5)
        assert grey.hue is None
        assert grey.is_grey
        assert grey.chroma == 0.0
        assert grey.greyness == 1.0
        assert grey.value == 0.5
        assert grey.warmth == 0.0
        assert grey.max_chroma_rgb == rgbh.RGBPN.WHITE
        assert grey.monochrome_rgb == rgbh.RGBPN(0.5, 0.5, 0.5)

    def test_red(self):
        red = vpaint.Colour.from_rgb(1.0, 0.0, 0.0)
        assert red.hue == 0.0
        assert red.chroma == pytest.approx(1.0)
        assert red.greyness == pytest.approx(0.0)
        assert red.value == pytest.approx(1.0 / 3.0)
        assert red.warmth == 1.0
        assert red.warmth_rgb == rgbh.RGBPN.RED
        assert red.max_chroma_rgb == rgbh.RGBPN.RED

    def test_cyan_is_cold(self):
        cyan = vpaint.Colour.from_rgb(0.0, 1.0, 1.0)
        assert cyan.warmth == -1.0
        assert cyan.warmth_rgb == rgbh.RGBPN.CYAN

    def test_chroma_is_corrected_between_primaries(self):
        assert vpaint.Colour.from_rgb(1.0, 0.5, 0.0).chroma == pytest.approx(1.0)
        assert vpaint.Colour.from_rgb(0.5, 0.0, 0.0).chroma == pytest.approx(0.5)

    def test_chroma_independent_of_added_grey(self):
        tinted = vpaint.Colour.from_rgb(1.0, 0.5, 0.5)
        assert tinted.chroma == pytest.approx(0.5)
        assert tinted.hue == pytest.approx(0.0)

    def test_best_foreground(self):
        assert vpaint.Colour.from_rgb(1.0, 1.0, 1.0).best_foreground_rgb == rgbh.RGBPN.BLACK
        assert vpaint.Colour.from_rgb(0.0, 0.0, 0.0).best_foreground_rgb == rgbh.RGBPN.WHITE
        assert vpaint.Colour.from_rgb(0.5, 0.5, 0.5).best_foreground_rgb == rgbh.RGBPN.WHITE
        assert vpaint.Colour.from_rgb(1.0, 1.0, 0.0).best_foreground_rgb == rgbh.RGBPN.BLACK

    @pytest.mark.parametrize("rgb", [(1.1, 0.0, 0.0), (0.0, -0.1, 0.0), (float("nan"), 0.0, 0.0)])
    def test_out_of_range_rejected(self, rgb):
        with pytest.raises(ValueError):
            vpaint.Colour.from_rgb(*rgb)

    def test_equality_by_rgb(self):
        assert vpaint.Colour.from_rgb(1, 0, 0) == vpaint.Colour(rgbh.RGB16.RED)
        assert vpaint.Colour.from_rgb(1, 0, 0) != vpaint.Colour.from_rgb(0, 1, 0)
        assert len({vpaint.Colour(rgbh.RGBPN.RED), vpaint.Colour.from_rgb(1.0, 0.0, 0.0)}) == 1

    def test_display_order(self):
        grey = vpaint.Colour.from_rgb(0.5, 0.5, 0.5)
        black = vpaint.Colour.from_rgb(0.0, 0.0, 0.0)
        red = vpaint.Colour.from_rgb(1.0, 0.0, 0.0)
        dark_red = vpaint.Colour.from_rgb(0.5, 0.0, 0.0)
        green = vpaint.Colour.from_rgb(0.0, 1.0, 0.0)
        blue = vpaint.Colour.from_rgb(0.0, 0.0, 1.0)
        ordered = sorted([green, grey, red, blue, dark_red, black])
        assert ordered == [black, grey, blue, dark_red, red, green]

    def test_scalar_attribute(self):
        colour = vpaint.Colour.from_rgb(0.2, 0.4, 0.6)
        for attr in vpaint.SCALAR_ATTRIBUTES:
            assert colour.scalar_attribute(attr) == getattr(colour, attr)
        with pytest.raises(ValueError):
            colour.scalar_attribute("hue")

    def test_immutable(self):
        colour = vpaint.Colour.from_rgb(0.2, 0.4, 0.6)
        with pytest.raises(AttributeError):
            colour.value = 0.5


class TestBasicPaintSpec:
    def test_parse_model_paint(self):
        spec = vpaint.ModelPaintSpec.fm_spec_text(MODEL_PAINT_LINE)
        assert spec.name == "71.001 White"
        assert spec.notes == "FS37925 RAL9016 RLM21"
        assert spec.rgb.rgb16 == rgbh.RGB16(0xF800, 0xFA00, 0xF600)
        assert spec.characteristics.finish == pchar.Finish.FLAT
        assert spec.characteristics.transparency == pchar.Transparency.OPAQUE
        assert spec.characteristics.metallic == pchar.Metallic.NONMETALLIC
        assert spec.characteristics.fluorescence == pchar.Fluorescence.NONFLUORESCENT

    def test_serialize_is_exact_inverse_of_parse(self):
        assert vpaint.ModelPaintSpec.fm_spec_text(MODEL_PAINT_LINE).spec_text() == MODEL_PAINT_LINE

    def test_obsolete_format(self):
        text = 'NamedColour(name="XF 2: Flat White *", rgb=RGB16(0xF800, 0xFA00, 0xF600), transparency="O", finish="F")'
        spec = vpaint.ModelPaintSpec.fm_spec_text(text)
        assert spec.name == "XF 2: Flat White *"
        assert spec.notes == ""
        assert spec.characteristics.metallic == pchar.Metallic.NONMETALLIC
        assert spec.characteristics.fluorescence == pchar.Fluorescence.NONFLUORESCENT
        assert spec.rgb.rgb16 == rgbh.RGB16(0xF800, 0xFA00, 0xF600)

    def test_bare_name_and_unknown_keys(self):
        text = 'PaintSpec("Red", rgb=RGB(1.0, 0.0, 0.0), code="X7", finish="G", transparency="T", metallic="NM", fluorescence="NF")'
        spec = vpaint.ModelPaintSpec.fm_spec_text(text)
        assert spec.name == "Red"
        assert spec.rgb == rgbh.RGBPN.RED
        assert spec.characteristics.transparency == pchar.Transparency.TRANSPARENT

    def test_art_paint(self):
        text = 'ArtPaint(name="Black", rgb=RGB16(red=0x0, green=0x0, blue=0x0), transparency="O", permanence="A", notes="")'
        spec = vpaint.ArtPaintSpec.fm_spec_text(text)
        assert spec.characteristics.permanence == pchar.Permanence.PERMANENT
        assert spec.spec_text() == text

    def test_round_trip_with_quotes(self):
        chars = pchar.ArtPaintCharacteristics(transparency="SO", permanence="B")
        spec = vpaint.ArtPaintSpec(rgb=(0.1, 0.2, 0.3), name='The "Best" Blue', notes='He said "use thinly"', characteristics=chars)
        text = spec.spec_text()
        assert 'name="The \\"Best\\" Blue"' in text
        assert vpaint.ArtPaintSpec.fm_spec_text(text) == spec

    def test_round_trip_notes_that_look_like_fields(self):
        chars = pchar.ModelPaintCharacteristics(transparency="O", finish="F", metallic="NM", fluorescence="NF")
        spec = vpaint.ModelPaintSpec(rgb=rgbh.RGBPN(0.25, 0.5, 0.75), name="Odd", notes='see, finish="G" and rgb=RGB(1, 1, 1)', characteristics=chars)
        assert vpaint.ModelPaintSpec.fm_spec_text(spec.spec_text()) == spec

    def test_characteristics_from_mapping(self):
        spec = vpaint.ArtPaintSpec(rgb=rgbh.RGBPN.RED, name="Red", notes="", characteristics={"transparency": "O", "permanence": "C"})
        assert spec.characteristics.permanence == pchar.Permanence.FUGITIVE

    @pytest.mark.parametrize("text", [
        'ModelPaint(name="X")',
        'ModelPaint(name="X", rgb=RGB(2.0, 0, 0), transparency="O", finish="F")',
        'ModelPaint(name="X", rgb=RGB(1.0, 0, 0), transparency="O")',
        'ModelPaint(name="", rgb=RGB(1.0, 0, 0), transparency="O", finish="F")',
        'just some text',
    ])
    def test_malformed(self, text):
        with pytest.raises(perrors.MalformedText):
            vpaint.ModelPaintSpec.fm_spec_text(text)

    def test_invalid_construction(self):
        chars = pchar.ArtPaintCharacteristics(transparency="O", permanence="A")
        with pytest.raises(ValueError):
            vpaint.ArtPaintSpec(rgb=rgbh.RGBPN.RED, name="", notes="", characteristics=chars)
        with pytest.raises(ValueError):
            vpaint.ArtPaintSpec(rgb=rgbh.RGBPN.RED, name="Two\nLines", notes="", characteristics=chars)

    @pytest.mark.parametrize("separator", ["\n", "\r", "\r\n", "\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"])
    def test_line_breaks_rejected(self, separator):
        chars = pchar.ArtPaintCharacteristics(transparency="O", permanence="A")
        with pytest.raises(ValueError):
            vpaint.ArtPaintSpec(rgb=rgbh.RGBPN.RED, name="A" + separator + "B", notes="", characteristics=chars)
        with pytest.raises(ValueError):
            vpaint.ArtPaintSpec(rgb=rgbh.RGBPN.RED, name="A", notes="B" + separator, characteristics=chars)

    def test_is_single_line(self):
        assert vpaint.is_single_line("")
        assert vpaint.is_single_line("One line")
        assert not vpaint.is_single_line("trailing\r")


class TestPaints:
    def test_basic_paint_from_spec(self):
        spec = vpaint.ModelPaintSpec.fm_spec_text(MODEL_PAINT_LINE)
        paint = vpaint.BasicPaint.from_spec(spec)
        assert paint.name == spec.name
        assert paint.colour == vpaint.Colour(spec.rgb)
        # colour and characteristic attributes are delegated
        assert paint.value == paint.colour.value
        assert paint.finish == pchar.Finish.FLAT
        with pytest.raises(AttributeError):
            paint.no_such_attribute

    def test_series_paint_identity(self, make_series_paint):
        red = make_series_paint("Red", (1.0, 0.0, 0.0))
        red_again = make_series_paint("Red", (0.9, 0.0, 0.0))
        blue = make_series_paint("Blue", (0.0, 0.0, 1.0))
        assert red.id == (TEST_SERIES_ID, "Red")
        assert red == red_again
        assert hash(red) == hash(red_again)
        assert sorted([red, blue]) == [blue, red]
        assert red.hue == 0.0
        assert str(red) == "Red (Acme: Test Colours)"

    def test_target_colour(self):
        target = vpaint.TargetColour(" Sky ", (0.5, 0.7, 1.0), notes="Clear day")
        assert target.name == "Sky"
        assert target.notes == "Clear day"
        assert target.value == pytest.approx(0.7333333333)
        assert target < vpaint.TargetColour("Tree", vpaint.Colour.from_rgb(0.0, 0.5, 0.0))
