"""OpenType preview tests: build the OTF, then shape text with HarfBuzz."""

import pytest
import uharfbuzz as hb
from fontTools.ttLib import TTFont

from picofont import ORIGINAL
from picofont.otf import bitmap_to_rectangles, build_otf, check_otf_metadata, glyph_name_for

METADATA = {
    "font_name": "Picofont Test",
    "version": 1.0,
    "units_per_em": 600,
    "pixel_size": 100,
    "ascender": 500,
    "descender": -100,
    "copyright": "© picofont contributors",
}


@pytest.fixture(scope="module")
def otf_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("otf") / "PicofontTest.otf"
    build_otf(ORIGINAL, path, METADATA)
    return path


def shape(path, text):
    blob = hb.Blob.from_file_path(str(path))
    font = hb.Font(hb.Face(blob))
    buf = hb.Buffer()
    buf.add_str(text)
    buf.guess_segment_properties()
    hb.shape(font, buf)
    names = [font.glyph_to_string(info.codepoint) for info in buf.glyph_infos]
    advances = [pos.x_advance for pos in buf.glyph_positions]
    return names, advances


def test_glyph_names():
    assert glyph_name_for("a") == "a"
    assert glyph_name_for(" ") == "space"
    assert glyph_name_for("0") == "uni0030"
    assert glyph_name_for("\\") == "uni005C"


def test_bitmap_to_rectangles():
    grid = ORIGINAL.get(0).to_array()
    rectangles = bitmap_to_rectangles(grid, 10)
    assert len(rectangles) == bin(ORIGINAL.get(0).to_bitmap()).count("1")
    # top-left pixel of the grid is the top row in font units
    assert (0, 30, 10, 10) in rectangles
    assert (0, 0, 10, 10) in rectangles


def test_build_otf_glyph_order(tmp_path):
    order = build_otf(ORIGINAL, tmp_path / "x.otf", METADATA)
    assert order[:2] == [".notdef", "space"]
    assert len(order) == 2 + len(ORIGINAL.supported())


def test_tables(otf_path):
    font = TTFont(otf_path)
    assert font["post"].isFixedPitch == 1
    assert font["gasp"].gaspRange == {0xFFFF: 0x0001}
    assert font["head"].unitsPerEm == 600
    cmap = font.getBestCmap()
    assert cmap[ord("a")] == cmap[ord("A")] == "a"
    assert cmap[ord("?")] == "uni003F"
    assert ord("@") not in cmap
    assert font["name"].getDebugName(1) == "Picofont Test"


def test_monospace_advances(otf_path):
    font = TTFont(otf_path)
    widths = {width for width, _ in font["hmtx"].metrics.values()}
    assert widths == {500}


def test_shape_mixed_case(otf_path):
    names, advances = shape(otf_path, "Hi!")
    assert names == ["h", "i", "uni0021"]
    assert advances == [500, 500, 500]


def test_shape_unsupported_is_notdef(otf_path):
    names, _ = shape(otf_path, "a@b")
    assert names == ["a", ".notdef", "b"]


def test_shape_space(otf_path):
    names, _ = shape(otf_path, "1 2")
    assert names == ["uni0031", "space", "uni0032"]


def test_build_otf_requires_metadata(tmp_path):
    metadata = {k: v for k, v in METADATA.items() if k != "pixel_size"}
    with pytest.raises(ValueError, match="pixel_size"):
        build_otf(ORIGINAL, tmp_path / "x.otf", metadata)
    assert not (tmp_path / "x.otf").exists()


def test_check_otf_metadata_rejects_non_mapping():
    with pytest.raises(ValueError, match="mapping"):
        check_otf_metadata(None)
    check_otf_metadata(METADATA)
