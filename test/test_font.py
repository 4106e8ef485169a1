import pytest

import picofont
from picofont import EXTENDED, ORIGINAL, BitmapGlyph, Font, lookup
from picofont.font import _make_font

FONTS = [ORIGINAL]


@pytest.mark.parametrize("font", FONTS, ids=lambda f: f.charset.name)
def test_table_length_matches_charset(font):
    assert len(font.as_data()) == len(font.charset)
    assert len(font) == len(font.charset)


def test_lookup_letter_any_case():
    a = lookup("a", ORIGINAL)
    assert a == BitmapGlyph(0xFBFB)
    assert lookup("A", ORIGINAL) == a
    assert a.to_rows() == ["####", "#.##", "####", "#.##"]


def test_lookup_matches_slot():
    for c in "0123456789abcdefghijklmnopqrstuvwxyz":
        assert lookup(c, ORIGINAL) is ORIGINAL.as_data()[picofont.index(c)]


def test_lookup_character_without_glyph():
    # in the character set, but the original sheet has no glyph for it
    assert picofont.index("@") is not None
    assert lookup("@", ORIGINAL) is None
    assert lookup(" ", ORIGINAL) is None


@pytest.mark.parametrize("font", FONTS, ids=lambda f: f.charset.name)
@pytest.mark.parametrize("c", ["€", "é", "\u212a", "\x00", "$", "", "ab", None, 7])
def test_lookup_unsupported_is_none(font, c):
    assert lookup(c, font) is None


def test_lookup_never_raises_for_any_bmp_character():
    for codepoint in range(0x10000):
        lookup(chr(codepoint), ORIGINAL)


def test_supported():
    assert ORIGINAL.supported() == "0123456789abcdefghijklmnopqrstuvwxyz!&=+():\"?"
    assert len(ORIGINAL.supported()) == 45


def test_get_bounds():
    assert ORIGINAL.get(0) == BitmapGlyph(0xF99F)
    assert ORIGINAL.get(len(EXTENDED) - 1) is None
    with pytest.raises(IndexError):
        ORIGINAL.get(len(EXTENDED))
    with pytest.raises(IndexError):
        ORIGINAL.get(-1)


def test_font_cannot_be_constructed_directly():
    with pytest.raises(TypeError):
        Font(None, EXTENDED, (None,) * len(EXTENDED))
    with pytest.raises(TypeError):
        Font()


def test_font_is_read_only():
    with pytest.raises(AttributeError):
        ORIGINAL._data = ()
    with pytest.raises(AttributeError):
        ORIGINAL.extra = 1
    with pytest.raises(AttributeError):
        del ORIGINAL._charset
    assert isinstance(ORIGINAL.as_data(), tuple)


def test_factory_enforces_length():
    font = _make_font(EXTENDED, [None] * len(EXTENDED))
    assert font.supported() == ""
    with pytest.raises(ValueError, match="67 slots"):
        _make_font(EXTENDED, [None] * (len(EXTENDED) - 1))
    with pytest.raises(ValueError, match="slot 0"):
        _make_font(EXTENDED, [0x137F] + [None] * (len(EXTENDED) - 1))


def test_repr():
    assert repr(ORIGINAL) == "<Font extended: 45/68 glyphs>"
