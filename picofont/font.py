"""
Immutable font tables.

A Font holds one optional glyph per slot of its character set. Fonts are only
built by `_make_font`, which is called from the generated modules under
`picofont.fonts`; there is no public constructor, so every Font's table is
as long as its character set.
"""

from .charset import CharacterSet
from .glyph import BitmapGlyph

_FACTORY_KEY = object()


class Font:
    """A read-only table of glyphs, indexed by character set slot."""

    __slots__ = ("_charset", "_data")

    def __init__(self, key, charset: CharacterSet, data: tuple):
        if key is not _FACTORY_KEY:
            raise TypeError("Fonts cannot be constructed directly; use the bundled fonts")
        object.__setattr__(self, "_charset", charset)
        object.__setattr__(self, "_data", data)

    def __setattr__(self, name, value):
        raise AttributeError("Font is read-only")

    def __delattr__(self, name):
        raise AttributeError("Font is read-only")

    @property
    def charset(self) -> CharacterSet:
        return self._charset

    def as_data(self) -> tuple[BitmapGlyph | None, ...]:
        """Get every slot of the table, in character set order."""
        return self._data

    def get(self, index: int) -> BitmapGlyph | None:
        """
        Get the glyph in a slot, or None if the font has no glyph there.

        Raises IndexError for a slot outside the character set; indices from
        `CharacterSet.index` are always in range.
        """
        if not 0 <= index < len(self._data):
            raise IndexError(
                f"Slot {index} out of range for {len(self._data)}-slot font"
            )
        return self._data[index]

    def supported(self) -> str:
        """Characters that have a glyph in this font, in slot order."""
        return "".join(
            c for c, glyph in zip(self._charset, self._data) if glyph is not None
        )

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        return f"<Font {self._charset.name}: {len(self.supported())}/{len(self)} glyphs>"


def _make_font(charset: CharacterSet, data) -> Font:
    data = tuple(data)
    if len(data) != len(charset):
        raise ValueError(
            f"Font has {len(data)} slots, character set '{charset.name}' has {len(charset)}"
        )
    for slot, glyph in enumerate(data):
        if glyph is not None and not isinstance(glyph, BitmapGlyph):
            raise ValueError(f"Font slot {slot} holds {glyph!r}, expected a BitmapGlyph or None")
    return Font(_FACTORY_KEY, charset, data)


def lookup(c, font: Font) -> BitmapGlyph | None:
    """
    Look up a character in a font.

    Returns None if the character isn't in the font's character set or the
    font has no glyph for it.
    """
    slot = font.charset.index(c)
    if slot is None:
        return None
    return font.get(slot)
