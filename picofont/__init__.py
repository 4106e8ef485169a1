"""
A very small bitmap font.

Glyphs are 4x4 pixels, packed into 16 bits. To get the slot of a character
use `index`; to look up a character's glyph use `lookup`:

    >>> from picofont import lookup, ORIGINAL
    >>> lookup("a", ORIGINAL).to_rows()
    ['####', '#.##', '####', '#.##']

Bundled fonts live in `picofont.fonts` and are generated by build_font.py;
fonts cannot be built from outside the package.
"""

from .charset import CHARSETS, EXTENDED, LENGTH, MINIMAL, CharacterSet, index
from .font import Font, lookup
from .fonts.original import FONT as ORIGINAL
from .glyph import BitmapGlyph, pack, unpack

__all__ = [
    "BitmapGlyph",
    "CHARSETS",
    "CharacterSet",
    "EXTENDED",
    "Font",
    "LENGTH",
    "MINIMAL",
    "ORIGINAL",
    "index",
    "lookup",
    "pack",
    "unpack",
]
