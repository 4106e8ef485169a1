"""Generated by build_font.py from original.yaml. Do not edit."""

from ..charset import EXTENDED
from ..font import _make_font
from ..glyph import BitmapGlyph

FONT = _make_font(EXTENDED, (
    BitmapGlyph(0xF99F),  # '0'
    BitmapGlyph(0x6227),  # '1'
    BitmapGlyph(0xE16F),  # '2'
    BitmapGlyph(0xE61E),  # '3'
    BitmapGlyph(0x99F1),  # '4'
    BitmapGlyph(0xFE1E),  # '5'
    BitmapGlyph(0x8F9F),  # '6'
    BitmapGlyph(0xF124),  # '7'
    BitmapGlyph(0xF69F),  # '8'
    BitmapGlyph(0xF9F1),  # '9'
    BitmapGlyph(0xFBFB),  # 'a'
    BitmapGlyph(0x8E9E),  # 'b'
    BitmapGlyph(0x7887),  # 'c'
    BitmapGlyph(0x1797),  # 'd'
    BitmapGlyph(0xF8EF),  # 'e'
    BitmapGlyph(0xF8E8),  # 'f'
    BitmapGlyph(0x78B7),  # 'g'
    BitmapGlyph(0x99F9),  # 'h'
    BitmapGlyph(0xE44E),  # 'i'
    BitmapGlyph(0x1196),  # 'j'
    BitmapGlyph(0x9AE9),  # 'k'
    BitmapGlyph(0x888F),  # 'l'
    BitmapGlyph(0x9FF9),  # 'm'
    BitmapGlyph(0x9DB9),  # 'n'
    BitmapGlyph(0x6996),  # 'o'
    BitmapGlyph(0xE9E8),  # 'p'
    BitmapGlyph(0x6961),  # 'q'
    BitmapGlyph(0xE9E9),  # 'r'
    BitmapGlyph(0x7C3E),  # 's'
    BitmapGlyph(0xF444),  # 't'
    BitmapGlyph(0x9996),  # 'u'
    BitmapGlyph(0x99A4),  # 'v'
    BitmapGlyph(0x99F6),  # 'w'
    BitmapGlyph(0x9669),  # 'x'
    BitmapGlyph(0x9716),  # 'y'
    BitmapGlyph(0xF24F),  # 'z'
    None,  # ' '
    None,  # '~'
    None,  # '`'
    BitmapGlyph(0x4404),  # '!'
    None,  # '@'
    None,  # '#'
    None,  # '%'
    None,  # '^'
    BitmapGlyph(0x4A5A),  # '&'
    None,  # '*'
    None,  # '_'
    BitmapGlyph(0x0F0F),  # '='
    BitmapGlyph(0x04E4),  # '+'
    None,  # '-'
    BitmapGlyph(0x2442),  # '('
    BitmapGlyph(0x4224),  # ')'
    None,  # '{'
    None,  # '}'
    None,  # '['
    None,  # ']'
    None,  # '|'
    None,  # '\\'
    BitmapGlyph(0x0404),  # ':'
    None,  # ';'
    BitmapGlyph(0xAA00),  # '"'
    None,  # "'"
    None,  # '<'
    None,  # '>'
    BitmapGlyph(0xE204),  # '?'
    None,  # '/'
    None,  # ','
    None,  # '.'
))
