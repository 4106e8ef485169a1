"""
Packed 4x4 glyphs.

A glyph is a 4x4 grid of on/off pixels stored in 16 bits. Bit 15 is the
top-left pixel and bit 0 the bottom-right; each row is one nibble, with the
top row in the most significant nibble:

    row 0 -> bits 15..12
    row 1 -> bits 11..8
    row 2 -> bits  7..4
    row 3 -> bits  3..0

Every 16-bit value is a valid glyph.
"""

from dataclasses import dataclass

GLYPH_SIZE = 4
MAX_VALUE = 0xFFFF

Grid = tuple[tuple[bool, bool, bool, bool], ...]


def pack(grid) -> int:
    """Pack a 4x4 grid of truthy/falsy cells into a 16-bit value."""
    if len(grid) != GLYPH_SIZE:
        raise ValueError(f"Glyph grid has {len(grid)} rows, expected {GLYPH_SIZE}")

    value = 0
    for row_idx, row in enumerate(grid):
        if len(row) != GLYPH_SIZE:
            raise ValueError(
                f"Glyph grid row {row_idx} has width {len(row)}, expected {GLYPH_SIZE}"
            )
        for pixel in row:
            value = (value << 1) | (1 if pixel else 0)
    return value


def unpack(value: int) -> Grid:
    """Unpack a 16-bit value into a 4x4 grid of booleans."""
    if not 0 <= value <= MAX_VALUE:
        raise ValueError(f"Glyph value {value!r} does not fit in 16 bits")

    rows = []
    for row_idx in range(GLYPH_SIZE):
        nibble = (value >> (12 - 4 * row_idx)) & 0b1111
        rows.append(tuple(bool(nibble & (0b1000 >> col)) for col in range(GLYPH_SIZE)))
    return tuple(rows)


def parse_rows(rows: list[str]) -> list[list[int]]:
    """
    Convert text rows to a 2D array of 0s and 1s.
    "#" or "1" is an on pixel, anything else is off.
    """
    return [
        [1 if c == '#' or c == '1' else 0 for c in row]
        for row in rows
    ]


@dataclass(frozen=True)
class BitmapGlyph:
    """
    A single packed glyph.

    To get the glyph for a character, use `picofont.lookup`. Constructing one
    directly is only useful for format conversion.
    """

    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or not 0 <= self.value <= MAX_VALUE:
            raise ValueError(f"Glyph value {self.value!r} does not fit in 16 bits")

    @classmethod
    def from_array(cls, grid) -> "BitmapGlyph":
        return cls(pack(grid))

    @classmethod
    def from_rows(cls, rows: list[str]) -> "BitmapGlyph":
        """
        Build a glyph from 4 text rows, e.g.

            ["####",
             "#.##",
             "####",
             "#.##"]
        """
        return cls(pack(parse_rows(rows)))

    def to_bitmap(self) -> int:
        """Get the packed 16-bit value (4 rows of 4 bits, top row first)."""
        return self.value

    def to_array(self) -> Grid:
        """
        Get the glyph as a 4x4 tuple of booleans, row-major.

        For 'a' in the original font (X = True, space = False):

            XXXX
            X XX
            XXXX
            X XX
        """
        return unpack(self.value)

    def to_rows(self, on: str = "#", off: str = ".") -> list[str]:
        return ["".join(on if pixel else off for pixel in row) for row in self.to_array()]

    def __repr__(self):
        return f"BitmapGlyph(0x{self.value:04X})"
