"""
Extract packed glyphs from a reference glyph sheet.

The sheet is a greyscale image holding 4x4 glyphs on a grid with a 1-pixel
gap between cells. A layout (rows of strings) names the character in each
cell. Every sampled pixel must be exactly the "on" or the "off" colour;
anything else means the image or the layout is wrong, and extraction stops.

Runs at build time only, from build_font.py.
"""

from pathlib import Path

import yaml
from PIL import Image

from .charset import CHARSETS, CharacterSet, EXTENDED
from .glyph import GLYPH_SIZE, pack

CELL_STRIDE = GLYPH_SIZE + 1
DEFAULT_SENTINEL = "X"


class ExtractionError(ValueError):
    """Base class for errors that abort glyph extraction."""


class PixelColorError(ExtractionError):
    pass


class LayoutBoundsError(ExtractionError):
    pass


class UnknownCharacterError(ExtractionError):
    pass


class DuplicateCharacterError(ExtractionError):
    pass


def load_sheet(path: Path) -> Image.Image:
    """Open a glyph sheet and convert it to single-channel greyscale."""
    with Image.open(path) as image:
        return image.convert("L")


def iter_layout_cells(layout: list[str], sentinel: str = DEFAULT_SENTINEL):
    """Yield (x, y, char) for every non-empty cell of a layout."""
    for y, row in enumerate(layout):
        for x, c in enumerate(row):
            if c != sentinel:
                yield x, y, c


def sample_glyph(
    pixels,
    size: tuple[int, int],
    corner: tuple[int, int],
    colors: tuple[int, int],
    char: str,
) -> list[list[bool]]:
    """Sample the 4x4 block whose top-left pixel is `corner`."""
    width, height = size
    on, off = colors
    grid = []
    for dy in range(GLYPH_SIZE):
        row = []
        for dx in range(GLYPH_SIZE):
            px = corner[0] + dx
            py = corner[1] + dy
            if not (0 <= px < width and 0 <= py < height):
                raise LayoutBoundsError(
                    f"Layout is too large for the {width}x{height} image: "
                    f"'{char}' needs pixel ({px}, {py})"
                )
            color = pixels[px, py]
            if color == on:
                row.append(True)
            elif color == off:
                row.append(False)
            else:
                raise PixelColorError(
                    f"Unexpected pixel value {color} at ({px}, {py}) in '{char}' "
                    f"(expected on={on} or off={off})"
                )
        grid.append(row)
    return grid


def extract_glyphs(
    image: Image.Image,
    origin: tuple[int, int],
    colors: tuple[int, int],
    layout: list[str],
    sentinel: str = DEFAULT_SENTINEL,
    charset: CharacterSet = EXTENDED,
) -> dict[str, int]:
    """
    Extract one packed glyph per character named in the layout.

    Args:
        image: greyscale ("L" mode) glyph sheet
        origin: (x, y) pixel of the top-left corner of layout cell (0, 0)
        colors: (on, off) reference pixel values
        layout: rows of characters, one per glyph cell; `sentinel` = empty
        sentinel: layout character meaning "no glyph in this cell"
        charset: character set the layout characters must belong to

    Returns {char: packed glyph}, keyed by the character as stored in the
    character set (letters lowercase).
    """
    if image.mode != "L":
        raise ValueError(f"Glyph sheet must be greyscale ('L'), got '{image.mode}'")
    on, off = colors
    if on == off:
        raise ValueError(f"On and off colours are both {on}")

    h_offset, v_offset = origin
    pixels = image.load()
    glyphs = {}
    seen_at = {}

    for x, y, c in iter_layout_cells(layout, sentinel):
        slot = charset.index(c)
        if slot is None:
            raise UnknownCharacterError(
                f"Layout row {y} column {x} has '{c}', "
                f"which is not in the '{charset.name}' character set"
            )
        char = charset.char_at(slot)
        if char in seen_at:
            raise DuplicateCharacterError(
                f"'{char}' appears at layout row {y} column {x} "
                f"and at row {seen_at[char][1]} column {seen_at[char][0]}"
            )
        seen_at[char] = (x, y)

        corner = (h_offset + x * CELL_STRIDE, v_offset + y * CELL_STRIDE)
        grid = sample_glyph(pixels, image.size, corner, (on, off), char)
        glyphs[char] = pack(grid)

    return glyphs


def order_glyphs(glyphs: dict[str, int], charset: CharacterSet) -> list[int | None]:
    """Reorder extracted glyphs into character set slot order."""
    slots: list[int | None] = [None] * len(charset)
    for char, value in glyphs.items():
        slot = charset.index(char)
        if slot is None:
            raise UnknownCharacterError(
                f"'{char}' is not in the '{charset.name}' character set"
            )
        slots[slot] = value
    return slots


def render_font_module(slots: list[int | None], charset: CharacterSet, source: str) -> str:
    """Render the Python module that embeds a font table as a constant."""
    if len(slots) != len(charset):
        raise ValueError(
            f"Got {len(slots)} slots for the {len(charset)}-character '{charset.name}' set"
        )
    lines = [
        f'"""Generated by build_font.py from {source}. Do not edit."""',
        "",
        f"from ..charset import {charset.name.upper()}",
        "from ..font import _make_font",
        "from ..glyph import BitmapGlyph",
        "",
        f"FONT = _make_font({charset.name.upper()}, (",
    ]
    for char, value in zip(charset, slots):
        if value is None:
            lines.append(f"    None,  # {char!r}")
        else:
            lines.append(f"    BitmapGlyph(0x{value:04X}),  # {char!r}")
    lines.append("))")
    return "\n".join(lines) + "\n"


def load_font_definition(path: Path) -> dict:
    """
    Load a font definition YAML file.

    Relative paths in the file are resolved against the file's directory.
    """
    with open(path) as f:
        data = yaml.safe_load(f)
    if not data:
        raise ValueError(f"Font definition {path} is empty")

    for section in ("metadata", "extraction", "output"):
        if section not in data:
            raise ValueError(f"Font definition {path} has no '{section}' section")

    extraction = data["extraction"]
    for key in ("image", "origin", "layout"):
        if key not in extraction:
            raise ValueError(f"Font definition {path} is missing extraction.{key}")
    if "module" not in data["output"]:
        raise ValueError(f"Font definition {path} is missing output.module")

    charset_name = extraction.get("charset", EXTENDED.name)
    if charset_name not in CHARSETS:
        raise ValueError(
            f"Unknown character set '{charset_name}' (expected one of: {', '.join(CHARSETS)})"
        )

    layout = extraction["layout"]
    if not isinstance(layout, list):
        raise ValueError(f"Layout in {path} must be a list of rows, got {layout!r}")
    for row_idx, row in enumerate(layout):
        # unquoted rows like 0123456789 load as ints and lose characters
        if not isinstance(row, str):
            raise ValueError(
                f"Layout row {row_idx} in {path} must be a quoted string, got {row!r}"
            )
    sentinel = str(extraction.get("sentinel", DEFAULT_SENTINEL))
    if len(sentinel) != 1:
        raise ValueError(f"Sentinel must be a single character, got {sentinel!r}")

    base_dir = Path(path).parent
    return {
        "metadata": data["metadata"],
        "image": base_dir / extraction["image"],
        "origin": tuple(extraction["origin"]),
        "colors": (extraction.get("on", 255), extraction.get("off", 0)),
        "sentinel": sentinel,
        "charset": CHARSETS[charset_name],
        "layout": layout,
        "module": base_dir / data["output"]["module"],
        "source": Path(path).name,
    }
