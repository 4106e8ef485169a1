"""
Build an OpenType preview of a picofont font.
Uses fonttools FontBuilder to create a CFF-based OTF, one square per pixel.
"""

from datetime import datetime
from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.ttLib import newTable

from .font import Font
from .glyph import GLYPH_SIZE

# 4 pixels of glyph + 1 pixel gap
ADVANCE_PIXELS = GLYPH_SIZE + 1

REQUIRED_METADATA = ("font_name", "version", "units_per_em", "pixel_size", "ascender", "descender")


def check_otf_metadata(metadata) -> None:
    """Raise ValueError if metadata lacks a key build_otf needs."""
    if not isinstance(metadata, dict):
        raise ValueError(f"Font metadata must be a mapping, got {metadata!r}")
    missing = [key for key in REQUIRED_METADATA if key not in metadata]
    if missing:
        raise ValueError(f"Font metadata is missing: {', '.join(missing)}")


def glyph_name_for(char: str) -> str:
    """PostScript glyph name for a character set character."""
    if char == " ":
        return "space"
    if "a" <= char <= "z":
        return char
    return f"uni{ord(char):04X}"


def bitmap_to_rectangles(
    grid,
    pixel_size: int,
    y_offset: int = 0
) -> list[tuple[int, int, int, int]]:
    """
    Convert a 4x4 glyph grid to a list of rectangle coordinates.

    Returns list of (x, y, width, height) tuples for each "on" pixel.
    Coordinates are in font units, with y=0 at baseline.
    """
    rectangles = []
    height = len(grid)

    for row_idx, row in enumerate(grid):
        # Flip y-axis: grid row 0 is top, font y increases upward
        y = (y_offset + height - 1 - row_idx) * pixel_size

        for col_idx, pixel in enumerate(row):
            if pixel:
                x = col_idx * pixel_size
                rectangles.append((x, y, pixel_size, pixel_size))

    return rectangles


def draw_rectangles(rectangles: list[tuple], width: int):
    """Draw rectangles as a T2CharString for CFF/OTF fonts."""
    pen = T2CharStringPen(width=width, glyphSet=None)

    for x, y, w, h in rectangles:
        # Counter-clockwise for CFF (outer contour)
        pen.moveTo((x, y))
        pen.lineTo((x, y + h))
        pen.lineTo((x + w, y + h))
        pen.lineTo((x + w, y))
        pen.closePath()

    return pen.getCharString()


def build_otf(font: Font, output_path: Path, metadata: dict) -> list[str]:
    """
    Build a monospace OTF from a font table.

    Args:
        font: the font to export; empty slots are left out
        output_path: Path to write the font file
        metadata: font_name, version, units_per_em, pixel_size, ascender,
                  descender and optional copyright/license/description

    Returns the glyph order of the written font.
    """
    check_otf_metadata(metadata)

    font_name = metadata["font_name"]
    version = metadata["version"]
    units_per_em = metadata["units_per_em"]
    pixel_size = metadata["pixel_size"]
    ascender = metadata["ascender"]
    descender = metadata["descender"]
    y_offset = metadata.get("y_offset", 0)

    advance_width = ADVANCE_PIXELS * pixel_size

    # .notdef first, space always present even when the table has no glyph for it
    glyph_order = [".notdef", "space"]
    cmap = {32: "space"}
    glyphs = {}
    for char, glyph in zip(font.charset, font.as_data()):
        if glyph is None or char == " ":
            continue
        name = glyph_name_for(char)
        glyph_order.append(name)
        glyphs[name] = glyph
        cmap[ord(char)] = name
        if "a" <= char <= "z":
            cmap[ord(char.upper())] = name

    fb = FontBuilder(units_per_em, isTTF=False)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)

    charstrings = {}
    metrics = {}

    # .notdef: hollow box over the glyph area
    full = GLYPH_SIZE * pixel_size
    pen = T2CharStringPen(width=advance_width, glyphSet=None)
    pen.moveTo((0, 0))
    pen.lineTo((0, full))
    pen.lineTo((full, full))
    pen.lineTo((full, 0))
    pen.closePath()
    pen.moveTo((pixel_size, pixel_size))
    pen.lineTo((full - pixel_size, pixel_size))
    pen.lineTo((full - pixel_size, full - pixel_size))
    pen.lineTo((pixel_size, full - pixel_size))
    pen.closePath()
    charstrings[".notdef"] = pen.getCharString()
    metrics[".notdef"] = (advance_width, 0)

    charstrings["space"] = draw_rectangles([], advance_width)
    metrics["space"] = (advance_width, 0)

    for name, glyph in glyphs.items():
        rectangles = bitmap_to_rectangles(glyph.to_array(), pixel_size, y_offset)
        lsb = min((r[0] for r in rectangles), default=0)
        charstrings[name] = draw_rectangles(rectangles, advance_width)
        metrics[name] = (advance_width, lsb)

    ps_name = font_name.replace(" ", "") + "-Regular"
    fb.setupCFF(
        psName=ps_name,
        fontInfo={"FamilyName": font_name, "FullName": f"{font_name} Regular"},
        charStringsDict=charstrings,
        privateDict={}
    )

    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=ascender, descent=descender)

    name_strings = {
        "familyName": {"en": font_name},
        "styleName": {"en": "Regular"},
        "uniqueFontIdentifier": f"FontBuilder:{font_name}.Regular",
        "fullName": {"en": f"{font_name} Regular"},
        "psName": ps_name,
        "version": f"Version {version}",
    }

    if "copyright" in metadata:
        copyright_str = metadata["copyright"]
        if "© " in copyright_str:
            year = datetime.now().year
            copyright_str = copyright_str.replace("© ", f"© {year} ", 1)
        name_strings["copyright"] = {"en": copyright_str}
    if "license" in metadata:
        name_strings["licenseDescription"] = {"en": metadata["license"]}
    if "description" in metadata:
        name_strings["description"] = {"en": metadata["description"]}

    fb.setupNameTable(name_strings)

    fb.setupOS2(
        sTypoAscender=ascender,
        sTypoDescender=descender,
        sTypoLineGap=0,
        usWinAscent=ascender,
        usWinDescent=abs(descender),
        sxHeight=full,
        sCapHeight=full,
        fsType=0,  # Installable embedding - no restrictions
    )

    fb.setupPost(isFixedPitch=1)

    # Grid-fit only, no antialiasing
    gasp = newTable("gasp")
    gasp.gaspRange = {0xFFFF: 0x0001}
    fb.font["gasp"] = gasp

    fb.setupHead(unitsPerEm=units_per_em, fontRevision=version)

    fb.save(str(output_path))
    return glyph_order
