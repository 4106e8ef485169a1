import sys
from pathlib import Path

import pytest
from PIL import Image

ROOT = Path(__file__).resolve().parent.parent

sys.path.insert(0, str(ROOT))

ON = 255
OFF = 0
STRAY = 128

_PIXELS = {"#": ON, ".": OFF, "?": STRAY}


def sheet_from_rows(rows: list[str]) -> Image.Image:
    """
    Build a greyscale sheet from text rows.
    "#" = on, "." = off, "?" = a third colour that is neither.
    """
    width = max(len(row) for row in rows)
    image = Image.new("L", (width, len(rows)), OFF)
    for y, row in enumerate(rows):
        for x, c in enumerate(row):
            image.putpixel((x, y), _PIXELS[c])
    return image


@pytest.fixture
def make_sheet():
    return sheet_from_rows


@pytest.fixture
def original_definition():
    from picofont.extract import load_font_definition

    return load_font_definition(ROOT / "font" / "original.yaml")
