#!/usr/bin/env python3
"""
Build a picofont font table from a reference glyph sheet.
Uses Pillow to read the sheet and fonttools to write an optional OTF preview.

Usage:
    uv run python build_font.py <font.yaml> [output_dir]

    The YAML file names the glyph sheet, the layout of glyphs on it and the
    generated module to write. Paths in it are relative to the YAML file.

Outputs:
    picofont/fonts/<name>.py        - Generated font table (path from the YAML)
    output_dir/<FontName>.otf       - OpenType preview, only if output_dir is given

Any pixel that is neither the "on" nor the "off" colour, any layout cell
outside the image and any layout character outside the character set stops
the build; nothing is written.
"""

import sys
from pathlib import Path

from picofont.extract import (
    extract_glyphs,
    load_font_definition,
    load_sheet,
    order_glyphs,
    render_font_module,
)
from picofont.font import Font, _make_font
from picofont.glyph import BitmapGlyph
from picofont.otf import build_otf, check_otf_metadata


def build(definition: dict) -> tuple[str, Font]:
    """
    Extract glyphs for a loaded font definition.

    Returns the generated module source and the extracted font.
    """
    image = load_sheet(definition["image"])
    charset = definition["charset"]
    glyphs = extract_glyphs(
        image,
        definition["origin"],
        definition["colors"],
        definition["layout"],
        sentinel=definition["sentinel"],
        charset=charset,
    )
    slots = order_glyphs(glyphs, charset)
    print(f"Extracted {len(glyphs)} glyphs from: {definition['image']}")
    print(f"  Character set: {charset.name} ({len(charset)} slots)")
    missing = "".join(c for c, value in zip(charset, slots) if value is None)
    print(f"  Empty slots: {len(missing)} {missing!r}")
    source = render_font_module(slots, charset, definition["source"])
    font = _make_font(charset, [None if value is None else BitmapGlyph(value) for value in slots])
    return source, font


def main():
    if len(sys.argv) < 2:
        print("Usage: uv run python build_font.py <font.yaml> [output_dir]")
        print("\nOutputs:")
        print("  picofont/fonts/<name>.py (path from the YAML)")
        print("  output_dir/<FontName>.otf (only if output_dir is given)")
        print("\nExample:")
        print("  uv run python build_font.py font/original.yaml build/")
        sys.exit(1)

    input_path = Path(sys.argv[1])
    output_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    if not input_path.exists():
        print(f"Error: Input path not found: {input_path}")
        sys.exit(1)

    try:
        definition = load_font_definition(input_path)
        if output_dir is not None:
            check_otf_metadata(definition["metadata"])
        source, font = build(definition)
    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    module_path = definition["module"]
    module_path.write_text(source)
    print(f"Font table saved to: {module_path}")

    if output_dir is not None:
        metadata = definition["metadata"]
        output_dir.mkdir(parents=True, exist_ok=True)
        otf_path = output_dir / (metadata["font_name"].replace(" ", "") + ".otf")
        glyph_order = build_otf(font, otf_path, metadata)
        print(f"Font saved to: {otf_path}")
        print(f"  Glyphs: {len(glyph_order)}")
        print(f"  Units per em: {metadata['units_per_em']}")
        print(f"  Pixel size: {metadata['pixel_size']} units")


if __name__ == "__main__":
    main()
