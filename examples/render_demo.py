"""
Demo: Encoding and Rendering

Encodes one sample per symbology, prints it as ASCII art and writes SVG
and PNG files next to this script.
"""

from pathlib import Path

from barcode_engine import (
    BarcodeError,
    RenderOptions,
    encoder_for,
    generate_ascii,
    generate_svg,
    image_bytes,
)

OUTPUT_DIR = Path(__file__).parent / "output"


def demo_symbologies():
    """Print every sample symbology as ASCII."""

    print("=" * 80)
    print("  SYMBOLOGY DEMO")
    print("=" * 80)

    samples = [
        ("Codabar", "codabar", "A40156B", {}),
        ("Code11", "code11", "1234-5678-4321", {}),
        ("Code39 with checksum", "code39", "983RD512", {"checksum": True}),
        ("Code93", "code93", "TEST93", {}),
        ("Code128 (alphabet B)", "code128", "xyZÀ199!*1", {"character_set": "B"}),
        ("EAN-13", "ean13", "750103131130", {}),
        ("EAN-8", "ean8", "9834651", {}),
        ("UPC-A", "upca", "03600029145", {}),
        ("EAN-5 supplemental", "ean5", "51234", {}),
        ("Interleaved 2 of 5", "itf", "1234567", {}),
    ]

    options = RenderOptions(height=3)
    for title, symbology, data, extra in samples:
        barcode = encoder_for(symbology, data, **extra)
        bits = barcode.encode()
        print(f"\n{title}")
        print("-" * 80)
        print(f"Input:   {data}")
        print(f"Modules: {len(bits)}")
        print(generate_ascii(bits, options))


def demo_errors():
    """Show structured errors for rejected input."""

    print("\n\n" + "=" * 80)
    print("  ERROR HANDLING")
    print("=" * 80)

    for symbology, data in [
        ("ean13", "7501031311305"),
        ("ean2", "123"),
        ("code39", "lowercase"),
        ("code128", "HELLO"),
    ]:
        try:
            encoder_for(symbology, data)
        except BarcodeError as e:
            print(f"  {symbology:8s} {data!r:20s} -> {e.code.value}: {e}")


def demo_files():
    """Write SVG and PNG renderings."""
    OUTPUT_DIR.mkdir(exist_ok=True)
    bits = encoder_for("ean13", "978345612345").encode()
    options = RenderOptions(height=60, xdim=3)

    svg_path = OUTPUT_DIR / "bookland.svg"
    svg_path.write_text(generate_svg(bits, options), encoding="utf-8")

    png_path = OUTPUT_DIR / "bookland.png"
    png_path.write_bytes(image_bytes(bits, options, "PNG"))

    print(f"\nWrote {svg_path} and {png_path}")


if __name__ == "__main__":
    demo_symbologies()
    demo_errors()
    demo_files()
