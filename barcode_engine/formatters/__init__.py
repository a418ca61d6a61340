"""
Output formatters for encoded barcodes.
"""

from .options import RenderOptions, Color, check_bits
from .ascii_formatter import generate_ascii
from .json_formatter import generate_json, format_bits_dict, format_barcode_json
from .svg_formatter import generate_svg
from .image_formatter import generate_image, image_bytes, IMAGE_FORMATS
from .pdf_formatter import generate_pdf

__all__ = [
    "RenderOptions",
    "Color",
    "check_bits",
    "generate_ascii",
    "generate_json",
    "format_bits_dict",
    "format_barcode_json",
    "generate_svg",
    "generate_image",
    "image_bytes",
    "IMAGE_FORMATS",
    "generate_pdf",
]
