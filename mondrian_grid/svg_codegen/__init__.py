"""Scene → SVG code generation helpers."""

from .generator import (
    generate_svg_code,
    generate_svg_document,
)
from .utils import format_number, svg_escape

__all__ = [
    "format_number",
    "generate_svg_code",
    "generate_svg_document",
    "svg_escape",
]
