import math
import re
from html import escape

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def format_number(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for SVG output")
    formatted = f"{value:.3f}".rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def svg_escape(text: str) -> str:
    return escape(text, quote=True)


def normalize_color(color: str) -> str:
    """Return a lowercase hex colour; anything else is escaped verbatim."""

    color = color.strip()
    if _HEX_COLOR_RE.match(color):
        return color.lower()
    return svg_escape(color)
