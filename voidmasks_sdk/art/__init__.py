"""
Artwork generator for the VOIDMASKS SDK.

Maps a token id to a reproducible VectorImage and renders it as SVG.
"""
from .hashing import derive_channel, derive_color, derive_complexity, derive_pattern
from .generator import CANVAS_SIZE, generate_image, generate_preview_tokens
from .render import to_base64_data_uri, to_data_uri, to_svg
from .types import Circle, Color, Pattern, Polygon, PreviewToken, RadialGradient, Rect, VectorImage

__all__ = [
    "CANVAS_SIZE",
    "Circle",
    "Color",
    "Pattern",
    "Polygon",
    "PreviewToken",
    "RadialGradient",
    "Rect",
    "VectorImage",
    "derive_channel",
    "derive_color",
    "derive_complexity",
    "derive_pattern",
    "generate_image",
    "generate_preview_tokens",
    "to_base64_data_uri",
    "to_data_uri",
    "to_svg",
]
