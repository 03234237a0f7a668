"""
SVG serialization for generated images.
"""
import base64
import urllib.parse
from typing import List, Optional

from .types import Circle, Polygon, Primitive, RadialGradient, Rect, VectorImage

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def format_number(value: float) -> str:
    """Shortest round-trip form, without a fraction for integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def _opacity_attr(opacity: float) -> str:
    # 1 is the SVG default
    if opacity == 1:
        return ""
    return f' opacity="{format_number(opacity)}"'


def render_primitive(primitive: Primitive) -> str:
    n = format_number
    if isinstance(primitive, Rect):
        return (
            f'<rect x="{n(primitive.x)}" y="{n(primitive.y)}" '
            f'width="{n(primitive.width)}" height="{n(primitive.height)}" '
            f'fill="{primitive.fill}"{_opacity_attr(primitive.opacity)}/>'
        )
    if isinstance(primitive, Circle):
        return (
            f'<circle cx="{n(primitive.cx)}" cy="{n(primitive.cy)}" r="{n(primitive.r)}" '
            f'fill="{primitive.fill}"{_opacity_attr(primitive.opacity)}/>'
        )
    if isinstance(primitive, Polygon):
        points = " ".join(f"{n(x)},{n(y)}" for x, y in primitive.points)
        return f'<polygon points="{points}" fill="{primitive.fill}"{_opacity_attr(primitive.opacity)}/>'
    raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")


def render_gradient(gradient: RadialGradient, gradient_id: Optional[str] = None) -> str:
    stops = "".join(
        f'<stop offset="{stop.offset}" stop-color="{stop.color}" '
        f'stop-opacity="{format_number(stop.opacity)}"/>'
        for stop in gradient.stops
    )
    return (
        f'<defs><radialGradient id="{gradient_id or gradient.id}" '
        f'cx="{gradient.cx}" cy="{gradient.cy}" r="{gradient.r}">'
        f"{stops}</radialGradient></defs>"
    )


def to_svg(
    image: VectorImage,
    *,
    gradient_id: Optional[str] = None,
    apply_rotation: bool = False,
) -> str:
    """
    Render an image as an SVG document.

    Args:
        image: Image to render
        gradient_id: Override for the overlay gradient id, for pages that
            embed the same token more than once
        apply_rotation: Rotate the main shape about the canvas centre by
            ``image.rotation`` degrees (off by default)

    Returns:
        SVG markup
    """
    size = image.size
    parts: List[str] = [
        f'<svg xmlns="{SVG_NAMESPACE}" viewBox="0 0 {size} {size}" width="{size}" height="{size}">',
        render_primitive(image.background),
    ]
    parts.extend(render_primitive(p) for p in image.decorations)

    main = "".join(render_primitive(p) for p in image.main_shape)
    if apply_rotation:
        cx, cy = image.center
        main = f'<g transform="rotate({image.rotation} {format_number(cx)} {format_number(cy)})">{main}</g>'
    parts.append(main)

    parts.append(render_gradient(image.gradient, gradient_id))
    overlay = image.overlay
    if gradient_id:
        overlay = Rect(overlay.x, overlay.y, overlay.width, overlay.height, f"url(#{gradient_id})", overlay.opacity)
    parts.append(render_primitive(overlay))
    parts.append("</svg>")
    return "".join(parts)


def to_base64_data_uri(image: VectorImage, **kwargs) -> str:
    svg = to_svg(image, **kwargs)
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


def to_data_uri(image: VectorImage, **kwargs) -> str:
    svg = to_svg(image, **kwargs)
    return f"data:image/svg+xml,{urllib.parse.quote(svg, safe=_URI_COMPONENT_SAFE)}"
