"""
Deterministic artwork generation from token ids.
"""
import logging
import math
from typing import List, Tuple

from .hashing import (
    CHANNEL_GRADIENT_ID,
    DECORATION_OPACITY_OFFSET,
    DECORATION_SIZE_OFFSET,
    DECORATION_X_OFFSET,
    DECORATION_Y_OFFSET,
    derive_background_color,
    derive_channel,
    derive_complexity,
    derive_pattern,
    derive_rotation,
    derive_shape_color,
    derive_size_modifier,
)
from .types import (
    Circle,
    Color,
    GradientStop,
    Pattern,
    Polygon,
    PreviewToken,
    Primitive,
    RadialGradient,
    Rect,
    VectorImage,
)

logger = logging.getLogger(__name__)

CANVAS_SIZE = 400
BASE_SHAPE_SIZE = 120
MAIN_SHAPE_OPACITY = 0.8

MASK_STOPS = (
    GradientStop(offset="0%", color="white", opacity=0),
    GradientStop(offset="70%", color="white", opacity=0.1),
    GradientStop(offset="100%", color="black", opacity=0.3),
)

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def gradient_id_for(seed: int) -> str:
    """Stable gradient identifier for a seed."""
    return f"mask-gradient-{_base36(derive_channel(seed, CHANNEL_GRADIENT_ID))}"


def generate_main_shape(
    pattern: Pattern,
    color: Color,
    center_x: float,
    center_y: float,
    size: float,
) -> Tuple[Primitive, ...]:
    """
    Build the primitives of the main shape.

    Args:
        pattern: Which shape to draw
        color: Fill color
        center_x: Horizontal centre of the shape
        center_y: Vertical centre of the shape
        size: Scaled shape size

    Returns:
        One primitive, or two rectangles for a cross
    """
    opacity = MAIN_SHAPE_OPACITY
    if pattern == Pattern.CIRCLE:
        return (Circle(center_x, center_y, size, color, opacity),)
    if pattern == Pattern.TRIANGLE:
        h = size * math.sqrt(3) / 2
        points = (
            (center_x, center_y - h / 2),
            (center_x - size / 2, center_y + h / 2),
            (center_x + size / 2, center_y + h / 2),
        )
        return (Polygon(points, color, opacity),)
    if pattern == Pattern.SQUARE:
        return (Rect(center_x - size / 2, center_y - size / 2, size, size, color, opacity),)
    if pattern == Pattern.DIAMOND:
        points = (
            (center_x, center_y - size),
            (center_x + size, center_y),
            (center_x, center_y + size),
            (center_x - size, center_y),
        )
        return (Polygon(points, color, opacity),)
    # Cross
    thick = size / 3
    return (
        Rect(center_x - thick / 2, center_y - size, thick, size * 2, color, opacity),
        Rect(center_x - size, center_y - thick / 2, size * 2, thick, color, opacity),
    )


def generate_decorations(seed: int, canvas_size: int = CANVAS_SIZE) -> Tuple[Primitive, ...]:
    """
    Build the decorative primitives drawn behind the main shape.

    Even slots are circles, odd slots are squares centred on their position.
    All of them use the background color at a derived opacity in [0.3, 0.79].
    """
    complexity = derive_complexity(seed)
    color = derive_background_color(seed)
    decorations: List[Primitive] = []

    for i in range(complexity):
        x = (derive_channel(seed, DECORATION_X_OFFSET + i) % canvas_size) * 0.8 + canvas_size * 0.1
        y = (derive_channel(seed, DECORATION_Y_OFFSET + i) % canvas_size) * 0.8 + canvas_size * 0.1
        size = (derive_channel(seed, DECORATION_SIZE_OFFSET + i) % (canvas_size / 10)) + 5
        opacity = 0.3 + (derive_channel(seed, DECORATION_OPACITY_OFFSET + i) % 50) / 100

        if i % 2 == 0:
            decorations.append(Circle(x, y, size, color, opacity))
        else:
            decorations.append(Rect(x - size / 2, y - size / 2, size, size, color, opacity))

    return tuple(decorations)


def generate_mask_gradient(seed: int) -> RadialGradient:
    return RadialGradient(id=gradient_id_for(seed), stops=MASK_STOPS)


def generate_image(seed: int) -> VectorImage:
    """
    Generate the artwork for a token id.

    Args:
        seed: Non-negative token id

    Returns:
        The assembled VectorImage

    Raises:
        ValueError: If seed is negative
    """
    canvas = CANVAS_SIZE
    center_x = canvas / 2
    center_y = canvas / 2

    pattern = derive_pattern(seed)
    size_modifier = derive_size_modifier(seed)
    gradient = generate_mask_gradient(seed)

    image = VectorImage(
        seed=seed,
        size=canvas,
        background=Rect(0, 0, canvas, canvas, derive_background_color(seed)),
        decorations=generate_decorations(seed, canvas),
        main_shape=generate_main_shape(
            pattern,
            derive_shape_color(seed),
            center_x,
            center_y,
            BASE_SHAPE_SIZE * size_modifier,
        ),
        gradient=gradient,
        overlay=Rect(0, 0, canvas, canvas, f"url(#{gradient.id})"),
        pattern=pattern,
        size_modifier=size_modifier,
        rotation=derive_rotation(seed),
        complexity=derive_complexity(seed),
        center=(center_x, center_y),
    )
    logger.debug(f"Generated image for seed {seed}: pattern={pattern.name}, complexity={image.complexity}")
    return image


def generate_preview_tokens(start_id: int = 1, count: int = 12) -> List[PreviewToken]:
    """
    Pre-generate a run of consecutive tokens for gallery display.

    Args:
        start_id: First token id
        count: Number of tokens

    Returns:
        List of PreviewToken with rendered SVG markup
    """
    from .render import to_svg

    tokens = []
    for token_id in range(start_id, start_id + count):
        image = generate_image(token_id)
        tokens.append(PreviewToken(id=token_id, svg=to_svg(image), image=image))
    return tokens
