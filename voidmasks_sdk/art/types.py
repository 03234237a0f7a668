"""
Data types for the artwork generator.

Every type here is a frozen dataclass: a VectorImage is built once per
generator call and never mutated afterwards.
"""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple, Union


class Pattern(IntEnum):
    """Main shape selected by the pattern channel."""
    CIRCLE = 0
    TRIANGLE = 1
    SQUARE = 2
    DIAMOND = 3
    CROSS = 4


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB triplet."""
    r: int
    g: int
    b: int

    @classmethod
    def from_channel(cls, value: int) -> "Color":
        return cls(r=(value >> 16) & 0xFF, g=(value >> 8) & 0xFF, b=value & 0xFF)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self) -> str:
        return f"rgb({self.r},{self.g},{self.b})"


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: Union[Color, str]
    opacity: float = 1.0


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: Union[Color, str]
    opacity: float = 1.0


@dataclass(frozen=True)
class Polygon:
    points: Tuple[Tuple[float, float], ...]
    fill: Union[Color, str]
    opacity: float = 1.0


Primitive = Union[Rect, Circle, Polygon]


@dataclass(frozen=True)
class GradientStop:
    offset: str
    color: str
    opacity: float


@dataclass(frozen=True)
class RadialGradient:
    """
    Radial gradient definition used by the vignette overlay.

    Attributes:
        id: Identifier referenced by the overlay's ``url(#...)`` fill
        stops: Gradient stops from the centre outwards
        cx: Centre x as a percentage string
        cy: Centre y as a percentage string
        r: Radius as a percentage string
    """
    id: str
    stops: Tuple[GradientStop, ...]
    cx: str = "50%"
    cy: str = "50%"
    r: str = "50%"


@dataclass(frozen=True)
class VectorImage:
    """
    A generated artwork, ready to be serialized by a renderer.

    Attributes:
        seed: Token id the image was generated from
        size: Width and height of the square canvas
        background: Full-canvas background rectangle
        decorations: Decorative primitives, drawn before the main shape
        main_shape: Primitives of the main shape (two rects for a cross)
        gradient: Overlay gradient definition
        overlay: Full-canvas rectangle filled with the gradient
        pattern: Pattern the main shape was drawn from
        size_modifier: Factor applied to the base shape size
        rotation: Rotation in degrees, reserved and not applied to geometry
        complexity: Number of decorations
    """
    seed: int
    size: int
    background: Rect
    decorations: Tuple[Primitive, ...]
    main_shape: Tuple[Primitive, ...]
    gradient: RadialGradient
    overlay: Rect
    pattern: Pattern
    size_modifier: float
    rotation: int
    complexity: int
    center: Tuple[float, float] = field(default=(0.0, 0.0))

    @property
    def primitives(self) -> Tuple[Primitive, ...]:
        """All primitives in draw order."""
        return (self.background,) + self.decorations + self.main_shape + (self.overlay,)


@dataclass(frozen=True)
class PreviewToken:
    id: int
    svg: str
    image: Optional[VectorImage] = None
