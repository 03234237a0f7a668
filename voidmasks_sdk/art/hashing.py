"""
Seed-to-channel derivation for the artwork generator.

A token id is expanded into independent 32-bit "channels" with a
multiplicative hash. Every visual attribute reads one reserved channel, so
the same token id always yields the same image on any machine.
"""
from .types import Color, Pattern

# Knuth's multiplicative hash constant (2**32 / golden ratio)
KNUTH_MULTIPLIER = 2654435761
MODULUS = 2 ** 32

CHANNEL_BACKGROUND = 0
CHANNEL_SHAPE = 1
CHANNEL_PATTERN = 2
CHANNEL_SIZE = 3
CHANNEL_ROTATION = 4
CHANNEL_COMPLEXITY = 5
CHANNEL_GRADIENT_ID = 9

DECORATION_X_OFFSET = 10
DECORATION_Y_OFFSET = 15
DECORATION_SIZE_OFFSET = 20
DECORATION_OPACITY_OFFSET = 25


def derive_channel(seed: int, channel: int) -> int:
    """
    Derive one 32-bit channel value from a seed.

    Args:
        seed: Non-negative token id
        channel: Channel index

    Returns:
        ``(seed * KNUTH_MULTIPLIER + channel) mod 2**32``

    Raises:
        ValueError: If seed or channel is negative
    """
    if seed < 0:
        raise ValueError(f"seed must be non-negative, got {seed}")
    if channel < 0:
        raise ValueError(f"channel must be non-negative, got {channel}")
    return (seed * KNUTH_MULTIPLIER + channel) % MODULUS


def derive_color(seed: int, channel: int) -> Color:
    return Color.from_channel(derive_channel(seed, channel))


def derive_background_color(seed: int) -> Color:
    return derive_color(seed, CHANNEL_BACKGROUND)


def derive_shape_color(seed: int) -> Color:
    return derive_color(seed, CHANNEL_SHAPE)


def derive_pattern(seed: int) -> Pattern:
    return Pattern(derive_channel(seed, CHANNEL_PATTERN) % 5)


def derive_size_modifier(seed: int) -> float:
    """Multiplicative factor in [0.80, 0.99]."""
    return 0.8 + (derive_channel(seed, CHANNEL_SIZE) % 20) / 100


def derive_rotation(seed: int) -> int:
    """Signed rotation in degrees, in [-180, 179]."""
    return (derive_channel(seed, CHANNEL_ROTATION) % 360) - 180


def derive_complexity(seed: int) -> int:
    """Number of decorations, in [2, 4]."""
    return (derive_channel(seed, CHANNEL_COMPLEXITY) % 3) + 2
