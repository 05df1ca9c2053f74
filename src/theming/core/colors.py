"""Color utilities for theming.

Colors are plain tuples: ``(r, g, b)`` for opaque colors and
``(r, g, b, a)`` where opacity matters, every channel in 0-255.
"""

from __future__ import annotations

from dataclasses import dataclass

from .constants import BLACK, MIN_CONTRAST_BODY_TEXT, MIN_CONTRAST_TITLE_TEXT, WHITE

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]

_ALPHA_SEARCH_MAX_ITERATIONS = 10
_ALPHA_SEARCH_PRECISION = 1


def to_hex(color: tuple) -> str:
    """Format an RGB or RGBA tuple as ``#RRGGBB`` / ``#RRGGBBAA``."""
    return "#" + "".join(f"{int(c):02X}" for c in color)


def parse_hex(value: str) -> tuple:
    """Parse ``#RRGGBB`` or ``#RRGGBBAA`` (leading ``#`` optional).

    Raises:
        ValueError: If the string is not a 6 or 8 digit hex color.
    """
    digits = value.strip().lstrip("#")
    if len(digits) not in (6, 8):
        raise ValueError(f"Invalid hex color: {value!r}")
    return tuple(int(digits[i : i + 2], 16) for i in range(0, len(digits), 2))


def with_alpha(color: tuple, alpha: int) -> RGBA:
    r, g, b = color[:3]
    return (r, g, b, alpha)


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: tuple) -> float:
    """WCAG relative luminance of the RGB part of ``color`` (0.0 - 1.0)."""
    r, g, b = color[:3]
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def composite_colors(foreground: tuple, background: tuple) -> RGBA:
    """Draw ``foreground`` over ``background`` and return the resulting color."""
    fa = foreground[3] if len(foreground) == 4 else 255
    ba = background[3] if len(background) == 4 else 255
    a = 255 - (255 - ba) * (255 - fa) // 255
    if a == 0:
        return (0, 0, 0, 0)
    out = tuple(
        (fc * 255 * fa + bc * ba * (255 - fa)) // (a * 255)
        for fc, bc in zip(foreground[:3], background[:3])
    )
    return (*out, a)


def contrast_ratio(foreground: tuple, background: tuple) -> float:
    """WCAG contrast ratio between two colors, from 1.0 to 21.0.

    A translucent foreground is composited over the background first.
    """
    if len(foreground) == 4 and foreground[3] < 255:
        foreground = composite_colors(foreground, background)
    fg = relative_luminance(foreground) + 0.05
    bg = relative_luminance(background) + 0.05
    return max(fg, bg) / min(fg, bg)


def calculate_minimum_alpha(
    foreground: tuple, background: tuple, min_contrast_ratio: float
) -> int:
    """Find the lowest alpha for ``foreground`` that still reaches the ratio.

    Args:
        foreground: Text color; its own alpha is ignored.
        background: Opaque color the text is drawn on.
        min_contrast_ratio: Target contrast ratio.

    Returns:
        Alpha in 0-255, or -1 if even a fully opaque foreground fails.

    Raises:
        ValueError: If ``background`` is not opaque.
    """
    if len(background) == 4 and background[3] != 255:
        raise ValueError(f"background can not be translucent: {to_hex(background)}")

    if contrast_ratio(with_alpha(foreground, 255), background) < min_contrast_ratio:
        return -1

    min_alpha, max_alpha = 0, 255
    iterations = 0
    while (
        iterations <= _ALPHA_SEARCH_MAX_ITERATIONS
        and max_alpha - min_alpha > _ALPHA_SEARCH_PRECISION
    ):
        test_alpha = (min_alpha + max_alpha) // 2
        ratio = contrast_ratio(with_alpha(foreground, test_alpha), background)
        if ratio < min_contrast_ratio:
            min_alpha = test_alpha
        else:
            max_alpha = test_alpha
        iterations += 1
    return max_alpha


def body_text_color(rgb: RGB) -> RGBA:
    """Pick a readable body text color (white or black, with alpha) for ``rgb``.

    White is preferred when both its body and title variants are readable,
    then black; otherwise whichever body variant works.
    """
    light_body = calculate_minimum_alpha(WHITE, rgb, MIN_CONTRAST_BODY_TEXT)
    light_title = calculate_minimum_alpha(WHITE, rgb, MIN_CONTRAST_TITLE_TEXT)
    if light_body != -1 and light_title != -1:
        return with_alpha(WHITE, light_body)

    dark_body = calculate_minimum_alpha(BLACK, rgb, MIN_CONTRAST_BODY_TEXT)
    dark_title = calculate_minimum_alpha(BLACK, rgb, MIN_CONTRAST_TITLE_TEXT)
    if dark_body != -1 and dark_title != -1:
        return with_alpha(BLACK, dark_body)

    if light_body != -1:
        return with_alpha(WHITE, light_body)
    if dark_body != -1:
        return with_alpha(BLACK, dark_body)
    return with_alpha(BLACK, 255)


@dataclass(frozen=True)
class Swatch:
    """A representative color of an image and how many pixels it stands for."""

    rgb: RGB
    population: int
    body_text_color: RGBA

    @classmethod
    def from_rgb(cls, rgb: tuple, population: int) -> "Swatch":
        rgb = tuple(int(c) for c in rgb[:3])
        return cls(rgb=rgb, population=population, body_text_color=body_text_color(rgb))

    def to_dict(self) -> dict:
        return {
            "color": to_hex(self.rgb),
            "population": self.population,
            "body_text_color": to_hex(self.body_text_color),
        }


@dataclass(frozen=True)
class DominantColors:
    """Accent color and the color of content drawn on it."""

    color: RGB
    on_color: RGBA

    def to_dict(self) -> dict:
        return {"color": to_hex(self.color), "on_color": to_hex(self.on_color[:3])}
