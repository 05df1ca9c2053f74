"""Dominant accent colors from artwork.

Fetch an image, quantize it into swatches and pick the most populous
color readable against black, e.g.::

    colors = await calculate_dominant_color(url)
"""

from .core.colors import (
    DominantColors,
    Swatch,
    body_text_color,
    calculate_minimum_alpha,
    composite_colors,
    contrast_ratio,
    parse_hex,
    relative_luminance,
    to_hex,
)
from .core.constants import (
    CACHE_SIZE,
    FETCH_TIMEOUT,
    IMAGE_SIZE,
    MAX_COLOR_COUNT,
    MIN_CONTRAST_RATIO,
    RESAMPLING_FILTER,
)
from .core.dominant import calculate_dominant_color, calculate_swatches_in_image
from .core.palette import extract_swatches, has_min_contrast, select_dominant_color
from .core.state import DominantColorState
from .io.images import fetch_image, resolve_spotify_image_url

__all__ = [
    "CACHE_SIZE",
    "FETCH_TIMEOUT",
    "IMAGE_SIZE",
    "MAX_COLOR_COUNT",
    "MIN_CONTRAST_RATIO",
    "RESAMPLING_FILTER",
    "DominantColors",
    "Swatch",
    "body_text_color",
    "calculate_minimum_alpha",
    "composite_colors",
    "contrast_ratio",
    "parse_hex",
    "relative_luminance",
    "to_hex",
    "calculate_dominant_color",
    "calculate_swatches_in_image",
    "extract_swatches",
    "has_min_contrast",
    "select_dominant_color",
    "DominantColorState",
    "fetch_image",
    "resolve_spotify_image_url",
]
