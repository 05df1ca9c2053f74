"""Palette extraction and dominant color selection."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from colorthief import MMCQ
from PIL import Image

from .colors import RGB, DominantColors, Swatch, contrast_ratio, with_alpha
from .constants import BLACK, MAX_COLOR_COUNT, MIN_CONTRAST_RATIO, MIN_PIXEL_ALPHA

logger = logging.getLogger(__name__)


def _opaque_pixels(img: Image.Image) -> list[RGB]:
    data = img.convert("RGBA").tobytes()
    return [
        (data[i], data[i + 1], data[i + 2])
        for i in range(0, len(data), 4)
        if data[i + 3] >= MIN_PIXEL_ALPHA
    ]


def extract_swatches(
    img: Optional[Image.Image], max_colors: int = MAX_COLOR_COUNT
) -> list[Swatch]:
    """Quantize an image into at most ``max_colors`` swatches using ColorThief's MMCQ.

    Every opaque pixel is used: the image is expected to be small already,
    and no colors are filtered out (unlike ``ColorThief.get_palette``, which
    drops near-white pixels).

    Args:
        img: PIL Image to analyze, or None.
        max_colors: Maximum number of swatches, between 2 and 256.

    Returns:
        Swatches in quantizer order. Empty if there is no image, no opaque
        pixel, or quantization fails.
    """
    if not 2 <= max_colors <= 256:
        raise ValueError(f"max_colors must be between 2 and 256, got {max_colors}")
    if img is None:
        return []

    pixels = _opaque_pixels(img)
    if not pixels:
        return []

    try:
        # MMCQ stops one box short of its target, ask for one more
        cmap = MMCQ.quantize(pixels, min(max_colors + 1, 256))
    except Exception as e:
        logger.warning("palette: quantization failed: %s", e)
        return []

    swatches = []
    for entry in cmap.vboxes.contents[:max_colors]:
        population = entry["vbox"].count
        # median cut can leave empty boxes behind on low-color images
        if population:
            swatches.append(Swatch.from_rgb(entry["color"], population))
    logger.debug("palette: %d swatches from %d pixels", len(swatches), len(pixels))
    return swatches


def has_min_contrast(rgb: RGB, min_contrast: float = MIN_CONTRAST_RATIO) -> bool:
    return contrast_ratio(rgb, BLACK) >= min_contrast


def select_dominant_color(
    swatches: Iterable[Swatch],
    min_contrast: float = MIN_CONTRAST_RATIO,
    is_color_valid: Optional[Callable[[RGB], bool]] = None,
) -> Optional[DominantColors]:
    """Pick the most populous swatch that is usable as an accent color.

    Args:
        swatches: Candidate swatches; ties in population keep this order.
        min_contrast: Minimum contrast ratio against black.
        is_color_valid: Optional predicate replacing the contrast check.

    Returns:
        DominantColors with an opaque ``on_color``, or None if no swatch qualifies.
    """
    if is_color_valid is None:

        def is_color_valid(rgb: RGB) -> bool:
            return has_min_contrast(rgb, min_contrast)

    ranked = sorted(swatches, key=lambda swatch: swatch.population, reverse=True)
    for swatch in ranked:
        if is_color_valid(swatch.rgb):
            return DominantColors(
                color=swatch.rgb, on_color=with_alpha(swatch.body_text_color, 255)
            )
    return None
