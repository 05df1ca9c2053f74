"""Async pipeline: fetch artwork, extract swatches, select the dominant color."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from PIL import Image

from ..io.images import fetch_image
from .colors import RGB, DominantColors, Swatch
from .constants import MIN_CONTRAST_RATIO
from .palette import extract_swatches, select_dominant_color

logger = logging.getLogger(__name__)

ImageFetcher = Callable[[str], Optional[Image.Image]]
Quantizer = Callable[[Image.Image], list[Swatch]]


async def calculate_swatches_in_image(
    url: str,
    fetch: ImageFetcher = fetch_image,
    quantize: Quantizer = extract_swatches,
) -> list[Swatch]:
    """Fetch ``url`` and quantize it into swatches.

    Both steps run in worker threads so the event loop is never blocked.
    Returns an empty list if the image can not be fetched.
    """
    img = await asyncio.to_thread(fetch, url)
    if img is None:
        logger.info("dominant: no image for %s", url)
        return []
    return await asyncio.to_thread(quantize, img)


async def calculate_dominant_color(
    url: str,
    fetch: ImageFetcher = fetch_image,
    quantize: Quantizer = extract_swatches,
    min_contrast: float = MIN_CONTRAST_RATIO,
    is_color_valid: Optional[Callable[[RGB], bool]] = None,
) -> Optional[DominantColors]:
    """Compute the dominant theming colors of the image at ``url``.

    Returns:
        DominantColors, or None when the image is unavailable or no swatch
        has enough contrast. Callers fall back to their default colors.
    """
    swatches = await calculate_swatches_in_image(url, fetch, quantize)
    result = select_dominant_color(swatches, min_contrast, is_color_valid)
    if result is None:
        logger.info("dominant: no suitable color in %d swatches for %s", len(swatches), url)
    return result
