import asyncio

from backend.core.config import (
    FETCH_TIMEOUT,
    IMAGE_SIZE,
    MAX_COLOR_COUNT,
    MIN_CONTRAST_RATIO,
)
from src.theming import (
    calculate_dominant_color,
    calculate_swatches_in_image,
    extract_swatches,
    fetch_image,
)


def _fetch(url):
    return fetch_image(url, size=IMAGE_SIZE, timeout=FETCH_TIMEOUT)


def _quantize(img):
    return extract_swatches(img, max_colors=MAX_COLOR_COUNT)


def dominant_color_wrapper(url, fetch=None, quantize=None):
    """Blocking wrapper around ``calculate_dominant_color`` using configured policy.

    Args:
        url (str): Artwork URL or Spotify URI.
        fetch: Image fetcher, defaults to the configured one.
        quantize: Swatch extractor, defaults to the configured one.

    Returns:
        DominantColors or None.
    """
    return asyncio.run(
        calculate_dominant_color(
            url,
            fetch=fetch or _fetch,
            quantize=quantize or _quantize,
            min_contrast=MIN_CONTRAST_RATIO,
        )
    )


def swatches_wrapper(url, fetch=None, quantize=None):
    """Blocking wrapper returning swatches sorted by population, largest first.

    Args:
        url (str): Artwork URL or Spotify URI.

    Returns:
        list[Swatch]: Possibly empty.
    """
    swatches = asyncio.run(
        calculate_swatches_in_image(
            url, fetch=fetch or _fetch, quantize=quantize or _quantize
        )
    )
    return sorted(swatches, key=lambda swatch: swatch.population, reverse=True)
