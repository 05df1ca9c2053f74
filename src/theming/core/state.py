"""Holder for the current dominant colors of a themed view.

Keeps a small LRU cache of results per instance so that revisiting the
same artwork does not fetch and quantize it again.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Callable, Optional

from ..io.images import fetch_image
from .colors import RGB, RGBA, DominantColors, with_alpha
from .constants import CACHE_SIZE, MIN_CONTRAST_RATIO
from .dominant import ImageFetcher, Quantizer, calculate_dominant_color
from .palette import extract_swatches, has_min_contrast


class DominantColorState:
    """Current accent colors, falling back to defaults when none can be found.

    Args:
        default_color: Color used before any update and after failures.
        default_on_color: Content color paired with ``default_color``.
        cache_size: Results to remember by URL; 0 disables caching.
        is_color_valid: Predicate a swatch color must satisfy. Defaults to
            a minimum contrast of 3.0 against black.
        fetch: Image fetcher, ``fetch(url) -> Image | None``.
        quantize: Swatch extractor, ``quantize(image) -> list[Swatch]``.
    """

    def __init__(
        self,
        default_color: RGB,
        default_on_color: tuple,
        cache_size: int = CACHE_SIZE,
        is_color_valid: Optional[Callable[[RGB], bool]] = None,
        fetch: ImageFetcher = fetch_image,
        quantize: Quantizer = extract_swatches,
    ) -> None:
        self.default_color: RGB = tuple(default_color[:3])
        self.default_on_color: RGBA = with_alpha(default_on_color, 255)
        self.color: RGB = self.default_color
        self.on_color: RGBA = self.default_on_color
        self.cache_size = cache_size
        self.is_color_valid = is_color_valid or (
            lambda rgb: has_min_contrast(rgb, MIN_CONTRAST_RATIO)
        )
        self._fetch = fetch
        self._quantize = quantize
        self._cache: "OrderedDict[str, DominantColors]" = OrderedDict()

    async def update_colors_from_image_url(self, url: str) -> None:
        result = await self._calculate_dominant_color(url)
        if result is None:
            self.color = self.default_color
            self.on_color = self.default_on_color
        else:
            self.color = result.color
            self.on_color = result.on_color

    def reset(self) -> None:
        self.color = self.default_color
        self.on_color = self.default_on_color

    async def _calculate_dominant_color(self, url: str) -> Optional[DominantColors]:
        cached = self._cache.get(url)
        if cached is not None:
            self._cache.move_to_end(url)
            return cached

        result = await calculate_dominant_color(
            url,
            fetch=self._fetch,
            quantize=self._quantize,
            is_color_valid=self.is_color_valid,
        )
        if result is not None and self.cache_size > 0:
            self._cache[url] = result
            while len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)
        return result
