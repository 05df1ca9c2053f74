"""Common theming constants used across modules."""

from PIL import Image

# Artwork is scaled so its smaller side matches this (in pixels)
IMAGE_SIZE: int = 128
# Upper bound on swatches produced by the quantizer
MAX_COLOR_COUNT: int = 8
# Minimum contrast of the dominant color against black
MIN_CONTRAST_RATIO: float = 3.0
# Readability targets for text drawn on a swatch
MIN_CONTRAST_TITLE_TEXT: float = 3.0
MIN_CONTRAST_BODY_TEXT: float = 4.5
# Pixels below this alpha are ignored by the quantizer
MIN_PIXEL_ALPHA: int = 125
# Results kept per DominantColorState instance
CACHE_SIZE: int = 12
# Seconds before an artwork download is abandoned
FETCH_TIMEOUT: float = 10.0

BLACK: tuple[int, int, int] = (0, 0, 0)
WHITE: tuple[int, int, int] = (255, 255, 255)

# Resampling filter for image resizing
RESAMPLING_FILTER = Image.Resampling.BILINEAR
