"""Shared fixtures for theming tests."""

from io import BytesIO

import pytest
from PIL import Image


def _two_color_image(major, minor, size=(64, 64), major_share=0.75):
    """Image whose top rows are ``major`` and bottom rows ``minor``."""
    width, height = size
    img = Image.new("RGBA", size, minor)
    split = int(height * major_share)
    img.paste(Image.new("RGBA", (width, split), major), (0, 0))
    return img


@pytest.fixture
def two_color_image():
    return _two_color_image


@pytest.fixture
def png_bytes():
    def _encode(img):
        buf = BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()

    return _encode
