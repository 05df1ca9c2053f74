"""Tests for artwork fetching, decoding and scaling."""

import pytest
import requests
import spotipy
from PIL import Image

from src.theming.io import images
from src.theming.io.images import fetch_image, pick_image_url, resolve_spotify_image_url


class FakeResponse:
    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requested = []

    def get(self, url, timeout=None):
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self.response


class FakeSpotify:
    def __init__(self, items=None, error=None):
        self.items = items or {}
        self.error = error

    def _lookup(self, uri):
        if self.error is not None:
            raise self.error
        return self.items.get(uri)

    track = album = artist = _lookup


ARTWORK = [
    {"url": "https://i.scdn.co/640", "height": 640, "width": 640},
    {"url": "https://i.scdn.co/300", "height": 300, "width": 300},
    {"url": "https://i.scdn.co/64", "height": 64, "width": 64},
]


def test_fetch_scales_to_fill(png_bytes):
    payload = png_bytes(Image.new("RGB", (256, 512), (10, 200, 30)))
    session = FakeSession(FakeResponse(payload))

    img = fetch_image("https://example.com/cover.png", session=session)

    assert session.requested == ["https://example.com/cover.png"]
    assert img.mode == "RGBA"
    assert img.size == (128, 256)
    assert img.getpixel((10, 10))[:3] == (10, 200, 30)


def test_fetch_upscales_small_artwork(png_bytes):
    payload = png_bytes(Image.new("RGB", (64, 32), (0, 0, 0)))
    img = fetch_image("https://example.com/tiny.png", session=FakeSession(FakeResponse(payload)))
    assert img.size == (256, 128)


def test_fetch_http_error_returns_none():
    session = FakeSession(FakeResponse(status_code=404))
    assert fetch_image("https://example.com/missing.png", session=session) is None


def test_fetch_network_error_returns_none():
    session = FakeSession(error=requests.ConnectionError("unreachable"))
    assert fetch_image("https://example.com/cover.png", session=session) is None


def test_fetch_undecodable_payload_returns_none():
    session = FakeSession(FakeResponse(b"<html>not an image</html>"))
    assert fetch_image("https://example.com/page", session=session) is None


def test_fetch_oversized_payload_returns_none(monkeypatch, png_bytes):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10_000)
    payload = png_bytes(Image.new("RGB", (400, 400), (255, 215, 0)))
    session = FakeSession(FakeResponse(payload))
    assert fetch_image("https://example.com/huge.png", session=session) is None


@pytest.mark.parametrize("locator", ["", "   "])
def test_fetch_empty_locator_returns_none(locator):
    session = FakeSession(error=AssertionError("should not be called"))
    assert fetch_image(locator, session=session) is None
    assert session.requested == []


def test_fetch_invalid_url_returns_none():
    assert fetch_image("not a url") is None


def test_pick_image_url():
    assert pick_image_url(ARTWORK, 128) == "https://i.scdn.co/300"
    assert pick_image_url(ARTWORK, 64) == "https://i.scdn.co/64"
    assert pick_image_url(ARTWORK, 1000) == "https://i.scdn.co/640"
    assert pick_image_url([], 128) is None


def test_resolve_track_uses_album_artwork():
    sp = FakeSpotify({"spotify:track:abc": {"album": {"images": ARTWORK}}})
    assert resolve_spotify_image_url("spotify:track:abc", 128, sp=sp) == "https://i.scdn.co/300"


def test_resolve_artist_artwork():
    sp = FakeSpotify({"spotify:artist:xyz": {"images": ARTWORK}})
    assert resolve_spotify_image_url("spotify:artist:xyz", 600, sp=sp) == "https://i.scdn.co/640"


def test_resolve_unsupported_uri():
    assert resolve_spotify_image_url("spotify:playlist:abc", sp=FakeSpotify()) is None


def test_resolve_spotify_error_returns_none():
    error = spotipy.exceptions.SpotifyException(404, -1, "not found")
    assert resolve_spotify_image_url("spotify:album:abc", sp=FakeSpotify(error=error)) is None


def test_fetch_spotify_uri(monkeypatch, png_bytes):
    sp = FakeSpotify({"spotify:album:abc": {"images": ARTWORK}})
    monkeypatch.setattr(images, "_spotify_client", lambda: sp)
    payload = png_bytes(Image.new("RGB", (300, 300), (255, 215, 0)))
    session = FakeSession(FakeResponse(payload))

    img = fetch_image("spotify:album:abc", session=session)

    assert session.requested == ["https://i.scdn.co/300"]
    assert img.size == (128, 128)


def test_fetch_unresolvable_spotify_uri(monkeypatch):
    monkeypatch.setattr(images, "_spotify_client", lambda: FakeSpotify())
    session = FakeSession(error=AssertionError("should not be called"))
    assert fetch_image("spotify:track:missing", session=session) is None
