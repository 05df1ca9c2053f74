"""Artwork fetch utilities for web URLs and Spotify URIs."""

from __future__ import annotations

import logging
import os
from io import BytesIO
from typing import Dict, List, Optional

import requests
import spotipy
from PIL import Image, UnidentifiedImageError
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from ..core.constants import FETCH_TIMEOUT, IMAGE_SIZE, RESAMPLING_FILTER

logger = logging.getLogger(__name__)

SPOTIFY_KINDS = ("track", "album", "artist")


def _spotify_client() -> spotipy.Spotify:
    client_id = os.getenv("SPOTIFY_CLIENT_ID")
    client_secret = os.getenv("SPOTIFY_CLIENT_SECRET")
    client_credentials_manager = SpotifyClientCredentials(
        client_id=client_id, client_secret=client_secret
    )
    return spotipy.Spotify(client_credentials_manager=client_credentials_manager)


def pick_image_url(images: List[Dict], target_size: int) -> Optional[str]:
    """Choose the smallest image at least ``target_size`` tall, else the largest."""
    images_sorted = sorted(images, key=lambda img: img.get("height") or 0)
    for img in images_sorted:
        if (img.get("height") or 0) >= target_size:
            return img["url"]
    if images_sorted:
        return images_sorted[-1]["url"]
    return None


def resolve_spotify_image_url(
    uri: str, target_size: int = IMAGE_SIZE, sp: Optional[spotipy.Spotify] = None
) -> Optional[str]:
    """Resolve ``spotify:{track,album,artist}:<id>`` to an artwork URL.

    Tracks use their album's artwork. Returns None on any lookup failure.
    """
    parts = uri.split(":")
    if len(parts) != 3 or parts[1] not in SPOTIFY_KINDS or not parts[2]:
        logger.warning("images: unsupported Spotify URI %s", uri)
        return None
    kind = parts[1]

    try:
        sp = sp or _spotify_client()
        item = getattr(sp, kind)(uri)
    except (spotipy.exceptions.SpotifyException, SpotifyOauthError) as e:
        logger.warning("images: Spotify lookup failed for %s: %s", uri, e)
        return None
    except requests.RequestException as e:
        logger.warning("images: Spotify request failed for %s: %s", uri, e)
        return None

    if not item:
        return None
    if kind == "track":
        item = item.get("album") or {}
    return pick_image_url(item.get("images") or [], target_size)


def scale_to_fill(img: Image.Image, size: int) -> Image.Image:
    """Resize so the smaller side equals ``size``, keeping the aspect ratio."""
    width, height = img.size
    factor = size / min(width, height)
    target = (max(1, round(width * factor)), max(1, round(height * factor)))
    if target == img.size:
        return img
    return img.resize(target, RESAMPLING_FILTER)


def fetch_image(
    locator: str,
    size: int = IMAGE_SIZE,
    session: Optional[requests.Session] = None,
    timeout: float = FETCH_TIMEOUT,
) -> Optional[Image.Image]:
    """Download and decode an image, scaled to fill ``size`` x ``size``.

    Args:
        locator: http(s) URL or Spotify URI of the artwork.
        size: Target length of the smaller side, in pixels.
        session: Optional requests session to download with.
        timeout: Request timeout in seconds.

    Returns:
        An RGBA PIL Image, or None if the image could not be fetched or decoded.
    """
    if not locator or not locator.strip():
        logger.warning("images: empty locator")
        return None

    url = locator.strip()
    if url.startswith("spotify:"):
        url = resolve_spotify_image_url(url, size)
        if url is None:
            return None

    try:
        response = (session or requests).get(url, timeout=timeout)
        response.raise_for_status()
        with Image.open(BytesIO(response.content)) as img:
            img.load()
            rgba = img.convert("RGBA")
    except requests.RequestException as e:
        logger.warning("images: fetch failed for %s: %s", url, e)
        return None
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as e:
        logger.warning("images: decode failed for %s: %s", url, e)
        return None

    if min(rgba.size) == 0:
        return None
    return scale_to_fill(rgba, size)
