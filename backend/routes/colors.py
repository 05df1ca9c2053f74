import logging

from flask import Blueprint, jsonify, request

from backend.core.config import DEFAULT_COLOR, DEFAULT_ON_COLOR
from backend.services import theming
from src.theming import to_hex

logger = logging.getLogger(__name__)

bp = Blueprint("colors", __name__)


@bp.route("/dominant_color", methods=["GET"])
def dominant_color():
    """Compute the theming colors for an artwork.

    Args:
        None. Reads the ``url`` query parameter (http(s) URL or Spotify URI).

    Returns:
        flask.Response: JSON with ``color``, ``on_color`` and ``fallback``.
        The configured default colors are returned with ``fallback: true``
        when no suitable color is found. 4xx/5xx with ``error`` message on failure.
    """
    url = request.args.get("url", "").strip()
    if not url:
        return jsonify({"error": "Missing url parameter"}), 400

    try:
        result = theming.dominant_color_wrapper(url)
    except Exception as e:
        logger.exception("dominant_color failed for %s", url)
        return jsonify({"error": f"Color extraction failed: {str(e)}"}), 500

    if result is None:
        return jsonify(
            {
                "color": to_hex(DEFAULT_COLOR[:3]),
                "on_color": to_hex(DEFAULT_ON_COLOR[:3]),
                "fallback": True,
            }
        ), 200
    return jsonify({**result.to_dict(), "fallback": False}), 200


@bp.route("/swatches", methods=["GET"])
def swatches():
    """List the swatches of an artwork, most populous first.

    Returns:
        flask.Response: JSON with a ``swatches`` list of ``color``,
        ``population`` and ``body_text_color`` entries.
    """
    url = request.args.get("url", "").strip()
    if not url:
        return jsonify({"error": "Missing url parameter"}), 400

    try:
        found = theming.swatches_wrapper(url)
    except Exception as e:
        logger.exception("swatches failed for %s", url)
        return jsonify({"error": f"Color extraction failed: {str(e)}"}), 500

    return jsonify({"swatches": [swatch.to_dict() for swatch in found]}), 200
