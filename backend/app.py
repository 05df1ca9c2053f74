"""Flask app serving artwork theming colors.

Run with ``flask --app backend.app run`` or under gunicorn.
"""

import logging

from flask import Flask
from flask_cors import CORS

from backend.core.config import LOG_LEVEL
from backend.routes.colors import bp as colors_bp


def _configure_logging() -> None:
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    gunicorn_error = logging.getLogger("gunicorn.error")
    root = logging.getLogger()
    if gunicorn_error.handlers:
        root.handlers = gunicorn_error.handlers
        root.setLevel(level)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


_configure_logging()

app = Flask(__name__)
CORS(app)

# register routes
app.register_blueprint(colors_bp)
