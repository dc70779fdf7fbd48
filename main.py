"""
Nomad Segments – main application entry point

* Flask app exposing the destination segmenter to the itinerary front-end.
* The rendering layer posts the generated trip and gets back per-location
  segments for its tabs, image lookups and map panel.
"""

import os
import logging

from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv

from nomad_segments.api.config import (
    get_cors_origins,
    get_log_level,
    get_port,
    get_secret_key,
    validate_segmenter_config,
)

# --------------------------------------------------------------------------- #
# Environment & logging
# --------------------------------------------------------------------------- #
load_dotenv()

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

validate_segmenter_config()

# --------------------------------------------------------------------------- #
# Flask initialisation
# --------------------------------------------------------------------------- #
app = Flask(__name__)

flask_secret_key = get_secret_key() or os.urandom(32).hex()
if get_secret_key() is None:
    logger.warning("No FLASK_SECRET_KEY found. Generated a temporary key.")
app.secret_key = flask_secret_key

app.config.update(
    SESSION_COOKIE_SECURE=False,
    SESSION_COOKIE_HTTPONLY=True,
    SESSION_COOKIE_SAMESITE="Lax",
    PERMANENT_SESSION_LIFETIME=86400,
)

# CORS for local dev / cross‑origin front‑end requests
CORS(app, origins=get_cors_origins(), supports_credentials=True)

# --------------------------------------------------------------------------- #
# Blueprints
# --------------------------------------------------------------------------- #
from nomad_segments.routes import create_travel_blueprint  # noqa: E402

app.register_blueprint(create_travel_blueprint())


@app.route("/debug")
def debug():
    """Simple JSON health endpoint."""
    return {
        "status": "ok",
        "endpoints": {
            "segments": "/travel/api/segments",
            "segment_days": "/travel/api/segments/<location>/days",
            "health": "/travel/health",
        },
    }

# --------------------------------------------------------------------------- #
# Local development runner ( `python main.py` )
# --------------------------------------------------------------------------- #
if __name__ == "__main__":
    port = get_port()
    logger.info("Starting segments app on http://localhost:%d", port)
    app.run(host="0.0.0.0", port=port, debug=False)

__all__ = ["app"]
