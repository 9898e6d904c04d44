"""
project: Excavator
module: __init__.py
License: MIT

Flask application setup.

Wires the excavation API blueprint into a Flask app. Configuration is sourced
from environment variables (optionally via a local .env file) with reasonable
defaults for development. A local `instance/` directory holds runtime data such
as the log file.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

# Load .env if present so EXCAVATOR_* settings can be supplied without exporting
# shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # Read-only checkouts still serve requests; only file logging needs this.
    pass

app.config.update(
    # Excavation overrides; None means "use ExcavationConfig defaults"
    EXCAVATOR_TOKEN_PREFIX=os.getenv("EXCAVATOR_TOKEN_PREFIX"),
    EXCAVATOR_SCATTER_OVERFLOW=os.getenv("EXCAVATOR_SCATTER_OVERFLOW"),
    EXCAVATOR_FOLD_CASE_FREQUENCY=os.getenv("EXCAVATOR_FOLD_CASE_FREQUENCY"),
    EXCAVATOR_ENABLE_METRICS=os.getenv("EXCAVATOR_ENABLE_METRICS"),
    EXCAVATOR_DISABLE_CACHE=os.getenv("EXCAVATOR_DISABLE_CACHE", "0") == "1",
)

from excavator.routes.excavation_api import bp_excavation  # noqa: E402

app.register_blueprint(bp_excavation)


def create_app():
    """Return the Flask app instance."""
    return app


@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal", "error_id": error_id}), 500
