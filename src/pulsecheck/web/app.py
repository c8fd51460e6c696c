from __future__ import annotations

from flask import Flask, jsonify

from pulsecheck.config import PulseCheckConfig
from pulsecheck.errors import PulseCheckError


def create_app(
    pulse_config: PulseCheckConfig | None = None,
    config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})
    app.extensions["pulsecheck_config"] = pulse_config or PulseCheckConfig()

    from pulsecheck.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    @app.errorhandler(PulseCheckError)
    def _pulsecheck_error(exc: PulseCheckError):
        return jsonify({"error": str(exc), "type": type(exc).__name__}), 400

    return app
