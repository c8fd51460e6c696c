from __future__ import annotations

import pytest

from pulsecheck.config import PulseCheckConfig
from pulsecheck.web.app import create_app


@pytest.fixture
def app():
    """Create a Flask app for testing."""
    application = create_app(pulse_config=PulseCheckConfig())
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
