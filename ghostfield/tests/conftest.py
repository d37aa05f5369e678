"""
Pytest fixtures for GhostField tests.
Pins the clock and the secret so wire ids are reproducible.
"""
import os
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

# Set before config loads; must override any .env values
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["SIGIL_ENABLED"] = "true"
os.environ["SEED_DEFAULT_HONEYPOTS"] = "true"
os.environ["TIMEZONE"] = ""

from ghostfield.app.core.dependencies import get_now
from ghostfield.app.services.ghost_field import GhostField
from ghostfield.main import app

SECRET = "test-secret-key"
FIXED_NOW = datetime(2025, 3, 14, 15, 9, 26, tzinfo=timezone.utc)
FIREFOX_UA = "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def ghost(now):
    """GhostField with a contact form, default honeypots and no sigil."""
    gf = GhostField(SECRET, now)
    gf.add_legit("name").add_legit("email", "email").add_legit("message")
    gf.create_fields()
    return gf


@pytest.fixture
def sigil_ghost(ghost):
    return ghost.enable_sigil()


@pytest.fixture
def client(now):
    """TestClient with the request clock pinned."""
    app.dependency_overrides[get_now] = lambda: now
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_now, None)
