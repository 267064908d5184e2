import logging

import pytest

from guacamole_client.clients.guacamole import GuacamoleClient
from guacamole_client.models.auth import SessionState


GUACAMOLE_URL = "http://guacamole.example.com/guacamole"
DATA_ROOT = f"{GUACAMOLE_URL}/api/session/data/postgresql"


@pytest.fixture(autouse=True)
def debug_logging(caplog):
    """Capture client logs at DEBUG level for every test."""
    caplog.set_level(logging.DEBUG)
    yield caplog


@pytest.fixture
def client():
    """An already authenticated client, so tests need not exercise the login flow."""
    client = GuacamoleClient(GUACAMOLE_URL)
    client.state = SessionState(auth_token="test-token", data_source="postgresql")
    yield client
    client.close()


@pytest.fixture
def data_root():
    return DATA_ROOT
