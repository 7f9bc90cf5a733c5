import pytest
from fastapi.testclient import TestClient

from app import create_app
from app.config.config import Config

class StubConfig(Config):
    VOICE_ANNOUNCEMENT_BASE_URL = "https://foo.com/bar"
    SUPPORTED_LOCALES = "pt-BR,ru"
    DEFAULT_LOCALE = "en-US"
    LOG_LEVEL = "DEBUG"

@pytest.fixture
def stub_config():
    return StubConfig

@pytest.fixture
def client(stub_config):
    app = create_app(stub_config)
    with TestClient(app) as test_client:
        yield test_client
