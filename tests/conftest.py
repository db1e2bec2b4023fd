import pytest
from fastapi.testclient import TestClient

from connections.config import Settings
from connections.main import create_app


class FakeResponse:
    """Stands in for requests.Response in the outbound client stubs."""

    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ""

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


def make_settings(**overrides) -> Settings:
    values = dict(
        google_api_key="test-google-key",
        supabase_url="https://example.supabase.co",
        supabase_key="test-supabase-key",
        supabase_table_name="userData",
        frontend_origin="https://frontend.example.com",
        app_env="production",
        timeout=5,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def settings_factory():
    return make_settings


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def dev_settings():
    return make_settings(app_env="development")


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))


@pytest.fixture
def dev_client(dev_settings):
    return TestClient(create_app(dev_settings))
