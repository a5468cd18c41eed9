"""Settings tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from services.responder.app import create_app
from services.responder.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "RESPONDER_HOST",
        "RESPONDER_PORT",
        "RESPONDER_LOG_LEVEL",
        "RESPONDER_LOG_FORMAT",
        "RESPONDER_SERVICE_NAME",
        "RESPONDER_SERVICE_AUTHOR",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.host == "0.0.0.0"
    assert settings.port == 8001
    assert settings.log_level == "INFO"
    assert settings.log_format == "text"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESPONDER_PORT", "9100")
    monkeypatch.setenv("RESPONDER_LOG_LEVEL", "debug")
    monkeypatch.setenv("RESPONDER_SERVICE_AUTHOR", "Platform Team")

    settings = Settings(_env_file=None)

    assert settings.port == 9100
    assert settings.log_level == "DEBUG"
    assert settings.service_info().author == "Platform Team"
    assert settings.service_info().port == 9100


@pytest.mark.parametrize("port", ["0", "70000", "http"])
def test_invalid_port_rejected(monkeypatch: pytest.MonkeyPatch, port: str) -> None:
    monkeypatch.setenv("RESPONDER_PORT", port)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_unknown_log_format_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")


def test_info_route_reflects_settings() -> None:
    settings = Settings(_env_file=None, port=8080, service_name="edge-responder")
    client = TestClient(create_app(settings))

    response = client.get("/api/info")

    assert response.status_code == 200
    assert response.json()["service"] == "edge-responder"
    assert response.json()["port"] == 8080
