"""Unit tests for client construction and settings"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from ohmyfin import ConfigurationError, Ohmyfin, Settings


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"api_key": None},
        {"api_key": ""},
        {"api_key": "", "base_url": "https://ohmyfin.ai"},
        {"base_url": "http://localhost:8001", "timeout": 5},
    ],
)
def test_missing_api_key_fails(kwargs):
    """Construction without a credential always fails"""
    with pytest.raises(ConfigurationError, match="API key is required"):
        Ohmyfin(**kwargs)


def test_defaults_applied():
    client = Ohmyfin(api_key="abc")

    assert client.base_url == "https://ohmyfin.ai"
    assert client.timeout == 30.0
    assert client.config.api_key == "abc"


def test_custom_base_url_and_timeout():
    client = Ohmyfin(api_key="abc", base_url="http://localhost:8001/", timeout=2.5)

    assert client.base_url == "http://localhost:8001"
    assert client.timeout == 2.5


@pytest.mark.parametrize("base_url", ["ftp://ohmyfin.ai", "ohmyfin.ai", "https://"])
def test_non_http_base_url_rejected(base_url):
    with pytest.raises(ConfigurationError):
        Ohmyfin(api_key="abc", base_url=base_url)


@pytest.mark.parametrize("timeout", [0, -1])
def test_non_positive_timeout_rejected(timeout):
    with pytest.raises(ConfigurationError):
        Ohmyfin(api_key="abc", timeout=timeout)


def test_config_is_frozen():
    client = Ohmyfin(api_key="abc")

    with pytest.raises(PydanticValidationError):
        client.config.api_key = "other"


def test_repr_hides_api_key():
    assert "secret" not in repr(Ohmyfin(api_key="secret"))


def test_from_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("OHMYFIN_API_KEY", "env-key")
    monkeypatch.setenv("OHMYFIN_BASE_URL", "http://mock:8001")
    monkeypatch.setenv("OHMYFIN_TIMEOUT_SECONDS", "3")

    client = Ohmyfin.from_settings()

    assert client.config.api_key == "env-key"
    assert client.base_url == "http://mock:8001"
    assert client.timeout == 3.0


def test_from_settings_without_key_fails(monkeypatch):
    monkeypatch.delenv("OHMYFIN_API_KEY", raising=False)

    with pytest.raises(ConfigurationError):
        Ohmyfin.from_settings(Settings(_env_file=None))
