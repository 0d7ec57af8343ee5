from __future__ import annotations

import logging

import pytest

from inventory_client.api.client import ApiClient
from inventory_client.core.config import DEFAULT_API_BASE_URL, Settings
from inventory_client.core.log import configure_logging


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("http://localhost:8080", "http://localhost:8080"),
        ("http://localhost:8080/", "http://localhost:8080"),
        ("http://10.0.2.2:8080/api", "http://10.0.2.2:8080"),
        ("http://10.0.2.2:8080/api/", "http://10.0.2.2:8080"),
        ("inventory.local:9000", "http://inventory.local:9000"),
        ("  ", DEFAULT_API_BASE_URL),
    ],
)
def test_api_base_url_is_reduced_to_origin(raw, expected):
    assert Settings(api_base_url=raw).api_base_url == expected


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "https://shop.example.com/api")
    monkeypatch.setenv("LOW_STOCK_THRESHOLD", "3")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.api_base_url == "https://shop.example.com"
    assert settings.low_stock_threshold == 3
    assert settings.log_level == "DEBUG"


def test_api_client_takes_url_and_timeout_from_settings():
    api = ApiClient(settings=Settings(api_base_url="http://backend.test/api/", request_timeout=2.5))
    assert api.base_url == "http://backend.test"
    assert api.timeout == 2.5


def test_configure_logging_quietens_httpx_unless_debugging():
    configure_logging("info")
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING

    configure_logging("not-a-level")
    assert logging.getLogger().level == logging.INFO
