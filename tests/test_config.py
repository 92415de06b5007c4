from __future__ import annotations

import pytest
from pydantic import ValidationError

from places_autocomplete.config import DEFAULT_CACHE_TTL_SECONDS, AutocompleteSettings


def test_defaults(monkeypatch):
    for name in ("UPA_CACHE", "UPA_DEBOUNCE_MS", "UPA_CACHE_KEY", "UPA_CALLBACK_NAME"):
        monkeypatch.delenv(name, raising=False)
    settings = AutocompleteSettings(_env_file=None)

    assert settings.debounce_ms == 200
    assert settings.cache == DEFAULT_CACHE_TTL_SECONDS
    assert settings.cache_ttl == 86400
    assert settings.cache_key == "upa"
    assert settings.init_on_mount is True
    assert settings.default_value == ""
    assert settings.callback_name is None


def test_cache_can_be_disabled_from_environment(monkeypatch):
    monkeypatch.setenv("UPA_CACHE", "false")
    settings = AutocompleteSettings(_env_file=None)

    assert settings.cache is False
    assert settings.cache_ttl is None


def test_cache_ttl_from_environment(monkeypatch):
    monkeypatch.setenv("UPA_CACHE", "60")
    monkeypatch.setenv("UPA_PLACES_API__REQUEST_TIMEOUT_SECONDS", "5")
    settings = AutocompleteSettings(_env_file=None)

    assert settings.cache_ttl == 60
    assert settings.places_api.request_timeout_seconds == 5


def test_zero_ttl_disables_cache():
    assert AutocompleteSettings(_env_file=None, cache=0).cache_ttl is None


def test_negative_ttl_is_rejected():
    with pytest.raises(ValidationError):
        AutocompleteSettings(_env_file=None, cache=-1)


def test_request_options_drop_input_and_blank_callback():
    settings = AutocompleteSettings(
        _env_file=None,
        request_options={"input": "x", "types": "(cities)"},
        callback_name="  ",
    )

    assert settings.request_options == {"types": "(cities)"}
    assert settings.callback_name is None
