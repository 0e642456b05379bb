"""Tests for StormGlass configuration loading."""

import json
from pathlib import Path

import pytest

from surfcast.config import StormGlassConfig, load_config
from surfcast.config.schema import DEFAULT_API_URL
from surfcast.utils.exceptions import ConfigValidationError


def _write_config(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "default.json"
    path.write_text(json.dumps(payload))
    return path


# --- Schema ---


def test_defaults() -> None:
    """Config falls back to the public API URL and an empty token."""
    config = StormGlassConfig()
    assert config.api_url == DEFAULT_API_URL
    assert config.api_token == ""


def test_camel_case_aliases() -> None:
    """Config accepts the apiUrl/apiToken keys used in JSON files."""
    config = StormGlassConfig(apiUrl="https://a.test", apiToken="abc")
    assert config.api_url == "https://a.test"
    assert config.api_token == "abc"


def test_trailing_slash_stripped() -> None:
    """Trailing slashes are removed from the base URL."""
    assert StormGlassConfig(api_url="https://a.test/v2//").api_url == "https://a.test/v2"


def test_token_not_in_repr() -> None:
    """The token is hidden from the model repr."""
    assert "secret" not in repr(StormGlassConfig(api_token="secret"))


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables win over constructor values."""
    monkeypatch.setenv("STORMGLASS_API_URL", "https://env.test/")
    monkeypatch.setenv("STORMGLASS_API_TOKEN", "env-token")

    config = StormGlassConfig(api_url="https://a.test", api_token="abc")

    assert config.api_url == "https://env.test"
    assert config.api_token == "env-token"


# --- Loader ---


def test_load_valid_config(tmp_path: Path) -> None:
    """Settings are read from App.resources.StormGlass."""
    path = _write_config(
        tmp_path,
        {
            "App": {
                "resources": {
                    "StormGlass": {
                        "apiUrl": "https://api.stormglass.io/v2",
                        "apiToken": "my-token",
                    }
                }
            }
        },
    )

    config = load_config(path)

    assert config.api_url == "https://api.stormglass.io/v2"
    assert config.api_token == "my-token"


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing file raises ConfigValidationError with the path in context."""
    path = tmp_path / "nope.json"

    with pytest.raises(ConfigValidationError) as exc_info:
        load_config(path)

    assert exc_info.value.context["path"] == str(path)


def test_invalid_json_raises(tmp_path: Path) -> None:
    """Malformed JSON raises ConfigValidationError."""
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    with pytest.raises(ConfigValidationError, match="Failed to read config JSON"):
        load_config(path)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"App": {}},
        {"App": {"resources": {"Other": {}}}},
        {"App": {"resources": "StormGlass"}},
        {"App": {"resources": {"StormGlass": "https://api.stormglass.io"}}},
    ],
)
def test_missing_section_raises(tmp_path: Path, payload: dict) -> None:
    """Files without a StormGlass object raise ConfigValidationError."""
    with pytest.raises(ConfigValidationError) as exc_info:
        load_config(_write_config(tmp_path, payload))

    assert exc_info.value.context["section"] == "App.resources.StormGlass"


def test_invalid_values_raise(tmp_path: Path) -> None:
    """Wrongly typed values fail validation."""
    path = _write_config(
        tmp_path, {"App": {"resources": {"StormGlass": {"apiUrl": 42}}}}
    )

    with pytest.raises(ConfigValidationError, match="validation failed"):
        load_config(path)
