"""Tests for pipeline configuration loading."""
import pytest

from schedule_parser.config import DEFAULT_MODELS, DEFAULT_TIMEOUT_SECONDS, load_config


def test_defaults_without_environment() -> None:
    cfg = load_config()

    assert cfg.api_key is None
    assert not cfg.extraction_configured
    assert cfg.models == DEFAULT_MODELS
    assert cfg.request_timeout == DEFAULT_TIMEOUT_SECONDS == 30.0
    assert cfg.base_url is None


def test_environment_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("SCHEDULE_PARSER_MODELS", " gpt-4o , ,gpt-4o-mini")
    monkeypatch.setenv("EXTRACTION_TIMEOUT_SECONDS", "12")
    monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:9000/v1")

    cfg = load_config()

    assert cfg.extraction_configured
    assert cfg.models == ("gpt-4o", "gpt-4o-mini")
    assert cfg.request_timeout == 12.0
    assert cfg.base_url == "http://localhost:9000/v1"


def test_arguments_override_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHEDULE_PARSER_MODELS", "gpt-4o")

    cfg = load_config(api_key="sk-arg", models=["model-x"], request_timeout=5)

    assert cfg.api_key == "sk-arg"
    assert cfg.models == ("model-x",)
    assert cfg.request_timeout == 5.0


def test_empty_model_list_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHEDULE_PARSER_MODELS", " , ")

    with pytest.raises(ValueError):
        load_config()


def test_non_positive_timeout_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXTRACTION_TIMEOUT_SECONDS", "-1")

    with pytest.raises(ValueError):
        load_config()


@pytest.mark.parametrize("timeout", [0, 0.0, -5])
def test_explicit_non_positive_timeout_is_rejected(monkeypatch: pytest.MonkeyPatch, timeout) -> None:
    monkeypatch.setenv("EXTRACTION_TIMEOUT_SECONDS", "12")

    with pytest.raises(ValueError):
        load_config(request_timeout=timeout)
