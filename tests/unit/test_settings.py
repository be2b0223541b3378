"""Tests for configuration loading."""

from prompt_relay.infra.config.settings import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("PORT", "GEMINI_MODEL", "PROMPT", "PROMPT_MARKER", "LLM_PROVIDER"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.prompt_template == "{prompt}"
    assert settings.prompt_marker == "{prompt}"
    assert settings.llm_provider == "gemini"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GOOGLE_API_KEY", "abc")
    monkeypatch.setenv("PROMPT", "Request: {prompt}")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.google_api_key == "abc"
    assert settings.prompt_template == "Request: {prompt}"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_cors_origins():
    assert Settings(_env_file=None, CORS_ORIGINS="*").get_cors_origins() == ["*"]
    assert Settings(
        _env_file=None, CORS_ORIGINS="http://a.test, http://b.test,"
    ).get_cors_origins() == ["http://a.test", "http://b.test"]
