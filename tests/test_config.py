"""Settings loading from the environment."""
from voice_relay.config import Settings, get_settings


def test_settings_defaults():
    settings = Settings(_env_file=None)

    assert settings.deepgram_api_key is None
    assert settings.deepgram_api_url == "https://api.deepgram.com/v1/listen"
    assert settings.deepgram_timeout is None
    assert settings.deepgram_query_params == {
        "model": "nova-2",
        "smart_format": "true",
        "punctuate": "true",
    }


def test_settings_read_from_env(monkeypatch):
    monkeypatch.setenv("DEEPGRAM_API_KEY", "dg-key")
    monkeypatch.setenv("DEEPGRAM_MODEL", "nova-3")
    monkeypatch.setenv("DEEPGRAM_PUNCTUATE", "false")
    monkeypatch.setenv("DEEPGRAM_TIMEOUT", "12.5")

    settings = Settings(_env_file=None)

    assert settings.deepgram_api_key == "dg-key"
    assert settings.deepgram_timeout == 12.5
    assert settings.deepgram_query_params["model"] == "nova-3"
    assert settings.deepgram_query_params["punctuate"] == "false"


def test_cors_origins_list_splits_and_strips(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, https://recorder.example.com,")

    settings = Settings(_env_file=None)

    assert settings.cors_origins_list == ["http://localhost:3000", "https://recorder.example.com"]


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
