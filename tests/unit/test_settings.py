from guacamole_client.config.settings import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GUACAMOLE_URL", raising=False)
    monkeypatch.delenv("GUACAMOLE_TIMEOUT", raising=False)
    monkeypatch.delenv("GUACAMOLE_VERIFY_SSL", raising=False)

    settings = Settings()

    assert settings.URL == "http://localhost:8080/guacamole"
    assert settings.TIMEOUT == 30.0
    assert settings.VERIFY_SSL is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GUACAMOLE_URL", "https://gw.example.com/guacamole")
    monkeypatch.setenv("GUACAMOLE_TIMEOUT", "5")
    monkeypatch.setenv("GUACAMOLE_VERIFY_SSL", "false")

    settings = Settings()

    assert settings.URL == "https://gw.example.com/guacamole"
    assert settings.TIMEOUT == 5.0
    assert settings.VERIFY_SSL is False


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
