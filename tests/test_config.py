import pytest

from weather_api.config import CWA_API_BASE_URL, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ["CWA_API_KEY", "CWA_API_BASE_URL", "CWA_TIMEOUT", "HOST", "PORT", "ENVIRONMENT", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.load()

    assert settings.cwa_api_key == ""
    assert settings.cwa_api_base_url == CWA_API_BASE_URL
    assert settings.port == 3000
    assert settings.log_level == "INFO"


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("CWA_API_KEY", "CWA-KEY")
    monkeypatch.setenv("CWA_API_BASE_URL", "http://cwa.test/api/")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.load()

    assert settings.cwa_api_key == "CWA-KEY"
    assert settings.cwa_api_base_url == "http://cwa.test/api"
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["verbose", "", "Level 5"])
def test_unknown_log_level_falls_back_to_info(monkeypatch, value):
    monkeypatch.setenv("LOG_LEVEL", value)

    assert Settings.load().log_level == "INFO"
