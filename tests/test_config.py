import pytest

from app.config.config import Config, load_voice_settings


def _config(**overrides):
    return type("TestConfig", (Config,), overrides)


def test_load_voice_settings_parses_locales():
    settings = load_voice_settings(_config(
        VOICE_ANNOUNCEMENT_BASE_URL="https://foo.com/bar/",
        SUPPORTED_LOCALES=" pt-BR, ru ,,",
        DEFAULT_LOCALE="en-US",
    ))

    assert settings.supported_locales == frozenset({"pt-BR", "ru"})
    assert settings.default_locale == "en-US"
    assert settings.base_url == "https://foo.com/bar"


def test_voice_settings_are_immutable():
    settings = load_voice_settings(_config(SUPPORTED_LOCALES="ru", DEFAULT_LOCALE="en-US"))

    with pytest.raises(Exception):
        settings.default_locale = "ru"


def test_invalid_supported_locale_is_rejected():
    with pytest.raises(RuntimeError, match="SUPPORTED_LOCALES"):
        load_voice_settings(_config(SUPPORTED_LOCALES="pt-BR,ru_RU", DEFAULT_LOCALE="en-US"))


def test_missing_default_locale_is_rejected():
    with pytest.raises(RuntimeError, match="DEFAULT_LOCALE"):
        load_voice_settings(_config(SUPPORTED_LOCALES="ru", DEFAULT_LOCALE=""))


def test_empty_supported_locales_is_allowed():
    settings = load_voice_settings(_config(SUPPORTED_LOCALES="", DEFAULT_LOCALE="en-US"))

    assert settings.supported_locales == frozenset()
