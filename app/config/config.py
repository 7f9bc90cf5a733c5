import os
from typing import FrozenSet

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from app.core.exceptions import InvalidLocaleError
from app.helper.locale_helper import normalize_tag

load_dotenv()

class Config:
    VOICE_ANNOUNCEMENT_BASE_URL = os.getenv("VOICE_ANNOUNCEMENT_BASE_URL", "https://localhost/voice")
    # 음성 안내 파일이 준비된 로케일 목록 (쉼표 구분)
    SUPPORTED_LOCALES = os.getenv("SUPPORTED_LOCALES", "pt-BR,ru")
    DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en-US")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8002"))


class VoiceSettings(BaseModel):
    """Read-only voice announcement settings shared by every request."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    supported_locales: FrozenSet[str]
    default_locale: str


def _check_locale(name: str, value: str) -> str:
    try:
        normalize_tag(value)
    except InvalidLocaleError:
        raise RuntimeError(f"Invalid locale {value!r} in {name}")
    return value.strip()


def load_voice_settings(config=Config) -> VoiceSettings:
    """Parse the voice settings out of Config, raising RuntimeError when misconfigured."""
    raw_locales = [item.strip() for item in (config.SUPPORTED_LOCALES or "").split(",")]
    supported = frozenset(_check_locale("SUPPORTED_LOCALES", item) for item in raw_locales if item)

    if not config.DEFAULT_LOCALE:
        raise RuntimeError("Missing required environment variable: DEFAULT_LOCALE")
    default_locale = _check_locale("DEFAULT_LOCALE", config.DEFAULT_LOCALE)

    if not config.VOICE_ANNOUNCEMENT_BASE_URL:
        raise RuntimeError("Missing required environment variable: VOICE_ANNOUNCEMENT_BASE_URL")

    return VoiceSettings(
        base_url=config.VOICE_ANNOUNCEMENT_BASE_URL.rstrip("/"),
        supported_locales=supported,
        default_locale=default_locale,
    )
