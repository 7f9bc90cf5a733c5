import logging
import re
from typing import Dict, Iterable, Optional, Sequence, Tuple

from app.core.exceptions import InvalidLocaleError

logger = logging.getLogger(__name__)

# 하나의 값에 여러 로케일이 쉼표/공백으로 합쳐져 들어올 수 있음 ("es-MX,ru-RU")
_DELIMITERS = re.compile(r"[,\s]+")
_ALLOWED_CHARS = re.compile(r"^[A-Za-z-]+$")
_TAG_SHAPE = re.compile(r"^([A-Za-z]+)(?:-([A-Za-z]+))?$")


def split_preference(raw: str) -> list:
    """Split one raw preference value into candidate tags.

    Delimiter runs at either end yield an empty token, which the caller
    treats as malformed: "it IT ," -> ["it", "IT", ""].
    """
    return _DELIMITERS.split(raw)


def normalize_tag(token: str) -> Tuple[str, Optional[str]]:
    """Return (language, REGION) for a well-formed tag, raising otherwise."""
    stripped = token.strip() if token is not None else ""
    if not stripped:
        raise InvalidLocaleError("Empty locale tag", token=token)
    if not _ALLOWED_CHARS.match(stripped):
        raise InvalidLocaleError(f"Locale tag contains invalid characters: {token!r}", token=token)

    match = _TAG_SHAPE.match(stripped)
    if match is None:
        raise InvalidLocaleError(f"Malformed locale tag: {token!r}", token=token)

    language, region = match.groups()
    return language.lower(), region.upper() if region else None


def format_tag(language: str, region: Optional[str]) -> str:
    return f"{language}-{region}" if region else language


def _index_supported(supported: Iterable[str]) -> Tuple[Dict[str, str], Dict[str, str]]:
    exact = {}
    by_language = {}
    # 정렬 후 순회해야 set 순서와 무관하게 결과가 결정적임
    for locale in sorted(supported):
        language, region = normalize_tag(locale)
        exact[format_tag(language, region)] = locale
        # 같은 언어라면 지역 없는 항목("pt")을 우선
        if region is None or language not in by_language:
            by_language[language] = locale
    return exact, by_language


def resolve_locale(raw_preferences: Sequence[str], supported: Iterable[str], default: str) -> str:
    """Pick the best supported locale for the given client preferences.

    Preferences are scanned left to right, and each compound entry left to
    right. An exact language-region match wins as soon as it is seen, even
    if an earlier tag already matched on base language only. Otherwise the
    first base-language match is returned, and the default when nothing
    matches. A malformed tag anywhere raises InvalidLocaleError; a
    well-formed but unsupported tag is simply skipped.
    """
    if not raw_preferences:
        return default

    exact, by_language = _index_supported(supported)
    fallback = None

    for raw in raw_preferences:
        if raw is None:
            raise InvalidLocaleError("Empty locale tag", token=raw)

        for token in split_preference(raw):
            try:
                language, region = normalize_tag(token)
            except InvalidLocaleError:
                logger.warning(f"Rejecting malformed locale preference {raw!r} (token {token!r})")
                raise

            candidate = exact.get(format_tag(language, region))
            if candidate is not None:
                logger.debug(f"Exact locale match {token!r} -> {candidate}")
                return candidate

            if fallback is None and language in by_language:
                fallback = by_language[language]
                logger.debug(f"Base-language locale match {token!r} -> {fallback}")

    if fallback is not None:
        return fallback

    logger.debug(f"No supported locale in {list(raw_preferences)!r}, using {default}")
    return default
