import logging

from app.core.exceptions import InvalidCodeError

logger = logging.getLogger(__name__)

CODE_LENGTH = 6
_ASCII_DIGITS = frozenset("0123456789")


def validate_code(code: str) -> str:
    """Check that the verification code is exactly 6 ASCII digits.

    Returns the code unchanged. Filler characters are never stripped, so
    "1234...56" is rejected rather than read as "123456".
    """
    if code is None or len(code) != CODE_LENGTH:
        logger.warning(f"인증 코드 길이 오류: {code!r}")
        raise InvalidCodeError(f"Verification code must be exactly {CODE_LENGTH} digits")

    # str.isdigit()는 유니코드 숫자도 허용하므로 ASCII 집합으로 직접 검사
    if not all(ch in _ASCII_DIGITS for ch in code):
        logger.warning(f"인증 코드 형식 오류: {code!r}")
        raise InvalidCodeError("Verification code must contain only ASCII digits")

    return code
